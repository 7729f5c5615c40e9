# renderer/tone_mapping.py
import numpy as np
from numba import njit

@njit
def rescale_highlights_kernel(linear_image, output_image):
    """
    Divides every channel of a pixel by its largest channel when that
    channel exceeds 1, so bright highlights keep their hue instead of clipping.
    """
    height, width = linear_image.shape[0], linear_image.shape[1]
    for y in range(height):
        for x in range(width):
            r = linear_image[y, x, 0]
            g = linear_image[y, x, 1]
            b = linear_image[y, x, 2]
            m = max(r, max(g, b))
            if m > 1.0:
                r = r / m
                g = g / m
                b = b / m
            output_image[y, x, 0] = r
            output_image[y, x, 1] = g
            output_image[y, x, 2] = b

def rescale_highlights(linear_image: np.ndarray) -> np.ndarray:
    linear_image = np.ascontiguousarray(linear_image, dtype=np.float32)
    output = np.empty_like(linear_image)
    rescale_highlights_kernel(linear_image, output)
    return output

def reinhard_tone_mapping(linear_image, exposure=1.0, white_point=1.0, gamma=2.2):
    """
    Apply Reinhard tone mapping to a linear radiance image, returning values in [0, 1].
    """
    scaled = linear_image * exposure
    mapped = scaled / (1.0 + scaled / white_point)
    return mapped ** (1.0 / gamma)

def quantize(image: np.ndarray) -> np.ndarray:
    """Clamp each channel to [0, 1] and convert to 8-bit."""
    return (np.clip(image, 0.0, 1.0) * 255).astype("uint8")

TONE_MAPPERS = {
    "rescale": rescale_highlights,
    "reinhard": reinhard_tone_mapping,
    "clamp": lambda image: image,
}

def tone_map(linear_image: np.ndarray, method: str = "rescale") -> np.ndarray:
    """Map a linear (height, width, 3) image to 8-bit RGB."""
    try:
        mapper = TONE_MAPPERS[method]
    except KeyError:
        raise ValueError("invalid tone mapping {}, expected one of {}".format(
            method, ", ".join(sorted(TONE_MAPPERS)))) from None
    return quantize(mapper(linear_image))
