# renderer/image_io.py
import os
from PIL import Image
from renderer.framebuffer import Framebuffer
from renderer.tone_mapping import tone_map

def framebuffer_to_image(framebuffer: Framebuffer, tone_mapping: str = "rescale") -> Image.Image:
    """Tone map a linear framebuffer into an 8-bit RGB Pillow image."""
    pixels = tone_map(framebuffer.to_array(), tone_mapping)
    return Image.fromarray(pixels)

def write_image(framebuffer: Framebuffer, path: str, tone_mapping: str = "rescale") -> str:
    """
    Write the framebuffer to ``path``. The format follows the extension;
    ``.ppm`` gives a binary P6 file.
    """
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    image = framebuffer_to_image(framebuffer, tone_mapping)
    image.save(path)
    return path
