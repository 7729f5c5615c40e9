# camera/camera.py
import math
from core.vector import Vector3
from core.ray import Ray

class Camera:
    """
    Pinhole camera at ``position`` looking down -z, with the image plane one
    unit in front of it.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        fov: Vertical field of view in radians.
        position: Eye position.
    """
    def __init__(self, width: int, height: int, fov: float = math.pi / 2,
                 position: Vector3 = Vector3(0, 0, 0)):
        if width <= 0 or height <= 0:
            raise ValueError("image size must be positive, got {}x{}".format(width, height))
        if not 0 < fov < math.pi:
            raise ValueError("fov must be in (0, pi) radians, got {}".format(fov))
        self.width = width
        self.height = height
        self.fov = fov
        self.position = position
        self.update_camera()

    def update_camera(self):
        """Recomputes the viewport scale after width, height or fov change."""
        self.aspect_ratio = self.width / self.height
        # tan(fov/2) is the distance from the center of the image plane to its top edge
        self.scale = math.tan(self.fov / 2)

    def direction_for(self, col: float, row: float) -> Vector3:
        """
        Unnormalized direction through the center of pixel (col, row).
        Row 0 is the top of the image.
        """
        x = (2 * (col + 0.5) / self.width - 1) * self.aspect_ratio * self.scale
        y = -(2 * (row + 0.5) / self.height - 1) * self.scale
        return Vector3(x, y, -1)

    def get_ray(self, col: int, row: int) -> Ray:
        """Primary ray through pixel (col, row), with a unit direction."""
        return Ray(self.position, self.direction_for(col, row).normalize())
