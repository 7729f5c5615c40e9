# renderer/framebuffer.py
from typing import List, Sequence
import numpy as np
from core.vector import Vector3

class Framebuffer:
    """
    Row-major buffer of linear RGB colors, ``pixels[row * width + col]``.
    Values are un-tonemapped and lie in [0, +inf).
    """
    def __init__(self, width: int, height: int, fill: Vector3 = Vector3(0, 0, 0)):
        self.width = width
        self.height = height
        self.pixels: List[Vector3] = [fill] * (width * height)

    def index(self, col: int, row: int) -> int:
        if not (0 <= col < self.width and 0 <= row < self.height):
            raise IndexError("pixel ({}, {}) outside {}x{} buffer".format(col, row, self.width, self.height))
        return row * self.width + col

    def get(self, col: int, row: int) -> Vector3:
        return self.pixels[self.index(col, row)]

    def set(self, col: int, row: int, color: Vector3):
        self.pixels[self.index(col, row)] = color

    def set_row(self, row: int, colors: Sequence[Vector3]):
        if len(colors) != self.width:
            raise ValueError("row has {} pixels, expected {}".format(len(colors), self.width))
        start = self.index(0, row)
        self.pixels[start:start + self.width] = list(colors)

    def __len__(self) -> int:
        return len(self.pixels)

    def __iter__(self):
        return iter(self.pixels)

    def __getitem__(self, i: int) -> Vector3:
        return self.pixels[i]

    def to_array(self) -> np.ndarray:
        """(height, width, 3) float32 array of the buffer."""
        flat = np.array([[c.x, c.y, c.z] for c in self.pixels], dtype=np.float32)
        return flat.reshape(self.height, self.width, 3)
