# materials/light.py
from core.vector import Vector3

class Light:
    """
    Point light with a scalar intensity.

    There is no falloff with distance: every lit point receives the full
    intensity.
    """
    __slots__ = ("position", "intensity")

    def __init__(self, position: Vector3, intensity: float = 1.0):
        object.__setattr__(self, "position", position)
        object.__setattr__(self, "intensity", float(intensity))

    def __setattr__(self, name, value):
        raise AttributeError("Light is immutable")

    def __reduce__(self):
        return (Light, (self.position, self.intensity))

    def __repr__(self) -> str:
        return f"Light({self.position}, {self.intensity})"
