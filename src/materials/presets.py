# materials/presets.py
from core.vector import Vector3
from materials.material import Material
from materials.light import Light

class ColorPresets:
    """Common color presets for materials."""

    # Warm colors
    RED = Vector3(0.9, 0.2, 0.2)
    ORANGE = Vector3(0.9, 0.6, 0.1)
    TAN = Vector3(0.9, 0.9, 0.6)

    # Cool colors
    BLUE = Vector3(0.2, 0.3, 0.9)
    GREEN = Vector3(0.2, 0.8, 0.2)

    # Neutral colors
    WHITE = Vector3(1.0, 1.0, 1.0)
    GRAY = Vector3(0.5, 0.5, 0.5)
    BLACK = Vector3(0.1, 0.1, 0.1)

class MaterialPresets:
    """Predefined Phong materials."""

    @staticmethod
    def matte(color: Vector3, ambient: float = 0.05) -> Material:
        """Purely diffuse surface."""
        return Material(color, ambient=ambient)

    @staticmethod
    def plastic(color: Vector3, shininess: float = 50.0) -> Material:
        return Material(color, ambient=0.05, specular=0.5, shininess=shininess)

    @staticmethod
    def mirror() -> Material:
        return Material(ColorPresets.WHITE * 0.1, specular=1.0, shininess=1000.0, reflectiveness=0.9)

    @staticmethod
    def chrome() -> Material:
        return Material(ColorPresets.GRAY, ambient=0.02, specular=0.8, shininess=200.0, reflectiveness=0.6)

class LightPresets:
    """Predefined point lights."""

    @staticmethod
    def key_light(position: Vector3, intensity: float = 1.0) -> Light:
        return Light(position, intensity)

    @staticmethod
    def fill_light(position: Vector3, intensity: float = 0.4) -> Light:
        return Light(position, intensity)
