from core.vector import Vector3

DEFAULT_COLOR = Vector3(0.9, 0.9, 0.6)
DEFAULT_SHININESS = 50.0

class Material:
    """
    Phong surface response parameters.

    Args:
        color: Base reflectance tint (linear RGB).
        ambient: Constant light floor added to the diffuse term.
        specular: Weight of the specular highlight.
        shininess: Phong exponent, higher gives a tighter highlight.
        reflectiveness: Fraction in [0, 1] of outgoing light taken from the
            recursively traced mirror ray.
    """
    __slots__ = ("color", "ambient", "specular", "shininess", "reflectiveness")

    def __init__(self, color: Vector3 = DEFAULT_COLOR, ambient: float = 0.0,
                 specular: float = 0.0, shininess: float = DEFAULT_SHININESS,
                 reflectiveness: float = 0.0):
        if not 0.0 <= reflectiveness <= 1.0:
            raise ValueError("reflectiveness must be in [0, 1], got {}".format(reflectiveness))
        for name, value in (("ambient", ambient), ("specular", specular), ("shininess", shininess)):
            if value < 0:
                raise ValueError("{} must be non-negative, got {}".format(name, value))
        object.__setattr__(self, "color", color)
        object.__setattr__(self, "ambient", float(ambient))
        object.__setattr__(self, "specular", float(specular))
        object.__setattr__(self, "shininess", float(shininess))
        object.__setattr__(self, "reflectiveness", float(reflectiveness))

    def __setattr__(self, name, value):
        raise AttributeError("Material is immutable")

    def __reduce__(self):
        return (Material, (self.color, self.ambient, self.specular, self.shininess, self.reflectiveness))

    def __repr__(self) -> str:
        return (f"Material(color={self.color}, ambient={self.ambient}, specular={self.specular}, "
                f"shininess={self.shininess}, reflectiveness={self.reflectiveness})")
