# core/utils.py
from core.vector import Vector3

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.

    ``v`` points towards the surface; the result points away from it and
    makes the same angle with ``n``: ``reflect(v, n).dot(n) == -v.dot(n)``.
    """
    return v - n * 2 * v.dot(n)

def clamp(x: float, lo: float = 0.0, hi: float = 1.0) -> float:
    return max(lo, min(hi, x))
