"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Add src/ to the path so the packages import without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from core.vector import Vector3  # noqa: E402
from geometry.sphere import Sphere  # noqa: E402
from geometry.world import HittableList  # noqa: E402
from materials.material import Material  # noqa: E402

WHITE = Vector3(1, 1, 1)


@pytest.fixture
def white_material():
    """Purely diffuse white surface with no ambient term."""
    return Material(WHITE)


@pytest.fixture
def unit_sphere(white_material):
    """Radius 1 sphere five units in front of the camera."""
    return Sphere(Vector3(0, 0, -5), 1, white_material)


@pytest.fixture
def world(unit_sphere):
    return HittableList([unit_sphere])
