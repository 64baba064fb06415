"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Modules live under src/ and are imported by their top-level names.
src_root = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_root))

from core.point import Point3  # noqa: E402
from core.ray import Ray  # noqa: E402
from core.vector import Vector3  # noqa: E402
from geometry.world import World  # noqa: E402


@pytest.fixture
def default_world():
    """The two-sphere reference scene."""
    return World.default()


@pytest.fixture
def axis_ray():
    """A ray from (0, 0, -5) straight down +z."""
    return Ray(Point3(0, 0, -5), Vector3(0, 0, 1))


@pytest.fixture
def rng():
    """Seeded generator for property-style tests."""
    import numpy as np
    return np.random.default_rng(20240607)
