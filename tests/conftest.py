"""Pytest configuration and shared fixtures."""

import pytest
import sys
from pathlib import Path

# Add the source tree to the path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from core.color import Color
from core.vector import Vector3, ZERO
from camera.camera import Camera
from geometry.scene_object import SceneObject
from geometry.sphere import Sphere
from geometry.world import Scene
from materials.material import Material


@pytest.fixture
def camera():
    """Camera on the +z axis looking at the origin."""
    return Camera(look_from=Vector3(0, 0, 5), look_at=ZERO, up=Vector3(0, 1, 0), fov=45)


@pytest.fixture
def ambient_sphere():
    """Unit sphere lit only by a white ambient term."""
    return SceneObject(Sphere(ZERO, 1), Material(), ambient=Color.WHITE)


@pytest.fixture
def make_scene(camera):
    """Factory for small scenes around the shared camera."""
    def _make(objects=(), lights=(), width=16, height=12):
        return Scene(camera, list(objects), list(lights), width, height)
    return _make


@pytest.fixture(scope="session")
def scenes_dir():
    """Directory holding the sample scene files."""
    return project_root / "data" / "scenes"
