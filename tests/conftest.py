"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import matplotlib
import numpy as np
import pytest

matplotlib.use("Agg")

# Add the project root to the path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from raytracer.camera import Camera  # noqa: E402
from raytracer.color import Color  # noqa: E402
from raytracer.common import vec3  # noqa: E402
from raytracer.draw import Scene, SceneObject  # noqa: E402
from raytracer.light import Light, Lighting  # noqa: E402
from raytracer.material import Lambertian  # noqa: E402
from raytracer.trace import Sphere  # noqa: E402


@pytest.fixture
def camera():
    return Camera(0.0, 100.0, 90.0, (2, 2), np.identity(4))


@pytest.fixture
def background():
    return Color.from_rgb(0.2, 0.3, 0.4)


@pytest.fixture
def sphere_scene(background):
    """A unit sphere at the origin seen from z = 5, lit from the camera side."""
    camera = Camera(
        fov=30.0,
        image_resolution=(9, 9),
        eye=np.array([
            [1.0, 0.0, 0.0, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [0.0, 0.0, 1.0, 5.0],
            [0.0, 0.0, 0.0, 1.0],
        ]),
    )
    return Scene(
        objects=[SceneObject(Sphere(vec3(0.0, 0.0, 0.0), 1.0), Lambertian(albedo=1.0))],
        camera=camera,
        lighting=Lighting(lights=[Light.point_light(vec3(0.0, 0.0, 10.0), intensity=2.0)]),
        background=background,
    )
