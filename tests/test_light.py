import numpy as np
import pytest
from numpy.testing import assert_allclose

from raytracer.color import Color
from raytracer.light import DirectionalLight, Light, Lighting, PointLight


def test_point_light():
    light = Light.point_light((1.0, 2.0, 3.0), intensity=2.0)
    assert isinstance(light.light_type, PointLight)
    assert_allclose(light.light_type.position, (1.0, 2.0, 3.0))
    assert light.intensity == Color.from_argb(2.0, 2.0, 2.0, 2.0)


def test_point_light_color():
    light = Light.point_light((0.0, 0.0, 0.0), color=Color.from_rgb(1.0, 0.5, 0.0))
    assert light.intensity == Color.from_rgb(1.0, 0.5, 0.0)


def test_directional_light_is_normalized():
    light = Light.directional_light((0.0, -3.0, 4.0))
    assert isinstance(light.light_type, DirectionalLight)
    assert np.linalg.norm(light.light_type.direction) == pytest.approx(1.0)
    assert_allclose(light.light_type.direction, (0.0, -0.6, 0.8))


def test_directional_light_needs_a_direction():
    with pytest.raises(ValueError):
        Light.directional_light((0.0, 0.0, 0.0))


def test_lighting_defaults():
    lighting = Lighting()
    assert lighting.lights == []
    assert lighting.ambient == Color.zero()
