import math
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from raytracer.color import Color
from raytracer.common import dot


def _white() -> Color:
    return Color.from_rgb(1.0, 1.0, 1.0)


class Material:
    """Reflectance model shared by any number of scene objects.

    ``outgoing`` points from the surface towards the viewer, ``incoming``
    from the surface towards the light. Both are unit length, as is
    ``normal``.
    """

    def brdf(
        self,
        outgoing: NDArray[np.float64],
        incoming: NDArray[np.float64],
        intensity: Color,
        normal: NDArray[np.float64],
    ) -> Color:
        raise NotImplementedError


def _diffuse_term(diffuse: Color, albedo: float, incoming: NDArray[np.float64], normal: NDArray[np.float64]) -> Color:
    # Light below the horizon contributes nothing.
    cos_theta = max(dot(incoming, normal), 0.0)
    return diffuse * (albedo / math.pi * cos_theta)


@dataclass(frozen=True)
class Lambertian(Material):
    diffuse: Color = field(default_factory=_white)
    albedo: float = 0.18

    def brdf(self, outgoing, incoming, intensity, normal):
        return intensity * _diffuse_term(self.diffuse, self.albedo, incoming, normal)


@dataclass(frozen=True)
class Phong(Material):
    diffuse: Color = field(default_factory=_white)
    albedo: float = 0.18
    specular: Color = field(default_factory=_white)
    specular_exponent: int = 32

    def __post_init__(self):
        if not isinstance(self.specular_exponent, int) or self.specular_exponent < 1:
            raise ValueError(f"specular_exponent must be a positive integer, got {self.specular_exponent!r}")

    def brdf(self, outgoing, incoming, intensity, normal):
        diffuse = _diffuse_term(self.diffuse, self.albedo, incoming, normal)

        reflected = 2.0 * dot(normal, incoming) * normal - incoming
        specular = self.specular * max(dot(outgoing, reflected), 0.0) ** self.specular_exponent

        return intensity * (diffuse + specular)
