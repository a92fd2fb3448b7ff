"""Geometric primitives and ray intersection.

All points and vectors are in world space.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from raytracer.common import Ray, dot, normalize

# Ray parameters below this are treated as the ray's own origin.
EPSILON = 1e-6


@dataclass(frozen=True, eq=False)
class SolidHit:
    point: NDArray[np.float64]
    # Unit length, pointing out of the solid.
    normal: NDArray[np.float64]


class Solid:
    """A shape that can be hit by a ray.

    Subclasses implement :meth:`intersect`, returning the nearest hit in front
    of the ray origin or ``None``.
    """

    def intersect(self, ray: Ray) -> Optional[SolidHit]:
        raise NotImplementedError


class Sphere(Solid):
    def __init__(self, center: NDArray[np.float64], radius: float):
        if radius <= 0:
            raise ValueError(f"Sphere radius must be positive, got {radius}")
        self.center = np.asarray(center, dtype=np.float64)
        self.radius = float(radius)

    def __repr__(self):
        return f"Sphere(center={self.center.tolist()}, radius={self.radius})"

    def intersect(self, ray: Ray) -> Optional[SolidHit]:
        oc = ray.origin - self.center

        a = dot(ray.direction, ray.direction)
        half_b = dot(oc, ray.direction)
        c = dot(oc, oc) - self.radius ** 2

        discriminant = half_b * half_b - a * c
        if discriminant < 0:
            return None

        root = discriminant ** 0.5
        t = (-half_b - root) / a
        if t <= EPSILON:
            # The origin is inside the sphere or it is behind us.
            t = (-half_b + root) / a
            if t <= EPSILON:
                return None

        point = ray.at(t)
        return SolidHit(point, normalize(point - self.center))


class Plane(Solid):
    """Infinite plane of points ``p`` with ``normal . p == offset``."""

    def __init__(self, normal: NDArray[np.float64], offset: float):
        normal = np.asarray(normal, dtype=np.float64)
        length = np.sqrt(dot(normal, normal))
        self.normal = normalize(normal)
        # Keep the plane where the caller put it if the normal was not unit length.
        self.offset = float(offset) / length

    def __repr__(self):
        return f"Plane(normal={self.normal.tolist()}, offset={self.offset})"

    def intersect(self, ray: Ray) -> Optional[SolidHit]:
        denominator = dot(self.normal, ray.direction)
        if abs(denominator) < EPSILON:
            return None

        t = (self.offset - dot(self.normal, ray.origin)) / denominator
        if t <= EPSILON:
            return None

        return SolidHit(ray.at(t), self.normal)
