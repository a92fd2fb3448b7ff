import math
from dataclasses import dataclass, field
from typing import Sequence

import numpy as np
from numpy.typing import NDArray


def vec3(x: float, y: float, z: float) -> NDArray[np.float64]:
    return np.array([x, y, z], dtype=np.float64)


def dot(u: NDArray[np.float64], v: NDArray[np.float64]) -> float:
    return float(np.sum(u * v))


def normalize(v: NDArray[np.float64]) -> NDArray[np.float64]:
    length = np.sqrt(dot(v, v))
    if length == 0.0:
        raise ValueError("Cannot normalize a zero-length vector")

    return v / length


def reflect(direction: NDArray[np.float64], normal: NDArray[np.float64]) -> NDArray[np.float64]:
    """Mirror ``direction`` about ``normal``.

    The component parallel to the normal is flipped while the perpendicular
    component is kept, so the result is ``perp - par``.
    """
    par = dot(direction, normal) * normal
    perp = direction - par
    return normalize(perp - par)


@dataclass(frozen=True, eq=False)
class Ray:
    origin: NDArray[np.float64]
    direction: NDArray[np.float64]

    def at(self, t: float) -> NDArray[np.float64]:
        return self.origin + self.direction * t


def transform_point(matrix: NDArray[np.float64], point: Sequence[float]) -> NDArray[np.float64]:
    homogeneous = matrix @ np.array([point[0], point[1], point[2], 1.0])
    return homogeneous[:3]


def translation_matrix(x: float, y: float, z: float) -> NDArray[np.float64]:
    matrix = np.identity(4)
    matrix[:3, 3] = (x, y, z)
    return matrix


def rotation_matrix(axis: Sequence[float], degrees: float) -> NDArray[np.float64]:
    # Rodrigues' formula
    x, y, z = normalize(np.asarray(axis, dtype=np.float64))
    theta = math.radians(degrees)
    c, s = math.cos(theta), math.sin(theta)
    t = 1.0 - c

    matrix = np.identity(4)
    matrix[:3, :3] = [
        [t * x * x + c, t * x * y - s * z, t * x * z + s * y],
        [t * x * y + s * z, t * y * y + c, t * y * z - s * x],
        [t * x * z - s * y, t * y * z + s * x, t * z * z + c],
    ]
    return matrix


@dataclass(frozen=True)
class RenderOptions:
    shadow_bias: float = 1e-4
    max_ray_depth: int = 0

    def __post_init__(self):
        if self.shadow_bias < 0:
            raise ValueError(f"shadow_bias must be non-negative, got {self.shadow_bias}")
        if self.max_ray_depth < 0:
            raise ValueError(f"max_ray_depth must be non-negative, got {self.max_ray_depth}")


@dataclass
class Settings:
    width: int = 320
    height: int = 180
    bounces: int = 0
    fov: float = 70.0
    shadow_bias: float = 1e-4
    camera_position: NDArray[np.float64] = field(default_factory=lambda: vec3(0.0, 0.35, 1.0))

    def render_options(self) -> RenderOptions:
        return RenderOptions(shadow_bias=self.shadow_bias, max_ray_depth=self.bounces)
