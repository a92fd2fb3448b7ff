import math
from dataclasses import dataclass, field
from typing import Tuple

import numpy as np
from numpy.typing import NDArray

from raytracer.common import Ray, normalize, transform_point


@dataclass(frozen=True, eq=False)
class Camera:
    # Distances to the clipping planes; not used by the tracer.
    near: float = 0.1
    far: float = 1000.0

    # Vertical field of view in degrees: the angle between the top and bottom of the image plane.
    fov: float = 70.0

    # (width, height) in pixels, also determines the aspect ratio.
    image_resolution: Tuple[int, int] = (640, 480)

    # View space to world space. Rotation and translation only.
    eye: NDArray[np.float64] = field(default_factory=lambda: np.identity(4))

    def __post_init__(self):
        width, height = self.image_resolution
        if width < 1 or height < 1:
            raise ValueError(f"Camera resolution must be at least 1x1, got {width}x{height}")

        eye = np.asarray(self.eye, dtype=np.float64)
        if eye.shape != (4, 4):
            raise ValueError(f"Eye transform must be a 4x4 matrix, got shape {eye.shape}")
        rotation = eye[:3, :3]
        if not np.allclose(rotation.T @ rotation, np.identity(3), atol=1e-6):
            raise ValueError("Eye transform must contain only rotation and translation")
        if np.linalg.det(rotation) <= 0:
            raise ValueError("Eye transform must not mirror the scene")
        if not np.allclose(eye[3], (0.0, 0.0, 0.0, 1.0)):
            raise ValueError("Eye transform must be affine")
        object.__setattr__(self, "eye", eye)

    def pixel_to_world(self, x: int, y: int) -> NDArray[np.float64]:
        """Return the world space point at the center of pixel ``(x, y)`` on the image plane."""
        width, height = self.image_resolution
        screen_x = x / width + 0.5 / width
        screen_y = y / height + 0.5 / height

        ndc_x = screen_x * 2.0 - 1.0
        ndc_y = 1.0 - 2.0 * screen_y

        image_width, image_height = self.image_size()
        view = (ndc_x * (image_width / 2.0), ndc_y * (image_height / 2.0), -1.0)
        return transform_point(self.eye, view)

    def pixel_ray(self, x: int, y: int) -> Ray:
        eye = self.world_eye()
        return Ray(eye, normalize(self.pixel_to_world(x, y) - eye))

    def world_eye(self) -> NDArray[np.float64]:
        return transform_point(self.eye, (0.0, 0.0, 0.0))

    def aspect(self) -> float:
        width, height = self.image_resolution
        return width / height

    def image_size(self) -> Tuple[float, float]:
        image_height = 2.0 * math.tan(math.radians(self.fov) / 2.0)
        return image_height * self.aspect(), image_height
