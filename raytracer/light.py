from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Union

import numpy as np
from numpy.typing import NDArray

from raytracer.color import Color
from raytracer.common import normalize


@dataclass(frozen=True, eq=False)
class PointLight:
    position: NDArray[np.float64]


@dataclass(frozen=True, eq=False)
class DirectionalLight:
    # Unit length.
    direction: NDArray[np.float64]


LightType = Union[PointLight, DirectionalLight]


@dataclass(frozen=True, eq=False)
class Light:
    light_type: LightType
    intensity: Color

    @classmethod
    def point_light(cls, position: Sequence[float], color: Optional[Color] = None, intensity: float = 1.0) -> "Light":
        if color is None:
            color = Color.from_rgb(1.0, 1.0, 1.0)
        return cls(PointLight(np.asarray(position, dtype=np.float64)), color * intensity)

    @classmethod
    def directional_light(cls, direction: Sequence[float], color: Optional[Color] = None, intensity: float = 1.0) -> "Light":
        if color is None:
            color = Color.from_rgb(1.0, 1.0, 1.0)
        return cls(DirectionalLight(normalize(np.asarray(direction, dtype=np.float64))), color * intensity)


@dataclass
class Lighting:
    lights: List[Light] = field(default_factory=list)
    ambient: Color = field(default_factory=Color.zero)
