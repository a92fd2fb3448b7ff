from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple, Union


@dataclass(frozen=True)
class Color:
    """Alpha + RGB radiance value.

    Channels are unbounded floats while light is being accumulated; call
    :meth:`clamped` before converting to bytes.
    """

    a: float
    r: float
    g: float
    b: float

    @classmethod
    def new(cls, a: float, r: float, g: float, b: float) -> "Color":
        return cls(float(a), float(r), float(g), float(b))

    @classmethod
    def from_rgb(cls, r: float, g: float, b: float) -> "Color":
        return cls.new(1.0, r, g, b)

    @classmethod
    def from_argb(cls, a: float, r: float, g: float, b: float) -> "Color":
        return cls.new(a, r, g, b)

    @classmethod
    def from_rgb_u8s(cls, r: int, g: int, b: int) -> "Color":
        return cls.from_rgb(
            _component_as_float(r),
            _component_as_float(g),
            _component_as_float(b),
        )

    @classmethod
    def from_argb_u8s(cls, a: int, r: int, g: int, b: int) -> "Color":
        return cls.from_argb(
            _component_as_float(a),
            _component_as_float(r),
            _component_as_float(g),
            _component_as_float(b),
        )

    @classmethod
    def zero(cls) -> "Color":
        return cls.from_argb(0.0, 0.0, 0.0, 0.0)

    @classmethod
    def sum(cls, colors: Iterable["Color"]) -> "Color":
        total = cls.zero()
        for color in colors:
            total = total + color
        return total

    @classmethod
    def mix_colors(cls, colors: Sequence["Color"], weights: Sequence[float]) -> "Color":
        return cls.sum(color * weight for color, weight in zip(colors, weights))

    @classmethod
    def multiply_colors(cls, color1: "Color", color2: "Color") -> "Color":
        return cls.from_argb(
            color1.a * color2.a,
            color1.r * color2.r,
            color1.g * color2.g,
            color1.b * color2.b,
        )

    @classmethod
    def multiply_many_colors(cls, colors: Iterable["Color"]) -> "Color":
        product = cls.from_rgb(1.0, 1.0, 1.0)
        for color in colors:
            product = cls.multiply_colors(product, color)
        return product

    def as_argb_u8s(self) -> Tuple[int, int, int, int]:
        return (
            _component_as_u8(self.a),
            _component_as_u8(self.r),
            _component_as_u8(self.g),
            _component_as_u8(self.b),
        )

    def as_rgb_u8s(self) -> Tuple[int, int, int]:
        return (
            _component_as_u8(self.r),
            _component_as_u8(self.g),
            _component_as_u8(self.b),
        )

    def clamped(self) -> "Color":
        return Color.from_argb(
            _clamp_component(self.a),
            _clamp_component(self.r),
            _clamp_component(self.g),
            _clamp_component(self.b),
        )

    def __add__(self, other: "Color") -> "Color":
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.a + other.a, self.r + other.r, self.g + other.g, self.b + other.b)

    def __mul__(self, other: Union["Color", float]) -> "Color":
        if isinstance(other, Color):
            return Color.multiply_colors(self, other)
        if isinstance(other, (int, float)):
            return Color(self.a * other, self.r * other, self.g * other, self.b * other)
        return NotImplemented

    def __rmul__(self, other: float) -> "Color":
        return self.__mul__(other)


def _component_as_u8(component: float) -> int:
    if not 0.0 <= component <= 1.0:
        raise ValueError(f"Color component {component} is outside [0, 1]; clamp it first")
    return int(component * 255.0)


def _component_as_float(component: int) -> float:
    if not 0 <= component <= 255:
        raise ValueError(f"Byte component {component} is outside [0, 255]")
    return component / 255.0


def _clamp_component(component: float) -> float:
    return min(max(component, 0.0), 1.0)
