from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class Frame(Generic[T]):
    """Fixed-size row-major grid of values addressed by ``(x, y)``."""

    def __init__(self, width: int, height: int, value: T):
        if width < 0 or height < 0:
            raise ValueError(f"Frame size must be non-negative, got {width}x{height}")
        self._width = width
        self._height = height
        self._cells: List[T] = [value] * (width * height)

    def width(self) -> int:
        return self._width

    def height(self) -> int:
        return self._height

    def cells(self) -> List[T]:
        return self._cells

    def at(self, x: int, y: int) -> Optional[T]:
        if not (0 <= x < self._width and 0 <= y < self._height):
            return None
        return self._cells[y * self._width + x]

    def set(self, x: int, y: int, value: T) -> None:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"({x}, {y}) is outside a {self._width}x{self._height} frame")
        self._cells[y * self._width + x] = value

    def set_all(self, value: T) -> None:
        self._cells = [value] * (self._width * self._height)
