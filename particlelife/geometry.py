"""Small geometric primitives: 2-D vectors, rectangles, dense grids and a timer."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Iterator, TypeVar, Union

EPSILON = 1e-10

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Vec2:
    """An immutable two-component vector."""

    x: Any = 0.0
    y: Any = 0.0

    def __add__(self, other: "Vec2") -> "Vec2":
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)

    def __mul__(self, scale: float) -> "Vec2":
        if isinstance(scale, bool) or not isinstance(scale, (int, float)):
            return NotImplemented
        x, y = self.x * scale, self.y * scale
        # Integer vectors stay integer, truncating toward zero.
        if isinstance(self.x, int) and isinstance(self.y, int):
            return Vec2(int(x), int(y))
        return Vec2(x, y)

    def __rmul__(self, scale: float) -> "Vec2":
        return self.__mul__(scale)

    def __getitem__(self, index: int) -> Any:
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        raise IndexError(f"Vec2 index out of range: {index}")

    def __iter__(self) -> Iterator[Any]:
        yield self.x
        yield self.y

    def __len__(self) -> int:
        return 2


@dataclass(frozen=True, slots=True)
class Rect:
    """An axis-aligned rectangle spanning corners c1 (low) and c2 (high)."""

    c1: Vec2 = field(default_factory=Vec2)
    c2: Vec2 = field(default_factory=Vec2)

    @property
    def width(self) -> Any:
        return self.c2.x - self.c1.x

    @property
    def height(self) -> Any:
        return self.c2.y - self.c1.y

    def check_bound(self, point: Vec2) -> bool:
        """Return True if the point lies inside the rectangle, edges included."""
        return (
            self.c1.x <= point.x <= self.c2.x
            and self.c1.y <= point.y <= self.c2.y
        )


Position = Union[Vec2, tuple]


class Grid(Generic[T]):
    """A dense width x height grid stored in row-major order."""

    def __init__(
        self, width: int = 0, height: int = 0, factory: Callable[[], T] = float
    ) -> None:
        if width < 0 or height < 0:
            raise ValueError("grid dimensions must not be negative")
        self.width = width
        self.height = height
        self.factory = factory
        self._items: list[T] = [factory() for _ in range(width * height)]

    def __len__(self) -> int:
        return len(self._items)

    def _index(self, pos: Position) -> int:
        x, y = pos
        if not self.check_bound(x, y):
            raise IndexError(f"grid position out of range: ({x}, {y})")
        return y * self.width + x

    def __getitem__(self, pos: Position) -> T:
        return self._items[self._index(pos)]

    def __setitem__(self, pos: Position, value: T) -> None:
        self._items[self._index(pos)] = value

    def try_get(self, pos: Position) -> T:
        """Return the value at pos, or a fresh default value when out of range."""
        x, y = pos
        if self.check_bound(x, y):
            return self._items[y * self.width + x]
        return self.factory()

    def check_bound(self, x: Any, y: Any = None) -> bool:
        """Return True if (x, y) is a valid cell; x may also be a position pair."""
        if y is None:
            x, y = x
        return 0 <= x < self.width and 0 <= y < self.height

    def cells(self) -> Iterator[T]:
        """Iterate over every cell value in row-major order."""
        return iter(self._items)


class Timer:
    """Reports the seconds elapsed since the previous call, at microsecond resolution."""

    def __init__(self) -> None:
        self._last = time.perf_counter_ns()

    def __call__(self) -> float:
        now = time.perf_counter_ns()
        micros = (now - self._last) // 1000
        self._last = now
        return micros / 1_000_000


def lerp(val1: Any, val2: Any, part: float) -> Any:
    """Linearly interpolate between val1 and val2."""
    return (1 - part) * val1 + part * val2


def mag(vec: Vec2) -> float:
    """Euclidean length of a vector."""
    return math.sqrt(vec.x * vec.x + vec.y * vec.y)


def norm(vec: Vec2) -> Vec2:
    """Unit vector in the direction of vec; the zero vector for tiny input."""
    length = mag(vec)
    if length < EPSILON:
        return Vec2(0, 0)
    return vec * (1 / length)


def dot(vec1: Vec2, vec2: Vec2) -> float:
    """Dot product of two vectors."""
    return sum(a * b for a, b in zip(vec1, vec2))


def convolution(image: Grid, kernel: Grid) -> Grid:
    """Convolve image with an odd-sized kernel; out-of-range pixels count as default."""
    if kernel.width % 2 != 1 or kernel.height % 2 != 1:
        raise ValueError("Kernel dimension must be odd numbers")
    half_x = (kernel.width - 1) // 2
    half_y = (kernel.height - 1) // 2
    out = Grid(image.width, image.height, image.factory)
    for oy in range(out.height):
        for ox in range(out.width):
            total = image.factory()
            for ky in range(kernel.height):
                for kx in range(kernel.width):
                    total += kernel[kx, ky] * image.try_get(
                        (kx + ox - half_x, ky + oy - half_y)
                    )
            out[ox, oy] = total
    return out