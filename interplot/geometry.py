from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


Pos2: TypeAlias = tuple[float, float]
Vec2: TypeAlias = tuple[float, float]


@dataclass(frozen=True)
class ScreenRect:
    """Axis-aligned rectangle in screen pixels; y grows downward."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @classmethod
    def from_min_size(cls, origin: Pos2, size: Vec2) -> "ScreenRect":
        x, y = origin
        w, h = size
        return cls(min_x=float(x), min_y=float(y), max_x=float(x + w), max_y=float(y + h))

    @classmethod
    def from_two_pos(cls, a: Pos2, b: Pos2) -> "ScreenRect":
        return cls(
            min_x=float(min(a[0], b[0])),
            min_y=float(min(a[1], b[1])),
            max_x=float(max(a[0], b[0])),
            max_y=float(max(a[1], b[1])),
        )

    @property
    def left(self) -> float:
        return self.min_x

    @property
    def right(self) -> float:
        return self.max_x

    @property
    def top(self) -> float:
        return self.min_y

    @property
    def bottom(self) -> float:
        return self.max_y

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def size(self) -> Vec2:
        return (self.width, self.height)

    @property
    def center(self) -> Pos2:
        return ((self.min_x + self.max_x) * 0.5, (self.min_y + self.max_y) * 0.5)

    def contains(self, pos: Pos2) -> bool:
        x, y = pos
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y

    def distance_sq_to_pos(self, pos: Pos2) -> float:
        x, y = pos
        dx = max(self.min_x - x, 0.0, x - self.max_x)
        dy = max(self.min_y - y, 0.0, y - self.max_y)
        return dx * dx + dy * dy


def remap(value: float, src: tuple[float, float], dst: tuple[float, float]) -> float:
    s0, s1 = src
    d0, d1 = dst
    if s1 == s0:
        return (d0 + d1) * 0.5
    t = (value - s0) / (s1 - s0)
    return d0 + t * (d1 - d0)


def remap_clamp(value: float, src: tuple[float, float], dst: tuple[float, float]) -> float:
    s0, s1 = src
    if s1 < s0:
        return remap_clamp(value, (s1, s0), (dst[1], dst[0]))
    if value <= s0:
        return dst[0]
    if value >= s1:
        return dst[1]
    return remap(value, src, dst)
