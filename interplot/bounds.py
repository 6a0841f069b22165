from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import NamedTuple


# Span given to an axis whose data collapses to a single value.
FALLBACK_SPAN = 1.0


class Value(NamedTuple):
    """A point in data space."""

    x: float
    y: float


def _lower(a: float, b: float) -> float:
    if math.isnan(b):
        return a
    if math.isnan(a):
        return b
    return min(a, b)


def _upper(a: float, b: float) -> float:
    if math.isnan(b):
        return a
    if math.isnan(a):
        return b
    return max(a, b)


@dataclass
class PlotBounds:
    """Visible axis-aligned rectangle in data space.

    An axis is valid when both ends are finite and ``min < max``. The
    ``nothing()`` sentinel (``+inf``/``-inf``) grows to fit the first value
    it is extended with. Like any inverted range it is the identity for
    ``merge``.
    """

    min: list[float] = field(default_factory=lambda: [math.inf, math.inf])
    max: list[float] = field(default_factory=lambda: [-math.inf, -math.inf])

    @classmethod
    def nothing(cls) -> "PlotBounds":
        return cls()

    @classmethod
    def from_min_max(cls, min: tuple[float, float], max: tuple[float, float]) -> "PlotBounds":
        return cls(min=[float(min[0]), float(min[1])], max=[float(max[0]), float(max[1])])

    @classmethod
    def new_symmetrical(cls, half_extent: float) -> "PlotBounds":
        h = float(half_extent)
        return cls(min=[-h, -h], max=[h, h])

    def copy(self) -> "PlotBounds":
        return PlotBounds(min=list(self.min), max=list(self.max))

    def is_valid_x(self) -> bool:
        return math.isfinite(self.min[0]) and math.isfinite(self.max[0]) and self.min[0] < self.max[0]

    def is_valid_y(self) -> bool:
        return math.isfinite(self.min[1]) and math.isfinite(self.max[1]) and self.min[1] < self.max[1]

    def is_valid(self) -> bool:
        return self.is_valid_x() and self.is_valid_y()

    def width(self) -> float:
        return self.max[0] - self.min[0]

    def height(self) -> float:
        return self.max[1] - self.min[1]

    def center(self) -> Value:
        return Value((self.min[0] + self.max[0]) * 0.5, (self.min[1] + self.max[1]) * 0.5)

    def range_x(self) -> tuple[float, float]:
        return (self.min[0], self.max[0])

    def range_y(self) -> tuple[float, float]:
        return (self.min[1], self.max[1])

    def extend_with(self, value: Value) -> None:
        self.extend_with_x(value.x)
        self.extend_with_y(value.y)

    def extend_with_x(self, x: float) -> None:
        x = float(x)
        if not math.isfinite(x):
            return
        self.min[0] = min(self.min[0], x)
        self.max[0] = max(self.max[0], x)

    def extend_with_y(self, y: float) -> None:
        y = float(y)
        if not math.isfinite(y):
            return
        self.min[1] = min(self.min[1], y)
        self.max[1] = max(self.max[1], y)

    def merge_x(self, other: "PlotBounds") -> None:
        # An inverted range on an axis is empty there and leaves this one untouched.
        if other.min[0] > other.max[0]:
            return
        self.min[0] = _lower(self.min[0], other.min[0])
        self.max[0] = _upper(self.max[0], other.max[0])

    def merge_y(self, other: "PlotBounds") -> None:
        if other.min[1] > other.max[1]:
            return
        self.min[1] = _lower(self.min[1], other.min[1])
        self.max[1] = _upper(self.max[1], other.max[1])

    def merge(self, other: "PlotBounds") -> None:
        self.merge_x(other)
        self.merge_y(other)

    def set_x(self, other: "PlotBounds") -> None:
        self.min[0] = other.min[0]
        self.max[0] = other.max[0]

    def set_y(self, other: "PlotBounds") -> None:
        self.min[1] = other.min[1]
        self.max[1] = other.max[1]

    def translate_x(self, delta: float) -> None:
        self.min[0] += delta
        self.max[0] += delta

    def translate_y(self, delta: float) -> None:
        self.min[1] += delta
        self.max[1] += delta

    def translate(self, delta: tuple[float, float]) -> None:
        self.translate_x(delta[0])
        self.translate_y(delta[1])

    def expand_x(self, pad: float) -> None:
        self.min[0] -= pad
        self.max[0] += pad

    def expand_y(self, pad: float) -> None:
        self.min[1] -= pad
        self.max[1] += pad

    def add_relative_margin(self, margin_fraction: tuple[float, float]) -> None:
        for axis in (0, 1):
            lo, hi = self.min[axis], self.max[axis]
            if not (math.isfinite(lo) and math.isfinite(hi)) or hi < lo:
                continue
            span = hi - lo
            pad = FALLBACK_SPAN * 0.5 if span == 0.0 else float(margin_fraction[axis]) * span
            self.min[axis] = lo - pad
            self.max[axis] = hi + pad

    def make_x_symmetrical(self) -> None:
        extent = max(abs(self.min[0]), abs(self.max[0]))
        self.min[0] = -extent
        self.max[0] = extent

    def make_y_symmetrical(self) -> None:
        extent = max(abs(self.min[1]), abs(self.max[1]))
        self.min[1] = -extent
        self.max[1] = extent

    def zoom(self, zoom_factor: tuple[float, float], center: Value) -> None:
        fx, fy = zoom_factor
        self.min[0] = center.x + (self.min[0] - center.x) / fx
        self.max[0] = center.x + (self.max[0] - center.x) / fx
        self.min[1] = center.y + (self.min[1] - center.y) / fy
        self.max[1] = center.y + (self.max[1] - center.y) / fy
