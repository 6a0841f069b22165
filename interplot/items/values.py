from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Any, Callable

import numpy as np

from interplot.adapters.normalize import normalize_values
from interplot.bounds import PlotBounds, Value


DEFAULT_GENERATOR_POINTS = 500


@dataclass(frozen=True)
class ExplicitGenerator:
    """``y = function(x)`` over ``x_range``, sampled lazily against the visible range."""

    function: Callable[[float], float]
    x_range: tuple[float, float]
    points: int

    def estimate_bounds(self) -> PlotBounds:
        bounds = PlotBounds.nothing()
        min_x, max_x = self.x_range

        def add_x(x: float) -> None:
            # Infinite ends cannot be auto-bounded; only finite samples count.
            if not math.isfinite(x):
                return
            bounds.extend_with_x(x)
            y = float(self.function(x))
            if math.isfinite(y):
                bounds.extend_with_y(y)

        add_x(min_x)
        add_x(max_x)
        if math.isfinite(min_x) and math.isfinite(max_x):
            n = 8
            for i in range(1, n):
                add_x(min_x + (max_x - min_x) * (i / (n - 1)))
        else:
            for x in (-1.0, 0.0, 1.0):
                if min_x <= x <= max_x:
                    add_x(x)
        return bounds


def _range_intersection(a: tuple[float, float], b: tuple[float, float]) -> tuple[float, float] | None:
    start = max(a[0], b[0])
    end = min(a[1], b[1])
    if start < end and math.isfinite(start) and math.isfinite(end):
        return (start, end)
    return None


class Values:
    """Series of data points, either explicit or generated from a function."""

    def __init__(self, values: Any = None, *, generator: ExplicitGenerator | None = None) -> None:
        if values is None:
            self._points = np.empty((0, 2), dtype=np.float64)
        else:
            self._points = normalize_values(values)
        self._generator = generator

    @classmethod
    def from_xy(cls, x: Any, y: Any) -> "Values":
        out = cls()
        out._points = normalize_values(x=x, y=y)
        return out

    @classmethod
    def from_ys(cls, ys: Any) -> "Values":
        out = cls()
        out._points = normalize_values(y=ys)
        return out

    @classmethod
    def from_explicit_callback(
        cls,
        function: Callable[[float], float],
        x_range: tuple[float, float] = (-math.inf, math.inf),
        points: int = DEFAULT_GENERATOR_POINTS,
    ) -> "Values":
        if points < 2:
            raise ValueError("points must be >= 2")
        lo, hi = float(x_range[0]), float(x_range[1])
        return cls(generator=ExplicitGenerator(function=function, x_range=(lo, hi), points=int(points)))

    @classmethod
    def from_parametric_callback(
        cls,
        fx: Callable[[float], float],
        fy: Callable[[float], float],
        t_range: tuple[float, float],
        points: int = DEFAULT_GENERATOR_POINTS,
    ) -> "Values":
        if points < 2:
            raise ValueError("points must be >= 2")
        ts = np.linspace(float(t_range[0]), float(t_range[1]), int(points))
        return cls([(float(fx(t)), float(fy(t))) for t in ts.tolist()])

    @property
    def points(self) -> np.ndarray:
        return self._points

    @property
    def generator(self) -> ExplicitGenerator | None:
        return self._generator

    def __len__(self) -> int:
        return int(self._points.shape[0])

    def is_empty(self) -> bool:
        return self._points.shape[0] == 0 and self._generator is None

    def value(self, index: int) -> Value:
        x, y = self._points[index]
        return Value(float(x), float(y))

    def generate_points(self, x_range: tuple[float, float]) -> None:
        generator = self._generator
        if generator is None:
            return
        intersection = _range_intersection(x_range, generator.x_range)
        if intersection is None:
            self._points = np.empty((0, 2), dtype=np.float64)
            return
        xs = np.linspace(intersection[0], intersection[1], generator.points)
        ys = np.asarray([float(generator.function(x)) for x in xs.tolist()], dtype=np.float64)
        self._points = np.column_stack((xs, ys))

    def get_bounds(self) -> PlotBounds:
        bounds = PlotBounds.nothing()
        pts = self._points
        if pts.shape[0] > 0:
            xs = pts[:, 0][np.isfinite(pts[:, 0])]
            ys = pts[:, 1][np.isfinite(pts[:, 1])]
            if xs.size:
                bounds.extend_with_x(float(np.min(xs)))
                bounds.extend_with_x(float(np.max(xs)))
            if ys.size:
                bounds.extend_with_y(float(np.min(ys)))
                bounds.extend_with_y(float(np.max(ys)))
        if self._generator is not None:
            bounds.merge(self._generator.estimate_bounds())
        return bounds
