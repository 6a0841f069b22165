from __future__ import annotations

from typing import Any, Literal

import numpy as np

from interplot.bounds import PlotBounds
from interplot.colors import TRANSPARENT, with_alpha
from interplot.geometry import Pos2, ScreenRect
from interplot.hover import PlotConfig
from interplot.items.base import (
    ClosestElem,
    ItemBase,
    contiguous_true_runs,
    find_closest_elem,
    screen_positions,
    series_on_hover,
)
from interplot.items.values import Values
from interplot.shapes import RGBA, CircleShape, LineSegment, Path, RectShape, Shape, Stroke
from interplot.transform import ScreenTransform


MarkerShape = Literal["circle", "square", "diamond", "plus", "cross"]

MARKER_SHAPES: tuple[MarkerShape, ...] = ("circle", "square", "diamond", "plus", "cross")


def _as_values(values: Any) -> Values:
    return values if isinstance(values, Values) else Values(values)


class Line(ItemBase):
    """Polyline through a series; non-finite points split the line."""

    def __init__(
        self,
        values: Any,
        *,
        name: str = "",
        color: RGBA = TRANSPARENT,
        width: float = 1.5,
        fill: float | None = None,
    ) -> None:
        super().__init__(name=name, color=color)
        if width <= 0:
            raise ValueError("line width must be > 0")
        self.series = _as_values(values)
        self.width = float(width)
        self.fill = None if fill is None else float(fill)

    def get_bounds(self) -> PlotBounds:
        bounds = self.series.get_bounds()
        if self.fill is not None:
            bounds.extend_with_y(self.fill)
        return bounds

    def initialize(self, x_range: tuple[float, float]) -> None:
        self.series.generate_points(x_range)

    def find_closest(self, pointer: Pos2, transform: ScreenTransform) -> ClosestElem | None:
        return find_closest_elem(self.series.points, pointer, transform)

    def on_hover(self, elem: ClosestElem, shapes: list[Shape], plot: PlotConfig) -> None:
        series_on_hover(self.series.points, elem, self.name(), plot, shapes)

    def get_shapes(self, transform: ScreenTransform, shapes: list[Shape]) -> None:
        pts = self.series.points
        if pts.shape[0] == 0:
            return
        width = self.width * 2.0 if self.highlighted() else self.width
        stroke = Stroke(width, self._color)
        px, py = screen_positions(pts, transform)
        finite = np.isfinite(px) & np.isfinite(py)
        for start, end in contiguous_true_runs(finite):
            run = tuple(zip(px[start:end].tolist(), py[start:end].tolist()))
            if self.fill is not None and len(run) > 1:
                _, fill_y = transform.position_from_value(self.series.value(start)._replace(y=self.fill))
                area = run + ((run[-1][0], fill_y), (run[0][0], fill_y))
                alpha = 0.4 if self.highlighted() else 0.2
                shapes.append(Path(points=area, stroke=Stroke(0.0, TRANSPARENT), closed=True, fill=with_alpha(self._color, alpha)))
            if len(run) == 1:
                shapes.append(CircleShape(center=run[0], radius=width * 0.5, fill=self._color))
            else:
                shapes.append(Path(points=run, stroke=stroke))


class Points(ItemBase):
    """Markers at each data point."""

    def __init__(
        self,
        values: Any,
        *,
        name: str = "",
        color: RGBA = TRANSPARENT,
        shape: MarkerShape = "circle",
        radius: float = 1.0,
        filled: bool = True,
        stems: float | None = None,
    ) -> None:
        super().__init__(name=name, color=color)
        if shape not in MARKER_SHAPES:
            raise ValueError(f"shape must be one of {MARKER_SHAPES}, got {shape!r}")
        if radius <= 0:
            raise ValueError("marker radius must be > 0")
        self.series = _as_values(values)
        self.shape = shape
        self.radius = float(radius)
        self.filled = bool(filled)
        self.stems = None if stems is None else float(stems)

    def get_bounds(self) -> PlotBounds:
        bounds = self.series.get_bounds()
        if self.stems is not None:
            bounds.extend_with_y(self.stems)
        return bounds

    def initialize(self, x_range: tuple[float, float]) -> None:
        self.series.generate_points(x_range)

    def find_closest(self, pointer: Pos2, transform: ScreenTransform) -> ClosestElem | None:
        return find_closest_elem(self.series.points, pointer, transform)

    def on_hover(self, elem: ClosestElem, shapes: list[Shape], plot: PlotConfig) -> None:
        series_on_hover(self.series.points, elem, self.name(), plot, shapes)

    def get_shapes(self, transform: ScreenTransform, shapes: list[Shape]) -> None:
        pts = self.series.points
        if pts.shape[0] == 0:
            return
        radius = self.radius * 2.0 if self.highlighted() else self.radius
        stroke = Stroke(1.0, self._color)
        fill = self._color if self.filled else None
        stem_y = None
        if self.stems is not None:
            _, stem_y = transform.position_from_value(self.series.value(0)._replace(y=self.stems))
        px, py = screen_positions(pts, transform)
        for x, y in zip(px.tolist(), py.tolist()):
            if not (np.isfinite(x) and np.isfinite(y)):
                continue
            if stem_y is not None:
                shapes.append(LineSegment(start=(x, stem_y), end=(x, y), stroke=stroke))
            shapes.extend(_marker_shapes(self.shape, (x, y), radius, fill, stroke))


def _marker_shapes(shape: MarkerShape, center: Pos2, radius: float, fill: RGBA | None, stroke: Stroke) -> list[Shape]:
    x, y = center
    if shape == "circle":
        return [CircleShape(center=center, radius=radius, fill=fill, stroke=None if fill else stroke)]
    if shape == "square":
        rect = ScreenRect(x - radius, y - radius, x + radius, y + radius)
        return [RectShape(rect=rect, fill=fill, stroke=None if fill else stroke)]
    if shape == "diamond":
        pts = ((x, y - radius), (x + radius, y), (x, y + radius), (x - radius, y))
        return [Path(points=pts, stroke=stroke, closed=True, fill=fill)]
    if shape == "plus":
        return [
            LineSegment(start=(x - radius, y), end=(x + radius, y), stroke=stroke),
            LineSegment(start=(x, y - radius), end=(x, y + radius), stroke=stroke),
        ]
    d = radius * 0.7071
    return [
        LineSegment(start=(x - d, y - d), end=(x + d, y + d), stroke=stroke),
        LineSegment(start=(x - d, y + d), end=(x + d, y - d), stroke=stroke),
    ]


class Polygon(ItemBase):
    """Closed convex shape through a series, filled with a translucent color."""

    def __init__(
        self,
        values: Any,
        *,
        name: str = "",
        color: RGBA = TRANSPARENT,
        width: float = 1.0,
        fill_alpha: float = 0.2,
    ) -> None:
        super().__init__(name=name, color=color)
        if width <= 0:
            raise ValueError("polygon stroke width must be > 0")
        self.series = _as_values(values)
        self.width = float(width)
        self.fill_alpha = max(0.0, min(1.0, float(fill_alpha)))

    def get_bounds(self) -> PlotBounds:
        return self.series.get_bounds()

    def initialize(self, x_range: tuple[float, float]) -> None:
        self.series.generate_points(x_range)

    def find_closest(self, pointer: Pos2, transform: ScreenTransform) -> ClosestElem | None:
        return find_closest_elem(self.series.points, pointer, transform)

    def on_hover(self, elem: ClosestElem, shapes: list[Shape], plot: PlotConfig) -> None:
        series_on_hover(self.series.points, elem, self.name(), plot, shapes)

    def get_shapes(self, transform: ScreenTransform, shapes: list[Shape]) -> None:
        pts = self.series.points
        if pts.shape[0] < 2:
            return
        px, py = screen_positions(pts, transform)
        finite = np.isfinite(px) & np.isfinite(py)
        outline = tuple(zip(px[finite].tolist(), py[finite].tolist()))
        width = self.width * 2.0 if self.highlighted() else self.width
        alpha = min(1.0, self.fill_alpha * 2.0) if self.highlighted() else self.fill_alpha
        shapes.append(
            Path(points=outline, stroke=Stroke(width, self._color), closed=True, fill=with_alpha(self._color, alpha))
        )
