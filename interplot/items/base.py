from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

import numpy as np

from interplot.bounds import PlotBounds, Value
from interplot.colors import TRANSPARENT
from interplot.geometry import Pos2
from interplot.hover import PlotConfig, rulers_at_value
from interplot.shapes import RGBA, CircleShape, Shape
from interplot.transform import ScreenTransform


@dataclass(frozen=True)
class ClosestElem:
    """Closest element of one item to the pointer, in squared screen pixels."""

    index: int
    dist_sq: float
    value: Value | None = None


@runtime_checkable
class PlotItem(Protocol):
    def name(self) -> str: ...

    def get_bounds(self) -> PlotBounds: ...

    def find_closest(self, pointer: Pos2, transform: ScreenTransform) -> ClosestElem | None: ...

    def on_hover(self, elem: ClosestElem, shapes: list[Shape], plot: PlotConfig) -> None: ...

    def highlight(self) -> None: ...

    def highlighted(self) -> bool: ...

    def initialize(self, x_range: tuple[float, float]) -> None: ...

    def get_shapes(self, transform: ScreenTransform, shapes: list[Shape]) -> None: ...

    def color(self) -> RGBA: ...


class ItemBase:
    """Name, color and highlight state shared by the bundled item types."""

    def __init__(self, *, name: str = "", color: RGBA = TRANSPARENT) -> None:
        self._name = str(name)
        self._color = color
        self._highlight = False

    def name(self) -> str:
        return self._name

    def set_name(self, name: str) -> "ItemBase":
        self._name = str(name)
        return self

    def color(self) -> RGBA:
        return self._color

    def set_color(self, color: RGBA) -> "ItemBase":
        self._color = color
        return self

    def has_auto_color(self) -> bool:
        return self._color == TRANSPARENT

    def highlight(self) -> None:
        self._highlight = True

    def highlighted(self) -> bool:
        return self._highlight

    def initialize(self, x_range: tuple[float, float]) -> None:
        return None

    def find_closest(self, pointer: Pos2, transform: ScreenTransform) -> ClosestElem | None:
        return None

    def on_hover(self, elem: ClosestElem, shapes: list[Shape], plot: PlotConfig) -> None:
        return None


def screen_positions(points: np.ndarray, transform: ScreenTransform) -> tuple[np.ndarray, np.ndarray]:
    """Vectorized ``position_from_value`` for an ``(n, 2)`` array."""
    b = transform.bounds
    f = transform.frame
    sx = f.width / b.width()
    sy = f.height / b.height()
    px = f.left + (points[:, 0] - b.min[0]) * sx
    py = f.bottom - (points[:, 1] - b.min[1]) * sy
    return px, py


def find_closest_elem(points: np.ndarray, pointer: Pos2, transform: ScreenTransform) -> ClosestElem | None:
    if points.shape[0] == 0:
        return None
    px, py = screen_positions(points, transform)
    dist_sq = (px - pointer[0]) ** 2 + (py - pointer[1]) ** 2
    finite = np.isfinite(dist_sq)
    if not np.any(finite):
        return None
    masked = np.where(finite, dist_sq, np.inf)
    # argmin returns the first minimum, keeping ties in data order.
    index = int(np.argmin(masked))
    x, y = points[index]
    return ClosestElem(index=index, dist_sq=float(masked[index]), value=Value(float(x), float(y)))


def hover_marker_color(*, dark_mode: bool) -> RGBA:
    return (100, 100, 100, 255) if dark_mode else (0, 0, 0, 180)


def series_on_hover(points: np.ndarray, elem: ClosestElem, name: str, plot: PlotConfig, shapes: list[Shape]) -> None:
    x, y = points[elem.index]
    value = Value(float(x), float(y))
    pointer = plot.transform.position_from_value(value)
    shapes.append(CircleShape(center=pointer, radius=3.0, fill=hover_marker_color(dark_mode=plot.dark_mode)))
    rulers_at_value(pointer, value, name, plot, shapes)


def contiguous_true_runs(mask: np.ndarray) -> list[tuple[int, int]]:
    idx = np.flatnonzero(mask)
    if idx.size == 0:
        return []
    runs: list[tuple[int, int]] = []
    start = int(idx[0])
    prev = int(idx[0])
    for v in idx[1:]:
        iv = int(v)
        if iv == prev + 1:
            prev = iv
            continue
        runs.append((start, prev + 1))
        start = iv
        prev = iv
    runs.append((start, prev + 1))
    return runs
