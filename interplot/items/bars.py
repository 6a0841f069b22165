from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Literal, Sequence

from interplot.bounds import PlotBounds, Value
from interplot.colors import TRANSPARENT, highlight, rulers_color, text_color, with_alpha
from interplot.geometry import Pos2, ScreenRect
from interplot.hover import PlotConfig
from interplot.items.base import ClosestElem, ItemBase
from interplot.shapes import RGBA, LineSegment, RectShape, Shape, Stroke, TextShape, horizontal_line, vertical_line
from interplot.transform import ScreenTransform


Orientation = Literal["vertical", "horizontal"]


def to_value(orientation: Orientation, argument: float, value: float) -> Value:
    """Map (argument, value) to data space: argument runs along x for vertical charts."""
    if orientation == "vertical":
        return Value(argument, value)
    return Value(value, argument)


def value_ruler(orientation: Orientation, position: Pos2, plot: PlotConfig) -> LineSegment:
    stroke = Stroke(1.0, rulers_color(dark_mode=plot.dark_mode))
    if orientation == "vertical":
        return horizontal_line(position[1], plot.transform.frame, stroke)
    return vertical_line(position[0], plot.transform.frame, stroke)


@dataclass(frozen=True)
class Bar:
    argument: float
    value: float
    width: float = 0.5
    base_offset: float = 0.0
    name: str = ""

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise ValueError("bar width must be > 0")

    def lower(self) -> float:
        return min(self.base_offset, self.base_offset + self.value)

    def upper(self) -> float:
        return max(self.base_offset, self.base_offset + self.value)

    def bounds_min(self, orientation: Orientation) -> Value:
        return to_value(orientation, self.argument - self.width * 0.5, self.lower())

    def bounds_max(self, orientation: Orientation) -> Value:
        return to_value(orientation, self.argument + self.width * 0.5, self.upper())

    def screen_rect(self, orientation: Orientation, transform: ScreenTransform) -> ScreenRect:
        return transform.rect_from_values(self.bounds_min(orientation), self.bounds_max(orientation))


BarFormatter = Callable[[Bar, "BarChart"], str]


def default_bar_formatter(bar: Bar, chart: "BarChart") -> str:
    lines = [label for label in (chart.name(), bar.name) if label]
    lines.append(f"{bar.value:g}")
    return "\n".join(lines)


class BarChart(ItemBase):
    def __init__(
        self,
        bars: Sequence[Bar],
        *,
        name: str = "",
        color: RGBA = TRANSPARENT,
        orientation: Orientation = "vertical",
        element_formatter: BarFormatter | None = None,
    ) -> None:
        super().__init__(name=name, color=color)
        if orientation not in ("vertical", "horizontal"):
            raise ValueError("orientation must be 'vertical' or 'horizontal'")
        self.bars = list(bars)
        self.orientation: Orientation = orientation
        self.element_formatter = element_formatter

    def get_bounds(self) -> PlotBounds:
        bounds = PlotBounds.nothing()
        for bar in self.bars:
            bounds.extend_with(bar.bounds_min(self.orientation))
            bounds.extend_with(bar.bounds_max(self.orientation))
        return bounds

    def find_closest(self, pointer: Pos2, transform: ScreenTransform) -> ClosestElem | None:
        best: ClosestElem | None = None
        for index, bar in enumerate(self.bars):
            dist_sq = bar.screen_rect(self.orientation, transform).distance_sq_to_pos(pointer)
            if best is None or dist_sq < best.dist_sq:
                best = ClosestElem(index=index, dist_sq=dist_sq, value=to_value(self.orientation, bar.argument, bar.value))
        return best

    def _bar_shapes(self, bar: Bar, transform: ScreenTransform, highlighted: bool, shapes: list[Shape]) -> None:
        fill = highlight(self._color) if highlighted else with_alpha(self._color, 0.6)
        stroke = Stroke(2.0 if highlighted else 1.0, self._color)
        shapes.append(RectShape(rect=bar.screen_rect(self.orientation, transform), fill=fill, stroke=stroke))

    def get_shapes(self, transform: ScreenTransform, shapes: list[Shape]) -> None:
        for bar in self.bars:
            self._bar_shapes(bar, transform, self.highlighted(), shapes)

    def on_hover(self, elem: ClosestElem, shapes: list[Shape], plot: PlotConfig) -> None:
        bar = self.bars[elem.index]
        self._bar_shapes(bar, plot.transform, True, shapes)
        tip = plot.transform.position_from_value(
            to_value(self.orientation, bar.argument, bar.base_offset + bar.value)
        )
        if plot.hover_config.hover_line != "none":
            shapes.append(value_ruler(self.orientation, tip, plot))
        if plot.hover_config.show_hover_label:
            formatter = self.element_formatter or default_bar_formatter
            text = formatter(bar, self)
            if text:
                shapes.append(
                    TextShape(pos=(tip[0] + 3.0, tip[1] - 2.0), text=text, color=text_color(dark_mode=plot.dark_mode), anchor="left_bottom")
                )
