from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from interplot.bounds import PlotBounds
from interplot.colors import TRANSPARENT, highlight, text_color, with_alpha
from interplot.geometry import Pos2, ScreenRect
from interplot.hover import PlotConfig
from interplot.items.bars import Orientation, to_value, value_ruler
from interplot.items.base import ClosestElem, ItemBase
from interplot.shapes import RGBA, LineSegment, RectShape, Shape, Stroke, TextShape
from interplot.transform import ScreenTransform


@dataclass(frozen=True)
class BoxSpread:
    lower_whisker: float
    quartile1: float
    median: float
    quartile3: float
    upper_whisker: float

    def __post_init__(self) -> None:
        ordered = (self.lower_whisker, self.quartile1, self.median, self.quartile3, self.upper_whisker)
        if any(a > b for a, b in zip(ordered, ordered[1:])):
            raise ValueError("box spread must be ordered: lower_whisker <= q1 <= median <= q3 <= upper_whisker")


@dataclass(frozen=True)
class BoxElem:
    argument: float
    spread: BoxSpread
    box_width: float = 0.25
    whisker_width: float = 0.15
    name: str = ""

    def __post_init__(self) -> None:
        if self.box_width <= 0:
            raise ValueError("box width must be > 0")
        if self.whisker_width < 0:
            raise ValueError("whisker width must be >= 0")

    def hit_rect(self, orientation: Orientation, transform: ScreenTransform) -> ScreenRect:
        half = self.box_width * 0.5
        return transform.rect_from_values(
            to_value(orientation, self.argument - half, self.spread.lower_whisker),
            to_value(orientation, self.argument + half, self.spread.upper_whisker),
        )


BoxFormatter = Callable[[BoxElem, "BoxPlot"], str]


def default_box_formatter(elem: BoxElem, plot: "BoxPlot") -> str:
    s = elem.spread
    lines = [label for label in (plot.name(), elem.name) if label]
    lines.extend(
        [
            f"Max = {s.upper_whisker:g}",
            f"Quartile 3 = {s.quartile3:g}",
            f"Median = {s.median:g}",
            f"Quartile 1 = {s.quartile1:g}",
            f"Min = {s.lower_whisker:g}",
        ]
    )
    return "\n".join(lines)


class BoxPlot(ItemBase):
    def __init__(
        self,
        boxes: Sequence[BoxElem],
        *,
        name: str = "",
        color: RGBA = TRANSPARENT,
        orientation: Orientation = "vertical",
        element_formatter: BoxFormatter | None = None,
    ) -> None:
        super().__init__(name=name, color=color)
        if orientation not in ("vertical", "horizontal"):
            raise ValueError("orientation must be 'vertical' or 'horizontal'")
        self.boxes = list(boxes)
        self.orientation: Orientation = orientation
        self.element_formatter = element_formatter

    def get_bounds(self) -> PlotBounds:
        bounds = PlotBounds.nothing()
        for elem in self.boxes:
            half = max(elem.box_width, elem.whisker_width) * 0.5
            bounds.extend_with(to_value(self.orientation, elem.argument - half, elem.spread.lower_whisker))
            bounds.extend_with(to_value(self.orientation, elem.argument + half, elem.spread.upper_whisker))
        return bounds

    def find_closest(self, pointer: Pos2, transform: ScreenTransform) -> ClosestElem | None:
        best: ClosestElem | None = None
        for index, elem in enumerate(self.boxes):
            dist_sq = elem.hit_rect(self.orientation, transform).distance_sq_to_pos(pointer)
            if best is None or dist_sq < best.dist_sq:
                value = to_value(self.orientation, elem.argument, elem.spread.median)
                best = ClosestElem(index=index, dist_sq=dist_sq, value=value)
        return best

    def _box_shapes(self, elem: BoxElem, transform: ScreenTransform, highlighted: bool, shapes: list[Shape]) -> None:
        o = self.orientation
        s = elem.spread
        stroke = Stroke(2.0 if highlighted else 1.0, self._color)
        fill = highlight(self._color) if highlighted else with_alpha(self._color, 0.4)
        half_box = elem.box_width * 0.5
        half_whisker = elem.whisker_width * 0.5
        box_rect = transform.rect_from_values(
            to_value(o, elem.argument - half_box, s.quartile1),
            to_value(o, elem.argument + half_box, s.quartile3),
        )
        shapes.append(RectShape(rect=box_rect, fill=fill, stroke=stroke))

        def segment(a0: float, v0: float, a1: float, v1: float) -> LineSegment:
            return LineSegment(
                start=transform.position_from_value(to_value(o, a0, v0)),
                end=transform.position_from_value(to_value(o, a1, v1)),
                stroke=stroke,
            )

        shapes.append(segment(elem.argument - half_box, s.median, elem.argument + half_box, s.median))
        shapes.append(segment(elem.argument, s.quartile3, elem.argument, s.upper_whisker))
        shapes.append(segment(elem.argument, s.quartile1, elem.argument, s.lower_whisker))
        if half_whisker > 0:
            shapes.append(segment(elem.argument - half_whisker, s.upper_whisker, elem.argument + half_whisker, s.upper_whisker))
            shapes.append(segment(elem.argument - half_whisker, s.lower_whisker, elem.argument + half_whisker, s.lower_whisker))

    def get_shapes(self, transform: ScreenTransform, shapes: list[Shape]) -> None:
        for elem in self.boxes:
            self._box_shapes(elem, transform, self.highlighted(), shapes)

    def on_hover(self, elem: ClosestElem, shapes: list[Shape], plot: PlotConfig) -> None:
        box = self.boxes[elem.index]
        self._box_shapes(box, plot.transform, True, shapes)
        if plot.hover_config.hover_line != "none":
            for v in (box.spread.lower_whisker, box.spread.quartile1, box.spread.median, box.spread.quartile3, box.spread.upper_whisker):
                pos = plot.transform.position_from_value(to_value(self.orientation, box.argument, v))
                shapes.append(value_ruler(self.orientation, pos, plot))
        if plot.hover_config.show_hover_label:
            formatter = self.element_formatter or default_box_formatter
            text = formatter(box, self)
            if text:
                top = plot.transform.position_from_value(to_value(self.orientation, box.argument, box.spread.upper_whisker))
                shapes.append(
                    TextShape(pos=(top[0] + 3.0, top[1] - 2.0), text=text, color=text_color(dark_mode=plot.dark_mode), anchor="left_bottom")
                )
