from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import TYPE_CHECKING, Callable, Literal, Sequence

from interplot.bounds import Value
from interplot.colors import rulers_color, text_color
from interplot.geometry import Pos2
from interplot.shapes import Shape, Stroke, TextShape, horizontal_line, vertical_line
from interplot.transform import ScreenTransform

if TYPE_CHECKING:
    from interplot.items.base import ClosestElem, PlotItem


LOGGER = logging.getLogger(__name__)

HoverLine = Literal["none", "x", "y", "xy"]

HOVER_LINES: tuple[HoverLine, ...] = ("none", "x", "y", "xy")

# Pointer must be within 16 px of an element to hover it.
INTERACT_RADIUS_SQ = 16.0**2


def validate_hover_line(hover_line: str) -> HoverLine:
    if hover_line not in HOVER_LINES:
        raise ValueError(f"hover_line must be one of {HOVER_LINES}, got {hover_line!r}")
    return hover_line  # type: ignore[return-value]


@dataclass(frozen=True)
class HoverConfig:
    hover_line: HoverLine = "xy"
    show_hover_label: bool = True

    @property
    def show_x_line(self) -> bool:
        return self.hover_line in ("x", "xy")

    @property
    def show_y_line(self) -> bool:
        return self.hover_line in ("y", "xy")


HoverFormatter = Callable[[HoverConfig, str, Value], str]


def num_decimals_with_max_digits(value: float, max_digits: int) -> int:
    if not math.isfinite(value) or float(int(value)) == value:
        return 0
    magnitude = math.log10(abs(value))
    return max(1, min(max_digits, max_digits - int(max(0.0, magnitude))))


def default_hover_formatter(config: HoverConfig, name: str, value: Value) -> str:
    prefix = f"{name}\n" if name else ""
    x_decimals = num_decimals_with_max_digits(value.x, 6)
    y_decimals = num_decimals_with_max_digits(value.y, 6)
    if config.hover_line == "x":
        return f"{prefix}x = {value.x:.{x_decimals}f}"
    if config.hover_line == "y":
        return f"{prefix}y = {value.y:.{y_decimals}f}"
    if config.hover_line == "xy":
        return f"{prefix}x = {value.x:.{x_decimals}f}\ny = {value.y:.{y_decimals}f}"
    return ""


@dataclass(frozen=True)
class PlotConfig:
    """Everything an item needs to draw its hover feedback."""

    transform: ScreenTransform
    hover_config: HoverConfig
    hover_formatter: HoverFormatter = default_hover_formatter
    dark_mode: bool = True


def rulers_at_value(pointer: Pos2, value: Value, name: str, plot: PlotConfig, shapes: list[Shape]) -> None:
    frame = plot.transform.frame
    stroke = Stroke(1.0, rulers_color(dark_mode=plot.dark_mode))
    if plot.hover_config.show_x_line:
        x, _ = plot.transform.position_from_value(value)
        shapes.append(vertical_line(x, frame, stroke))
    if plot.hover_config.show_y_line:
        _, y = plot.transform.position_from_value(value)
        shapes.append(horizontal_line(y, frame, stroke))
    if plot.hover_config.show_hover_label:
        text = plot.hover_formatter(plot.hover_config, name, value)
        if text:
            shapes.append(
                TextShape(
                    pos=(pointer[0] + 3.0, pointer[1] - 2.0),
                    text=text,
                    color=text_color(dark_mode=plot.dark_mode),
                    anchor="left_bottom",
                )
            )


def find_closest_item(
    items: Sequence["PlotItem"],
    pointer: Pos2,
    transform: ScreenTransform,
    *,
    interact_radius_sq: float = INTERACT_RADIUS_SQ,
) -> tuple["PlotItem", "ClosestElem"] | None:
    """Closest element over all items; earlier items win ties."""
    best: tuple[PlotItem, ClosestElem] | None = None
    for item in items:
        elem = item.find_closest(pointer, transform)
        if elem is None or math.isnan(elem.dist_sq):
            continue
        if best is None or elem.dist_sq < best[1].dist_sq:
            best = (item, elem)
    if best is None or best[1].dist_sq > interact_radius_sq:
        return None
    return best


def hover(items: Sequence["PlotItem"], pointer: Pos2, plot: PlotConfig, shapes: list[Shape]) -> "PlotItem | None":
    """Draw hover feedback for ``pointer`` and return the hovered item, if any."""
    config = plot.hover_config
    if config.hover_line == "none" and not config.show_hover_label:
        return None
    closest = find_closest_item(items, pointer, plot.transform)
    if closest is not None:
        item, elem = closest
        item.on_hover(elem, shapes, plot)
        return item
    value = plot.transform.value_from_position(pointer)
    rulers_at_value(pointer, value, "", plot, shapes)
    return None
