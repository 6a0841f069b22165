from __future__ import annotations

from interplot.bounds import PlotBounds, Value
from interplot.colors import TRANSPARENT, text_color
from interplot.items.base import ItemBase
from interplot.shapes import RGBA, Shape, Stroke, TextAnchor, TextShape, horizontal_line, vertical_line
from interplot.transform import ScreenTransform


class HLine(ItemBase):
    """Horizontal line spanning the full width of the plot."""

    def __init__(self, y: float, *, name: str = "", color: RGBA = TRANSPARENT, width: float = 1.0) -> None:
        super().__init__(name=name, color=color)
        if width <= 0:
            raise ValueError("line width must be > 0")
        self.y = float(y)
        self.width = float(width)

    def get_bounds(self) -> PlotBounds:
        bounds = PlotBounds.nothing()
        bounds.extend_with_y(self.y)
        return bounds

    def get_shapes(self, transform: ScreenTransform, shapes: list[Shape]) -> None:
        bounds = transform.bounds
        _, py = transform.position_from_value(Value(bounds.min[0], self.y))
        width = self.width * 2.0 if self.highlighted() else self.width
        shapes.append(horizontal_line(py, transform.frame, Stroke(width, self._color)))


class VLine(ItemBase):
    """Vertical line spanning the full height of the plot."""

    def __init__(self, x: float, *, name: str = "", color: RGBA = TRANSPARENT, width: float = 1.0) -> None:
        super().__init__(name=name, color=color)
        if width <= 0:
            raise ValueError("line width must be > 0")
        self.x = float(x)
        self.width = float(width)

    def get_bounds(self) -> PlotBounds:
        bounds = PlotBounds.nothing()
        bounds.extend_with_x(self.x)
        return bounds

    def get_shapes(self, transform: ScreenTransform, shapes: list[Shape]) -> None:
        bounds = transform.bounds
        px, _ = transform.position_from_value(Value(self.x, bounds.min[1]))
        width = self.width * 2.0 if self.highlighted() else self.width
        shapes.append(vertical_line(px, transform.frame, Stroke(width, self._color)))


class Text(ItemBase):
    """Text anchored at a data-space position."""

    def __init__(
        self,
        position: Value | tuple[float, float],
        text: str,
        *,
        name: str = "",
        color: RGBA = TRANSPARENT,
        anchor: TextAnchor = "center_center",
        font_size_px: float = 12.0,
    ) -> None:
        super().__init__(name=name, color=color)
        self.position = Value(float(position[0]), float(position[1]))
        self.text = str(text)
        self.anchor = anchor
        self.font_size_px = float(font_size_px)

    def get_bounds(self) -> PlotBounds:
        bounds = PlotBounds.nothing()
        bounds.extend_with(self.position)
        return bounds

    def get_shapes(self, transform: ScreenTransform, shapes: list[Shape]) -> None:
        color = text_color(dark_mode=True) if self.has_auto_color() else self._color
        shapes.append(
            TextShape(
                pos=transform.position_from_value(self.position),
                text=self.text,
                color=color,
                anchor=self.anchor,
                font_size_px=self.font_size_px * (1.2 if self.highlighted() else 1.0),
            )
        )
