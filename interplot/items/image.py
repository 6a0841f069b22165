from __future__ import annotations

from typing import Any

import numpy as np

from interplot.bounds import PlotBounds, Value
from interplot.items.base import ItemBase
from interplot.shapes import RGBA, ImageShape, RectShape, Shape, Stroke
from interplot.transform import ScreenTransform


class PlotImage(ItemBase):
    """RGBA image stretched over a data-space rectangle centred on ``position``."""

    def __init__(
        self,
        rgba: Any,
        position: Value | tuple[float, float],
        size: tuple[float, float],
        *,
        name: str = "",
        tint: RGBA = (255, 255, 255, 255),
        highlight_color: RGBA = (255, 255, 255, 180),
    ) -> None:
        super().__init__(name=name, color=tint)
        arr = np.asarray(rgba)
        if arr.ndim != 3 or arr.shape[2] != 4:
            raise ValueError("image must have shape (H, W, 4)")
        if size[0] <= 0 or size[1] <= 0:
            raise ValueError("image size must be > 0")
        self.rgba = arr.astype(np.uint8, copy=False)
        self.position = Value(float(position[0]), float(position[1]))
        self.size = (float(size[0]), float(size[1]))
        self.highlight_color = highlight_color

    def _corners(self) -> tuple[Value, Value]:
        hw = self.size[0] * 0.5
        hh = self.size[1] * 0.5
        return (
            Value(self.position.x - hw, self.position.y - hh),
            Value(self.position.x + hw, self.position.y + hh),
        )

    def get_bounds(self) -> PlotBounds:
        lo, hi = self._corners()
        bounds = PlotBounds.nothing()
        bounds.extend_with(lo)
        bounds.extend_with(hi)
        return bounds

    def get_shapes(self, transform: ScreenTransform, shapes: list[Shape]) -> None:
        lo, hi = self._corners()
        rect = transform.rect_from_values(lo, hi)
        shapes.append(ImageShape(rect=rect, rgba=self.rgba, tint=self._color))
        if self.highlighted():
            shapes.append(RectShape(rect=rect, stroke=Stroke(1.0, self.highlight_color)))
