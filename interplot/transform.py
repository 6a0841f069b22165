from __future__ import annotations

import math

from interplot.bounds import PlotBounds, Value
from interplot.geometry import Pos2, ScreenRect, Vec2, remap


ASPECT_EPSILON = 1e-5


class ScreenTransform:
    """Affine map between a fixed screen rectangle and mutable data bounds.

    The frame never changes after construction. Bounds are copied in, so a
    transform can be mutated freely without touching the caller's bounds.
    """

    def __init__(
        self,
        frame: ScreenRect,
        bounds: PlotBounds,
        x_centered: bool = False,
        y_centered: bool = False,
    ) -> None:
        bounds = bounds.copy()
        if not bounds.is_valid_x():
            bounds.set_x(PlotBounds.new_symmetrical(1.0))
        if not bounds.is_valid_y():
            bounds.set_y(PlotBounds.new_symmetrical(1.0))
        if x_centered:
            bounds.make_x_symmetrical()
        if y_centered:
            bounds.make_y_symmetrical()
        self._frame = frame
        self._bounds = bounds
        self._x_centered = bool(x_centered)
        self._y_centered = bool(y_centered)

    @property
    def frame(self) -> ScreenRect:
        return self._frame

    @property
    def bounds(self) -> PlotBounds:
        return self._bounds

    @property
    def x_centered(self) -> bool:
        return self._x_centered

    @property
    def y_centered(self) -> bool:
        return self._y_centered

    def set_bounds(self, bounds: PlotBounds) -> None:
        self._bounds = bounds.copy()

    def copy(self) -> "ScreenTransform":
        out = ScreenTransform.__new__(ScreenTransform)
        out._frame = self._frame
        out._bounds = self._bounds.copy()
        out._x_centered = self._x_centered
        out._y_centered = self._y_centered
        return out

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ScreenTransform):
            return NotImplemented
        return (
            self._frame == other._frame
            and self._bounds == other._bounds
            and self._x_centered == other._x_centered
            and self._y_centered == other._y_centered
        )

    def __repr__(self) -> str:
        return f"ScreenTransform(frame={self._frame!r}, bounds={self._bounds!r})"

    def dpos_dvalue_x(self) -> float:
        return self._frame.width / self._bounds.width()

    def dpos_dvalue_y(self) -> float:
        # Negated: data y grows upward while screen y grows downward.
        return -self._frame.height / self._bounds.height()

    def dpos_dvalue(self) -> tuple[float, float]:
        return (self.dpos_dvalue_x(), self.dpos_dvalue_y())

    def dvalue_dpos(self) -> tuple[float, float]:
        # A zero-size frame has no finite data-per-pixel scale.
        dx, dy = self.dpos_dvalue()
        return (1.0 / dx if dx else math.inf, 1.0 / dy if dy else math.inf)

    def position_from_value(self, value: Value) -> Pos2:
        x = remap(value.x, self._bounds.range_x(), (self._frame.left, self._frame.right))
        y = remap(value.y, self._bounds.range_y(), (self._frame.bottom, self._frame.top))
        return (x, y)

    def value_from_position(self, pos: Pos2) -> Value:
        x = remap(pos[0], (self._frame.left, self._frame.right), self._bounds.range_x())
        y = remap(pos[1], (self._frame.bottom, self._frame.top), self._bounds.range_y())
        return Value(x, y)

    def rect_from_values(self, a: Value, b: Value) -> ScreenRect:
        return ScreenRect.from_two_pos(self.position_from_value(a), self.position_from_value(b))

    def translate_bounds(self, delta_pos: Vec2) -> None:
        dx, dy = float(delta_pos[0]), float(delta_pos[1])
        if self._x_centered:
            dx = 0.0
        if self._y_centered:
            dy = 0.0
        vx, vy = self.dvalue_dpos()
        tx = dx * vx if math.isfinite(vx) else 0.0
        ty = dy * vy if math.isfinite(vy) else 0.0
        self._bounds.translate((tx, ty))

    def zoom(self, zoom_factor: Vec2, center: Pos2) -> None:
        fx, fy = float(zoom_factor[0]), float(zoom_factor[1])
        if not (fx > 0.0 and fy > 0.0 and math.isfinite(fx) and math.isfinite(fy)):
            return
        anchor = self.value_from_position(center)
        new_bounds = self._bounds.copy()
        new_bounds.zoom((fx, fy), anchor)
        if new_bounds.is_valid():
            self._bounds = new_bounds

    def get_aspect(self) -> float:
        """Data units per pixel along x divided by data units per pixel along y."""
        rw = self._frame.width
        rh = self._frame.height
        if rw <= 0 or rh <= 0:
            return math.nan
        return (self._bounds.width() / rw) / (self._bounds.height() / rh)

    def set_aspect(self, aspect: float, preserve_y: bool) -> None:
        current = self.get_aspect()
        if not math.isfinite(current) or abs(current - aspect) < ASPECT_EPSILON:
            return
        if preserve_y:
            self._bounds.expand_x((aspect / current - 1.0) * self._bounds.width() * 0.5)
        else:
            self._bounds.expand_y((current / aspect - 1.0) * self._bounds.height() * 0.5)
