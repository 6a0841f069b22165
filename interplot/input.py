from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Mapping

from interplot.geometry import Pos2, ScreenRect, Vec2


PointerButton = Literal["primary", "secondary", "middle"]

_BUTTONS = {"primary", "secondary", "middle"}


@dataclass(frozen=True)
class PlotInput:
    """Pointer, drag, scroll and zoom signals delivered by the host for one frame.

    ``dragged_button`` is set on every frame of a drag, including the frame
    where ``drag_started`` is true. ``released_button`` is set only on the
    frame the drag ends.
    """

    pointer_pos: Pos2 | None = None
    dragged_button: PointerButton | None = None
    drag_started: bool = False
    released_button: PointerButton | None = None
    drag_delta: Vec2 = (0.0, 0.0)
    clicked_button: PointerButton | None = None
    double_clicked_button: PointerButton | None = None
    scroll_delta: Vec2 = (0.0, 0.0)
    zoom_delta: float = 1.0
    zoom_delta_2d: Vec2 | None = None

    def dragged_by(self, button: PointerButton) -> bool:
        return self.dragged_button == button

    def drag_released_by(self, button: PointerButton) -> bool:
        return self.released_button == button

    def clicked_by(self, button: PointerButton) -> bool:
        return self.clicked_button == button

    def double_clicked_by(self, button: PointerButton) -> bool:
        return self.double_clicked_button == button

    def zoom_factor(self, *, uniform: bool) -> Vec2:
        if uniform or self.zoom_delta_2d is None:
            return (float(self.zoom_delta), float(self.zoom_delta))
        return (float(self.zoom_delta_2d[0]), float(self.zoom_delta_2d[1]))

    def hover_pos(self, rect: ScreenRect) -> Pos2 | None:
        """Pointer position while it is over ``rect`` or while a drag owns the pointer."""
        if self.pointer_pos is None:
            return None
        if self.dragged_button is not None or self.released_button is not None:
            return self.pointer_pos
        return self.pointer_pos if rect.contains(self.pointer_pos) else None


def parse_plot_input(payload: object) -> PlotInput:
    """Build a ``PlotInput`` from a loosely typed host event mapping.

    Unknown buttons and malformed vectors are dropped rather than rejected so
    one bad field never discards the whole frame's input.
    """

    if not isinstance(payload, Mapping):
        return PlotInput()
    return PlotInput(
        pointer_pos=_vec(payload.get("pointer_pos")),
        dragged_button=_button(payload.get("dragged_button")),
        drag_started=bool(payload.get("drag_started", False)),
        released_button=_button(payload.get("released_button")),
        drag_delta=_vec(payload.get("drag_delta")) or (0.0, 0.0),
        clicked_button=_button(payload.get("clicked_button")),
        double_clicked_button=_button(payload.get("double_clicked_button")),
        scroll_delta=_vec(payload.get("scroll_delta")) or (0.0, 0.0),
        zoom_delta=_scalar(payload.get("zoom_delta"), default=1.0),
        zoom_delta_2d=_vec(payload.get("zoom_delta_2d")),
    )


def _button(raw: object) -> PointerButton | None:
    if raw in _BUTTONS:
        return raw  # type: ignore[return-value]
    return None


def _vec(raw: object) -> Vec2 | None:
    if not isinstance(raw, (list, tuple)) or len(raw) != 2:
        return None
    try:
        return (float(raw[0]), float(raw[1]))
    except (TypeError, ValueError):
        return None


def _scalar(raw: object, *, default: float) -> float:
    if raw is None:
        return default
    try:
        return float(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return default
