from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Literal

from interplot.bounds import PlotBounds
from interplot.geometry import Pos2, ScreenRect
from interplot.input import PlotInput, PointerButton
from interplot.transform import ScreenTransform


LOGGER = logging.getLogger(__name__)

InteractionPhase = Literal[
    "idle",
    "panning",
    "box_zoom_pending",
    "box_zoom_dragging",
    "box_zoom_commit",
]


@dataclass(frozen=True)
class InteractionConfig:
    allow_zoom: bool = True
    allow_drag: bool = True
    allow_boxed_zoom: bool = True
    boxed_zoom_button: PointerButton = "secondary"
    # Zoom both axes by the same factor; used when a data aspect is enforced.
    uniform_zoom: bool = False

    def box_zoom_owns(self, button: PointerButton) -> bool:
        return self.allow_boxed_zoom and self.boxed_zoom_button == button


@dataclass(frozen=True)
class InteractionResult:
    phase: InteractionPhase
    auto_bounds: bool
    last_click_pos_for_zoom: Pos2 | None
    zoom_box: ScreenRect | None = None


def box_zoom_bounds(transform: ScreenTransform, a: Pos2, b: Pos2) -> PlotBounds:
    """Data bounds spanned by two opposite screen corners, in any order."""
    va = transform.value_from_position(a)
    vb = transform.value_from_position(b)
    return PlotBounds.from_min_max(
        (min(va.x, vb.x), min(va.y, vb.y)),
        (max(va.x, vb.x), max(va.y, vb.y)),
    )


def apply_interactions(
    transform: ScreenTransform,
    plot_input: PlotInput,
    hover_pos: Pos2 | None,
    config: InteractionConfig,
    *,
    auto_bounds: bool,
    last_click_pos_for_zoom: Pos2 | None,
) -> InteractionResult:
    """Apply one frame of box zoom, drag pan and wheel/pinch input to ``transform``.

    ``transform`` is mutated in place. The press position of an unfinished box
    zoom is returned so the caller can carry it to the next frame.
    """

    phase: InteractionPhase = "idle"
    zoom_box: ScreenRect | None = None

    if config.allow_boxed_zoom:
        button = config.boxed_zoom_button
        if plot_input.drag_started and plot_input.dragged_by(button) and hover_pos is not None:
            last_click_pos_for_zoom = hover_pos
            phase = "box_zoom_pending"
        box_start = last_click_pos_for_zoom
        if box_start is not None and hover_pos is not None:
            if plot_input.dragged_by(button):
                zoom_box = ScreenRect.from_two_pos(box_start, hover_pos)
                if phase == "idle":
                    phase = "box_zoom_dragging"
            if plot_input.drag_released_by(button):
                new_bounds = box_zoom_bounds(transform, box_start, hover_pos)
                if new_bounds.is_valid():
                    transform.set_bounds(new_bounds)
                    auto_bounds = False
                    LOGGER.debug("box zoom committed: %r", new_bounds)
                else:
                    auto_bounds = True
                    LOGGER.debug("box zoom collapsed to %r, re-enabling auto bounds", new_bounds)
                last_click_pos_for_zoom = None
                phase = "box_zoom_commit"
        elif box_start is not None and plot_input.drag_released_by(button):
            LOGGER.debug("box zoom released without a pointer position, aborting")
            last_click_pos_for_zoom = None

    if (
        config.allow_drag
        and plot_input.dragged_by("primary")
        and not config.box_zoom_owns("primary")
    ):
        dx, dy = plot_input.drag_delta
        transform.translate_bounds((-dx, -dy))
        auto_bounds = False
        if phase == "idle":
            phase = "panning"

    if config.allow_zoom and hover_pos is not None:
        zoom_factor = plot_input.zoom_factor(uniform=config.uniform_zoom)
        if zoom_factor != (1.0, 1.0):
            transform.zoom(zoom_factor, hover_pos)
            auto_bounds = False
        sx, sy = plot_input.scroll_delta
        if (sx, sy) != (0.0, 0.0):
            transform.translate_bounds((-sx, -sy))
            auto_bounds = False

    return InteractionResult(
        phase=phase,
        auto_bounds=auto_bounds,
        last_click_pos_for_zoom=last_click_pos_for_zoom,
        zoom_box=zoom_box,
    )
