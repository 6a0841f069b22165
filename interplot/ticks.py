from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
import logging
import math
from typing import Callable, Literal

from interplot.bounds import Value
from interplot.colors import from_alpha
from interplot.geometry import Pos2, ScreenRect, remap_clamp
from interplot.shapes import LineSegment, Shape, Stroke, TextShape
from interplot.transform import ScreenTransform


LOGGER = logging.getLogger(__name__)

BASE = 10
MIN_LINE_SPACING_PX = 6.0
GRID_SPACING_RANGE = (MIN_LINE_SPACING_PX, 300.0)
GRID_ALPHA_RANGE = (0.0, 0.15)
# Labels need much more room than grid lines, so they fade out sooner.
LABEL_SPACING_RANGE = (40.0, 150.0)
LABEL_ALPHA_RANGE = (0.0, 0.4)
FALLBACK_STEP = 1.0
MAX_GRID_LINES = 1000
DEFAULT_LABEL_DECIMALS = 5
LABEL_FONT_PX = 12.0

GridTier = Literal["thick", "medium", "thin"]

AxisFormatter = Callable[[float], str]


@dataclass(frozen=True)
class GridLine:
    axis: int
    value: float
    position: float
    tier: GridTier
    spacing_px: float
    alpha: float


@dataclass(frozen=True)
class AxisLabel:
    axis: int
    value: float
    text: str
    pos: Pos2
    alpha: float


@dataclass(frozen=True)
class AxisTicks:
    axis: int
    step: float
    step_px: float
    lines: tuple[GridLine, ...]
    labels: tuple[AxisLabel, ...]


def grid_step(dvalue_dpos: float, min_spacing_px: float = MIN_LINE_SPACING_PX) -> float:
    """Smallest power of ten whose on-screen spacing is at least ``min_spacing_px``."""
    raw = abs(dvalue_dpos) * min_spacing_px
    if not math.isfinite(raw) or raw <= 0.0:
        LOGGER.debug("degenerate data-per-pixel %r, using fallback grid step", dvalue_dpos)
        return FALLBACK_STEP
    step = float(BASE) ** math.ceil(math.log10(raw))
    if not math.isfinite(step) or step <= 0.0:
        LOGGER.debug("grid step overflowed for %r, using fallback grid step", dvalue_dpos)
        return FALLBACK_STEP
    return step


def classify_tick(index: int) -> tuple[GridTier, int]:
    """Tier of the ``index``-th step from zero and its spacing multiplier."""
    if index % (BASE * BASE) == 0:
        return "thick", BASE * BASE
    if index % BASE == 0:
        return "medium", BASE
    return "thin", 1


def grid_alpha(spacing_px: float) -> float:
    return remap_clamp(spacing_px, GRID_SPACING_RANGE, GRID_ALPHA_RANGE)


def label_alpha(spacing_px: float) -> float:
    return remap_clamp(spacing_px, LABEL_SPACING_RANGE, LABEL_ALPHA_RANGE)


def format_tick_value(value: float, decimals: int = DEFAULT_LABEL_DECIMALS) -> str:
    if not math.isfinite(value):
        return str(value)
    d = Decimal(repr(value))
    try:
        q = d.quantize(Decimal("1").scaleb(-decimals))
    except InvalidOperation:
        q = d
    out = format(q, "f")
    if "." in out:
        out = out.rstrip("0").rstrip(".")
    if out == "-0":
        out = "0"
    return out


def generate_axis_ticks(
    transform: ScreenTransform,
    axis: int,
    formatter: AxisFormatter | None = None,
) -> AxisTicks:
    if axis not in (0, 1):
        raise ValueError("axis must be 0 (x) or 1 (y)")
    bounds = transform.bounds
    frame = transform.frame
    step = grid_step(transform.dvalue_dpos()[axis])
    step_px = abs(transform.dpos_dvalue()[axis] * step)

    lo = bounds.min[axis]
    hi = bounds.max[axis]
    cross = 1 - axis
    # Labels sit on the other axis' zero, clamped into view.
    value_cross = min(max(0.0, bounds.min[cross]), bounds.max[cross])

    lines: list[GridLine] = []
    labels: list[AxisLabel] = []
    first = step * math.floor(lo / step)
    for i in range(MAX_GRID_LINES + 1):
        value_main = first + step * i
        if value_main > hi:
            break
        if i == MAX_GRID_LINES:
            LOGGER.debug("grid for axis %d truncated at %d lines", axis, MAX_GRID_LINES)
            break
        if value_main < lo:
            continue
        n = int(round(value_main / step))
        if abs(value_main) <= step * 1e-9:
            value_main = 0.0
        tier, multiplier = classify_tick(n)
        spacing_px = step_px * multiplier
        value = Value(value_main, value_cross) if axis == 0 else Value(value_cross, value_main)
        pos = transform.position_from_value(value)

        line_a = grid_alpha(spacing_px)
        if line_a > 0.0:
            lines.append(GridLine(axis=axis, value=value_main, position=pos[axis], tier=tier, spacing_px=spacing_px, alpha=line_a))

        text_a = label_alpha(spacing_px)
        if text_a > 0.0:
            text = formatter(value_main) if formatter is not None else format_tick_value(value_main)
            # Empty text hides the label at this resolution but keeps the grid line.
            if text:
                labels.append(AxisLabel(axis=axis, value=value_main, text=text, pos=_label_pos(pos, axis, text, frame), alpha=text_a))

    return AxisTicks(axis=axis, step=step, step_px=step_px, lines=tuple(lines), labels=tuple(labels))


def _label_pos(pos: Pos2, axis: int, text: str, frame: ScreenRect) -> Pos2:
    x, y = pos[0] + 1.0, pos[1]
    text_h = LABEL_FONT_PX * (text.count("\n") + 1)
    text_w = LABEL_FONT_PX * 0.6 * max(len(row) for row in text.split("\n"))
    if axis == 0:
        y = min(max(y, frame.top + 1.0 + text_h), frame.bottom - 2.0)
    else:
        x = min(max(x, frame.left + 1.0), frame.right - 2.0 - text_w)
    return (x, y)


def axis_shapes(ticks: AxisTicks, transform: ScreenTransform, *, dark_mode: bool = True) -> list[Shape]:
    frame = transform.frame
    shapes: list[Shape] = []
    for line in ticks.lines:
        stroke = Stroke(1.0, from_alpha(line.alpha, dark_mode=dark_mode))
        if ticks.axis == 0:
            shapes.append(LineSegment(start=(line.position, frame.top), end=(line.position, frame.bottom), stroke=stroke))
        else:
            shapes.append(LineSegment(start=(frame.left, line.position), end=(frame.right, line.position), stroke=stroke))
    for label in ticks.labels:
        shapes.append(
            TextShape(
                pos=label.pos,
                text=label.text,
                color=from_alpha(label.alpha, dark_mode=dark_mode),
                anchor="left_bottom",
                font_size_px=LABEL_FONT_PX,
            )
        )
    return shapes
