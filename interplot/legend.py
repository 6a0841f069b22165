from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING, Literal, Protocol, Sequence

from interplot.colors import background_color, frame_color, text_color, with_alpha
from interplot.geometry import Pos2, ScreenRect
from interplot.shapes import RGBA, LineSegment, RectShape, Shape, Stroke, TextShape

if TYPE_CHECKING:
    from interplot.items.base import PlotItem


LOGGER = logging.getLogger(__name__)

LegendCorner = Literal["left_top", "right_top", "left_bottom", "right_bottom"]

LEGEND_CORNERS: tuple[LegendCorner, ...] = ("left_top", "right_top", "left_bottom", "right_bottom")

# Rough monospace advance; only used to size the legend box.
GLYPH_WIDTH_RATIO = 0.6


@dataclass(frozen=True)
class LegendOutcome:
    hidden_items: frozenset[str]
    hovered_entry: str | None


class LegendCollaborator(Protocol):
    def update(self, items: Sequence["PlotItem"], hidden_items: set[str]) -> LegendOutcome: ...


@dataclass(frozen=True)
class LegendEntry:
    name: str
    color: RGBA
    checked: bool


@dataclass(frozen=True)
class LegendLayout:
    rect: ScreenRect
    font_px: float
    swatch_w: int
    item_gap: int
    pad: int
    item_h: int

    def row_rect(self, index: int) -> ScreenRect:
        y = self.rect.top + self.pad + index * (self.item_h + self.item_gap)
        return ScreenRect(self.rect.left, y, self.rect.right, y + self.item_h)


class Legend:
    """Name-keyed legend: one row per distinct item name, in insertion order.

    Clicking a row toggles every item with that name; hovering a row reports
    the name so the plot can highlight those items on the next frame.
    """

    def __init__(self, corner: LegendCorner = "right_top", *, font_px: float = 12.0, background_alpha: float = 0.75) -> None:
        self.set_corner(corner)
        if font_px <= 0:
            raise ValueError("font_px must be > 0")
        self.font_px = float(font_px)
        self.background_alpha = float(background_alpha)
        self._entries: dict[str, LegendEntry] = {}
        self._pending_toggles: list[str] = []
        self._hovered: str | None = None

    def set_corner(self, corner: LegendCorner) -> "Legend":
        if corner not in LEGEND_CORNERS:
            raise ValueError(f"corner must be one of {LEGEND_CORNERS}, got {corner!r}")
        self.corner: LegendCorner = corner
        return self

    def entries(self) -> tuple[LegendEntry, ...]:
        return tuple(self._entries.values())

    def hovered(self) -> str | None:
        return self._hovered

    def toggle(self, name: str) -> bool:
        """Queue a visibility flip for ``name``; returns False for unknown names."""
        if name not in self._entries:
            return False
        self._pending_toggles.append(name)
        return True

    def hover(self, name: str | None) -> None:
        self._hovered = name if name in self._entries else None

    def update(self, items: Sequence["PlotItem"], hidden_items: set[str]) -> LegendOutcome:
        hidden = set(hidden_items)
        for name in self._pending_toggles:
            if name in hidden:
                hidden.remove(name)
            else:
                hidden.add(name)
            LOGGER.debug("legend toggled %r, hidden now %s", name, sorted(hidden))
        self._pending_toggles.clear()

        entries: dict[str, LegendEntry] = {}
        for item in items:
            name = item.name()
            if not name or name in entries:
                continue
            entries[name] = LegendEntry(name=name, color=item.color(), checked=name not in hidden)
        self._entries = entries
        if self._hovered not in entries:
            self._hovered = None
        # Names that disappeared keep their hidden state for when they come back.
        return LegendOutcome(hidden_items=frozenset(hidden), hovered_entry=self._hovered)

    def layout(self, frame: ScreenRect) -> LegendLayout | None:
        if not self._entries:
            return None
        font_px = self.font_px
        swatch_w = int(max(10, font_px * 1.6))
        item_gap = int(max(3, font_px * 0.5))
        pad = int(max(5, font_px * 0.55))
        item_h = int(round(font_px))
        text_w = max(len(name) for name in self._entries) * font_px * GLYPH_WIDTH_RATIO
        box_w = pad * 2 + swatch_w + 6 + text_w
        n = len(self._entries)
        box_h = pad * 2 + n * item_h + (n - 1) * item_gap
        margin = 6.0
        x = frame.left + margin if self.corner.startswith("left") else frame.right - margin - box_w
        y = frame.top + margin if self.corner.endswith("top") else frame.bottom - margin - box_h
        x = max(frame.left, x)
        y = max(frame.top, y)
        return LegendLayout(
            rect=ScreenRect.from_min_size((x, y), (box_w, box_h)),
            font_px=font_px,
            swatch_w=swatch_w,
            item_gap=item_gap,
            pad=pad,
            item_h=item_h,
        )

    def entry_at(self, pointer: Pos2, frame: ScreenRect) -> str | None:
        layout = self.layout(frame)
        if layout is None or not layout.rect.contains(pointer):
            return None
        for i, entry in enumerate(self._entries.values()):
            if layout.row_rect(i).contains(pointer):
                return entry.name
        return None

    def handle_pointer(self, pointer: Pos2 | None, *, clicked: bool, frame: ScreenRect) -> bool:
        """Hover and click the legend rows; True when the pointer is over the legend box."""
        if pointer is None:
            self._hovered = None
            return False
        layout = self.layout(frame)
        if layout is None or not layout.rect.contains(pointer):
            self._hovered = None
            return False
        name = self.entry_at(pointer, frame)
        self._hovered = name
        if clicked and name is not None:
            self.toggle(name)
        return True

    def get_shapes(self, frame: ScreenRect, *, dark_mode: bool) -> list[Shape]:
        layout = self.layout(frame)
        if layout is None:
            return []
        shapes: list[Shape] = [
            RectShape(
                rect=layout.rect,
                fill=with_alpha(background_color(dark_mode=dark_mode), self.background_alpha),
                stroke=Stroke(1.0, frame_color(dark_mode=dark_mode)),
            )
        ]
        for i, entry in enumerate(self._entries.values()):
            row = layout.row_rect(i)
            row_y = (row.top + row.bottom) * 0.5
            sw_x0 = layout.rect.left + layout.pad
            sw_x1 = sw_x0 + layout.swatch_w - 1
            color = entry.color if entry.checked else with_alpha(entry.color, 0.3)
            width = 3.0 if entry.name == self._hovered else 1.5
            shapes.append(LineSegment(start=(sw_x0, row_y), end=(sw_x1, row_y), stroke=Stroke(width, color)))
            label = text_color(dark_mode=dark_mode)
            if not entry.checked:
                label = with_alpha(label, 0.5)
            shapes.append(
                TextShape(pos=(sw_x1 + 6, row.top), text=entry.name, color=label, anchor="left_top", font_size_px=layout.font_px)
            )
        return shapes
