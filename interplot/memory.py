from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Hashable

from interplot.bounds import PlotBounds
from interplot.geometry import Pos2, ScreenRect
from interplot.transform import ScreenTransform


LOGGER = logging.getLogger(__name__)


@dataclass
class PlotMemory:
    """State one plot carries from frame to frame."""

    auto_bounds: bool
    hovered_entry: str | None
    hidden_items: set[str]
    min_auto_bounds: PlotBounds
    last_screen_transform: ScreenTransform
    last_click_pos_for_zoom: Pos2 | None = None

    @classmethod
    def initial(
        cls,
        rect: ScreenRect,
        min_auto_bounds: PlotBounds,
        *,
        x_centered: bool = False,
        y_centered: bool = False,
    ) -> "PlotMemory":
        return cls(
            auto_bounds=not min_auto_bounds.is_valid(),
            hovered_entry=None,
            hidden_items=set(),
            min_auto_bounds=min_auto_bounds.copy(),
            last_screen_transform=ScreenTransform(rect, min_auto_bounds, x_centered, y_centered),
            last_click_pos_for_zoom=None,
        )

    def copy(self) -> "PlotMemory":
        return PlotMemory(
            auto_bounds=self.auto_bounds,
            hovered_entry=self.hovered_entry,
            hidden_items=set(self.hidden_items),
            min_auto_bounds=self.min_auto_bounds.copy(),
            last_screen_transform=self.last_screen_transform.copy(),
            last_click_pos_for_zoom=self.last_click_pos_for_zoom,
        )


@dataclass
class PlotMemoryStore:
    """Per-identity plot memory.

    Records go in and come out as copies, so a frame that is abandoned halfway
    never leaves a half-updated record behind.
    """

    _records: dict[Hashable, PlotMemory] = field(default_factory=dict)

    def load(self, key: Hashable) -> PlotMemory | None:
        record = self._records.get(key)
        return None if record is None else record.copy()

    def store(self, key: Hashable, memory: PlotMemory) -> None:
        if key not in self._records:
            LOGGER.debug("creating plot memory for %r", key)
        self._records[key] = memory.copy()

    def evict(self, key: Hashable) -> bool:
        return self._records.pop(key, None) is not None

    def clear(self) -> None:
        self._records.clear()

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, key: object) -> bool:
        return key in self._records
