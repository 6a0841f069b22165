from __future__ import annotations

from interplot.bounds import PlotBounds


class _SharedBounds:
    __slots__ = ("value",)

    def __init__(self) -> None:
        self.value: PlotBounds | None = None


class LinkedAxisGroup:
    """Bounds shared by every plot configured with this group.

    Copies of a group (``copy.copy`` or ``with_links``) keep pointing at the
    same shared cell. Plots read the cell before drawing and write their
    resolved bounds back afterwards, so the last plot drawn in a frame wins.
    Plots sharing a group must be drawn one after another.
    """

    def __init__(self, link_x: bool = True, link_y: bool = True) -> None:
        self.link_x = bool(link_x)
        self.link_y = bool(link_y)
        self._cell = _SharedBounds()

    @classmethod
    def x(cls) -> "LinkedAxisGroup":
        return cls(link_x=True, link_y=False)

    @classmethod
    def y(cls) -> "LinkedAxisGroup":
        return cls(link_x=False, link_y=True)

    @classmethod
    def both(cls) -> "LinkedAxisGroup":
        return cls(link_x=True, link_y=True)

    def set_link_x(self, link: bool) -> None:
        self.link_x = bool(link)

    def set_link_y(self, link: bool) -> None:
        self.link_y = bool(link)

    def with_links(self, *, link_x: bool, link_y: bool) -> "LinkedAxisGroup":
        out = LinkedAxisGroup.__new__(LinkedAxisGroup)
        out.link_x = bool(link_x)
        out.link_y = bool(link_y)
        out._cell = self._cell
        return out

    def shares_with(self, other: "LinkedAxisGroup") -> bool:
        return self._cell is other._cell

    def is_linked(self, axis: int) -> bool:
        return self.link_x if axis == 0 else self.link_y

    def get(self) -> PlotBounds | None:
        value = self._cell.value
        return None if value is None else value.copy()

    def set(self, bounds: PlotBounds) -> None:
        self._cell.value = bounds.copy()

    def clear(self) -> None:
        self._cell.value = None

    def __repr__(self) -> str:
        return f"LinkedAxisGroup(link_x={self.link_x}, link_y={self.link_y}, bounds={self._cell.value!r})"
