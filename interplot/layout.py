from __future__ import annotations

from interplot.geometry import ScreenRect, Vec2


DEFAULT_MIN_SIZE: Vec2 = (64.0, 64.0)


def resolve_plot_size(
    available: Vec2,
    *,
    width: float | None = None,
    height: float | None = None,
    view_aspect: float | None = None,
    min_size: Vec2 = DEFAULT_MIN_SIZE,
) -> Vec2:
    """Widget size from explicit width/height, a view aspect and the space left by the host.

    An explicit size wins; otherwise the missing side follows ``view_aspect``
    (width / height) and falls back to the available space. Both sides are
    clamped to ``min_size``.
    """

    if width is None:
        if height is not None and view_aspect is not None:
            w = height * view_aspect
        else:
            w = available[0]
    else:
        w = width
    w = max(float(w), float(min_size[0]))

    if height is None:
        h = w / view_aspect if view_aspect is not None else available[1]
    else:
        h = height
    h = max(float(h), float(min_size[1]))
    return (w, h)


def allocate_rect(available_rect: ScreenRect, size: Vec2) -> ScreenRect:
    """Place ``size`` at the top-left corner of the host's free space."""
    return ScreenRect.from_min_size((available_rect.left, available_rect.top), size)
