from __future__ import annotations

import numpy as np

from interplot.raster.canvas import blend_mask
from interplot.shapes import RGBA


def disc_mask(radius: float, *, ring_width: float | None = None) -> np.ndarray:
    """Coverage mask of a disc (or a ring when ``ring_width`` is set) centred in its box."""
    r = max(0.5, float(radius))
    n = int(np.ceil(r)) * 2 + 1
    c = n // 2
    yy, xx = np.mgrid[0:n, 0:n]
    dist = np.hypot(xx - c, yy - c)
    inside = dist <= r
    if ring_width is not None:
        inside &= dist >= r - max(1.0, ring_width)
    return np.where(inside, 255, 0).astype(np.uint8)


def draw_disc(dst: np.ndarray, cx: float, cy: float, radius: float, color: RGBA, *, ring_width: float | None = None) -> None:
    if not (np.isfinite(cx) and np.isfinite(cy)):
        return
    mask = disc_mask(radius, ring_width=ring_width)
    half = mask.shape[0] // 2
    blend_mask(dst, int(round(cx)) - half, int(round(cy)) - half, mask, color)
