from __future__ import annotations

from typing import Sequence

import numpy as np

from interplot.geometry import Pos2
from interplot.raster.canvas import draw_pixel
from interplot.shapes import RGBA


def draw_segment(dst: np.ndarray, start: Pos2, end: Pos2, color: RGBA, width: int = 1) -> None:
    if not all(np.isfinite(v) for v in (*start, *end)):
        return
    x0, y0 = int(round(start[0])), int(round(start[1]))
    x1, y1 = int(round(end[0])), int(round(end[1]))
    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    err = dx + dy
    # Bresenham; each step stamps a square brush of ``width`` pixels.
    while True:
        _stamp(dst, x0, y0, color, width)
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy


def draw_polyline(dst: np.ndarray, points: Sequence[Pos2], color: RGBA, width: int = 1, *, closed: bool = False) -> None:
    if len(points) < 2:
        return
    for a, b in zip(points, points[1:]):
        draw_segment(dst, a, b, color, width)
    if closed and len(points) > 2:
        draw_segment(dst, points[-1], points[0], color, width)


def _stamp(dst: np.ndarray, x: int, y: int, color: RGBA, width: int) -> None:
    radius = max(0, width // 2)
    if radius == 0:
        draw_pixel(dst, x, y, color)
        return
    for yy in range(y - radius, y + radius + 1):
        for xx in range(x - radius, x + radius + 1):
            draw_pixel(dst, xx, yy, color)
