from __future__ import annotations

import colorsys
import math

from interplot.shapes import RGBA


TRANSPARENT: RGBA = (0, 0, 0, 0)
GOLDEN_RATIO_CONJUGATE = (math.sqrt(5.0) - 1.0) / 2.0


def auto_color(index: int) -> RGBA:
    """Well separated hue for the ``index``-th item without an explicit color."""
    hue = (index * GOLDEN_RATIO_CONJUGATE) % 1.0
    r, g, b = colorsys.hsv_to_rgb(hue, 0.85, 0.5)
    return (int(round(r * 255)), int(round(g * 255)), int(round(b * 255)), 255)


def from_alpha(alpha: float, *, dark_mode: bool) -> RGBA:
    """Grid and label color: white on dark backgrounds, stronger black on light ones."""
    if dark_mode:
        a = max(0.0, min(1.0, alpha))
        return (255, 255, 255, int(round(a * 255)))
    a = max(0.0, min(1.0, 4.0 * alpha))
    return (0, 0, 0, int(round(a * 255)))


def with_alpha(color: RGBA, alpha: float) -> RGBA:
    r, g, b, a = color
    return (r, g, b, int(round(a * max(0.0, min(1.0, alpha)))))


def highlight(color: RGBA) -> RGBA:
    r, g, b, a = color
    return (min(255, int(r * 1.3) + 20), min(255, int(g * 1.3) + 20), min(255, int(b * 1.3) + 20), a)


def rulers_color(*, dark_mode: bool) -> RGBA:
    return (255, 255, 255, 102) if dark_mode else (0, 0, 0, 102)


def text_color(*, dark_mode: bool) -> RGBA:
    return (208, 218, 232, 255) if dark_mode else (40, 40, 40, 255)


def background_color(*, dark_mode: bool) -> RGBA:
    return (12, 16, 23, 255) if dark_mode else (248, 248, 248, 255)


def frame_color(*, dark_mode: bool) -> RGBA:
    return (60, 67, 78, 255) if dark_mode else (190, 190, 190, 255)
