from __future__ import annotations

import logging
from typing import Iterable

import numpy as np
from PIL import Image, ImageDraw

from interplot.geometry import Pos2, ScreenRect
from interplot.raster.canvas import blend_mask, blit, draw_hline, draw_vline, fill_rect, new_canvas
from interplot.raster.draw_lines import draw_polyline, draw_segment
from interplot.raster.draw_markers import draw_disc
from interplot.raster.draw_text import draw_text
from interplot.shapes import RGBA, CircleShape, ImageShape, LineSegment, Path, RectShape, Shape, TextShape


LOGGER = logging.getLogger(__name__)


def render_shapes(canvas: np.ndarray, shapes: Iterable[Shape]) -> np.ndarray:
    """Paint a display list onto an ``(H, W, 4)`` uint8 canvas in list order."""
    for shape in shapes:
        if isinstance(shape, LineSegment):
            draw_segment(canvas, shape.start, shape.end, shape.stroke.color, _px(shape.stroke.width))
        elif isinstance(shape, Path):
            _paint_path(canvas, shape)
        elif isinstance(shape, RectShape):
            _paint_rect(canvas, shape)
        elif isinstance(shape, CircleShape):
            if shape.fill is not None:
                draw_disc(canvas, shape.center[0], shape.center[1], shape.radius, shape.fill)
            if shape.stroke is not None:
                draw_disc(
                    canvas,
                    shape.center[0],
                    shape.center[1],
                    shape.radius,
                    shape.stroke.color,
                    ring_width=shape.stroke.width,
                )
        elif isinstance(shape, TextShape):
            draw_text(canvas, shape.pos[0], shape.pos[1], shape.text, shape.color, anchor=shape.anchor, font_size_px=shape.font_size_px)
        elif isinstance(shape, ImageShape):
            _paint_image(canvas, shape)
        else:
            raise TypeError(f"unsupported shape {type(shape).__name__}")
    return canvas


def render_frame(width: int, height: int, shapes: Iterable[Shape], background: RGBA = (0, 0, 0, 255)) -> np.ndarray:
    return render_shapes(new_canvas(width, height, background), shapes)


def save_png(canvas: np.ndarray, path: str) -> None:
    Image.fromarray(np.ascontiguousarray(canvas)).save(path)


def _px(width: float) -> int:
    return max(1, int(round(width)))


def _paint_path(canvas: np.ndarray, shape: Path) -> None:
    points = [p for p in shape.points if np.isfinite(p[0]) and np.isfinite(p[1])]
    if shape.fill is not None and len(points) >= 3:
        _fill_polygon(canvas, points, shape.fill)
    draw_polyline(canvas, points, shape.stroke.color, _px(shape.stroke.width), closed=shape.closed)


def _fill_polygon(canvas: np.ndarray, points: list[Pos2], color: RGBA) -> None:
    h, w = canvas.shape[:2]
    mask = Image.new("L", (w, h), 0)
    ImageDraw.Draw(mask).polygon([(float(x), float(y)) for x, y in points], fill=255)
    blend_mask(canvas, 0, 0, np.asarray(mask, dtype=np.uint8), color)


def _paint_rect(canvas: np.ndarray, shape: RectShape) -> None:
    r = shape.rect
    x0, y0 = int(round(r.left)), int(round(r.top))
    x1, y1 = int(round(r.right)), int(round(r.bottom))
    if shape.fill is not None:
        fill_rect(canvas, x0, y0, x1, y1, shape.fill)
    if shape.stroke is not None:
        color = shape.stroke.color
        for inset in range(_px(shape.stroke.width)):
            draw_hline(canvas, x0 + inset, x1 - inset, y0 + inset, color)
            draw_hline(canvas, x0 + inset, x1 - inset, y1 - inset, color)
            draw_vline(canvas, x0 + inset, y0 + inset, y1 - inset, color)
            draw_vline(canvas, x1 - inset, y0 + inset, y1 - inset, color)


def _paint_image(canvas: np.ndarray, shape: ImageShape) -> None:
    rect: ScreenRect = shape.rect
    w = int(round(rect.width))
    h = int(round(rect.height))
    if w <= 0 or h <= 0:
        return
    if w * h > canvas.shape[0] * canvas.shape[1] * 16:
        LOGGER.debug("skipping image scaled to %dx%d", w, h)
        return
    scaled = np.asarray(Image.fromarray(np.ascontiguousarray(shape.rgba)).resize((w, h), Image.Resampling.NEAREST), dtype=np.float32)
    tint = np.asarray(shape.tint, dtype=np.float32) / 255.0
    patch = np.clip(scaled * tint, 0, 255).astype(np.uint8)
    blit(canvas, patch, int(round(rect.left)), int(round(rect.top)))
