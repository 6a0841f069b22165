from __future__ import annotations

from functools import lru_cache
import logging
from pathlib import Path

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from interplot.raster.canvas import blend_mask
from interplot.shapes import RGBA, TextAnchor


LOGGER = logging.getLogger(__name__)

DEFAULT_FONT_FAMILY = "DejaVu Sans Mono"
DEFAULT_FONT_SIZE_PX = 12.0
MONO_FONT_FALLBACK_PATTERNS = (
    "dejavusansmono",
    "dejavu sans mono",
    "menlo",
    "monaco",
    "courier new",
    "courier",
    "liberationmono",
)
LINE_SPACING = 1.2


def draw_text(
    dst: np.ndarray,
    x: float,
    y: float,
    text: str,
    color: RGBA,
    *,
    anchor: TextAnchor = "left_top",
    font_family: str = DEFAULT_FONT_FAMILY,
    font_size_px: float = DEFAULT_FONT_SIZE_PX,
) -> None:
    if not text:
        return
    font = _load_font(font_family, font_size_px)
    mask = _render_mask(text, font, font_size_px)
    h, w = mask.shape
    ox, oy = anchor_offset(anchor, (w, h))
    blend_mask(dst, int(round(x - ox)), int(round(y - oy)), mask, color)


def text_size(
    text: str,
    *,
    font_family: str = DEFAULT_FONT_FAMILY,
    font_size_px: float = DEFAULT_FONT_SIZE_PX,
) -> tuple[int, int]:
    font = _load_font(font_family, font_size_px)
    if not text:
        return (0, max(1, int(round(font_size_px))))
    mask = _render_mask(text, font, font_size_px)
    return (mask.shape[1], mask.shape[0])


def anchor_offset(anchor: TextAnchor, size: tuple[int, int]) -> tuple[float, float]:
    """Offset from the anchor point to the top-left corner of a ``size`` box."""
    w, h = size
    if anchor == "left_top":
        return (0.0, 0.0)
    if anchor == "left_bottom":
        return (0.0, float(h))
    if anchor == "center_center":
        return (w * 0.5, h * 0.5)
    if anchor == "right_top":
        return (float(w), 0.0)
    if anchor == "right_bottom":
        return (float(w), float(h))
    raise ValueError(f"unknown text anchor {anchor!r}")


@lru_cache(maxsize=256)
def _render_mask(text: str, font: ImageFont.FreeTypeFont | ImageFont.ImageFont, font_size_px: float) -> np.ndarray:
    rows = text.split("\n")
    line_h = max(1, int(round(font_size_px * LINE_SPACING)))
    width = 1
    for row in rows:
        if row:
            left, _, right, _ = font.getbbox(row)
            width = max(width, int(right - left) + 1)
    image = Image.new("L", (width, line_h * len(rows)), 0)
    draw = ImageDraw.Draw(image)
    for i, row in enumerate(rows):
        if row:
            left, _, _, _ = font.getbbox(row)
            draw.text((-left, i * line_h), row, fill=255, font=font)
    return np.asarray(image, dtype=np.uint8)


@lru_cache(maxsize=64)
def _load_font(font_family: str, font_size_px: float) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    size = max(1, int(round(font_size_px)))
    font_path = _resolve_font_path(font_family)
    if font_path is None:
        LOGGER.debug("no font found for %r, using Pillow's default", font_family)
        return ImageFont.load_default()
    try:
        return ImageFont.truetype(str(font_path), size=size)
    except OSError:
        LOGGER.debug("failed to load %s, using Pillow's default", font_path)
        return ImageFont.load_default()


@lru_cache(maxsize=16)
def _resolve_font_path(font_family: str) -> Path | None:
    wanted = font_family.strip().lower() or DEFAULT_FONT_FAMILY.lower()
    patterns = (wanted,) + MONO_FONT_FALLBACK_PATTERNS

    font_dirs = [
        Path.home() / "Library" / "Fonts",
        Path("/Library/Fonts"),
        Path("/System/Library/Fonts"),
        Path("/usr/share/fonts"),
        Path("/usr/local/share/fonts"),
    ]
    candidates: list[Path] = []
    for base in font_dirs:
        if base.exists():
            for ext in ("*.ttf", "*.otf", "*.ttc"):
                candidates.extend(base.rglob(ext))

    for pattern in patterns:
        p = pattern.replace(" ", "")
        for path in candidates:
            if p in path.name.lower().replace(" ", ""):
                return path
    return None
