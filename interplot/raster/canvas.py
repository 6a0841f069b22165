from __future__ import annotations

import numpy as np

from interplot.shapes import RGBA


def new_canvas(width: int, height: int, color: RGBA = (0, 0, 0, 255)) -> np.ndarray:
    if width <= 0 or height <= 0:
        raise ValueError("canvas size must be > 0")
    canvas = np.empty((height, width, 4), dtype=np.uint8)
    canvas[:, :] = np.asarray(color, dtype=np.uint8)
    return canvas


def _blend(region: np.ndarray, color: RGBA, coverage: np.ndarray | float = 1.0) -> None:
    a = (color[3] / 255.0) * np.asarray(coverage, dtype=np.float32)
    if np.ndim(a) > 0:
        a = a[..., None]
    src = np.asarray(color[0:3], dtype=np.float32)
    region[..., :3] = (src * a + region[..., :3].astype(np.float32) * (1.0 - a)).astype(np.uint8)
    region[..., 3] = 255


def draw_pixel(dst: np.ndarray, x: int, y: int, color: RGBA) -> None:
    if 0 <= y < dst.shape[0] and 0 <= x < dst.shape[1]:
        _blend(dst[y : y + 1, x], color)


def draw_hline(dst: np.ndarray, x0: int, x1: int, y: int, color: RGBA) -> None:
    if y < 0 or y >= dst.shape[0]:
        return
    xa = max(0, min(x0, x1))
    xb = min(dst.shape[1] - 1, max(x0, x1))
    if xa <= xb:
        _blend(dst[y, xa : xb + 1], color)


def draw_vline(dst: np.ndarray, x: int, y0: int, y1: int, color: RGBA) -> None:
    if x < 0 or x >= dst.shape[1]:
        return
    ya = max(0, min(y0, y1))
    yb = min(dst.shape[0] - 1, max(y0, y1))
    if ya <= yb:
        _blend(dst[ya : yb + 1, x], color)


def fill_rect(dst: np.ndarray, x0: int, y0: int, x1: int, y1: int, color: RGBA) -> None:
    """Blend ``color`` over the inclusive pixel box ``[x0, x1] x [y0, y1]``."""
    xa = max(0, min(x0, x1))
    xb = min(dst.shape[1] - 1, max(x0, x1))
    ya = max(0, min(y0, y1))
    yb = min(dst.shape[0] - 1, max(y0, y1))
    if xa > xb or ya > yb:
        return
    _blend(dst[ya : yb + 1, xa : xb + 1], color)


def blend_mask(dst: np.ndarray, x: int, y: int, mask: np.ndarray, color: RGBA) -> None:
    """Blend ``color`` through an 8-bit coverage ``mask`` placed at ``(x, y)``."""
    h, w = mask.shape
    x0 = max(0, x)
    y0 = max(0, y)
    x1 = min(dst.shape[1], x + w)
    y1 = min(dst.shape[0], y + h)
    if x1 <= x0 or y1 <= y0:
        return
    cov = mask[y0 - y : y1 - y, x0 - x : x1 - x].astype(np.float32) / 255.0
    if not np.any(cov > 0):
        return
    _blend(dst[y0:y1, x0:x1], color, cov)


def blit(dst: np.ndarray, src: np.ndarray, x0: int = 0, y0: int = 0) -> None:
    h, w, _ = src.shape
    xa = max(0, x0)
    ya = max(0, y0)
    xb = min(dst.shape[1], x0 + w)
    yb = min(dst.shape[0], y0 + h)
    if ya >= yb or xa >= xb:
        return
    view = dst[ya:yb, xa:xb]
    patch = src[ya - y0 : yb - y0, xa - x0 : xb - x0]
    alpha = patch[:, :, 3:4].astype(np.float32) / 255.0
    view[:, :, :3] = (patch[:, :, :3] * alpha + view[:, :, :3] * (1.0 - alpha)).astype(np.uint8)
    view[:, :, 3] = 255
