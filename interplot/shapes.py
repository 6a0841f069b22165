from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypeAlias

import numpy as np

from interplot.geometry import Pos2, ScreenRect


RGBA = tuple[int, int, int, int]

TextAnchor = Literal["left_top", "left_bottom", "center_center", "right_top", "right_bottom"]


@dataclass(frozen=True)
class Stroke:
    width: float
    color: RGBA


@dataclass(frozen=True)
class LineSegment:
    start: Pos2
    end: Pos2
    stroke: Stroke


@dataclass(frozen=True)
class Path:
    points: tuple[Pos2, ...]
    stroke: Stroke
    closed: bool = False
    fill: RGBA | None = None


@dataclass(frozen=True)
class RectShape:
    rect: ScreenRect
    fill: RGBA | None = None
    stroke: Stroke | None = None
    corner_radius: float = 0.0


@dataclass(frozen=True)
class CircleShape:
    center: Pos2
    radius: float
    fill: RGBA | None = None
    stroke: Stroke | None = None


@dataclass(frozen=True)
class TextShape:
    pos: Pos2
    text: str
    color: RGBA
    anchor: TextAnchor = "left_top"
    font_size_px: float = 12.0


@dataclass(frozen=True, eq=False)
class ImageShape:
    rect: ScreenRect
    rgba: np.ndarray
    tint: RGBA = (255, 255, 255, 255)


Shape: TypeAlias = LineSegment | Path | RectShape | CircleShape | TextShape | ImageShape


def vertical_line(x: float, frame: ScreenRect, stroke: Stroke) -> LineSegment:
    return LineSegment(start=(x, frame.top), end=(x, frame.bottom), stroke=stroke)


def horizontal_line(y: float, frame: ScreenRect, stroke: Stroke) -> LineSegment:
    return LineSegment(start=(frame.left, y), end=(frame.right, y), stroke=stroke)
