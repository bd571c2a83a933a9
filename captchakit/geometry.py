"""Geometry helpers: affine matrices, rotation sizes and rectangle types."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, NamedTuple


@dataclass(frozen=True)
class Matrix:
    """A 2D affine transform: x' = xx*x + xy*y + x0, y' = yx*x + yy*y + y0."""

    xx: float = 1.0
    yx: float = 0.0
    xy: float = 0.0
    yy: float = 1.0
    x0: float = 0.0
    y0: float = 0.0

    def translate(self, x: float, y: float) -> Matrix:
        """Return this transform preceded by a translation."""
        return Matrix(1, 0, 0, 1, x, y).multiply(self)

    def multiply(self, other: Matrix) -> Matrix:
        """Return the product of this matrix and ``other``."""
        a, b = self, other
        return Matrix(
            a.xx * b.xx + a.yx * b.xy,
            a.xx * b.yx + a.yx * b.yy,
            a.xy * b.xx + a.yy * b.xy,
            a.xy * b.yx + a.yy * b.yy,
            a.x0 * b.xx + a.y0 * b.xy + b.x0,
            a.x0 * b.yx + a.y0 * b.yy + b.y0,
        )

    def rotate(self, angle: float) -> Matrix:
        """Return this transform preceded by a rotation of ``angle`` radians."""
        c = math.cos(angle)
        s = math.sin(angle)
        return Matrix(c, s, -s, c, 0, 0).multiply(self)


class AreaRect(NamedTuple):
    """A rectangular area given by its extremes."""

    min_x: int
    max_x: int
    min_y: int
    max_y: int


class PositionRect(NamedTuple):
    """A rectangle given by position and size."""

    x: int
    y: int
    width: int
    height: int


@dataclass
class DrawStringParams:
    """Parameters for drawing a string onto a canvas."""

    color: tuple[int, ...]
    size: int
    width: int = 0
    height: int = 0
    font_dpi: int = 72
    text: str = ""
    font: Any = None


def rotate_point(x: float, y: float, sin: float, cos: float) -> tuple[float, float]:
    """Rotate a point about the origin given the sine and cosine of the angle."""
    return x * cos - y * sin, x * sin + y * cos


def rotated_size(w: int, h: int, angle: float) -> tuple[int, int]:
    """Return the bounding size of a w x h area rotated by ``angle`` degrees."""
    if w <= 0 or h <= 0:
        return 0, 0
    rad = math.pi * angle / 180
    sin, cos = math.sin(rad), math.cos(rad)
    corners = [
        (0.0, 0.0),
        rotate_point(w - 1, 0, sin, cos),
        rotate_point(w - 1, h - 1, sin, cos),
        rotate_point(0, h - 1, sin, cos),
    ]
    xs = [p[0] for p in corners]
    ys = [p[1] for p in corners]
    width = max(xs) - min(xs) + 1
    if width - math.floor(width) > 0.1:
        width += 1
    height = max(ys) - min(ys) + 1
    if height - math.floor(height) > 0.1:
        height += 1
    return int(width), int(height)


def calc_resized_rect(
    src: tuple[int, int, int, int], width: int, height: int, center_align: bool
) -> tuple[int, int, int, int]:
    """Fit the box ``src`` into width x height keeping its ratio; returns a box."""
    src_w = src[2] - src[0]
    src_h = src[3] - src[1]
    if width * src_h < height * src_w:
        target_h = int(src_h * (width / src_w))
        pad = int((height - target_h) / 2) if center_align else 0
        return (0, pad, width, pad + target_h)
    target_w = int(src_w * (height / src_h))
    pad = int((width - target_w) / 2) if center_align else 0
    return (pad, 0, pad + target_w, height)