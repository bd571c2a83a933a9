"""Shared value types and level constants used across captcha kinds."""

from __future__ import annotations

from enum import IntEnum
from typing import NamedTuple


class RangeVal(NamedTuple):
    """An inclusive integer range."""

    min: int
    max: int


class Size(NamedTuple):
    """A width/height pair in pixels."""

    width: int
    height: int


class Point(NamedTuple):
    """A pixel coordinate."""

    x: int
    y: int


class Distort(IntEnum):
    """Background distortion levels."""

    NONE = 0
    LEVEL1 = 1
    LEVEL2 = 2
    LEVEL3 = 3
    LEVEL4 = 4
    LEVEL5 = 5


class Quality(IntEnum):
    """JPEG quality levels."""

    NONE = 100
    LEVEL1 = 95
    LEVEL2 = 85
    LEVEL3 = 75
    LEVEL4 = 65
    LEVEL5 = 55