"""Random selection of captcha resources."""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import TypeVar

from PIL import Image

from .helper import rand_index
from .options import Point
from .rand import rand_int

T = TypeVar("T")


def _pick(items: Sequence[T]) -> T | None:
    index = rand_index(len(items))
    return None if index < 0 else items[index]


def rand_font(fonts: Sequence[T]) -> T | None:
    """Pick a random font, or None when there are none."""
    return _pick(fonts)


def rand_hex_color(colors: Sequence[str]) -> str:
    """Pick a random hex colour, or an empty string when there are none."""
    picked = _pick(colors)
    return "" if picked is None else picked


def rand_image(images: Sequence[Image.Image]) -> Image.Image | None:
    """Pick a random image, or None when there are none."""
    return _pick(images)


def rand_string(chars: Sequence[str]) -> str:
    """Pick a random string; raises IndexError when ``chars`` is empty."""
    return random.choice(chars)


def rand_color(colors: Sequence[Sequence[int]]) -> tuple[int, int, int, int]:
    """Pick a random colour and return it as an RGBA tuple."""
    if not colors:
        raise ValueError("no colors to choose from")
    index = min(rand_int(0, len(colors)), len(colors) - 1)
    chosen = tuple(colors[index])
    if len(chosen) == 3:
        chosen = chosen + (255,)
    r, g, b, a = chosen
    return (r, g, b, a)


def rand_cut_image_pos(width: int, height: int, img: Image.Image) -> Point:
    """Pick a random top-left offset for cutting a width x height area out of ``img``."""
    img_w, img_h = img.size
    x = rand_int(0, img_w - width) if img_w - width > 0 else 0
    y = rand_int(0, img_h - height) if img_h - height > 0 else 0
    return Point(x, y)