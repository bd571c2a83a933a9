"""A paletted (indexed colour) drawing canvas."""

from __future__ import annotations

import math
from collections.abc import Sequence

from PIL import Image

from .canvas import _draw_text
from .geometry import AreaRect, DrawStringParams

TRANSPARENT = (255, 255, 255, 0)


def _rgba(color: Sequence[int]) -> tuple[int, int, int, int]:
    values = tuple(int(v) for v in color)
    if len(values) == 3:
        values = values + (255,)
    r, g, b, a = values
    return (r, g, b, a)


def _premultiplied(color: tuple[int, int, int, int]) -> tuple[int, int, int, int]:
    r, g, b, a = color
    return (r * a // 255, g * a // 255, b * a // 255, a)


class PaletteCanvas:
    """A canvas whose pixels are indices into a fixed list of RGBA colours."""

    def __init__(self, width: int, height: int, palette: Sequence[Sequence[int]]) -> None:
        self.width = max(0, width)
        self.height = max(0, height)
        self.palette = [_rgba(c) for c in palette]
        self._pixels = bytearray(self.width * self.height)
        self._nearest: dict[tuple[int, int, int, int], int] = {}

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def index_of(self, color: Sequence[int]) -> int:
        """Return the index of the palette colour closest to ``color``."""
        key = _rgba(color)
        found = self._nearest.get(key)
        if found is None:
            target = _premultiplied(key)
            found = min(
                range(len(self.palette)),
                key=lambda i: sum(
                    (p - t) ** 2 for p, t in zip(_premultiplied(self.palette[i]), target)
                ),
            )
            self._nearest[key] = found
        return found

    def color_index_at(self, x: int, y: int) -> int:
        """Return the index at (x, y), or 0 outside the canvas."""
        if not self._inside(x, y):
            return 0
        return self._pixels[y * self.width + x]

    def set_color_index(self, x: int, y: int, index: int) -> None:
        """Set the index at (x, y); ignored outside the canvas."""
        if self._inside(x, y):
            self._pixels[y * self.width + x] = index

    def at(self, x: int, y: int) -> tuple[int, int, int, int]:
        """Return the colour at (x, y)."""
        return self.palette[self.color_index_at(x, y)]

    def set(self, x: int, y: int, color: Sequence[int]) -> None:
        """Set (x, y) to the palette colour nearest ``color``."""
        if self._inside(x, y):
            self._pixels[y * self.width + x] = self.index_of(color)

    def to_image(self) -> Image.Image:
        """Render the canvas as an RGBA image."""
        indices = Image.frombytes("L", self.size, bytes(self._pixels))
        padded = self.palette + [TRANSPARENT] * (256 - len(self.palette))
        bands = [indices.point([c[ch] for c in padded]) for ch in range(4)]
        return Image.merge("RGBA", bands)

    def rotate(self, angle: int) -> None:
        """Rotate the content by ``angle`` degrees about the canvas centre."""
        if angle == 0:
            return
        r = self.width // 2
        result = bytearray(len(self._pixels))
        for y in range(self.height):
            for x in range(self.width):
                tx, ty = self.angle_swap_point(x, y, r, angle)
                result[y * self.width + x] = self.color_index_at(int(tx), int(ty))
        self._pixels = result

    def distort(self, amplitude: float, period: float) -> None:
        """Apply a sine wave distortion."""
        dx = 2.0 * math.pi / period
        result = bytearray(len(self._pixels))
        for y in range(self.height):
            xo = int(amplitude * math.sin(y * dx))
            for x in range(self.width):
                yo = int(amplitude * math.cos(x * dx))
                result[y * self.width + x] = self.color_index_at(x + xo, y + yo)
        self._pixels = result

    def draw_beeline(
        self, point1: Sequence[int], point2: Sequence[int], color: Sequence[int]
    ) -> None:
        """Draw a five-pixel-wide straight line between two points."""
        x, y = int(point1[0]), int(point1[1])
        x2, y2 = int(point2[0]), int(point2[1])
        dx = abs(x - x2)
        dy = abs(y2 - y)
        sx = -1 if x >= x2 else 1
        sy = -1 if y >= y2 else 1
        err = dx - dy
        while True:
            for offset in (0, 1, -1, 2, -2):
                self.set(x + offset, y, color)
            if x == x2 and y == y2:
                return
            e2 = err * 2
            if e2 > -dy:
                err -= dy
                x += sx
            if e2 < dx:
                err += dx
                y += sy

    def draw_circle(self, x: int, y: int, radius: int, color: Sequence[int]) -> None:
        """Draw a filled circle."""
        f = 1 - radius
        dfx = 1
        dfy = -2 * radius
        xo = 0
        yo = radius
        self.set(x, y + radius, color)
        self.set(x, y - radius, color)
        self.draw_horiz_line(x - radius, x + radius, y, color)
        while xo < yo:
            if f >= 0:
                yo -= 1
                dfy += 2
                f += dfy
            xo += 1
            dfx += 2
            f += dfx
            self.draw_horiz_line(x - xo, x + xo, y + yo, color)
            self.draw_horiz_line(x - xo, x + xo, y - yo, color)
            self.draw_horiz_line(x - yo, x + yo, y + xo, color)
            self.draw_horiz_line(x - yo, x + yo, y - xo, color)

    def draw_horiz_line(self, from_x: int, to_x: int, y: int, color: Sequence[int]) -> None:
        """Draw a horizontal line from ``from_x`` to ``to_x`` inclusive."""
        for x in range(from_x, to_x + 1):
            self.set(x, y, color)

    def angle_swap_point(
        self, x: float, y: float, r: float, angle: float
    ) -> tuple[float, float]:
        """Map a point through a rotation of ``angle`` degrees about (r, r)."""
        x -= r
        y = r - y
        rad = angle * (math.pi / 180)
        sin_val, cos_val = math.sin(rad), math.cos(rad)
        tar_x = x * cos_val + y * sin_val
        tar_y = -x * sin_val + y * cos_val
        return tar_x + r, r - tar_y

    def calc_margin_blank_area(self) -> AreaRect:
        """Return the area holding visible pixels, widened by 2 and clamped."""
        w, h = self.size
        min_x, max_x, min_y, max_y = w, 0, h, 0
        for y in range(h):
            for x in range(w):
                if self.at(x, y)[3] > 0:
                    min_x, max_x = min(min_x, x), max(max_x, x)
                    min_y, max_y = min(min_y, y), max(max_y, y)
        return AreaRect(
            max(0, min_x - 2), min(w, max_x + 2), max(0, min_y - 2), min(h, max_y + 2)
        )

    def draw_string(self, params: DrawStringParams, pt: tuple[int, int]) -> None:
        """Draw text with its baseline at ``pt``, mapped onto the palette."""
        before = self.to_image()
        after = before.copy()
        _draw_text(after, params, pt)
        old = before.getdata()
        new = after.getdata()
        for i, (o, n) in enumerate(zip(old, new)):
            if o != n:
                self._pixels[i] = self.index_of(n)


def create_palette_canvas(
    width: int, height: int, colors: Sequence[Sequence[int]]
) -> PaletteCanvas:
    """Create a canvas whose palette is a transparent entry followed by ``colors``."""
    return PaletteCanvas(width, height, [TRANSPARENT, *colors])