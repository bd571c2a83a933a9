"""An RGBA (non-premultiplied) drawing canvas."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from PIL import Image, ImageChops, ImageDraw, ImageFont

from .geometry import (
    AreaRect,
    DrawStringParams,
    Matrix,
    PositionRect,
    calc_resized_rect,
    rotated_size,
)

if TYPE_CHECKING:
    from .palette import PaletteCanvas


def _load_font(params: DrawStringParams):
    pixels = max(1, int(round(params.size * params.font_dpi / 72)))
    font = params.font
    if isinstance(font, ImageFont.FreeTypeFont):
        return font.font_variant(size=pixels)
    if font is not None:
        return ImageFont.truetype(font, pixels)
    return ImageFont.load_default(pixels)


def _draw_text(image: Image.Image, params: DrawStringParams, pt: tuple[int, int]) -> None:
    """Composite text onto an RGBA image with its baseline starting at ``pt``."""
    layer = Image.new("RGBA", image.size, (0, 0, 0, 0))
    color = tuple(params.color)
    if len(color) == 3:
        color = color + (255,)
    ImageDraw.Draw(layer).text(
        (pt[0], pt[1]), params.text, fill=color, font=_load_font(params), anchor="ls"
    )
    image.alpha_composite(layer)


def _circle_mask(size: tuple[int, int], x: int, y: int, radius: int) -> Image.Image:
    mask = Image.new("L", size, 0)
    w, h = size
    data = [
        255 if math.hypot(px - x, py - y) <= radius else 0
        for py in range(h)
        for px in range(w)
    ]
    mask.putdata(data)
    return mask


def _masked_over(mask: Image.Image, src: Image.Image) -> Image.Image:
    """Draw ``src`` over a white image shaped by ``mask``, weighted by the mask."""
    base = Image.new("RGBA", mask.size, (255, 255, 255, 0))
    base.putalpha(mask)
    weighted = src.copy()
    weighted.putalpha(ImageChops.multiply(src.getchannel("A"), mask))
    base.alpha_composite(weighted)
    return base


class NRGBACanvas:
    """A mutable RGBA canvas backed by a Pillow image."""

    def __init__(self, image: Image.Image) -> None:
        self.image = image if image.mode == "RGBA" else image.convert("RGBA")

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    @property
    def size(self) -> tuple[int, int]:
        return self.image.size

    def draw_image(
        self, img: PaletteCanvas, dot_rect: PositionRect, pos_rect: AreaRect
    ) -> None:
        """Copy the visible pixels of ``img`` inside ``pos_rect`` to ``dot_rect``."""
        pixels = self.image.load()
        for x in range(img.width):
            for y in range(img.height):
                color = img.at(x, y)
                if color[3] == 0:
                    continue
                if pos_rect.min_x <= x <= pos_rect.max_x and pos_rect.min_y <= y <= pos_rect.max_y:
                    tx = dot_rect.x + (x - pos_rect.min_x)
                    ty = dot_rect.y - dot_rect.height + (y - pos_rect.min_y)
                    if 0 <= tx < self.width and 0 <= ty < self.height:
                        pixels[tx, ty] = color

    def draw_string(self, params: DrawStringParams, pt: tuple[int, int]) -> None:
        """Draw text with its baseline starting at ``pt``."""
        _draw_text(self.image, params, pt)

    def calc_margin_blank_area(self) -> AreaRect:
        """Return the area holding visible pixels, widened by 2 and clamped."""
        w, h = self.size
        bbox = self.image.getchannel("A").getbbox()
        if bbox is None:
            min_x, max_x, min_y, max_y = w, 0, h, 0
        else:
            min_x, min_y, max_x, max_y = bbox[0], bbox[1], bbox[2] - 1, bbox[3] - 1
        return AreaRect(
            max(0, min_x - 2), min(w, max_x + 2), max(0, min_y - 2), min(h, max_y + 2)
        )

    def rotate(self, angle: int, over_crop: bool = False) -> None:
        """Rotate by ``angle`` degrees about the centre, growing the canvas."""
        if angle == 0:
            return
        src_w, src_h = self.size
        w, h = rotated_size(src_w, src_h, angle)
        cx, cy = w / 2, h / 2
        m = (
            Matrix()
            .translate(cx, cy)
            .rotate(angle * math.pi / 180)
            .translate(-cx, -cy)
            .translate(int((w - src_w) / 2), int((h - src_h) / 2))
        )
        a, b, c, d, e, f = m.xx, m.xy, m.x0, m.yx, m.yy, m.y0
        det = a * e - b * d
        inverse = (
            e / det,
            -b / det,
            (b * f - e * c) / det,
            -d / det,
            a / det,
            (d * c - a * f) / det,
        )
        self.image = self.image.transform(
            (w, h),
            Image.Transform.AFFINE,
            inverse,
            resample=Image.Resampling.BILINEAR,
            fillcolor=(0, 0, 0, 0),
        )
        if over_crop:
            dx = int((w - src_w) / 2) + 1
            dy = int((h - src_h) / 2) + 1
            self.sub_image((dx, dy, src_w + dx, src_h + dy))

    def scale(self, zoom_size: int, keep_ratio: bool = False, center_align: bool = False) -> None:
        """Shrink by ``zoom_size`` pixels on each side."""
        if zoom_size <= 0:
            return
        new_w = self.width - zoom_size * 2
        new_h = self.height - zoom_size * 2
        if not keep_ratio:
            self.image = self.image.resize((new_w, new_h), Image.Resampling.BILINEAR)
            return
        box = calc_resized_rect((0, 0, self.width, self.height), new_w, new_h, center_align)
        out = Image.new("RGBA", (new_w, new_h), (0, 0, 0, 0))
        scaled = self.image.resize((box[2] - box[0], box[3] - box[1]), Image.Resampling.BILINEAR)
        out.alpha_composite(scaled, (box[0], box[1]))
        self.image = out

    def crop_circle(self, x: int, y: int, radius: int) -> None:
        """Keep only the circle at (x, y), drawn over white; the rest becomes clear."""
        mask = _circle_mask(self.size, x, y, radius)
        self.image = _masked_over(mask, self.image)

    def crop_scale_circle(self, x: int, y: int, radius: int, zoom_size: int) -> None:
        """Crop a circle, shrinking the mask by ``zoom_size`` on each side."""
        mask = _circle_mask(self.size, x, y, radius)
        if zoom_size > 0:
            new_size = (self.width - zoom_size * 2, self.height - zoom_size * 2)
            mask = mask.resize(new_size, Image.Resampling.BILINEAR)
        offset = max(zoom_size, 0)
        src = Image.new("RGBA", mask.size, (0, 0, 0, 0))
        part = self.image.crop((offset, offset, offset + mask.width, offset + mask.height))
        src.paste(part, (0, 0))
        self.image = _masked_over(mask, src)

    def sub_image(self, box: tuple[int, int, int, int]) -> None:
        """Keep only the part inside ``box`` (clipped to the canvas)."""
        x0 = max(0, box[0])
        y0 = max(0, box[1])
        x1 = min(self.width, box[2])
        y1 = min(self.height, box[3])
        self.image = self.image.crop((x0, y0, max(x0, x1), max(y0, y1)))


def create_nrgba_canvas(width: int, height: int, is_alpha: bool = True) -> NRGBACanvas:
    """Create a canvas, transparent when ``is_alpha`` else opaque white."""
    fill = (0, 0, 0, 0) if is_alpha else (255, 255, 255, 255)
    return NRGBACanvas(Image.new("RGBA", (max(0, width), max(0, height)), fill))