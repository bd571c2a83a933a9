"""Drawing of rotate captcha master and thumbnail images."""

from __future__ import annotations

from dataclasses import dataclass

from PIL import Image

from .canvas import create_nrgba_canvas
from .randgen import rand_cut_image_pos


@dataclass
class DrawImageParams:
    """Parameters for drawing the master image."""

    rotate: int
    square_size: int
    background: Image.Image | None = None
    alpha: float = 1.0


@dataclass
class DrawCropCircleImageParams:
    """Parameters for drawing the cropped, rotated thumbnail."""

    scale_ratio_size: int
    rotate: int
    square_size: int
    background: Image.Image
    alpha: float = 1.0


def draw_with_nrgba(params: DrawImageParams) -> Image.Image:
    """Cut a square out of the background and keep only its inscribed circle."""
    size = params.square_size
    canvas = create_nrgba_canvas(size, size, True)
    if params.background is not None:
        bg = params.background.convert("RGBA")
        point = rand_cut_image_pos(size, size, bg)
        shifted = bg.crop((point.x, point.y, point.x + bg.width, point.y + bg.height))
        part = shifted.crop((0, 0, min(size, shifted.width), min(size, shifted.height)))
        canvas.image.alpha_composite(part)
    canvas.crop_circle(canvas.width // 2, canvas.height // 2, canvas.height // 2)
    return canvas.image


def draw_with_crop_circle(params: DrawCropCircleImageParams) -> Image.Image:
    """Crop a shrunken circle out of the background and rotate it."""
    bg = params.background.convert("RGBA")
    bg_w, bg_h = bg.size
    canvas = create_nrgba_canvas(bg_w, bg_h, True)
    canvas.image.alpha_composite(bg)
    canvas.crop_scale_circle(bg_w // 2, bg_h // 2, bg_h // 2, params.scale_ratio_size)
    canvas.rotate(params.rotate, True)

    cv_w, cv_h = canvas.size
    if cv_h > bg_h or cv_w > bg_w:
        # Offsets are taken crosswise, as the original layout does.
        ox = (cv_h - bg_h) // 2
        oy = (cv_w - bg_w) // 2
        shifted = canvas.image.crop((ox, oy, ox + bg_w, oy + bg_h))
        fresh = create_nrgba_canvas(bg_w, bg_h, True)
        fresh.image.alpha_composite(shifted)
        canvas = fresh
    return canvas.image