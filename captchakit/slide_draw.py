"""Drawing of slide captcha master and tile images."""

from __future__ import annotations

from dataclasses import dataclass, field

from PIL import Image, ImageChops

from .randgen import rand_cut_image_pos
from .slide_options import DrawBlock


@dataclass
class DrawImageParams:
    """Parameters for drawing the master image."""

    width: int
    height: int
    background: Image.Image | None = None
    alpha: float = 1.0
    draw_blocks: list[DrawBlock] = field(default_factory=list)


@dataclass
class DrawTplImageParams:
    """Parameters for drawing the tile image."""

    width: int
    height: int
    background: Image.Image
    mask_image: Image.Image
    draw_block: DrawBlock
    x: int = 0
    y: int = 0
    alpha: float = 1.0


def _transparent(width: int, height: int) -> Image.Image:
    return Image.new("RGBA", (max(0, width), max(0, height)), (0, 0, 0, 0))


def _scaled(width: int, height: int, img: Image.Image) -> Image.Image:
    """Scale ``img`` to width x height onto a transparent canvas."""
    if width <= 0 or height <= 0:
        return _transparent(width, height)
    return img.convert("RGBA").resize((width, height), Image.Resampling.BILINEAR)


def _draw_over(dst: Image.Image, src: Image.Image, x: int, y: int) -> None:
    """Composite ``src`` over ``dst`` at (x, y), clipping to ``dst``."""
    left = max(0, -x)
    top = max(0, -y)
    right = min(src.width, dst.width - x)
    bottom = min(src.height, dst.height - y)
    if right <= left or bottom <= top:
        return
    dst.alpha_composite(src.crop((left, top, right, bottom)), (x + left, y + top))


def _shifted_copy(img: Image.Image, x: int, y: int) -> Image.Image:
    """Copy ``img`` moved by (-x, -y); uncovered pixels become transparent."""
    w, h = img.size
    return img.convert("RGBA").crop((x, y, x + w, y + h))


def draw_with_template(params: DrawTplImageParams) -> Image.Image:
    """Cut the tile out of the background and lay its overlay on top."""
    block = params.draw_block
    template = _scaled(params.width, params.height, params.mask_image)
    cut = params.background.convert("RGBA").crop(
        (block.x, block.y, block.x + params.width, block.y + params.height)
    )
    cut.putalpha(ImageChops.multiply(cut.getchannel("A"), template.getchannel("A")))
    out = _transparent(params.width, params.height)
    out.alpha_composite(cut)
    if block.image is not None:
        out.alpha_composite(_scaled(params.width, params.height, block.image))
    return out


def draw_with_nrgba(params: DrawImageParams) -> tuple[Image.Image, Image.Image]:
    """Draw the master image and return it with the plain background used."""
    blocks_layer = _transparent(params.width, params.height)
    for block in params.draw_blocks:
        if block.image is None:
            continue
        graph = _scaled(block.width, block.height, block.image)
        _draw_over(blocks_layer, graph, block.x, block.y)

    plain = _transparent(params.width, params.height)
    if params.background is None:
        return blocks_layer, plain

    point = rand_cut_image_pos(params.width, params.height, params.background)
    master = _shifted_copy(params.background, point.x, point.y)
    master = master.crop(
        (0, 0, min(params.width, master.width), min(params.height, master.height))
    )
    _draw_over(plain, master, 0, 0)
    _draw_over(master, blocks_layer, 0, 0)
    return master, plain