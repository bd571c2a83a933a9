from PIL import Image

from captchakit.slide_draw import (
    DrawImageParams,
    DrawTplImageParams,
    draw_with_nrgba,
    draw_with_template,
)
from captchakit.slide_options import DrawBlock

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)
GREEN = (0, 255, 0, 255)
CLEAR = (0, 0, 0, 0)


def _solid(size, color):
    return Image.new("RGBA", size, color)


def test_template_cuts_background_under_opaque_mask():
    bg = _solid((50, 50), RED)
    params = DrawTplImageParams(
        width=10,
        height=10,
        background=bg,
        mask_image=_solid((4, 4), (255, 255, 255, 255)),
        draw_block=DrawBlock(x=5, y=5, image=_solid((4, 4), CLEAR)),
    )
    out = draw_with_template(params)
    assert out.size == (10, 10)
    assert set(out.getdata()) == {RED}


def test_template_transparent_mask_gives_nothing():
    params = DrawTplImageParams(
        width=8,
        height=8,
        background=_solid((50, 50), RED),
        mask_image=_solid((4, 4), CLEAR),
        draw_block=DrawBlock(x=0, y=0, image=_solid((4, 4), CLEAR)),
    )
    out = draw_with_template(params)
    assert out.getchannel("A").getextrema() == (0, 0)


def test_template_overlay_drawn_on_top():
    params = DrawTplImageParams(
        width=8,
        height=8,
        background=_solid((50, 50), RED),
        mask_image=_solid((4, 4), (255, 255, 255, 255)),
        draw_block=DrawBlock(x=0, y=0, image=_solid((4, 4), BLUE)),
    )
    out = draw_with_template(params)
    assert set(out.getdata()) == {BLUE}


def test_template_outside_background_is_transparent():
    params = DrawTplImageParams(
        width=8,
        height=8,
        background=_solid((20, 20), RED),
        mask_image=_solid((4, 4), (255, 255, 255, 255)),
        draw_block=DrawBlock(x=40, y=40, image=_solid((4, 4), CLEAR)),
    )
    out = draw_with_template(params)
    assert out.getchannel("A").getextrema() == (0, 0)


def test_nrgba_without_background():
    block = DrawBlock(x=3, y=4, width=5, height=5, image=_solid((2, 2), BLUE))
    master, plain = draw_with_nrgba(DrawImageParams(width=20, height=20, draw_blocks=[block]))
    assert master.size == (20, 20)
    assert master.getpixel((3, 4)) == BLUE
    assert master.getpixel((7, 8)) == BLUE
    assert master.getpixel((0, 0)) == CLEAR
    assert plain.getchannel("A").getextrema() == (0, 0)


def test_nrgba_with_background_of_same_size():
    bg = _solid((30, 20), GREEN)
    block = DrawBlock(x=2, y=2, width=6, height=6, image=_solid((3, 3), BLUE))
    master, plain = draw_with_nrgba(
        DrawImageParams(width=30, height=20, background=bg, draw_blocks=[block])
    )
    assert master.size == (30, 20)
    assert plain.size == (30, 20)
    assert set(plain.getdata()) == {GREEN}
    assert master.getpixel((2, 2)) == BLUE
    assert master.getpixel((20, 15)) == GREEN


def test_nrgba_block_partly_outside_is_clipped():
    block = DrawBlock(x=-3, y=-3, width=6, height=6, image=_solid((2, 2), BLUE))
    master, _ = draw_with_nrgba(DrawImageParams(width=10, height=10, draw_blocks=[block]))
    assert master.getpixel((0, 0)) == BLUE
    assert master.getpixel((3, 3)) == CLEAR


def test_nrgba_cuts_larger_background_to_size():
    bg = _solid((60, 40), GREEN)
    master, plain = draw_with_nrgba(DrawImageParams(width=30, height=20, background=bg))
    assert master.size == (30, 20)
    assert set(master.getdata()) == {GREEN}
    assert set(plain.getdata()) == {GREEN}