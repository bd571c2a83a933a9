import pytest
from PIL import Image, ImageDraw

from captchakit.slide import (
    Builder,
    Captcha,
    EmptyBackgroundImageError,
    GraphImageError,
    ImageTypeError,
    MaskImageTypeError,
    Mode,
    ShadowImageTypeError,
    validate,
)
from captchakit.slide_options import (
    DeadZoneDirection,
    GraphImage,
    with_backgrounds,
    with_graph_images,
    with_image_size,
    with_range_dead_zone_directions,
)


def _background(width=320, height=240):
    img = Image.new("RGB", (width, height))
    draw = ImageDraw.Draw(img)
    for x in range(0, width, 10):
        draw.rectangle((x, 0, x + 9, height), fill=(x % 256, (x * 3) % 256, 120))
    return img


def _shape(color):
    img = Image.new("RGBA", (60, 60), (0, 0, 0, 0))
    ImageDraw.Draw(img).ellipse((5, 5, 55, 55), fill=color)
    return img


def _graphs():
    return [
        GraphImage(
            overlay_image=_shape((255, 255, 255, 200)),
            shadow_image=_shape((0, 0, 0, 150)),
            mask_image=_shape((255, 255, 255, 255)),
        ),
        GraphImage(
            overlay_image=_shape((200, 200, 200, 200)),
            shadow_image=_shape((20, 20, 20, 150)),
            mask_image=_shape((255, 255, 255, 255)),
        ),
    ]


def _builder(*opts):
    builder = Builder(*opts)
    builder.set_resources(
        with_graph_images(_graphs()),
        with_backgrounds([_background(), _background()]),
    )
    return builder


def test_slide_tile_captcha(tmp_path):
    data = _builder().make().generate()
    block = data.block
    assert 60 <= block.width <= 70
    assert block.width == block.height
    assert data.master_image.to_base64().startswith("data:image/jpeg;base64,")
    assert data.tile_image.to_base64().startswith("data:image/png;base64,")

    master_path = tmp_path / "cache" / "master.jpg"
    tile_path = tmp_path / "cache" / "thumb.png"
    data.master_image.save_to_file(master_path, 100)
    data.tile_image.save_to_file(tile_path)
    assert master_path.read_bytes()[:2] == b"\xff\xd8"
    assert tile_path.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_basic_mode_block_positions():
    for _ in range(5):
        data = _builder().make().generate()
        block = data.block
        assert block.dy == block.y == block.tile_y
        assert block.dx == block.tile_x
        assert 5 <= block.dx <= block.width // 2
        assert data.master_image.image.size == (300, 220)
        assert data.tile_image.image.size == (block.width, block.height)


def test_basic_mode_forces_left_dead_zone():
    captcha = _builder().make()
    assert captcha.mode == Mode.BASIC
    assert captcha.options.range_dead_zone_directions == [DeadZoneDirection.LEFT]
    assert captcha.options.enable_graph_vertical_random is False


def test_drag_mode_left_starts_at_left_edge():
    captcha = _builder(with_range_dead_zone_directions([DeadZoneDirection.LEFT])).make_drag_drop()
    block = captcha.generate().block
    assert block.dx == 5
    assert 5 <= block.dy <= 220 - block.height - 5


def test_drag_mode_right_starts_at_right_edge():
    captcha = _builder(with_range_dead_zone_directions([DeadZoneDirection.RIGHT])).make_drag_drop()
    block = captcha.generate().block
    assert block.dx == 300 - block.width - 5


def test_drag_mode_top_and_bottom():
    top = _builder(with_range_dead_zone_directions([DeadZoneDirection.TOP])).make_drag_drop()
    block = top.generate().block
    assert block.dy == 5
    assert 5 <= block.dx <= 300 - block.width - 5

    bottom = _builder(with_range_dead_zone_directions([DeadZoneDirection.BOTTOM])).make_drag_drop()
    block = bottom.generate().block
    assert block.dy == 220 - block.height - 5


def test_custom_image_size():
    data = _builder(with_image_size((200, 150))).make().generate()
    assert data.master_image.image.size == (200, 150)


def test_clear_resets_builder():
    builder = _builder(with_image_size((200, 150)))
    builder.clear()
    with pytest.raises(EmptyBackgroundImageError):
        builder.make().generate()
    assert builder.make().options.image_size == (300, 220)


def test_missing_background():
    builder = Builder()
    builder.set_resources(with_graph_images(_graphs()))
    with pytest.raises(EmptyBackgroundImageError):
        builder.make().generate()


def test_missing_graphs():
    builder = Builder()
    builder.set_resources(with_backgrounds([_background()]))
    with pytest.raises(GraphImageError):
        builder.make().generate()


@pytest.mark.parametrize(
    "graph, error",
    [
        (GraphImage(None, _shape((0, 0, 0, 255)), _shape((0, 0, 0, 255))), ImageTypeError),
        (GraphImage(_shape((0, 0, 0, 255)), None, _shape((0, 0, 0, 255))), ShadowImageTypeError),
        (GraphImage(_shape((0, 0, 0, 255)), _shape((0, 0, 0, 255)), None), MaskImageTypeError),
    ],
)
def test_incomplete_graph_images(graph, error):
    captcha = Captcha(
        Mode.BASIC,
        resources=[with_graph_images([graph]), with_backgrounds([_background()])],
    )
    with pytest.raises(error):
        captcha.generate()


@pytest.mark.parametrize(
    "sx, sy, expected",
    [
        (10, 10, True),
        (15, 15, True),
        (5, 5, True),
        (16, 10, False),
        (10, 4, False),
    ],
)
def test_validate(sx, sy, expected):
    assert validate(sx, sy, 10, 10, 5) is expected


def test_validate_zero_padding_requires_exact_point():
    assert validate(7, 9, 7, 9, 0) is True
    assert validate(8, 9, 7, 9, 0) is False