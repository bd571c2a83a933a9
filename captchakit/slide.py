"""Slide captchas: generation, building and answer checking."""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum

from PIL import Image

from .helper import rand_index
from .imagedata import JPEGImageData, PNGImageData
from .options import Point, RangeVal, Size
from .rand import rand_int
from .randgen import rand_image
from .slide_draw import DrawImageParams, DrawTplImageParams, draw_with_nrgba, draw_with_template
from .slide_options import (
    Block,
    CaptchaData,
    DeadZoneDirection,
    DrawBlock,
    Option,
    Options,
    Resource,
    Resources,
    default_options,
)


class Mode(IntEnum):
    """Kinds of slide captcha."""

    BASIC = 0
    DRAG = 1


class SlideError(Exception):
    """Base class of slide captcha errors."""

    message = "slide captcha error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class GraphImageError(SlideError):
    """Raised when no usable tile shape is available."""

    message = "graph image is invalid"


class GenerateDataError(SlideError):
    """Raised when no block could be generated."""

    message = "data generation failed"


class ImageTypeError(SlideError):
    """Raised when a tile shape lacks its overlay image."""

    message = "tile image must be an image"


class ShadowImageTypeError(SlideError):
    """Raised when a tile shape lacks its shadow image."""

    message = "tile shadow image must be an image"


class MaskImageTypeError(SlideError):
    """Raised when a tile shape lacks its mask image."""

    message = "tile mask image must be an image"


class EmptyBackgroundImageError(SlideError):
    """Raised when no background image is configured."""

    message = "no background image"


def _div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


class Captcha:
    """A configured slide captcha that can generate challenges."""

    def __init__(
        self,
        mode: Mode = Mode.BASIC,
        options: Iterable[Option] = (),
        resources: Iterable[Resource] = (),
    ) -> None:
        self.mode = Mode(mode)
        self.options: Options = default_options()
        self.resources = Resources()
        if self.mode == Mode.BASIC:
            self.options.range_dead_zone_directions = [DeadZoneDirection.LEFT]
            self.options.enable_graph_vertical_random = False
        for opt in options:
            opt(self.options)
        for res in resources:
            res(self.resources)

    def generate(self) -> CaptchaData:
        """Generate a challenge: master image, tile image and the answer block."""
        self._check()

        graph = self._pick_graph()
        if graph is None:
            raise GraphImageError()
        overlay, shadow, mask = graph.overlay_image, graph.shadow_image, graph.mask_image
        if overlay is None or shadow is None or mask is None:
            raise GraphImageError()

        blocks, tile_point = self._gen_graph_blocks(
            self.options.image_size,
            self.options.range_graph_size,
            self.options.gen_graph_number,
        )
        if not blocks:
            raise GenerateDataError()
        if len(blocks) > 1:
            block = blocks[max(rand_index(len(blocks)), 0)]
        else:
            block = blocks[0]

        master, master_bg = self._gen_master_image(self.options.image_size, shadow, blocks)
        tile = self._gen_tile_image(mask, master_bg, overlay, block)

        if self.mode == Mode.BASIC:
            block.tile_y = block.y
            block.dy = block.y
        else:
            block.tile_y = tile_point.y
            block.dy = tile_point.y
        block.tile_x = tile_point.x
        block.dx = tile_point.x

        return CaptchaData(
            block=block,
            master_image=JPEGImageData(master),
            tile_image=PNGImageData(tile),
        )

    def _check(self) -> None:
        for tile in self.resources.graph_images:
            if tile.overlay_image is None:
                raise ImageTypeError()
            if tile.shadow_image is None:
                raise ShadowImageTypeError()
            if tile.mask_image is None:
                raise MaskImageTypeError()
        if not self.resources.backgrounds:
            raise EmptyBackgroundImageError()

    def _pick_graph(self):
        graphs = self.resources.graph_images
        index = rand_index(len(graphs))
        return None if index < 0 else graphs[index]

    def _gen_master_image(
        self, size: Size, shadow: Image.Image, blocks: list[Block]
    ) -> tuple[Image.Image, Image.Image]:
        draw_blocks = [
            DrawBlock(
                block=b, x=b.x, y=b.y, image=shadow, width=b.width, height=b.height, angle=b.angle
            )
            for b in blocks
        ]
        return draw_with_nrgba(
            DrawImageParams(
                width=size.width,
                height=size.height,
                background=rand_image(self.resources.backgrounds),
                alpha=self.options.image_alpha,
                draw_blocks=draw_blocks,
            )
        )

    def _gen_tile_image(
        self,
        mask: Image.Image,
        background: Image.Image,
        overlay: Image.Image,
        block: Block,
    ) -> Image.Image:
        return draw_with_template(
            DrawTplImageParams(
                width=block.width,
                height=block.height,
                background=background,
                mask_image=mask,
                alpha=self.options.image_alpha,
                draw_block=DrawBlock(
                    block=block,
                    x=block.x,
                    y=block.y,
                    image=overlay,
                    width=block.width,
                    height=block.height,
                    angle=block.angle,
                ),
            )
        )

    def _rand_dead_zone_direction(self) -> DeadZoneDirection:
        dirs = self.options.range_dead_zone_directions
        index = rand_index(len(dirs))
        if index < 0:
            return DeadZoneDirection.LEFT
        return DeadZoneDirection(dirs[index])

    def _rand_graph_angle(self) -> int:
        angles = self.options.range_graph_angle_pos
        index = rand_index(len(angles))
        if index < 0:
            return 0
        angle = angles[index]
        return rand_int(angle.min, angle.max)

    @staticmethod
    def _calc_x_with_dead_zone(
        start: int, end: int, value: int, direction: DeadZoneDirection
    ) -> tuple[int, int]:
        if direction == DeadZoneDirection.LEFT:
            return start + value, end + value
        return start, end

    @staticmethod
    def _calc_y_with_dead_zone(
        start: int, end: int, value: int, direction: DeadZoneDirection
    ) -> int:
        if direction == DeadZoneDirection.TOP:
            start += value
        elif direction == DeadZoneDirection.BOTTOM:
            end -= value
        return rand_int(start, end)

    def _gen_graph_blocks(
        self, image_size: Size, size: RangeVal, length: int
    ) -> tuple[list[Block], Point]:
        if length <= 0:
            raise GenerateDataError()
        width, height = image_size.width, image_size.height

        angle = self._rand_graph_angle()
        side = rand_int(size.min, size.max)
        c_width = c_height = side

        direction = self._rand_dead_zone_direction()
        dp = _div(c_width, 2)
        block_width = _div(width - c_width - 20, length)
        y = self._calc_y_with_dead_zone(5, height - c_height - 5, c_height, direction)

        blocks: list[Block] = []
        for i in range(length):
            start, end = self._calc_x_with_dead_zone(
                i * block_width + dp + 5, (i + 1) * block_width - dp, c_width, direction
            )
            start = max(start, dp + 5)
            x = rand_int(start + 20, end + 20) - dp
            if self.options.enable_graph_vertical_random:
                y = self._calc_y_with_dead_zone(5, height - c_height - 5, c_height, direction)
            blocks.append(Block(x=x, y=y, width=c_width, height=c_height, angle=angle))

        if self.mode == Mode.BASIC:
            return blocks, Point(rand_int(5, dp), y)

        if direction == DeadZoneDirection.TOP:
            point = Point(rand_int(5, width - c_width - 5), 5)
        elif direction == DeadZoneDirection.BOTTOM:
            point = Point(rand_int(5, width - c_width - 5), height - c_height - 5)
        elif direction == DeadZoneDirection.LEFT:
            point = Point(5, rand_int(5, height - c_height - 5))
        else:
            point = Point(width - c_width - 5, rand_int(5, height - c_height - 5))
        return blocks, point


class Builder:
    """Collects options and resources and makes slide captchas from them."""

    def __init__(self, *opts: Option) -> None:
        self._opts: list[Option] = list(opts)
        self._resources: list[Resource] = []

    def set_options(self, *args: Option) -> None:
        """Add options."""
        self._opts.extend(args)

    def set_resources(self, *args: Resource) -> None:
        """Add resources."""
        self._resources.extend(args)

    def clear(self) -> None:
        """Drop all collected options and resources."""
        self._opts = []
        self._resources = []

    def make(self) -> Captcha:
        """Make a basic slide captcha."""
        return Captcha(Mode.BASIC, self._opts, self._resources)

    def make_drag_drop(self) -> Captcha:
        """Make a drag-and-drop slide captcha."""
        return Captcha(Mode.DRAG, self._opts, self._resources)


def validate(sx: int, sy: int, dx: int, dy: int, padding: int) -> bool:
    """Return whether (sx, sy) lies within ``padding`` of (dx, dy)."""
    new_dx = dx - padding
    new_dy = dy - padding
    span = padding * 2
    return new_dx <= sx <= new_dx + span and new_dy <= sy <= new_dy + span