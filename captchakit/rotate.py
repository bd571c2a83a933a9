"""Rotate captchas: generation, building and answer checking."""

from __future__ import annotations

from collections.abc import Iterable

from PIL import Image

from .helper import rand_index
from .imagedata import PNGImageData
from .rand import rand_int
from .randgen import rand_image
from .rotate_draw import (
    DrawCropCircleImageParams,
    DrawImageParams,
    draw_with_crop_circle,
    draw_with_nrgba,
)
from .rotate_options import (
    Block,
    CaptchaData,
    Option,
    Options,
    Resource,
    Resources,
    default_options,
)


class RotateError(Exception):
    """Base class of rotate captcha errors."""

    message = "rotate captcha error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class EmptyImageError(RotateError):
    """Raised when no image is configured."""

    message = "no image"


class ImageTypeError(RotateError):
    """Raised when a configured image is missing."""

    message = "image must be an image"


def _half(value: int) -> int:
    """Halve an integer, truncating toward zero."""
    return int(value / 2)


class Captcha:
    """A configured rotate captcha that can generate challenges."""

    def __init__(
        self, options: Iterable[Option] = (), resources: Iterable[Resource] = ()
    ) -> None:
        self.options: Options = default_options()
        self.resources = Resources()
        for opt in options:
            opt(self.options)
        for res in resources:
            res(self.resources)

    def generate(self) -> CaptchaData:
        """Generate a challenge: master image, rotated thumbnail and the answer block."""
        self._check()
        thumb_size = self._rand_thumb_size()
        image_size = self.options.image_square_size
        block = Block(
            parent_width=image_size,
            parent_height=image_size,
            width=thumb_size,
            height=thumb_size,
            angle=self._rand_angle(),
        )
        master = draw_with_nrgba(
            DrawImageParams(
                rotate=block.angle,
                square_size=image_size,
                background=rand_image(self.resources.images),
            )
        )
        thumb = draw_with_crop_circle(
            DrawCropCircleImageParams(
                background=master,
                alpha=self.options.thumb_image_alpha,
                square_size=thumb_size,
                rotate=block.angle,
                scale_ratio_size=_half(image_size - thumb_size),
            )
        )
        return CaptchaData(
            block=block,
            master_image=PNGImageData(master),
            thumb_image=PNGImageData(thumb),
        )

    def _check(self) -> None:
        images = self.resources.images
        if not images:
            raise EmptyImageError()
        if any(not isinstance(img, Image.Image) for img in images):
            raise ImageTypeError()

    def _rand_angle(self) -> int:
        angles = self.options.range_angle_pos
        index = rand_index(len(angles))
        if index < 0:
            return 0
        angle = angles[index]
        return rand_int(angle.min, angle.max)

    def _rand_thumb_size(self) -> int:
        sizes = self.options.range_thumb_image_square_size
        index = rand_index(len(sizes))
        return 0 if index < 0 else sizes[index]


class Builder:
    """Collects options and resources and makes rotate captchas from them."""

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
        """Make a rotate captcha."""
        return Captcha(self._opts, self._resources)


def validate(angle: int, d_angle: int, padding: int) -> bool:
    """Return whether ``angle + d_angle`` lies within ``padding`` of a full turn."""
    total = angle + d_angle
    return 360 - padding <= total <= 360 + padding