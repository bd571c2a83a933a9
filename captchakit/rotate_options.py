"""Options, resources and result types for rotate captchas."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import asdict, dataclass, field

from PIL import Image

from .imagedata import PNGImageData
from .options import RangeVal


@dataclass
class Options:
    """Configuration of a rotate captcha."""

    image_square_size: int = 0
    range_angle_pos: list[RangeVal] = field(default_factory=list)
    range_thumb_image_square_size: list[int] = field(default_factory=list)
    thumb_image_alpha: float = 0.0


Option = Callable[[Options], None]


def default_options() -> Options:
    """Return options filled with the default rotate captcha settings."""
    return Options(
        image_square_size=220,
        range_angle_pos=[RangeVal(30, 330)],
        range_thumb_image_square_size=[140, 150, 160, 170],
        thumb_image_alpha=1.0,
    )


def with_image_square_size(val: int) -> Option:
    """Set the side length of the square master image."""

    def apply(opts: Options) -> None:
        opts.image_square_size = val

    return apply


def with_range_angle_pos(vals: Iterable[Sequence[int]]) -> Option:
    """Set the angle ranges the image may be rotated by."""
    ranges = [RangeVal(*v) for v in vals]

    def apply(opts: Options) -> None:
        opts.range_angle_pos = list(ranges)

    return apply


def with_range_thumb_image_square_size(val: Iterable[int]) -> Option:
    """Set the thumbnail side lengths to choose from."""
    sizes = list(val)

    def apply(opts: Options) -> None:
        opts.range_thumb_image_square_size = list(sizes)

    return apply


def with_thumb_image_alpha(val: float) -> Option:
    """Set the alpha of the thumbnail image."""

    def apply(opts: Options) -> None:
        opts.thumb_image_alpha = val

    return apply


@dataclass
class Resources:
    """Images a rotate captcha draws from."""

    images: list[Image.Image | None] = field(default_factory=list)


Resource = Callable[[Resources], None]


def with_images(images: Iterable[Image.Image | None]) -> Resource:
    """Set the images to rotate."""
    chosen = list(images)

    def apply(resources: Resources) -> None:
        resources.images = chosen

    return apply


@dataclass
class Block:
    """The answer data of a rotate captcha."""

    parent_width: int = 0
    parent_height: int = 0
    width: int = 0
    height: int = 0
    angle: int = 0

    def to_dict(self) -> dict[str, int]:
        """Return the block as a JSON-ready dictionary."""
        return asdict(self)


@dataclass
class DrawBlock:
    """A block with the geometry used to draw it."""

    block: Block | None = None
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    angle: int = 0


@dataclass(frozen=True)
class CaptchaData:
    """The result of generating a rotate captcha."""

    block: Block
    master_image: PNGImageData
    thumb_image: PNGImageData