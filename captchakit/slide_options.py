"""Options, resources and result types for slide captchas."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import asdict, dataclass, field
from enum import IntEnum

from PIL import Image

from .imagedata import JPEGImageData, PNGImageData
from .options import RangeVal, Size


class DeadZoneDirection(IntEnum):
    """The side of the image where the tile starts in drag mode."""

    LEFT = 0
    RIGHT = 1
    TOP = 2
    BOTTOM = 3


@dataclass
class Options:
    """Configuration of a slide captcha."""

    image_size: Size = Size(0, 0)
    image_alpha: float = 0.0
    range_dead_zone_directions: list[DeadZoneDirection] = field(default_factory=list)
    range_graph_size: RangeVal = RangeVal(0, 0)
    range_graph_angle_pos: list[RangeVal] = field(default_factory=list)
    gen_graph_number: int = 0
    enable_graph_vertical_random: bool = False


Option = Callable[[Options], None]


def default_options() -> Options:
    """Return options filled with the default slide captcha settings."""
    return Options(
        image_size=Size(300, 220),
        image_alpha=1.0,
        range_dead_zone_directions=[
            DeadZoneDirection.LEFT,
            DeadZoneDirection.RIGHT,
            DeadZoneDirection.BOTTOM,
            DeadZoneDirection.TOP,
            DeadZoneDirection(3),
        ],
        range_graph_size=RangeVal(60, 70),
        range_graph_angle_pos=[RangeVal(0, 0)],
        gen_graph_number=1,
        enable_graph_vertical_random=False,
    )


def with_image_size(val: Sequence[int]) -> Option:
    """Set the size of the master image."""
    size = Size(*val)

    def apply(opts: Options) -> None:
        opts.image_size = size

    return apply


def with_image_alpha(val: float) -> Option:
    """Set the alpha of the master image."""

    def apply(opts: Options) -> None:
        opts.image_alpha = val

    return apply


def with_range_graph_size(val: Sequence[int]) -> Option:
    """Set the range of tile sizes."""
    rng = RangeVal(*val)

    def apply(opts: Options) -> None:
        opts.range_graph_size = rng

    return apply


def with_range_graph_angle_pos(vals: Iterable[Sequence[int]]) -> Option:
    """Set the angle ranges a tile may be rotated by."""
    ranges = [RangeVal(*v) for v in vals]

    def apply(opts: Options) -> None:
        opts.range_graph_angle_pos = list(ranges)

    return apply


def with_gen_graph_number(val: int) -> Option:
    """Set how many tile outlines are drawn on the master image."""

    def apply(opts: Options) -> None:
        opts.gen_graph_number = val

    return apply


def with_enable_graph_vertical_random(val: bool) -> Option:
    """Give each tile outline its own random vertical position."""

    def apply(opts: Options) -> None:
        opts.enable_graph_vertical_random = val

    return apply


def with_range_dead_zone_directions(val: Iterable[DeadZoneDirection]) -> Option:
    """Set the dead zone directions to choose from."""
    directions = [DeadZoneDirection(v) for v in val]

    def apply(opts: Options) -> None:
        opts.range_dead_zone_directions = list(directions)

    return apply


@dataclass
class GraphImage:
    """The three images that make up one tile shape."""

    overlay_image: Image.Image | None = None
    shadow_image: Image.Image | None = None
    mask_image: Image.Image | None = None


@dataclass
class Resources:
    """Images a slide captcha draws from."""

    backgrounds: list[Image.Image] = field(default_factory=list)
    graph_images: list[GraphImage] = field(default_factory=list)


Resource = Callable[[Resources], None]


def with_backgrounds(images: Iterable[Image.Image]) -> Resource:
    """Set the background images."""
    backgrounds = list(images)

    def apply(resources: Resources) -> None:
        resources.backgrounds = backgrounds

    return apply


def with_graph_images(images: Iterable[GraphImage]) -> Resource:
    """Set the tile shapes."""
    graphs = list(images)

    def apply(resources: Resources) -> None:
        resources.graph_images = graphs

    return apply


@dataclass
class Block:
    """Position and size of the tile to be matched; dx/dy give its start position."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    angle: int = 0
    tile_x: int = 0
    tile_y: int = 0
    dx: int = 0
    dy: int = 0

    def to_dict(self) -> dict[str, int]:
        """Return the block as a JSON-ready dictionary."""
        return asdict(self)


@dataclass
class DrawBlock:
    """A block together with the image drawn for it."""

    block: Block | None = None
    x: int = 0
    y: int = 0
    image: Image.Image | None = None
    width: int = 0
    height: int = 0
    angle: int = 0


@dataclass(frozen=True)
class CaptchaData:
    """The result of generating a slide captcha."""

    block: Block
    master_image: JPEGImageData
    tile_image: PNGImageData