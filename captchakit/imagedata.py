"""Generated captcha images with encoding and saving helpers."""

from __future__ import annotations

import os
from dataclasses import dataclass

from PIL import Image

from . import codec
from .options import Quality


class EmptyImageError(ValueError):
    """Raised when encoding image data that holds no image."""

    def __init__(self) -> None:
        super().__init__("image is empty")


class MissingImageDataError(ValueError):
    """Raised when saving image data that holds no image."""

    def __init__(self) -> None:
        super().__init__("missing image data")


def _write(filepath: str | os.PathLike, data: bytes) -> None:
    directory = os.path.dirname(os.fspath(filepath))
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(filepath, "wb") as fh:
        fh.write(data)


def _effective_quality(quality: int | None) -> int:
    if quality is not None and Quality.LEVEL5 <= quality <= Quality.NONE:
        return int(quality)
    return int(Quality.NONE)


@dataclass(frozen=True)
class JPEGImageData:
    """An image meant to be delivered as JPEG."""

    image: Image.Image | None

    def _require(self) -> Image.Image:
        if self.image is None:
            raise EmptyImageError()
        return self.image

    def to_bytes(self, quality: int | None = None) -> bytes:
        """Encode as JPEG; qualities outside 55..100 fall back to 100."""
        return codec.encode_jpeg(self._require(), _effective_quality(quality))

    def to_base64(self, quality: int | None = None) -> str:
        """Encode as a JPEG data URI."""
        return codec.encode_jpeg_base64(self._require(), _effective_quality(quality))

    def to_base64_data(self, quality: int | None = None) -> str:
        """Encode as base64 JPEG without a prefix."""
        return codec.encode_jpeg_base64_data(self._require(), _effective_quality(quality))

    def save_to_file(self, filepath: str | os.PathLike, quality: int = Quality.NONE) -> None:
        """Write the image as JPEG, creating parent directories."""
        if self.image is None:
            raise MissingImageDataError()
        _write(filepath, codec.encode_jpeg(self.image, quality))


@dataclass(frozen=True)
class PNGImageData:
    """An image meant to be delivered as PNG."""

    image: Image.Image | None

    def _require(self) -> Image.Image:
        if self.image is None:
            raise EmptyImageError()
        return self.image

    def to_bytes(self) -> bytes:
        """Encode as PNG."""
        return codec.encode_png(self._require())

    def to_base64(self) -> str:
        """Encode as a PNG data URI."""
        return codec.encode_png_base64(self._require())

    def to_base64_data(self) -> str:
        """Encode as base64 PNG without a prefix."""
        return codec.encode_png_base64_data(self._require())

    def save_to_file(self, filepath: str | os.PathLike) -> None:
        """Write the image as PNG, creating parent directories."""
        if self.image is None:
            raise MissingImageDataError()
        _write(filepath, codec.encode_png(self.image))