"""PNG and JPEG encoding to bytes and base64."""

from __future__ import annotations

import base64
import io

from PIL import Image

PNG_BASE64_PREFIX = "data:image/png;base64,"
JPEG_BASE64_PREFIX = "data:image/jpeg;base64,"


def _flatten_for_jpeg(img: Image.Image) -> Image.Image:
    if img.mode in ("RGB", "L"):
        return img
    rgba = img.convert("RGBA")
    flat = Image.new("RGBA", rgba.size, (0, 0, 0, 255))
    flat.alpha_composite(rgba)
    return flat.convert("RGB")


def encode_png(img: Image.Image) -> bytes:
    """Encode an image as PNG bytes."""
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def encode_jpeg(img: Image.Image, quality: int) -> bytes:
    """Encode an image as JPEG bytes; transparency is composited onto black."""
    buf = io.BytesIO()
    _flatten_for_jpeg(img).save(buf, format="JPEG", quality=max(1, min(int(quality), 100)))
    return buf.getvalue()


def _decode(data: bytes, fmt: str) -> Image.Image:
    img = Image.open(io.BytesIO(data), formats=[fmt])
    img.load()
    return img


def decode_png(data: bytes) -> Image.Image:
    """Decode PNG bytes; raises PIL.UnidentifiedImageError on other data."""
    return _decode(data, "PNG")


def decode_jpeg(data: bytes) -> Image.Image:
    """Decode JPEG bytes; raises PIL.UnidentifiedImageError on other data."""
    return _decode(data, "JPEG")


def encode_png_base64_data(img: Image.Image) -> str:
    """Encode an image as base64 PNG without a data-URI prefix."""
    return base64.b64encode(encode_png(img)).decode("ascii")


def encode_jpeg_base64_data(img: Image.Image, quality: int) -> str:
    """Encode an image as base64 JPEG without a data-URI prefix."""
    return base64.b64encode(encode_jpeg(img, quality)).decode("ascii")


def encode_png_base64(img: Image.Image) -> str:
    """Encode an image as a PNG data URI."""
    return PNG_BASE64_PREFIX + encode_png_base64_data(img)


def encode_jpeg_base64(img: Image.Image, quality: int) -> str:
    """Encode an image as a JPEG data URI."""
    return JPEG_BASE64_PREFIX + encode_jpeg_base64_data(img, quality)