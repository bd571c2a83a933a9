import base64

import pytest
from PIL import Image, UnidentifiedImageError

from captchakit.codec import (
    decode_jpeg,
    decode_png,
    encode_jpeg,
    encode_jpeg_base64,
    encode_jpeg_base64_data,
    encode_png,
    encode_png_base64,
    encode_png_base64_data,
)


@pytest.fixture
def rgba_image():
    img = Image.new("RGBA", (8, 6), (0, 0, 0, 0))
    img.putpixel((2, 3), (200, 100, 50, 255))
    return img


def test_png_round_trip(rgba_image):
    data = encode_png(rgba_image)
    assert data.startswith(b"\x89PNG\r\n\x1a\n")
    decoded = decode_png(data)
    assert decoded.size == rgba_image.size
    assert decoded.getpixel((2, 3)) == (200, 100, 50, 255)
    assert decoded.getpixel((0, 0))[3] == 0


def test_jpeg_round_trip_keeps_size():
    img = Image.new("RGB", (16, 16), (255, 255, 255))
    data = encode_jpeg(img, 100)
    assert data.startswith(b"\xff\xd8")
    decoded = decode_jpeg(data)
    assert decoded.size == (16, 16)
    assert all(channel > 240 for channel in decoded.getpixel((8, 8)))


def test_jpeg_transparency_becomes_dark(rgba_image):
    decoded = decode_jpeg(encode_jpeg(rgba_image, 100))
    assert all(channel < 20 for channel in decoded.getpixel((7, 0)))


def test_decode_wrong_format_raises(rgba_image):
    with pytest.raises(UnidentifiedImageError):
        decode_jpeg(encode_png(rgba_image))
    with pytest.raises(UnidentifiedImageError):
        decode_png(b"not an image")


def test_base64_data_matches_bytes(rgba_image):
    assert base64.b64decode(encode_png_base64_data(rgba_image)) == encode_png(rgba_image)
    assert base64.b64decode(encode_jpeg_base64_data(rgba_image, 80)) == encode_jpeg(rgba_image, 80)


def test_base64_prefixes(rgba_image):
    png_uri = encode_png_base64(rgba_image)
    jpeg_uri = encode_jpeg_base64(rgba_image, 100)
    assert png_uri == "data:image/png;base64," + encode_png_base64_data(rgba_image)
    assert jpeg_uri == "data:image/jpeg;base64," + encode_jpeg_base64_data(rgba_image, 100)