"""Colour, string and indexing helpers."""

from __future__ import annotations

import os

from .rand import rand_int


class ColorError(ValueError):
    """Raised when a hex colour string cannot be parsed."""


_HAN_RANGES = (
    (0x2E80, 0x2E99),
    (0x2E9B, 0x2EF3),
    (0x2F00, 0x2FD5),
    (0x3005, 0x3005),
    (0x3007, 0x3007),
    (0x3021, 0x3029),
    (0x3038, 0x303B),
    (0x3400, 0x4DBF),
    (0x4E00, 0x9FFF),
    (0xF900, 0xFA6D),
    (0xFA70, 0xFAD9),
    (0x16FE2, 0x16FE3),
    (0x16FF0, 0x16FF1),
    (0x20000, 0x2A6DF),
    (0x2A700, 0x2B739),
    (0x2B740, 0x2B81D),
    (0x2B820, 0x2CEA1),
    (0x2CEB0, 0x2EBE0),
    (0x2EBF0, 0x2EE5D),
    (0x2F800, 0x2FA1D),
    (0x30000, 0x3134A),
    (0x31350, 0x323AF),
)


def format_alpha(val: float) -> int:
    """Convert an alpha in [0, 1] to a byte value; values above 1 count as 1."""
    alpha = min(float(val), 1.0) * 255
    return max(0, int(alpha))


def rgb_to_hex(red: int, green: int, blue: int) -> str:
    """Format RGB components as a lowercase hex string without a leading '#'."""
    return "".join(f"{component:02x}" for component in (red, green, blue))


def _parse_component(text: str) -> int:
    try:
        return int(text, 16)
    except ValueError:
        return 0


def hex_to_rgb(hex_str: str) -> tuple[int, int, int]:
    """Split a six-digit hex string (no '#') into RGB components.

    Unparsable components come back as 0.
    """
    return (
        _parse_component(hex_str[:2]),
        _parse_component(hex_str[2:4]),
        _parse_component(hex_str[4:]),
    )


def _hex_digit(ch: str) -> int:
    if ch in "0123456789abcdefABCDEF":
        return int(ch, 16)
    raise ColorError("hexToByte component invalid")


def parse_hex_color(s: str) -> tuple[int, int, int, int]:
    """Parse '#rrggbb' or '#rgb' into an opaque RGBA tuple."""
    if not s or s[0] != "#":
        raise ColorError("hex color must start with '#'")
    digits = s[1:]
    if len(digits) == 6:
        r, g, b = (
            _hex_digit(digits[i]) * 16 + _hex_digit(digits[i + 1]) for i in (0, 2, 4)
        )
    elif len(digits) == 3:
        r, g, b = (_hex_digit(ch) * 17 for ch in digits)
    else:
        raise ColorError("hexToByte component invalid")
    return (r, g, b, 0xFF)


def path_exists(path: str | os.PathLike) -> bool:
    """Return whether ``path`` exists; other stat failures propagate."""
    try:
        os.stat(path)
    except FileNotFoundError:
        return False
    return True


def _is_han(ch: str) -> bool:
    code = ord(ch)
    return any(lo <= code <= hi for lo, hi in _HAN_RANGES)


def is_chinese_char(s: str) -> bool:
    """Return whether ``s`` contains at least one Han character."""
    return any(_is_han(ch) for ch in s)


def len_chinese_char(s: str) -> int:
    """Return the number of characters (code points) in ``s``."""
    return len(s)


def rand_index(length: int) -> int:
    """Return a random index below ``length``, or -1 when ``length`` is 0."""
    if length == 0:
        return -1
    return min(rand_int(0, length), length - 1)