"""Checking of click captcha answers."""

from __future__ import annotations


def validate(sx: int, sy: int, dx: int, dy: int, width: int, height: int, padding: int) -> bool:
    """Return whether the click (sx, sy) falls inside the padded target area."""
    new_width = width + padding * 2
    new_height = height + padding * 2
    new_dx = max(dx, dx - padding)
    new_dy = max(dy, dy - padding)
    return new_dx <= sx <= new_dx + new_width and new_dy <= sy <= new_dy + new_height