"""Random number helpers."""

from __future__ import annotations

import random
import secrets


def rand_int(lo: int, hi: int) -> int:
    """Return a secure random integer in the inclusive range [lo, hi].

    When ``lo`` is greater than ``hi``, ``hi`` is returned.
    """
    if lo > hi:
        return hi
    return lo + secrets.randbelow(hi - lo + 1)


def perm(n: int) -> list[int]:
    """Return a random permutation of ``range(n)``."""
    return random.sample(range(n), n)