from __future__ import annotations

import math
from typing import NamedTuple, Optional

from .errors import HashFailure

# Folding never looks at more than this many bytes.
FOLD_MAX_BYTES = 10

# Hue = fold(last 7 digest bytes) / HUE_SCALE
HUE_TAIL_BYTES = 7
HUE_SCALE = 0x0FFFFFFF
SATURATION = 0.5
LIGHTNESS = 0.7


class RGB(NamedTuple):
    red: int
    green: int
    blue: int


BACKGROUND = RGB(240, 240, 240)


def fold(data: Optional[bytes]) -> int:
    """
    Hex-expand the bytes ("%02x" each, left to right) and parse the result as base 16.

    Only the first FOLD_MAX_BYTES bytes count; this bounds the hue value.
    None / empty -> 0.
    """
    if not data:
        return 0
    return int(bytes(data[:FOLD_MAX_BYTES]).hex(), 16)


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    """
    HSL -> RGB, identicon.js flavour.

    h is a fraction of a turn; anything past 1.0 wraps through the sextant index.
    The in-sextant ramp is not interpolated, so every channel lands on one of two
    levels (hi / lo). Channels are floored to 0..255.
    """
    h *= 6
    s *= l if l < 0.5 else 1 - l
    hi = l + s
    s *= 2
    lo = hi - s
    table = (hi, hi, lo, lo, lo, lo + s)

    k = int(h)
    return RGB(
        math.floor(table[k % 6] * 255),
        math.floor(table[(k | 16) % 6] * 255),
        math.floor(table[(k | 8) % 6] * 255),
    )


def hue(digest: bytes) -> float:
    if len(digest) < HUE_TAIL_BYTES:
        raise HashFailure(f"digest too short for hue: {len(digest)} bytes")
    return fold(digest[-HUE_TAIL_BYTES:]) / HUE_SCALE


def foreground(digest: bytes) -> RGB:
    return hsl_to_rgb(hue(digest), SATURATION, LIGHTNESS)
