from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from .color import RGB
from .pattern import GRID

CHANNELS = 4  # R, G, B, A


@dataclass(frozen=True)
class Geometry:
    size: int
    base_margin: int
    cell: int
    offset: int

    @classmethod
    def from_options(cls, size: int, margin: float) -> "Geometry":
        base_margin = math.floor(size * margin)
        cell = max(0, math.floor((size - base_margin * 2) / GRID))
        offset = math.floor((size - cell * GRID) / 2)
        return cls(size=size, base_margin=base_margin, cell=cell, offset=offset)

    def rect(self, row: int, col: int) -> Tuple[int, int, int, int]:
        """(x, y, width, height) of one grid cell."""
        return (
            col * self.cell + self.offset,
            row * self.cell + self.offset,
            self.cell,
            self.cell,
        )


def new_buffer(size: int) -> bytearray:
    """Zero-filled (fully transparent) size x size RGBA buffer."""
    return bytearray(size * size * CHANNELS)


def _expand(start: int, length: int, size: int, stroke: int) -> Tuple[int, int]:
    # grow only when the grown span still fits inside the canvas
    if start >= stroke and start + length <= size - 2 * stroke:
        return start - stroke, length + 2 * stroke
    return start, length


def paint_rect(
    buffer: bytearray,
    size: int,
    x: int,
    y: int,
    width: int,
    height: int,
    color: RGB,
    stroke_size: int = 0,
) -> None:
    """
    Paint an opaque rectangle into a row-major RGBA buffer of size x size.

    stroke_size > 0 grows the rect by that many pixels on each side, per axis,
    when the grown rect stays on canvas. Pixels at x >= size or y >= size are skipped.
    """
    if stroke_size > 0:
        x, width = _expand(x, width, size, stroke_size)
        y, height = _expand(y, height, size, stroke_size)

    x0, y0 = max(0, x), max(0, y)
    x1, y1 = min(x + width, size), min(y + height, size)
    if x1 <= x0 or y1 <= y0:
        return

    run = bytes((color[0], color[1], color[2], 255)) * (x1 - x0)
    stride = size * CHANNELS
    for row in range(y0, y1):
        start = row * stride + x0 * CHANNELS
        buffer[start:start + len(run)] = run
