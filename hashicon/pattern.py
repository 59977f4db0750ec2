from __future__ import annotations

from typing import Iterator, List, Tuple

from .color import fold
from .errors import HashFailure

GRID = 5
PATTERN_BYTES = 15

# columns driven by each block of 5 digest bytes: middle first, then mirrored outwards
_COLUMNS: Tuple[Tuple[int, ...], ...] = ((2,), (1, 3), (0, 4))


def is_on(byte: int) -> bool:
    """Even byte -> foreground cell."""
    return fold(bytes([byte])) % 2 == 0


def cells(digest: bytes) -> Iterator[Tuple[int, int]]:
    """Yield (row, column) of every foreground cell, in drawing order."""
    if len(digest) < PATTERN_BYTES:
        raise HashFailure(f"digest too short for pattern: {len(digest)} bytes")

    for i in range(PATTERN_BYTES):
        if not is_on(digest[i]):
            continue
        row = i % GRID
        for col in _COLUMNS[i // GRID]:
            yield row, col


def grid(digest: bytes) -> List[List[bool]]:
    out = [[False] * GRID for _ in range(GRID)]
    for row, col in cells(digest):
        out[row][col] = True
    return out
