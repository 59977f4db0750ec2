from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from PIL import Image

from . import color, pattern
from .digest import DigestProvider, checksum
from .errors import InvalidOptions
from .options import IdenticonOptions
from .raster import Geometry, new_buffer, paint_rect

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IdenticonMeta:
    algorithm: str
    digest_hex: str
    foreground: color.RGB
    cells: Tuple[Tuple[int, int], ...]   # (row, column) of foreground cells, drawing order
    geometry: Geometry


def _checked(options: Optional[IdenticonOptions]) -> IdenticonOptions:
    if options is None:
        raise InvalidOptions("options are required")
    options.validate()
    return options


def _digest(options: IdenticonOptions, provider: Optional[DigestProvider]) -> bytes:
    return checksum(options.text_bytes, options.salt_bytes, options.hash_algorithm, provider)


def describe(options: IdenticonOptions, digest_provider: Optional[DigestProvider] = None) -> IdenticonMeta:
    """Everything generate() derives from the options, without rasterizing."""
    options = _checked(options)
    digest = _digest(options, digest_provider)
    return IdenticonMeta(
        algorithm=options.hash_algorithm.hashlib_name,
        digest_hex=digest.hex(),
        foreground=color.foreground(digest),
        cells=tuple(pattern.cells(digest)),
        geometry=Geometry.from_options(options.size, options.margin),
    )


def render(
    options: IdenticonOptions, digest_provider: Optional[DigestProvider] = None
) -> Tuple[bytearray, IdenticonMeta]:
    """
    Render the identicon for options into a fresh size x size RGBA buffer,
    hashing once; returns (buffer, meta).

    Background first (unless transparent), then the foreground cells on top,
    stroked when options.stroke is set. Raises InvalidOptions / HashFailure;
    nothing is returned on failure.
    """
    meta = describe(options, digest_provider)
    geo = meta.geometry
    size = options.size
    stroke = options.stroke_size if options.stroke else 0

    logger.debug(
        "size=%d cell=%d offset=%d fg=%s cells=%d",
        size, geo.cell, geo.offset, meta.foreground, len(meta.cells),
    )

    buf = new_buffer(size)
    if not options.transparent:
        paint_rect(buf, size, 0, 0, size, size, color.BACKGROUND)

    if geo.cell > 0:
        for row, col in meta.cells:
            x, y, w, h = geo.rect(row, col)
            paint_rect(buf, size, x, y, w, h, meta.foreground, stroke_size=stroke)

    return buf, meta


def generate(options: IdenticonOptions, digest_provider: Optional[DigestProvider] = None) -> bytearray:
    buf, _ = render(options, digest_provider)
    return buf


def generate_image(options: IdenticonOptions, digest_provider: Optional[DigestProvider] = None) -> Image.Image:
    buf = generate(options, digest_provider)
    return Image.frombytes("RGBA", (options.size, options.size), bytes(buf))


def rows(buffer: bytes, size: int) -> List[bytes]:
    """Split an RGBA buffer into one bytes object per scanline, top to bottom."""
    stride = size * 4
    return [bytes(buffer[i:i + stride]) for i in range(0, size * stride, stride)]
