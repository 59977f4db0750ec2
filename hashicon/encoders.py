from __future__ import annotations

import logging
import struct
import zlib
from typing import Dict, Optional, Tuple, Type

from PIL import Image

from .errors import EncodeFailure

logger = logging.getLogger(__name__)

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def _check_buffer(buffer: bytes, width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise EncodeFailure(f"cannot encode a {width}x{height} image")
    if len(buffer) != width * height * 4:
        raise EncodeFailure(f"buffer holds {len(buffer)} bytes, expected {width * height * 4}")


class PillowEncoder:
    """Encode through Pillow's PNG plugin."""

    name = "pillow"

    def encode(self, path: str, buffer: bytes, width: int, height: int) -> None:
        _check_buffer(buffer, width, height)
        img = Image.frombytes("RGBA", (width, height), bytes(buffer))
        img.save(path, format="PNG")


class ZlibEncoder:
    """
    Minimal PNG writer: IHDR (8-bit RGBA), one IDAT with filter 0 on every
    scanline, IEND.
    """

    name = "zlib"

    @staticmethod
    def _chunk(kind: bytes, data: bytes) -> bytes:
        crc = zlib.crc32(kind + data) & 0xFFFFFFFF
        return struct.pack(">I", len(data)) + kind + data + struct.pack(">I", crc)

    def to_bytes(self, buffer: bytes, width: int, height: int) -> bytes:
        _check_buffer(buffer, width, height)
        stride = width * 4
        raw = b"".join(
            b"\x00" + bytes(buffer[y * stride:(y + 1) * stride]) for y in range(height)
        )
        ihdr = struct.pack(">IIBBBBB", width, height, 8, 6, 0, 0, 0)
        return (
            PNG_SIGNATURE
            + self._chunk(b"IHDR", ihdr)
            + self._chunk(b"IDAT", zlib.compress(raw, 9))
            + self._chunk(b"IEND", b"")
        )

    def encode(self, path: str, buffer: bytes, width: int, height: int) -> None:
        data = self.to_bytes(buffer, width, height)
        with open(path, "wb") as f:
            f.write(data)


ENCODERS: Dict[str, Type] = {
    PillowEncoder.name: PillowEncoder,
    ZlibEncoder.name: ZlibEncoder,
}


def get_encoder(name: str = "pillow"):
    try:
        return ENCODERS[name.lower()]()
    except KeyError:
        raise EncodeFailure(f"unknown encoder {name!r} (expected one of: {', '.join(ENCODERS)})") from None


def encode_rgba(path: str, buffer: bytes, width: int, height: int, encoder=None) -> None:
    """Write buffer to path as PNG. Any encoder/IO error surfaces as EncodeFailure."""
    encoder = encoder or PillowEncoder()
    logger.debug("encoding %dx%d with %s -> %s", width, height, getattr(encoder, "name", encoder), path)
    try:
        encoder.encode(path, buffer, width, height)
    except EncodeFailure:
        raise
    except (OSError, ValueError) as e:
        raise EncodeFailure(f"could not write {path}: {e}") from e


def decode_png(path: str) -> Tuple[bytes, int, int]:
    """Read a PNG back as (RGBA bytes, width, height)."""
    with Image.open(path) as img:
        rgba = img.convert("RGBA")
        return rgba.tobytes(), rgba.width, rgba.height
