"""Deterministic 5x5 identicons rendered to RGBA buffers and PNG files."""

from .color import BACKGROUND, RGB, fold, hsl_to_rgb
from .digest import HashlibDigest, checksum
from .encoders import PillowEncoder, ZlibEncoder, decode_png, encode_rgba, get_encoder
from .errors import EncodeFailure, HashFailure, IdenticonError, InvalidOptions
from .generator import IdenticonMeta, describe, generate, generate_image, render, rows
from .options import MAX_SALT_LENGTH, MAX_TEXT_LENGTH, HashAlgorithm, IdenticonOptions

__version__ = "0.1.0"

__all__ = [
    "BACKGROUND",
    "EncodeFailure",
    "HashAlgorithm",
    "HashFailure",
    "HashlibDigest",
    "IdenticonError",
    "IdenticonMeta",
    "IdenticonOptions",
    "InvalidOptions",
    "MAX_SALT_LENGTH",
    "MAX_TEXT_LENGTH",
    "PillowEncoder",
    "RGB",
    "ZlibEncoder",
    "checksum",
    "decode_png",
    "describe",
    "encode_rgba",
    "fold",
    "generate",
    "generate_image",
    "get_encoder",
    "hsl_to_rgb",
    "render",
    "rows",
]
