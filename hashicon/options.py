from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import InvalidOptions

# Historical buffers were 4096 / 1024 bytes including the terminator.
MAX_TEXT_LENGTH = 4095
MAX_SALT_LENGTH = 1023


# ----------------------------
# Hash algorithm selector
# ----------------------------

class HashAlgorithm(Enum):
    MD5 = ("md5", 16)
    SHA1 = ("sha1", 20)
    SHA256 = ("sha256", 32)
    SHA512 = ("sha512", 64)

    def __init__(self, hashlib_name: str, digest_size: int) -> None:
        self.hashlib_name = hashlib_name
        self.digest_size = digest_size

    @classmethod
    def parse(cls, token: str, *, strict: bool = False) -> "HashAlgorithm":
        """
        "md5" / "SHA256" / ... -> member.

        Unknown tokens fall back to MD5 unless strict=True.
        """
        name = (token or "").strip().lower()
        for alg in cls:
            if alg.hashlib_name == name:
                return alg
        if strict:
            choices = ", ".join(a.hashlib_name for a in cls)
            raise InvalidOptions(f"unknown hash algorithm {token!r} (expected one of: {choices})")
        return cls.MD5


def truncate_utf8(value: str, max_bytes: int) -> str:
    """Cut value to at most max_bytes of UTF-8, dropping a split character whole."""
    raw = (value or "").encode("utf-8")
    if len(raw) <= max_bytes:
        return value or ""
    return raw[:max(0, max_bytes)].decode("utf-8", errors="ignore")


# ----------------------------
# Options
# ----------------------------

@dataclass
class IdenticonOptions:
    text: str = ""
    salt: str = ""
    size: int = 64
    margin: float = 0.08
    transparent: bool = True
    stroke: bool = True
    stroke_size: int = 1
    hash_algorithm: HashAlgorithm = HashAlgorithm.MD5
    max_text_length: int = MAX_TEXT_LENGTH
    max_salt_length: int = MAX_SALT_LENGTH

    def __setattr__(self, name: str, value) -> None:
        # text/salt are clamped on every assignment, and again whenever their limit changes.
        # The generated __init__ sets them before the limits, so assigning a limit cuts them too.
        limits = {"text": "max_text_length", "salt": "max_salt_length"}
        if name in limits and limits[name] in self.__dict__:
            value = truncate_utf8(value, self.__dict__[limits[name]])
        super().__setattr__(name, value)

        for field_name, limit_name in limits.items():
            if name == limit_name and field_name in self.__dict__:
                super().__setattr__(field_name, truncate_utf8(self.__dict__[field_name], value))

    @property
    def text_bytes(self) -> bytes:
        return self.text.encode("utf-8")

    @property
    def salt_bytes(self) -> bytes:
        return self.salt.encode("utf-8")

    def validate(self) -> None:
        if not isinstance(self.size, int) or isinstance(self.size, bool) or self.size <= 0:
            raise InvalidOptions(f"size must be a positive integer, got {self.size!r}")
        if not (0.0 <= self.margin < 0.5):
            raise InvalidOptions(f"margin must be in [0, 0.5), got {self.margin!r}")
        if not isinstance(self.stroke_size, int) or isinstance(self.stroke_size, bool) or self.stroke_size < 0:
            raise InvalidOptions(f"stroke_size must be an integer >= 0, got {self.stroke_size!r}")
        if not isinstance(self.hash_algorithm, HashAlgorithm):
            raise InvalidOptions(f"hash_algorithm must be a HashAlgorithm, got {self.hash_algorithm!r}")
