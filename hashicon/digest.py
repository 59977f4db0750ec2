from __future__ import annotations

import hashlib
import logging
from typing import Callable, Optional

from .errors import HashFailure
from .options import HashAlgorithm

logger = logging.getLogger(__name__)

# (message, salt, algorithm) -> digest bytes
DigestProvider = Callable[[bytes, bytes, HashAlgorithm], Optional[bytes]]


class HashlibDigest:
    """Default digest provider backed by hashlib."""

    def __call__(self, message: bytes, salt: bytes, algorithm: HashAlgorithm) -> bytes:
        h = hashlib.new(algorithm.hashlib_name)
        h.update(message)
        if salt:
            h.update(salt)
        return h.digest()


def checksum(
    message: bytes,
    salt: bytes,
    algorithm: HashAlgorithm,
    provider: Optional[DigestProvider] = None,
) -> bytes:
    """
    Digest of message (+ salt) through the given provider.

    Raises HashFailure when the provider yields nothing or fewer bytes than the
    algorithm's fixed digest size.
    """
    provider = provider or HashlibDigest()
    digest = provider(message, salt, algorithm)
    if not digest:
        raise HashFailure(f"{algorithm.hashlib_name}: digest provider returned nothing")

    digest = bytes(digest)
    if len(digest) < algorithm.digest_size:
        raise HashFailure(
            f"{algorithm.hashlib_name}: expected {algorithm.digest_size} bytes, got {len(digest)}"
        )

    logger.debug("%s digest %s", algorithm.hashlib_name, digest.hex())
    return digest
