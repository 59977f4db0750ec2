from __future__ import annotations


class IdenticonError(Exception):
    """Base class for everything raised by hashicon."""


class InvalidOptions(IdenticonError, ValueError):
    """Options cannot produce an image (bad size, margin, algorithm...)."""


class HashFailure(IdenticonError):
    """Digest provider returned nothing or a digest too short to use."""


class EncodeFailure(IdenticonError):
    """PNG encoder could not write the image."""
