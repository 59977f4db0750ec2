import hashlib

import pytest

from hashicon.digest import HashlibDigest, checksum
from hashicon.errors import HashFailure
from hashicon.options import HashAlgorithm


@pytest.mark.parametrize("algorithm", list(HashAlgorithm))
def test_hashlib_digest_matches_hashlib(algorithm):
    got = checksum(b"identicon", b"pepper", algorithm)
    assert got == hashlib.new(algorithm.hashlib_name, b"identiconpepper").digest()
    assert len(got) == algorithm.digest_size


def test_empty_salt_is_no_salt():
    assert HashlibDigest()(b"identicon", b"", HashAlgorithm.MD5) == bytes.fromhex("ad2b41613c8702b5372bbdc9a8107040")


def test_custom_provider_is_used():
    calls = []

    def provider(message, salt, algorithm):
        calls.append((message, salt, algorithm))
        return bytes(range(algorithm.digest_size))

    assert checksum(b"m", b"s", HashAlgorithm.SHA1, provider) == bytes(range(20))
    assert calls == [(b"m", b"s", HashAlgorithm.SHA1)]


@pytest.mark.parametrize("result", [None, b"", b"\x01" * 15])
def test_bad_provider_output(result):
    with pytest.raises(HashFailure):
        checksum(b"m", b"", HashAlgorithm.MD5, lambda m, s, a: result)
