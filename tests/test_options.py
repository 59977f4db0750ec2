import pytest

from hashicon.errors import InvalidOptions
from hashicon.options import (
    MAX_SALT_LENGTH,
    MAX_TEXT_LENGTH,
    HashAlgorithm,
    IdenticonOptions,
    truncate_utf8,
)


def test_defaults():
    opts = IdenticonOptions()
    assert opts.text == "" and opts.salt == ""
    assert opts.size == 64
    assert opts.margin == 0.08
    assert opts.transparent is True
    assert opts.stroke is True
    assert opts.stroke_size == 1
    assert opts.hash_algorithm is HashAlgorithm.MD5
    opts.validate()


def test_text_truncated_on_construction_and_override():
    opts = IdenticonOptions(text="a" * 10000, salt="b" * 5000)
    assert len(opts.text_bytes) == MAX_TEXT_LENGTH
    assert len(opts.salt_bytes) == MAX_SALT_LENGTH

    opts.text = "c" * (MAX_TEXT_LENGTH + 1)
    assert opts.text == "c" * MAX_TEXT_LENGTH


def test_input_just_over_limit_is_not_wrapped():
    # len % MAX would keep a single byte here
    opts = IdenticonOptions(text="z" * (MAX_TEXT_LENGTH + 1))
    assert len(opts.text) == MAX_TEXT_LENGTH


def test_custom_limits():
    opts = IdenticonOptions(text="abcdef", salt="xyz", max_text_length=4, max_salt_length=1)
    assert opts.text == "abcd"
    assert opts.salt == "x"

    opts = IdenticonOptions(text="q" * 5000, max_text_length=8000)
    assert len(opts.text) == 5000


def test_truncate_utf8_drops_split_character():
    assert truncate_utf8("aé", 2) == "a"
    assert truncate_utf8("aé", 3) == "aé"
    assert truncate_utf8("", 0) == ""


@pytest.mark.parametrize(
    "token, expected",
    [
        ("md5", HashAlgorithm.MD5),
        ("SHA1", HashAlgorithm.SHA1),
        ("sha256", HashAlgorithm.SHA256),
        (" sha512 ", HashAlgorithm.SHA512),
        ("whirlpool", HashAlgorithm.MD5),
    ],
)
def test_parse_algorithm(token, expected):
    assert HashAlgorithm.parse(token) is expected


def test_parse_algorithm_strict():
    with pytest.raises(InvalidOptions):
        HashAlgorithm.parse("whirlpool", strict=True)


def test_digest_sizes():
    assert [a.digest_size for a in HashAlgorithm] == [16, 20, 32, 64]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"size": 0},
        {"size": -3},
        {"margin": 0.5},
        {"margin": -0.1},
        {"stroke_size": -1},
        {"stroke_size": 1.5},
        {"stroke_size": True},
        {"stroke_size": "2"},
        {"hash_algorithm": "md5"},
    ],
)
def test_validate_rejects(kwargs):
    with pytest.raises(InvalidOptions):
        IdenticonOptions(**kwargs).validate()


def test_lowering_limit_recuts_existing_values():
    opts = IdenticonOptions(text="abcdef", salt="uvwxyz")
    opts.max_text_length = 2
    opts.max_salt_length = 3
    assert opts.text == "ab"
    assert opts.salt == "uvw"

    opts.max_text_length = 10
    assert opts.text == "ab"
