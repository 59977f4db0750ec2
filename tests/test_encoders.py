import pytest
from PIL import Image

from hashicon.encoders import (
    PNG_SIGNATURE,
    PillowEncoder,
    ZlibEncoder,
    decode_png,
    encode_rgba,
    get_encoder,
)
from hashicon.errors import EncodeFailure
from hashicon.generator import generate
from hashicon.options import HashAlgorithm, IdenticonOptions


@pytest.mark.parametrize("name", ["pillow", "zlib"])
@pytest.mark.parametrize("transparent", [True, False])
def test_png_round_trip(tmp_path, name, transparent):
    opts = IdenticonOptions(text="round trip", size=48, transparent=transparent,
                            hash_algorithm=HashAlgorithm.SHA512)
    buf = generate(opts)
    out = tmp_path / f"icon_{name}.png"

    encode_rgba(str(out), buf, 48, 48, encoder=get_encoder(name))

    data, width, height = decode_png(str(out))
    assert (width, height) == (48, 48)
    assert data == bytes(buf)


def test_zlib_encoder_bytes_are_a_png():
    data = ZlibEncoder().to_bytes(bytes(2 * 2 * 4), 2, 2)
    assert data.startswith(PNG_SIGNATURE)
    assert data[12:16] == b"IHDR"
    assert data.endswith(b"IEND\xaeB`\x82")


def test_pillow_reads_zlib_output(tmp_path):
    out = tmp_path / "z.png"
    ZlibEncoder().encode(str(out), bytes([10, 20, 30, 255]) * 9, 3, 3)
    with Image.open(out) as img:
        assert img.mode == "RGBA"
        assert img.getpixel((2, 2)) == (10, 20, 30, 255)


def test_unknown_encoder():
    with pytest.raises(EncodeFailure):
        get_encoder("gif")


def test_missing_directory_is_encode_failure(tmp_path):
    out = tmp_path / "nope" / "icon.png"
    with pytest.raises(EncodeFailure):
        encode_rgba(str(out), bytes(16), 2, 2, encoder=PillowEncoder())
    with pytest.raises(EncodeFailure):
        encode_rgba(str(out), bytes(16), 2, 2, encoder=ZlibEncoder())


def test_buffer_size_mismatch():
    with pytest.raises(EncodeFailure):
        ZlibEncoder().to_bytes(bytes(15), 2, 2)
    with pytest.raises(EncodeFailure):
        ZlibEncoder().to_bytes(b"", 0, 0)
