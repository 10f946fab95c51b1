import pytest

from barcodekit.bitlist import BitList
from barcodekit.qr.dataencoding import (
    Encoding,
    add_padding_and_terminator,
    encode_alphanumeric,
    encode_auto,
    encode_numeric,
    encode_unicode,
)
from barcodekit.qr.versioninfo import ErrorCorrectionLevel, VersionInfo

L, M, H = ErrorCorrectionLevel.L, ErrorCorrectionLevel.M, ErrorCorrectionLevel.H


@pytest.mark.parametrize(
    "encoding,text",
    [
        (Encoding.AUTO, "Auto"),
        (Encoding.NUMERIC, "Numeric"),
        (Encoding.ALPHANUMERIC, "AlphaNumeric"),
        (Encoding.UNICODE, "Unicode"),
    ],
)
def test_encoding_str(encoding, text):
    assert str(encoding) == text


def test_encoder_lookup():
    assert Encoding.AUTO.encoder() is encode_auto
    assert Encoding.NUMERIC.encoder() is encode_numeric
    assert Encoding.ALPHANUMERIC.encoder() is encode_alphanumeric
    assert Encoding.UNICODE.encoder() is encode_unicode


def test_alphanumeric_hello_world():
    bits, vi = Encoding.ALPHANUMERIC.encoder()("HELLO WORLD", M)
    assert vi.version == 1
    assert bits.get_bytes() == bytes(
        [32, 91, 11, 120, 209, 114, 220, 77, 67, 64, 236, 17, 236, 17, 236, 17]
    )


def test_alphanumeric_capacity_limit():
    bits, vi = encode_alphanumeric("A" * 4296, L)
    assert vi.version == 40
    assert len(bits) == vi.total_data_bytes() * 8
    with pytest.raises(ValueError):
        encode_alphanumeric("A" * 4297, L)


@pytest.mark.parametrize("content,level", [("ABc", L), ("hello world", M)])
def test_alphanumeric_rejects_lower_case(content, level):
    with pytest.raises(ValueError):
        encode_alphanumeric(content, level)


def test_numeric_encoding():
    bits, vi = encode_numeric("01234567", H)
    assert vi.version == 1
    assert bits.get_bytes() == bytes([16, 32, 12, 86, 97, 128, 236, 17, 236])

    bits, vi = encode_numeric("0123456789012345", H)
    assert vi.version == 1
    assert bits.get_bytes() == bytes([16, 64, 12, 86, 106, 110, 20, 234, 80])


def test_numeric_rejects_letters():
    with pytest.raises(ValueError):
        encode_numeric("foo", H)


def test_numeric_too_long():
    with pytest.raises(ValueError):
        encode_numeric("1" * 14297, H)


def test_unicode_encoding():
    bits, vi = encode_unicode("A", H)
    assert vi.version == 1
    assert bits.get_bytes() == bytes([64, 20, 16, 236, 17, 236, 17, 236, 17])


def test_unicode_too_long():
    with pytest.raises(ValueError):
        encode_unicode("A" * 3000, H)


@pytest.mark.parametrize(
    "content,encoder",
    [
        ("0123456789", encode_numeric),
        ("ALPHA NUMERIC", encode_alphanumeric),
        ("unicode encoing", encode_unicode),
    ],
)
def test_auto_picks_matching_encoder(content, encoder):
    auto_bits, auto_vi = encode_auto(content, M)
    expected_bits, expected_vi = encoder(content, M)
    assert auto_bits.get_bytes() == expected_bits.get_bytes()
    assert auto_vi == expected_vi


def test_auto_too_long():
    with pytest.raises(ValueError):
        encode_auto("very long unicode encoding" + "A" * 3000, M)


def test_padding_fills_capacity_with_pad_bytes():
    vi = VersionInfo(1, H, 17, 1, 9, 0, 0)
    bits = BitList()
    bits.add_bits(0b101, 3)
    add_padding_and_terminator(bits, vi)
    assert len(bits) == 72
    assert bits.get_bytes() == bytes([0xA0, 236, 17, 236, 17, 236, 17, 236, 17])