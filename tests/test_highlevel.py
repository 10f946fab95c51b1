import pytest

from barcodekit.pdf417.highlevel import (
    LATCH_TO_TEXT,
    EncodingMode,
    SubMode,
    encode_binary,
    encode_numeric,
    encode_text,
    highlevel_encode,
)


@pytest.mark.parametrize(
    "message, expected",
    [
        ("01234", [902, 112, 434]),
        ("Super !", [567, 615, 137, 809, 329]),
        ("Super ", [567, 615, 137, 809]),
        ("ABC123", [1, 88, 32, 119]),
        ("123ABC", [841, 63, 840, 32]),
    ],
)
def test_highlevel_encode(message, expected):
    assert highlevel_encode(message) == expected


@pytest.mark.parametrize(
    "message, expected",
    [
        ("alcool", [924, 163, 238, 432, 766, 244]),
        ("alcoolique", [901, 163, 238, 432, 766, 244, 105, 113, 117, 101]),
    ],
)
def test_binary_encoder(message, expected):
    assert encode_binary(message.encode(), EncodingMode.TEXT) == expected


def test_single_byte_in_text_mode_uses_shift():
    assert encode_binary(b"\xff", EncodingMode.TEXT) == [913, 255]


def test_single_byte_outside_text_mode_uses_padded_latch():
    assert encode_binary(b"\xff", EncodingMode.BINARY) == [901, 255]


def test_non_ascii_goes_to_byte_mode():
    assert highlevel_encode("é") == [901, 0xC3, 0xA9]


def test_bytes_and_str_give_same_result():
    assert highlevel_encode(b"Super !") == highlevel_encode("Super !")


def test_text_returns_final_submode():
    assert encode_text("ab", SubMode.UPPER) == (SubMode.LOWER, [810, 59])


def test_text_upper_stays_upper():
    submode, words = encode_text("ABC", SubMode.UPPER)
    assert submode == SubMode.UPPER
    assert words == [1, 2 * 30 + 29]


def test_numeric_round_trip():
    digits = "12345678901234567890123456789012345678901234"
    value = 0
    for word in encode_numeric(digits):
        assert 0 <= word < 900
        value = value * 900 + word
    assert value == int("1" + digits)


def test_numeric_splits_in_groups_of_44():
    assert encode_numeric("1" * 45) == encode_numeric("1" * 44) + encode_numeric("1")


def test_numeric_rejects_non_digits():
    with pytest.raises(ValueError):
        encode_numeric("12a")


def test_numeric_then_text_latches_back():
    result = highlevel_encode("1234567890123abcde")
    assert result[0] == 902
    assert LATCH_TO_TEXT in result
    tail = encode_text("abcde", SubMode.UPPER)[1]
    assert result[-len(tail):] == tail
    assert result[-len(tail) - 1] == LATCH_TO_TEXT


def test_empty_message():
    assert highlevel_encode("") == []