import pytest

from barcodekit.bitlist import BitList


def test_new_list_has_requested_length_and_is_clear():
    bits = BitList(10)
    assert len(bits) == 10
    assert not any(bits.get_bit(i) for i in range(10))


def test_empty_list():
    bits = BitList()
    assert len(bits) == 0
    assert bits.get_bytes() == b""


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        BitList(-1)


def test_set_and_get_round_trip():
    bits = BitList(40)
    bits.set_bit(33, True)
    assert bits.get_bit(33)
    bits.set_bit(33, False)
    assert not bits.get_bit(33)


def test_add_bit_appends_in_order():
    bits = BitList()
    pattern = [True, False, True, True, False]
    bits.add_bit(*pattern)
    assert list(bits) == pattern


def test_add_byte_round_trips_through_get_bytes():
    bits = BitList()
    for value in (0, 17, 236, 255):
        bits.add_byte(value)
    assert bits.get_bytes() == bytes([0, 17, 236, 255])


def test_add_bits_takes_lowest_bits():
    bits = BitList()
    bits.add_bits(0b1101, 3)
    assert list(bits) == [True, False, True]


def test_partial_byte_is_padded_with_zeros():
    bits = BitList()
    bits.add_bit(True)
    assert bits.get_bytes() == b"\x80"


def test_iterate_bytes_matches_get_bytes():
    bits = BitList()
    bits.add_bits(4, 4)
    bits.add_bits(11, 9)
    bits.add_byte(236)
    assert bytes(bits.iterate_bytes()) == bits.get_bytes()
    assert len(bits.get_bytes()) == (len(bits) + 7) // 8


def test_growth_past_many_words():
    bits = BitList()
    for i in range(5000):
        bits.add_bit(i % 3 == 0)
    assert len(bits) == 5000
    assert all(bits.get_bit(i) == (i % 3 == 0) for i in range(5000))


def test_out_of_range_access_raises():
    bits = BitList(8)
    with pytest.raises(IndexError):
        bits.get_bit(8)
    with pytest.raises(IndexError):
        bits.set_bit(-1, True)