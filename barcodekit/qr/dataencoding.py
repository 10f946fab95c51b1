"""Turning text into the data bit stream of a QR code."""

from __future__ import annotations

import re
from enum import Enum
from typing import Callable, Tuple

from barcodekit.bitlist import BitList
from barcodekit.qr.versioninfo import (
    EncodingMode,
    ErrorCorrectionLevel,
    VersionInfo,
    find_smallest_version_info,
)

EncodeResult = Tuple[BitList, VersionInfo]
EncodeFunc = Callable[[str, ErrorCorrectionLevel], EncodeResult]

_ALPHANUMERIC_CHARSET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ $%*+-./:"
_INTEGER = re.compile(r"[+-]?[0-9]+")


class Encoding(Enum):
    """Encoding mode for QR codes."""

    AUTO = "Auto"
    NUMERIC = "Numeric"
    ALPHANUMERIC = "AlphaNumeric"
    UNICODE = "Unicode"

    def __str__(self) -> str:
        return self.value

    def encoder(self) -> EncodeFunc:
        """Return the function that encodes content in this mode."""
        return {
            Encoding.AUTO: encode_auto,
            Encoding.NUMERIC: encode_numeric,
            Encoding.ALPHANUMERIC: encode_alphanumeric,
            Encoding.UNICODE: encode_unicode,
        }[self]


def add_padding_and_terminator(bits: BitList, version_info: VersionInfo) -> None:
    """Append the terminator, byte alignment and pad bytes up to capacity."""
    capacity = version_info.total_data_bytes() * 8
    for _ in range(4):
        if len(bits) >= capacity:
            break
        bits.add_bit(False)

    while len(bits) % 8 != 0:
        bits.add_bit(False)

    pad_bytes = (236, 17)
    i = 0
    while len(bits) < capacity:
        bits.add_byte(pad_bytes[i % 2])
        i += 1


def _version_for(level: ErrorCorrectionLevel, mode: EncodingMode, bit_count: int) -> VersionInfo:
    vi = find_smallest_version_info(level, mode, bit_count)
    if vi is None:
        raise ValueError("To much data to encode")
    return vi


def encode_numeric(content: str, level: ErrorCorrectionLevel) -> EncodeResult:
    """Encode decimal digits, three per 10 bits."""
    bit_count = (len(content) // 3) * 10 + {0: 0, 1: 4, 2: 7}[len(content) % 3]
    vi = _version_for(level, EncodingMode.NUMERIC, bit_count)

    bits = BitList()
    bits.add_bits(int(EncodingMode.NUMERIC), 4)
    bits.add_bits(len(content), vi.char_count_bits(EncodingMode.NUMERIC))

    for pos in range(0, len(content), 3):
        chunk = content[pos:pos + 3]
        if not _INTEGER.fullmatch(chunk) or int(chunk) < 0:
            raise ValueError(f'"{content}" can not be encoded as {Encoding.NUMERIC}')
        bits.add_bits(int(chunk), {3: 10, 1: 4, 2: 7}[len(chunk)])

    add_padding_and_terminator(bits, vi)
    return bits, vi


def encode_alphanumeric(content: str, level: ErrorCorrectionLevel) -> EncodeResult:
    """Encode digits, upper case letters and a few symbols, two per 11 bits."""
    bit_count = (len(content) // 2) * 11 + (6 if len(content) % 2 == 1 else 0)
    vi = _version_for(level, EncodingMode.ALPHANUMERIC, bit_count)

    bits = BitList()
    bits.add_bits(int(EncodingMode.ALPHANUMERIC), 4)
    bits.add_bits(len(content), vi.char_count_bits(EncodingMode.ALPHANUMERIC))

    indices = []
    for ch in content:
        idx = _ALPHANUMERIC_CHARSET.find(ch)
        if idx < 0:
            raise ValueError(f'"{content}" can not be encoded as {Encoding.ALPHANUMERIC}')
        indices.append(idx)

    pairs = iter(indices)
    for first, second in zip(pairs, pairs):
        bits.add_bits(first * 45 + second, 11)
    if len(indices) % 2 == 1:
        bits.add_bits(indices[-1], 6)

    add_padding_and_terminator(bits, vi)
    return bits, vi


def encode_unicode(content: str, level: ErrorCorrectionLevel) -> EncodeResult:
    """Encode the UTF-8 bytes of the content in byte mode, without an ECI header."""
    data = content.encode("utf-8")
    vi = _version_for(level, EncodingMode.BYTE, len(data) * 8)

    bits = BitList()
    bits.add_bits(int(EncodingMode.BYTE), 4)
    bits.add_bits(len(data), vi.char_count_bits(EncodingMode.BYTE))
    for b in data:
        bits.add_byte(b)

    add_padding_and_terminator(bits, vi)
    return bits, vi


def encode_auto(content: str, level: ErrorCorrectionLevel) -> EncodeResult:
    """Use the first of numeric, alphanumeric and unicode that can encode the content."""
    for encoder in (encode_numeric, encode_alphanumeric, encode_unicode):
        try:
            return encoder(content, level)
        except ValueError:
            continue
    raise ValueError(f'No encoding found to encode "{content}"')