"""Standard and interleaved "2 of 5" barcodes."""

from __future__ import annotations

from dataclasses import dataclass

from barcodekit.bitlist import BitList
from barcodekit.core import (
    DEFAULT_COLOR_SCHEME,
    TYPE_2OF5,
    TYPE_2OF5_INTERLEAVED,
    ColorScheme,
    OneDCode,
)
from barcodekit.digits import int_to_rune, rune_to_int

Pattern = tuple[bool, ...]


def _bits(text: str) -> Pattern:
    return tuple(ch == "1" for ch in text)


_ENCODING_TABLE: dict[str, Pattern] = {
    "0": _bits("00110"),
    "1": _bits("10001"),
    "2": _bits("01001"),
    "3": _bits("11000"),
    "4": _bits("00101"),
    "5": _bits("10100"),
    "6": _bits("01100"),
    "7": _bits("00011"),
    "8": _bits("10010"),
    "9": _bits("01010"),
}

_NARROW_SPACES: Pattern = _bits("00000")


@dataclass(frozen=True)
class _Mode:
    start: Pattern
    end: Pattern
    wide: int = 3
    narrow: int = 1

    def width(self, is_wide: bool) -> int:
        return self.wide if is_wide else self.narrow


_STANDARD = _Mode(start=_bits("11011010"), end=_bits("1101011"))
_INTERLEAVED = _Mode(start=_bits("1010"), end=_bits("11101"))


def add_check_sum(content: str) -> str:
    """Return ``content`` with its check digit appended."""
    if not content:
        raise ValueError("content is empty")

    weight_three = len(content) % 2 == 1
    total = 0
    for ch in content:
        if ch not in _ENCODING_TABLE:
            raise ValueError(f'can not encode "{content}"')
        value = rune_to_int(ch)
        total += value * 3 if weight_three else value
        weight_three = not weight_three

    return content + int_to_rune(total % 10)


def _pattern(ch: str, content: str) -> Pattern:
    try:
        return _ENCODING_TABLE[ch]
    except KeyError:
        raise ValueError(f'can not encode "{content}"') from None


def encode(
    content: str, interleaved: bool, color: ColorScheme = DEFAULT_COLOR_SCHEME
) -> OneDCode:
    """Create a 2 of 5 barcode; interleaved mode needs an even number of digits."""
    if not content:
        raise ValueError("content is empty")
    if interleaved and len(content) % 2 == 1:
        raise ValueError("can only encode even number of digits in interleaved mode")

    mode = _INTERLEAVED if interleaved else _STANDARD
    if interleaved:
        pairs = [
            (_pattern(bar, content), _pattern(space, content))
            for bar, space in zip(content[::2], content[1::2])
        ]
    else:
        pairs = [(_pattern(ch, content), _NARROW_SPACES) for ch in content]

    bits = BitList()
    bits.add_bit(*mode.start)
    for bars, spaces in pairs:
        for bar_wide, space_wide in zip(bars, spaces):
            bits.add_bit(*([True] * mode.width(bar_wide)))
            bits.add_bit(*([False] * mode.width(space_wide)))
    bits.add_bit(*mode.end)

    kind = TYPE_2OF5_INTERLEAVED if interleaved else TYPE_2OF5
    return OneDCode(kind, content, bits, color)