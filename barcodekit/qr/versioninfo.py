"""QR code versions, error correction levels and their capacities."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


class ErrorCorrectionLevel(IntEnum):
    """How much recovery data a QR code holds."""

    L = 0  # recovers 7% of data
    M = 1  # recovers 15% of data
    Q = 2  # recovers 25% of data
    H = 3  # recovers 30% of data

    def __str__(self) -> str:
        return self.name


class EncodingMode(IntEnum):
    """Mode indicators written at the start of QR data."""

    NUMERIC = 1
    ALPHANUMERIC = 2
    BYTE = 4
    KANJI = 8


# Widths of the character count field: (version < 10, version < 27, otherwise).
_CHAR_COUNT_BITS = {
    EncodingMode.NUMERIC: (10, 12, 14),
    EncodingMode.ALPHANUMERIC: (9, 11, 13),
    EncodingMode.BYTE: (8, 16, 16),
    EncodingMode.KANJI: (8, 10, 12),
}


@dataclass(frozen=True)
class VersionInfo:
    """Block layout of one QR version at one error correction level."""

    version: int
    level: ErrorCorrectionLevel
    ecc_codewords_per_block: int
    blocks_in_group1: int
    data_codewords_per_block_in_group1: int
    blocks_in_group2: int
    data_codewords_per_block_in_group2: int

    def total_data_bytes(self) -> int:
        """Return the number of data codewords the symbol holds."""
        return (
            self.blocks_in_group1 * self.data_codewords_per_block_in_group1
            + self.blocks_in_group2 * self.data_codewords_per_block_in_group2
        )

    def char_count_bits(self, mode: int) -> int:
        """Return the width of the character count field; 0 for unknown modes."""
        try:
            widths = _CHAR_COUNT_BITS[EncodingMode(mode)]
        except ValueError:
            return 0
        if self.version < 10:
            return widths[0]
        if self.version < 27:
            return widths[1]
        return widths[2]

    def module_width(self) -> int:
        """Return the number of modules along one side of the symbol."""
        return (self.version - 1) * 4 + 21

    def alignment_pattern_placements(self) -> list[int]:
        """Return the row/column coordinates of the alignment pattern centres."""
        if self.version == 1:
            return []

        first = 6
        last = self.module_width() - 7
        space = last - first
        count = math.ceil(space / 28) + 1

        result = [0] * count
        result[0] = first
        result[-1] = last
        if count > 2:
            step = math.ceil(space / (count - 1))
            if step % 2 == 1:
                frac = space / (count - 1)
                fractional = frac - math.floor(frac)
                rounded = math.ceil(frac) if fractional >= 0.5 else math.floor(frac)
                step = step - 1 if rounded % 2 == 0 else step + 1
            for i in range(1, count - 1):
                result[i] = last - step * (count - 1 - i)
        return result


_L, _M, _Q, _H = (
    ErrorCorrectionLevel.L,
    ErrorCorrectionLevel.M,
    ErrorCorrectionLevel.Q,
    ErrorCorrectionLevel.H,
)

_TABLE = [
    (1, _L, 7, 1, 19, 0, 0), (1, _M, 10, 1, 16, 0, 0), (1, _Q, 13, 1, 13, 0, 0), (1, _H, 17, 1, 9, 0, 0),
    (2, _L, 10, 1, 34, 0, 0), (2, _M, 16, 1, 28, 0, 0), (2, _Q, 22, 1, 22, 0, 0), (2, _H, 28, 1, 16, 0, 0),
    (3, _L, 15, 1, 55, 0, 0), (3, _M, 26, 1, 44, 0, 0), (3, _Q, 18, 2, 17, 0, 0), (3, _H, 22, 2, 13, 0, 0),
    (4, _L, 20, 1, 80, 0, 0), (4, _M, 18, 2, 32, 0, 0), (4, _Q, 26, 2, 24, 0, 0), (4, _H, 16, 4, 9, 0, 0),
    (5, _L, 26, 1, 108, 0, 0), (5, _M, 24, 2, 43, 0, 0), (5, _Q, 18, 2, 15, 2, 16), (5, _H, 22, 2, 11, 2, 12),
    (6, _L, 18, 2, 68, 0, 0), (6, _M, 16, 4, 27, 0, 0), (6, _Q, 24, 4, 19, 0, 0), (6, _H, 28, 4, 15, 0, 0),
    (7, _L, 20, 2, 78, 0, 0), (7, _M, 18, 4, 31, 0, 0), (7, _Q, 18, 2, 14, 4, 15), (7, _H, 26, 4, 13, 1, 14),
    (8, _L, 24, 2, 97, 0, 0), (8, _M, 22, 2, 38, 2, 39), (8, _Q, 22, 4, 18, 2, 19), (8, _H, 26, 4, 14, 2, 15),
    (9, _L, 30, 2, 116, 0, 0), (9, _M, 22, 3, 36, 2, 37), (9, _Q, 20, 4, 16, 4, 17), (9, _H, 24, 4, 12, 4, 13),
    (10, _L, 18, 2, 68, 2, 69), (10, _M, 26, 4, 43, 1, 44), (10, _Q, 24, 6, 19, 2, 20), (10, _H, 28, 6, 15, 2, 16),
    (11, _L, 20, 4, 81, 0, 0), (11, _M, 30, 1, 50, 4, 51), (11, _Q, 28, 4, 22, 4, 23), (11, _H, 24, 3, 12, 8, 13),
    (12, _L, 24, 2, 92, 2, 93), (12, _M, 22, 6, 36, 2, 37), (12, _Q, 26, 4, 20, 6, 21), (12, _H, 28, 7, 14, 4, 15),
    (13, _L, 26, 4, 107, 0, 0), (13, _M, 22, 8, 37, 1, 38), (13, _Q, 24, 8, 20, 4, 21), (13, _H, 22, 12, 11, 4, 12),
    (14, _L, 30, 3, 115, 1, 116), (14, _M, 24, 4, 40, 5, 41), (14, _Q, 20, 11, 16, 5, 17), (14, _H, 24, 11, 12, 5, 13),
    (15, _L, 22, 5, 87, 1, 88), (15, _M, 24, 5, 41, 5, 42), (15, _Q, 30, 5, 24, 7, 25), (15, _H, 24, 11, 12, 7, 13),
    (16, _L, 24, 5, 98, 1, 99), (16, _M, 28, 7, 45, 3, 46), (16, _Q, 24, 15, 19, 2, 20), (16, _H, 30, 3, 15, 13, 16),
    (17, _L, 28, 1, 107, 5, 108), (17, _M, 28, 10, 46, 1, 47), (17, _Q, 28, 1, 22, 15, 23), (17, _H, 28, 2, 14, 17, 15),
    (18, _L, 30, 5, 120, 1, 121), (18, _M, 26, 9, 43, 4, 44), (18, _Q, 28, 17, 22, 1, 23), (18, _H, 28, 2, 14, 19, 15),
    (19, _L, 28, 3, 113, 4, 114), (19, _M, 26, 3, 44, 11, 45), (19, _Q, 26, 17, 21, 4, 22), (19, _H, 26, 9, 13, 16, 14),
    (20, _L, 28, 3, 107, 5, 108), (20, _M, 26, 3, 41, 13, 42), (20, _Q, 30, 15, 24, 5, 25), (20, _H, 28, 15, 15, 10, 16),
    (21, _L, 28, 4, 116, 4, 117), (21, _M, 26, 17, 42, 0, 0), (21, _Q, 28, 17, 22, 6, 23), (21, _H, 30, 19, 16, 6, 17),
    (22, _L, 28, 2, 111, 7, 112), (22, _M, 28, 17, 46, 0, 0), (22, _Q, 30, 7, 24, 16, 25), (22, _H, 24, 34, 13, 0, 0),
    (23, _L, 30, 4, 121, 5, 122), (23, _M, 28, 4, 47, 14, 48), (23, _Q, 30, 11, 24, 14, 25), (23, _H, 30, 16, 15, 14, 16),
    (24, _L, 30, 6, 117, 4, 118), (24, _M, 28, 6, 45, 14, 46), (24, _Q, 30, 11, 24, 16, 25), (24, _H, 30, 30, 16, 2, 17),
    (25, _L, 26, 8, 106, 4, 107), (25, _M, 28, 8, 47, 13, 48), (25, _Q, 30, 7, 24, 22, 25), (25, _H, 30, 22, 15, 13, 16),
    (26, _L, 28, 10, 114, 2, 115), (26, _M, 28, 19, 46, 4, 47), (26, _Q, 28, 28, 22, 6, 23), (26, _H, 30, 33, 16, 4, 17),
    (27, _L, 30, 8, 122, 4, 123), (27, _M, 28, 22, 45, 3, 46), (27, _Q, 30, 8, 23, 26, 24), (27, _H, 30, 12, 15, 28, 16),
    (28, _L, 30, 3, 117, 10, 118), (28, _M, 28, 3, 45, 23, 46), (28, _Q, 30, 4, 24, 31, 25), (28, _H, 30, 11, 15, 31, 16),
    (29, _L, 30, 7, 116, 7, 117), (29, _M, 28, 21, 45, 7, 46), (29, _Q, 30, 1, 23, 37, 24), (29, _H, 30, 19, 15, 26, 16),
    (30, _L, 30, 5, 115, 10, 116), (30, _M, 28, 19, 47, 10, 48), (30, _Q, 30, 15, 24, 25, 25), (30, _H, 30, 23, 15, 25, 16),
    (31, _L, 30, 13, 115, 3, 116), (31, _M, 28, 2, 46, 29, 47), (31, _Q, 30, 42, 24, 1, 25), (31, _H, 30, 23, 15, 28, 16),
    (32, _L, 30, 17, 115, 0, 0), (32, _M, 28, 10, 46, 23, 47), (32, _Q, 30, 10, 24, 35, 25), (32, _H, 30, 19, 15, 35, 16),
    (33, _L, 30, 17, 115, 1, 116), (33, _M, 28, 14, 46, 21, 47), (33, _Q, 30, 29, 24, 19, 25), (33, _H, 30, 11, 15, 46, 16),
    (34, _L, 30, 13, 115, 6, 116), (34, _M, 28, 14, 46, 23, 47), (34, _Q, 30, 44, 24, 7, 25), (34, _H, 30, 59, 16, 1, 17),
    (35, _L, 30, 12, 121, 7, 122), (35, _M, 28, 12, 47, 26, 48), (35, _Q, 30, 39, 24, 14, 25), (35, _H, 30, 22, 15, 41, 16),
    (36, _L, 30, 6, 121, 14, 122), (36, _M, 28, 6, 47, 34, 48), (36, _Q, 30, 46, 24, 10, 25), (36, _H, 30, 2, 15, 64, 16),
    (37, _L, 30, 17, 122, 4, 123), (37, _M, 28, 29, 46, 14, 47), (37, _Q, 30, 49, 24, 10, 25), (37, _H, 30, 24, 15, 46, 16),
    (38, _L, 30, 4, 122, 18, 123), (38, _M, 28, 13, 46, 32, 47), (38, _Q, 30, 48, 24, 14, 25), (38, _H, 30, 42, 15, 32, 16),
    (39, _L, 30, 20, 117, 4, 118), (39, _M, 28, 40, 47, 7, 48), (39, _Q, 30, 43, 24, 22, 25), (39, _H, 30, 10, 15, 67, 16),
    (40, _L, 30, 19, 118, 6, 119), (40, _M, 28, 18, 47, 31, 48), (40, _Q, 30, 34, 24, 34, 25), (40, _H, 30, 20, 15, 61, 16),
]

VERSION_INFOS: tuple[VersionInfo, ...] = tuple(VersionInfo(*row) for row in _TABLE)


def find_smallest_version_info(
    level: ErrorCorrectionLevel, mode: EncodingMode, data_bits: int
) -> Optional[VersionInfo]:
    """Return the smallest version that fits ``data_bits`` of data, or None."""
    data_bits += 4  # mode indicator
    for vi in VERSION_INFOS:
        if vi.level == level and vi.total_data_bytes() * 8 >= data_bits + vi.char_count_bits(mode):
            return vi
    return None