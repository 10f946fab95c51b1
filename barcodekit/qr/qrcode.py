"""The QR code symbol: a square grid of modules and its mask penalty score."""

from __future__ import annotations

import math

from barcodekit.bitlist import BitList
from barcodekit.core import (
    DEFAULT_COLOR_SCHEME,
    TYPE_QR,
    Barcode,
    Bounds,
    Color,
    ColorScheme,
    Metadata,
)

_FINDER_LIKE_1 = (True, False, True, True, True, False, True, False, False, False, False)
_FINDER_LIKE_2 = (False, False, False, False, True, False, True, True, True, False, True)


class QRCode(Barcode):
    """A square QR symbol of ``dimension`` modules per side."""

    def __init__(self, dimension: int, color: ColorScheme = DEFAULT_COLOR_SCHEME) -> None:
        self.dimension = dimension
        self.data = BitList(dimension * dimension)
        self.content = ""
        self.color = color

    def metadata(self) -> Metadata:
        return Metadata(TYPE_QR, 2)

    def bounds(self) -> Bounds:
        return (0, 0, self.dimension, self.dimension)

    def at(self, x: int, y: int) -> Color:
        return self.color.foreground if self.get(x, y) else self.color.background

    def get(self, x: int, y: int) -> bool:
        """Return whether the module at ``(x, y)`` is dark."""
        return self.data.get_bit(x * self.dimension + y)

    def set(self, x: int, y: int, value: bool) -> None:
        """Make the module at ``(x, y)`` dark or light."""
        self.data.set_bit(x * self.dimension + y, value)

    def calc_penalty(self) -> int:
        """Return the total mask penalty of the symbol."""
        return (
            self.penalty_rule1()
            + self.penalty_rule2()
            + self.penalty_rule3()
            + self.penalty_rule4()
        )

    def penalty_rule1(self) -> int:
        """Penalise runs of five or more equal modules in rows and columns."""
        result = 0
        dim = self.dimension
        for x in range(dim):
            check_x = check_y = False
            cnt_x = cnt_y = 0
            for y in range(dim):
                if self.get(x, y) == check_x:
                    cnt_x += 1
                else:
                    check_x = not check_x
                    if cnt_x >= 5:
                        result += cnt_x - 2
                    cnt_x = 1

                if self.get(y, x) == check_y:
                    cnt_y += 1
                else:
                    check_y = not check_y
                    if cnt_y >= 5:
                        result += cnt_y - 2
                    cnt_y = 1

            if cnt_x >= 5:
                result += cnt_x - 2
            if cnt_y >= 5:
                result += cnt_y - 2
        return result

    def penalty_rule2(self) -> int:
        """Penalise every 2x2 square of equal modules."""
        result = 0
        for x in range(self.dimension - 1):
            for y in range(self.dimension - 1):
                check = self.get(x, y)
                if (
                    self.get(x, y + 1) == check
                    and self.get(x + 1, y) == check
                    and self.get(x + 1, y + 1) == check
                ):
                    result += 3
        return result

    def penalty_rule3(self) -> int:
        """Penalise patterns that look like finder patterns."""
        result = 0
        width = len(_FINDER_LIKE_1)
        for x in range(self.dimension - width + 1):
            for y in range(self.dimension):
                along_x = tuple(self.get(x + i, y) for i in range(width))
                along_y = tuple(self.get(y, x + i) for i in range(width))
                if along_x in (_FINDER_LIKE_1, _FINDER_LIKE_2):
                    result += 40
                if along_y in (_FINDER_LIKE_1, _FINDER_LIKE_2):
                    result += 40
        return result

    def penalty_rule4(self) -> int:
        """Penalise a proportion of dark modules far from half."""
        total = len(self.data)
        dark = sum(self.data)
        perc_dark = dark * 100 / total
        floor = abs(math.floor(perc_dark / 5) - 10)
        ceil = abs(math.ceil(perc_dark / 5) - 10)
        return int(min(floor, ceil) * 10)