"""Common barcode types: colour schemes, metadata and the one-dimensional code."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Tuple

from barcodekit.bitlist import BitList

Color = Tuple[int, int, int, int]
Bounds = Tuple[int, int, int, int]

BLACK: Color = (0, 0, 0, 255)
WHITE: Color = (255, 255, 255, 255)

TYPE_QR = "QR Code"
TYPE_PDF = "PDF417"
TYPE_2OF5 = "2 of 5"
TYPE_2OF5_INTERLEAVED = "2 of 5 (interleaved)"


@dataclass(frozen=True)
class ColorScheme:
    """Foreground and background colours (RGBA) plus the name of a colour model."""

    foreground: Color = BLACK
    background: Color = WHITE
    model: str = "gray16"


DEFAULT_COLOR_SCHEME = ColorScheme()


@dataclass(frozen=True)
class Metadata:
    """The kind of a barcode and whether it is one- or two-dimensional."""

    code_kind: str
    dimensions: int


class Barcode(ABC):
    """A barcode that can be read as an image, pixel by pixel."""

    content: str
    color: ColorScheme
    checksum: Optional[int] = None

    @abstractmethod
    def metadata(self) -> Metadata:
        """Return the kind and dimensionality of the code."""

    @abstractmethod
    def bounds(self) -> Bounds:
        """Return ``(min_x, min_y, max_x, max_y)`` of the image."""

    @abstractmethod
    def at(self, x: int, y: int) -> Color:
        """Return the colour of the pixel at ``(x, y)``."""

    @property
    def width(self) -> int:
        min_x, _, max_x, _ = self.bounds()
        return max_x - min_x

    @property
    def height(self) -> int:
        _, min_y, _, max_y = self.bounds()
        return max_y - min_y


class OneDCode(Barcode):
    """A one-dimensional barcode whose bars are the set bits of a BitList."""

    def __init__(
        self,
        kind: str,
        content: str,
        bars: BitList,
        color: ColorScheme = DEFAULT_COLOR_SCHEME,
        checksum: Optional[int] = None,
    ) -> None:
        self.kind = kind
        self.content = content
        self.bars = bars
        self.color = color
        self.checksum = checksum

    def metadata(self) -> Metadata:
        return Metadata(self.kind, 1)

    def bounds(self) -> Bounds:
        return (0, 0, len(self.bars), 1)

    def at(self, x: int, y: int) -> Color:
        return self.color.foreground if self.bars.get_bit(x) else self.color.background