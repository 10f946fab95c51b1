"""Resizing barcodes to a given image size."""

from __future__ import annotations

from typing import Callable

from barcodekit.core import WHITE, Barcode, Bounds, Color, Metadata

PixelFunc = Callable[[int, int], Color]


class ScaledBarcode(Barcode):
    """A barcode drawn through a pixel function onto a larger canvas."""

    def __init__(self, wrapped: Barcode, pixel: PixelFunc, width: int, height: int) -> None:
        self.wrapped = wrapped
        self._pixel = pixel
        self._width = width
        self._height = height
        self.content = wrapped.content
        self.color = getattr(wrapped, "color", None)
        self.checksum = getattr(wrapped, "checksum", None)

    def metadata(self) -> Metadata:
        return self.wrapped.metadata()

    def bounds(self) -> Bounds:
        return (0, 0, self._width, self._height)

    def at(self, x: int, y: int) -> Color:
        return self._pixel(x, y)


def scale(barcode: Barcode, width: int, height: int) -> ScaledBarcode:
    """Resize ``barcode``, filling the margin with its background colour."""
    scheme = getattr(barcode, "color", None)
    fill = scheme.background if scheme is not None else WHITE
    return scale_with_fill(barcode, width, height, fill)


def scale_with_fill(barcode: Barcode, width: int, height: int, fill: Color) -> ScaledBarcode:
    """Resize ``barcode`` by a whole factor, centred, with ``fill`` around it."""
    dimensions = barcode.metadata().dimensions
    if dimensions == 1:
        return _scale_1d(barcode, width, height, fill)
    if dimensions == 2:
        return _scale_2d(barcode, width, height, fill)
    raise ValueError("unsupported barcode format")


def _scale_2d(barcode: Barcode, width: int, height: int, fill: Color) -> ScaledBarcode:
    org_width = barcode.width
    org_height = barcode.height
    factor = int(min(width / org_width, height / org_height))
    if factor <= 0:
        raise ValueError(
            f"can not scale barcode to an image smaller than {org_width}x{org_height}"
        )
    offset_x = (width - org_width * factor) // 2
    offset_y = (height - org_height * factor) // 2

    def pixel(x: int, y: int) -> Color:
        if x < offset_x or y < offset_y:
            return fill
        x = (x - offset_x) // factor
        y = (y - offset_y) // factor
        if x >= org_width or y >= org_height:
            return fill
        return barcode.at(x, y)

    return ScaledBarcode(barcode, pixel, width, height)


def _scale_1d(barcode: Barcode, width: int, height: int, fill: Color) -> ScaledBarcode:
    org_width = barcode.width
    factor = int(width / org_width)
    if factor <= 0:
        raise ValueError(f"can not scale barcode to an image smaller than {org_width}x1")
    offset_x = (width - org_width * factor) // 2

    def pixel(x: int, y: int) -> Color:
        if x < offset_x:
            return fill
        x = (x - offset_x) // factor
        if x >= org_width:
            return fill
        return barcode.at(x, 0)

    return ScaledBarcode(barcode, pixel, width, height)