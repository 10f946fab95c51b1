# barcodekit

Barcode building blocks in plain Python, with no third-party dependencies.
Every barcode it produces is a grid of modules. You ask for the colour of
any pixel and write it out with whatever imaging library you already use.

What it offers:

- **2 of 5**: complete standard and interleaved barcodes, with an optional
  check digit.
- **QR codes**: the data bit stream (numeric, alphanumeric and UTF-8 byte
  mode, with automatic mode selection), the version and capacity tables for
  error correction levels L, M, Q and H, and the square module grid with
  its mask penalty score.
- **PDF-417**: the high-level codeword encoder (text, numeric and byte
  compaction) and the choice of row and column counts.
- **Scaling**: whole-number upscaling of any barcode, centred on a canvas.

## Installation

```
pip install .
```

## 2 of 5

```python
from barcodekit.twooffive import add_check_sum, encode

content = add_check_sum("1234567")            # "12345670"
bars = encode(content, interleaved=True)
row = [bars.at(x, 0) for x in range(bars.bounds()[2])]
```

`encode` returns a `OneDCode` (from `barcodekit.core`). Interleaved mode
needs an even number of digits. Empty content, or content with anything
but the digits 0-9, raises `ValueError`.

## QR data encoding

```python
from barcodekit.qr.dataencoding import Encoding, encode_auto
from barcodekit.qr.versioninfo import ErrorCorrectionLevel

bits, version_info = encode_auto("HELLO WORLD", ErrorCorrectionLevel.M)
version_info.version        # 1
bits.get_bytes()            # mode, count, data, terminator and pad bytes
```

`Encoding` has the members `AUTO`, `NUMERIC`, `ALPHANUMERIC` and `UNICODE`.
`Encoding.encoder()` returns the matching function: `encode_auto`,
`encode_numeric`, `encode_alphanumeric` or `encode_unicode`. Each returns a
`BitList` padded to the capacity of the smallest version that fits, together
with that `VersionInfo`. Content that the mode cannot encode, or that is too
long for any version, raises `ValueError`.

`barcodekit.qr.versioninfo` holds `ErrorCorrectionLevel`, `EncodingMode`,
the table `VERSION_INFOS`, and `find_smallest_version_info`. A `VersionInfo`
reports `total_data_bytes()`, `char_count_bits(mode)`, `module_width()` and
`alignment_pattern_placements()`.

`barcodekit.qr.qrcode.QRCode(dimension)` is a square grid of modules with
`get(x, y)`, `set(x, y, value)`, `at(x, y)` and `calc_penalty()`, the sum of
the four mask penalty rules `penalty_rule1()` to `penalty_rule4()`.

## PDF-417 codewords and dimensions

```python
from barcodekit.pdf417.highlevel import highlevel_encode
from barcodekit.pdf417.dimensions import calc_dimensions

words = highlevel_encode("Super !")       # [567, 615, 137, 809, 329]
columns, rows = calc_dimensions(len(words), 8)
```

`highlevel_encode` accepts `str` (encoded as UTF-8) or `bytes`.
`encode_numeric`, `encode_text` and `encode_binary` expose the single
compaction modes.

## Scaling and colours

`scale(barcode, width, height)` from `barcodekit.scaling` enlarges a barcode
by a whole-number factor and centres it, filling the margin with the
barcode's background colour; `scale_with_fill` takes the fill colour as an
argument. One-dimensional codes are stretched to any height. Asking for a
size smaller than the original raises `ValueError`.

`OneDCode`, `QRCode` and `twooffive.encode` take an optional `ColorScheme`
(from `barcodekit.core`) with RGBA `foreground` and `background` colours.

## What it does not do

- It does not produce a finished QR symbol: there are no error correction
  codewords, no block interleaving, and no placement of finder patterns,
  format information, data modules or masks onto a `QRCode`.
- It does not produce a finished PDF-417 symbol: there are no error
  correction codewords and no row rendering; it stops at the data codewords
  and the choice of dimensions.
- It writes no image files and has no command-line interface.

## Running the tests

```
pip install .[test]
pytest
```