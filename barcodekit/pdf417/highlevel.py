"""High-level PDF417 encoding: text, numeric and byte compaction."""

from __future__ import annotations

from enum import IntEnum
from typing import Union

from barcodekit.digits import rune_to_int

LATCH_TO_TEXT = 900
LATCH_TO_BYTE_PADDED = 901
LATCH_TO_NUMERIC = 902
LATCH_TO_BYTE = 924
SHIFT_TO_BYTE = 913

MIN_NUMERIC_COUNT = 13


class EncodingMode(IntEnum):
    """Compaction mode the encoder is currently in."""

    TEXT = 0
    NUMERIC = 1
    BINARY = 2


class SubMode(IntEnum):
    """Sub-mode of text compaction."""

    UPPER = 0
    LOWER = 1
    MIXED = 2
    PUNCT = 3


_MIXED_RAW = (
    48, 49, 50, 51, 52, 53, 54, 55, 56, 57, 38, 13, 9, 44, 58,
    35, 45, 46, 36, 47, 43, 37, 42, 61, 94, 0, 32, 0, 0, 0,
)
_PUNCT_RAW = (
    59, 60, 62, 64, 91, 92, 93, 95, 96, 126, 33, 13, 9, 44, 58,
    10, 45, 46, 36, 47, 34, 124, 42, 40, 41, 63, 123, 125, 39, 0,
)

_MIXED_MAP = {chr(cp): idx for idx, cp in enumerate(_MIXED_RAW) if cp > 0}
_PUNCT_MAP = {chr(cp): idx for idx, cp in enumerate(_PUNCT_RAW) if cp > 0}


def _runes(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def _is_text(ch: str) -> bool:
    return ch in "\t\n\r" or 32 <= ord(ch) <= 126


def _is_alpha_upper(ch: str) -> bool:
    return ch == " " or "A" <= ch <= "Z"


def _is_alpha_lower(ch: str) -> bool:
    return ch == " " or "a" <= ch <= "z"


def _digit_count(text: str) -> int:
    count = 0
    for ch in text:
        if rune_to_int(ch) == -1:
            break
        count += 1
    return count


def _text_count(text: str) -> int:
    result = 0
    for i, ch in enumerate(text):
        numeric = _digit_count(text[i:])
        if numeric >= MIN_NUMERIC_COUNT or (numeric == 0 and not _is_text(ch)):
            break
        result += 1
    return result


def _binary_count(data: bytes) -> int:
    result = 0
    for i in range(len(data)):
        rest = _runes(data[i:])
        if _digit_count(rest) >= MIN_NUMERIC_COUNT:
            break
        if _text_count(rest) > 5:
            break
        result += 1
    return result


def encode_numeric(digits: str) -> list[int]:
    """Encode decimal digits in groups of 44 as base-900 codewords."""
    words: list[int] = []
    for start in range(0, len(digits), 44):
        chunk = digits[start:start + 44]
        if not all(rune_to_int(ch) != -1 for ch in chunk):
            raise ValueError("Failed converting: " + chunk)
        number = int("1" + chunk)
        group: list[int] = []
        while number > 0:
            number, word = divmod(number, 900)
            group.append(word)
        words.extend(reversed(group))
    return words


def encode_text(text: str, submode: SubMode) -> tuple[SubMode, list[int]]:
    """Encode text starting in ``submode``; return the final sub-mode and codewords."""
    values: list[int] = []
    idx = 0
    while idx < len(text):
        ch = text[idx]
        if submode == SubMode.UPPER:
            if _is_alpha_upper(ch):
                values.append(26 if ch == " " else ord(ch) - ord("A"))
            elif _is_alpha_lower(ch):
                submode = SubMode.LOWER
                values.append(27)  # lower latch
                continue
            elif ch in _MIXED_MAP:
                submode = SubMode.MIXED
                values.append(28)  # mixed latch
                continue
            else:
                values += [29, _PUNCT_MAP.get(ch, 0)]  # punctuation shift
        elif submode == SubMode.LOWER:
            if _is_alpha_lower(ch):
                values.append(26 if ch == " " else ord(ch) - ord("a"))
            elif _is_alpha_upper(ch):
                values += [27, ord(ch) - ord("A")]  # upper shift
            elif ch in _MIXED_MAP:
                submode = SubMode.MIXED
                values.append(28)  # mixed latch
                continue
            else:
                values += [29, _PUNCT_MAP.get(ch, 0)]  # punctuation shift
        elif submode == SubMode.MIXED:
            if ch in _MIXED_MAP:
                values.append(_MIXED_MAP[ch])
            elif _is_alpha_upper(ch):
                submode = SubMode.UPPER
                values.append(28)  # upper latch
                continue
            elif _is_alpha_lower(ch):
                submode = SubMode.LOWER
                values.append(27)  # lower latch
                continue
            else:
                if idx + 1 < len(text) and text[idx + 1] in _PUNCT_MAP:
                    submode = SubMode.PUNCT
                    values.append(25)  # punctuation latch
                    continue
                values += [29, _PUNCT_MAP.get(ch, 0)]  # punctuation shift
        else:
            if ch in _PUNCT_MAP:
                values.append(_PUNCT_MAP[ch])
            else:
                submode = SubMode.UPPER
                values.append(29)  # upper latch
                continue
        idx += 1

    pairs = iter(values)
    result = [high * 30 + low for high, low in zip(pairs, pairs)]
    if len(values) % 2 != 0:
        result.append(values[-1] * 30 + 29)
    return submode, result


def encode_binary(data: bytes, start_mode: EncodingMode) -> list[int]:
    """Encode bytes in byte compaction: six bytes to five codewords, the rest one each."""
    count = len(data)
    if count == 1 and start_mode == EncodingMode.TEXT:
        result = [SHIFT_TO_BYTE]
    elif count % 6 == 0:
        result = [LATCH_TO_BYTE]
    else:
        result = [LATCH_TO_BYTE_PADDED]

    full = count - count % 6
    for start in range(0, full, 6):
        number = int.from_bytes(data[start:start + 6], "big")
        group = []
        for _ in range(5):
            number, word = divmod(number, 900)
            group.append(word)
        result.extend(reversed(group))
    result.extend(data[full:])
    return result


def highlevel_encode(data: Union[str, bytes]) -> list[int]:
    """Encode a message into PDF417 data codewords, switching modes as needed."""
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    mode = EncodingMode.TEXT
    submode = SubMode.UPPER
    result: list[int] = []

    while raw:
        runes = _runes(raw)
        numeric = _digit_count(runes)
        if numeric >= MIN_NUMERIC_COUNT or numeric == len(raw):
            result.append(LATCH_TO_NUMERIC)
            mode = EncodingMode.NUMERIC
            submode = SubMode.UPPER
            result += encode_numeric(raw[:numeric].decode("ascii"))
            raw = raw[numeric:]
            continue

        text = _text_count(runes)
        if text >= 5 or text == len(raw):
            if mode != EncodingMode.TEXT:
                result.append(LATCH_TO_TEXT)
                mode = EncodingMode.TEXT
                submode = SubMode.UPPER
            submode, words = encode_text(raw[:text].decode("ascii"), submode)
            result += words
            raw = raw[text:]
            continue

        binary = _binary_count(raw) or 1
        chunk = raw[:binary]
        if len(chunk) != 1 or mode != EncodingMode.TEXT:
            mode = EncodingMode.BINARY
            submode = SubMode.UPPER
        result += encode_binary(chunk, mode)
        raw = raw[binary:]

    return result