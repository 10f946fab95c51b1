"""Choosing the number of columns and rows of a PDF417 symbol."""

from __future__ import annotations

import math

MIN_COLS = 2
MAX_COLS = 30
MAX_ROWS = 30
MIN_ROWS = 2
MODULE_HEIGHT = 2
PREFERRED_RATIO = 3.0


def calculate_number_of_rows(m: int, k: int, c: int) -> int:
    """Return the rows needed for ``m`` data and ``k`` correction words in ``c`` columns."""
    rows = (m + 1 + k) // c + 1
    if c * rows >= m + 1 + k + c:
        rows -= 1
    return rows


def calc_dimensions(data_words: int, ecc_words: int) -> tuple[int, int]:
    """Return ``(columns, rows)``; ``(0, 0)`` when the data does not fit."""
    ratio = 0.0
    cols = 0
    rows = 0

    for c in range(MIN_COLS, MAX_COLS + 1):
        r = calculate_number_of_rows(data_words, ecc_words, c)
        if r < MIN_ROWS:
            break
        if r > MAX_ROWS:
            continue

        new_ratio = (17 * cols + 69) / (rows * MODULE_HEIGHT) if rows else math.inf
        if rows != 0 and abs(new_ratio - PREFERRED_RATIO) > abs(ratio - PREFERRED_RATIO):
            continue

        ratio = new_ratio
        cols = c
        rows = r

    if rows == 0:
        r = calculate_number_of_rows(data_words, ecc_words, MIN_COLS)
        if r < MIN_ROWS:
            rows = MIN_ROWS
            cols = MIN_COLS

    return cols, rows