from __future__ import annotations

from typing import List, MutableSequence


def invert_rows(rows: List[MutableSequence[int]], max_intensity: int) -> None:
    """Invert every value against ``max_intensity`` using unsigned 8-bit arithmetic."""
    top = max_intensity & 0xFF
    for row in rows:
        for x, value in enumerate(row):
            row[x] = (top - value) & 0xFF


def flip_rows(rows: List[MutableSequence[int]]) -> None:
    """Reverse each row in place by swapping from both ends toward the middle."""
    for row in rows:
        i = 0
        j = len(row) - 1
        while i < j:
            row[i], row[j] = row[j], row[i]
            i += 1
            j -= 1
