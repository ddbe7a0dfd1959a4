"""Ranking rows of a soldiers/civilians matrix by strength."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence


def count_ones(row: Sequence[int]) -> int:
    """Count the leading ones in a row made of ones followed by zeros."""
    return bisect_left(row, 0, key=lambda value: -value)


def row_strengths(mat: Sequence[Sequence[int]]) -> list[tuple[int, int]]:
    """Return ``(row_index, ones)`` for every row, in row order."""
    return [(index, count_ones(row)) for index, row in enumerate(mat)]


def k_weakest_rows(mat: Sequence[Sequence[int]], k: int) -> list[int]:
    """Return indices of the ``k`` weakest rows, weakest first.

    Fewer ones means weaker; equal rows keep their original order.
    """
    if not 0 <= k <= len(mat):
        raise ValueError(f"k must be between 0 and {len(mat)}, got {k}")
    ranked = sorted(row_strengths(mat), key=lambda pair: (pair[1], pair[0]))
    return [index for index, _ in ranked[:k]]