"""Order statistics of sorted matrices by binary search on the answer."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Sequence

Matrix = Sequence[Sequence[int]]


def _require_cells(matrix: Matrix) -> None:
    if not matrix or not matrix[0]:
        raise ValueError("matrix must have at least one row and one column")


def count_at_most(matrix: Matrix, value: int) -> int:
    """Count entries not greater than ``value`` in a matrix with sorted rows."""
    return sum(bisect_right(row, value) for row in matrix)


def kth_smallest(matrix: Matrix, k: int) -> int:
    """Return the k-th smallest entry (1-based) of a row- and column-sorted matrix.

    When ``k`` is at least the number of entries the largest entry is returned.
    """
    _require_cells(matrix)
    rows, cols = len(matrix), len(matrix[0])
    low, high = matrix[0][0], matrix[-1][-1]
    if rows * cols <= k:
        return high
    while low < high:
        mid = low + (high - low) // 2
        if count_at_most(matrix, mid) < k:
            low = mid + 1
        else:
            high = mid
    return low


def find_median(matrix: Matrix) -> int:
    """Return the median of a matrix whose rows are sorted.

    For an even number of entries this is the upper of the two middle values.
    """
    _require_cells(matrix)
    half = len(matrix) * len(matrix[0]) // 2
    low = min(row[0] for row in matrix)
    high = max(row[-1] for row in matrix)
    while low <= high:
        mid = low + (high - low) // 2
        if count_at_most(matrix, mid) <= half:
            low = mid + 1
        else:
            high = mid - 1
    return low