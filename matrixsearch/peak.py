"""Peak finding in a 2-D grid by binary search over columns."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = Sequence[Sequence[int]]

# Cells outside the grid are treated as this value by find_peak_grid.
_OUTSIDE = -1


def _require_cells(mat: Matrix) -> None:
    if not mat or not mat[0]:
        raise ValueError("matrix must have at least one row and one column")


def column_max(matrix: Matrix, col: int) -> tuple[int, int]:
    """Return ``(value, row)`` of the largest entry in column ``col``.

    On ties the topmost row wins.
    """
    _require_cells(matrix)
    row = max(range(len(matrix)), key=lambda r: matrix[r][col])
    return matrix[row][col], row


def find_peak_grid(mat: Matrix) -> tuple[int, int] | None:
    """Return ``(row, col)`` of a cell strictly greater than its neighbours.

    Cells beyond the left and right edges count as -1. Returns None when the
    search finds no peak.
    """
    _require_cells(mat)
    width = len(mat[0])
    low, high = 0, width - 1
    while low <= high:
        mid = (low + high) // 2
        peak, row = column_max(mat, mid)
        left = mat[row][mid - 1] if mid > 0 else _OUTSIDE
        right = mat[row][mid + 1] if mid < width - 1 else _OUTSIDE
        if peak > left and peak > right:
            return row, mid
        if left > peak:
            high = mid - 1
        else:
            low = mid + 1
    return None


def find_peak_grid_by_comparison(mat: Matrix) -> tuple[int, int] | None:
    """Return ``(row, col)`` of a peak, comparing neighbours in place.

    A cell on an edge has no neighbour on that side. Returns None when the
    search finds no peak.
    """
    _require_cells(mat)
    width = len(mat[0])
    low, high = 0, width - 1
    while low <= high:
        mid = (low + high) // 2
        _, row = column_max(mat, mid)
        here = mat[row][mid]
        if mid > 0 and mat[row][mid - 1] > here:
            high = mid - 1
        elif mid + 1 < width and mat[row][mid + 1] > here:
            low = mid + 1
        else:
            return row, mid
    return None