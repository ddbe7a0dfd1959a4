"""Membership tests for sorted 2-D matrices."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence

Matrix = Sequence[Sequence[int]]


def _is_empty(matrix: Matrix) -> bool:
    return not matrix or not matrix[0]


def contains_sorted(nums: Sequence[int], target: int) -> bool:
    """Tell whether ``target`` occurs in the ascending sequence ``nums``."""
    index = bisect_left(nums, target)
    return index < len(nums) and nums[index] == target


def search_rows(matrix: Matrix, target: int) -> bool:
    """Search a matrix with sorted rows by binary search in every row."""
    return any(contains_sorted(row, target) for row in matrix)


def search_staircase(matrix: Matrix, target: int) -> bool:
    """Search a row- and column-sorted matrix from its top-right corner."""
    if _is_empty(matrix):
        return False
    row, col = 0, len(matrix[0]) - 1
    while row < len(matrix) and col >= 0:
        value = matrix[row][col]
        if value == target:
            return True
        if value > target:
            col -= 1
        else:
            row += 1
    return False


def search_row_range(matrix: Matrix, target: int) -> bool:
    """Search the first row whose range covers ``target``.

    The matrix read row by row is expected to be ascending.
    """
    if _is_empty(matrix):
        return False
    row = next((r for r in matrix if r[0] <= target <= r[-1]), None)
    return row is not None and contains_sorted(row, target)


def search_flattened(matrix: Matrix, target: int) -> bool:
    """Binary search a matrix as one ascending sequence read row by row."""
    if _is_empty(matrix):
        return False
    width = len(matrix[0])
    start, end = 0, len(matrix) * width - 1
    while start <= end:
        mid = (start + end) // 2
        row, col = divmod(mid, width)
        value = matrix[row][col]
        if value == target:
            return True
        if target < value:
            end = mid - 1
        else:
            start = mid + 1
    return False