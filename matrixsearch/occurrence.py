"""First and last positions of a key in a sorted sequence."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Sequence


def first_occurrence(nums: Sequence[int], key: int) -> int | None:
    """Return the lowest index holding ``key``, or None if it is absent."""
    index = bisect_left(nums, key)
    if index < len(nums) and nums[index] == key:
        return index
    return None


def last_occurrence(nums: Sequence[int], key: int) -> int | None:
    """Return the highest index holding ``key``, or None if it is absent."""
    index = bisect_right(nums, key) - 1
    if index >= 0 and nums[index] == key:
        return index
    return None


def search_range(nums: Sequence[int], target: int) -> tuple[int | None, int | None]:
    """Return ``(first, last)`` indices of ``target`` in ascending ``nums``."""
    return first_occurrence(nums, target), last_occurrence(nums, target)