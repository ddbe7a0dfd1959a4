"""Days needed to walk a distance with a repeating a, b, c daily schedule."""

from __future__ import annotations

import argparse
import sys
from itertools import cycle

MAX_DAYS = 10**9


def _validate(target: int, a: int, b: int, c: int) -> None:
    if target < 0:
        raise ValueError("target distance must not be negative")
    if min(a, b, c) < 0 or a + b + c <= 0:
        raise ValueError("daily distances must be non-negative with a positive sum")


def distance_after(days: int, a: int, b: int, c: int) -> int:
    """Return the distance covered after ``days`` days."""
    full, rest = divmod(days, 3)
    total = full * (a + b + c)
    if rest >= 1:
        total += a
    if rest >= 2:
        total += b
    return total


def days_by_cycle(target: int, a: int, b: int, c: int) -> int:
    """Return the first day on which ``target`` is reached, skipping whole cycles."""
    _validate(target, a, b, c)
    full, remaining = divmod(target, a + b + c)
    days = full * 3
    for step in cycle((a, b, c)):
        if remaining <= 0:
            break
        remaining -= step
        days += 1
    return days


def days_needed(target: int, a: int, b: int, c: int) -> int:
    """Return the first day on which ``target`` is reached, by binary search.

    Raises ValueError when more than MAX_DAYS days would be needed.
    """
    _validate(target, a, b, c)
    low, high = 0, MAX_DAYS
    answer = None
    while low <= high:
        mid = (low + high) // 2
        if distance_after(mid, a, b, c) >= target:
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    if answer is None:
        raise ValueError(f"target cannot be reached within {MAX_DAYS} days")
    return answer


def main(argv: list[str] | None = None) -> int:
    """Read a test count and then ``n a b c`` per test; print the day for each."""
    parser = argparse.ArgumentParser(
        prog="journey",
        description="Print the day on which each journey is completed.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=argparse.FileType("r"),
        help="input file (default: standard input)",
    )
    args = parser.parse_args(argv)
    stream = args.input if args.input is not None else sys.stdin
    try:
        values = [int(token) for token in stream.read().split()]
    except ValueError:
        parser.error("input must contain integers only")
    if not values:
        parser.error("missing test count")
    count, rest = values[0], values[1:]
    if count < 0 or len(rest) < 4 * count:
        parser.error("expected four integers for every test case")
    cases = iter(rest[: 4 * count])
    for target, a, b, c in zip(cases, cases, cases, cases):
        try:
            print(days_needed(target, a, b, c))
        except ValueError as exc:
            parser.error(str(exc))
    return 0