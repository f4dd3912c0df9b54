"""Problems on integer sequences and strings."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence


def lis_lengths(values: Sequence[int]) -> list[int]:
    """Length of the longest strictly increasing subsequence ending at each position."""
    tails: list[int] = []
    lengths: list[int] = []
    for value in values:
        pos = bisect_left(tails, value)
        if pos == len(tails):
            tails.append(value)
        else:
            tails[pos] = value
        lengths.append(pos + 1)
    return lengths


def lds_lengths(values: Sequence[int]) -> list[int]:
    """Length of the longest strictly decreasing subsequence starting at each position."""
    return lis_lengths(list(reversed(values)))[::-1]


def longest_bitonic(values: Sequence[int]) -> int:
    """Length of the longest subsequence that strictly rises and then strictly falls."""
    return max(
        (up + down - 1 for up, down in zip(lis_lengths(values), lds_lengths(values))),
        default=0,
    )


def closest_to_zero_pair(values: Sequence[int]) -> tuple[int, int]:
    """Two values, in ascending order, whose sum is closest to zero."""
    ordered = sorted(values)
    if len(ordered) < 2:
        raise ValueError("at least two values are required")
    best: int | None = None
    pair = (0, 0)
    for i, value in enumerate(ordered[:-1]):
        j = bisect_left(ordered, -value, i + 1)
        if j < len(ordered):
            cur = abs(value + ordered[j])
            if best is None or cur < best:
                best = cur
                pair = (value, ordered[j])
                if best == 0:
                    break
        if j > i + 1:
            cur = abs(value + ordered[j - 1])
            if best is None or cur < best:
                best = cur
                pair = (value, ordered[j - 1])
    return pair


def _visible(heights: Sequence[int], i: int, j: int) -> bool:
    dy = heights[j] - heights[i]
    dx = j - i
    return all(
        (heights[k] - heights[i]) * dx < dy * (k - i) for k in range(i + 1, j)
    )


def max_visible_buildings(heights: Sequence[int]) -> int:
    """Largest number of other rooftops visible from any single building."""
    counts = [0] * len(heights)
    for i in range(len(heights)):
        for j in range(i + 1, len(heights)):
            if _visible(heights, i, j):
                counts[i] += 1
                counts[j] += 1
    return max(counts, default=0)


def longest_non_palindrome(text: str) -> int:
    """Length of the longest substring that is not a palindrome, or -1 if none exists."""
    if len(set(text)) <= 1:
        return -1
    return len(text) - 1 if text == text[::-1] else len(text)


_PPAP = (True, True, False, True)


def is_ppap(text: str) -> bool:
    """Whether the string reduces to a single 'P' by collapsing 'PPAP' into 'P'."""
    stack: list[bool] = []
    for ch in text:
        stack.append(ch == "P")
        if len(stack) >= 4 and tuple(stack[-4:]) == _PPAP:
            del stack[-4:]
            stack.append(True)
    return stack == [True]