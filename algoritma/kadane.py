"""Kadane's maximum subarray sum."""

from __future__ import annotations

from collections.abc import Iterable


def max_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous run of ``values``.

    Raises ValueError for an empty input.
    """
    best: int | None = None
    ending_here = 0
    for value in values:
        ending_here += value
        if best is None or best < ending_here:
            best = ending_here
        if ending_here < 0:
            ending_here = 0
    if best is None:
        raise ValueError("values must not be empty")
    return best