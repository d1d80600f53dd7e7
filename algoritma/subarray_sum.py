"""Count contiguous subarrays that add up to a target."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable


def subarray_sum(target: int, values: Iterable[int]) -> int:
    """Return how many contiguous runs of ``values`` sum to ``target``."""
    prefix_counts: Counter[int] = Counter()
    running = 0
    count = 0
    for value in values:
        running += value
        if running == target:
            count += 1
        count += prefix_counts[running - target]
        prefix_counts[running] += 1
    return count