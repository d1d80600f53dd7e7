"""Error metrics between predicted and actual values."""

from __future__ import annotations

import math
from collections.abc import Sequence


def mean_squared_error(predicted: Sequence[float], actual: Sequence[float]) -> float:
    """Return the mean of the squared differences of two equal-length sequences.

    Raises ValueError if the lengths differ; returns NaN for two empty sequences.
    """
    if len(predicted) != len(actual):
        raise ValueError("The length of both arrays must be the same.")
    if not predicted:
        return math.nan
    error_sum = sum((p - a) ** 2 for p, a in zip(predicted, actual))
    return error_sum / len(predicted)