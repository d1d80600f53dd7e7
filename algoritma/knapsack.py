"""Greedy fractional knapsack."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Item:
    """An item with a positive size and a profit."""

    size: float
    profit: float

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError("item size must be positive")

    def profit_per_unit(self) -> float:
        """Return the profit earned per unit of size."""
        return self.profit / self.size


def fractional_knapsack(
    capacity: float, items: Iterable[Item]
) -> tuple[float, list[tuple[float, float]]]:
    """Fill the knapsack greedily by profit per unit, splitting the last item.

    Returns the total profit and the picks as (amount taken, profit earned)
    pairs in the order taken. Raises ValueError for a negative capacity.
    """
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    remaining = capacity
    total = 0.0
    picks: list[tuple[float, float]] = []
    for item in sorted(items, key=Item.profit_per_unit, reverse=True):
        if remaining <= 0:
            break
        if remaining >= item.size:
            total += item.profit
            remaining -= item.size
            picks.append((item.size, item.profit))
        else:
            gained = item.profit_per_unit() * remaining
            total += gained
            picks.append((remaining, gained))
            remaining = 0
            break
    return total, picks