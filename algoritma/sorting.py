"""Bead, bubble and bucket sort, and the spiral (snail) read-out of a matrix."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def bead_sort(values: Iterable[int]) -> list[int]:
    """Return the non-negative integers of ``values`` in ascending order.

    Raises ValueError if any value is negative.
    """
    items = list(values)
    if any(value < 0 for value in items):
        raise ValueError("bead sort needs non-negative integers")
    if not items:
        return []
    length = len(items)
    # Beads that fall to the bottom of each column.
    columns = [sum(value > j for value in items) for j in range(max(items))]
    return [
        sum(column >= length - row for column in columns) for row in range(length)
    ]


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, sorted by bubble sort."""
    items = list(values)
    n = len(items)
    for done in range(n):
        for x in range(n - done - 1):
            if items[x] > items[x + 1]:
                items[x], items[x + 1] = items[x + 1], items[x]
    return items


def bucket_sort(values: Iterable[float]) -> list[float]:
    """Return values from [0, 1) in ascending order, sorted by bucket sort.

    Raises ValueError for a value outside [0, 1).
    """
    items = list(values)
    if any(not 0 <= value < 1 for value in items):
        raise ValueError("bucket sort needs values in [0, 1)")
    buckets: list[list[float]] = [[] for _ in items]
    for value in items:
        buckets[int(len(items) * value)].append(value)
    return [value for bucket in buckets for value in sorted(bucket)]


def snail_sort(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the elements of a square matrix in clockwise spiral order.

    An empty matrix gives an empty list; raises ValueError if it is not square.
    """
    if not matrix or not matrix[0]:
        return []
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("matrix must be square")
    directions = ((0, 1), (1, 0), (0, -1), (-1, 0))
    visited = {(0, 0)}
    row, col, heading = 0, 0, 0
    snail = [matrix[0][0]]
    while len(snail) < n * n:
        dr, dc = directions[heading]
        nr, nc = row + dr, col + dc
        if 0 <= nr < n and 0 <= nc < n and (nr, nc) not in visited:
            row, col = nr, nc
            visited.add((row, col))
            snail.append(matrix[row][col])
        else:
            heading = (heading + 1) % 4
    return snail