"""A fixed-size hash table of integers with separate chaining."""

from __future__ import annotations


class HashTable:
    """Integers hashed by remainder into a fixed number of chained buckets."""

    def __init__(self, size: int = 5) -> None:
        if size < 1:
            raise ValueError("table size must be at least 1")
        self._table: list[list[int]] = [[] for _ in range(size)]

    def _bucket(self, value: int) -> list[int]:
        return self._table[value % len(self._table)]

    def insert(self, value: int) -> None:
        """Append ``value`` to its bucket."""
        self._bucket(value).append(value)

    def remove(self, value: int) -> None:
        """Remove every occurrence of ``value``; absent values are ignored."""
        bucket = self._bucket(value)
        bucket[:] = [item for item in bucket if item != value]

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, int):
            return False
        return value in self._bucket(value)

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._table)

    def buckets(self) -> list[list[int]]:
        """Return a copy of every bucket, in index order."""
        return [list(bucket) for bucket in self._table]

    def format_table(self) -> str:
        """Render one line per bucket: its index, an arrow and its values."""
        return "".join(
            f"{index} --> " + "".join(f"{value} " for value in bucket) + "\n"
            for index, bucket in enumerate(self._table)
        )