"""Bit manipulation helpers on 64-bit words."""

from __future__ import annotations

_MASK_64 = (1 << 64) - 1


def count_set_bits(n: int) -> int:
    """Count the set bits of ``n`` as a 64-bit two's complement word."""
    n &= _MASK_64
    count = 0
    while n:
        count += 1
        n &= n - 1
    return count


def count_bits_flip(a: int, b: int) -> int:
    """Count the bits that must be flipped to turn ``a`` into ``b``."""
    return count_set_bits(a ^ b)


def bit_count(value: int) -> int:
    """Count the set bits of ``value`` as an unsigned 64-bit word."""
    value &= _MASK_64
    count = 0
    while value:
        count += value & 1
        value >>= 1
    return count


def hamming_distance(a: int | str, b: int | str) -> int:
    """Return the Hamming distance between two integers or two equal-length strings."""
    if isinstance(a, str) or isinstance(b, str):
        if not (isinstance(a, str) and isinstance(b, str)):
            raise TypeError("both arguments must be strings or both integers")
        if len(a) != len(b):
            raise ValueError("strings must have the same length")
        return sum(x != y for x, y in zip(a, b))
    return bit_count(a ^ b)