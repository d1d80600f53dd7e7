"""Rabin-Miller probabilistic primality test."""

from __future__ import annotations

import random
from collections.abc import Sequence


def reverse_binary(n: int) -> list[int]:
    """Return the binary digits of ``n``, least significant first."""
    bits = []
    while n > 0:
        bits.append(n % 2)
        n //= 2
    return bits


def modular_exponent(base: int, exponent_bits: Sequence[int], modulus: int) -> int:
    """Raise ``base`` to the exponent given by ``exponent_bits`` (LSB first) mod ``modulus``."""
    if modulus == 1:
        return 0
    if not exponent_bits:
        return 1
    square = base
    result = base if exponent_bits[0] == 1 else 1
    for bit in exponent_bits[1:]:
        square = square * square % modulus
        if bit == 1:
            result = square * result % modulus
    return result


def _witness_round(d: int, n: int, rng: random.Random) -> bool:
    """Return True if a random witness does not prove ``n`` composite."""
    witness = rng.randint(2, n - 2)
    x = modular_exponent(witness, reverse_binary(d), n)
    if x in (1, n - 1):
        return True
    while d != n - 1:
        x = x * x % n
        d *= 2
        if x == 1:
            return False
        if x == n - 1:
            return True
    return False


def is_probable_prime(
    n: int, rounds: int = 10, rng: random.Random | None = None
) -> bool:
    """Return True if ``n`` passes ``rounds`` Rabin-Miller rounds."""
    if n <= 4:
        return n in (2, 3)
    if n % 2 == 0:
        return False
    if rng is None:
        rng = random.Random()
    d = n - 1
    while d % 2 == 0:
        d //= 2
    return all(_witness_round(d, n, rng) for _ in range(rounds))