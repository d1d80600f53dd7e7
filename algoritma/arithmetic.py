"""Small number-theory helpers: factorial and prime checks, powers, Fibonacci, parity."""

from __future__ import annotations

from enum import Enum


class Parity(Enum):
    """Whether a whole number is even or odd."""

    EVEN = "even"
    ODD = "odd"


def is_factorial(n: int) -> bool:
    """Return True if ``n`` equals ``k!`` for some positive ``k``."""
    if n <= 0:
        return False
    divisor = 1
    while n % divisor == 0:
        n //= divisor
        divisor += 1
    return n == 1


def is_prime(n: int) -> bool:
    """Deterministic primality check using the 6k +/- 1 trial division."""
    if n <= 1:
        return False
    if n in (2, 3):
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    candidate = 5
    while candidate * candidate <= n:
        if n % candidate == 0 or n % (candidate + 2) == 0:
            return False
        candidate += 6
    return True


def _power_by_halving(base: int, exponent: int) -> int:
    if exponent == 0:
        return 1
    half = _power_by_halving(base, exponent >> 1)
    if exponent & 1 == 0:
        return half * half
    return half * half * base


def power_recursive(base: int, exponent: int) -> float:
    """Compute ``base ** exponent`` by recursive squaring.

    Raises ZeroDivisionError for a zero base with a negative exponent.
    """
    if exponent < 0:
        return 1.0 / power_recursive(base, -exponent)
    return float(_power_by_halving(base, exponent))


def power_linear(base: int, exponent: int) -> float:
    """Compute ``base ** exponent`` by iterative binary exponentiation.

    Raises ZeroDivisionError for a zero base with a negative exponent.
    """
    if exponent < 0:
        return 1.0 / power_linear(base, -exponent)
    result = 1
    while exponent:
        if exponent & 1:
            result *= base
        base *= base
        exponent >>= 1
    return float(result)


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with ``fibonacci(0) == 0``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def parity(text: str) -> Parity:
    """Classify a string of decimal digits as even or odd.

    Raises ValueError if the text is empty or holds anything but digits.
    """
    if not text or not all("0" <= char <= "9" for char in text):
        raise ValueError("input must consist of decimal digits only")
    return Parity.EVEN if int(text) % 2 == 0 else Parity.ODD