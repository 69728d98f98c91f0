"""Small number-theoretic and recursive numeric routines."""

from __future__ import annotations

import math

__all__ = [
    "is_armstrong",
    "binary_to_decimal",
    "decimal_to_binary",
    "is_prime",
    "countdown",
    "combination",
    "josephus",
    "count_digit_one",
    "factorial",
    "fibonacci",
    "fibonacci_series",
    "exp_taylor",
]


def _digits(n: int) -> list[int]:
    return [int(ch) for ch in str(abs(n))]


def is_armstrong(n: int) -> bool:
    """Return True if the sum of the cubes of the digits of ``n`` equals ``n``.

    Digits of a negative number are taken as negative.
    """
    sign = -1 if n < 0 else 1
    total = sum((sign * digit) ** 3 for digit in _digits(n))
    return total == n


def binary_to_decimal(n: int) -> int:
    """Read the decimal digits of ``n`` as a binary numeral.

    Each digit equal to 1 contributes its power of two; any other digit
    contributes nothing. Non-positive inputs give 0.
    """
    if n <= 0:
        return 0
    return sum(2**power for power, digit in enumerate(reversed(_digits(n))) if digit == 1)


def decimal_to_binary(n: int) -> int:
    """Return an int whose decimal digits spell the binary form of ``n``."""
    if n < 0:
        raise ValueError("negative numbers have no finite binary expansion here")
    return int(format(n, "b"))


def is_prime(n: int) -> bool:
    """Return True if ``n`` is a prime number."""
    if n < 2:
        return False
    return all(n % divisor for divisor in range(2, math.isqrt(n) + 1))


def countdown(n: int) -> list[int]:
    """Return the numbers from ``n`` down to 1."""
    if n < 0:
        raise ValueError("countdown needs a non-negative start")
    return list(range(n, 0, -1))


def combination(n: float, r: float) -> float:
    """Compute nCr as the product (n/r)((n-1)/(r-1))... in floating point."""
    terms = []
    while r > 0:
        terms.append(n / r)
        n -= 1
        r -= 1
    result = 1.0
    for term in reversed(terms):
        result = term * result
    return result


def josephus(n: int, k: int) -> int:
    """Return the 1-based survivor position for ``n`` people, every ``k``-th removed."""
    if n < 1:
        raise ValueError("the circle must hold at least one person")
    position = 1
    for size in range(2, n + 1):
        position = (position + k - 1) % size + 1
    return position


def count_digit_one(n: int) -> int:
    """Count the digit 1 across all integers from 1 to ``n``."""
    if n <= 0:
        return 0
    total = 0
    place = 1
    while place <= n:
        higher, rest = divmod(n, place * 10)
        current, lower = divmod(rest, place)
        total += higher * place
        if current > 1:
            total += place
        elif current == 1:
            total += lower + 1
        place *= 10
    return total


def factorial(n: int) -> int:
    """Return ``n!``."""
    if n < 0:
        raise ValueError("factorial is undefined for negative numbers")
    return math.factorial(n)


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with fib(0) = 0 and fib(1) = 1."""
    if n < 0:
        raise ValueError("Fibonacci index must be non-negative")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def fibonacci_series(count: int) -> list[int]:
    """Return the first ``count`` Fibonacci numbers."""
    series = []
    current, following = 0, 1
    for _ in range(count):
        series.append(current)
        current, following = following, current + following
    return series


def exp_taylor(x: float, n: int) -> float:
    """Approximate e**x by the Taylor series up to the ``n``-th term."""
    if n < 0:
        raise ValueError("the number of terms must be non-negative")
    result = 1.0
    power = 1.0
    fact = 1.0
    for i in range(1, n + 1):
        power *= x
        fact *= i
        result += power / fact
    return result