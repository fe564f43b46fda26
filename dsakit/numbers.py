"""Small integer functions: factorial, Fibonacci numbers and digit reversal."""

from __future__ import annotations

import math

__all__ = ["factorial", "fibonacci", "reverse_digits"]


def factorial(n: int) -> int:
    """Return n!; any n of 1 or less gives 1."""
    return math.prod(range(2, n + 1))


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number; any n of 1 or less is returned as is."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def reverse_digits(n: int) -> int:
    """Return the decimal digits of n in reverse order; n of 0 or less gives 0."""
    reversed_value = 0
    while n > 0:
        n, digit = divmod(n, 10)
        reversed_value = reversed_value * 10 + digit
    return reversed_value