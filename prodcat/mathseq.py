"""Factorials and Fibonacci numbers, iterative and recursive."""

from __future__ import annotations


def _check(n: int, what: str) -> None:
    if n < 0:
        raise ValueError(f"{what} is not defined for negative numbers")


def factorial(n: int) -> int:
    """Return n! computed with a loop."""
    _check(n, "factorial")
    result = 1
    for i in range(1, n + 1):
        result *= i
    return result


def factorial_recursive(n: int) -> int:
    """Return n! computed recursively."""
    _check(n, "factorial")
    if n == 0:
        return 1
    return n * factorial_recursive(n - 1)


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, with fibonacci(0) == 0, using a loop."""
    _check(n, "Fibonacci")
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def fibonacci_recursive(n: int) -> int:
    """Return the n-th Fibonacci number by the naive recursion."""
    _check(n, "Fibonacci")
    if n in (0, 1):
        return n
    return fibonacci_recursive(n - 1) + fibonacci_recursive(n - 2)