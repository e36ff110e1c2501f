import math

import pytest

from prodcat.mathseq import (
    factorial,
    factorial_recursive,
    fibonacci,
    fibonacci_recursive,
)


@pytest.mark.parametrize("n", range(0, 25))
def test_factorial_matches_standard_library(n):
    assert factorial(n) == math.factorial(n)


@pytest.mark.parametrize("n", range(0, 25))
def test_factorial_recursive_matches_iterative(n):
    assert factorial_recursive(n) == factorial(n)


def test_factorial_base_case():
    assert factorial(0) == 1
    assert factorial_recursive(0) == 1


def test_factorial_worked_example():
    assert factorial(5) == 120


@pytest.mark.parametrize("n", range(1, 30))
def test_factorial_recurrence(n):
    assert factorial(n) == n * factorial(n - 1)


def test_factorial_exceeds_fixed_width():
    assert factorial(30) == math.factorial(30)
    assert factorial(30) > 2**64


@pytest.mark.parametrize("func", [factorial, factorial_recursive])
def test_factorial_negative_raises(func):
    with pytest.raises(ValueError):
        func(-1)


def test_fibonacci_base_cases():
    assert fibonacci(0) == 0
    assert fibonacci(1) == 1
    assert fibonacci_recursive(0) == 0
    assert fibonacci_recursive(1) == 1


def test_fibonacci_worked_example():
    assert fibonacci(6) == 8


@pytest.mark.parametrize("n", range(2, 40))
def test_fibonacci_recurrence(n):
    assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


@pytest.mark.parametrize("n", range(0, 20))
def test_fibonacci_recursive_matches_iterative(n):
    assert fibonacci_recursive(n) == fibonacci(n)


@pytest.mark.parametrize("n", range(1, 30))
def test_fibonacci_cassini_identity(n):
    assert fibonacci(n + 1) * fibonacci(n - 1) - fibonacci(n) ** 2 == (-1) ** n


@pytest.mark.parametrize("func", [fibonacci, fibonacci_recursive])
def test_fibonacci_negative_raises(func):
    with pytest.raises(ValueError):
        func(-3)