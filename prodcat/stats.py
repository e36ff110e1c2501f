"""Simple statistics over lists of numbers: mean, threshold counts, minimum."""

from __future__ import annotations

from typing import Sequence


def mean(values: Sequence[float]) -> float:
    """Return the arithmetic mean; raises ValueError for an empty sequence."""
    if not values:
        raise ValueError("mean of an empty sequence")
    return sum(values) / len(values)


def count_above(values: Sequence[float], threshold: float) -> int:
    """Return how many values are strictly greater than threshold."""
    return sum(1 for value in values if value > threshold)


def above_mean(values: Sequence[float]) -> list[tuple[int, float]]:
    """Return (index, value) for every value strictly above the mean."""
    average = mean(values)
    return [(i, value) for i, value in enumerate(values) if value > average]


def minimum_position(values: Sequence[float]) -> tuple[float, int]:
    """Return (smallest value, index of its first occurrence)."""
    if not values:
        raise ValueError("minimum of an empty sequence")
    index = min(range(len(values)), key=values.__getitem__)
    return values[index], index