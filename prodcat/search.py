"""Sequential and binary search over sequences."""

from __future__ import annotations

from typing import Any, Optional, Sequence


def sequential_search(values: Sequence[Any], target: Any) -> Optional[int]:
    """Return the index of the first element equal to target, or None."""
    return next((i for i, value in enumerate(values) if value == target), None)


def binary_search(values: Sequence[Any], target: Any) -> Optional[int]:
    """Return an index of target in ascending values, or None."""
    low, high = 0, len(values) - 1
    while low <= high:
        middle = (low + high) // 2
        value = values[middle]
        if value == target:
            return middle
        if value < target:
            low = middle + 1
        else:
            high = middle - 1
    return None