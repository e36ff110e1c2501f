"""Classic comparison sorts; each returns a new ascending list."""

from __future__ import annotations

from typing import Any, Iterable


def bubble_sort(values: Iterable[Any]) -> list:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    items = list(values)
    n = len(items)
    for done in range(n - 1):
        for j in range(n - done - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def insertion_sort(values: Iterable[Any]) -> list:
    """Sort by inserting each element into the sorted prefix."""
    items = list(values)
    for j in range(1, len(items)):
        key = items[j]
        i = j - 1
        while i >= 0 and items[i] > key:
            items[i + 1] = items[i]
            i -= 1
        items[i + 1] = key
    return items


def selection_sort(values: Iterable[Any]) -> list:
    """Sort by moving the smallest remaining element to the front."""
    items = list(values)
    n = len(items)
    for i in range(n - 1):
        smallest = min(range(i, n), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def exchange_sort(values: Iterable[Any]) -> list:
    """Sort by swapping each position with any later smaller element."""
    items = list(values)
    n = len(items)
    for i in range(n - 1):
        for j in range(i + 1, n):
            if items[i] > items[j]:
                items[i], items[j] = items[j], items[i]
    return items