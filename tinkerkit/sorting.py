"""Merge sort and quick sort over sequences of comparable values."""

from __future__ import annotations

from heapq import merge
from typing import Any, Sequence


def merge_sort(values: Sequence[Any]) -> list[Any]:
    """Return a new ascending list; equal values keep their original order."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) - 1) // 2 + 1
    return list(merge(merge_sort(items[:middle]), merge_sort(items[middle:])))


def quick_sort(values: Sequence[Any]) -> list[Any]:
    """Return a new ascending list, partitioning around the last value."""
    items = list(values)
    if len(items) <= 1:
        return items
    *rest, pivot = items
    smaller = [value for value in rest if value < pivot]
    larger = [value for value in rest if not value < pivot]
    return quick_sort(smaller) + [pivot] + quick_sort(larger)