"""Sorting, searching and small array algorithms."""

from __future__ import annotations

import string
from collections import Counter
from collections.abc import Iterable, Sequence

__all__ = [
    "merge_sort",
    "quick_sort",
    "bubble_sort",
    "median",
    "pair_sums",
    "leaders",
    "target_sum_pairs",
    "most_frequent_letter",
    "matrix_multiply",
    "knapsack",
]


def _merge(left: list, right: list) -> list:
    merged = []
    li = ri = 0
    while li < len(left) and ri < len(right):
        if left[li] <= right[ri]:
            merged.append(left[li])
            li += 1
        else:
            merged.append(right[ri])
            ri += 1
    merged.extend(left[li:])
    merged.extend(right[ri:])
    return merged


def merge_sort(items: Iterable) -> list:
    """Return a new list with ``items`` in ascending order (stable top-down merge sort)."""
    values = list(items)
    if len(values) <= 1:
        return values
    mid = (len(values) + 1) // 2
    return _merge(merge_sort(values[:mid]), merge_sort(values[mid:]))


def quick_sort(items: Iterable) -> list:
    """Return a new ascending list, partitioning around the first element of each range."""
    values = list(items)
    pending = [(0, len(values) - 1)]
    while pending:
        first, last = pending.pop()
        if first >= last:
            continue
        pivot = values[first]
        i, j = first, last
        while i < j:
            while values[i] <= pivot and i < last:
                i += 1
            while values[j] > pivot:
                j -= 1
            if i < j:
                values[i], values[j] = values[j], values[i]
        values[first], values[j] = values[j], values[first]
        pending.append((first, j - 1))
        pending.append((j + 1, last))
    return values


def bubble_sort(items: Iterable) -> list:
    """Return a new ascending list produced by bubble sort."""
    values = list(items)
    for end in range(len(values) - 1, 0, -1):
        for k in range(end):
            if values[k] > values[k + 1]:
                values[k], values[k + 1] = values[k + 1], values[k]
    return values


def median(items: Iterable):
    """The middle element after sorting; for even lengths, the lower of the two middles."""
    values = bubble_sort(items)
    if not values:
        raise ValueError("median of an empty sequence")
    return values[(len(values) + 1) // 2 - 1]


def pair_sums(items: Iterable[int], target: int) -> list[tuple[int, int]]:
    """Pairs from the sorted items summing to ``target``, found with two pointers."""
    values = sorted(items)
    pairs = []
    i, j = 0, len(values) - 1
    while i < j:
        total = values[i] + values[j]
        if total > target:
            j -= 1
        elif total < target:
            i += 1
        else:
            pairs.append((values[i], values[j]))
            i += 1
            j -= 1
    return pairs


def leaders(items: Sequence) -> list:
    """The last element, then each element that exceeds everything to its right, scanning leftwards."""
    if not items:
        return []
    current = items[-1]
    found = [current]
    for value in reversed(items):
        if value > current:
            current = value
            found.append(value)
    return found


def target_sum_pairs(items: Iterable[int], target: int) -> list[tuple[int, int]]:
    """Pairs of distinct positions in the sorted items summing to ``target``.

    A pair is reported only if neither of its values is the first value of a
    pair already reported.
    """
    values = sorted(items)
    used: set[int] = set()
    pairs = []
    for i, first in enumerate(values[:-1]):
        for j, second in enumerate(values[1:], start=1):
            if i != j and first + second == target and first not in used and second not in used:
                used.add(first)
                pairs.append((first, second))
    return pairs


def most_frequent_letter(text: str) -> str:
    """The most frequent lowercase letter; ties go to the letter latest in the alphabet."""
    stray = set(text) - set(string.ascii_lowercase)
    if stray:
        raise ValueError(f"only lowercase letters are allowed, got {sorted(stray)!r}")
    counts = Counter(text)
    best_letter = string.ascii_lowercase[0]
    best_count = 0
    for letter in string.ascii_lowercase:
        if counts[letter] >= best_count:
            best_count = counts[letter]
            best_letter = letter
    return best_letter


def matrix_multiply(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> list[list[int]]:
    """Product of two matrices given as lists of rows."""
    inner = len(a[0]) if a else 0
    if inner != len(b):
        raise ValueError("column count of the first matrix must equal row count of the second")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, column)) for column in columns] for row in a]


def knapsack(weights: Sequence[int], values: Sequence[int], capacity: int) -> int:
    """Maximum total value of a subset of items whose weights fit in ``capacity`` (0/1 knapsack)."""
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0 or any(weight < 0 for weight in weights):
        raise ValueError("capacity and weights must be non-negative")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]