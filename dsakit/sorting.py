"""In-place-style sorts over lists: heap sort, LSD radix sort and quick sort."""

from __future__ import annotations

import os
from collections.abc import Iterable, MutableSequence


def heapify(items: MutableSequence, size: int, root: int) -> None:
    """Sift ``items[root]`` down so its subtree within ``items[:size]`` is a max-heap."""
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(items: Iterable) -> list:
    """Return the items in ascending order using heap sort."""
    result = list(items)
    size = len(result)
    for root in reversed(range(size // 2)):
        heapify(result, size, root)
    for end in reversed(range(1, size)):
        result[0], result[end] = result[end], result[0]
        heapify(result, end, 0)
    return result


def radix_sort(items: Iterable[int]) -> list[int]:
    """Return non-negative integers in ascending order using base-10 LSD radix sort."""
    result = list(items)
    if not result:
        return result
    if not all(isinstance(value, int) for value in result):
        raise TypeError("radix sort requires integers")
    if any(value < 0 for value in result):
        raise ValueError("radix sort requires non-negative integers")
    largest = max(result)
    exp = 1
    while largest // exp > 0:
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in result:
            buckets[(value // exp) % 10].append(value)
        result = [value for bucket in buckets for value in bucket]
        exp *= 10
    return result


def partition(items: MutableSequence, low: int, high: int) -> int:
    """Partition ``items[low:high]`` around ``items[low]``.

    Elements not greater than the pivot end up to its left, greater ones to
    its right. Returns the pivot's final index.
    """
    pivot = items[low]
    i, j = low, high
    while i < j:
        while i < high and items[i] <= pivot:
            i += 1
        while j == high or items[j] > pivot:
            j -= 1
        if j > i:
            items[i], items[j] = items[j], items[i]
    items[low], items[j] = items[j], items[low]
    return j


def quick_sort(items: Iterable) -> list:
    """Return the items in ascending order using quick sort with a first-element pivot."""
    result = list(items)
    pending = [(0, len(result))]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = partition(result, low, high)
            pending.append((split + 1, high))
            pending.append((low, split))
    return result


def write_numbers(path: str | os.PathLike, numbers: Iterable[int]) -> None:
    """Write the numbers to a file, each followed by a space."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.write("".join(f"{number} " for number in numbers))


def read_numbers(path: str | os.PathLike, count: int | None = None) -> list[int]:
    """Read whitespace-separated integers from a file.

    With ``count`` given, exactly that many are read; a file holding fewer
    raises ``ValueError``.
    """
    with open(path, encoding="utf-8") as handle:
        tokens = handle.read().split()
    if count is None:
        return [int(token) for token in tokens]
    if count < 0:
        raise ValueError("count must not be negative")
    if len(tokens) < count:
        raise ValueError(f"expected {count} numbers, found {len(tokens)}")
    return [int(token) for token in tokens[:count]]