"""Operations on lists and small matrices."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import combinations


def min_max(values: Iterable[int]) -> tuple[int, int]:
    """Return (smallest, largest) of a non-empty collection."""
    items = list(values)
    if not items:
        raise ValueError("min_max() requires at least one value")
    return min(items), max(items)


def sorted_union(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Return the distinct values of both collections in ascending order."""
    return sorted(set(first) | set(second))


def intersection(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Return the items of second that also occur in first, in second's order."""
    seen = set(first)
    return [item for item in second if item in seen]


def selection_sort(values: Iterable[int]) -> list[int]:
    """Return a new ascending list, ordered by selection sort."""
    items = list(values)
    size = len(items)
    for start in range(size - 1):
        smallest = min(range(start, size), key=items.__getitem__)
        if smallest != start:
            items[start], items[smallest] = items[smallest], items[start]
    return items


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return a new ascending list, ordered by bubble sort."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        for index in range(end):
            if items[index] > items[index + 1]:
                items[index], items[index + 1] = items[index + 1], items[index]
    return items


def rotate_left(values: Sequence[int], d: int) -> list[int]:
    """Return the values rotated left by d places; d <= 0 leaves them as they are."""
    items = list(values)
    if d <= 0 or not items:
        return items
    shift = d % len(items)
    return items[shift:] + items[:shift]


def second_smallest(values: Iterable[int]) -> int:
    """Return the element in second position once the values are sorted."""
    ordered = bubble_sort(values)
    if len(ordered) < 2:
        raise ValueError("second_smallest() requires at least two values")
    return ordered[1]


def add_matrices(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the element-wise sum of two matrices of the same shape."""
    if len(a) != len(b) or any(len(row_a) != len(row_b) for row_a, row_b in zip(a, b)):
        raise ValueError("matrices must have the same shape")
    return [[x + y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a, b)]


def is_sparse(matrix: Sequence[Sequence[int]]) -> bool:
    """Return True if at least half (rounded down) of the elements are zero."""
    cells = [cell for row in matrix for cell in row]
    zeros = sum(1 for cell in cells if cell == 0)
    return zeros >= len(cells) // 2


def swap_adjacent(values: Sequence[int]) -> list[int]:
    """Return the values with each neighbouring pair swapped."""
    items = list(values)
    if len(items) % 2 != 0:
        raise ValueError("Total number of elements should be even")
    items[0::2], items[1::2] = items[1::2], items[0::2]
    return items


def find_triplets(values: Sequence[int], total: int) -> list[tuple[int, int, int]]:
    """Return every triple of elements, in index order, whose sum is total."""
    return [triple for triple in combinations(values, 3) if sum(triple) == total]