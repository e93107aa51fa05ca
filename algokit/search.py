"""Searching sequences: linear, binary and jump search."""

from __future__ import annotations

import math
from collections.abc import Sequence


def linear_search(items: Sequence, target) -> int | None:
    """Return the index of the first item equal to target, or None."""
    return next((index for index, item in enumerate(items) if item == target), None)


def binary_search(items: Sequence, target) -> int | None:
    """Return an index of target in the sorted sequence, or None."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = low + (high - low) // 2
        value = items[mid]
        if value == target:
            return mid
        if value > target:
            high = mid - 1
        else:
            low = mid + 1
    return None


def jump_search(items: Sequence, target) -> int | None:
    """Return an index of target in the sorted sequence, or None.

    Jumps ahead in blocks of sqrt(len) and scans the block that may
    hold the target.
    """
    n = len(items)
    if n == 0:
        return None
    stride = math.sqrt(n)
    step = math.isqrt(n)
    prev = 0
    while items[min(step, n) - 1] < target:
        prev = step
        step = int(step + stride)
        if prev >= n:
            return None
    while items[prev] < target:
        prev += 1
        if prev == min(step, n):
            return None
    return prev if items[prev] == target else None