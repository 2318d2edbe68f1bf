"""Similarity hash over a sequence of 32-bit values."""

from __future__ import annotations

from collections.abc import Iterable


def simhash(data: Iterable[int]) -> int:
    """Return a 32-bit hash whose bits are set where most inputs have them set."""
    values = list(data)
    if not values:
        return 0
    counts = [0] * 32
    for value in values:
        for bit in range(32):
            counts[bit] += (value >> bit) & 1
    threshold = len(values) // 2
    result = 0
    for bit, count in enumerate(counts):
        if count > threshold:
            result |= 1 << bit
    return result