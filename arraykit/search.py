"""
Search
======
Linear and binary search over integer sequences.

Both return ``NOT_FOUND`` (-1) when the target is absent; neither raises.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from arraykit.containers.array_errors import NOT_FOUND


@dataclass
class SearchStats:
    probes: int = 0   # element comparisons against the target


def linear_search(seq: Sequence[int], target: int, stats: Optional[SearchStats] = None) -> int:
    """O(n): index of the first element equal to *target*."""
    for i in range(len(seq)):
        if stats is not None:
            stats.probes += 1
        if seq[i] == target:
            return i
    return NOT_FOUND


def binary_search(sorted_seq: Sequence[int], target: int, stats: Optional[SearchStats] = None) -> int:
    """
    O(log n): index of an element equal to *target* in a non-decreasing sequence.

    With duplicates, whichever matching position the halving reaches first
    is returned.
    """
    left = 0
    right = len(sorted_seq) - 1

    while left <= right:
        mid = (left + right) // 2
        if stats is not None:
            stats.probes += 1

        if sorted_seq[mid] == target:
            return mid
        elif sorted_seq[mid] < target:
            left = mid + 1
        else:
            right = mid - 1

    return NOT_FOUND
