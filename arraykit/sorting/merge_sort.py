"""
Merge Sort
==========
Deterministic recursive merge sort for integer sequences.

Two entry points share one merge routine:

- ``merge_sort_in_place`` rearranges a mutable sequence where it lives.
- ``merge_sort`` returns a fresh sorted list and leaves its input alone.

Both are stable: when two keys compare equal the element from the left
half is written first.  An optional ``SortStats`` records comparisons,
moves and recursion depth so the O(n log n) bound can be observed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List, MutableSequence, Optional, Sequence, TypeVar

T = TypeVar("T")


@dataclass
class SortStats:
    """Counters collected while a sort runs."""
    comparisons: int = 0   # key comparisons made during merges
    moves: int = 0         # writes back into the target sequence
    max_depth: int = 0     # deepest recursion level reached (root = 1)
    calls: int = 0         # recursive calls, including base cases

    def reset(self) -> None:
        self.comparisons = 0
        self.moves = 0
        self.max_depth = 0
        self.calls = 0


def merge_sort_in_place(
    seq: MutableSequence[T],
    *,
    key: Optional[Callable[[T], Any]] = None,
    stats: Optional[SortStats] = None,
) -> None:
    """
    Sort *seq* in non-decreasing order, in place.

    Parameters
    ----------
    seq : mutable sequence
        Items to sort (list, array.array, bytearray, ...).  Its length
        does not change.
    key : callable, optional
        One-argument function used to extract a comparison key, with the
        same meaning as ``sorted(..., key=...)``.
    stats : SortStats, optional
        Counters updated while sorting.  Not reset first.
    """
    _sort_range(seq, 0, len(seq), key, stats, 1)


def merge_sort(
    seq: Sequence[T],
    *,
    key: Optional[Callable[[T], Any]] = None,
    stats: Optional[SortStats] = None,
) -> List[T]:
    """
    Return a new list containing items from *seq* in ascending order.

    The original *seq* is never mutated.
    """
    items: List[T] = list(seq)
    _sort_range(items, 0, len(items), key, stats, 1)
    return items


def is_sorted(seq: Sequence[T], *, key: Optional[Callable[[T], Any]] = None) -> bool:
    """True when every adjacent pair is non-decreasing."""
    keys = [key(x) for x in seq] if key is not None else list(seq)
    return all(not keys[i + 1] < keys[i] for i in range(len(keys) - 1))


def _sort_range(
    seq: MutableSequence[T],
    lo: int,
    hi: int,
    key: Optional[Callable[[T], Any]],
    stats: Optional[SortStats],
    depth: int,
) -> None:
    """Sort the half-open slice ``seq[lo:hi]``."""
    if stats is not None:
        stats.calls += 1
        if depth > stats.max_depth:
            stats.max_depth = depth

    if hi - lo <= 1:
        return

    mid = lo + (hi - lo) // 2
    _sort_range(seq, lo, mid, key, stats, depth + 1)
    _sort_range(seq, mid, hi, key, stats, depth + 1)
    _merge(seq, lo, mid, hi, key, stats)


def _merge(
    seq: MutableSequence[T],
    lo: int,
    mid: int,
    hi: int,
    key: Optional[Callable[[T], Any]],
    stats: Optional[SortStats],
) -> None:
    """Merge sorted runs ``seq[lo:mid]`` and ``seq[mid:hi]`` back into *seq* (stable)."""
    left = list(seq[lo:mid])
    right = list(seq[mid:hi])
    len_l = len(left)
    len_r = len(right)
    i = j = 0
    k = lo
    comparisons = 0

    while i < len_l and j < len_r:
        lk = key(left[i]) if key is not None else left[i]
        rk = key(right[j]) if key is not None else right[j]
        comparisons += 1
        if rk < lk:
            seq[k] = right[j]
            j += 1
        else:
            # ties keep the left element first
            seq[k] = left[i]
            i += 1
        k += 1

    # Copy remaining tail
    while i < len_l:
        seq[k] = left[i]
        i += 1
        k += 1
    while j < len_r:
        seq[k] = right[j]
        j += 1
        k += 1

    if stats is not None:
        stats.comparisons += comparisons
        stats.moves += hi - lo
