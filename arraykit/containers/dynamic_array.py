"""
Dynamic Array
=============
Growable, index-addressable container of integers.

The array owns a fixed-length backing buffer and tracks a separate
logical size.  Slots ``[0, size)`` hold the elements; slots
``[size, capacity)`` hold filler and are never read.  When a write would
overflow the buffer, capacity doubles and every element is copied into a
fresh buffer, giving amortized O(1) appends.

Out-of-range indices raise ``ArrayIndexError`` before anything is
written, so a failed call leaves the array unchanged.
"""

from __future__ import annotations

import operator
from typing import Any, Iterator, List, Optional

from arraykit.containers.array_errors import (
    NOT_FOUND,
    ArrayIndexError,
    resolve_initial_capacity,
)

DEBUG_MODE = False
FILLER = 0


class DynamicArray:
    def __init__(self, initial_capacity: Optional[int] = None):
        capacity = resolve_initial_capacity(initial_capacity)
        self._data: List[int] = [FILLER] * capacity
        self._size = 0

        # Diagnostics
        self.growth_count = 0
        self.copied_elements = 0
        self.debug_logging = DEBUG_MODE

    # ── Properties ─────────────────────────────────────────────

    @property
    def size(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        return len(self._data)

    # ── Mutation ───────────────────────────────────────────────

    def add(self, value: int) -> None:
        """Append *value* at position ``size``, growing first if full."""
        if self._size == len(self._data):
            self._grow()
        self._data[self._size] = value
        self._size += 1

    def insert(self, index: int, value: int) -> None:
        """
        Insert *value* at *index*, shifting later elements one slot right.

        ``index == size`` behaves like ``add``.  Raises ``ArrayIndexError``
        when index is outside ``[0, size]``.
        """
        index = operator.index(index)
        if not 0 <= index <= self._size:
            raise ArrayIndexError(
                f"insert index {index} out of range for size {self._size}",
                index=index,
                size=self._size,
                operation="insert",
            )

        if self._size == len(self._data):
            self._grow()

        # Shift from the highest index down so nothing is overwritten
        for i in range(self._size, index, -1):
            self._data[i] = self._data[i - 1]
        self._data[index] = value
        self._size += 1

    def remove_at(self, index: int) -> int:
        """
        Remove and return the element at *index*, shifting later elements left.

        Raises ``ArrayIndexError`` when index is outside ``[0, size)``.
        """
        self._check_index(index, "remove_at")

        removed = self._data[index]
        for i in range(index, self._size - 1):
            self._data[i] = self._data[i + 1]
        self._size -= 1
        self._data[self._size] = FILLER
        return removed

    # ── Queries ────────────────────────────────────────────────

    def index_of(self, value: int) -> int:
        """Position of the first element equal to *value*, or ``NOT_FOUND``."""
        for i in range(self._size):
            if self._data[i] == value:
                return i
        return NOT_FOUND

    def to_list(self) -> List[int]:
        """Fresh list of the valid elements in logical order."""
        return self._data[:self._size]

    def render(self) -> str:
        """One element per line, for manual inspection."""
        return "\n".join(str(self._data[i]) for i in range(self._size))

    def display(self) -> None:
        text = self.render()
        if text:
            print(text)

    # ── Python protocol ────────────────────────────────────────

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        for i in range(self._size):
            yield self._data[i]

    def __getitem__(self, index: int) -> int:
        self._check_index(index, "get")
        return self._data[index]

    def __contains__(self, value: Any) -> bool:
        return self.index_of(value) != NOT_FOUND

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DynamicArray):
            return self.to_list() == other.to_list()
        if isinstance(other, list):
            return self.to_list() == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"DynamicArray({self.to_list()!r}, capacity={self.capacity})"

    # ── Internal ───────────────────────────────────────────────

    def _check_index(self, index: int, operation: str) -> None:
        operator.index(index)
        if not 0 <= index < self._size:
            raise ArrayIndexError(
                f"{operation} index {index} out of range for size {self._size}",
                index=index,
                size=self._size,
                operation=operation,
            )

    def _grow(self) -> None:
        """Replace the buffer with one of double capacity and copy every element."""
        old_capacity = len(self._data)
        new_data = [FILLER] * (old_capacity * 2)
        for i in range(self._size):
            new_data[i] = self._data[i]
        self._data = new_data
        self.growth_count += 1
        self.copied_elements += self._size

        if self.debug_logging:
            print(f"[ARRAY DEBUG] grow #{self.growth_count}: capacity {old_capacity} -> {len(new_data)}")
