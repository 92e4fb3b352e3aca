"""
Array errors and limits.
"""

from __future__ import annotations

import os

DEFAULT_CAPACITY = 10
NOT_FOUND = -1
BOUNDS_VIOLATION_MESSAGE = "Index out of bounds for array operation."


class ArrayIndexError(IndexError):
    """
    Raised when an index falls outside the permitted range of an operation.
    """

    def __init__(
        self,
        message: str = BOUNDS_VIOLATION_MESSAGE,
        *,
        index: int | None = None,
        size: int | None = None,
        operation: str | None = None,
    ) -> None:
        super().__init__(message)
        self.index = index
        self.size = size
        self.operation = operation


def resolve_initial_capacity(explicit: object = None) -> int:
    """
    Resolve the starting buffer capacity for a new array.

    Priority:
    1) explicit argument (must be a positive int, else ValueError)
    2) env ARRAYKIT_INITIAL_CAPACITY
    3) DEFAULT_CAPACITY
    """
    if explicit is not None:
        if isinstance(explicit, bool) or not isinstance(explicit, int) or explicit <= 0:
            raise ValueError(f"initial capacity must be a positive integer, got {explicit!r}")
        return explicit

    raw = os.getenv("ARRAYKIT_INITIAL_CAPACITY")
    if raw is None:
        return DEFAULT_CAPACITY

    try:
        capacity = int(raw)
        if capacity > 0:
            return capacity
    except (TypeError, ValueError):
        pass
    return DEFAULT_CAPACITY
