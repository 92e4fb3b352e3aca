"""
Complexity samples and reference growth curves.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

import numpy as np


@dataclass
class CallStats:
    calls: int = 0


def fibonacci(n: int, stats: Optional[CallStats] = None) -> int:
    """Naive recursive Fibonacci, O(2^n) calls."""
    if n < 0:
        raise ValueError(f"fibonacci is undefined for negative n ({n})")
    return _fib(n, stats)


def _fib(n: int, stats: Optional[CallStats]) -> int:
    if stats is not None:
        stats.calls += 1
    if n <= 1:
        return n
    return _fib(n - 1, stats) + _fib(n - 2, stats)


def _log2_safe(n: np.ndarray) -> np.ndarray:
    return np.log2(np.maximum(n, 1))


# Reference curves evaluated elementwise over an array of input sizes
COMPLEXITY_CLASSES: Dict[str, Callable[[np.ndarray], np.ndarray]] = {
    "O(log n)": lambda n: _log2_safe(np.asarray(n, dtype=float)),
    "O(n)": lambda n: np.asarray(n, dtype=float),
    "O(n log n)": lambda n: np.asarray(n, dtype=float) * _log2_safe(np.asarray(n, dtype=float)),
    "O(2^n)": lambda n: np.power(2.0, np.asarray(n, dtype=float)),
}


def reference_curve(label: str, sizes) -> np.ndarray:
    """Evaluate the named growth class over *sizes*; KeyError for unknown labels."""
    return COMPLEXITY_CLASSES[label](np.asarray(sizes, dtype=float))
