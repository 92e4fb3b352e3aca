"""
Benchmark Engine
================
Measures merge sort, array growth and search on generated inputs.

Every measurement is a real count taken from the instrumented
algorithms; rows are plain dicts so they can go straight to
``csv.DictWriter`` or the chart generator.
"""

import math
import time
from typing import Any, Dict, List, Sequence

import numpy as np

from arraykit.containers.dynamic_array import DynamicArray
from arraykit.search import SearchStats, binary_search, linear_search
from arraykit.sorting.merge_sort import SortStats, is_sorted, merge_sort_in_place

DEFAULT_SIZES = (1, 2, 4, 8, 16, 32, 64, 128, 256, 512, 1024, 2048, 4096)


def generate_input(size: int, rng: np.random.Generator, distinct: bool = False) -> List[int]:
    """Random signed integers as a plain Python list."""
    if distinct:
        return [int(x) for x in rng.permutation(size)]
    return [int(x) for x in rng.integers(-size, size + 1, size=size)]


def measure_sort(sizes: Sequence[int], trials: int = 3, seed: int = 0) -> List[Dict[str, Any]]:
    """
    Sort ``trials`` random inputs per size and average the counters.
    ``ratio`` is comparisons / (n log2 n), which should stay bounded.
    """
    if trials < 1:
        raise ValueError(f"trials must be at least 1, got {trials}")

    rng = np.random.default_rng(seed)
    rows = []

    for n in sizes:
        comparisons, moves, depths, times = [], [], [], []
        for _ in range(trials):
            data = generate_input(n, rng)
            stats = SortStats()
            start = time.perf_counter()
            merge_sort_in_place(data, stats=stats)
            times.append(time.perf_counter() - start)
            if not is_sorted(data):
                raise RuntimeError(f"merge sort produced unsorted output for n={n}")
            comparisons.append(stats.comparisons)
            moves.append(stats.moves)
            depths.append(stats.max_depth)

        n_log_n = n * math.log2(n) if n > 1 else 0.0
        avg_cmp = float(np.mean(comparisons))
        rows.append({
            "size": n,
            "comparisons": avg_cmp,
            "moves": float(np.mean(moves)),
            "depth": int(max(depths)),
            "time_s": float(np.mean(times)),
            "n_log_n": n_log_n,
            "ratio": avg_cmp / n_log_n if n_log_n else 0.0,
        })

    return rows


def measure_growth(appends: int, initial_capacity: int = 10) -> List[Dict[str, Any]]:
    """One row per append: capacity, reallocations and copies per element so far."""
    array = DynamicArray(initial_capacity)
    rows = []
    for k in range(1, appends + 1):
        array.add(k)
        rows.append({
            "appends": k,
            "capacity": array.capacity,
            "growth_count": array.growth_count,
            "copied_elements": array.copied_elements,
            "copies_per_append": array.copied_elements / k,
        })
    return rows


def measure_search(sizes: Sequence[int]) -> List[Dict[str, Any]]:
    """Worst-case probes (absent target) for linear and binary search."""
    rows = []
    for n in sizes:
        data = list(range(n))
        linear, binary = SearchStats(), SearchStats()
        linear_search(data, n, linear)
        binary_search(data, n, binary)
        rows.append({"size": n, "linear_probes": linear.probes, "binary_probes": binary.probes})
    return rows
