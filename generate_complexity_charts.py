"""
Complexity Chart Generator
==========================
Generates charts comparing measured operation counts against the
reference growth classes.
Run:  python generate_complexity_charts.py --max-size 2048
Output: complexity_charts/ folder with 4 PNG files.
"""

import sys
import os
import argparse
import numpy as np

# Ensure project root is on the path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend for file output
import matplotlib.pyplot as plt

from arraykit.benchmark import DEFAULT_SIZES, measure_growth, measure_search, measure_sort
from arraykit.complexity import CallStats, fibonacci, reference_curve

# ── Color Palette & Styling ──────────────────────────────────────
COLORS = {
    "measured": "#1F77B4",
    "reference": "#7F7F7F",
    "linear": "#D62728",
    "binary": "#2CA02C",
}


def setup_style():
    """Light report style: white panels, dotted grid, larger titles."""
    plt.rcParams.update({
        "axes.grid": True,
        "grid.linestyle": ":",
        "axes.titlesize": 15,
        "lines.markersize": 5,
        "savefig.dpi": 120,
        "savefig.bbox": "tight",
    })


def _finish(ax, fig, out_dir, filename, label):
    ax.legend(loc="upper left")
    ax.grid(zorder=0)
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)
    fig.savefig(os.path.join(out_dir, filename))
    plt.close(fig)
    print(f"  Chart: {label}")


def chart_1_sort_comparisons(sort_rows, out_dir):
    """Measured merge sort comparisons vs n log2 n."""
    fig, ax = plt.subplots(figsize=(10, 6))
    sizes = np.array([r["size"] for r in sort_rows])
    measured = np.array([r["comparisons"] for r in sort_rows])

    ax.plot(sizes, measured, "o-", color=COLORS["measured"], label="Merge sort comparisons", zorder=3)
    ax.plot(sizes, reference_curve("O(n log n)", sizes), "--", color=COLORS["reference"],
            label="n log2 n", zorder=2)
    ax.set_xscale("log", base=2)
    ax.set_yscale("symlog")
    ax.set_xlabel("Input size n")
    ax.set_ylabel("Comparisons")
    ax.set_title("Merge Sort: O(n log n)", pad=15)
    _finish(ax, fig, out_dir, "1_sort_comparisons.png", "Sort Comparisons")


def chart_2_sort_ratio(sort_rows, out_dir):
    """comparisons / (n log n) should level off below 1."""
    fig, ax = plt.subplots(figsize=(10, 6))
    rows = [r for r in sort_rows if r["size"] > 1]
    sizes = np.array([r["size"] for r in rows])
    ratios = np.array([r["ratio"] for r in rows])

    ax.plot(sizes, ratios, "o-", color=COLORS["measured"], label="comparisons / (n log2 n)", zorder=3)
    ax.axhline(1.0, linestyle="--", color=COLORS["reference"], label="upper bound")
    ax.set_xscale("log", base=2)
    ax.set_ylim(0, 1.2)
    ax.set_xlabel("Input size n")
    ax.set_ylabel("Ratio")
    ax.set_title("Merge Sort: Normalized Comparisons", pad=15)
    _finish(ax, fig, out_dir, "2_sort_ratio.png", "Normalized Comparisons")


def chart_3_growth(growth_rows, out_dir):
    """Capacity steps and amortized copies per append."""
    fig, ax = plt.subplots(figsize=(10, 6))
    appends = np.array([r["appends"] for r in growth_rows])
    capacity = np.array([r["capacity"] for r in growth_rows])
    copies = np.array([r["copies_per_append"] for r in growth_rows])

    ax.step(appends, capacity, where="post", color=COLORS["measured"], label="Capacity", zorder=3)
    ax.plot(appends, appends, "--", color=COLORS["reference"], label="Size")
    ax.set_xlabel("Appends")
    ax.set_ylabel("Slots")
    ax.set_title("Dynamic Array: Doubling Growth", pad=15)

    ax2 = ax.twinx()
    ax2.plot(appends, copies, color=COLORS["linear"], alpha=0.8, label="Copies per append")
    ax2.set_ylabel("Copies per append (amortized)")
    ax2.set_ylim(0, max(2.0, float(copies.max()) * 1.2))
    _finish(ax, fig, out_dir, "3_array_growth.png", "Array Growth")


def chart_4_search_and_fibonacci(search_rows, out_dir, fib_max=20):
    """Linear vs binary probes, plus naive Fibonacci call counts."""
    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(14, 6))
    sizes = np.array([r["size"] for r in search_rows])

    ax1.plot(sizes, [r["linear_probes"] for r in search_rows], "o-", color=COLORS["linear"],
             label="Linear search O(n)")
    ax1.plot(sizes, [r["binary_probes"] for r in search_rows], "o-", color=COLORS["binary"],
             label="Binary search O(log n)")
    ax1.set_xscale("log", base=2)
    ax1.set_yscale("log", base=2)
    ax1.set_xlabel("Input size n")
    ax1.set_ylabel("Probes (absent target)")
    ax1.set_title("Search", pad=15)
    ax1.legend(loc="upper left")
    ax1.grid(zorder=0)

    ns = np.arange(0, fib_max + 1)
    calls = []
    for n in ns:
        stats = CallStats()
        fibonacci(int(n), stats)
        calls.append(stats.calls)
    ax2.plot(ns, calls, "o-", color=COLORS["measured"], label="fibonacci(n) calls")
    ax2.plot(ns, reference_curve("O(2^n)", ns), "--", color=COLORS["reference"], label="2^n")
    ax2.set_yscale("log")
    ax2.set_xlabel("n")
    ax2.set_title("Naive Fibonacci: O(2^n)", pad=15)
    _finish(ax2, fig, out_dir, "4_search_fibonacci.png", "Search & Fibonacci")


def main():
    parser = argparse.ArgumentParser(description="Generate Complexity Charts")
    parser.add_argument("--max-size", type=int, default=DEFAULT_SIZES[-1],
                        help=f"Largest input size (default: {DEFAULT_SIZES[-1]})")
    parser.add_argument("--trials", type=int, default=3,
                        help="Random inputs per size (default: 3)")
    parser.add_argument("--appends", type=int, default=1000,
                        help="Appends for the growth chart (default: 1000)")
    parser.add_argument("--fib-max", type=int, default=20,
                        help="Largest n for the Fibonacci chart (default: 20)")
    parser.add_argument("--out-dir", type=str, default=None,
                        help="Output folder (default: ./complexity_charts)")
    args = parser.parse_args()

    out_dir = args.out_dir or os.path.join(os.path.dirname(os.path.abspath(__file__)),
                                           "complexity_charts")
    os.makedirs(out_dir, exist_ok=True)
    sizes = [n for n in DEFAULT_SIZES if n <= args.max_size]
    if not sizes:
        parser.error("--max-size must be at least 1")
    if args.appends < 1:
        parser.error("--appends must be at least 1")
    if args.trials < 1:
        parser.error("--trials must be at least 1")

    setup_style()

    print("Phase 1/2: Measuring...")
    sort_rows = measure_sort(sizes, trials=args.trials)
    growth_rows = measure_growth(args.appends)
    search_rows = measure_search(sizes)

    print("Phase 2/2: Generating Charts...")
    chart_1_sort_comparisons(sort_rows, out_dir)
    chart_2_sort_ratio(sort_rows, out_dir)
    chart_3_growth(growth_rows, out_dir)
    chart_4_search_and_fibonacci(search_rows, out_dir, args.fib_max)

    print(f"All charts saved to: {out_dir}")


if __name__ == "__main__":
    main()
