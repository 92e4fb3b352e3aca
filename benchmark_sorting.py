
import sys
import os
import csv
import argparse
from typing import Any, Dict, List

# Add project root to path
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from arraykit.benchmark import DEFAULT_SIZES, measure_growth, measure_search, measure_sort


def write_csv(rows: List[Dict[str, Any]], path: str) -> None:
    keys = rows[0].keys()
    with open(path, "w", newline="") as f:
        dict_writer = csv.DictWriter(f, fieldnames=keys)
        dict_writer.writeheader()
        dict_writer.writerows(rows)


def print_summary(sort_rows, search_rows, growth_rows):
    print("\nMerge Sort:")
    print(f"{'n':>6} | {'Comparisons':>12} | {'Moves':>10} | {'Depth':>5} | {'cmp/(n log n)':>13} | {'Time (ms)':>9}")
    print("-" * 72)
    for r in sort_rows:
        print(f"{r['size']:>6} | {r['comparisons']:>12.1f} | {r['moves']:>10.1f} | {r['depth']:>5} | "
              f"{r['ratio']:>13.3f} | {r['time_s'] * 1000:>9.3f}")

    print("\nSearch (absent target):")
    print(f"{'n':>6} | {'Linear probes':>13} | {'Binary probes':>13}")
    print("-" * 40)
    for r in search_rows:
        print(f"{r['size']:>6} | {r['linear_probes']:>13} | {r['binary_probes']:>13}")

    last = growth_rows[-1]
    print("\nDynamic Array Growth:")
    print(f"  appends={last['appends']} capacity={last['capacity']} "
          f"reallocations={last['growth_count']} copies/append={last['copies_per_append']:.3f}")


def main():
    parser = argparse.ArgumentParser(description="Benchmark merge sort, search and array growth")
    parser.add_argument("--max-size", type=int, default=DEFAULT_SIZES[-1], help="Largest input size")
    parser.add_argument("--trials", type=int, default=3, help="Random inputs per size")
    parser.add_argument("--seed", type=int, default=0, help="RNG seed")
    parser.add_argument("--appends", type=int, default=1000, help="Appends for the growth run")
    parser.add_argument("--capacity", type=int, default=10, help="Initial array capacity")
    parser.add_argument("--output", type=str, default="benchmark_results.csv", help="Output CSV file")

    args = parser.parse_args()
    sizes = [n for n in DEFAULT_SIZES if n <= args.max_size]
    if not sizes:
        parser.error("--max-size must be at least 1")
    if args.appends < 1:
        parser.error("--appends must be at least 1")
    if args.trials < 1:
        parser.error("--trials must be at least 1")

    print(f"Starting Benchmark: sizes {sizes[0]}..{sizes[-1]}, {args.trials} trials, seed {args.seed}")

    sort_rows = measure_sort(sizes, trials=args.trials, seed=args.seed)
    search_rows = measure_search(sizes)
    growth_rows = measure_growth(args.appends, args.capacity)

    write_csv(sort_rows, args.output)
    print(f"Results saved to {args.output}")

    print_summary(sort_rows, search_rows, growth_rows)


if __name__ == "__main__":
    main()
