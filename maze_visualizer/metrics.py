import argparse
import csv
import os
import random
import statistics
import time

import matplotlib
matplotlib.use("Agg")  # charts are only ever written to files
import matplotlib.pyplot as plt  # noqa: E402

from .config import normalize_size
from .generator import generate_maze
from .grid import Grid
from .path import reconstruct_path, path_length
from .search import BFS, DFS, solve

DEFAULT_ALGOS = [BFS, DFS]

METRICS = [
    "elapsed_sec",
    "visited",
    "expanded",
    "frontier_max",
    "path_length",
]


def run_single(rows, cols, algorithm, seed=None):
    """Generates one maze and solves it without animation.

    The same seed always yields the same maze, so runs of different
    algorithms with a shared seed are compared on identical mazes.
    """
    rows, cols = normalize_size(rows), normalize_size(cols)
    rng = random.Random(seed)

    grid = Grid(rows, cols)
    generate_maze(grid, rng)
    start, end = (1, 1), (rows - 2, cols - 2)

    t0 = time.perf_counter()
    result = solve(grid, start, end, algorithm, rng=rng)
    path = reconstruct_path(grid, result.parent, end)
    elapsed = time.perf_counter() - t0

    return {
        "algorithm": algorithm,
        "rows": rows,
        "cols": cols,
        "seed": seed,
        "elapsed_sec": elapsed,
        "visited": len(result.order),
        "expanded": result.expanded,
        "frontier_max": result.frontier_max,
        "path_length": path_length(path),
        "found": bool(path),
    }


def aggregate_results(rows, group_by=("rows", "cols", "algorithm")):
    # Aggregate by group-by keys
    grouped = {}
    for r in rows:
        key = tuple(r[k] for k in group_by)
        grouped.setdefault(key, []).append(r)

    def agg_stat(values):
        if not values:
            return {"avg": 0, "min": 0, "max": 0, "stdev": 0}
        return {
            "avg": statistics.mean(values),
            "min": min(values),
            "max": max(values),
            "stdev": statistics.pstdev(values) if len(values) > 1 else 0,
        }

    summary = []
    for key, items in grouped.items():
        entry = dict(zip(group_by, key))
        entry["count"] = len(items)
        for m in METRICS:
            stats = agg_stat([it[m] for it in items])
            for stat_name, value in stats.items():
                entry[f"{m}_{stat_name}"] = value
        entry["found_rate"] = sum(1 for it in items if it["found"]) / len(items)
        summary.append(entry)
    return summary


def write_csv(path, rows):
    if not rows:
        return
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=list(rows[0].keys()))
        writer.writeheader()
        for r in rows:
            writer.writerow(r)


def plot_metric(summary, metric_key, out_path):
    labels = [f"{row['algorithm']}\n({row['cols']}x{row['rows']})" for row in summary]
    values = [row.get(metric_key, 0) for row in summary]
    plt.figure(figsize=(max(6, len(labels) * 1.2), 5))
    plt.bar(range(len(values)), values)
    plt.xticks(range(len(values)), labels)
    plt.ylabel(metric_key)
    plt.tight_layout()
    directory = os.path.dirname(out_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    plt.savefig(out_path)
    plt.close()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run repeated BFS/DFS maze solves and plot metrics.")
    parser.add_argument("--runs", type=int, default=10, help="Runs per algorithm")
    parser.add_argument("--rows", type=int, default=21)
    parser.add_argument("--cols", type=int, default=31)
    parser.add_argument("--algorithms", nargs="*", default=DEFAULT_ALGOS)
    parser.add_argument("--seed", type=int, default=None, help="Base seed (defaults to the current time)")
    parser.add_argument("--out_dir", default="metrics_output")
    parser.add_argument("--no-plots", action="store_true", help="Skip chart generation")
    args = parser.parse_args(argv)

    algorithms = [a.upper() for a in args.algorithms]
    unknown = [a for a in algorithms if a not in DEFAULT_ALGOS]
    if unknown:
        parser.error(f"unknown algorithm(s): {', '.join(unknown)}")

    all_rows = []
    seed_base = args.seed if args.seed is not None else int(time.time())

    for i in range(args.runs):
        seed = seed_base + i
        for algo in algorithms:
            all_rows.append(run_single(args.rows, args.cols, algo, seed=seed))

    os.makedirs(args.out_dir, exist_ok=True)
    write_csv(os.path.join(args.out_dir, "raw_results.csv"), all_rows)

    summary = aggregate_results(all_rows)
    write_csv(os.path.join(args.out_dir, "summary.csv"), summary)

    # Plot a few key metrics
    if not args.no_plots:
        for metric in [
            "elapsed_sec_avg",
            "visited_avg",
            "frontier_max_avg",
            "path_length_avg",
        ]:
            plot_metric(summary, metric, os.path.join(args.out_dir, f"{metric}.png"))

    print(f"Wrote results to {args.out_dir}")
    return 0


if __name__ == "__main__":
    main()
