#!/usr/bin/env python3
"""Reachability search profiler.

Usage:
    python scripts/profile_reachability.py --layouts 200 --range 6 --grid 32
    python scripts/profile_reachability.py --layouts 200 --range 10 --cprofile reach.prof

Reports:
    - Per-query timing statistics (min, max, mean, p50, p95, p99)
    - Reachable cells and trace pushes per query
    - Optional: cProfile dump for flame graph generation
"""

from __future__ import annotations

import argparse
import cProfile
import io
import os
import pstats
import statistics
import sys
import time

# Ensure project root is on path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from tilearena.ai.reachability import enumerate_steps, max_reachable_cells, search
from tilearena.core.arena import TileArena
from tilearena.systems.rng import DeterministicRNG


def _run_queries(grid_size: int, layouts: int, move_range: int, seed: int) -> dict:
    """Randomize *layouts* times and time one search per layout."""
    arena = TileArena(grid_size, grid_size, DeterministicRNG(seed))
    query_times: list[float] = []
    cell_counts: list[int] = []
    push_counts: list[int] = []

    for _ in range(layouts):
        arena.randomize()
        start = arena.random_free_tile()
        if start is None:
            continue

        t_start = time.perf_counter()
        result = search(arena.grid, start, move_range)
        query_times.append(time.perf_counter() - t_start)

        cell_counts.append(len(result))
        push_counts.append(sum(1 for _ in enumerate_steps(arena.grid, start, move_range)))

    return {"query_times": query_times, "cell_counts": cell_counts, "push_counts": push_counts}


def _percentile(data: list[float], p: float) -> float:
    """Simple percentile calculation."""
    if not data:
        return 0.0
    sorted_data = sorted(data)
    k = (len(sorted_data) - 1) * (p / 100.0)
    f = int(k)
    c = f + 1
    if c >= len(sorted_data):
        return sorted_data[f]
    return sorted_data[f] + (k - f) * (sorted_data[c] - sorted_data[f])


def _print_report(data: dict, move_range: int, wall_time: float) -> None:
    """Print a formatted performance report."""
    times = data["query_times"]
    cells = data["cell_counts"]
    pushes = data["push_counts"]
    n = len(times)

    if n == 0:
        print("No queries executed.")
        return

    print("\n" + "=" * 70)
    print("  REACHABILITY PERFORMANCE REPORT")
    print("=" * 70)

    print(f"\n  Queries executed:  {n}")
    print(f"  Wall clock time:   {wall_time:.3f}s")
    print(f"  Avg query time:    {statistics.mean(times) * 1000:.3f}ms")

    print(f"\n  Diamond bound:         {max_reachable_cells(move_range)}")
    print(f"  Reachable cells (avg): {statistics.mean(cells):.1f}")
    print(f"  Pushes (avg):          {statistics.mean(pushes):.1f}")
    print(f"  Pushes per cell (max): {max(p / c for p, c in zip(pushes, cells)):.2f}")

    print(f"\n  {'Metric':<16} {'Time (ms)':>10}")
    print(f"  {'-' * 16} {'-' * 10}")
    print(f"  {'Min':<16} {min(times) * 1000:>10.3f}")
    print(f"  {'P50 (median)':<16} {_percentile(times, 50) * 1000:>10.3f}")
    print(f"  {'P95':<16} {_percentile(times, 95) * 1000:>10.3f}")
    print(f"  {'P99':<16} {_percentile(times, 99) * 1000:>10.3f}")
    print(f"  {'Max':<16} {max(times) * 1000:>10.3f}")

    print("\n" + "=" * 70)


def main() -> None:
    parser = argparse.ArgumentParser(description="Profile the reachability search")
    parser.add_argument("--layouts", type=int, default=200, help="Number of random layouts to query")
    parser.add_argument("--range", type=int, default=6, dest="move_range", help="Move range per query")
    parser.add_argument("--grid", type=int, default=32, help="Grid size (NxN)")
    parser.add_argument("--seed", type=int, default=42, help="Layout seed")
    parser.add_argument("--cprofile", type=str, default=None, help="Save cProfile output to file")
    args = parser.parse_args()

    print(f"Profiling: {args.layouts} layouts, range={args.move_range}, "
          f"grid={args.grid}x{args.grid}, seed={args.seed}")

    profiler = None
    if args.cprofile:
        profiler = cProfile.Profile()
        profiler.enable()

    wall_start = time.perf_counter()
    data = _run_queries(args.grid, args.layouts, args.move_range, args.seed)
    wall_time = time.perf_counter() - wall_start

    if profiler:
        profiler.disable()

    _print_report(data, args.move_range, wall_time)

    if profiler and args.cprofile:
        profiler.dump_stats(args.cprofile)
        print(f"\n  cProfile data saved to: {args.cprofile}")
        print(f"  View with: python -m pstats {args.cprofile}")

        print(f"\n  Top 20 functions by cumulative time:")
        stream = io.StringIO()
        ps = pstats.Stats(profiler, stream=stream)
        ps.sort_stats("cumulative")
        ps.print_stats(20)
        print(stream.getvalue())


if __name__ == "__main__":
    main()
