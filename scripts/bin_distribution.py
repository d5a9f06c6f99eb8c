#!/usr/bin/env python3
"""Empirical bin distribution and return for the payout table.

Usage:
    python scripts/bin_distribution.py --rounds 20000 --column 6
    python scripts/bin_distribution.py --rounds 20000 --all-columns
    python scripts/bin_distribution.py --rounds 5000 --cprofile drop.prof

Reports:
    - Histogram of terminal bins per drop column
    - Expected payout multiplier (return per unit staked)
    - Per-round timing statistics (mean, p50, p95, p99)
    - Optional: cProfile dump
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
from collections import Counter

# Ensure project root is on path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from pegdrop.engine.game import run_game
from pegdrop.systems.payout import expected_multiplier, payout_multiplier
from pegdrop.systems.pegmap import ROWS
from pegdrop.systems.seeds import combine_seed, new_commitment


def _run_rounds(column: int, num_rounds: int, client_seed: str) -> dict:
    """Play *num_rounds* fresh rounds at *column* and collect bins and timings."""
    bins: Counter[int] = Counter()
    round_times: list[float] = []

    for _ in range(num_rounds):
        commitment = new_commitment()
        t_start = time.perf_counter()
        combined = combine_seed(commitment.server_seed, client_seed, commitment.nonce)
        result = run_game(combined, column)
        round_times.append(time.perf_counter() - t_start)
        bins[result.path.bin_index] += 1

    return {"column": column, "bins": bins, "round_times": round_times}


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


def _print_report(data: dict) -> None:
    """Print a formatted histogram and timing report for one column."""
    bins: Counter[int] = data["bins"]
    round_times: list[float] = data["round_times"]
    total = sum(bins.values())
    if not total:
        print("No rounds played.")
        return

    print("\n" + "=" * 70)
    print(f"  DROP COLUMN {data['column']}  ({total} rounds)")
    print("=" * 70)

    print(f"\n  {'Bin':<5} {'Mult':>6} {'Count':>8} {'Share':>8}")
    print(f"  {'-' * 5} {'-' * 6} {'-' * 8} {'-' * 8}")
    for b in range(ROWS + 1):
        count = bins.get(b, 0)
        bar = "#" * round(60 * count / total)
        print(f"  {b:<5} {payout_multiplier(b):>6.2f} {count:>8} {count / total:>7.2%}  {bar}")

    print(f"\n  Expected multiplier: {expected_multiplier(bins):.4f}")

    print(f"\n  {'Metric':<16} {'Time (us)':>10}")
    print(f"  {'-' * 16} {'-' * 10}")
    print(f"  {'Mean':<16} {statistics.mean(round_times) * 1e6:>10.1f}")
    print(f"  {'P50 (median)':<16} {_percentile(round_times, 50) * 1e6:>10.1f}")
    print(f"  {'P95':<16} {_percentile(round_times, 95) * 1e6:>10.1f}")
    print(f"  {'P99':<16} {_percentile(round_times, 99) * 1e6:>10.1f}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Measure the terminal bin distribution")
    parser.add_argument("--rounds", type=int, default=10000, help="Rounds per drop column")
    parser.add_argument("--column", type=int, default=ROWS // 2, help="Drop column (0-12)")
    parser.add_argument("--all-columns", action="store_true", help="Sweep every drop column")
    parser.add_argument("--client-seed", type=str, default="distribution-check")
    parser.add_argument("--cprofile", type=str, default=None, help="Save cProfile output to file")
    args = parser.parse_args()

    columns = list(range(ROWS + 1)) if args.all_columns else [args.column]
    print(f"Sampling: {args.rounds} rounds x {len(columns)} column(s)")

    profiler = None
    if args.cprofile:
        profiler = cProfile.Profile()
        profiler.enable()

    wall_start = time.perf_counter()
    results = [_run_rounds(c, args.rounds, args.client_seed) for c in columns]
    wall_time = time.perf_counter() - wall_start

    if profiler:
        profiler.disable()

    for data in results:
        _print_report(data)

    total_rounds = args.rounds * len(columns)
    print(f"\n  Wall clock time:   {wall_time:.3f}s")
    print(f"  Throughput:        {total_rounds / wall_time:.0f} rounds/sec")

    if profiler and args.cprofile:
        profiler.dump_stats(args.cprofile)
        print(f"\n  cProfile data saved to: {args.cprofile}")
        print(f"\n  Top 15 functions by cumulative time:")
        stream = io.StringIO()
        ps = pstats.Stats(profiler, stream=stream).sort_stats("cumulative")
        ps.print_stats(15)
        print(stream.getvalue())


if __name__ == "__main__":
    main()
