#!/usr/bin/env python3
"""Benchmark incremental update speed for study_stateful.

Measures how long incremental updates take as total history grows.
Two modes:
  - full: pass full history + tail rows (input prep cost grows with history)
  - tail: pass only tail rows (true streaming cost; should be ~O(tail))
"""
from __future__ import annotations

import argparse
import copy
import os
import sys
from time import perf_counter
from typing import List

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pandas_ta_stoch  # noqa: F401  registers df.ta
from compare_stoch_stateful import make_ohlc


def parse_list(value: str) -> List[int]:
    return [int(v.strip()) for v in value.split(",") if v.strip()]


def time_call(fn, runs: int) -> float:
    times = []
    for _ in range(max(runs, 1)):
        start = perf_counter()
        fn()
        times.append(perf_counter() - start)
    return sum(times) / len(times)


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument(
        "--sizes",
        type=str,
        default="1000,10000,50000",
        help="comma-separated total row counts",
    )
    ap.add_argument("--tail", type=int, default=1, help="new rows per update")
    ap.add_argument("--seed", type=int, default=7)
    ap.add_argument("--length", type=int, default=14)
    ap.add_argument("--runs", type=int, default=3, help="timed runs")
    ap.add_argument(
        "--mode",
        type=str,
        default="both",
        choices=("full", "tail", "both"),
        help="benchmark input mode",
    )
    args = ap.parse_args()

    sizes = parse_list(args.sizes)
    specs = [{"kind": "stoch", "length": args.length, "k": 3, "d": 3}]

    print(f"[i] sizes: {sizes}")
    print(f"[i] tail: {args.tail}")
    print(f"[i] runs: {args.runs}")
    print(f"[i] mode: {args.mode}")

    for rows in sizes:
        if rows <= args.tail + 1:
            print(f"[i] skip rows={rows} (need > tail+1)")
            continue

        df = make_ohlc(rows, args.seed)
        split = rows - args.tail
        df_hist = df.iloc[:split]
        df_tail = df.iloc[split:]

        # Seed state from history (not timed)
        _, base_state = df_hist.ta.study_stateful(specs)
        state_ts = df_hist.index[-1]

        def run_full():
            df.ta.study_stateful(specs, state=copy.deepcopy(base_state), state_timestamp=state_ts)

        def run_tail():
            df_tail.ta.study_stateful(specs, state=copy.deepcopy(base_state), state_timestamp=state_ts)

        if args.mode in ("full", "both"):
            avg_full = time_call(run_full, args.runs)
            print(
                f"[full] rows={rows} tail={args.tail} avg_s={avg_full:.6f} "
                f"s_per_tail={avg_full / max(args.tail, 1):.6f}"
            )
        if args.mode in ("tail", "both"):
            avg_tail = time_call(run_tail, args.runs)
            print(
                f"[tail] rows={rows} tail={args.tail} avg_s={avg_tail:.6f} "
                f"s_per_tail={avg_tail / max(args.tail, 1):.6f}"
            )


if __name__ == "__main__":
    main()
