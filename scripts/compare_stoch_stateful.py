#!/usr/bin/env python3
"""Compare vectorised stoch() outputs vs stateful incremental outputs.

1) vectorised reference over the full frame
2) study_stateful seed on t=0..split, then update on t=split+1..end
"""
from __future__ import annotations

import argparse
import os
import sys

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import numpy as np
import pandas as pd
import pandas_ta_stoch  # noqa: F401  registers df.ta


def make_ohlc(rows: int, seed: int) -> pd.DataFrame:
    rng = np.random.default_rng(seed)
    idx = pd.date_range("2025-01-01", periods=rows, freq="1min")
    base = 100 + rng.standard_normal(rows).cumsum()
    close = base + rng.normal(0, 0.2, rows)
    open_ = base + rng.normal(0, 0.2, rows)
    high = np.maximum(open_, close) + rng.random(rows) * 0.5
    low = np.minimum(open_, close) - rng.random(rows) * 0.5
    return pd.DataFrame(
        {"open": open_, "high": high, "low": low, "close": close},
        index=idx,
    )


def compare_frames(ref: pd.DataFrame, test: pd.DataFrame, eps: float) -> pd.DataFrame:
    diff = (test - ref).abs()
    rel = diff / (ref.abs() + eps)
    return pd.DataFrame(
        {
            "nan_ref": ref.isna().sum(),
            "nan_test": test.isna().sum(),
            "max_abs": diff.max(),
            "mean_abs": diff.mean(),
            "mean_rel": rel.mean(),
        }
    )


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--rows", type=int, default=2000)
    ap.add_argument("--split", type=int, default=1500, help="seed end index")
    ap.add_argument("--length", type=int, default=14)
    ap.add_argument("-k", type=int, default=3)
    ap.add_argument("-d", type=int, default=3)
    ap.add_argument("--seed", type=int, default=11)
    ap.add_argument("--eps", type=float, default=1e-12)
    args = ap.parse_args()

    if args.split >= args.rows:
        raise SystemExit("--split must be < --rows")

    df = make_ohlc(args.rows, args.seed)
    spec = {"kind": "stoch", "length": args.length, "k": args.k, "d": args.d}

    ref = df.ta.stoch(length=args.length, k=args.k, d=args.d)

    res_seed, state = df.iloc[: args.split + 1].ta.study_stateful([spec])
    res_inc, _ = df.ta.study_stateful([spec], state=state, state_timestamp=df.index[args.split])
    combined = pd.concat([res_seed, res_inc]).reindex(df.index)

    summary = compare_frames(ref, combined.loc[:, ref.columns], args.eps)
    print("[i] rows:", args.rows)
    print("[i] split index:", args.split)
    print(summary)


if __name__ == "__main__":
    main()
