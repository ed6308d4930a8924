# -*- coding: utf-8 -*-
import numpy as np
import pandas as pd
import pytest


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


@pytest.fixture
def ohlc() -> pd.DataFrame:
    return make_ohlc(300, 7)


@pytest.fixture
def scenario_bars():
    # (high, low, close)
    return [(10, 8, 9), (12, 9, 11), (11, 7, 10), (13, 8, 12), (14, 9, 13)]
