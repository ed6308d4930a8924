# -*- coding: utf-8 -*-
import numpy as np
import pandas as pd

import pandas_ta_stoch as ta


SPEC = {"kind": "stoch", "length": 9, "k": 3, "d": 3}


def test_accessor_stoch_matches_function(ohlc):
    ref = ta.stoch(ohlc["high"], ohlc["low"], ohlc["close"], length=9)
    res = ohlc.ta.stoch(length=9)
    pd.testing.assert_frame_equal(res, ref)
    assert "STOCHk_9_3_3" not in ohlc.columns


def test_accessor_stoch_append(ohlc):
    df = ohlc.copy()
    df.ta.stoch(length=9, append=True)
    assert {"STOCHF_9_3_3", "STOCHk_9_3_3", "STOCHd_9_3_3"} <= set(df.columns)


def test_accessor_seed_then_increment(ohlc):
    split = 150
    full, _ = ta.study_stateful(ohlc, [SPEC])

    res_seed, state = ohlc.iloc[: split + 1].ta.study_stateful([SPEC])
    res_inc, state = ohlc.ta.study_stateful([SPEC], state=state, state_timestamp=ohlc.index[split])

    combined = pd.concat([res_seed, res_inc])
    pd.testing.assert_frame_equal(combined, full, check_freq=False)


def test_accessor_matches_vectorised_with_capitalised_columns(ohlc):
    df = ohlc.rename(columns=str.capitalize)
    res, _ = df.ta.study_stateful([SPEC], append=True)
    ref = df.ta.stoch(length=9)
    np.testing.assert_allclose(res.to_numpy(), ref.to_numpy(), rtol=1e-9, atol=1e-9)
    assert "STOCHd_9_3_3" in df.columns
