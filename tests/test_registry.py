# -*- coding: utf-8 -*-
import pytest

import pandas_ta_stoch as ta
from pandas_ta_stoch.stateful import (
    SEED_REGISTRY,
    STATEFUL_REGISTRY,
    Bar,
    StochasticRSI,
    build_state_key,
    replay_seed,
    resolve_output_names,
    stateful_supported_kinds,
)


def test_stoch_registered():
    assert "stoch" in stateful_supported_kinds()
    assert "stoch" in SEED_REGISTRY
    assert STATEFUL_REGISTRY["stoch"].inputs == ("high", "low", "close")


def test_output_names_defaults_and_params():
    names = STATEFUL_REGISTRY["stoch"].output_names
    assert names({}) == ["STOCHF_14_3_3", "STOCHk_14_3_3", "STOCHd_14_3_3"]
    assert names({"length": 5, "k": None, "d": "2"}) == ["STOCHF_5_3_2", "STOCHk_5_3_2", "STOCHd_5_3_2"]


def test_resolve_output_names_overrides():
    base = ["STOCHF_5_3_3", "STOCHk_5_3_3", "STOCHd_5_3_3"]
    names, err = resolve_output_names(base, {"prefix": "btc", "suffix": "1m"})
    assert err is None
    assert names[1] == "btc_STOCHk_5_3_3_1m"
    names, err = resolve_output_names(base, {"col_names": ("f", "k")})
    assert names is None and "too short" in err
    names, _ = resolve_output_names(base, {"col_names": ("f", "k", "d")})
    assert names == ["f", "k", "d"]


def test_build_state_key_ignores_meta_keys():
    a = build_state_key("stoch", {"kind": "stoch", "length": 5, "k": 3, "prefix": "x"})
    b = build_state_key("stoch", {"k": 3, "length": 5})
    assert a == b == "stoch|k=3|length=5"


def test_update_reports_none_until_ready(scenario_bars):
    indicator = STATEFUL_REGISTRY["stoch"]
    params = {"length": 3, "k": 3, "d": 1}
    state = indicator.init(params)
    outs = []
    for h, l, c in scenario_bars:
        out, state = indicator.update(state, {"high": h, "low": l, "close": c}, params)
        outs.append(out)
    assert outs[1] == [None, None, None]
    assert outs[2] == [pytest.approx(60.0), None, None]
    assert outs[4][1] is not None
    assert outs[4][2] is not None
    assert isinstance(outs[4][0], float)


def test_unknown_kind():
    with pytest.raises(ValueError):
        replay_seed("nope", {}, {})


def test_invalid_params_rejected_at_init():
    with pytest.raises(ValueError):
        STATEFUL_REGISTRY["stoch"].init({"length": 0})


def test_seed_matches_row_by_row(ohlc):
    params = {"length": 9, "k": 3, "d": 3}
    series = {k: ohlc[k] for k in ("high", "low", "close")}
    state = SEED_REGISTRY["stoch"](series, params)

    ind = StochasticRSI(9, 3, 3)
    for h, l, c in zip(ohlc["high"], ohlc["low"], ohlc["close"]):
        ind.update(Bar(None, h, l, c))

    assert state.samples == len(ohlc)
    assert state.stoch_d.current == ind.stoch_d.current
    assert state.stoch_k.current == ind.stoch_k.current


def test_seed_skips_nan_rows(ohlc):
    df = ohlc.copy()
    df.iloc[3, df.columns.get_loc("close")] = float("nan")
    state = SEED_REGISTRY["stoch"]({k: df[k] for k in ("high", "low", "close")}, {"length": 5})
    assert state.samples == len(df) - 1


def test_seed_without_inputs_returns_fresh_state():
    state = SEED_REGISTRY["stoch"]({}, {"length": 5})
    assert state.samples == 0
    assert state.period == 5


def test_flat_namespace():
    assert ta.StochasticRSI is StochasticRSI
    assert callable(ta.stoch)
    assert callable(ta.study_stateful)
