# -*- coding: utf-8 -*-
"""Drive registered stateful indicators over a DataFrame.

``study_stateful`` is the seed-then-increment workflow, also available
through the ``ta`` DataFrame extension:

    res, state = df.iloc[:split + 1].ta.study_stateful(specs)
    res, state = df.ta.study_stateful(specs, state=state,
                                      state_timestamp=df.index[split])

The second call only processes rows after ``state_timestamp``.  A spec
with no stored state is seeded from the rows up to ``state_timestamp``.
"""
from __future__ import annotations

import warnings
from typing import Any, Dict, List, Optional, Tuple

import pandas as pd

from pandas_ta_stoch.momentum import stoch
from pandas_ta_stoch.stateful import (
    SEED_REGISTRY,
    StatefulIndicator,
    build_state_key,
    get_indicator,
    replay_seed,
    resolve_output_names,
)


def _seed_state(
    indicator: StatefulIndicator, history: pd.DataFrame, spec: Dict[str, Any]
) -> Any:
    """State warmed on *history* via SEED_REGISTRY (or a generic replay)."""
    if history.empty:
        return indicator.init(spec)
    series = {c: history[c] for c in indicator.inputs}
    seed_fn = SEED_REGISTRY.get(indicator.kind)
    if seed_fn is None:
        return replay_seed(indicator.kind, series, spec)
    if "timestamp" in history.columns:
        series["timestamp"] = history["timestamp"]
    return seed_fn(series, spec)


def study_stateful(
    df: pd.DataFrame,
    specs: List[Dict[str, Any]],
    state: Optional[Dict[str, Any]] = None,
    state_timestamp: Any = None,
) -> Tuple[pd.DataFrame, Dict[str, Any]]:
    """Run every spec over *df* row by row.

    Returns (outputs, state).  *state* maps ``build_state_key`` keys to
    indicator states and is updated in place when given.  Specs sharing a
    key (same params, different names) are computed once per call.
    """
    state = {} if state is None else state
    if state_timestamp is None:
        rows, history = df, df.iloc[:0]
    else:
        rows = df.loc[df.index > state_timestamp]
        history = df.loc[df.index <= state_timestamp]

    columns: Dict[str, List[Optional[float]]] = {}
    computed: Dict[str, List[List[Optional[float]]]] = {}
    skipped = 0
    for spec in specs:
        kind = spec.get("kind")
        indicator = get_indicator(kind)
        missing = [c for c in indicator.inputs if c not in rows.columns]
        if missing:
            raise ValueError(f"[X] {kind}: missing input column(s) {missing}")

        names, err = resolve_output_names(indicator.output_names(spec), spec)
        if names is None:
            raise ValueError(err)

        key = spec.get("state_key") or build_state_key(kind, spec)
        series = computed.get(key)
        if series is None:
            ind_state = state.get(key)
            if ind_state is None:
                ind_state = _seed_state(indicator, history, spec)

            series = [[] for _ in names]
            inputs = rows.loc[:, list(indicator.inputs)]
            stamps = rows["timestamp"] if "timestamp" in rows.columns else rows.index
            for ts, values in zip(stamps, inputs.itertuples(index=False, name=None)):
                if any(pd.isna(v) for v in values):
                    skipped += 1
                    for s in series:
                        s.append(None)
                    continue
                bar = dict(zip(indicator.inputs, values))
                bar["timestamp"] = ts
                out, ind_state = indicator.update(ind_state, bar, spec)
                for s, v in zip(series, out):
                    s.append(v)

            state[key] = ind_state
            computed[key] = series

        for name, s in zip(names, series):
            columns[name] = s

    if skipped:
        warnings.warn(
            f"study_stateful skipped {skipped} row(s) with NaN inputs.",
            UserWarning,
            stacklevel=2,
        )

    result = pd.DataFrame(columns, index=rows.index, dtype=float)
    return result, state


@pd.api.extensions.register_dataframe_accessor("ta")
class AnalysisIndicators:
    """``df.ta`` DataFrame extension.

    Columns are looked up case-insensitively, so ``High`` works as ``high``.
    With ``append=True`` results are added to the frame as new columns.
    """

    def __init__(self, pandas_obj: pd.DataFrame):
        self._df = pandas_obj

    def _column(self, name: str) -> pd.Series:
        for c in self._df.columns:
            if isinstance(c, str) and c.lower() == name:
                return self._df[c]
        raise ValueError(f"[X] missing column '{name}'")

    def _append(self, result: pd.DataFrame) -> None:
        for c in result.columns:
            self._df.loc[result.index, c] = result[c]

    def stoch(self, length: int = None, k: int = None, d: int = None,
              offset: int = None, append: bool = False, **kwargs):
        result = stoch(
            self._column("high"), self._column("low"), self._column("close"),
            length=length, k=k, d=d, offset=offset, **kwargs
        )
        if append and result is not None:
            self._append(result)
        return result

    def study_stateful(
        self,
        specs: List[Dict[str, Any]],
        state: Optional[Dict[str, Any]] = None,
        state_timestamp: Any = None,
        append: bool = False,
    ) -> Tuple[pd.DataFrame, Dict[str, Any]]:
        frame = self._df.rename(columns=lambda c: c.lower() if isinstance(c, str) else c)
        result, state = study_stateful(frame, specs, state=state, state_timestamp=state_timestamp)
        if append:
            self._append(result)
        return result, state
