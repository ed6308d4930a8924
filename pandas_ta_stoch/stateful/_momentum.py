# -*- coding: utf-8 -*-
"""pandas-ta-stoch stateful -- momentum indicators.

The section follows the pattern:
  1. State class(es)
  2. init / update / output_names helpers
  3. STATEFUL_REGISTRY["<kind>"] = StatefulIndicator(...)
  4. SEED_REGISTRY["<kind>"]     = seed_fn
"""
from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, List, Optional, Tuple

from ._base import (
    ZERO,
    HUNDRED,
    Bar,
    _param,
    _as_int,
    _check_period,
    StatefulIndicator,
    STATEFUL_REGISTRY,
    SEED_REGISTRY,
    replay_seed,
)
from ._window import RollingMax, RollingMin, RollingSum


# ===========================================================================
# STOCH  (replay seed)  -- Slow Stochastics
# ===========================================================================
# fastk  = (close - lowest_low(length)) / (highest_high(length) - lowest_low(length))
#          0 when the range is <= 0 or fewer than `length` bars were seen
# stochk = SUM(fastk, k) / k          -- ready after length + k - 1 bars
# stochd = SUM(stochk, d) / d         -- ready after length + k + d - 2 bars
# All three are reported x100.
# Warm-up zeros are fed into both sums; that fixes the bar at which the
# downstream stages line up with the ready thresholds above.
# Defaults: length=14, k=3, d=3

class _Stage:
    """Common surface of the three stages: current / samples / is_ready."""

    def __init__(self, name: str, maximum: RollingMax):
        self.name = name
        self._maximum = maximum           # borrowed; owned by StochasticRSI
        self.current: Decimal = ZERO
        self.samples = 0

    @property
    def threshold(self) -> int:
        raise NotImplementedError

    @property
    def is_ready(self) -> bool:
        return self._maximum.samples >= self.threshold

    def _emit(self, value: Decimal) -> Decimal:
        self.samples += 1
        self.current = value * HUNDRED
        return self.current

    def reset(self) -> None:
        self._maximum.reset()
        self.current = ZERO
        self.samples = 0

    def __float__(self) -> float:
        return float(self.current)

    def __repr__(self) -> str:
        return f"{self.name}: {'Ready' if self.is_ready else 'NotReady'} {self.current}"


class FastStoch(_Stage):
    """Fast Stochastics %K over ``period`` bars."""

    def __init__(self, name: str, period: int, maximum: RollingMax,
                 minimum: RollingMin, sum_fast_k: RollingSum):
        super().__init__(name, maximum)
        self.period = period
        self._minimum = minimum
        self._sum_fast_k = sum_fast_k

    @property
    def threshold(self) -> int:
        return self._maximum.length

    def update(self, bar: Bar) -> Decimal:
        hh = self._maximum.value
        ll = self._minimum.value
        rng = hh - ll
        if rng <= 0:
            # no range (or a crossed window): constant zero, even in warm-up
            fast_k = ZERO
        elif self._maximum.samples >= self.period:
            fast_k = (bar.close - ll) / rng
        else:
            fast_k = ZERO
        self._sum_fast_k.update(bar.timestamp, fast_k)
        return self._emit(fast_k)

    def reset(self) -> None:
        super().reset()
        self._minimum.reset()


class StochK(_Stage):
    """Slow Stochastics %K: mean of the last ``k_period`` fast %K values."""

    def __init__(self, name: str, period: int, k_period: int, maximum: RollingMax,
                 sum_fast_k: RollingSum, sum_slow_k: RollingSum):
        super().__init__(name, maximum)
        self.period = period
        self.k_period = k_period
        self._sum_fast_k = sum_fast_k
        self._sum_slow_k = sum_slow_k

    @property
    def threshold(self) -> int:
        return self.period + self.k_period - 1

    def update(self, bar: Bar) -> Decimal:
        if self._maximum.samples >= self.threshold:
            stoch_k = self._sum_fast_k.value / self.k_period
        else:
            stoch_k = ZERO
        self._sum_slow_k.update(bar.timestamp, stoch_k)
        return self._emit(stoch_k)


class StochD(_Stage):
    """Slow Stochastics %D: mean of the last ``d_period`` slow %K values."""

    def __init__(self, name: str, period: int, k_period: int, d_period: int,
                 maximum: RollingMax, sum_slow_k: RollingSum):
        super().__init__(name, maximum)
        self.period = period
        self.k_period = k_period
        self.d_period = d_period
        self._sum_slow_k = sum_slow_k

    @property
    def threshold(self) -> int:
        return self.period + self.k_period + self.d_period - 2

    def update(self, bar: Optional[Bar] = None) -> Decimal:
        if self._maximum.samples >= self.threshold:
            stoch_d = self._sum_slow_k.value / self.d_period
        else:
            stoch_d = ZERO
        return self._emit(stoch_d)


class StochasticRSI:
    """Slow Stochastics %K and %D.

    Fast %K is (close - lowest low) / (highest high - lowest low) over
    ``period`` bars, times 100.  Slow %K is the ``k_period`` average of fast
    %K and Slow %D is the ``d_period`` average of slow %K.  ``update``
    returns fast %K; all three series are available as ``fast_stoch``,
    ``stoch_k`` and ``stoch_d``.

    Raises ValueError when any period is not a positive integer.
    """

    def __init__(self, period: int, k_period: int, d_period: int,
                 name: Optional[str] = None):
        period   = _check_period("period",   period)
        k_period = _check_period("k_period", k_period)
        d_period = _check_period("d_period", d_period)
        name = name or f"STO{period}"

        self.name = name
        self.period = period
        self.k_period = k_period
        self.d_period = d_period
        self.current: Decimal = ZERO
        self.samples = 0

        self._maximum = RollingMax(period)
        self._minimum = RollingMin(period)
        self._sum_fast_k = RollingSum(k_period)
        self._sum_slow_k = RollingSum(d_period)

        self.fast_stoch = FastStoch(
            f"{name}_FastStoch", period,
            self._maximum, self._minimum, self._sum_fast_k,
        )
        self.stoch_k = StochK(
            f"{name}_StochK", period, k_period,
            self._maximum, self._sum_fast_k, self._sum_slow_k,
        )
        self.stoch_d = StochD(
            f"{name}_StochD", period, k_period, d_period,
            self._maximum, self._sum_slow_k,
        )

    @property
    def is_ready(self) -> bool:
        return self.fast_stoch.is_ready and self.stoch_k.is_ready and self.stoch_d.is_ready

    @property
    def warmup_period(self) -> int:
        """Bars needed before every series is ready."""
        return self.stoch_d.threshold

    def update(self, bar: Bar) -> Decimal:
        """Push one bar; returns the fast %K value."""
        self._maximum.update(bar.timestamp, bar.high)
        self._minimum.update(bar.timestamp, bar.low)
        self.fast_stoch.update(bar)
        self.stoch_k.update(bar)
        self.stoch_d.update(bar)
        self.samples += 1
        self.current = self.fast_stoch.current
        return self.current

    def reset(self) -> None:
        self.fast_stoch.reset()
        self.stoch_k.reset()
        self.stoch_d.reset()
        self._sum_fast_k.reset()
        self._sum_slow_k.reset()
        self.current = ZERO
        self.samples = 0

    def __repr__(self) -> str:
        return (
            f"{self.name}: {'Ready' if self.is_ready else 'NotReady'} "
            f"{self.fast_stoch.current} {self.stoch_k.current} {self.stoch_d.current}"
        )


def _stoch_periods(params: Dict[str, Any]) -> Tuple[int, int, int]:
    length = _as_int(_param(params, "length", 14), 14)
    k      = _as_int(_param(params, "k",       3),  3)
    d      = _as_int(_param(params, "d",       3),  3)
    return length, k, d


def _stoch_init(params: Dict[str, Any]) -> StochasticRSI:
    length, k, d = _stoch_periods(params)
    return StochasticRSI(length, k, d)


def _stoch_update(
    state: StochasticRSI, bar: Dict[str, Any], params: Dict[str, Any]
) -> Tuple[List[Optional[float]], StochasticRSI]:
    state.update(Bar.from_mapping(bar))
    out: List[Optional[float]] = [
        float(stage.current) if stage.is_ready else None
        for stage in (state.fast_stoch, state.stoch_k, state.stoch_d)
    ]
    return out, state


def _stoch_output_names(params: Dict[str, Any]) -> List[str]:
    length, k, d = _stoch_periods(params)
    p = f"_{length}_{k}_{d}"
    return [f"STOCHF{p}", f"STOCHk{p}", f"STOCHd{p}"]


def _stoch_seed(series: Dict[str, Any], params: Dict[str, Any]) -> StochasticRSI:
    """replay seed: windows need the raw high / low / close history."""
    inputs = {k: series[k] for k in ("high", "low", "close") if series.get(k) is not None}
    if len(inputs) < 3:
        return _stoch_init(params)
    if series.get("timestamp") is not None:
        inputs["timestamp"] = series["timestamp"]
    return replay_seed("stoch", inputs, params)


STATEFUL_REGISTRY["stoch"] = StatefulIndicator(
    kind="stoch",
    inputs=("high", "low", "close"),
    init=_stoch_init,
    update=_stoch_update,
    output_names=_stoch_output_names,
)
SEED_REGISTRY["stoch"] = _stoch_seed
