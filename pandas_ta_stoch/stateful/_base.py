# -*- coding: utf-8 -*-
"""pandas-ta-stoch stateful – shared base: bar type, helpers, registries.

Category modules (``_momentum``) import from here and populate the
registries at load time.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable, Dict, List, Optional, Tuple

import numbers

ZERO = Decimal(0)
HUNDRED = Decimal(100)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _param(params: Dict[str, Any], key: str, default: Any) -> Any:
    """Pull *key* from *params*; treat None as missing → default."""
    value = params.get(key, default)
    return default if value is None else value


def _as_int(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return int(default)


def _as_decimal(value: Any) -> Decimal:
    """Coerce a price to Decimal; floats go through ``str`` (0.1 -> '0.1')."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    if hasattr(value, "item"):     # numpy scalar
        return _as_decimal(value.item())
    return Decimal(value)


def _check_period(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value < 1:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")
    return int(value)


# ---------------------------------------------------------------------------
# Input sample
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Bar:
    """Immutable price bar.  Prices are stored as Decimal."""
    timestamp: Any
    high:  Decimal
    low:   Decimal
    close: Decimal

    def __post_init__(self) -> None:
        # frozen: bypass __setattr__ for the coercion
        object.__setattr__(self, "high",  _as_decimal(self.high))
        object.__setattr__(self, "low",   _as_decimal(self.low))
        object.__setattr__(self, "close", _as_decimal(self.close))

    @classmethod
    def from_mapping(cls, bar: Dict[str, Any]) -> "Bar":
        """Build from a dict bar ``{"high", "low", "close"[, "timestamp"]}``."""
        return cls(bar.get("timestamp"), bar["high"], bar["low"], bar["close"])


# ---------------------------------------------------------------------------
# Indicator descriptor & registries  (populated by category modules)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class StatefulIndicator:
    """Immutable descriptor for a single stateful indicator."""
    kind:         str
    inputs:       Tuple[str, ...]
    init:         Callable[[Dict[str, Any]], Any]
    update:       Callable[[Any, Dict[str, Any], Dict[str, Any]],
                           Tuple[List[Optional[float]], Any]]
    output_names: Callable[[Dict[str, Any]], List[str]]


# Populated by category modules at import time.
STATEFUL_REGISTRY:  Dict[str, StatefulIndicator] = {}
SEED_REGISTRY:      Dict[str, Callable] = {}            # kind -> seed_fn(inputs, params) -> State


def get_indicator(kind: str) -> StatefulIndicator:
    indicator = STATEFUL_REGISTRY.get(kind)
    if indicator is None:
        raise ValueError(f"Indicator '{kind}' not found in STATEFUL_REGISTRY")
    return indicator


# ---------------------------------------------------------------------------
# Generic seed helper
# ---------------------------------------------------------------------------

def replay_seed(kind: str, inputs: Dict[str, Any], params: Dict[str, Any]) -> Any:
    """Generic seed: replay the stateful update over historical Series.

    *inputs* values must be ``pd.Series`` (or any indexable with ``.iloc``).
    Rows holding a NaN in any input are skipped.  Returns the final
    *State* after processing all rows.
    """
    import pandas as pd          # lazy – pandas not required at module load
    indicator = get_indicator(kind)
    state = indicator.init(params)
    keys = list(inputs.keys())
    if not keys:
        return state
    n = len(inputs[keys[0]])
    for i in range(n):
        bar: Dict[str, Any] = {}
        valid = True
        for k in keys:
            v = inputs[k].iloc[i]
            if pd.isna(v):
                valid = False
                break
            bar[k] = v
        if not valid:
            continue
        _, state = indicator.update(state, bar, params)
    return state


# ---------------------------------------------------------------------------
# Output-name helpers
# ---------------------------------------------------------------------------

STATEFUL_SPEC_EXCLUDES = frozenset({
    "kind", "prefix", "suffix", "delimiter",
    "col_names", "state_key", "name",
})


def build_state_key(kind: str, spec: Dict[str, Any]) -> str:
    """Deterministic cache-key from *kind* + non-meta params."""
    parts = sorted(
        ((k, v) for k, v in spec.items() if k not in STATEFUL_SPEC_EXCLUDES),
        key=lambda x: x[0],
    )
    payload = "|".join(f"{k}={repr(v)}" for k, v in parts)
    return f"{kind}|{payload}" if payload else kind


def resolve_output_names(
        base_names: List[str], spec: Dict[str, Any]
) -> Tuple[Optional[List[str]], Optional[str]]:
    """Apply prefix / suffix / col_names overrides from *spec*."""
    names = list(base_names)
    delimiter = spec.get("delimiter", "_")
    prefix = spec.get("prefix") or ""
    suffix = spec.get("suffix") or ""
    if prefix:
        prefix = f"{prefix}{delimiter}"
    if suffix:
        suffix = f"{delimiter}{suffix}"
    if prefix or suffix:
        names = [f"{prefix}{n}{suffix}" for n in names]
    col_names = spec.get("col_names")
    if col_names is not None:
        if not isinstance(col_names, tuple):
            col_names = (col_names,)
        if len(col_names) < len(names):
            return None, f"[!] col_names too short: {len(col_names)} < {len(names)}"
        names = list(col_names[: len(names)])
    return names, None


def stateful_supported_kinds() -> List[str]:
    """Return sorted list of supported indicator kinds."""
    return sorted(STATEFUL_REGISTRY.keys())
