# -*- coding: utf-8 -*-
"""pandas-ta-stoch.stateful – streaming / stateful indicator package.

Category modules populate STATEFUL_REGISTRY and SEED_REGISTRY at import
time.  This package re-exports them plus the shared base API.
"""
from __future__ import annotations

# Base API (always available)
from ._base import (
    Bar,
    StatefulIndicator,
    STATEFUL_REGISTRY,
    SEED_REGISTRY,
    get_indicator,
    replay_seed,
    build_state_key,
    resolve_output_names,
    stateful_supported_kinds,
    STATEFUL_SPEC_EXCLUDES,
    _param,
    _as_int,
    _as_decimal,
)
from ._window import RollingMax, RollingMin, RollingSum

# ---------------------------------------------------------------------------
# Category modules – each populates the shared registries on import
# ---------------------------------------------------------------------------
from . import _momentum     # noqa: F401  stoch
from ._momentum import FastStoch, StochK, StochD, StochasticRSI

__all__ = [
    # base
    "Bar",
    "StatefulIndicator",
    "STATEFUL_REGISTRY",
    "SEED_REGISTRY",
    "get_indicator",
    "replay_seed",
    "build_state_key",
    "resolve_output_names",
    "stateful_supported_kinds",
    # windows
    "RollingMax",
    "RollingMin",
    "RollingSum",
    # momentum
    "FastStoch",
    "StochK",
    "StochD",
    "StochasticRSI",
]
