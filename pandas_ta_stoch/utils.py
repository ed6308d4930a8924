# -*- coding: utf-8 -*-
from typing import Any, Optional

from pandas import Series

__all__ = ["v_offset", "v_pos_default", "v_series"]


def v_offset(x: Any) -> int:
    """Post shift; anything non-integral becomes 0."""
    return int(x) if isinstance(x, int) and not isinstance(x, bool) else 0


def v_pos_default(x: Any, default: int = 0) -> int:
    """Positive int or *default*."""
    if isinstance(x, bool):
        return int(default)
    try:
        x = int(x)
    except (TypeError, ValueError):
        return int(default)
    return x if x > 0 else int(default)


def v_series(series: Any, length: int = 0) -> Optional[Series]:
    """Series with at least *length* rows, otherwise None."""
    if series is None or not isinstance(series, Series):
        return None
    return series if series.size >= length else None
