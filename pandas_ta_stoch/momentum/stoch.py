# -*- coding: utf-8 -*-
from numpy import nan
from pandas import DataFrame, Series
from pandas_ta_stoch.utils import v_offset, v_pos_default, v_series


def stoch(
    high: Series, low: Series, close: Series,
    length: int = None, k: int = None, d: int = None,
    offset: int = None, **kwargs
):
    """Slow Stochastics (STOCH)

    Vectorised counterpart of the streaming ``StochasticRSI`` indicator.
    Fast %K is the position of the close inside the ``length`` bar
    high / low range; Slow %K smooths it over ``k`` bars and Slow %D
    smooths Slow %K over ``d`` bars.

    Calculation:
        LL = low.rolling(length).min()
        HH = high.rolling(length).max()
        FASTK = 100 * (close - LL) / (HH - LL)      (0 when HH - LL <= 0)
        STOCHk = FASTK.rolling(k).mean()
        STOCHd = STOCHk.rolling(d).mean()

    Parameters:
        high (Series): ```high``` Series
        low (Series): ```low``` Series
        close (Series): ```close``` Series
        length (int): Fast %K period. Default: ```14```
        k (int): Slow %K period. Default: ```3```
        d (int): Slow %D period. Default: ```3```
        offset (int): Post shift. Default: ```0```

    Other Parameters:
        fillna (value): ```pd.DataFrame.fillna(value)```

    Returns:
        (DataFrame): 3 columns, NaN until each series is ready
    """
    # Validate
    length = v_pos_default(length, 14)
    k = v_pos_default(k, 3)
    d = v_pos_default(d, 3)
    high = v_series(high, length)
    low = v_series(low, length)
    close = v_series(close, length)
    offset = v_offset(offset)

    if high is None or low is None or close is None:
        return

    # Calculation
    hh = high.rolling(length, min_periods=length).max()
    ll = low.rolling(length, min_periods=length).min()
    rng = hh - ll

    fastk = 100 * (close - ll) / rng.where(rng > 0, nan)
    fastk = fastk.where(rng.isna() | (rng > 0), 0.0)
    stochk = fastk.rolling(k, min_periods=k).mean()
    stochd = stochk.rolling(d, min_periods=d).mean()

    # Offset
    if offset != 0:
        fastk = fastk.shift(offset)
        stochk = stochk.shift(offset)
        stochd = stochd.shift(offset)

    # Fill
    if "fillna" in kwargs:
        fastk = fastk.fillna(kwargs["fillna"])
        stochk = stochk.fillna(kwargs["fillna"])
        stochd = stochd.fillna(kwargs["fillna"])

    # Name and Category
    _props = f"_{length}_{k}_{d}"
    df = DataFrame({
        f"STOCHF{_props}": fastk,
        f"STOCHk{_props}": stochk,
        f"STOCHd{_props}": stochd,
    }, index=close.index)
    df.name = f"STOCH{_props}"
    df.category = "momentum"

    return df
