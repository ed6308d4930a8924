# -*- coding: utf-8 -*-
from importlib.metadata import PackageNotFoundError, version as _version

try:
    version = _version("pandas-ta-stoch")
except PackageNotFoundError:
    version = "0.0.0"

from pandas_ta_stoch.utils import *
from pandas_ta_stoch.utils import __all__ as utils_all
from pandas_ta_stoch.stateful import *
from pandas_ta_stoch.stateful import __all__ as stateful_all

# Flat Structure. Supports ta.stoch() or ta.momentum.stoch()
from pandas_ta_stoch.momentum import *
from pandas_ta_stoch.momentum import __all__ as momentum_all

# Enable "ta" DataFrame Extension
from pandas_ta_stoch.core import AnalysisIndicators, study_stateful

__all__ = [
    "version",
    "AnalysisIndicators",
    "study_stateful",
]

__all__ += (
    utils_all
    + momentum_all
    + stateful_all
)
