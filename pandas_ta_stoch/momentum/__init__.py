# -*- coding: utf-8 -*-
from .stoch import stoch

__all__ = ["stoch"]
