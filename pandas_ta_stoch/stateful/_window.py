# -*- coding: utf-8 -*-
"""pandas-ta-stoch stateful -- rolling-window primitives.

Each primitive exposes the same narrow contract used by the stochastic
stages::

    update(timestamp, value) -> aggregate
    value, samples, is_ready, reset()

RollingMax / RollingMin keep a monotonic deque of (index, value) pairs so
every update is O(1) amortised.  RollingSum keeps a running sum over a
``deque(maxlen=length)``.
"""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Tuple

from ._base import ZERO, _as_decimal, _check_period


@dataclass
class _RollingWindow:
    length: int
    samples: int = 0
    value: Decimal = ZERO

    def __post_init__(self) -> None:
        self.length = _check_period("length", self.length)

    @property
    def is_ready(self) -> bool:
        return self.samples >= self.length

    def update(self, timestamp: Any, value: Any) -> Decimal:
        raise NotImplementedError

    def reset(self) -> None:
        self.samples = 0
        self.value = ZERO


@dataclass
class _RollingExtreme(_RollingWindow):
    # (sample index, value); head holds the current extreme
    _mono: deque = field(default_factory=deque)

    @staticmethod
    def _dominates(new: Decimal, old: Decimal) -> bool:
        raise NotImplementedError

    def update(self, timestamp: Any, value: Any) -> Decimal:
        x = _as_decimal(value)
        i = self.samples
        mono = self._mono

        # expire the head once it falls out of the window
        if mono and mono[0][0] <= i - self.length:
            mono.popleft()
        while mono and self._dominates(x, mono[-1][1]):
            mono.pop()
        mono.append((i, x))

        self.samples += 1
        self.value = mono[0][1]
        return self.value

    def reset(self) -> None:
        super().reset()
        self._mono.clear()


@dataclass
class RollingMax(_RollingExtreme):
    """Maximum of the last *length* values."""

    @staticmethod
    def _dominates(new: Decimal, old: Decimal) -> bool:
        return new >= old


@dataclass
class RollingMin(_RollingExtreme):
    """Minimum of the last *length* values."""

    @staticmethod
    def _dominates(new: Decimal, old: Decimal) -> bool:
        return new <= old


@dataclass
class RollingSum(_RollingWindow):
    """Sum of the last *length* values."""
    _buf: deque = field(default_factory=deque)

    def __post_init__(self) -> None:
        super().__post_init__()
        self._buf = deque(maxlen=self.length)

    def update(self, timestamp: Any, value: Any) -> Decimal:
        x = _as_decimal(value)
        if len(self._buf) == self.length:
            self.value -= self._buf[0]     # deque[0] is the oldest
        self._buf.append(x)
        self.value += x
        self.samples += 1
        return self.value

    def reset(self) -> None:
        super().reset()
        self._buf.clear()

    @property
    def window(self) -> Tuple[Decimal, ...]:
        """Values currently inside the window, oldest first."""
        return tuple(self._buf)
