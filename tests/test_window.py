# -*- coding: utf-8 -*-
import random
from decimal import Decimal

import pytest

from pandas_ta_stoch.stateful import RollingMax, RollingMin, RollingSum


@pytest.mark.parametrize("length", [1, 2, 5, 17])
def test_extremes_match_brute_force(length):
    rnd = random.Random(length)
    values = [rnd.randint(-50, 50) for _ in range(200)]
    mx, mn, sm = RollingMax(length), RollingMin(length), RollingSum(length)
    for i, v in enumerate(values):
        window = values[max(0, i - length + 1): i + 1]
        assert mx.update(i, v) == max(window)
        assert mn.update(i, v) == min(window)
        assert sm.update(i, v) == sum(window)


def test_samples_unbounded_and_ready_at_length():
    mx = RollingMax(3)
    assert not mx.is_ready
    assert mx.value == 0
    for i in range(10):
        mx.update(i, i)
        assert mx.is_ready == (i + 1 >= 3)
    assert mx.samples == 10
    assert mx.value == 9


def test_decreasing_run_expires_old_max():
    mx = RollingMax(3)
    for i, v in enumerate([9, 8, 7, 6, 5]):
        mx.update(i, v)
    assert mx.value == 7


def test_sum_holds_decimal_exactly():
    sm = RollingSum(2)
    for i, v in enumerate([0.1, 0.2, 0.3]):
        sm.update(i, v)
    assert sm.value == Decimal("0.5")
    assert sm.window == (Decimal("0.2"), Decimal("0.3"))


@pytest.mark.parametrize("cls", [RollingMax, RollingMin, RollingSum])
def test_reset_restores_identity(cls):
    w = cls(2)
    for i in range(5):
        w.update(i, i + 1)
    w.reset()
    assert w.samples == 0
    assert w.value == 0
    assert not w.is_ready
    assert w.update(0, 4) == 4


@pytest.mark.parametrize("length", [0, -3, 2.5, None, True])
def test_invalid_length_rejected(length):
    with pytest.raises(ValueError):
        RollingSum(length)
