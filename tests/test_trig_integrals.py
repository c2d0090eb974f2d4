import math

import pytest
from scipy import special

from specfun.core import MAXNUM
from specfun.trig_integrals import sici


@pytest.mark.parametrize("x", [1e-8, 0.1, 0.5, 1.0, 2.5, 4.0, 4.5, 6.0, 7.9, 8.0, 12.0, 50.0, 1000.0])
def test_matches_reference(x):
    si, ci = sici(x)
    ref_si, ref_ci = special.sici(x)
    assert si == pytest.approx(float(ref_si), rel=1e-13, abs=1e-15)
    assert ci == pytest.approx(float(ref_ci), rel=1e-12, abs=1e-14)


def test_zero():
    assert sici(0.0) == (0.0, -MAXNUM)


@pytest.mark.parametrize("x", [0.3, 3.0, 5.0, 20.0, 2e9])
def test_si_is_odd_and_ci_even(x):
    si_pos, ci_pos = sici(x)
    si_neg, ci_neg = sici(-x)
    assert si_neg == -si_pos
    assert ci_neg == ci_pos


def test_large_argument_approaches_limits():
    si, ci = sici(2e9)
    assert si == pytest.approx(math.pi / 2, abs=1e-9)
    assert abs(ci) < 1e-9


@pytest.mark.parametrize("value", [math.nan, math.inf])
def test_nan_and_inf(value):
    result = sici(value)
    assert len(result) == 2
    assert [math.isnan(v) for v in result] == [True, True]