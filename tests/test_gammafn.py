import math

import pytest

from specfun.core import MAXNUM, CephesError, ErrorKind
from specfun.gammafn import psi, rgamma


def test_psi_at_one_is_minus_euler():
    assert psi(1.0) == pytest.approx(-0.57721566490153286061, rel=1e-15)


@pytest.mark.parametrize("x", [0.3, 2.7, 9.5, 12.25, 25.0, 3.0, -3.7, -0.2])
def test_psi_recurrence(x):
    assert psi(x + 1.0) == pytest.approx(psi(x) + 1.0 / x, rel=1e-12, abs=1e-12)


@pytest.mark.parametrize("x", [0.3, 0.7, 1.25, -2.4, 4.6])
def test_psi_reflection(x):
    assert psi(1.0 - x) - psi(x) == pytest.approx(math.pi / math.tan(math.pi * x), abs=1e-11)


def test_psi_half_integer_negative():
    assert psi(-0.5) == psi(1.5)


@pytest.mark.parametrize("x", [0.0, -1.0, -2.0, -math.inf])
def test_psi_poles_raise(x):
    with pytest.raises(CephesError) as info:
        psi(x)
    assert info.value.kind is ErrorKind.SING
    assert info.value.result == MAXNUM


def test_psi_large_argument_approaches_log():
    assert psi(1e20) == pytest.approx(math.log(1e20), rel=1e-15)


@pytest.mark.parametrize("x", [0.5, 1.7, 5.0, 7.3, 20.5, 33.0, -0.5, -3.3, -12.75, -40.5])
def test_rgamma_matches_gamma(x):
    assert rgamma(x) == pytest.approx(1.0 / math.gamma(x), rel=1e-12)


@pytest.mark.parametrize("x", [0.0, -1.0, -3.0, -20.0])
def test_rgamma_zero_at_poles(x):
    assert rgamma(x) == 0.0


def test_rgamma_integer_is_reciprocal_factorial():
    assert rgamma(6.0) == pytest.approx(1.0 / math.factorial(5), rel=1e-15)


def test_rgamma_large_argument_underflows():
    with pytest.raises(CephesError) as info:
        rgamma(40.0)
    assert info.value.kind is ErrorKind.UNDERFLOW
    assert info.value.result == 1.0 / MAXNUM


def test_rgamma_nan():
    assert math.isnan(rgamma(math.nan))


def test_rgamma_recurrence():
    for x in (0.4, 2.2, -1.6):
        assert rgamma(x) == pytest.approx(x * rgamma(x + 1.0), rel=1e-12)