import math

import pytest
from scipy import special

from specfun.core import MAXNUM, CephesError, ErrorKind
from specfun.zeta import zeta, zetac


@pytest.mark.parametrize("x", [0.3, 0.75, 1.5, 3.7, 9.9, 12.5, 33.3, 49.5, 60.5, 100.25])
def test_zetac_matches_reference(x):
    assert zetac(x) == pytest.approx(float(special.zetac(x)), rel=1e-10)


@pytest.mark.parametrize("x", [-2.5, -7.3, -0.4])
def test_zetac_reflection_matches_reference(x):
    assert zetac(x) + 1.0 == pytest.approx(float(special.zeta(x)), rel=1e-9, abs=1e-12)


def test_zetac_tabulated_integer_values():
    assert zetac(0.0) == -1.5
    assert zetac(2.0) == 6.44934066848226436472e-1
    assert zetac(5.0) == 3.69277551433699263314e-2


def test_zetac_large_argument_is_zero():
    assert zetac(127.0) == 0.0
    assert zetac(500.0) == 0.0


def test_zetac_overflow_raises():
    with pytest.raises(CephesError) as info:
        zetac(-200.0)
    assert info.value.kind is ErrorKind.OVERFLOW
    assert info.value.result == 0.0


@pytest.mark.parametrize("x, q", [(2.0, 1.0), (3.5, 2.5), (1.5, 0.25), (6.0, 10.0), (20.0, 0.5)])
def test_zeta_matches_reference(x, q):
    assert zeta(x, q) == pytest.approx(float(special.zeta(x, q)), rel=1e-10)


@pytest.mark.parametrize("x", [1.5, 2.25, 4.0, 7.5])
def test_zeta_at_one_agrees_with_zetac(x):
    assert zeta(x, 1.0) == pytest.approx(zetac(x) + 1.0, rel=1e-12)


def test_zeta_shift_relation_for_negative_q():
    assert zeta(4.0, -0.5) == pytest.approx(16.0 + zeta(4.0, 0.5), rel=1e-10)


def test_zeta_at_one_returns_largest_float():
    assert zeta(1.0, 2.0) == MAXNUM


def test_zeta_domain_error_below_one():
    with pytest.raises(CephesError) as info:
        zeta(0.5, 1.0)
    assert info.value.kind is ErrorKind.DOMAIN


def test_zeta_singular_for_nonpositive_integer_q():
    with pytest.raises(CephesError) as info:
        zeta(2.0, -1.0)
    assert info.value.kind is ErrorKind.SING
    assert info.value.result == MAXNUM


def test_zeta_domain_error_negative_q_noninteger_x():
    with pytest.raises(CephesError) as info:
        zeta(2.5, -0.5)
    assert info.value.kind is ErrorKind.DOMAIN


def test_zeta_nan_propagates():
    assert math.isnan(zeta(math.nan, 1.0))