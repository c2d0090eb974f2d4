import math

import pytest

from specfun.core import CephesError, ErrorKind
from specfun.power import power


@pytest.mark.parametrize(
    "x, y",
    [
        (2.0, 0.5),
        (3.7, 2.3),
        (0.25, -1.75),
        (10.0, 0.1),
        (1.5, 20.5),
        (0.9, 100.25),
        (7.0, -3.3),
        (1e-5, 2.5),
        (123.456, 7.89),
        (2.5, 3.0),
    ],
)
def test_matches_builtin_power(x, y):
    assert power(x, y) == pytest.approx(x**y, rel=1e-13)


def test_near_one_series():
    assert power(1.0001, 0.5) == pytest.approx(1.0001**0.5, rel=1e-15)
    assert power(1.000001, 50.0) == pytest.approx(1.000001**50.0, rel=1e-14)


def test_integer_powers():
    assert power(-2.0, 3.0) == (-2.0) ** 3
    assert power(3.0, -2.0) == pytest.approx(3.0**-2)


def test_negative_base_with_odd_integer_exponent():
    assert power(-2.5, 3.0) == pytest.approx((-2.5) ** 3, rel=1e-13)
    assert power(-2.5, 4.0) == pytest.approx((-2.5) ** 4, rel=1e-13)


def test_trivial_exponents():
    assert power(5.5, 0.0) == 1.0
    assert power(5.5, 1.0) == 5.5
    assert power(1.0, 123.4) == 1.0


def test_nan_propagates():
    assert math.isnan(power(math.nan, 2.0))
    assert math.isnan(power(2.0, math.nan))


def test_noninteger_power_of_negative_raises():
    with pytest.raises(CephesError) as info:
        power(-8.0, 1.0 / 3.0)
    assert info.value.kind is ErrorKind.DOMAIN
    assert math.isnan(info.value.result)


def test_infinite_exponent_of_unit_raises():
    with pytest.raises(CephesError) as info:
        power(-1.0, math.inf)
    assert info.value.kind is ErrorKind.DOMAIN


def test_infinite_exponents():
    assert power(2.0, math.inf) == math.inf
    assert power(0.5, math.inf) == 0.0
    assert power(2.0, -math.inf) == 0.0
    assert power(0.5, -math.inf) == math.inf


def test_infinite_bases():
    assert power(math.inf, 2.0) == math.inf
    assert power(math.inf, -2.0) == 0.0
    assert power(-math.inf, 3.0) == -math.inf
    neg = power(-math.inf, -3.0)
    assert neg == 0.0 and math.copysign(1.0, neg) < 0


def test_signed_zero():
    assert power(-0.0, -3.0) == -math.inf
    assert power(0.0, -3.0) == math.inf
    r = power(-0.0, 3.0)
    assert r == 0.0 and math.copysign(1.0, r) < 0


def test_overflow_and_underflow():
    assert power(1.5, 40000.0) == math.inf
    assert power(-1.5, 40001.0) == -math.inf
    assert power(0.5, 1e6) == 0.0


def test_integer_overflow_reported():
    with pytest.raises(CephesError) as info:
        power(10.0, 400.0)
    assert info.value.kind is ErrorKind.OVERFLOW
    assert info.value.result == math.inf


def test_inverse_relation():
    for x in (0.3, 2.0, 17.5):
        for y in (0.7, 3.25, 11.1):
            assert power(power(x, y), 1.0 / y) == pytest.approx(x, rel=1e-12)