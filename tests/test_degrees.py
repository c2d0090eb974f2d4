import math

import pytest

from specfun.core import MAXNUM, CephesError, ErrorKind
from specfun.degrees import cosdg, cotdg, sindg, tandg

ANGLES = [0.0, 1.0, 17.5, 30.0, 44.9, 45.0, 60.0, 89.0, 123.4, 200.0, 271.0, 359.0, 1000.25]


@pytest.mark.parametrize("angle", ANGLES)
def test_sindg_matches_radian_sine(angle):
    assert sindg(angle) == pytest.approx(math.sin(math.radians(angle)), abs=1e-14)


@pytest.mark.parametrize("angle", ANGLES)
def test_cosdg_matches_radian_cosine(angle):
    assert cosdg(angle) == pytest.approx(math.cos(math.radians(angle)), abs=1e-14)


@pytest.mark.parametrize("angle", ANGLES)
def test_pythagorean_identity(angle):
    assert sindg(angle) ** 2 + cosdg(angle) ** 2 == pytest.approx(1.0, abs=1e-14)


@pytest.mark.parametrize("angle", ANGLES[1:])
def test_sine_odd_cosine_even(angle):
    assert sindg(-angle) == -sindg(angle)
    assert cosdg(-angle) == cosdg(angle)


def test_right_angle_sine_is_exact():
    assert sindg(90.0) == 1.0
    assert cosdg(0.0) == 1.0


@pytest.mark.parametrize("angle", [10.0, 30.0, 45.0, 60.0, 100.0, 179.0, -33.0])
def test_tandg_matches_radian_tangent(angle):
    assert tandg(angle) == pytest.approx(math.tan(math.radians(angle)), rel=1e-13)


@pytest.mark.parametrize("angle", [10.0, 30.0, 45.0, 60.0, 100.0, 179.0, -33.0])
def test_cotdg_is_reciprocal_of_tandg(angle):
    assert cotdg(angle) * tandg(angle) == pytest.approx(1.0, rel=1e-13)


def test_tandg_singularity():
    with pytest.raises(CephesError) as info:
        tandg(90.0)
    assert info.value.kind is ErrorKind.SING
    assert info.value.result == MAXNUM


def test_tandg_negative_singularity_carries_sign():
    with pytest.raises(CephesError) as info:
        tandg(-270.0)
    assert info.value.result == -MAXNUM


def test_cotdg_singularity():
    with pytest.raises(CephesError) as info:
        cotdg(180.0)
    assert info.value.kind is ErrorKind.SING


@pytest.mark.parametrize("func", [sindg, cosdg, tandg, cotdg])
def test_total_loss_of_precision(func):
    with pytest.raises(CephesError) as info:
        func(1.0e15)
    assert info.value.kind is ErrorKind.TLOSS
    assert info.value.result == 0.0


def test_nan_passes_through():
    assert math.isnan(sindg(math.nan))
    assert math.isnan(tandg(math.nan))