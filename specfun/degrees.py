"""Circular functions of arguments given in degrees."""

from __future__ import annotations

import math

from specfun.core import MAXNUM, CephesError, ErrorKind, horner, horner1

_SINCOF = [
    1.58962301572218447952e-10,
    -2.50507477628503540135e-8,
    2.75573136213856773549e-6,
    -1.98412698295895384658e-4,
    8.33333333332211858862e-3,
    -1.66666666666666307295e-1,
]
_COSCOF = [
    1.13678171382044553091e-11,
    -2.08758833757683644217e-9,
    2.75573155429816611547e-7,
    -2.48015872936186303776e-5,
    1.38888888888806666760e-3,
    -4.16666666666666348141e-2,
    4.99999999999999999798e-1,
]
_TAN_P = [
    -1.30936939181383777646e4,
    1.15351664838587416140e6,
    -1.79565251976484877988e7,
]
_TAN_Q = [
    1.36812963470692954678e4,
    -1.32089234440210967447e6,
    2.50083801823357915839e7,
    -5.38695755929454629881e7,
]

PI180 = 1.74532925199432957692e-2
_LOSSTH = 1.0e14


def _octant(x: float, bits: int) -> tuple[float, int]:
    """Multiple of 45 degrees below x and its phase, zeros mapped to the origin."""
    y = float(math.floor(x / 45.0))
    z = y - math.ldexp(math.floor(math.ldexp(y, -bits)), bits)
    j = int(z)
    if j & 1:
        j += 1
        y += 1.0
    return y, j


def _sin_poly(z: float, zz: float) -> float:
    return z + z * (zz * horner(zz, _SINCOF))


def _cos_poly(zz: float) -> float:
    return 1.0 - zz * horner(zz, _COSCOF)


def sindg(x: float) -> float:
    """Sine of an angle in degrees.

    Raises CephesError, as total loss of precision, for |x| beyond 1e14.
    """
    x = float(x)
    if math.isnan(x):
        return x
    sign = 1
    if x < 0:
        x = -x
        sign = -1
    if x > _LOSSTH:
        raise CephesError("sindg", ErrorKind.TLOSS, 0.0)

    y, j = _octant(x, 4)
    j &= 7
    if j > 3:
        sign = -sign
        j -= 4

    z = (x - y * 45.0) * PI180
    zz = z * z
    result = _cos_poly(zz) if j in (1, 2) else _sin_poly(z, zz)
    return -result if sign < 0 else result


def cosdg(x: float) -> float:
    """Cosine of an angle in degrees.

    Raises CephesError, as total loss of precision, for |x| beyond 1e14.
    """
    x = float(x)
    if math.isnan(x):
        return x
    sign = 1
    x = abs(x)
    if x > _LOSSTH:
        raise CephesError("cosdg", ErrorKind.TLOSS, 0.0)

    y, j = _octant(x, 4)
    j &= 7
    if j > 3:
        j -= 4
        sign = -sign
    if j > 1:
        sign = -sign

    z = (x - y * 45.0) * PI180
    zz = z * z
    result = _sin_poly(z, zz) if j in (1, 2) else _cos_poly(zz)
    return -result if sign < 0 else result


def _tancot(xx: float, cotangent: bool) -> float:
    name = "cotdg" if cotangent else "tandg"
    if xx < 0:
        x = -xx
        sign = -1
    else:
        x = xx
        sign = 1
    if x > _LOSSTH:
        raise CephesError(name, ErrorKind.TLOSS, 0.0)

    y, j = _octant(x, 3)
    z = (x - y * 45.0) * PI180
    zz = z * z
    if zz > 1.0e-14:
        y = z + z * (zz * horner(zz, _TAN_P) / horner1(zz, _TAN_Q))
    else:
        y = z

    singular = False
    if j & 2:
        if cotangent:
            y = -y
        elif y != 0.0:
            y = -1.0 / y
        else:
            singular = True
    elif cotangent:
        if y != 0.0:
            y = 1.0 / y
        else:
            singular = True

    if singular:
        raise CephesError(name, ErrorKind.SING, -MAXNUM if sign < 0 else MAXNUM)
    return -y if sign < 0 else y


def tandg(x: float) -> float:
    """Tangent of an angle in degrees.

    Raises CephesError at odd multiples of 90 degrees and for |x| beyond 1e14.
    """
    x = float(x)
    if math.isnan(x):
        return x
    return _tancot(x, False)


def cotdg(x: float) -> float:
    """Cotangent of an angle in degrees.

    Raises CephesError at multiples of 180 degrees and for |x| beyond 1e14.
    """
    x = float(x)
    if math.isnan(x):
        return x
    return _tancot(x, True)