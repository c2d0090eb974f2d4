"""Circular sine, cosine, tangent and cotangent of radian arguments."""

from __future__ import annotations

import math

from specfun.core import INFINITY, NAN, PIO4, CephesError, ErrorKind, horner, horner1

_SINCOF = [
    1.58962301576546568060e-10,
    -2.50507477628578072866e-8,
    2.75573136213857245213e-6,
    -1.98412698295895385996e-4,
    8.33333333332211858878e-3,
    -1.66666666666666307295e-1,
]
_COSCOF = [
    -1.13585365213876817300e-11,
    2.08757008419747316778e-9,
    -2.75573141792967388112e-7,
    2.48015872888517045348e-5,
    -1.38888888888730564116e-3,
    4.16666666666665929218e-2,
]
_SIN_DP1 = 7.85398125648498535156e-1
_SIN_DP2 = 3.77489470793079817668e-8
_SIN_DP3 = 2.69515142907905952645e-15

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
_TAN_DP1 = 7.853981554508209228515625e-1
_TAN_DP2 = 7.94662735614792836714e-9
_TAN_DP3 = 3.06161699786838294307e-17

_LOSSTH = 1.073741824e9

# One arc second in radians.
_ARCSEC = 4.8481368110953599358991410e-5


def _reduce(x: float, bits: int) -> tuple[float, int]:
    """Multiple of pi/4 below x and its phase, zeros mapped to the origin."""
    y = float(math.floor(x / PIO4))
    z = y - math.ldexp(math.floor(math.ldexp(y, -bits)), bits)
    j = int(z)
    if j & 1:
        j += 1
        y += 1.0
    return y, j


def _check_finite(x: float, name: str) -> None:
    if math.isinf(x):
        raise CephesError(name, ErrorKind.DOMAIN, NAN)


def _sin_poly(z: float, zz: float) -> float:
    return z + z * z * z * horner(zz, _SINCOF)


def _cos_poly(zz: float) -> float:
    return 1.0 - math.ldexp(zz, -1) + zz * zz * horner(zz, _COSCOF)


def sin(x: float) -> float:
    """Circular sine.

    Raises CephesError for infinite x and, as total loss of precision,
    for |x| beyond 2**30.
    """
    x = float(x)
    if x == 0.0 or math.isnan(x):
        return x
    _check_finite(x, "sin")
    sign = 1
    if x < 0:
        x = -x
        sign = -1
    if x > _LOSSTH:
        raise CephesError("sin", ErrorKind.TLOSS, 0.0)

    y, j = _reduce(x, 4)
    j &= 7
    if j > 3:
        sign = -sign
        j -= 4

    z = ((x - y * _SIN_DP1) - y * _SIN_DP2) - y * _SIN_DP3
    zz = z * z
    result = _cos_poly(zz) if j in (1, 2) else _sin_poly(z, zz)
    return -result if sign < 0 else result


def cos(x: float) -> float:
    """Circular cosine.

    Raises CephesError for infinite x and, as total loss of precision,
    for |x| beyond 2**30.
    """
    x = float(x)
    if math.isnan(x):
        return x
    _check_finite(x, "cos")
    sign = 1
    x = abs(x)
    if x > _LOSSTH:
        raise CephesError("cos", ErrorKind.TLOSS, 0.0)

    y, j = _reduce(x, 4)
    j &= 7
    if j > 3:
        j -= 4
        sign = -sign
    if j > 1:
        sign = -sign

    z = ((x - y * _SIN_DP1) - y * _SIN_DP2) - y * _SIN_DP3
    zz = z * z
    result = _sin_poly(z, zz) if j in (1, 2) else _cos_poly(zz)
    return -result if sign < 0 else result


def radian(d: float, m: float, s: float) -> float:
    """Convert degrees, minutes and seconds of arc to radians."""
    return ((d * 60.0 + m) * 60.0 + s) * _ARCSEC


def _reciprocal(y: float) -> float:
    if y == 0.0:
        return math.copysign(INFINITY, y)
    return 1.0 / y


def _tancot(xx: float, cotangent: bool) -> float:
    name = "cot" if cotangent else "tan"
    if xx < 0:
        x = -xx
        sign = -1
    else:
        x = xx
        sign = 1
    if x > _LOSSTH:
        raise CephesError(name, ErrorKind.TLOSS, 0.0)

    y, j = _reduce(x, 3)
    z = ((x - y * _TAN_DP1) - y * _TAN_DP2) - y * _TAN_DP3
    zz = z * z
    if zz > 1.0e-14:
        y = z + z * (zz * horner(zz, _TAN_P) / horner1(zz, _TAN_Q))
    else:
        y = z

    if j & 2:
        y = -y if cotangent else -_reciprocal(y)
    elif cotangent:
        y = _reciprocal(y)

    return -y if sign < 0 else y


def tan(x: float) -> float:
    """Circular tangent.

    Raises CephesError for infinite x and, as total loss of precision,
    for |x| beyond 2**30.
    """
    x = float(x)
    if x == 0.0 or math.isnan(x):
        return x
    _check_finite(x, "tan")
    return _tancot(x, False)


def cot(x: float) -> float:
    """Circular cotangent.

    Raises CephesError at zero, the singularity, and for |x| beyond 2**30.
    """
    x = float(x)
    if x == 0.0:
        raise CephesError("cot", ErrorKind.SING, INFINITY)
    if math.isnan(x):
        return x
    return _tancot(x, True)