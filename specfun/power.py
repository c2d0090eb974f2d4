"""Real power function with extended precision logarithm and exponential."""

from __future__ import annotations

import math

from specfun.core import MAXNUM, CephesError, ErrorKind, horner, horner1

_P = [
    4.97778295871696322025e-1,
    3.73336776063286838734e0,
    7.69994162726912503298e0,
    4.66651806774358464979e0,
]
_Q = [
    9.33340916416696166113e0,
    2.79999886606328401649e1,
    3.35994905342304405431e1,
    1.39995542032307539578e1,
]

# 2**(-i/16)
_A = [
    1.00000000000000000000e0,
    9.57603280698573700036e-1,
    9.17004043204671215328e-1,
    8.78126080186649726755e-1,
    8.40896415253714502036e-1,
    8.05245165974627141736e-1,
    7.71105412703970372057e-1,
    7.38413072969749673113e-1,
    7.07106781186547572737e-1,
    6.77127773468446325644e-1,
    6.48419777325504820276e-1,
    6.20928906036742001007e-1,
    5.94603557501360513449e-1,
    5.69394317378345782288e-1,
    5.45253866332628844837e-1,
    5.22136891213706877402e-1,
    5.00000000000000000000e-1,
]
_B = [
    0.00000000000000000000e0,
    1.64155361212281360176e-17,
    4.09950501029074826006e-17,
    3.97491740484881042808e-17,
    -4.83364665672645672553e-17,
    1.26912513974441574796e-17,
    1.99100761573282305549e-17,
    -1.52339103990623557348e-17,
    0.00000000000000000000e0,
]
_R = [
    1.49664108433729301083e-5,
    1.54010762792771901396e-4,
    1.33335476964097721140e-3,
    9.61812908476554225149e-3,
    5.55041086645832347466e-2,
    2.40226506959099779976e-1,
    6.93147180559945308821e-1,
]

_LOG2EA = 0.44269504088896340736
_MEXP = 16383.0
_MNEXP = -17183.0


def _floor(v: float) -> float:
    return float(math.floor(v)) if math.isfinite(v) else v


def _ldexp(v: float, n: int) -> float:
    try:
        return math.ldexp(v, n)
    except OverflowError:
        return math.copysign(math.inf, v)


def _reduc(x: float) -> float:
    """A multiple of 1/16 within 1/16 of x."""
    t = _ldexp(x, 4)
    if not math.isfinite(t):
        return x
    return math.ldexp(float(math.floor(t)), -4)


def _power_positive(x: float, y: float) -> float:
    """x**y for positive finite x != 1, by base 2 logarithm and exponential."""
    m, e = math.frexp(x)

    i = 1
    if m <= _A[9]:
        i = 9
    if m <= _A[i + 4]:
        i += 4
    if m <= _A[i + 2]:
        i += 2
    if m >= _A[1]:
        i = -1
    i += 1

    v = m - _A[i]
    v -= _B[i // 2]
    v /= _A[i]

    # log(1+v) = v - v**2/2 + v**3 P(v)/Q(v)
    z = v * v
    w = v * (z * horner(v, _P) / horner1(v, _Q))
    w = w - 0.5 * z
    w = w + _LOG2EA * w
    z = w + _LOG2EA * v
    z = z + v

    w = e - i / 16.0

    ya = _reduc(y)
    yb = y - ya

    f = z * y + w * yb
    fa = _reduc(f)
    fb = f - fa

    g = fa + w * ya
    ga = _reduc(g)
    gb = g - ga

    h = fb + gb
    ha = _reduc(h)
    w = _ldexp(ga + ha, 4)

    if math.isnan(w):
        return math.inf if (x > 1.0) == (y > 0.0) else 0.0
    if w > _MEXP:
        return math.inf
    if w < _MNEXP - 1:
        return 0.0

    e = int(w)
    hb = h - ha
    if hb > 0.0:
        e += 1
        hb -= 0.0625

    z = hb * horner(hb, _R)

    i = int(e / 16) + (0 if e < 0 else 1)
    e = 16 * i - e
    w = _A[e]
    z = w + w * z
    return _ldexp(z, i)


def power(x: float, y: float) -> float:
    """x raised to the power y.

    Raises CephesError for a negative x with noninteger y and for an
    infinite y with x equal to plus or minus one.
    """
    x = float(x)
    y = float(y)

    if y == 0.0:
        return 1.0
    if math.isnan(x):
        return x
    if math.isnan(y):
        return y
    if y == 1.0:
        return x

    if math.isinf(y) and (x == 1.0 or x == -1.0):
        raise CephesError("pow", ErrorKind.DOMAIN, math.nan)

    if x == 1.0:
        return 1.0

    if y >= MAXNUM:
        if x > 1.0:
            return math.inf
        if 0.0 < x < 1.0:
            return 0.0
        if x < -1.0:
            return math.inf
        if -1.0 < x < 0.0:
            return 0.0
    if y <= -MAXNUM:
        if x > 1.0:
            return 0.0
        if 0.0 < x < 1.0:
            return math.inf
        if x < -1.0:
            return 0.0
        if -1.0 < x < 0.0:
            return math.inf
    if x >= MAXNUM:
        return math.inf if y > 0.0 else 0.0

    w = _floor(y)
    is_integer = w == y
    odd_integer = False
    if is_integer:
        odd_integer = _floor(0.5 * abs(y)) != 0.5 * abs(w)

    if x <= -MAXNUM:
        if y > 0.0:
            return -math.inf if odd_integer else math.inf
        if y < 0.0:
            return -0.0 if odd_integer else 0.0

    negative = False
    if x <= 0.0:
        if x == 0.0:
            negative_zero = math.copysign(1.0, x) < 0.0
            if y < 0.0:
                return -math.inf if negative_zero and odd_integer else math.inf
            if y > 0.0:
                return -0.0 if negative_zero and odd_integer else 0.0
            return 1.0
        if not is_integer:
            raise CephesError("pow", ErrorKind.DOMAIN, math.nan)
        negative = True

    if is_integer and _floor(x) == x and abs(y) < 32768.0:
        from specfun.elementary import powi

        return powi(x, int(y))

    if negative:
        x = abs(x)

    w = x - 1.0
    aw = abs(w)
    ay = abs(y)
    wy = w * y
    awy = abs(wy)
    if (aw <= 1.0e-3 and ay <= 1.0) or (awy <= 1.0e-3 and ay >= 1.0):
        z = (
            (
                (
                    ((w * (y - 5.0) / 720.0 + 1.0 / 120.0) * w * (y - 4.0) + 1.0 / 24.0)
                    * w
                    * (y - 3.0)
                    + 1.0 / 6.0
                )
                * w
                * (y - 2.0)
                + 0.5
            )
            * w
            * (y - 1.0)
        ) * wy + wy + 1.0
    else:
        z = _power_positive(x, y)

    if negative and odd_integer:
        z = -z
    return z