"""Elementary functions: rounding, roots, integer powers, hyperbolics."""

from __future__ import annotations

import math

from specfun.core import (
    LOGE2,
    MAXLOG,
    MINLOG,
    PIO4,
    SQRT2,
    SQRTH,
    CephesError,
    ErrorKind,
    horner,
    horner1,
)

_LP = [
    4.5270000862445199635215e-5,
    4.9854102823193375972212e-1,
    6.5787325942061044846969e0,
    2.9911919328553073277375e1,
    6.0949667980987787057556e1,
    5.7112963590585538103336e1,
    2.0039553499201281259648e1,
]
_LQ = [
    1.5062909083469192043167e1,
    8.3047565967967209469434e1,
    2.2176239823732856465394e2,
    3.0909872225312059774938e2,
    2.1642788614495947685003e2,
    6.0118660497603843919306e1,
]

_EP = [
    1.2617719307481059087798e-4,
    3.0299440770744196129956e-2,
    9.9999999999999999991025e-1,
]
_EQ = [
    3.0019850513866445504159e-6,
    2.5244834034968410419224e-3,
    2.2726554820815502876593e-1,
    2.0000000000000000000897e0,
]

_COSM1_COEF = [
    4.7377507964246204691685e-14,
    -1.1470284843425359765671e-11,
    2.0876754287081521758361e-9,
    -2.7557319214999787979814e-7,
    2.4801587301570552304991e-5,
    -1.3888888888888872993737e-3,
    4.1666666666666666609054e-2,
]

_SINH_P = [
    -7.89474443963537015605e-1,
    -1.63725857525983828727e2,
    -1.15614435765005216044e4,
    -3.51754964808151394800e5,
]
_SINH_Q = [
    -2.77711081420602794433e2,
    3.61578279834431989373e4,
    -2.11052978884890840399e6,
]

_TANH_P = [
    -9.64399179425052238628e-1,
    -9.92877231001918586564e1,
    -1.61468768441708447952e3,
]
_TANH_Q = [
    1.12811678491632931402e2,
    2.23548839060100448583e3,
    4.84406305325125486048e3,
]


def _exp(x: float) -> float:
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def _log(z: float, caller: str) -> float:
    if z == 0.0:
        return -math.inf
    if z < 0.0:
        raise CephesError(caller, ErrorKind.DOMAIN, math.nan)
    return math.log(z)


def round_even(x: float) -> float:
    """Round to the nearest integer valued float, ties to even."""
    if not math.isfinite(x):
        return x
    y = float(math.floor(x))
    r = x - y
    if r > 0.5 or (r == 0.5 and y - 2.0 * math.floor(0.5 * y) == 1.0):
        y += 1.0
    return y


def sqrt(x: float) -> float:
    """Square root by a linear start and three Newton iterations."""
    if x <= 0.0:
        if x < 0.0:
            raise CephesError("sqrt", ErrorKind.DOMAIN, 0.0)
        return 0.0
    w = x
    z, e = math.frexp(x)
    y = 4.173075996388649989089e-1 + 5.9016206709064458299663e-1 * z
    if e & 1:
        y *= SQRT2
    y = math.ldexp(y, e >> 1)
    for _ in range(3):
        y = 0.5 * (y + w / y)
    return y


def powi(x: float, n: int) -> float:
    """Raise x to the integer power n by repeated squaring."""
    if x == 0.0:
        if n == 0:
            return 1.0
        if n < 0:
            return math.inf
        return x if n & 1 else 0.0
    if n == 0:
        return 1.0
    if n == -1:
        return 1.0 / x

    negative = x < 0.0
    x = abs(x)
    sign = -1 if n < 0 else 1
    m = abs(n)
    if m & 1 == 0:
        negative = False

    s, lx = math.frexp(x)
    e = (lx - 1) * m
    if e == 0 or e > 64 or e < -64:
        s = (s - 7.0710678118654752e-1) / (s + 7.0710678118654752e-1)
        s = (2.9142135623730950 * s - 0.5 + lx) * n * LOGE2
    else:
        s = LOGE2 * e

    if s > MAXLOG:
        raise CephesError("powi", ErrorKind.OVERFLOW, -math.inf if negative else math.inf)

    if s < MINLOG:
        y = 0.0
    else:
        if s < -MAXLOG + 2.0 and sign < 0:
            x = 1.0 / x
            sign = -sign
        y = x if m & 1 else 1.0
        w = x
        m >>= 1
        while m:
            w = w * w
            if m & 1:
                y *= w
            m >>= 1
        if sign < 0:
            y = 1.0 / y if y != 0.0 else math.inf

    return -y if negative else y


def log1p(x: float) -> float:
    """log(1 + x), accurate for small x."""
    z = 1.0 + x
    if z < SQRTH or z > SQRT2:
        return _log(z, "log1p")
    z = x * x
    z = -0.5 * z + x * (z * horner(x, _LP) / horner1(x, _LQ))
    return x + z


def expm1(x: float) -> float:
    """exp(x) - 1, accurate for small x."""
    if math.isnan(x):
        return x
    if x == math.inf:
        return math.inf
    if x == -math.inf:
        return -1.0
    if x < -0.5 or x > 0.5:
        return _exp(x) - 1.0
    xx = x * x
    r = x * horner(xx, _EP)
    r = r / (horner(xx, _EQ) - r)
    return r + r


def cosm1(x: float) -> float:
    """cos(x) - 1, accurate for small x."""
    if x < -PIO4 or x > PIO4:
        if math.isinf(x):
            raise CephesError("cos", ErrorKind.DOMAIN, math.nan)
        return math.cos(x) - 1.0
    xx = x * x
    return -0.5 * xx + xx * xx * horner(xx, _COSM1_COEF)


def sinh(x: float) -> float:
    """Hyperbolic sine."""
    if x == 0.0:
        return x
    a = abs(x)
    if x > MAXLOG + LOGE2 or x > -(MINLOG - LOGE2):
        raise CephesError("sinh", ErrorKind.DOMAIN, math.inf if x > 0 else -math.inf)
    if a > 1.0:
        if a >= MAXLOG - LOGE2:
            a = _exp(0.5 * a)
            a = (0.5 * a) * a
        else:
            a = _exp(a)
            a = 0.5 * a - 0.5 / a
        return -a if x < 0 else a
    a *= a
    return x + x * a * (horner(a, _SINH_P) / horner1(a, _SINH_Q))


def tanh(x: float) -> float:
    """Hyperbolic tangent."""
    if x == 0.0:
        return x
    z = abs(x)
    if z > 0.5 * MAXLOG:
        return 1.0 if x > 0 else -1.0
    if z >= 0.625:
        s = _exp(2.0 * z)
        z = 1.0 - 2.0 / (s + 1.0)
        return -z if x < 0 else z
    s = x * x
    z = horner(s, _TANH_P) / horner1(s, _TANH_Q)
    return x + x * s * z