"""Bessel functions of the second kind, Struve function and related series."""

from __future__ import annotations

import math

from scipy import special

from specfun.core import MACHEP, MAXNUM, PI, CephesError, ErrorKind
from specfun.power import power

_STOP = 1.37e-17
_NO_CONVERGENCE = 1.0e38


def _y0(x: float) -> float:
    return float(special.y0(x))


def _y1(x: float) -> float:
    return float(special.y1(x))


def _jv(v: float, x: float) -> float:
    return float(special.jv(v, x))


def _gamma(x: float) -> float:
    return float(special.gamma(x))


def _relative(value: float, total: float) -> float:
    if total == 0.0:
        return math.inf
    return abs(value / total)


def yn(n: int, x: float) -> float:
    """Bessel function of the second kind of integer order n.

    Raises CephesError at x <= 0 for |n| >= 2.
    """
    n = int(n)
    x = float(x)
    sign = 1.0
    if n < 0:
        n = -n
        if n & 1:
            sign = -1.0

    if n == 0:
        return sign * _y0(x)
    if n == 1:
        return sign * _y1(x)

    if x <= 0.0:
        raise CephesError("yn", ErrorKind.SING, -MAXNUM)

    anm2 = _y0(x)
    anm1 = _y1(x)
    r = 2.0
    an = anm1
    for _ in range(1, n):
        an = r * anm1 / x - anm2
        anm2 = anm1
        anm1 = an
        r += 2.0
    return sign * an


def yv(v: float, x: float) -> float:
    """Bessel function of the second kind of real order v."""
    v = float(v)
    x = float(x)
    if math.floor(v) == v:
        return yn(int(v), x)
    t = PI * v
    return (math.cos(t) * _jv(v, x) - _jv(-v, x)) / math.sin(t)


def onef2(a: float, b: float, c: float, x: float) -> tuple[float, float]:
    """Hypergeometric 1F2(a; b, c; x) and an estimate of its error.

    The error estimate is 1e38 when the series does not converge.
    """
    an, bn, cn = float(a), float(b), float(c)
    a0 = 1.0
    total = 1.0
    n = 1.0
    largest = 0.0

    while True:
        if an == 0:
            break
        if bn == 0 or cn == 0 or a0 > 1.0e34 or n > 200:
            return total, _NO_CONVERGENCE
        a0 *= (an * x) / (bn * cn * n)
        total += a0
        an += 1.0
        bn += 1.0
        cn += 1.0
        n += 1.0
        z = abs(a0)
        largest = max(largest, z)
        t = abs(a0 / total) if total != 0 else z
        if t <= _STOP:
            break

    return total, _relative(MACHEP * largest, total)


def threef0(a: float, b: float, c: float, x: float) -> tuple[float, float]:
    """Asymptotic hypergeometric 3F0(a, b, c; ; x) and an estimate of its error.

    The sum stops at its smallest term; the error estimate is 1e38 when
    the terms grow without bound.
    """
    an, bn, cn = float(a), float(b), float(c)
    a0 = 1.0
    total = 1.0
    n = 1.0
    largest = 0.0
    conv = _NO_CONVERGENCE
    conv1 = conv

    while True:
        if an == 0.0 or bn == 0.0 or cn == 0.0:
            break
        if a0 > 1.0e34 or n > 200:
            return total, _NO_CONVERGENCE
        a0 *= (an * bn * cn * x) / n
        an += 1.0
        bn += 1.0
        cn += 1.0
        n += 1.0
        z = abs(a0)
        largest = max(largest, z)
        if z >= conv and z < largest and z > conv1:
            break
        conv1 = conv
        conv = z
        total += a0
        t = abs(a0 / total) if total != 0 else z
        if t <= _STOP:
            break

    err = max(_relative(MACHEP * largest, total), _relative(conv, total))
    return total, err


def struve(v: float, x: float) -> float:
    """Struve function H of order v and argument x.

    Negative x is rejected, by CephesError, unless v is an integer.
    """
    v = float(v)
    x = float(x)

    f = float(math.floor(v))
    if v < 0 and v - f == 0.5:
        y = _jv(-v, x)
        f = 1.0 - f
        g = 2.0 * math.floor(f / 2.0)
        return -y if g != f else y

    t = 0.25 * x * x
    f = abs(x)
    g = 1.5 * abs(v)
    if f > 30.0 and f > g:
        y, onef2_err = 0.0, _NO_CONVERGENCE
    else:
        y, onef2_err = onef2(1.0, 1.5, 1.5 + v, -t)

    if f < 18.0 or x < 0.0:
        ya, threef0_err = 0.0, _NO_CONVERGENCE
    else:
        ya, threef0_err = threef0(1.0, 0.5, 0.5 - v, -1.0 / t)

    root_pi = math.sqrt(PI)
    h = power(0.5 * x, v - 1.0)

    if onef2_err <= threef0_err:
        g = _gamma(v + 1.5)
        return y * h * t / (0.5 * root_pi * g)
    g = _gamma(v + 0.5)
    return ya * h / (root_pi * g) + yv(v, x)