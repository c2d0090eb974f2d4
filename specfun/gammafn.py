"""Digamma and reciprocal gamma functions."""

from __future__ import annotations

import math

from specfun.core import MAXLOG, MAXNUM, PI, CephesError, ErrorKind, chebyshev, horner

EUL = 0.57721566490153286061

_PSI_A = [
    8.33333333333333333333e-2,
    -2.10927960927960927961e-2,
    7.57575757575757575758e-3,
    -4.16666666666666666667e-3,
    3.96825396825396825397e-3,
    -8.33333333333333333333e-3,
    8.33333333333333333333e-2,
]

# Chebyshev coefficients of 1/(x gamma(x)) - 1 on [0, 1].
_RGAMMA_R = [
    3.13173458231230000000e-17,
    -6.70718606477908000000e-16,
    2.20039078172259550000e-15,
    2.47691630348254132600e-13,
    -6.60074100411295197440e-12,
    5.13850186324226978840e-11,
    1.08965386454418662084e-9,
    -3.33964630686836942556e-8,
    2.68975996440595483619e-7,
    2.96001177518801696639e-6,
    -8.04814124978471142852e-5,
    4.16609138709688864714e-4,
    5.06579864028608725080e-3,
    -6.41925436109158228810e-2,
    -4.98558728684003594785e-3,
    1.27546015610523951063e-1,
]


def psi(x: float) -> float:
    """Digamma function, the logarithmic derivative of gamma.

    Raises CephesError at the poles, zero and the negative integers.
    """
    x = float(x)
    negative = False
    nz = 0.0

    if x <= 0.0:
        negative = True
        if math.isinf(x) or math.floor(x) == x:
            raise CephesError("psi", ErrorKind.SING, MAXNUM)
        p = float(math.floor(x))
        # Remove the zeros of tan(pi x) by subtracting the nearest integer.
        nz = x - p
        if nz != 0.5:
            if nz > 0.5:
                p += 1.0
                nz = x - p
            nz = PI / math.tan(PI * nz)
        else:
            nz = 0.0
        x = 1.0 - x

    if x <= 10.0 and x == math.floor(x):
        y = sum(1.0 / k for k in range(1, int(x))) - EUL
    else:
        s = x
        w = 0.0
        while s < 10.0:
            w += 1.0 / s
            s += 1.0
        if s < 1.0e17:
            z = 1.0 / (s * s)
            y = z * horner(z, _PSI_A)
        else:
            y = 0.0
        y = math.log(s) - 0.5 / s - y - w

    if negative:
        y -= nz
    return y


def _lgamma(w: float) -> float:
    try:
        return math.lgamma(w)
    except OverflowError:
        return math.inf


def rgamma(x: float) -> float:
    """Reciprocal of the gamma function.

    Raises CephesError on underflow or overflow, carrying the limiting value.
    """
    x = float(x)
    if math.isnan(x) or x == -math.inf:
        return math.nan
    if x > 34.84425627277176174:
        raise CephesError("rgamma", ErrorKind.UNDERFLOW, 1.0 / MAXNUM)

    if x < -34.034:
        w = -x
        z = math.sin(PI * w)
        if z == 0.0:
            return 0.0
        if z < 0.0:
            sign = 1.0
            z = -z
        else:
            sign = -1.0
        y = math.log(w * z) - math.log(PI) + _lgamma(w)
        if y < -MAXLOG:
            raise CephesError("rgamma", ErrorKind.UNDERFLOW, sign / MAXNUM)
        if y > MAXLOG:
            raise CephesError("rgamma", ErrorKind.OVERFLOW, sign * MAXNUM)
        return sign * math.exp(y)

    z = 1.0
    w = x
    while w > 1.0:
        w -= 1.0
        z *= w
    while w < 0.0:
        z /= w
        w += 1.0
    if w == 0.0:
        return 0.0
    if w == 1.0:
        return 1.0 / z
    return w * (1.0 + chebyshev(4.0 * w - 2.0, _RGAMMA_R)) / z