"""Dilogarithm in the form of Spence's integral."""

from __future__ import annotations

import math

from specfun.core import PI, CephesError, ErrorKind, horner

_A = [
    4.65128586073990045278e-5,
    7.31589045238094711071e-3,
    1.33847639578309018650e-1,
    8.79691311754530315341e-1,
    2.71149851196553469920e0,
    4.25697156008121755724e0,
    3.29771340985225106936e0,
    1.00000000000000000126e0,
]
_B = [
    6.90990488912553276999e-4,
    2.54043763932544379113e-2,
    2.82974860602568089943e-1,
    1.41172597751831069617e0,
    3.63800533345137075418e0,
    5.03278880143316990390e0,
    3.54771340985225096217e0,
    9.99999999999999998740e-1,
]

_PI2_6 = PI * PI / 6.0


def spence(x: float) -> float:
    """Minus the integral from 1 to x of log(t)/(t - 1), for x >= 0.

    Raises CephesError for negative x.
    """
    x = float(x)
    if x < 0.0:
        raise CephesError("spence", ErrorKind.DOMAIN, 0.0)
    if math.isnan(x) or math.isinf(x):
        return math.nan
    if x == 1.0:
        return 0.0
    if x == 0.0:
        return _PI2_6

    invert = False
    reflect = False

    if x > 2.0:
        x = 1.0 / x
        invert = True

    if x > 1.5:
        w = 1.0 / x - 1.0
        invert = True
    elif x < 0.5:
        w = -x
        reflect = True
    else:
        w = x - 1.0

    y = -w * horner(w, _A) / horner(w, _B)

    if reflect:
        y = _PI2_6 - math.log(x) * math.log(1.0 - x) - y

    if invert:
        z = math.log(x)
        y = -0.5 * z * z - y

    return y