"""Hurwitz zeta function and the Riemann zeta function minus one."""

from __future__ import annotations

import math

from scipy import special

from specfun.core import MACHEP, MAXNUM, PI, CephesError, ErrorKind, horner, horner1
from specfun.power import power

# (2k)! / B2k, where B2k are Bernoulli numbers.
_EULER_MACLAURIN = [
    12.0,
    -720.0,
    30240.0,
    -1209600.0,
    47900160.0,
    -1.8924375803183791606e9,
    7.47242496e10,
    -2.950130727918164224e12,
    1.1646782814350067249e14,
    -4.5979787224074726105e15,
    1.8152105401943546773e17,
    -7.1661652561756670113e18,
]

# zeta(n) - 1 for integer n from 0 to 30; the entry for 1 stands for infinity.
_AZETAC = [
    -1.50000000000000000000e0,
    1.70141183460469231730e38,
    6.44934066848226436472e-1,
    2.02056903159594285400e-1,
    8.23232337111381915160e-2,
    3.69277551433699263314e-2,
    1.73430619844491397145e-2,
    8.34927738192282683980e-3,
    4.07735619794433937869e-3,
    2.00839282608221441785e-3,
    9.94575127818085337146e-4,
    4.94188604119464558702e-4,
    2.46086553308048298638e-4,
    1.22713347578489146752e-4,
    6.12481350587048292585e-5,
    3.05882363070204935517e-5,
    1.52822594086518717326e-5,
    7.63719763789976227360e-6,
    3.81729326499983985646e-6,
    1.90821271655393892566e-6,
    9.53962033872796113152e-7,
    4.76932986787806463117e-7,
    2.38450502727732990004e-7,
    1.19219925965311073068e-7,
    5.96081890512594796124e-8,
    2.98035035146522801861e-8,
    1.49015548283650412347e-8,
    7.45071178983542949198e-9,
    3.72533402478845705482e-9,
    1.86265972351304900640e-9,
    9.31327432419668182872e-10,
]

# 2**x (1 - 1/x) (zeta(x) - 1) = P(1/x)/Q(1/x), 1 <= x <= 10
_P = [
    5.85746514569725319540e11,
    2.57534127756102572888e11,
    4.87781159567948256438e10,
    5.15399538023885770696e9,
    3.41646073514754094281e8,
    1.60837006880656492731e7,
    5.92785467342109522998e5,
    1.51129169964938823117e4,
    2.01822444485997955865e2,
]
_Q = [
    3.90497676373371157516e11,
    5.22858235368272161797e10,
    5.64451517271280543351e9,
    3.39006746015350418834e8,
    1.79410371500126453702e7,
    5.66666825131384797029e5,
    1.60382976810944131506e4,
    1.96436237223387314144e2,
]

# log(zeta(x) - 1 - 2**-x), 10 <= x <= 50
_A = [
    8.70728567484590192539e6,
    1.76506865670346462757e8,
    2.60889506707483264896e10,
    5.29806374009894791647e11,
    2.26888156119238241487e13,
    3.31884402932705083599e14,
    5.13778997975868230192e15,
    -1.98123688133907171455e15,
    -9.92763810039983572356e16,
    7.82905376180870586444e16,
    9.26786275768927717187e16,
]
_B = [
    -7.92625410563741062861e6,
    -1.60529969932920229676e8,
    -2.37669260975543221788e10,
    -4.80319584350455169857e11,
    -2.07820961754173320170e13,
    -2.96075404507272223680e14,
    -4.86299103694609136686e15,
    5.34589509675789930199e15,
    5.71464111092297631292e16,
    -1.79915597658676556828e16,
]

# (1-x) (zeta(x) - 1), 0 <= x <= 1
_R = [
    -3.28717474506562731748e-1,
    1.55162528742623950834e1,
    -2.48762831680821954401e2,
    1.01050368053237678329e3,
    1.26726061410235149405e4,
    -1.11578094770515181334e5,
]
_S = [
    1.95107674914060531512e1,
    3.17710311750646984099e2,
    3.03835500874445748734e3,
    2.03665876435770579345e4,
    7.43853965136767874343e4,
]

_MAXL2 = 127
_REFLECTION_LIMIT = -170.6243


def _ratio(num: float, den: float) -> float:
    if den == 0.0:
        return math.inf
    return abs(num / den)


def zeta(x: float, q: float) -> float:
    """Hurwitz zeta function, the sum over k >= 0 of (k + q)**-x.

    Raises CephesError for x < 1, for q a nonpositive integer, and for
    negative q with noninteger x. At x == 1 the largest float is returned.
    """
    x = float(x)
    q = float(q)
    if math.isnan(x) or math.isnan(q):
        return math.nan
    if x == 1.0:
        return MAXNUM
    if x < 1.0:
        raise CephesError("zeta", ErrorKind.DOMAIN, 0.0)
    if q <= 0.0:
        if math.isinf(q) or q == math.floor(q):
            raise CephesError("zeta", ErrorKind.SING, MAXNUM)
        if math.isinf(x) or x != math.floor(x):
            raise CephesError("zeta", ErrorKind.DOMAIN, 0.0)

    # Euler-Maclaurin summation; negative q is summed until n + q > 9.
    s = power(q, -x)
    a = q
    i = 0
    b = 0.0
    while i < 9 or a <= 9.0:
        i += 1
        a += 1.0
        b = power(a, -x)
        s += b
        if _ratio(b, s) < MACHEP:
            return s

    w = a
    s += b * w / (x - 1.0)
    s -= 0.5 * b
    a = 1.0
    k = 0.0
    for coefficient in _EULER_MACLAURIN:
        a *= x + k
        b /= w
        t = a * b / coefficient
        s += t
        if _ratio(t, s) < MACHEP:
            break
        k += 1.0
        a *= x + k
        b /= w
        k += 1.0
    return s


def zetac(x: float) -> float:
    """Riemann zeta function minus one.

    Raises CephesError when the reflection formula would overflow, for x
    below about -170.6. Zero is returned for x >= 127.
    """
    x = float(x)
    if math.isnan(x):
        return x

    if x < 0.0:
        if x < _REFLECTION_LIMIT:
            raise CephesError("zetac", ErrorKind.OVERFLOW, 0.0)
        s = 1.0 - x
        w = zetac(s)
        b = math.sin(0.5 * PI * x) * power(2.0 * PI, x) * float(special.gamma(s)) * (1.0 + w) / PI
        return b - 1.0

    if x >= _MAXL2:
        return 0.0

    if x == math.floor(x):
        i = int(x)
        if i < len(_AZETAC):
            return _AZETAC[i]

    if x < 1.0:
        w = 1.0 - x
        return horner(x, _R) / (w * horner1(x, _S))

    if x <= 10.0:
        b = power(2.0, x) * (x - 1.0)
        w = 1.0 / x
        return (x * horner(w, _P)) / (b * horner1(w, _Q))

    if x <= 50.0:
        b = power(2.0, -x)
        w = horner(x, _A) / horner1(x, _B)
        return math.exp(w) + b

    # Basic sum of inverse powers over odd integers.
    s = 0.0
    a = 1.0
    while True:
        a += 2.0
        b = power(a, -x)
        s += b
        if not b / s > MACHEP:
            break
    b = power(2.0, -x)
    return (s + b) / (1.0 - b)