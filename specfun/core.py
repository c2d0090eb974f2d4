"""Shared machine constants, error reporting and series evaluation helpers."""

from __future__ import annotations

import enum
import math
import sys
from collections.abc import Sequence

PI = math.pi
PIO2 = math.pi / 2.0
PIO4 = math.pi / 4.0
SQRT2 = math.sqrt(2.0)
SQRTH = math.sqrt(0.5)
LOGE2 = math.log(2.0)

MACHEP = 2.0**-53
MAXNUM = sys.float_info.max
MAXLOG = 7.09782712893383996843e2
MINLOG = -7.451332191019412076235e2

INFINITY = math.inf
NAN = math.nan
NEGZERO = -0.0


class ErrorKind(enum.IntEnum):
    """Categories of numerical error, with their conventional codes."""

    DOMAIN = 1
    SING = 2
    OVERFLOW = 3
    UNDERFLOW = 4
    TLOSS = 5
    PLOSS = 6

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    ErrorKind.DOMAIN: "argument domain error",
    ErrorKind.SING: "function singularity",
    ErrorKind.OVERFLOW: "overflow range error",
    ErrorKind.UNDERFLOW: "underflow range error",
    ErrorKind.TLOSS: "total loss of precision",
    ErrorKind.PLOSS: "partial loss of precision",
}


class CephesError(ArithmeticError):
    """Raised when a function meets a numerical error condition.

    ``result`` holds the conventional value for the failed evaluation,
    for callers that prefer to carry on with it.
    """

    def __init__(self, function: str, kind: ErrorKind, result: float = math.nan):
        super().__init__(f"{function}: {kind.description}")
        self.function = function
        self.kind = kind
        self.result = result


def _require(coefficients: Sequence[float]) -> None:
    if not coefficients:
        raise ValueError("at least one coefficient is required")


def horner(x: float, coefficients: Sequence[float]) -> float:
    """Evaluate a polynomial whose coefficients are given highest degree first."""
    _require(coefficients)
    first, *rest = coefficients
    result = float(first)
    for c in rest:
        result = result * x + c
    return result


def horner1(x: float, coefficients: Sequence[float]) -> float:
    """Evaluate a monic polynomial; the leading coefficient 1 is implied."""
    _require(coefficients)
    first, *rest = coefficients
    result = x + first
    for c in rest:
        result = result * x + c
    return result


def chebyshev(x: float, coefficients: Sequence[float]) -> float:
    """Sum a Chebyshev series, coefficients in reverse order, argument 2*t.

    The last coefficient is halved, as in the usual convention.
    """
    _require(coefficients)
    first, *rest = coefficients
    b0 = float(first)
    b1 = 0.0
    b2 = 0.0
    for c in rest:
        b2 = b1
        b1 = b0
        b0 = x * b1 - b2 + c
    return 0.5 * (b0 - b2)