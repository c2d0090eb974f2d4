"""Newton-Cotes integration of tabulated data and Gaussian elimination."""

from __future__ import annotations

import math
from collections.abc import Sequence

from specfun.core import CephesError, ErrorKind

NCOTE = 8

# Eighth order Newton-Cotes weights, symmetric about the middle point.
_SIMCON = [
    3.488536155202821869e-2,
    2.076895943562610229e-1,
    -3.27336860670194003527e-2,
    3.7022927689594356261e-1,
    -1.6014109347442680776e-1,
]


def simpsn(f: Sequence[float], delta: float) -> float:
    """Integrate nine equally spaced samples f spaced delta apart."""
    if len(f) != NCOTE + 1:
        raise ValueError(f"exactly {NCOTE + 1} samples are required, got {len(f)}")
    half = NCOTE // 2
    ans = _SIMCON[half] * f[half]
    ans += sum(w * (lo + hi) for w, lo, hi in zip(_SIMCON[:half], f[:half], reversed(f[half + 1 :])))
    return ans * delta * NCOTE


class SingularMatrixError(CephesError):
    """Raised when elimination meets a singular matrix.

    ``code`` tells the stage: 1 a zero row, 2 no usable pivot,
    3 a zero last pivot.
    """

    def __init__(self, code: int, reason: str):
        super().__init__("simq", ErrorKind.SING, math.nan)
        self.code = code
        self.reason = reason
        self.args = (f"simq: {reason}",)


class GaussianSolver:
    """Gaussian elimination with scaled partial pivoting.

    The matrix is reduced once; ``solve`` may then be called for any
    number of right-hand sides.
    """

    def __init__(self, a: Sequence[Sequence[float]]):
        rows = [[float(v) for v in row] for row in a]
        n = len(rows)
        if n == 0:
            raise ValueError("matrix must not be empty")
        if any(len(row) != n for row in rows):
            raise ValueError("matrix must be square")

        scale = []
        for row in rows:
            rownrm = max(abs(v) for v in row)
            if rownrm == 0.0:
                raise SingularMatrixError(1, "row norm is zero")
            scale.append(1.0 / rownrm)

        ips = list(range(n))
        for k in range(n - 1):
            big = 0.0
            idxpiv = 0
            for i in range(k, n):
                ip = ips[i]
                size = abs(rows[ip][k]) * scale[ip]
                if size > big:
                    big = size
                    idxpiv = i
            if big == 0.0:
                raise SingularMatrixError(2, "no nonzero pivot")
            ips[k], ips[idxpiv] = ips[idxpiv], ips[k]

            pivot_row = rows[ips[k]]
            pivot = pivot_row[k]
            for ip in ips[k + 1 :]:
                row = rows[ip]
                em = -row[k] / pivot
                row[k] = -em
                for j in range(k + 1, n):
                    row[j] += em * pivot_row[j]

        if rows[ips[-1]][n - 1] == 0.0:
            raise SingularMatrixError(3, "last pivot is zero")

        self._rows = rows
        self._ips = ips

    @property
    def size(self) -> int:
        return len(self._ips)

    def solve(self, b: Sequence[float]) -> list[float]:
        """Solve A x = b with the reduced matrix and return x."""
        n = self.size
        if len(b) != n:
            raise ValueError(f"right-hand side must have {n} entries, got {len(b)}")
        rows = self._rows
        ips = self._ips

        x: list[float] = []
        for i, ip in enumerate(ips):
            row = rows[ip]
            x.append(float(b[ip]) - sum(row[j] * x[j] for j in range(i)))

        x[n - 1] /= rows[ips[n - 1]][n - 1]
        for i in range(n - 2, -1, -1):
            row = rows[ips[i]]
            total = sum(row[j] * x[j] for j in range(i + 1, n))
            x[i] = (x[i] - total) / row[i]
        return x


def simq(a: Sequence[Sequence[float]], b: Sequence[float]) -> list[float]:
    """Solve the linear system A x = b."""
    return GaussianSolver(a).solve(b)