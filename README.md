# specfun

Special mathematical functions, plus helpers for windowed statistics and
trimmed-mean smoothing of count data. Most functions are written in Python
directly. A few helpers come from NumPy and SciPy: Bessel functions of
order 0 and 1, the gamma function, and the chi-square and normal
distributions.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `specfun.core`: the `horner`, `horner1` and `chebyshev` series evaluators,
  and the `CephesError` exception with its `ErrorKind` enum
- `specfun.elementary`: `round_even`, `sqrt`, `powi`, `log1p`, `expm1`, `cosm1`,
  `sinh`, `tanh`
- `specfun.power`: `power(x, y)`
- `specfun.gammafn`: `psi` (digamma) and `rgamma` (reciprocal gamma)
- `specfun.trig`: `sin`, `cos`, `tan`, `cot`, and `radian(d, m, s)`
- `specfun.degrees`: `sindg`, `cosdg`, `tandg`, `cotdg`, which take arguments in degrees
- `specfun.dilog`: `spence` (dilogarithm)
- `specfun.trig_integrals`: `sici(x)`, which returns the pair `(Si(x), Ci(x))`
- `specfun.bessel`: `yn`, `yv`, `struve`, and the hypergeometric series `onef2`
  and `threef0`, each of which returns a value together with an error estimate
- `specfun.zeta`: the Hurwitz zeta function `zeta(x, q)`, and `zetac(x)`, which is
  the Riemann zeta function minus one
- `specfun.numeric`: Newton–Cotes integration of nine samples with `simpsn`, and
  linear solving by Gaussian elimination with `simq` or `GaussianSolver`
  (`GaussianSolver` reduces the matrix once and can then solve for several
  right-hand sides; a singular matrix raises `SingularMatrixError`)
- `specfun.smoothing`: `quickselect`, `trimmed_sum`, `trimmed_mean` and
  `windowed_trimmed_mean`
- `specfun.windowing`: `fast_sum`, `fast_product`, p-value combination with
  `fishers_combined`, `stouffers_z` and `weighted_stouffers_z`, and sliding-window
  application with `windowing` and `weighted_windowing`

A domain error, a singularity, an overflow or a total loss of precision
raises `specfun.core.CephesError`. Its `kind` attribute gives the
`ErrorKind`. Its `result` attribute holds the conventional value for that
case, so a caller that wants to carry on can use it.

## Example

```python
from specfun.gammafn import psi
from specfun.zeta import zetac
from specfun.windowing import windowing, fishers_combined

psi(1.0)            # -0.5772156649015329
zetac(2.0)          # 0.6449340668482264
windowing([0.01, 0.2, 0.5, 0.03, 0.4], 1, fishers_combined)
```

`windowing` and `weighted_windowing` leave positions near the ends at zero
when a full window does not fit there. `windowed_trimmed_mean` does the same.

## What is not included

- Student's t distribution and its inverse.
- Computing expected counts from observed counts and probabilities. The
  smoothing and windowing helpers can be used as building blocks for this,
  but there is no function that does it.
- Command-line tools. The package is a library only.