"""
Bracketing root finders: bisection and regula falsi (false position).

Both need f(x0) and f(x1) of strictly opposite signs and keep that invariant
on every update, so a finite estimate always lies inside the starting
bracket. If f overflows so that the next point or its value is NaN, the
search stops with a ConvergenceWarning and returns that non-finite point.
"""

import warnings
from typing import Callable, Optional, Tuple

import numpy as np

from approx.control import check_bounds, is_converged
from approx.errors import ConvergenceWarning, SameSignBracket
from approx.polynomial import evaluate
from approx.result import RootResult
from custom_types.types import Polynomial, as_coefficients


def check_bracket(f: Callable[[float], float], x0: float, x1: float) -> Tuple[float, float]:
    """Return (f(x0), f(x1)), raising SameSignBracket unless one is < 0 and the other > 0."""
    f0, f1 = f(x0), f(x1)
    if not ((f0 < 0 < f1) or (f1 < 0 < f0)):
        raise SameSignBracket(x0, x1, f0, f1)
    return f0, f1


def midpoint(lo: float, hi: float, f_lo: float, f_hi: float) -> float:
    return (lo + hi) / 2


def chord_point(lo: float, hi: float, f_lo: float, f_hi: float) -> float:
    # f_lo and f_hi have opposite signs, so the denominator is never zero
    return lo - f_lo * (hi - lo) / (f_hi - f_lo)


def _solve_bracketed(
        poly: Polynomial,
        x0: float,
        x1: float,
        point: Callable[[float, float, float, float], float],
        accuracy: Optional[float],
        iterations: Optional[int],
        max_iter: Optional[int],
        method: str
) -> RootResult:
    check_bounds(accuracy, iterations, max_iter)
    c = as_coefficients(poly)

    def f(x: float) -> float:
        return evaluate(c, x)

    lo, hi = np.float64(x0), np.float64(x1)
    f_lo, f_hi = check_bracket(f, lo, hi)

    n = 0
    while True:
        m = point(lo, hi, f_lo, f_hi)
        fm = f(m)

        if not np.isfinite(m) or np.isnan(fm):
            warnings.warn(
                f"{method}: next point in bracket ({lo:.17g}, {hi:.17g}) is {m} with "
                f"f = {fm}; f overflowed, stopping.",
                ConvergenceWarning,
                stacklevel=3
            )
            break
        # exact zero stops both variants immediately
        if fm == 0:
            break
        if iterations is not None:
            if n >= iterations:
                break
        elif is_converged(fm, accuracy):
            break
        elif m == lo or m == hi:
            warnings.warn(
                f"{method}: bracket ({lo:.17g}, {hi:.17g}) cannot shrink further, "
                f"|f(x)| = {abs(fm):.6g} >= {abs(accuracy):.6g}; returning x = {m:.17g}.",
                ConvergenceWarning,
                stacklevel=3
            )
            break
        elif max_iter is not None and n >= max_iter:
            warnings.warn(
                f"{method}: |f(x)| = {abs(fm):.6g} still >= {abs(accuracy):.6g} after "
                f"{max_iter} iterations; returning x = {m:.17g}.",
                ConvergenceWarning,
                stacklevel=3
            )
            break

        # replace the endpoint sharing f(m)'s sign
        if (fm < 0) == (f_lo < 0):
            lo, f_lo = m, fm
        else:
            hi, f_hi = m, fm
        n += 1

    return RootResult(
        root=float(m),
        iterations=n,
        converged=is_converged(fm, accuracy),
        residual=float(fm),
        method=method,
        seeds=2
    )


def solve_bisection(poly: Polynomial, x0: float, x1: float, *,
                    accuracy: Optional[float] = None,
                    iterations: Optional[int] = None,
                    max_iter: Optional[int] = None) -> RootResult:
    """
    Bisection on the bracket (x0, x1).

    Accuracy-bounded: halve the bracket until |f(m)| < |accuracy| at the
    midpoint m. Iteration-bounded: perform `iterations` bracket updates and
    return the midpoint of the final bracket. In both cases an exact zero at a
    midpoint ends the search at once.

    The bracket halves every step, so an accuracy target on x of eps is met
    after ceil(log2(|x1 - x0| / eps)) updates.
    """
    return _solve_bracketed(poly, x0, x1, midpoint, accuracy, iterations, max_iter, "bisection")


def solve_regula_falsi(poly: Polynomial, x0: float, x1: float, *,
                       accuracy: Optional[float] = None,
                       iterations: Optional[int] = None,
                       max_iter: Optional[int] = None) -> RootResult:
    """
    False position: same bracket bookkeeping as bisection, but each new point
    is where the chord between (x0, f(x0)) and (x1, f(x1)) crosses zero.
    """
    return _solve_bracketed(poly, x0, x1, chord_point, accuracy, iterations, max_iter, "regula_falsi")


def bisection(poly: Polynomial, x0: float, x1: float, accuracy: float,
              max_iter: Optional[int] = None) -> float:
    """Root to |f(x)| < |accuracy| by bisection. Raises SameSignBracket."""
    return float(solve_bisection(poly, x0, x1, accuracy=accuracy, max_iter=max_iter))


def bisection_iter(poly: Polynomial, x0: float, x1: float, iterations: int) -> float:
    """Root estimate after `iterations` bisection steps. Raises SameSignBracket."""
    return float(solve_bisection(poly, x0, x1, iterations=iterations))


def regula_falsi(poly: Polynomial, x0: float, x1: float, accuracy: float,
                 max_iter: Optional[int] = None) -> float:
    return float(solve_regula_falsi(poly, x0, x1, accuracy=accuracy, max_iter=max_iter))


def regula_falsi_iter(poly: Polynomial, x0: float, x1: float, iterations: int) -> float:
    return float(solve_regula_falsi(poly, x0, x1, iterations=iterations))
