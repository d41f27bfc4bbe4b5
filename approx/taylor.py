"""
Roots of general differentiable functions through a Taylor (or Maclaurin)
polynomial.

The function is replaced by its degree-n Taylor polynomial about a center,
expanded back into powers of x so the ordinary polynomial solvers apply.
The polynomial is only trustworthy within roughly `scale` of the center, so
keep the seeds (and the root) inside that window.
"""

from typing import Callable, Optional

import numpy as np
from numpy.polynomial import polynomial as P
from scipy.interpolate import approximate_taylor_polynomial

from approx.result import RootResult
from approx.solvers import RootSolver
from custom_types.types import FloatArray


def taylor_polynomial(f: Callable, center: float, degree: int,
                      scale: float = 1.0, order: Optional[int] = None) -> FloatArray:
    """
    Coefficients (lowest degree first, in powers of x) of the degree-`degree`
    Taylor polynomial of `f` about `center`.

    Derivatives are estimated numerically by scipy from samples of `f` within
    `scale` of `center`; `f` must accept numpy arrays.
    """
    if degree < 1:
        raise ValueError(f"degree must be >= 1, got {degree}")
    if scale <= 0:
        raise ValueError(f"scale must be > 0, got {scale}")

    p = approximate_taylor_polynomial(f, center, degree, scale, order=order)
    # poly1d is highest degree first, in powers of (x - center)
    about_center = np.asarray(p.coeffs, dtype=np.float64)
    if center == 0:
        return about_center[::-1].copy()

    # Horner in polynomial arithmetic: expand sum(a_k (x - center)**k) into powers of x
    shift = np.array([-center, 1.0])
    expanded = np.zeros(1)
    for a in about_center:
        expanded = P.polyadd(P.polymul(expanded, shift), [a])
    return expanded


def maclaurin_polynomial(f: Callable, degree: int, scale: float = 1.0,
                         order: Optional[int] = None) -> FloatArray:
    return taylor_polynomial(f, 0.0, degree, scale=scale, order=order)


def taylor_root(f: Callable, *seeds: float,
                method: str = "newton",
                center: Optional[float] = None,
                degree: int = 8,
                scale: float = 1.0,
                accuracy: Optional[float] = None,
                iterations: Optional[int] = None,
                solver: Optional[RootSolver] = None) -> RootResult:
    """
    Approximate a root of f(x) = 0 by solving its Taylor polynomial.

    The expansion is centered on the mean of the seeds unless `center` is
    given. The reported residual is that of the polynomial, not of `f`.
    """
    if not seeds:
        raise TypeError("taylor_root needs at least one seed")
    solver = solver or RootSolver()
    center = float(np.mean(seeds)) if center is None else center
    poly = taylor_polynomial(f, center, degree, scale=scale)
    return solver.solve(method, poly, *seeds, accuracy=accuracy, iterations=iterations)
