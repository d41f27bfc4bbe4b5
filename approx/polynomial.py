"""
Polynomial evaluation, differentiation and the finite-difference slopes
shared by the root finders.
"""

import numpy as np
from numpy.polynomial import polynomial as P

from approx.errors import NonDifferentiablePolynomial
from custom_types.types import ArrayLike, FloatArray, Polynomial, as_coefficients


def evaluate(poly: Polynomial, x: ArrayLike):
    """
    Evaluate sum(poly[i] * x**i).

    Scalar x gives a numpy float64 scalar, array x gives an array of the same
    shape. NaN and Inf in either argument propagate; nothing is rejected.
    An empty polynomial is identically zero.
    """
    c = np.asarray(poly, dtype=np.float64)
    if c.size == 0:
        c = np.zeros(1)
    if np.all(np.isfinite(x)):
        return P.polyval(x, c)
    # Horner seeds with c[-1] + x*0, which is NaN at x = +-inf; x**0 == 1 keeps the power sum exact
    with np.errstate(invalid="ignore", over="ignore"):
        return np.sum(c * np.power.outer(x, np.arange(len(c), dtype=np.float64)), axis=-1)


def derivative(poly: Polynomial, order: int = 1) -> FloatArray:
    """
    Coefficients of the order-th derivative: d[i] = (i+1) * poly[i+1], applied
    order times.

    Raises NonDifferentiablePolynomial when poly has fewer than order + 1
    coefficients, before any derivative array is built.
    """
    c = as_coefficients(poly)
    if order < 1:
        raise ValueError(f"Derivative order must be >= 1, got {order}")
    if len(c) < order + 1:
        raise NonDifferentiablePolynomial(len(c), order)
    return P.polyder(c, m=order)


def divide(num, den):
    """IEEE division: x/0 gives +-Inf and 0/0 gives NaN instead of raising."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.divide(num, den)


def secant_slope(poly: Polynomial, x0: float, x1: float):
    """Finite-difference slope (f(x1) - f(x0)) / (x1 - x0)."""
    return divide(evaluate(poly, x1) - evaluate(poly, x0), x1 - x0)


def steffensen_slope(poly: Polynomial, x: float):
    """Slope over a step equal to the residual: (f(x + f(x)) - f(x)) / f(x)."""
    h = evaluate(poly, x)
    return divide(evaluate(poly, x + h) - h, h)
