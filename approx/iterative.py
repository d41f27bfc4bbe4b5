"""
Derivative-based iterations: Newton, Halley, Steffensen and Broyden.

All four share one shape, x_{n+1} = x_n - correction(x_n):

    newton      f / f'
    halley      2 f f' / (2 f'^2 - f f'')
    steffensen  f / g,  g(x) = (f(x + f(x)) - f(x)) / f(x)
    broyden     f(x_n) / ((f(x_n) - f(x_{n-1})) / (x_n - x_{n-1}))

Newton and Halley differentiate the coefficients directly and need degree >= 1
and >= 2 respectively. Steffensen and Broyden use only function values.
A vanishing derivative or slope produces Inf/NaN, which propagates to the
result together with a SingularDerivativeWarning.
"""

from typing import Optional

from approx.control import iterate_one_point, iterate_two_point
from approx.polynomial import derivative, divide, evaluate, secant_slope, steffensen_slope
from approx.result import RootResult
from custom_types.types import Polynomial, as_coefficients


def solve_newton(poly: Polynomial, x0: float, *,
                 accuracy: Optional[float] = None,
                 iterations: Optional[int] = None,
                 max_iter: Optional[int] = None) -> RootResult:
    c = as_coefficients(poly)
    d1 = derivative(c)

    def f(x: float) -> float:
        return evaluate(c, x)

    def correction(x: float, fx: float) -> float:
        return divide(fx, evaluate(d1, x))

    return iterate_one_point(f, correction, x0, accuracy=accuracy, iterations=iterations,
                             max_iter=max_iter, method="newton")


def solve_halley(poly: Polynomial, x0: float, *,
                 accuracy: Optional[float] = None,
                 iterations: Optional[int] = None,
                 max_iter: Optional[int] = None) -> RootResult:
    """Halley's method; cubic convergence near a simple root."""
    c = as_coefficients(poly)
    d2 = derivative(c, order=2)
    d1 = derivative(c)

    def f(x: float) -> float:
        return evaluate(c, x)

    def correction(x: float, fx: float) -> float:
        fp = evaluate(d1, x)
        fpp = evaluate(d2, x)
        return divide(2 * fx * fp, 2 * fp * fp - fx * fpp)

    return iterate_one_point(f, correction, x0, accuracy=accuracy, iterations=iterations,
                             max_iter=max_iter, method="halley")


def solve_steffensen(poly: Polynomial, x0: float, *,
                     accuracy: Optional[float] = None,
                     iterations: Optional[int] = None,
                     max_iter: Optional[int] = None) -> RootResult:
    """
    Steffensen's method.

    Quadratic near the root without any derivative, but the slope surrogate
    g(x) uses a step of size f(x), so a seed far from the root can diverge or
    crawl.
    """
    c = as_coefficients(poly)

    def f(x: float) -> float:
        return evaluate(c, x)

    def correction(x: float, fx: float) -> float:
        return divide(fx, steffensen_slope(c, x))

    return iterate_one_point(f, correction, x0, accuracy=accuracy, iterations=iterations,
                             max_iter=max_iter, method="steffensen")


def solve_broyden(poly: Polynomial, x0: float, x1: float, *,
                  accuracy: Optional[float] = None,
                  iterations: Optional[int] = None,
                  max_iter: Optional[int] = None,
                  h: Optional[float] = None) -> RootResult:
    """
    One-dimensional Broyden: Newton's step with f' replaced by the
    finite-difference slope through the two latest estimates.

    `h` is accepted for call compatibility and ignored; the slope's step is
    always x_n - x_{n-1}.
    """
    c = as_coefficients(poly)

    def f(x: float) -> float:
        return evaluate(c, x)

    def update(x_prev: float, x: float, f_prev: float, fx: float) -> float:
        return x - divide(fx, secant_slope(c, x_prev, x))

    return iterate_two_point(f, update, x0, x1, accuracy=accuracy, iterations=iterations,
                             max_iter=max_iter, method="broyden")


def newton(poly: Polynomial, x0: float, accuracy: float, max_iter: Optional[int] = None) -> float:
    """Root to |f(x)| < |accuracy|. Raises NonDifferentiablePolynomial for constants."""
    return float(solve_newton(poly, x0, accuracy=accuracy, max_iter=max_iter))


def newton_iter(poly: Polynomial, x0: float, iterations: int) -> float:
    return float(solve_newton(poly, x0, iterations=iterations))


def halley(poly: Polynomial, x0: float, accuracy: float, max_iter: Optional[int] = None) -> float:
    """Root to |f(x)| < |accuracy|. Raises NonDifferentiablePolynomial below degree 2."""
    return float(solve_halley(poly, x0, accuracy=accuracy, max_iter=max_iter))


def halley_iter(poly: Polynomial, x0: float, iterations: int) -> float:
    return float(solve_halley(poly, x0, iterations=iterations))


def steffensen(poly: Polynomial, x0: float, accuracy: float, max_iter: Optional[int] = None) -> float:
    return float(solve_steffensen(poly, x0, accuracy=accuracy, max_iter=max_iter))


def steffensen_iter(poly: Polynomial, x0: float, iterations: int) -> float:
    return float(solve_steffensen(poly, x0, iterations=iterations))


def broyden(poly: Polynomial, x0: float, x1: float, accuracy: float,
            max_iter: Optional[int] = None, h: Optional[float] = None) -> float:
    return float(solve_broyden(poly, x0, x1, accuracy=accuracy, max_iter=max_iter, h=h))


def broyden_iter(poly: Polynomial, x0: float, x1: float, iterations: int,
                 h: Optional[float] = None) -> float:
    return float(solve_broyden(poly, x0, x1, iterations=iterations, h=h))
