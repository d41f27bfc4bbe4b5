"""
Secant method.

No bracket is needed. Each new estimate is where the line through the two
most recent points (x_{n-1}, f(x_{n-1})) and (x_n, f(x_n)) crosses zero.
When f(x_n) == f(x_{n-1}) the update divides by zero; the resulting Inf/NaN
is returned as-is and a SingularUpdateWarning is emitted.
"""

from typing import Optional

from approx.control import iterate_two_point
from approx.errors import SingularUpdateWarning
from approx.polynomial import divide, evaluate
from approx.result import RootResult
from custom_types.types import Polynomial, as_coefficients


def solve_secant(poly: Polynomial, x0: float, x1: float, *,
                 accuracy: Optional[float] = None,
                 iterations: Optional[int] = None,
                 max_iter: Optional[int] = None) -> RootResult:
    """
    Secant iteration seeded with x0, x1.

    The accuracy-bounded variant stops on the residual, |f(x_n)| < |accuracy|,
    like every other solver here.
    """
    c = as_coefficients(poly)

    def f(x: float) -> float:
        return evaluate(c, x)

    def update(x_prev: float, x: float, f_prev: float, fx: float) -> float:
        return divide(x_prev * fx - x * f_prev, fx - f_prev)

    return iterate_two_point(
        f, update, x0, x1,
        accuracy=accuracy,
        iterations=iterations,
        max_iter=max_iter,
        method="secant",
        singular=SingularUpdateWarning
    )


def secant(poly: Polynomial, x0: float, x1: float, accuracy: float,
           max_iter: Optional[int] = None) -> float:
    """Root to |f(x)| < |accuracy|. A NaN/Inf result means the iteration broke down."""
    return float(solve_secant(poly, x0, x1, accuracy=accuracy, max_iter=max_iter))


def secant_iter(poly: Polynomial, x0: float, x1: float, iterations: int) -> float:
    """Estimate after exactly `iterations` secant updates, converged or not."""
    return float(solve_secant(poly, x0, x1, iterations=iterations))
