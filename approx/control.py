"""
Stopping rules and the iteration loops shared by the open (non-bracketing)
solvers.

Every solve is bounded either by accuracy (run until |f(x)| < |accuracy|,
optionally capped by max_iter) or by iterations (exactly that many
correction steps). Exactly one of the two must be given.
"""

import warnings
from typing import Callable, Optional, Type

import numpy as np

from approx.errors import ConvergenceWarning, SingularDerivativeWarning
from approx.result import RootResult


def check_bounds(accuracy: Optional[float], iterations: Optional[int],
                 max_iter: Optional[int] = None) -> None:
    if (accuracy is None) == (iterations is None):
        raise TypeError("Specify exactly one of accuracy or iterations")
    if iterations is not None and (int(iterations) != iterations or iterations < 0):
        raise ValueError(f"iterations must be a non-negative integer, got {iterations}")
    if accuracy is not None and np.isnan(accuracy):
        raise ValueError("accuracy must not be NaN")
    if max_iter is not None and max_iter < 0:
        raise ValueError(f"max_iter must be non-negative, got {max_iter}")


def is_converged(residual: float, accuracy: Optional[float]) -> bool:
    """|residual| < |accuracy|; with zero accuracy only an exact zero counts."""
    if residual == 0:
        return True
    if accuracy is None:
        return False
    return bool(abs(residual) < abs(accuracy))


def keep_going(n: int, x: float, fx: float, accuracy: Optional[float],
               iterations: Optional[int], max_iter: Optional[int], method: str) -> bool:
    if iterations is not None:
        return n < iterations
    # a non-finite estimate is a failure, never a convergence
    if is_converged(fx, accuracy) or not np.isfinite(x):
        return False
    if max_iter is not None and n >= max_iter:
        warnings.warn(
            f"{method}: |f(x)| = {abs(fx):.6g} still >= {abs(accuracy):.6g} after "
            f"{max_iter} iterations; returning x = {x:.17g}.",
            ConvergenceWarning,
            stacklevel=4
        )
        return False
    return True


def warn_singular(method: str, x: float, category: Type[Warning]) -> None:
    warnings.warn(
        f"{method}: update from x = {x:.17g} is not finite "
        f"(vanishing denominator or overflow).",
        category,
        stacklevel=4
    )


def iterate_one_point(
        f: Callable[[float], float],
        correction: Callable[[float, float], float],
        x0: float,
        *,
        accuracy: Optional[float] = None,
        iterations: Optional[int] = None,
        max_iter: Optional[int] = None,
        method: str = "",
        singular: Type[Warning] = SingularDerivativeWarning
) -> RootResult:
    """
    Drive x_{n+1} = x_n - correction(x_n, f(x_n)).

    An exact root (f(x_n) == 0) is a fixed point: the correction is skipped so
    that 0/0 in the correction term cannot turn it into NaN.
    """
    check_bounds(accuracy, iterations, max_iter)
    x = np.float64(x0)
    fx = f(x)
    n = 0
    while keep_going(n, x, fx, accuracy, iterations, max_iter, method):
        x_new = x if fx == 0 else x - correction(x, fx)
        if np.isfinite(x) and not np.isfinite(x_new):
            warn_singular(method, x, singular)
        x = x_new
        fx = f(x)
        n += 1

    return RootResult(
        root=float(x),
        iterations=n,
        converged=bool(np.isfinite(x)) and is_converged(fx, accuracy),
        residual=float(fx),
        method=method,
        seeds=1
    )


def iterate_two_point(
        f: Callable[[float], float],
        update: Callable[[float, float, float, float], float],
        x0: float,
        x1: float,
        *,
        accuracy: Optional[float] = None,
        iterations: Optional[int] = None,
        max_iter: Optional[int] = None,
        method: str = "",
        singular: Type[Warning] = SingularDerivativeWarning
) -> RootResult:
    """
    Drive x_{n+1} = update(x_{n-1}, x_n, f(x_{n-1}), f(x_n)), keeping only the
    last two points. Exact roots are fixed points, as in iterate_one_point.
    """
    check_bounds(accuracy, iterations, max_iter)
    prev, x = np.float64(x0), np.float64(x1)
    f_prev, fx = f(prev), f(x)
    n = 0
    while keep_going(n, x, fx, accuracy, iterations, max_iter, method):
        x_new = x if fx == 0 else update(prev, x, f_prev, fx)
        if np.isfinite(x) and not np.isfinite(x_new):
            warn_singular(method, x, singular)
        prev, f_prev = x, fx
        x = x_new
        fx = f(x)
        n += 1

    return RootResult(
        root=float(x),
        iterations=n,
        converged=bool(np.isfinite(x)) and is_converged(fx, accuracy),
        residual=float(fx),
        method=method,
        seeds=2
    )
