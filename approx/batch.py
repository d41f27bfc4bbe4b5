"""Run every solver on one polynomial and tabulate the outcomes."""

import warnings
from typing import List, Optional

import numpy as np
import pandas as pd
from scipy import optimize

from approx.errors import ApproxError
from approx.polynomial import evaluate
from approx.solvers import METHODS, RootSolver, SolverSettings
from custom_types.types import Polynomial, as_coefficients

# accuracy-bounded solves in a batch are always capped
BATCH_MAX_ITER = 1000

COLUMNS = ["method", "root", "residual", "iterations", "converged", "abs_error", "error", "warning"]


def reference_root(poly: Polynomial, x0: float, x1: float, xtol: float = 1e-14) -> float:
    """Root from scipy's brentq on (x0, x1), or NaN when f does not change sign there."""
    c = as_coefficients(poly)
    f0, f1 = evaluate(c, x0), evaluate(c, x1)
    if not np.isfinite(f0) or not np.isfinite(f1) or f0 * f1 > 0:
        return np.nan
    return optimize.brentq(lambda x: float(evaluate(c, x)), x0, x1, xtol=xtol)


def compare_methods(
        poly: Polynomial,
        x0: float,
        x1: float,
        accuracy: Optional[float] = None,
        iterations: Optional[int] = None,
        methods: Optional[List[str]] = None,
        solver: Optional[RootSolver] = None
) -> pd.DataFrame:
    """
    Solve `poly` with each method and return one row per method.

    Two-seed methods get (x0, x1); one-seed methods get x0. Input errors are
    recorded in the `error` column and warnings in `warning` instead of
    stopping the batch. `abs_error` is measured against scipy's brentq when
    (x0, x1) brackets a root.
    """
    solver = solver or RootSolver(SolverSettings(max_iter=BATCH_MAX_ITER))
    methods = list(METHODS) if methods is None else methods
    ref = reference_root(poly, x0, x1)

    rows = []
    for method in methods:
        seeds = (x0, x1) if RootSolver.seeds(method) == 2 else (x0,)
        row = dict.fromkeys(COLUMNS)
        row["method"] = method

        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            try:
                res = solver.solve(method, poly, *seeds, accuracy=accuracy, iterations=iterations)
            except ApproxError as e:
                row["error"] = str(e)
                res = None

        if res is not None:
            row["root"] = res.root
            row["residual"] = res.residual
            row["iterations"] = res.iterations
            row["converged"] = res.converged
            row["abs_error"] = abs(res.root - ref)
        # numpy's own overflow/invalid warnings are noise here
        messages = [str(w.message) for w in caught if type(w.message) is not RuntimeWarning]
        row["warning"] = "; ".join(messages) if messages else None
        rows.append(row)

    return pd.DataFrame(rows, columns=COLUMNS)
