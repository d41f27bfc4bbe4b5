from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from approx.bracketing import solve_bisection, solve_regula_falsi
from approx.interpolation import solve_secant
from approx.iterative import solve_broyden, solve_halley, solve_newton, solve_steffensen
from approx.result import RootResult
from custom_types.types import Polynomial

# name -> (solve function, number of seeds)
METHODS: Dict[str, Tuple[Callable[..., RootResult], int]] = {
    "bisection": (solve_bisection, 2),
    "regula_falsi": (solve_regula_falsi, 2),
    "secant": (solve_secant, 2),
    "newton": (solve_newton, 1),
    "halley": (solve_halley, 1),
    "steffensen": (solve_steffensen, 1),
    "broyden": (solve_broyden, 2),
}


@dataclass(frozen=True)
class SolverSettings:
    accuracy: float = 1e-8
    max_iter: Optional[int] = None  # safety cap for accuracy-bounded solves; None = run until converged


class RootSolver:
    def __init__(self, s: SolverSettings = SolverSettings()):
        self.s = s

    @staticmethod
    def seeds(method: str) -> int:
        """Number of starting points `method` takes (2 for brackets and secant-like methods)."""
        return RootSolver._lookup(method)[1]

    def solve(self, method: str, poly: Polynomial, *seeds: float,
              accuracy: Optional[float] = None,
              iterations: Optional[int] = None) -> RootResult:
        """
        Run `method` on `poly` from `seeds`.

        With `iterations` the iteration-bounded variant runs; otherwise the
        accuracy-bounded variant runs to `accuracy` (default from settings),
        capped by settings.max_iter when that is set.
        """
        fn, n_seeds = self._lookup(method)
        if len(seeds) != n_seeds:
            raise TypeError(f"{method} takes {n_seeds} seed(s), got {len(seeds)}")

        if iterations is not None:
            if accuracy is not None:
                raise TypeError("Specify at most one of accuracy or iterations")
            return fn(poly, *seeds, iterations=iterations)

        accuracy = self.s.accuracy if accuracy is None else accuracy
        return fn(poly, *seeds, accuracy=accuracy, max_iter=self.s.max_iter)

    def root(self, method: str, poly: Polynomial, *seeds: float,
             accuracy: Optional[float] = None,
             iterations: Optional[int] = None) -> float:
        return float(self.solve(method, poly, *seeds, accuracy=accuracy, iterations=iterations))

    @staticmethod
    def _lookup(method: str) -> Tuple[Callable[..., RootResult], int]:
        key = method.lower().replace("-", "_").replace(" ", "_")
        if key not in METHODS:
            raise ValueError(f"method must be one of {sorted(METHODS)}, got {method!r}")
        return METHODS[key]
