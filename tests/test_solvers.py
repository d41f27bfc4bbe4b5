import pytest
import numpy as np
from approx.errors import ConvergenceWarning, NonDifferentiablePolynomial, SameSignBracket
from approx.iterative import halley
from approx.solvers import METHODS, RootSolver, SolverSettings

X2_MINUS_2 = [-2.0, 0.0, 1.0]
SQRT2 = np.sqrt(2.0)


def seeds_for(method):
    return (1.0, 2.0) if RootSolver.seeds(method) == 2 else (1.5,)


class TestRootSolver:
    """Test suite for the method-dispatching solver"""

    @pytest.mark.parametrize("method", sorted(METHODS))
    def test_every_method_finds_sqrt2(self, method):
        solver = RootSolver(SolverSettings(accuracy=1e-10, max_iter=500))
        res = solver.solve(method, X2_MINUS_2, *seeds_for(method))
        assert res.method == method
        assert res.converged, f"{method} did not converge: {res}"
        assert abs(res.root - SQRT2) < 1e-9, f"{method} gave {res.root}"

    @pytest.mark.parametrize("method", sorted(METHODS))
    def test_iteration_bound(self, method):
        res = RootSolver().solve(method, X2_MINUS_2, *seeds_for(method), iterations=3)
        assert res.iterations == 3
        assert res.sequence_length == 3 + RootSolver.seeds(method)

    def test_matches_module_function(self):
        assert RootSolver().root("halley", X2_MINUS_2, 1.0) == halley(X2_MINUS_2, 1.0, 1e-8)

    def test_method_names(self):
        solver = RootSolver()
        assert solver.root("Regula-Falsi", X2_MINUS_2, 0.0, 2.0) == solver.root("regula_falsi", X2_MINUS_2, 0.0, 2.0)
        with pytest.raises(ValueError, match="method must be one of"):
            solver.solve("brent", X2_MINUS_2, 0.0, 2.0)

    def test_seed_count(self):
        with pytest.raises(TypeError):
            RootSolver().solve("newton", X2_MINUS_2, 1.0, 2.0)
        with pytest.raises(TypeError):
            RootSolver().solve("bisection", X2_MINUS_2, 1.0)

    def test_both_bounds_rejected(self):
        with pytest.raises(TypeError):
            RootSolver().solve("newton", X2_MINUS_2, 1.5, accuracy=1e-6, iterations=3)

    def test_errors_pass_through(self):
        with pytest.raises(SameSignBracket):
            RootSolver().solve("bisection", X2_MINUS_2, 2.0, 3.0)
        with pytest.raises(NonDifferentiablePolynomial):
            RootSolver().solve("newton", [5.0], 1.0)

    def test_settings_cap(self):
        solver = RootSolver(SolverSettings(max_iter=25))
        with pytest.warns(ConvergenceWarning):
            res = solver.solve("newton", [2.0, -2.0, 0.0, 1.0], 0.0)
        assert res.iterations == 25
        assert not res.converged
