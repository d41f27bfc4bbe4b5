import pytest
import numpy as np
import pandas as pd
from approx.batch import COLUMNS, compare_methods, reference_root
from approx.solvers import METHODS

X2_MINUS_1 = [-1.0, 0.0, 1.0]
X2_MINUS_2 = [-2.0, 0.0, 1.0]


class TestCompareMethods:
    """Test suite for batch comparison"""

    def test_all_methods_converge(self):
        df = compare_methods(X2_MINUS_2, 1.0, 2.0, accuracy=1e-10)
        print(f"\n{df}")
        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == COLUMNS
        assert df["method"].tolist() == list(METHODS)
        assert df["converged"].tolist() == [True] * len(METHODS)
        assert (df["abs_error"] < 1e-8).all()
        assert df["error"].isna().all()

    def test_bad_bracket_recorded(self):
        df = compare_methods(X2_MINUS_1, 2.0, 3.0, iterations=5).set_index("method")
        assert "straddle" in df.loc["bisection", "error"]
        assert "straddle" in df.loc["regula_falsi", "error"]
        assert np.isnan(df.loc["bisection", "root"])
        # open methods still run from x0 = 2
        assert df.loc["newton", "iterations"] == 5
        assert abs(df.loc["newton", "root"] - 1.0) < 1e-3

    def test_warnings_recorded(self):
        df = compare_methods(X2_MINUS_1, 0.0, 2.0, iterations=2, methods=["newton"])
        # f'(0) = 0 for x^2 - 1
        assert "not finite" in df.loc[0, "warning"]

    def test_bad_arguments_abort_the_batch(self):
        """Argument errors apply to every method, so they are raised, not tabulated"""
        with pytest.raises(TypeError):
            compare_methods(X2_MINUS_2, 1.0, 2.0, accuracy=1e-8, iterations=3)
        with pytest.raises(ValueError, match="method must be one of"):
            compare_methods(X2_MINUS_2, 1.0, 2.0, methods=["brent"])

    def test_reference_root(self):
        assert abs(reference_root(X2_MINUS_2, 0.0, 2.0) - np.sqrt(2.0)) < 1e-12
        assert np.isnan(reference_root(X2_MINUS_2, 2.0, 3.0))
