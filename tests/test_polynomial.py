import pytest
import numpy as np
from approx.errors import NonDifferentiablePolynomial
from approx.polynomial import evaluate, derivative, divide, secant_slope, steffensen_slope
from custom_types.types import as_coefficients


class TestEvaluate:
    """Polynomial evaluation, lowest-degree coefficient first"""

    def test_scalar(self):
        # 1 + 2x + 3x^2 at x = 2
        assert evaluate([1.0, 2.0, 3.0], 2.0) == 17.0

    def test_vectorized(self):
        values = evaluate([-1.0, 0.0, 1.0], np.array([0.0, 1.0, 2.0]))
        np.testing.assert_allclose(values, [-1.0, 0.0, 3.0])

    def test_constant_and_empty(self):
        assert evaluate([5.0], 123.0) == 5.0
        assert evaluate([], 3.0) == 0.0

    def test_nan_and_inf_propagate(self):
        assert np.isnan(evaluate([1.0, 1.0], np.nan))
        assert np.isinf(evaluate([0.0, 1.0], np.inf))

    def test_infinite_x_uses_power_sum(self):
        # x**0 == 1 at infinity, so a constant term never turns into NaN
        assert evaluate([0.0, 1.0], np.inf) == np.inf
        assert evaluate([1.0, 1.0], -np.inf) == -np.inf
        assert evaluate([3.0], np.inf) == 3.0
        np.testing.assert_array_equal(evaluate([0.0, 1.0], np.array([2.0, np.inf])), [2.0, np.inf])


class TestDerivative:
    """Coefficient differentiation d[i] = (i+1) * c[i+1]"""

    def test_first_and_second(self):
        c = [1.0, 2.0, 3.0, 4.0]
        d1 = derivative(c)
        d2 = derivative(d1)
        np.testing.assert_allclose(d1, [2.0, 6.0, 12.0])   # [c1, 2c2, 3c3]
        np.testing.assert_allclose(d2, [6.0, 24.0])        # [2c2, 6c3]
        np.testing.assert_allclose(derivative(c, order=2), d2)

    def test_degree_guard(self):
        with pytest.raises(NonDifferentiablePolynomial):
            derivative([5.0])
        with pytest.raises(NonDifferentiablePolynomial):
            derivative([])
        with pytest.raises(NonDifferentiablePolynomial):
            derivative([1.0, 2.0], order=2)

    def test_input_not_mutated(self):
        c = np.array([1.0, 2.0, 3.0])
        derivative(c)
        np.testing.assert_array_equal(c, [1.0, 2.0, 3.0])

    def test_trailing_zeros_kept(self):
        assert len(derivative([1.0, 2.0, 0.0, 0.0])) == 3


class TestHelpers:

    def test_secant_slope(self):
        # x^2 - 1 between 1 and 3: (8 - 0) / 2
        assert secant_slope([-1.0, 0.0, 1.0], 1.0, 3.0) == pytest.approx(4.0)

    def test_steffensen_slope(self):
        # x^2 - 2 at x = 2: f = 2, f(4) = 14 -> (14 - 2) / 2
        assert steffensen_slope([-2.0, 0.0, 1.0], 2.0) == pytest.approx(6.0)

    def test_divide_follows_ieee(self):
        assert divide(1.0, 0.0) == np.inf
        assert divide(-1.0, 0.0) == -np.inf
        assert np.isnan(divide(0.0, 0.0))

    def test_as_coefficients(self):
        poly = [1, 2, 3]
        c = as_coefficients(poly)
        assert c.dtype == np.float64
        c[0] = 99.0
        assert poly == [1, 2, 3], "caller's coefficients must not be aliased"
        np.testing.assert_array_equal(as_coefficients(4.0), [4.0])
        with pytest.raises(ValueError):
            as_coefficients([[1.0, 2.0]])
