"""Errors and warning categories raised by the root finders."""


class ApproxError(ValueError):
    """Base class for invalid root-finding inputs."""


class SameSignBracket(ApproxError):
    """f(x0) and f(x1) do not have strictly opposite signs."""

    def __init__(self, x0: float, x1: float, f0: float, f1: float):
        self.x0, self.x1, self.f0, self.f1 = x0, x1, f0, f1
        super().__init__(
            f"Bracket ({x0}, {x1}) does not straddle a root: "
            f"f(x0) = {f0:.6g}, f(x1) = {f1:.6g} (need strictly opposite signs)."
        )


class NonDifferentiablePolynomial(ApproxError):
    """Polynomial degree is too low for the requested derivative order."""

    def __init__(self, n_coefficients: int, order: int):
        self.n_coefficients = n_coefficients
        self.order = order
        super().__init__(
            f"Cannot take derivative of order {order} of a polynomial with "
            f"{n_coefficients} coefficient(s); need at least {order + 1}."
        )


class SingularDerivativeWarning(RuntimeWarning):
    """A derivative or slope vanished; the estimate is now Inf/NaN."""


class SingularUpdateWarning(RuntimeWarning):
    """Consecutive function values coincided in a secant update; the estimate is now Inf/NaN."""


class ConvergenceWarning(RuntimeWarning):
    """The safety cap on an accuracy-bounded solve was reached before convergence."""
