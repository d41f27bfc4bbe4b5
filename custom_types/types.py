"""Shared type definitions for the approx package."""

from typing import Sequence, Union

import numpy as np
import numpy.typing as npt

# Type aliases for cleaner signatures
ArrayLike = npt.ArrayLike
FloatArray = npt.NDArray[np.float64]

# Coefficients lowest degree first: [c0, c1, c2, ...] -> c0 + c1*x + c2*x**2 + ...
Polynomial = Union[Sequence[float], FloatArray]


def as_coefficients(poly: Polynomial) -> FloatArray:
    """Convert a coefficient sequence to a fresh 1D float array.

    The caller's sequence is copied, never aliased, so solvers cannot mutate it.
    Scalars become single-coefficient (constant) polynomials.
    """
    c = np.array(poly, dtype=np.float64)
    if c.ndim == 0:
        return c[None]
    if c.ndim > 1:
        raise ValueError(f"Polynomial coefficients must be 1D, got shape {c.shape}")
    return c
