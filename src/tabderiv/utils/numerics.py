"""Numerical utilities."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

__all__ = [
    "central_difference_error_estimate",
    "one_sided_error_estimate",
    "as_1d_float_array",
]


def central_difference_error_estimate(step_size: float) -> float:
    """Returns the ``h**2/6`` coefficient of ``f'''`` in the central quotient error.

    The three-point quotient ``(f[i+1] - f[i-1]) / (t[i+1] - t[i-1])`` on an
    even grid of spacing ``h`` is off by ``h**2/6 * f'''`` to leading order.

    Args:
        step_size: Grid spacing.

    Returns:
        Estimated truncation error scale.
    """
    return step_size**2 / 6


def one_sided_error_estimate(step_size: float) -> float:
    """Returns the ``h/2`` coefficient of ``f''`` in the forward/backward quotient error."""
    return step_size / 2


def as_1d_float_array(x: ArrayLike, *, name: str = "x") -> NDArray[np.float64]:
    """Convert input to a 1D float array.

    Args:
        x: Input array-like.
        name: Name used in error messages.

    Returns:
        1D NumPy array with dtype float64.

    Raises:
        ValueError: If the converted array is not 1D.
    """
    arr = np.asarray(x, dtype=float)
    if arr.ndim != 1:
        raise ValueError(f"{name} must be 1D, got shape {arr.shape}")
    return arr.astype(np.float64, copy=False)
