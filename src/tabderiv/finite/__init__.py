"""Finite-difference derivatives of sampled series.

Provides the per-index schemes, the full-series first derivative and the
repeated (higher-order) derivative built from it.
"""

from .first_order import first_order, nth_order
from .schemes import backward_difference, central_difference, forward_difference

__all__ = [
    "forward_difference",
    "backward_difference",
    "central_difference",
    "first_order",
    "nth_order",
]
