"""Utility functions for the tabderiv package."""

from .numerics import central_difference_error_estimate, one_sided_error_estimate
from .validate import validate_sample_arrays

__all__ = [
    "central_difference_error_estimate",
    "one_sided_error_estimate",
    "validate_sample_arrays",
]
