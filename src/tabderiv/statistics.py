"""Summary statistics for sampled values.

Handy for condensing a derivative series, e.g. the mean speed and its
spread over a track.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike

from tabderiv.utils.numerics import as_1d_float_array
from tabderiv.utils.validate import require_min_samples

__all__ = ["mean", "stddev"]


def mean(values: ArrayLike) -> float:
    """Returns the arithmetic mean of ``values``.

    An empty input gives ``nan``.
    """
    arr = as_1d_float_array(values, name="values")
    if arr.size == 0:
        return math.nan
    return float(np.sum(arr) / arr.size)


def stddev(values: ArrayLike) -> float:
    """Returns the corrected sample standard deviation of ``values``.

    Computes ``sqrt(sum((x - mean(x))**2) / (n - 1))``. A single value gives
    ``nan``.

    Raises:
        InsufficientSamplesError: If ``values`` is empty.
    """
    arr = as_1d_float_array(values, name="values")
    require_min_samples(arr.size, 1, where="stddev")
    if arr.size == 1:
        return math.nan
    m = np.sum(arr) / arr.size
    return float(math.sqrt(np.sum((arr - m) ** 2) / (arr.size - 1)))
