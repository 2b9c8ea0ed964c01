"""First and repeated derivatives of a sample series by finite differences.

:func:`first_order` evaluates every index with a fixed dispatch policy:

======== ======================
index    scheme
======== ======================
0        forward difference
n - 1    backward difference
other    central difference
======== ======================

The ends have no two-sided neighbour, so they fall back to the one-sided
O(Δt) schemes while the interior gets the O(Δt²) central quotient. The ends
are not extrapolated.

:func:`nth_order` applies :func:`first_order` ``order`` times, feeding each
pass the previous estimates. The O(Δt) end error of every pass leaks one
index further inward on the next pass, so after ``k`` passes up to ``k``
points at each end are noticeably less accurate than the interior. This is
what repeated differencing of tabulated data gives and is kept as is.

Examples:
--------
>>> from tabderiv.series import SampleSeries
>>> from tabderiv.finite.first_order import first_order
>>> s = SampleSeries([0.0, 1.0, 2.0, 3.0], [0.0, 1.0, 4.0, 9.0])
>>> first_order(s).d.tolist()
[1.0, 2.0, 4.0, 5.0]
"""

from __future__ import annotations

import numpy as np

from tabderiv.logger import tabderiv_logger
from tabderiv.series import DerivativeSeries, SampleSeries
from tabderiv.utils.validate import require_min_samples, require_positive_order

__all__ = [
    "first_order",
    "nth_order",
]


def first_order(series: SampleSeries) -> DerivativeSeries:
    """Computes the first derivative at every sample.

    Args:
        series: Sample series with at least 2 samples.

    Returns:
        A :class:`DerivativeSeries` of the same length, aligned with
        ``series.t``.

    Raises:
        InsufficientSamplesError: If ``len(series) < 2``.
    """
    n = len(series)
    require_min_samples(n, 2, where="first_order")

    t, f = series.t, series.f
    d = np.empty(n, dtype=np.float64)

    # Same arithmetic as the per-index schemes, so results match bit for bit.
    d[0] = (f[1] - f[0]) / (t[1] - t[0])
    d[1:-1] = (f[2:] - f[:-2]) / (t[2:] - t[:-2])
    d[-1] = (f[-1] - f[-2]) / (t[-1] - t[-2])

    return DerivativeSeries.of(series, t, d)


def nth_order(series: SampleSeries, order: int) -> DerivativeSeries:
    """Computes the ``order``-th derivative by repeated first-order passes.

    Args:
        series: Sample series with at least 2 samples.
        order: Positive integer derivative order.

    Returns:
        A :class:`DerivativeSeries` of the same length, aligned with
        ``series.t``. ``nth_order(series, 1)`` equals ``first_order(series)``.

    Raises:
        ValueError: If ``order`` is not a positive integer.
        InsufficientSamplesError: If ``len(series) < 2``.
    """
    order = require_positive_order(order)
    n = len(series)
    require_min_samples(n, 2, where="nth_order")

    if order > 1 and 2 * order >= n:
        tabderiv_logger.warning(
            "nth_order: order %d on %d samples; one-sided boundary error "
            "reaches every point of the result.",
            order,
            n,
        )

    derivative = first_order(series)
    for _ in range(order - 1):
        derivative = first_order(derivative)
    return derivative
