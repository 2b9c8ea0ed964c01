"""Time-shift corrected derivative estimates.

A plain rise-over-run quotient ``(f3 - f2) / (t3 - t2)`` is the average slope
over ``[t2, t3]`` and is best associated with the interval midpoint, not with
``t2``. On uneven grids reporting it at ``t2`` is biased. These estimators
look at three consecutive samples ``(t1, f1), (t2, f2), (t3, f3)`` and
re-centre the estimate onto ``t2``.

With ``favg12 = (f2 - f1) / (t2 - t1)`` and ``favg23 = (f3 - f2) / (t3 - t2)``:

* first order::

      (favg23 * (t2 - t1) + favg12 * (t3 - t2)) / (t3 - t1)

  This is the linear interpolation, evaluated at ``t2``, between ``favg12``
  placed at the midpoint of ``[t1, t2]`` and ``favg23`` placed at the midpoint
  of ``[t2, t3]``. The weights are crossed: ``favg23`` is weighted by the
  *left* interval and ``favg12`` by the *right* one.

* second order::

      2 * (favg23 - favg12) / (t3 - t1)

  A central difference of the two averages about their midpoints, which are
  ``(t3 - t1) / 2`` apart.

There is no one-sided fallback, so a series of ``n`` samples yields ``n - 2``
estimates located at ``t[1:-1]``.

Examples:
--------
>>> from tabderiv.series import SampleSeries
>>> from tabderiv.time_shift.core import first_order_time_shifted
>>> s = SampleSeries([0.0, 1.0, 3.0], [0.0, 1.0, 9.0])
>>> first_order_time_shifted(s).as_pairs()
[(1.0, 2.0)]
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from tabderiv.errors import DegenerateIntervalError
from tabderiv.series import DerivativeSeries, SampleSeries
from tabderiv.utils.validate import (
    require_increasing_window,
    require_min_samples,
    require_positive_order,
)

__all__ = [
    "time_shifted_first",
    "time_shifted_second",
    "first_order_time_shifted",
    "second_order_time_shifted",
    "time_shifted",
]


def time_shifted_first(
    t1: float, f1: float, t2: float, f2: float, t3: float, f3: float
) -> float:
    """Returns the first-order time-shifted derivative at ``t2`` for one window.

    Raises:
        DegenerateIntervalError: Unless ``t1 < t2 < t3``.
    """
    require_increasing_window(t1, t2, t3)
    dt12 = t2 - t1
    dt23 = t3 - t2
    favg12 = (f2 - f1) / dt12
    favg23 = (f3 - f2) / dt23
    return (favg23 * dt12 + favg12 * dt23) / (t3 - t1)


def time_shifted_second(
    t1: float, f1: float, t2: float, f2: float, t3: float, f3: float
) -> float:
    """Returns the second-order time-shifted derivative at ``t2`` for one window.

    Raises:
        DegenerateIntervalError: Unless ``t1 < t2 < t3``.
    """
    require_increasing_window(t1, t2, t3)
    favg12 = (f2 - f1) / (t2 - t1)
    favg23 = (f3 - f2) / (t3 - t2)
    return 2 * (favg23 - favg12) / (t3 - t1)


def _windows(series: SampleSeries, where: str):
    """Returns the sliding-window pieces shared by both estimators.

    The arrays are indexed by window: entry ``j`` belongs to the window
    centred on sample ``j + 1``.
    """
    n = len(series)
    require_min_samples(n, 3, where=where)

    t, f = series.t, series.f
    dt = np.diff(t)
    if not np.all(dt > 0):
        i = int(np.flatnonzero(~(dt > 0))[0])
        raise DegenerateIntervalError(
            f"[{where}] window requires t1 < t2 < t3; "
            f"t[{i}]={t[i]!r}, t[{i + 1}]={t[i + 1]!r}.",
            index=i,
        )
    favg = np.diff(f) / dt
    return dt[:-1], dt[1:], favg[:-1], favg[1:], t[2:] - t[:-2]


def first_order_time_shifted(series: SampleSeries) -> DerivativeSeries:
    """Computes first-order time-shifted derivatives over a whole series.

    Args:
        series: Sample series with at least 3 samples.

    Returns:
        A :class:`DerivativeSeries` of length ``n - 2`` located at
        ``series.t[1:-1]``.

    Raises:
        InsufficientSamplesError: If ``len(series) < 3``.
        DegenerateIntervalError: If some window is not strictly increasing.
    """
    dt12, dt23, favg12, favg23, dt13 = _windows(series, "first_order_time_shifted")
    d: NDArray[np.float64] = (favg23 * dt12 + favg12 * dt23) / dt13
    return DerivativeSeries.of(series, series.t[1:-1], d)


def second_order_time_shifted(series: SampleSeries) -> DerivativeSeries:
    """Computes second-order time-shifted derivatives over a whole series.

    Args:
        series: Sample series with at least 3 samples.

    Returns:
        A :class:`DerivativeSeries` of length ``n - 2`` located at
        ``series.t[1:-1]``, two orders above ``series``.

    Raises:
        InsufficientSamplesError: If ``len(series) < 3``.
        DegenerateIntervalError: If some window is not strictly increasing.
    """
    _, _, favg12, favg23, dt13 = _windows(series, "second_order_time_shifted")
    d: NDArray[np.float64] = 2 * (favg23 - favg12) / dt13
    return DerivativeSeries.of(series, series.t[1:-1], d, passes=2)


def time_shifted(series: SampleSeries, order: int = 1) -> DerivativeSeries:
    """Dispatches to the first- or second-order time-shifted estimator.

    Raises:
        ValueError: If ``order`` is not 1 or 2.
    """
    order = require_positive_order(order)
    if order == 1:
        return first_order_time_shifted(series)
    if order == 2:
        return second_order_time_shifted(series)
    raise ValueError(
        f"time-shifted derivatives support order 1 or 2; got {order}."
    )
