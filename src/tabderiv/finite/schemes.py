"""Per-index finite-difference quotients on a sample series.

Three two-point schemes are provided. Each returns ``(t[i], estimate)``:

* forward:  ``(f[i+1] - f[i]) / (t[i+1] - t[i])``, valid for ``0 <= i <= n-2``,
  leading error ``-Δt f''/2``.
* backward: ``(f[i] - f[i-1]) / (t[i] - t[i-1])``, valid for ``1 <= i <= n-1``,
  leading error ``+Δt f''/2``.
* central:  ``(f[i+1] - f[i-1]) / (t[i+1] - t[i-1])``, valid for
  ``1 <= i <= n-2``, leading error ``Δt² f'''/6`` on an even grid.

Indices are not wrapped: ``-1`` is out of range, not the last sample.
"""

from __future__ import annotations

from tabderiv.errors import DegenerateIntervalError, IndexOutOfRangeError
from tabderiv.series import SampleSeries

__all__ = [
    "forward_difference",
    "backward_difference",
    "central_difference",
    "SCHEMES",
]


def _check_index(scheme: str, i: int, lo: int, hi: int, n: int) -> int:
    i = int(i)
    if not lo <= i <= hi:
        raise IndexOutOfRangeError(
            f"[{scheme}] index {i} outside valid range [{lo}, {hi}] for a series of length {n}."
        )
    return i


def _quotient(series: SampleSeries, left: int, right: int) -> float:
    t, f = series.t, series.f
    dt = t[right] - t[left]
    if dt == 0:
        raise DegenerateIntervalError(
            f"zero interval between t[{left}] and t[{right}] (both {t[left]!r}).",
            index=left,
        )
    return float((f[right] - f[left]) / dt)


def forward_difference(series: SampleSeries, i: int) -> tuple[float, float]:
    """Returns the forward-difference derivative at index ``i``.

    Args:
        series: Sample series.
        i: Index with ``0 <= i <= n-2``.

    Returns:
        ``(t[i], (f[i+1] - f[i]) / (t[i+1] - t[i]))``.

    Raises:
        IndexOutOfRangeError: If ``i`` is outside the valid range.
        DegenerateIntervalError: If ``t[i+1] == t[i]``.
    """
    n = len(series)
    i = _check_index("forward", i, 0, n - 2, n)
    return float(series.t[i]), _quotient(series, i, i + 1)


def backward_difference(series: SampleSeries, i: int) -> tuple[float, float]:
    """Returns the backward-difference derivative at index ``i``.

    Args:
        series: Sample series.
        i: Index with ``1 <= i <= n-1``.

    Returns:
        ``(t[i], (f[i] - f[i-1]) / (t[i] - t[i-1]))``.

    Raises:
        IndexOutOfRangeError: If ``i`` is outside the valid range.
        DegenerateIntervalError: If ``t[i] == t[i-1]``.
    """
    n = len(series)
    i = _check_index("backward", i, 1, n - 1, n)
    return float(series.t[i]), _quotient(series, i - 1, i)


def central_difference(series: SampleSeries, i: int) -> tuple[float, float]:
    """Returns the central-difference derivative at index ``i``.

    Args:
        series: Sample series.
        i: Index with ``1 <= i <= n-2``.

    Returns:
        ``(t[i], (f[i+1] - f[i-1]) / (t[i+1] - t[i-1]))``.

    Raises:
        IndexOutOfRangeError: If ``i`` is outside the valid range.
        DegenerateIntervalError: If ``t[i+1] == t[i-1]``.
    """
    n = len(series)
    i = _check_index("central", i, 1, n - 2, n)
    return float(series.t[i]), _quotient(series, i - 1, i + 1)


SCHEMES = {
    "forward": forward_difference,
    "backward": backward_difference,
    "central": central_difference,
}
