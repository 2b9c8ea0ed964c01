"""Validation utilities for tabderiv."""

from __future__ import annotations

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray

from tabderiv.config import IngestConfig
from tabderiv.errors import (
    DegenerateIntervalError,
    InsufficientSamplesError,
    NonFiniteSampleError,
)

__all__ = [
    "validate_sample_arrays",
    "parse_xy_table",
    "require_min_samples",
    "require_increasing_window",
    "require_positive_order",
]


def validate_sample_arrays(
    t: ArrayLike,
    f: ArrayLike,
    config: IngestConfig | None = None,
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Validates and converts sampled ``t`` and ``f`` values into NumPy arrays.

    Requirements:
      - ``t`` and ``f`` are 1D with the same length (empty is allowed).
      - With ``config.check_finite``, neither contains NaN or infinities.
      - Every spacing ``t[i+1] - t[i]`` is strictly greater than
        ``config.min_spacing``.

    Args:
        t: 1D array-like of independent-variable values.
        f: 1D array-like of dependent-variable values, ``len(f) == len(t)``.
        config: Ingestion checks to apply. Defaults to :class:`IngestConfig()`.

    Returns:
        Tuple of (t_array, f_array) as fresh ``float64`` arrays.

    Raises:
        ValueError: If the arrays are not 1D or have different lengths.
        NonFiniteSampleError: If a non-finite value is found while
            ``check_finite`` is on.
        DegenerateIntervalError: If some spacing is not above ``min_spacing``.
    """
    config = config or IngestConfig()

    t_arr = np.array(t, dtype=np.float64)
    f_arr = np.array(f, dtype=np.float64)

    if t_arr.ndim != 1:
        raise ValueError(f"t must be 1D; got shape {t_arr.shape}.")
    if f_arr.ndim != 1:
        raise ValueError(f"f must be 1D; got shape {f_arr.shape}.")
    if t_arr.shape[0] != f_arr.shape[0]:
        raise ValueError(
            f"t and f must have the same length; got {t_arr.shape[0]} and {f_arr.shape[0]}."
        )

    if config.check_finite:
        for name, arr in (("t", t_arr), ("f", f_arr)):
            bad = np.flatnonzero(~np.isfinite(arr))
            if bad.size:
                raise NonFiniteSampleError(
                    f"{name} contains non-finite values (first at index {int(bad[0])})."
                )

    if t_arr.size >= 2:
        # NaN spacings fail the comparison too, so they land here when
        # check_finite is off.
        spacing_ok = np.diff(t_arr) > config.min_spacing
        if not np.all(spacing_ok):
            i = int(np.flatnonzero(~spacing_ok)[0])
            raise DegenerateIntervalError(
                f"t must be strictly increasing with spacing > {config.min_spacing}; "
                f"t[{i}]={t_arr[i]!r}, t[{i + 1}]={t_arr[i + 1]!r}.",
                index=i,
            )

    return t_arr, f_arr


def parse_xy_table(
    table: ArrayLike,
) -> tuple[NDArray[np.floating], NDArray[np.floating]]:
    """Parses a 2D table into ``(t, f)`` arrays.

    Supported layouts:

    * ``(N, 2)``:
        Column 0 = t, column 1 = f.
    * ``(2, N)``:
        Row 0 = t, row 1 = f.

    Args:
        table: 2D array containing t and f, e.g. data loaded from a text file.

    Returns:
        A tuple ``(t, f)`` as NumPy arrays.

    Raises:
        ValueError: If the input does not match any of the supported layouts.
    """
    arr = np.asarray(table, dtype=float)
    if arr.ndim != 2:
        raise ValueError("table must be a 2D array.")

    match arr.shape:
        case (n, 2):
            # column 0 = t, column 1 = f
            return arr[:, 0], arr[:, 1]
        case (2, n) if n != 2:
            # row 0 = t, row 1 = f
            return arr[0, :], arr[1, :]
        case _:
            raise ValueError(
                f"Unexpected table shape {arr.shape}; expected (N, 2) or (2, N)."
            )


def require_min_samples(n: int, required: int, *, where: str) -> None:
    """Raises :class:`InsufficientSamplesError` if ``n < required``."""
    if n < required:
        raise InsufficientSamplesError(required, n, where=where)


def require_increasing_window(t1: float, t2: float, t3: float) -> None:
    """Checks that a three-sample window satisfies ``t1 < t2 < t3``.

    Raises:
        DegenerateIntervalError: If either interval is zero, negative or NaN.
    """
    if not (t1 < t2 < t3):
        raise DegenerateIntervalError(
            f"window must satisfy t1 < t2 < t3; got ({t1!r}, {t2!r}, {t3!r})."
        )


def require_positive_order(order: int) -> int:
    """Validates a derivative order and returns it as ``int``.

    Raises:
        ValueError: If ``order`` is not an integer or is smaller than 1.
    """
    if isinstance(order, bool) or not isinstance(order, numbers.Integral):
        raise ValueError(f"order must be a positive integer; got {order!r}.")
    if order < 1:
        raise ValueError(f"order must be a positive integer; got {order}.")
    return int(order)
