"""Batch differentiation of several independent series."""

from __future__ import annotations

from typing import Any, Sequence

from tabderiv.derivative_kit import SeriesDerivativeKit
from tabderiv.logger import tabderiv_logger
from tabderiv.series import DerivativeSeries, SampleSeries
from tabderiv.utils.concurrency import cap_workers, default_workers, parallel_execute

__all__ = ["differentiate_many"]


def _differentiate_one(series: SampleSeries, method: str | None, kwargs: dict) -> DerivativeSeries:
    return SeriesDerivativeKit(series).differentiate(method=method, **kwargs)


def differentiate_many(
    series_list: Sequence[SampleSeries],
    *,
    method: str | None = None,
    n_workers: int | None = None,
    **kwargs: Any,
) -> list[DerivativeSeries]:
    """Differentiates each series in ``series_list`` with the same method.

    Series are read-only, so the same series may appear more than once and
    calls run safely on separate threads.

    Args:
        series_list: Series to differentiate.
        method: Method name or alias, as for
            :meth:`SeriesDerivativeKit.differentiate`.
        n_workers: Number of threads. ``None`` reads ``TABDERIV_NUM_WORKERS``
            (default 1). Capped at the number of series.
        **kwargs: Forwarded to the engine, e.g. ``order``.

    Returns:
        One :class:`DerivativeSeries` per input, in input order.

    Raises:
        Whatever the first failing series raises; no partial list is returned.
    """
    items = list(series_list)
    if not items:
        return []

    workers = cap_workers(default_workers() if n_workers is None else n_workers, len(items))
    tabderiv_logger.debug(
        "differentiate_many: %d series, method=%r, n_workers=%d", len(items), method, workers
    )
    return parallel_execute(
        _differentiate_one,
        [(s, method, kwargs) for s in items],
        n_workers=workers,
    )
