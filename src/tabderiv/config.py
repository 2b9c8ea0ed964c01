"""Configuration for sample-series ingestion.

This config controls the checks :class:`tabderiv.series.SampleSeries` runs
once, when a series is built from caller data. Operations downstream trust
those checks and do not repeat them.
"""

from __future__ import annotations


class IngestConfig:
    """Configuration for sample-series ingestion."""

    def __init__(
        self,
        check_finite: bool = True,
        min_spacing: float = 0.0,
    ):
        """Initialize configuration.

        Args:
            check_finite:
                If True (default), reject series whose ``t`` or ``f`` values
                contain NaN or infinities with
                :class:`~tabderiv.errors.NonFiniteSampleError`. Turning this
                off lets non-finite ``f`` values propagate through the
                arithmetic; ``t`` spacing is still checked.

            min_spacing:
                Floor on consecutive spacing. Every ``t[i+1] - t[i]`` must be
                strictly greater than this value, otherwise the series is
                rejected with :class:`~tabderiv.errors.DegenerateIntervalError`.
                The default ``0.0`` only demands strictly increasing ``t``;
                a positive floor also catches near-duplicate timestamps, which
                would otherwise produce enormous difference quotients.

        Raises:
            ValueError: If ``min_spacing`` is negative or not finite.
        """
        min_spacing = float(min_spacing)
        if not (min_spacing >= 0.0 and min_spacing != float("inf")):
            raise ValueError(f"min_spacing must be a finite, non-negative number; got {min_spacing!r}.")

        self.check_finite = bool(check_finite)
        self.min_spacing = min_spacing

    def __repr__(self) -> str:
        return f"IngestConfig(check_finite={self.check_finite}, min_spacing={self.min_spacing})"

