"""Provides the TimeShiftedDerivative class."""

from tabderiv.series import DerivativeSeries, SampleSeries
from tabderiv.time_shift.core import time_shifted


class TimeShiftedDerivative:
    """Computes time-shift corrected derivatives of a sampled series.

    Each estimate comes from three consecutive samples and is located at the
    middle one, so the result is two samples shorter than the input. Only
    first and second order are available.

    Attributes:
        series: The sample series to differentiate.
    """

    def __init__(self, series: SampleSeries) -> None:
        """Initialises the engine with the series to differentiate."""
        self.series = series

    def differentiate(self, order: int = 1) -> DerivativeSeries:
        """Computes the first- or second-order time-shifted derivative.

        Args:
            order: 1 or 2. Default is 1.

        Returns:
            A :class:`DerivativeSeries` located at ``series.t[1:-1]``.

        Raises:
            ValueError: If ``order`` is not 1 or 2.
            InsufficientSamplesError: If the series has fewer than 3 samples.
            DegenerateIntervalError: If some window is not strictly increasing.
        """
        return time_shifted(self.series, order)
