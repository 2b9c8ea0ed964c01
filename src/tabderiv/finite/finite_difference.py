"""Provides the FiniteDifferenceDerivative class.

The user supplies the sampled series to differentiate; the order is chosen
when calling :meth:`FiniteDifferenceDerivative.differentiate`.

Examples:
--------
>>> from tabderiv.series import SampleSeries
>>> from tabderiv.finite.finite_difference import FiniteDifferenceDerivative
>>> s = SampleSeries([0.0, 1.0, 2.0, 3.0], [0.0, 1.0, 4.0, 9.0])
>>> FiniteDifferenceDerivative(s).differentiate(order=1).d.tolist()
[1.0, 2.0, 4.0, 5.0]
"""

from tabderiv.finite.first_order import nth_order
from tabderiv.series import DerivativeSeries, SampleSeries


class FiniteDifferenceDerivative:
    """Computes derivatives of a sampled series by two-point finite differences.

    Interior points use the central quotient, the first point the forward
    quotient and the last point the backward quotient. Higher orders repeat
    the first-order pass, so boundary error compounds inward with each order.

    Attributes:
        series: The sample series to differentiate.
    """

    def __init__(self, series: SampleSeries) -> None:
        """Initialises the engine with the series to differentiate.

        Arguments:
            series: Sample series with at least 2 samples.
        """
        self.series = series

    def differentiate(self, order: int = 1) -> DerivativeSeries:
        """Computes the ``order``-th derivative at every sample.

        Args:
            order: Positive integer derivative order. Default is 1.

        Returns:
            A :class:`DerivativeSeries` aligned with ``series.t``.

        Raises:
            ValueError: If ``order`` is not a positive integer.
            InsufficientSamplesError: If the series has fewer than 2 samples.
        """
        return nth_order(self.series, order)
