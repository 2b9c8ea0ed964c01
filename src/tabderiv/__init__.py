"""Numerical derivatives of sampled series."""

from importlib.metadata import PackageNotFoundError, version

from tabderiv.batch import differentiate_many
from tabderiv.config import IngestConfig
from tabderiv.derivative_kit import SeriesDerivativeKit, available_methods, register_method
from tabderiv.errors import (
    DegenerateIntervalError,
    IndexOutOfRangeError,
    InsufficientSamplesError,
    NonFiniteSampleError,
    SeriesError,
    UnitMismatchError,
)
from tabderiv.finite import (
    backward_difference,
    central_difference,
    first_order,
    forward_difference,
    nth_order,
)
from tabderiv.finite.finite_difference import FiniteDifferenceDerivative
from tabderiv.series import DerivativeSeries, SampleSeries
from tabderiv.statistics import mean, stddev
from tabderiv.time_shift import (
    first_order_time_shifted,
    second_order_time_shifted,
    time_shifted,
)
from tabderiv.time_shift.time_shift_derivative import TimeShiftedDerivative

try:
    __version__ = version("tabderiv")
except PackageNotFoundError:
    pass

__all__ = [
    "SampleSeries",
    "DerivativeSeries",
    "IngestConfig",
    "SeriesDerivativeKit",
    "FiniteDifferenceDerivative",
    "TimeShiftedDerivative",
    "register_method",
    "available_methods",
    "differentiate_many",
    "forward_difference",
    "backward_difference",
    "central_difference",
    "first_order",
    "nth_order",
    "first_order_time_shifted",
    "second_order_time_shifted",
    "time_shifted",
    "mean",
    "stddev",
    "SeriesError",
    "InsufficientSamplesError",
    "DegenerateIntervalError",
    "IndexOutOfRangeError",
    "NonFiniteSampleError",
    "UnitMismatchError",
]
