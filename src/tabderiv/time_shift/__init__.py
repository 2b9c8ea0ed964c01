"""Time-shift corrected derivative estimates for unevenly sampled series."""

from .core import (
    first_order_time_shifted,
    second_order_time_shifted,
    time_shifted,
    time_shifted_first,
    time_shifted_second,
)

__all__ = [
    "time_shifted_first",
    "time_shifted_second",
    "first_order_time_shifted",
    "second_order_time_shifted",
    "time_shifted",
]
