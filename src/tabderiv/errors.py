"""Exceptions raised by tabderiv.

Every error derives from :class:`SeriesError` and also from the built-in
exception a caller would naturally catch (``ValueError`` or ``IndexError``),
so ``except ValueError`` keeps working for code that does not know about
tabderiv.
"""

from __future__ import annotations

__all__ = [
    "SeriesError",
    "InsufficientSamplesError",
    "DegenerateIntervalError",
    "IndexOutOfRangeError",
    "NonFiniteSampleError",
    "UnitMismatchError",
]


class SeriesError(Exception):
    """Base class for all tabderiv errors."""


class InsufficientSamplesError(SeriesError, ValueError):
    """Raises when a series is shorter than an operation requires.

    Attributes:
        required: Minimum number of samples the operation needs.
        received: Number of samples actually supplied.
    """

    def __init__(self, required: int, received: int, *, where: str = "series"):
        self.required = int(required)
        self.received = int(received)
        super().__init__(
            f"[{where}] needs at least {self.required} samples; got {self.received}."
        )


class DegenerateIntervalError(SeriesError, ValueError):
    """Raises when a required interval of the independent variable is not positive.

    Attributes:
        index: Index of the left sample of the offending interval, if known.
    """

    def __init__(self, message: str, *, index: int | None = None):
        self.index = index
        super().__init__(message)


class IndexOutOfRangeError(SeriesError, IndexError):
    """Raises when a difference scheme is evaluated outside its valid index range."""


class NonFiniteSampleError(SeriesError, ValueError):
    """Raises when a series contains NaN or infinite values."""


class UnitMismatchError(SeriesError, ValueError):
    """Raises when a series does not carry the expected unit tags."""
