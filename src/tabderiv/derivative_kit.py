"""Provides the SeriesDerivativeKit API.

This class is a lightweight front end over tabderiv's derivative engines.
You provide the sampled series, then choose an engine by name (e.g.
``"finite"`` or ``"time-shifted"``).

Adding methods
--------------
New engines can be registered without modifying this class by calling
``register_method`` (see example below).

Examples:
    Basic usage:

        >>> from tabderiv.derivative_kit import SeriesDerivativeKit
        >>> kit = SeriesDerivativeKit.from_arrays([0.0, 1.0, 3.0], [0.0, 1.0, 9.0])
        >>> kit.differentiate(method="time-shifted").d.tolist()
        [2.0]

    Registering a new method:

        >>> from tabderiv.derivative_kit import register_method
        >>> from mypackage.savgol import SavGolDerivative  # doctest: +SKIP
        >>> register_method(
        ...     name="savgol",
        ...     cls=SavGolDerivative,
        ...     aliases=("savitzky-golay", "sg"),
        ... )  # doctest: +SKIP

Notes:
    - Method names are case/spacing/punctuation insensitive.
    - For available canonical method names at runtime, call
      ``available_methods()``.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Any, Iterable, Mapping, Protocol, Type

from numpy.typing import ArrayLike

from tabderiv.finite.finite_difference import FiniteDifferenceDerivative
from tabderiv.logger import tabderiv_logger
from tabderiv.series import DerivativeSeries, SampleSeries
from tabderiv.time_shift.time_shift_derivative import TimeShiftedDerivative


class DerivativeEngine(Protocol):
    """Protocol each derivative engine must satisfy.

    An engine is constructed from a :class:`SampleSeries` and provides a
    ``.differentiate(...)`` method returning a :class:`DerivativeSeries`.
    It serves only as a structural type check and carries no runtime
    behaviour.
    """
    def __init__(self, series: SampleSeries):
        """Initialize the engine with the series to differentiate."""
        ...
    def differentiate(self, *args: Any, **kwargs: Any) -> DerivativeSeries:
        """Compute the derivative using the engine's algorithm."""
        ...


# These are the built-in methods available in the package by default.
_METHOD_SPECS: list[tuple[str, Type[DerivativeEngine], list[str]]] = [
    ("finite", FiniteDifferenceDerivative, ["finite-difference", "fd", "first-order"]),
    ("time-shifted", TimeShiftedDerivative, ["time-shift", "time_shift", "ts"]),
]


def _norm(s: str) -> str:
    """Normalize a method string for robust matching (case/spacing/punct insensitive)."""
    return re.sub(r"[^a-z0-9]+", "", s.lower())


@lru_cache(maxsize=1)
def _method_maps() -> tuple[Mapping[str, Type[DerivativeEngine]], tuple[str, ...]]:
    """Construct and cache lookup tables for derivative methods.

    Returns:
        A pair ``(method_map, canonical_names)`` where ``method_map`` maps
        normalized names and aliases to engine classes and
        ``canonical_names`` lists the sorted canonical method names. Names
        that normalize to the same key are listed once, under the spelling
        registered first.
    """
    method_map: dict[str, Type[DerivativeEngine]] = {}
    canonical: dict[str, str] = {}
    for name, cls, aliases in _METHOD_SPECS:
        k = _norm(name)
        method_map[k] = cls
        canonical.setdefault(k, name)
        for a in aliases:
            method_map[_norm(a)] = cls
    return method_map, tuple(sorted(canonical.values()))


def register_method(
    name: str,
    cls: Type[DerivativeEngine],
    *,
    aliases: Iterable[str] = (),
) -> None:
    """Register a new derivative method.

    Adds a new derivative engine that can be referenced by name in
    :class:`SeriesDerivativeKit`. The internal cache is cleared and rebuilt
    on the next lookup.

    Args:
        name: Canonical public name of the method (e.g., "savgol").
        cls: Engine class implementing the DerivativeEngine protocol.
        aliases: Additional accepted spellings.
    """
    _METHOD_SPECS.append((name, cls, list(aliases)))
    _method_maps.cache_clear()


def _resolve(method: str) -> Type[DerivativeEngine]:
    """Resolve a user-provided method name or alias to an engine class."""
    method_map, canon = _method_maps()
    try:
        return method_map[_norm(method)]
    except KeyError:
        opts = ", ".join(canon)
        raise ValueError(f"Unknown derivative method '{method}'. Choose one of {{{opts}}}.") from None


class SeriesDerivativeKit:
    """Unified interface for differentiating a sampled series.

    Example:
        >>> from tabderiv.derivative_kit import SeriesDerivativeKit
        >>> from tabderiv.series import SampleSeries
        >>> s = SampleSeries([0.0, 1.0, 2.0, 3.0], [0.0, 1.0, 4.0, 9.0])
        >>> SeriesDerivativeKit(s).differentiate(order=2).d.tolist()
        [1.0, 1.5, 1.5, 1.0]

    Attributes:
        series: The series to differentiate.
        default_method: The backend used when no method is specified.
    """

    def __init__(self, series: SampleSeries):
        """Initializes the kit with the series to differentiate.

        Args:
            series: A validated :class:`SampleSeries`.
        """
        self.series = series
        self.default_method = "finite"

    @classmethod
    def from_arrays(cls, t: ArrayLike, f: ArrayLike, **series_kwargs: Any) -> SeriesDerivativeKit:
        """Builds the kit from raw arrays, validating them as a :class:`SampleSeries`."""
        return cls(SampleSeries(t, f, **series_kwargs))

    def differentiate(self,
                      *,
                      method: str | None = None,
                      **kwargs: Any) -> DerivativeSeries:
        """Compute derivatives using the chosen method.

        Forwards all keyword arguments to the engine's ``.differentiate()``.

        Args:
            method: Method name or alias (e.g., "finite", "fd", "time-shifted").
                Default is "finite".
            **kwargs: Passed through to the chosen engine, e.g. ``order``.

        Returns:
            The derivative series from the underlying engine.

        Raises:
            ValueError: If ``method`` is not recognized.
        """
        chosen = method or self.default_method
        Engine = _resolve(chosen)
        tabderiv_logger.debug(
            "differentiate: method=%r -> %s on %r", chosen, Engine.__name__, self.series
        )
        return Engine(self.series).differentiate(**kwargs)


def available_methods() -> list[str]:
    """List canonical method names exposed by this API."""
    _, canon = _method_maps()
    return list(canon)
