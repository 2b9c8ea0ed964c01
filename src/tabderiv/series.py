"""Read-only containers for sampled data and derivative estimates.

A :class:`SampleSeries` holds ``n`` samples ``(t[i], f[i])`` with strictly
increasing ``t``. The checks run once, at construction; every operation in
tabderiv takes a series as given and returns a new one.

A :class:`DerivativeSeries` is a :class:`SampleSeries` whose values are
derivative estimates. Because it is a sample series, it can be passed back
into any operation, which is how repeated derivatives are built.

Examples:
--------
>>> from tabderiv.series import SampleSeries
>>> s = SampleSeries([0.0, 1.0, 2.0], [0.0, 1.0, 4.0], t_unit="s", f_unit="m")
>>> len(s)
3
>>> s[1]
(1.0, 1.0)
"""

from __future__ import annotations

import numbers
from typing import Iterator, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from tabderiv.config import IngestConfig
from tabderiv.errors import UnitMismatchError
from tabderiv.utils.validate import parse_xy_table, validate_sample_arrays

__all__ = ["SampleSeries", "DerivativeSeries", "derivative_unit"]


def derivative_unit(f_unit: str | None, t_unit: str | None) -> str | None:
    """Returns the unit tag of ``df/dt`` given the tags of ``f`` and ``t``.

    Returns ``None`` unless both tags are known.
    """
    if f_unit is None or t_unit is None:
        return None
    return f"{f_unit}/{t_unit}"


def _frozen(arr: NDArray[np.float64]) -> NDArray[np.float64]:
    arr.flags.writeable = False
    return arr


class SampleSeries:
    """Fixed-length, read-only series of ``(t, f)`` samples.

    Attributes:
        t: Independent-variable values, strictly increasing, read-only.
        f: Dependent-variable values, read-only.
        t_unit: Optional unit tag of ``t`` (e.g. ``"s"``).
        f_unit: Optional unit tag of ``f`` (e.g. ``"m"``).
    """

    __slots__ = ("_t", "_f", "t_unit", "f_unit")

    def __init__(
        self,
        t: ArrayLike,
        f: ArrayLike,
        *,
        t_unit: str | None = None,
        f_unit: str | None = None,
        config: IngestConfig | None = None,
    ) -> None:
        """Builds a series from caller data, validating it once.

        Args:
            t: 1D array-like of strictly increasing independent values.
            f: 1D array-like of dependent values, same length as ``t``.
            t_unit: Optional unit tag for ``t``.
            f_unit: Optional unit tag for ``f``.
            config: Ingestion checks; see :class:`~tabderiv.config.IngestConfig`.

        Raises:
            ValueError: If the inputs are not matching 1D arrays.
            NonFiniteSampleError: If a value is NaN or infinite.
            DegenerateIntervalError: If ``t`` is not strictly increasing.
        """
        t_arr, f_arr = validate_sample_arrays(t, f, config)
        self._t = _frozen(t_arr)
        self._f = _frozen(f_arr)
        self.t_unit = t_unit
        self.f_unit = f_unit

    @classmethod
    def _trusted(cls, t, f, *, t_unit=None, f_unit=None, **extra):
        """Wraps arrays produced inside tabderiv without re-running ingestion checks."""
        obj = cls.__new__(cls)
        obj._t = _frozen(np.array(t, dtype=np.float64))
        obj._f = _frozen(np.array(f, dtype=np.float64))
        obj.t_unit = t_unit
        obj.f_unit = f_unit
        for name, value in extra.items():
            setattr(obj, name, value)
        return obj

    @classmethod
    def from_pairs(cls, pairs: Sequence[tuple[float, float]], **kwargs) -> SampleSeries:
        """Builds a series from a sequence of ``(t, f)`` pairs.

        Keyword arguments are forwarded to the constructor.
        """
        arr = np.asarray(list(pairs), dtype=float)
        if arr.size == 0:
            return cls([], [], **kwargs)
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise ValueError(f"pairs must be a sequence of (t, f) pairs; got shape {arr.shape}.")
        return cls(arr[:, 0], arr[:, 1], **kwargs)

    @classmethod
    def from_table(cls, table: ArrayLike, **kwargs) -> SampleSeries:
        """Builds a series from a 2D ``(N, 2)`` or ``(2, N)`` table.

        Keyword arguments are forwarded to the constructor.
        """
        t, f = parse_xy_table(table)
        return cls(t, f, **kwargs)

    @property
    def t(self) -> NDArray[np.float64]:
        return self._t

    @property
    def f(self) -> NDArray[np.float64]:
        return self._f

    def __len__(self) -> int:
        return int(self._t.shape[0])

    def __getitem__(self, i: int) -> tuple[float, float]:
        """Returns sample ``i`` as a ``(t, f)`` tuple.

        Only integer indices are accepted, negative ones counting from the
        end. Slice ``series.t`` and ``series.f`` for ranges of samples.

        Raises:
            TypeError: If ``i`` is not an integer.
            IndexError: If ``i`` is out of range.
        """
        if isinstance(i, bool) or not isinstance(i, numbers.Integral):
            raise TypeError(
                f"SampleSeries indices must be integers, not {type(i).__name__}; "
                "slice .t and .f instead."
            )
        return float(self._t[i]), float(self._f[i])

    def __iter__(self) -> Iterator[tuple[float, float]]:
        for ti, fi in zip(self._t, self._f):
            yield float(ti), float(fi)

    def as_pairs(self) -> list[tuple[float, float]]:
        """Returns the samples as a list of ``(t, f)`` tuples."""
        return list(self)

    def require_units(self, t_unit: str | None = None, f_unit: str | None = None) -> None:
        """Checks the unit tags at a call boundary.

        Only the tags that are requested are compared. An untagged series
        fails any requested check.

        Raises:
            UnitMismatchError: If a requested tag differs from the stored one.
        """
        for axis, expected, actual in (("t", t_unit, self.t_unit), ("f", f_unit, self.f_unit)):
            if expected is not None and expected != actual:
                raise UnitMismatchError(
                    f"expected {axis} in {expected!r}; series is tagged {actual!r}."
                )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(n={len(self)}, "
            f"t_unit={self.t_unit!r}, f_unit={self.f_unit!r})"
        )


class DerivativeSeries(SampleSeries):
    """Series of derivative estimates ``(t, d)``.

    Attributes:
        order: Total derivative order with respect to the original raw samples.
    """

    __slots__ = ("order",)

    def __init__(self, t: ArrayLike, d: ArrayLike, *, order: int = 1, **kwargs) -> None:
        super().__init__(t, d, **kwargs)
        self.order = int(order)

    @classmethod
    def of(
        cls,
        source: SampleSeries,
        t: NDArray[np.float64],
        d: NDArray[np.float64],
        *,
        passes: int = 1,
    ) -> DerivativeSeries:
        """Wraps a derivative of ``source`` computed inside tabderiv.

        ``passes`` is how many orders the values lie above ``source``.
        """
        f_unit = source.f_unit
        for _ in range(passes):
            f_unit = derivative_unit(f_unit, source.t_unit)
        return cls._trusted(
            t,
            d,
            t_unit=source.t_unit,
            f_unit=f_unit,
            order=getattr(source, "order", 0) + passes,
        )

    @property
    def d(self) -> NDArray[np.float64]:
        return self._f

    def __repr__(self) -> str:
        return (
            f"DerivativeSeries(n={len(self)}, order={self.order}, "
            f"t_unit={self.t_unit!r}, f_unit={self.f_unit!r})"
        )
