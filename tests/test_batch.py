"""Tests for tabderiv.batch and tabderiv.utils.concurrency."""

import numpy as np
import pytest

from tabderiv.batch import differentiate_many
from tabderiv.errors import InsufficientSamplesError
from tabderiv.finite.first_order import first_order, nth_order
from tabderiv.series import SampleSeries
from tabderiv.time_shift import first_order_time_shifted
from tabderiv.utils import concurrency as conc


def _series(k):
    t = np.linspace(0.0, 1.0 + k, 20 + k)
    return SampleSeries(t, np.sin(t) * (k + 1))


def test_serial_results_in_order():
    """Each input gets its own result, in input order."""
    items = [_series(k) for k in range(4)]
    results = differentiate_many(items)
    for s, r in zip(items, results):
        np.testing.assert_array_equal(r.d, first_order(s).d)


def test_kwargs_and_method_forwarded():
    """Method and engine keywords apply to every series."""
    items = [_series(k) for k in range(3)]
    second = differentiate_many(items, order=2)
    shifted = differentiate_many(items, method="time-shifted")
    for s, a, b in zip(items, second, shifted):
        np.testing.assert_array_equal(a.d, nth_order(s, 2).d)
        np.testing.assert_array_equal(b.d, first_order_time_shifted(s).d)


def test_empty_input():
    """No series, no work."""
    assert differentiate_many([]) == []


def test_failure_is_atomic():
    """One short series fails the whole batch."""
    items = [_series(0), SampleSeries([0.0], [1.0]), _series(1)]
    with pytest.raises(InsufficientSamplesError):
        differentiate_many(items)


@pytest.mark.parallel
def test_parallel_matches_serial(extra_threads_ok):
    """Threaded runs over a shared series give the serial answers."""
    if not extra_threads_ok:
        pytest.skip("cannot spawn threads in this environment")
    shared = _series(2)
    items = [shared] * 6 + [_series(k) for k in range(4)]
    serial = [first_order(s).d for s in items]
    threaded = differentiate_many(items, n_workers=4)
    for a, b in zip(serial, threaded):
        np.testing.assert_array_equal(a, b.d)


@pytest.mark.parallel
def test_env_var_sets_default_workers(monkeypatch, extra_threads_ok):
    """TABDERIV_NUM_WORKERS is used when n_workers is None."""
    if not extra_threads_ok:
        pytest.skip("cannot spawn threads in this environment")
    seen = {}
    orig = conc.parallel_execute

    def _spy(worker, arg_tuples, *, n_workers=1):
        seen["n_workers"] = n_workers
        return orig(worker, arg_tuples, n_workers=n_workers)

    monkeypatch.setattr("tabderiv.batch.parallel_execute", _spy)
    monkeypatch.setenv(conc.WORKERS_ENV_VAR, "3")
    differentiate_many([_series(k) for k in range(5)])
    assert seen["n_workers"] == 3
    differentiate_many([_series(0), _series(1)])
    assert seen["n_workers"] == 2


@pytest.mark.parametrize(
    "value, expected",
    [(None, 1), ("4", 4), (2.9, 2), (-3, 1), (0, 1), ("x", 1)],
)
def test_normalize_workers(value, expected):
    """Worker counts are coerced to a positive integer."""
    assert conc.normalize_workers(value) == expected


def test_cap_workers():
    """Workers never exceed the number of tasks."""
    assert conc.cap_workers(8, 3) == 3
    assert conc.cap_workers(2, 0) == 1
    assert conc.cap_workers(None, 5) == 1


@pytest.mark.parametrize("raw, expected", [(None, 1), ("", 1), ("abc", 1), ("-2", 1), ("6", 6)])
def test_default_workers_from_env(monkeypatch, raw, expected):
    """Invalid or missing environment values fall back to serial."""
    if raw is None:
        monkeypatch.delenv(conc.WORKERS_ENV_VAR, raising=False)
    else:
        monkeypatch.setenv(conc.WORKERS_ENV_VAR, raw)
    assert conc.default_workers() == expected


def test_parallel_execute_serial_and_threaded():
    """parallel_execute keeps order on both paths."""
    args = [(i, i + 1) for i in range(10)]
    expected = [a * b for a, b in args]
    assert conc.parallel_execute(lambda a, b: a * b, args) == expected
    assert conc.parallel_execute(lambda a, b: a * b, args, n_workers=3) == expected
