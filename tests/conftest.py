"""Pytest configuration with shared series builders and a thread-spawning check."""

from concurrent.futures import ThreadPoolExecutor, TimeoutError

import numpy as np
import pytest

import tabderiv.batch as batch
from tabderiv.series import SampleSeries


@pytest.fixture(scope="session")
def threads_ok():
    """Return a callable that checks thread-spawning capability.

    The returned function has signature `check(n=2, timeout=1.0) -> bool` and
    returns True if at least `n` threads can be started and joined within `timeout`.
    """
    def _can_spawn(n: int = 2, timeout: float = 1.0) -> bool:
        try:
            with ThreadPoolExecutor(max_workers=n) as ex:
                futs = [ex.submit(lambda: None) for _ in range(n)]
                for f in futs:
                    f.result(timeout=timeout)
            return True
        except (RuntimeError, MemoryError, OSError, TimeoutError):
            return False
    return _can_spawn


@pytest.fixture(scope="session")
def extra_threads_ok(threads_ok):
    """Convenience: True iff we can start >= 2 threads (common case)."""
    return threads_ok(2)


@pytest.fixture(autouse=True)
def _serial_by_default(request, monkeypatch):
    """Force serial batch runs unless the test is marked @pytest.mark.parallel."""
    if request.node.get_closest_marker("parallel"):
        return

    orig = batch.parallel_execute

    def _serial(worker, arg_tuples, *, n_workers=1):
        return orig(worker, arg_tuples, n_workers=1)

    monkeypatch.setattr(batch, "parallel_execute", _serial)


@pytest.fixture
def quadratic_series():
    """f = t**2 sampled at t = 0, 1, 2, 3."""
    return SampleSeries([0.0, 1.0, 2.0, 3.0], [0.0, 1.0, 4.0, 9.0])


@pytest.fixture
def uneven_sine_series():
    """sin(t) on a smoothly but unevenly spaced grid over [0, 2]."""
    u = np.linspace(0.0, 1.0, 101)
    t = 2.0 * (u + 0.05 * np.sin(np.pi * u))
    return SampleSeries(t, np.sin(t), t_unit="s", f_unit="m")
