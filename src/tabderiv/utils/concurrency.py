"""Concurrency helpers for running independent derivative computations."""

from __future__ import annotations

import contextvars
import os
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Sequence, Tuple

__all__ = [
    "WORKERS_ENV_VAR",
    "default_workers",
    "normalize_workers",
    "cap_workers",
    "parallel_execute",
]

WORKERS_ENV_VAR = "TABDERIV_NUM_WORKERS"


def _int_env(name: str) -> int | None:
    """Reads a positive integer from an environment variable, or None if unset/invalid.

    Args:
        name: Environment variable name.

    Returns:
        Positive integer value, or None.
    """
    v = os.getenv(name)
    if not v:
        return None
    try:
        i = int(v)
        return i if i > 0 else None
    except ValueError:
        return None


def default_workers() -> int:
    """Returns the worker count used when a caller passes ``n_workers=None``.

    Reads ``TABDERIV_NUM_WORKERS``; falls back to 1 (serial).
    """
    return _int_env(WORKERS_ENV_VAR) or 1


def normalize_workers(
    n_workers: Any
) -> int:
    """Ensures n_workers is a positive integer, defaulting to 1.

    Args:
        n_workers: Input number of workers (can be None, float, negative, etc.)

    Returns:
        int: A positive integer number of workers (at least 1).
    """
    try:
        n = int(n_workers)
    except (TypeError, ValueError):
        n = 1
    return 1 if n < 1 else n


def cap_workers(n_workers: Any, n_tasks: int) -> int:
    """Caps workers by the number of tasks; ensures at least 1."""
    n = normalize_workers(n_workers)
    if n_tasks <= 0:
        return 1
    return max(1, min(n, int(n_tasks)))


def parallel_execute(
    worker: Callable[..., Any],
    arg_tuples: Sequence[Tuple[Any, ...]],
    *,
    n_workers: int = 1,
) -> list[Any]:
    """Runs ``worker(*args)`` for each tuple in arg_tuples, in order.

    With ``n_workers > 1`` the calls run on a thread pool; each task gets its
    own copy of the current context. Results keep the order of
    ``arg_tuples``. The first exception raised by a task propagates.
    """
    if n_workers > 1:
        with ThreadPoolExecutor(max_workers=n_workers) as ex:
            futures = []
            for args in arg_tuples:
                ctx = contextvars.copy_context()
                futures.append(ex.submit(ctx.run, worker, *args))
            return [f.result() for f in futures]
    return [worker(*args) for args in arg_tuples]
