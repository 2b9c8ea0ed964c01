"""Tests for tabderiv.utils.validate."""

import numpy as np
import pytest

from tabderiv.config import IngestConfig
from tabderiv.errors import (
    DegenerateIntervalError,
    InsufficientSamplesError,
    NonFiniteSampleError,
)
from tabderiv.utils.validate import (
    parse_xy_table,
    require_increasing_window,
    require_min_samples,
    require_positive_order,
    validate_sample_arrays,
)


def test_validate_sample_arrays_returns_fresh_float_arrays():
    """Inputs are converted to new float64 arrays."""
    t_in = np.array([0, 1, 2])
    t, f = validate_sample_arrays(t_in, [1, 2, 3])
    assert t.dtype == np.float64 and f.dtype == np.float64
    assert not np.shares_memory(t, t_in)


def test_validate_sample_arrays_accepts_empty():
    """Empty inputs pass; operations decide their own minimum."""
    t, f = validate_sample_arrays([], [])
    assert t.size == 0 and f.size == 0


def test_validate_sample_arrays_default_config_is_strict():
    """Without a config both checks are on."""
    with pytest.raises(NonFiniteSampleError):
        validate_sample_arrays([0.0, 1.0], [np.inf, 0.0])
    with pytest.raises(DegenerateIntervalError):
        validate_sample_arrays([0.0, 0.0], [0.0, 0.0])


def test_validate_sample_arrays_default_is_built_per_call(monkeypatch):
    """Each call without a config gets its own strict IngestConfig."""
    import tabderiv.config
    import tabderiv.utils.validate as validate

    assert not hasattr(tabderiv.config, "DEFAULT_INGEST_CONFIG")
    built = []

    class RecordingConfig(IngestConfig):
        def __init__(self, *args, **kwargs):
            super().__init__(*args, **kwargs)
            built.append(self)

    monkeypatch.setattr(validate, "IngestConfig", RecordingConfig)
    validate_sample_arrays([0.0, 1.0], [0.0, 1.0])
    built[0].check_finite = False
    with pytest.raises(NonFiniteSampleError):
        validate_sample_arrays([0.0, 1.0], [np.nan, 0.0])
    assert len(built) == 2 and built[0] is not built[1]


def test_validate_sample_arrays_min_spacing_is_strict():
    """A spacing equal to the floor is rejected."""
    with pytest.raises(DegenerateIntervalError):
        validate_sample_arrays([0.0, 0.5], [0.0, 0.0], IngestConfig(min_spacing=0.5))


def test_parse_xy_table_layouts():
    """Column and row layouts are both recognised."""
    cols = np.array([[0.0, 1.0], [1.0, 2.0], [2.0, 5.0]])
    t, f = parse_xy_table(cols)
    assert t.tolist() == [0.0, 1.0, 2.0]
    assert f.tolist() == [1.0, 2.0, 5.0]
    t, f = parse_xy_table(cols.T)
    assert t.tolist() == [0.0, 1.0, 2.0]


def test_parse_xy_table_rejects_non_2d():
    """A 1D table is not a table."""
    with pytest.raises(ValueError, match="2D"):
        parse_xy_table([1.0, 2.0, 3.0])


def test_require_min_samples():
    """The error records what was required and received."""
    require_min_samples(3, 3, where="x")
    with pytest.raises(InsufficientSamplesError, match=r"\[x\] needs at least 3 samples; got 2"):
        require_min_samples(2, 3, where="x")


def test_require_increasing_window():
    """Only strictly increasing windows pass."""
    require_increasing_window(0.0, 1e-12, 1.0)
    with pytest.raises(DegenerateIntervalError):
        require_increasing_window(0.0, 1.0, 1.0)


@pytest.mark.parametrize("order", [1, 7, np.int32(3)])
def test_require_positive_order_accepts(order):
    """Python and NumPy integers are accepted and returned as int."""
    out = require_positive_order(order)
    assert out == order and type(out) is int


@pytest.mark.parametrize("order", [0, -2, 2.0, None, False])
def test_require_positive_order_rejects(order):
    """Zero, negatives, floats, None and booleans are rejected."""
    with pytest.raises(ValueError):
        require_positive_order(order)
