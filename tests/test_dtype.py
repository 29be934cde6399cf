from __future__ import annotations

import numpy as np
import pytest

from dense_graph._dtypes import VALID_BASE_TYPES, DType


@pytest.mark.parametrize("size", [None, 2])
@pytest.mark.parametrize("base", VALID_BASE_TYPES.keys())
def test_dtype(base: str, size: int | None) -> None:
    if size is None:
        dtype = DType(base)
    else:
        dtype = DType(f"{base}[{size}]")
    assert dtype.base == base
    assert dtype.size == size
    assert dtype.is_array == (size is not None)
    assert dtype.shape == ((size,) if size else ())
    numpy_base = np.dtype(VALID_BASE_TYPES[base])
    assert dtype.base_numpy_type == numpy_base

    zero = dtype.zero()
    assert np.shape(zero) == dtype.shape
    assert np.all(zero == 0)

    data = dtype.empty(5)
    assert data.shape == (5, *dtype.shape)
    assert data.dtype == numpy_base


def test_coerce_scalar() -> None:
    value = DType("int32").coerce(7.0)
    assert isinstance(value, np.int32)
    assert value == 7

    value = DType("double").coerce(0.5)
    assert isinstance(value, np.float64)


def test_coerce_array() -> None:
    dtype = DType("float[3]")
    source = [1.0, 2.0, 3.0]
    value = dtype.coerce(source)
    assert value.dtype == np.float32
    np.testing.assert_array_equal(value, source)

    # coerced arrays never alias the input
    source_array = np.array(source, dtype=np.float32)
    value = dtype.coerce(source_array)
    source_array[0] = 10.0
    assert value[0] == 1.0

    copied = dtype.copy_value(value)
    copied[1] = 20.0
    assert value[1] == 2.0


def test_coerce_wrong_shape() -> None:
    with pytest.raises(ValueError, match="Expected value of shape"):
        DType("double[3]").coerce([1.0, 2.0])


def test_bad_dtype() -> None:
    with pytest.raises(ValueError, match="Invalid dtype string"):
        DType("not-a-valid-dtype")
    with pytest.raises(ValueError, match="Invalid dtype string"):
        DType("double[]")
