# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

import numpy as np
import pytest

import tensorlet as tl
from tensorlet.tensor import Tensor


def test_np_asarray_returns_numpy_array():
    t = Tensor([1, 2, 3, 4], (2, 2))
    arr = np.asarray(t)
    assert isinstance(arr, np.ndarray)
    assert arr.dtype == np.float32
    assert np.array_equal(arr, np.array([[1, 2], [3, 4]], dtype=np.float32))


def test_np_asarray_with_dtype():
    t = Tensor([1, 2, 3], (3,))
    arr = np.asarray(t, dtype=np.float64)
    assert arr.dtype == np.float64
    assert np.array_equal(arr, np.array([1.0, 2.0, 3.0], dtype=np.float64))


def test_numpy_returns_copy():
    t = tl.ones(2, 2)
    arr = t.numpy()
    arr[0, 0] = 9.0
    assert t.tolist() == [1.0, 1.0, 1.0, 1.0]


def test_from_numpy_infers_shape_and_casts():
    arr = np.arange(6, dtype=np.int64).reshape(2, 3)
    t = tl.from_numpy(arr)
    assert t.shape == (2, 3)
    assert t.data.dtype == np.float32
    assert t.tolist() == [0.0, 1.0, 2.0, 3.0, 4.0, 5.0]


def test_from_numpy_scalar():
    t = tl.from_numpy(np.float64(2.5))
    assert t.shape == (1,)
    assert t.tolist() == [2.5]


def test_empty_tensor_numpy():
    arr = tl.empty().numpy()
    assert arr.shape == (0,)
    assert arr.dtype == np.float32


def test_array_protocol_refuses_copy_false():
    t = tl.ones(2)
    with pytest.raises(ValueError):
        t.__array__(copy=False)
    np.testing.assert_array_equal(t.__array__(copy=True), np.ones(2, dtype=np.float32))


@pytest.mark.skipif(
    np.lib.NumpyVersion(np.__version__) < "2.0.0",
    reason="copy keyword of np.asarray requires NumPy 2",
)
def test_np_asarray_copy_false_raises():
    with pytest.raises(ValueError):
        np.asarray(tl.ones(2), copy=False)
