# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Dense single-precision tensor backed by a flat NumPy buffer.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence as SequenceABC
from numbers import Integral, Real
from typing import Any, List, Optional, Sequence, Tuple, Union

import numpy as np

from .errors import ShapeMismatchError

logger = logging.getLogger(__name__)

DTYPE = np.float32

# Label carried by tensors created without an explicit name.
PLACEHOLDER_NAME = "?"

ShapeLike = Union[int, Sequence[int]]


def _normalize_shape(shape: Any) -> Tuple[int, ...]:
    """Validate ``shape`` and return it as a tuple of non-negative ints."""

    if isinstance(shape, np.ndarray):
        shape = shape.tolist()
    if isinstance(shape, (bool, np.bool_)):
        raise ValueError(f"shape must be an int or a sequence of ints, got {shape!r}")
    if isinstance(shape, Integral):
        shape = (shape,)
    elif not isinstance(shape, SequenceABC) or isinstance(shape, (str, bytes)):
        raise ValueError(f"shape must be an int or a sequence of ints, got {shape!r}")

    dims = []
    for dim in shape:
        if isinstance(dim, (bool, np.bool_)) or not isinstance(dim, Integral):
            raise ValueError(f"shape dimensions must be integers, got {dim!r}")
        if dim < 0:
            raise ValueError(f"shape dimensions must be non-negative, got {dim}")
        dims.append(int(dim))
    return tuple(dims)


def _unpack_shape(shape: Tuple[Any, ...]) -> Any:
    """Accept both ``f(2, 3)`` and ``f((2, 3))`` call styles."""

    if len(shape) == 1 and isinstance(shape[0], (SequenceABC, np.ndarray)):
        return shape[0]
    return list(shape)


def size_of(shape: Sequence[int]) -> int:
    """Number of elements described by ``shape``.

    The empty shape denotes the empty tensor and therefore holds no elements.
    """

    if len(shape) == 0:
        return 0
    return math.prod(shape)


class Tensor:
    """
    A dense multi-dimensional array of ``float32`` values.

    The elements live in a flat, contiguous buffer interpreted row-major
    through ``shape``. Construction verifies that the buffer length matches
    the size declared by the shape; the activation methods rewrite the buffer
    in place, while :meth:`add` produces a new tensor.
    """

    @classmethod
    def _from_buffer(
        cls, buffer: np.ndarray, shape: Tuple[int, ...], name: Optional[str] = None
    ) -> "Tensor":
        """Wrap an already validated float32 ``buffer`` without copying it."""

        instance = cls.__new__(cls)
        instance._data = buffer
        instance._shape = shape
        instance.name = PLACEHOLDER_NAME if name is None else name
        return instance

    def __init__(self, data: Any, shape: ShapeLike, name: Optional[str] = None):
        """
        Initialize a tensor from a flat element sequence and a shape.

        Args:
            data: Element values in row-major order (list, tuple, NumPy array
                or another ``Tensor``). Nested input is flattened.
            shape: Dimension extents. ``()`` declares the empty tensor.
            name: Display label, defaults to :data:`PLACEHOLDER_NAME`.

        Raises:
            ShapeMismatchError: The number of elements differs from the size
                declared by ``shape``.

        Examples:
            >>> t1 = Tensor([1, 2, 3, 4], (2, 2))
            >>> t2 = Tensor(range(12), [2, 2, 3], name="x")
        """
        dims = _normalize_shape(shape)
        if isinstance(data, Tensor):
            buffer = data._data.copy()
        else:
            if not isinstance(data, (np.ndarray, list, tuple)):
                data = list(data)
            buffer = np.array(data, dtype=DTYPE).reshape(-1)

        expected = size_of(dims)
        if buffer.size != expected:
            logger.debug(
                "Rejected %d elements for shape %s (size %d)",
                buffer.size,
                dims,
                expected,
            )
            raise ShapeMismatchError(
                f"Shape {dims} declares {expected} elements but {buffer.size} were given",
                expected=expected,
                actual=buffer.size,
            )

        self._data = buffer
        self._shape = dims
        self.name = PLACEHOLDER_NAME if name is None else name

    # Core properties
    @property
    def shape(self) -> Tuple[int, ...]:
        """Get tensor shape as tuple."""
        return self._shape

    @property
    def dtype(self) -> str:
        """Get tensor data type."""
        return "float32"

    @property
    def size(self) -> int:
        """Total number of elements."""
        return size_of(self._shape)

    @property
    def ndim(self) -> int:
        """Number of dimensions."""
        return len(self._shape)

    @property
    def data(self) -> np.ndarray:
        """Read-only view of the flat element buffer."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    def numel(self) -> int:
        """Get total number of elements."""
        return self.size

    def dim(self) -> int:
        """Get number of dimensions."""
        return self.ndim

    # Data conversion methods
    def numpy(self) -> np.ndarray:
        """Copy the elements into a NumPy array of this tensor's shape."""
        if not self._shape:
            return self._data.copy()
        return self._data.reshape(self._shape).copy()

    def __array__(self, dtype: Optional[Any] = None, copy: Optional[bool] = None) -> np.ndarray:
        """Support NumPy's array protocol.

        The buffer is always copied, so ``copy=False`` is refused.
        """
        if copy is False:
            raise ValueError("Tensor cannot be exposed to NumPy without a copy")
        array = self.numpy()
        if dtype is not None:
            return array.astype(dtype, copy=False)
        return array

    def tolist(self) -> List[float]:
        """Return the elements in buffer order as Python floats."""
        return self._data.tolist()

    def clone(self) -> "Tensor":
        """Create a copy of the tensor, including its name."""
        return self._from_buffer(self._data.copy(), self._shape, self.name)

    # Elementwise activations, applied in place
    def relu(self) -> None:
        """Replace every element ``e`` with ``max(e, 0)``."""
        data = self._data
        np.copyto(data, np.where(data > 0, data, DTYPE(0)))

    def relu_threshold(self, upper_bound: float) -> None:
        """ReLU followed by clamping every element from above to ``upper_bound``.

        ``upper_bound`` is not validated: a negative bound turns every element
        into ``upper_bound``.
        """
        bound = DTYPE(upper_bound)
        data = self._data
        unclamped = np.where(data > 0, data, DTYPE(0))
        np.copyto(data, np.where(unclamped > bound, bound, unclamped))

    def relu6(self) -> None:
        """ReLU clamped to ``[0, 6]``."""
        self.relu_threshold(6.0)

    def sigmoid(self) -> None:
        """Logistic function ``1 / (1 + exp(-e))`` evaluated in float32."""
        data = self._data
        with np.errstate(over="ignore"):
            np.copyto(data, DTYPE(1) / (DTYPE(1) + np.exp(-data)))

    # Binary operations
    def add(self, other: "Tensor") -> "Tensor":
        """Element-wise sum of two tensors of identical shape.

        Raises:
            ShapeMismatchError: ``other.shape`` differs from ``self.shape``.
        """
        if not isinstance(other, Tensor):
            raise TypeError(f"add requires another Tensor, got {type(other).__name__}")
        if self._shape != other._shape:
            logger.debug("Cannot add shapes %s and %s", self._shape, other._shape)
            raise ShapeMismatchError(
                f"Shape mismatch in add: {self._shape} vs {other._shape}",
                expected=self._shape,
                actual=other._shape,
            )
        return self._from_buffer(self._data + other._data, self._shape)

    def __add__(self, other: object) -> "Tensor":
        if not isinstance(other, Tensor):
            return NotImplemented
        return self.add(other)

    # Comparison utilities
    def array_equal(self, other: "Tensor") -> bool:
        """Check if tensors have the same shape and exactly equal elements."""
        return self._shape == other._shape and bool(
            np.array_equal(self._data, other._data)
        )

    def allclose(self, other: "Tensor", rtol: float = 1e-5, atol: float = 1e-8) -> bool:
        """Check if all elements are close within tolerance."""
        if self._shape != other._shape:
            return False
        return bool(np.allclose(self._data, other._data, rtol=rtol, atol=atol))

    # String representations
    def __repr__(self) -> str:
        return f"Tensor(name={self.name!r}, shape={self._shape})"

    def __str__(self) -> str:
        from .display import format_tensor

        return format_tensor(self)

    def __len__(self) -> int:
        if not self._shape:
            raise TypeError("len() of an empty tensor")
        return self._shape[0]

    # Static tensor creation methods
    @staticmethod
    def ones(*shape: ShapeLike, name: Optional[str] = None) -> "Tensor":
        """Create a tensor filled with ones."""
        return Tensor.full(_unpack_shape(shape), 1.0, name=name)

    @staticmethod
    def full(shape: ShapeLike, fill_value: Real, name: Optional[str] = None) -> "Tensor":
        """Create a tensor filled with a specific value."""
        dims = _normalize_shape(shape)
        buffer = np.full(size_of(dims), fill_value, dtype=DTYPE)
        return Tensor._from_buffer(buffer, dims, name)

    @staticmethod
    def empty(name: Optional[str] = None) -> "Tensor":
        """Create the empty tensor: no dimensions and no elements."""
        return Tensor._from_buffer(np.empty(0, dtype=DTYPE), (), name)

    @staticmethod
    def full_like(
        reference: "Tensor", fill_value: Real, name: Optional[str] = None
    ) -> "Tensor":
        """Create a tensor shaped like ``reference`` filled with ``fill_value``."""
        if not isinstance(reference, Tensor):
            raise TypeError(
                f"full_like requires a Tensor reference, got {type(reference).__name__}"
            )
        return Tensor.full(reference.shape, fill_value, name=name)

    @staticmethod
    def from_numpy(array: np.ndarray, name: Optional[str] = None) -> "Tensor":
        """Create a tensor from a NumPy array, copying its data as float32."""
        array = np.asarray(array)
        buffer = array.astype(DTYPE).reshape(-1)
        if array.ndim == 0:
            return Tensor._from_buffer(buffer, (1,), name)
        return Tensor._from_buffer(buffer, _normalize_shape(array.shape), name)


# Export all public symbols
__all__ = [
    "Tensor",
    "PLACEHOLDER_NAME",
    "size_of",
]
