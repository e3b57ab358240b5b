# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

import tensorlet as tl
from tensorlet.display import EMPTY_MARKER, format_element, format_tensor
from tensorlet.tensor import Tensor


def test_format_tensor_header_and_elements():
    x = Tensor([float(i) for i in range(1, 13)], [2, 2, 3], name="x")
    assert str(x) == (
        "[Tensor:size=12,shape=2, 2, 3] 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12"
    )


def test_format_tensor_fractional_values():
    t = Tensor([0.5, -1.25, 0.1], (3,))
    assert format_tensor(t) == "[Tensor:size=3,shape=3] 0.5, -1.25, 0.1"


def test_format_empty_tensor():
    assert str(tl.empty()) == EMPTY_MARKER == "(Empty)"


def test_format_zero_sized_dimension():
    assert str(tl.full((4, 0), 1.0)) == "(Empty)"


def test_format_element_non_finite():
    assert format_element(float("inf")) == "inf"
    assert format_element(float("nan")) == "nan"


def test_format_does_not_mutate():
    t = Tensor([-1.0, 2.0], (2,))
    str(t)
    assert t.tolist() == [-1.0, 2.0]


def test_repr_includes_name_and_shape():
    t = tl.ones(2, 3, name="w")
    assert repr(t) == "Tensor(name='w', shape=(2, 3))"
