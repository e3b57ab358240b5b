# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

"""Tensor addition example for tensorlet.

Builds a ``(2, 2, 3)`` tensor with the values 1..12, a second tensor shaped
like it and filled with 30, and prints both operands followed by their sum.
"""

from __future__ import annotations

import tensorlet as tl


def build_operands(fill_value: float = 30.0):
    """Return the two named operands used by the example."""

    x = tl.tensor([float(i) for i in range(1, 13)], [2, 2, 3], name="x")
    y = tl.full_like(x, fill_value, name="y")
    return x, y


def run(verbose: bool = True) -> tl.Tensor:
    """Add the example operands, printing them when ``verbose`` is set.

    Returns
    -------
    Tensor
        The element-wise sum ``x + y``.
    """

    x, y = build_operands()
    result = x.add(y)
    if verbose:
        print(x)
        print(y)
        print(result)
    return result


def main():  # pragma: no cover - example script
    run(verbose=True)


if __name__ == "__main__":  # pragma: no cover - example script
    main()
