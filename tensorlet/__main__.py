# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Command line demo: ``python -m tensorlet``.

Builds a ``(2, 2, 3)`` tensor holding 1..12, a second tensor of the same
shape filled with a constant, and prints both along with their sum.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .errors import ShapeMismatchError
from .tensor import Tensor

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tensorlet", description="Add two small tensors and print them."
    )
    parser.add_argument(
        "--fill",
        type=float,
        default=30.0,
        help="Value used to fill the second operand (default: 30.0)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    x = Tensor([float(i) for i in range(1, 13)], (2, 2, 3), name="x")
    y = Tensor.full_like(x, args.fill, name="y")
    logger.info("Built operands %r and %r", x, y)

    print(x)
    print(y)

    try:
        result = x.add(y)
    except ShapeMismatchError as exc:
        logger.error("Addition failed: %s", exc)
        return 1
    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
