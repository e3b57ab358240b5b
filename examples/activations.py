# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Activation functions demo for tensorlet.

Applies relu, relu6 and sigmoid in place to copies of the same input and
prints the results.
"""

import tensorlet as tl


def demo_activations():
    """Return the input and its relu, relu6 and sigmoid transforms."""
    source = tl.tensor([-8.0, -1.0, 0.0, 0.5, 3.0, 98.0], [2, 3], name="input")

    results = {}
    for activation in ("relu", "relu6", "sigmoid"):
        out = source.clone()
        out.name = activation
        getattr(out, activation)()
        results[activation] = out
    return source, results


def main():  # pragma: no cover - example script
    print("=" * 60)
    print("ACTIVATIONS DEMO")
    print("=" * 60)
    source, results = demo_activations()
    print(f"{source.name}: {source}")
    for name, out in results.items():
        print(f"{name}: {out}")


if __name__ == "__main__":  # pragma: no cover - example script
    main()
