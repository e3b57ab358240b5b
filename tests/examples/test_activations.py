# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

import examples.activations as activations


def test_activations_demo():
    source, results = activations.demo_activations()
    assert source.tolist() == [-8.0, -1.0, 0.0, 0.5, 3.0, 98.0]
    assert results["relu"].tolist() == [0.0, 0.0, 0.0, 0.5, 3.0, 98.0]
    assert results["relu6"].tolist() == [0.0, 0.0, 0.0, 0.5, 3.0, 6.0]
    sig = results["sigmoid"].tolist()
    assert all(0.0 <= v <= 1.0 for v in sig)
    assert sig[2] == 0.5
