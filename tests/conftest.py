# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import gdregress as gd  # noqa: E402


@pytest.fixture(scope="session")
def reference_dataset():
    """Seeded draw of the default problem: y = 4x + 2 + U[0, 1), x in [0, 20)."""
    return gd.generate_from_config(gd.RegressionConfig(seed=0))
