# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

"""Synthetic dataset generation."""

from __future__ import annotations

from typing import Optional

import numpy as np

from .config import RegressionConfig, check_bound, check_size
from .types import CoefficientPair, Dataset


def generate(
    n: int,
    true_coefs: CoefficientPair,
    x_upper_bound: float,
    noise_upper_bound: float,
    seed: Optional[int] = None,
) -> Dataset:
    """Draw ``n`` noisy observations of the line ``true_coefs``.

    ``x`` is uniform on ``[0, x_upper_bound)`` and ``y = a * x + b + e`` with
    ``e`` uniform on ``[0, noise_upper_bound)``. Passing ``seed`` makes the
    draw reproducible; without it every call sees fresh entropy.
    """

    check_size(n)
    check_bound(x_upper_bound, "X upper bound")
    check_bound(noise_upper_bound, "Noise upper bound")

    rng = np.random.default_rng(seed)
    x = rng.random(n) * x_upper_bound
    noise = rng.random(n) * noise_upper_bound
    return Dataset(x, true_coefs.predict(x) + noise)


def generate_from_config(config: RegressionConfig) -> Dataset:
    return generate(
        config.size,
        config.true_coefs,
        config.x_upper_bound,
        config.noise_upper_bound,
        seed=config.seed,
    )


__all__ = ["generate", "generate_from_config"]
