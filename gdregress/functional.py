# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

"""Mean squared error and its analytic gradient for ``y = a * x + b``."""

from __future__ import annotations

import numpy as np

from .types import CoefficientPair, Dataset


def _residuals(dataset: Dataset, coefs: CoefficientPair) -> np.ndarray:
    if len(dataset) == 0:
        raise ValueError("Dataset must not be empty.")
    return dataset.y - coefs.predict(dataset.x)


def loss(dataset: Dataset, coefs: CoefficientPair) -> float:
    """Mean squared error of ``coefs`` over ``dataset``."""

    r = _residuals(dataset, coefs)
    return float(np.dot(r, r) / len(dataset))


def gradient(dataset: Dataset, coefs: CoefficientPair) -> CoefficientPair:
    """Gradient of :func:`loss` with respect to ``(a, b)`` at ``coefs``.

    With residuals ``r = y - (a * x + b)`` this is
    ``(2/n * sum(-x * r), 2/n * sum(-r))``.
    """

    r = _residuals(dataset, coefs)
    n = len(dataset)
    sum_a = -np.dot(dataset.x, r)
    sum_b = -np.sum(r)
    return CoefficientPair(float(2 * sum_a / n), float(2 * sum_b / n))


__all__ = ["loss", "gradient"]
