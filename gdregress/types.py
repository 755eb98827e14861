# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Value types shared by the data generator, the loss and the optimiser.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

import numpy as np


@dataclass(frozen=True)
class CoefficientPair:
    """Slope ``a`` and intercept ``b`` of a univariate linear model.

    The same shape doubles as a gradient vector, so gradients are returned
    as ``CoefficientPair`` instances too.
    """

    a: float
    b: float

    def descend(self, gradient: "CoefficientPair", learning_rate: float) -> "CoefficientPair":
        """Return the point one step of size ``learning_rate`` against ``gradient``."""

        return CoefficientPair(
            self.a - learning_rate * gradient.a,
            self.b - learning_rate * gradient.b,
        )

    def is_finite(self) -> bool:
        return math.isfinite(self.a) and math.isfinite(self.b)

    def predict(self, x):
        """Evaluate ``a * x + b`` for a scalar or an array of ``x`` values."""

        return self.a * x + self.b


def _as_readonly_vector(values, name: str) -> np.ndarray:
    array = np.array(values, dtype=np.float64)
    if array.ndim != 1:
        raise ValueError(f"Dataset {name} must be one-dimensional, got shape {array.shape}.")
    array.setflags(write=False)
    return array


@dataclass(frozen=True, eq=False)
class Dataset:
    """Ordered ``(x, y)`` observations held as two read-only ``float64`` arrays.

    ``x`` and ``y`` always have the same length; that length is the dataset
    size ``n`` used by every loss and gradient evaluation.
    """

    x: np.ndarray
    y: np.ndarray

    def __post_init__(self) -> None:
        x = _as_readonly_vector(self.x, "x")
        y = _as_readonly_vector(self.y, "y")
        if x.shape != y.shape:
            raise ValueError(
                f"Dataset x and y must have the same length, got {x.shape[0]} and {y.shape[0]}."
            )
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[float, float]]) -> "Dataset":
        pairs = list(pairs)
        if not pairs:
            return cls(np.empty(0), np.empty(0))
        xs, ys = zip(*pairs)
        return cls(xs, ys)

    def __len__(self) -> int:
        return int(self.x.shape[0])

    def __iter__(self) -> Iterator[Tuple[float, float]]:
        for x, y in zip(self.x, self.y):
            yield float(x), float(y)


__all__ = ["CoefficientPair", "Dataset"]
