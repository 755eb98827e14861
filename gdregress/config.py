# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

"""Run configuration for a gradient descent fit."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .errors import InvalidConfiguration
from .types import CoefficientPair

LEARNING_RATE = 0.001
STEPS = 100000
DATA_SIZE = 2000
X_UPPER_BOUND = 20.0
NOISE_UPPER_BOUND = 1.0
TRUE_COEFS = CoefficientPair(4.0, 2.0)
INITIAL_COEFS = CoefficientPair(1.0, 0.0)


@dataclass(frozen=True)
class RegressionConfig:
    """Parameters of one run.

    Parameters
    ----------
    learning_rate:
        Step size applied to the gradient at each iteration.
    steps:
        Exact number of gradient steps; there is no early stopping.
    size:
        Number of synthetic observations.
    x_upper_bound, noise_upper_bound:
        ``x`` and the additive noise are drawn uniformly from ``[0, bound)``.
    true_coefs:
        Coefficients used to synthesise the data.
    initial_coefs:
        Starting point of the descent.
    seed:
        Seed for the data generator. ``None`` draws fresh entropy on every run.
    check_finite:
        Stop with :class:`~gdregress.errors.NumericDivergence` as soon as an
        iterate becomes non-finite.
    """

    learning_rate: float = LEARNING_RATE
    steps: int = STEPS
    size: int = DATA_SIZE
    x_upper_bound: float = X_UPPER_BOUND
    noise_upper_bound: float = NOISE_UPPER_BOUND
    true_coefs: CoefficientPair = field(default=TRUE_COEFS)
    initial_coefs: CoefficientPair = field(default=INITIAL_COEFS)
    seed: Optional[int] = None
    check_finite: bool = False

    def validate(self) -> "RegressionConfig":
        """Raise :class:`InvalidConfiguration` for out-of-range values."""

        check_size(self.size)
        check_learning_rate(self.learning_rate)
        check_steps(self.steps)
        check_bound(self.x_upper_bound, "X upper bound")
        check_bound(self.noise_upper_bound, "Noise upper bound")
        return self


def check_size(size: int) -> None:
    if size <= 0:
        raise InvalidConfiguration("Dataset size must be positive.")


def check_learning_rate(learning_rate: float) -> None:
    if not learning_rate > 0:
        raise InvalidConfiguration("Learning rate must be positive.")


def check_steps(steps: int) -> None:
    if steps < 0:
        raise InvalidConfiguration("Step count must be non-negative.")


def check_bound(bound: float, label: str) -> None:
    if not bound > 0:
        raise InvalidConfiguration(f"{label} must be positive.")


__all__ = [
    "RegressionConfig",
    "LEARNING_RATE",
    "STEPS",
    "DATA_SIZE",
    "X_UPPER_BOUND",
    "NOISE_UPPER_BOUND",
    "TRUE_COEFS",
    "INITIAL_COEFS",
]
