# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Batch gradient descent over a :class:`~gdregress.types.Dataset`.

:func:`optimize` is the bare update loop; :func:`fit` wires configuration,
data generation, timing and the final loss together.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Optional

from .config import RegressionConfig, check_learning_rate, check_steps
from .data import generate_from_config
from .errors import NumericDivergence
from .functional import gradient, loss
from .types import CoefficientPair, Dataset

StepCallback = Callable[[int, CoefficientPair], None]


def optimize(
    dataset: Dataset,
    initial_coefs: CoefficientPair,
    learning_rate: float,
    steps: int,
    callback: Optional[StepCallback] = None,
    check_finite: bool = False,
) -> CoefficientPair:
    """Run exactly ``steps`` full-batch gradient steps from ``initial_coefs``.

    Parameters
    ----------
    dataset:
        Training data; every step uses all of it.
    initial_coefs:
        Starting point. Returned unchanged when ``steps`` is zero.
    learning_rate:
        Positive step size.
    steps:
        Number of iterations. There is no convergence test.
    callback:
        Called as ``callback(step, coefs)`` after every step, ``step``
        counting from 1.
    check_finite:
        If ``True``, raise :class:`NumericDivergence` as soon as an iterate
        is NaN or infinite. Otherwise non-finite values propagate silently.

    Returns
    -------
    CoefficientPair
        The coefficients after the last step.
    """

    check_learning_rate(learning_rate)
    check_steps(steps)

    coefs = initial_coefs
    for step in range(1, steps + 1):
        coefs = coefs.descend(gradient(dataset, coefs), learning_rate)
        if check_finite and not coefs.is_finite():
            raise NumericDivergence(step, coefs)
        if callback is not None:
            callback(step, coefs)
    return coefs


@dataclass(frozen=True)
class FitResult:
    coefs: CoefficientPair
    loss: float
    steps: int
    size: int
    elapsed: float


def fit(config: RegressionConfig, dataset: Optional[Dataset] = None) -> FitResult:
    """Fit the linear model described by ``config``.

    A dataset is generated from ``config`` unless one is supplied. Only the
    descent loop is timed, in CPU seconds.
    """

    config.validate()
    if dataset is None:
        dataset = generate_from_config(config)

    start = time.process_time()
    coefs = optimize(
        dataset,
        config.initial_coefs,
        config.learning_rate,
        config.steps,
        check_finite=config.check_finite,
    )
    elapsed = time.process_time() - start

    return FitResult(
        coefs=coefs,
        loss=loss(dataset, coefs),
        steps=config.steps,
        size=len(dataset),
        elapsed=elapsed,
    )


__all__ = ["optimize", "fit", "FitResult", "StepCallback"]
