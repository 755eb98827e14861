# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

"""Linear regression training example for gdregress.

This script fits ``y = a*x + b`` to noisy synthetic data drawn from the line
``y = 4x + 2`` using plain batch gradient descent, printing the loss as the
descent progresses.
"""

from __future__ import annotations

from dataclasses import replace

import gdregress as gd


def train_model(verbose: bool = True, seed: int | None = 0):
    """Fit the default regression problem.

    Parameters
    ----------
    verbose:
        If ``True``, prints the loss at the first step and every 10000 thereafter.
    seed:
        Seed for the synthetic data. ``None`` draws a fresh dataset.

    Returns
    -------
    tuple[float, float, float]
        Final loss, learned slope and intercept.
    """

    config = replace(gd.RegressionConfig(), seed=seed)
    dataset = gd.generate_from_config(config)

    def log_progress(step, coefs):
        if step == 1 or step % 10000 == 0:
            print(f"Step {step:06d} | Loss: {gd.loss(dataset, coefs):.6f}")

    coefs = gd.optimize(
        dataset,
        config.initial_coefs,
        config.learning_rate,
        config.steps,
        callback=log_progress if verbose else None,
    )
    return gd.loss(dataset, coefs), coefs.a, coefs.b


def main() -> None:  # pragma: no cover - example script
    loss, a, b = train_model(verbose=True)
    print("Final loss:", loss)
    print("Trained parameters:")
    print("a:", a, "b:", b)


if __name__ == "__main__":  # pragma: no cover - example script
    main()
