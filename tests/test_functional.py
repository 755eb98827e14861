# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

"""Tests for the mean squared error and its analytic gradient."""

import numpy as np
import pytest

import gdregress as gd


def _finite_difference(dataset, coefs, eps=1e-6):
    a, b = coefs.a, coefs.b
    da = (
        gd.loss(dataset, gd.CoefficientPair(a + eps, b))
        - gd.loss(dataset, gd.CoefficientPair(a - eps, b))
    ) / (2 * eps)
    db = (
        gd.loss(dataset, gd.CoefficientPair(a, b + eps))
        - gd.loss(dataset, gd.CoefficientPair(a, b - eps))
    ) / (2 * eps)
    return da, db


def test_loss_matches_hand_computation():
    data = gd.Dataset([0.0, 1.0, 2.0], [1.0, 2.0, 7.0])
    # predictions with a=2, b=1: 1, 3, 5 -> residuals 0, -1, 2
    assert gd.loss(data, gd.CoefficientPair(2.0, 1.0)) == pytest.approx(5.0 / 3.0)


def test_loss_is_non_negative():
    data = gd.generate(200, gd.CoefficientPair(4.0, 2.0), 20.0, 1.0, seed=0)
    rng = np.random.default_rng(5)
    for a, b in rng.uniform(-10.0, 10.0, size=(50, 2)):
        assert gd.loss(data, gd.CoefficientPair(float(a), float(b))) >= 0.0


def test_loss_is_zero_only_on_the_line():
    line = gd.CoefficientPair(3.0, 1.0)
    x = np.arange(10.0)
    data = gd.Dataset(x, line.predict(x))
    assert gd.loss(data, line) == 0.0
    assert gd.loss(data, gd.CoefficientPair(3.0, 1.001)) > 0.0


def test_gradient_matches_hand_computation():
    data = gd.Dataset([0.0, 1.0, 2.0], [1.0, 2.0, 7.0])
    grad = gd.gradient(data, gd.CoefficientPair(2.0, 1.0))
    # residuals 0, -1, 2: sum(-x*r) = 1 - 4 = -3, sum(-r) = -1
    assert grad.a == pytest.approx(2 * -3.0 / 3)
    assert grad.b == pytest.approx(2 * -1.0 / 3)


@pytest.mark.parametrize("a, b", [(1.0, 0.0), (4.0, 2.0), (-2.5, 7.0)])
def test_gradient_matches_finite_difference(a, b):
    data = gd.generate(50, gd.CoefficientPair(4.0, 2.0), 3.0, 1.0, seed=42)
    coefs = gd.CoefficientPair(a, b)
    grad = gd.gradient(data, coefs)
    da, db = _finite_difference(data, coefs)
    assert grad.a == pytest.approx(da, abs=1e-4)
    assert grad.b == pytest.approx(db, abs=1e-4)


def test_gradient_vanishes_at_exact_fit():
    line = gd.CoefficientPair(-1.0, 0.5)
    x = np.linspace(0.0, 4.0, 9)
    grad = gd.gradient(gd.Dataset(x, line.predict(x)), line)
    assert grad == gd.CoefficientPair(0.0, 0.0)


def test_empty_dataset_is_rejected():
    empty = gd.Dataset.from_pairs([])
    with pytest.raises(ValueError, match="must not be empty"):
        gd.loss(empty, gd.CoefficientPair(1.0, 0.0))
    with pytest.raises(ValueError, match="must not be empty"):
        gd.gradient(empty, gd.CoefficientPair(1.0, 0.0))
