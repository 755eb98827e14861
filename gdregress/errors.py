# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

"""Exception types raised by gdregress."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .types import CoefficientPair


class GDRegressError(Exception):
    """Base class for all gdregress errors."""


class InvalidConfiguration(GDRegressError, ValueError):
    """Raised when a run is configured with out-of-range parameters."""


class NumericDivergence(GDRegressError, ArithmeticError):
    """Raised when gradient descent produces non-finite coefficients.

    Parameters
    ----------
    step:
        1-based index of the step that produced the non-finite iterate.
    coefs:
        The offending coefficients.
    """

    def __init__(self, step: int, coefs: "CoefficientPair"):
        self.step = step
        self.coefs = coefs
        super().__init__(
            f"Gradient descent diverged at step {step}: a={coefs.a}, b={coefs.b}. "
            "Try a smaller learning rate."
        )


__all__ = ["GDRegressError", "InvalidConfiguration", "NumericDivergence"]
