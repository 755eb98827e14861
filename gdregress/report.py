# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

"""Console report for a finished fit."""

from __future__ import annotations

from typing import List

from .optim import FitResult

HEADER = "Computing regression coefficients using gradient descent."


def format_report(result: FitResult) -> List[str]:
    return [
        HEADER,
        f"Dataset size n={result.size}",
        f"Gradient descent finished after {result.steps} steps with loss={result.loss:.3f}",
        f"Estimated coefficients: a={result.coefs.a:.3f}, b={result.coefs.b:.3f}",
        f"Elapsed CPU time: {result.elapsed:.3f} seconds",
    ]


def print_report(result: FitResult) -> None:
    for line in format_report(result):
        print(line)


__all__ = ["format_report", "print_report", "HEADER"]
