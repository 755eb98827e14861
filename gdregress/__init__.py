# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

from . import config, data, functional, optim, report
from .config import RegressionConfig
from .data import generate, generate_from_config
from .errors import GDRegressError, InvalidConfiguration, NumericDivergence
from .functional import gradient, loss
from .optim import FitResult, fit, optimize
from .report import format_report, print_report
from .types import CoefficientPair, Dataset

try:
    from ._version import __version__, __version_tuple__
except ImportError:  # pragma: no cover - fallback for editable installs
    __version__ = "0.1.0"
    __version_tuple__ = (0, 1, 0)


__all__ = [
    "config",
    "data",
    "functional",
    "optim",
    "report",
    "CoefficientPair",
    "Dataset",
    "RegressionConfig",
    "FitResult",
    "GDRegressError",
    "InvalidConfiguration",
    "NumericDivergence",
    "generate",
    "generate_from_config",
    "loss",
    "gradient",
    "optimize",
    "fit",
    "format_report",
    "print_report",
]
