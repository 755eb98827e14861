# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

"""Fit the default synthetic regression problem and print the report."""

from __future__ import annotations

import sys
from typing import Optional

from .config import RegressionConfig
from .data import generate_from_config
from .errors import InvalidConfiguration
from .optim import fit
from .report import HEADER, format_report


def main(config: Optional[RegressionConfig] = None) -> int:
    if config is None:
        config = RegressionConfig()

    try:
        config.validate()
    except InvalidConfiguration as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 1

    dataset = generate_from_config(config)
    print(HEADER)
    print(f"Dataset size n={len(dataset)}")

    result = fit(config, dataset)
    for line in format_report(result)[2:]:
        print(line)
    return 0


if __name__ == "__main__":  # pragma: no cover - entry point
    sys.exit(main())
