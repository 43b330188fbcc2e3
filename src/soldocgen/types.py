# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared type aliases and constants for artifact resolution."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Final, TypeAlias

JSONPrimitive: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONPrimitive | Sequence["JSONValue"] | Mapping[str, "JSONValue"]

DEFAULT_OUT_DIR: Final[Path] = Path("out")
DEFAULT_EXTENSION: Final[str] = "sol"
ARTIFACT_SUFFIX: Final[str] = ".json"

DEFAULT_TARGETS: Final[tuple[str, ...]] = (
    "Broker",
    "BiPoolManager",
    "ConstantProductPricingModule",
    "ConstantSumPricingModule",
    "TradingLimits",
    "SortedOracles",
    "StableToken",
    "BreakerBox",
    "MedianDeltaBreaker",
    "ValueDeltaBreaker",
    "Reserve",
    "IBroker",
    "IExchangeProvider",
    "IBreakerBox",
    "IBreaker",
)

__all__ = [
    "ARTIFACT_SUFFIX",
    "DEFAULT_EXTENSION",
    "DEFAULT_OUT_DIR",
    "DEFAULT_TARGETS",
    "JSONPrimitive",
    "JSONValue",
]
