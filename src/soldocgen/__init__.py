# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Assemble solidity-docgen manifests from compiler build artifacts."""

from __future__ import annotations

from importlib import metadata

from .config import SoldocgenConfig, load_config
from .errors import (
    ArtifactError,
    ArtifactMalformedError,
    ArtifactNotFoundError,
    ArtifactUnparseableError,
    ConfigError,
    RendererError,
    SoldocgenError,
)
from .manifest import build_manifest
from .models import BuildArtifact, Manifest, ManifestEntry
from .pipeline import GenerationResult, generate_docs
from .renderer import CallableRenderer, RenderConfig, Renderer, SolidityDocgenRenderer
from .resolver import ArtifactResolver

__all__ = [
    "ArtifactError",
    "ArtifactMalformedError",
    "ArtifactNotFoundError",
    "ArtifactResolver",
    "ArtifactUnparseableError",
    "BuildArtifact",
    "CallableRenderer",
    "ConfigError",
    "GenerationResult",
    "Manifest",
    "ManifestEntry",
    "RenderConfig",
    "Renderer",
    "RendererError",
    "SoldocgenConfig",
    "SoldocgenError",
    "SolidityDocgenRenderer",
    "__version__",
    "build_manifest",
    "generate_docs",
    "load_config",
]

try:
    __version__ = metadata.version("soldocgen")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"
