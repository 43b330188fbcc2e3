# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised while assembling and rendering manifests."""

from __future__ import annotations

from pathlib import Path


class SoldocgenError(RuntimeError):
    """Base class for every failure surfaced by soldocgen."""


class ConfigError(SoldocgenError):
    """Raised when configuration input is invalid."""


class ArtifactError(SoldocgenError):
    """Raised when a target's build artifact cannot be resolved.

    Attributes:
        target: Target identifier whose artifact failed to resolve.
        path: Artifact location computed for ``target``.
        reason: Short description of the failure.
    """

    kind = "artifact error"

    def __init__(self, target: str, path: Path, reason: str) -> None:
        """Create the error for ``target`` read from ``path``.

        Args:
            target: Target identifier whose artifact failed to resolve.
            path: Artifact location computed for ``target``.
            reason: Short description of the failure.
        """

        super().__init__(f"{target}: {self.kind} at {path}: {reason}")
        self.target = target
        self.path = path
        self.reason = reason


class ArtifactNotFoundError(ArtifactError):
    """Raised when no artifact exists at the computed path."""

    kind = "artifact not found"


class ArtifactUnparseableError(ArtifactError):
    """Raised when the artifact file is not valid JSON."""

    kind = "artifact unparseable"


class ArtifactMalformedError(ArtifactError):
    """Raised when the artifact parses but lacks required fields."""

    kind = "artifact malformed"


class RendererError(SoldocgenError):
    """Raised when the documentation renderer rejects a manifest or fails internally."""

    def __init__(self, message: str, *, returncode: int | None = None, stderr: str = "") -> None:
        """Create the error with the renderer's exit status and diagnostics.

        Args:
            message: Human-readable failure description.
            returncode: Exit status reported by the renderer process, if any.
            stderr: Diagnostic output captured from the renderer.
        """

        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


__all__ = (
    "ArtifactError",
    "ArtifactMalformedError",
    "ArtifactNotFoundError",
    "ArtifactUnparseableError",
    "ConfigError",
    "RendererError",
    "SoldocgenError",
)
