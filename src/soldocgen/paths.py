# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Naming convention mapping target identifiers to artifact locations."""

from __future__ import annotations

from pathlib import Path

from .types import ARTIFACT_SUFFIX


def artifact_path(out_dir: Path, target: str, extension: str) -> Path:
    """Return ``<out_dir>/<target>.<extension>/<target>.json``.

    Args:
        out_dir: Root directory holding compiler output.
        target: Contract name whose artifact is requested.
        extension: Source file extension used by the compiler (``sol``).

    Returns:
        Path: Location of the artifact for ``target``.
    """

    return out_dir / f"{target}.{extension}" / f"{target}{ARTIFACT_SUFFIX}"


def validate_target_name(target: str) -> str:
    """Return ``target`` stripped, rejecting blanks and path-like names.

    Raises:
        ValueError: If ``target`` is empty or contains a path separator.
    """

    name = target.strip()
    if not name:
        raise ValueError("target names must be non-empty")
    if "/" in name or "\\" in name or name in {".", ".."}:
        raise ValueError(f"target '{name}' must be a bare contract name")
    return name


def validate_extension(extension: str) -> str:
    """Return ``extension`` without a leading dot, rejecting path-like values.

    Raises:
        ValueError: If the extension is empty or contains separators or dots.
    """

    value = extension.strip().removeprefix(".")
    if not value or any(char in value for char in "./\\"):
        raise ValueError(f"invalid artifact extension '{extension}'")
    return value


__all__ = ["artifact_path", "validate_extension", "validate_target_name"]
