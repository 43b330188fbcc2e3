# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""I/O helpers for reading build artifacts and bundled schemas."""

from __future__ import annotations

import json
from collections.abc import Mapping
from importlib import resources
from pathlib import Path
from typing import Final, cast

from .errors import ArtifactNotFoundError, ArtifactUnparseableError, ConfigError
from .types import JSONValue

SCHEMA_PACKAGE: Final[str] = "soldocgen.schema"


def load_artifact_document(path: Path, *, target: str) -> JSONValue:
    """Load the JSON artifact stored at ``path`` for ``target``.

    Args:
        path: Filesystem path computed for the target's artifact.
        target: Target identifier used in error reporting.

    Returns:
        JSONValue: Parsed JSON payload.

    Raises:
        ArtifactNotFoundError: If no regular file exists at ``path``.
        ArtifactUnparseableError: If the file cannot be read or is not UTF-8
            encoded JSON, including documents nested too deeply to decode.
    """
    if not path.is_file():
        raise ArtifactNotFoundError(target, path, "run the compilation step or fix the target list")
    try:
        with path.open("r", encoding="utf-8") as stream:
            return cast(JSONValue, json.load(stream))
    except json.JSONDecodeError as exc:
        raise ArtifactUnparseableError(target, path, f"invalid JSON ({exc.msg} at line {exc.lineno})") from exc
    except UnicodeDecodeError as exc:
        raise ArtifactUnparseableError(target, path, "file is not UTF-8 encoded") from exc
    except RecursionError as exc:
        raise ArtifactUnparseableError(target, path, "JSON nesting is too deep to decode") from exc
    except OSError as exc:
        raise ArtifactUnparseableError(target, path, f"file could not be read ({exc.strerror or exc})") from exc


def load_schema(name: str) -> Mapping[str, JSONValue]:
    """Load a JSON schema bundled with the package.

    Args:
        name: File name of the schema inside ``soldocgen/schema``.

    Returns:
        Mapping[str, JSONValue]: Parsed schema mapping.

    Raises:
        ConfigError: If the schema is missing or is not a JSON object.
    """
    resource = resources.files(SCHEMA_PACKAGE).joinpath(name)
    try:
        payload = json.loads(resource.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ConfigError(f"bundled schema '{name}' is missing") from exc
    if not isinstance(payload, Mapping):
        raise ConfigError(f"bundled schema '{name}': expected a JSON object")
    return payload


__all__ = ["load_artifact_document", "load_schema"]
