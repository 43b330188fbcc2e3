# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Schema validation for build artifacts loaded from disk."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError

from .errors import ArtifactMalformedError
from .io import load_schema
from .types import JSONValue

ARTIFACT_SCHEMA_NAME: Final[str] = "build_artifact.schema.json"


@dataclass(slots=True)
class ArtifactSchema:
    """Validate parsed artifacts against the bundled build artifact schema."""

    validator: Draft202012Validator

    @classmethod
    def load(cls) -> ArtifactSchema:
        """Return a schema bound to the packaged ``build_artifact`` definition.

        Returns:
            ArtifactSchema: Schema wrapper with a Draft 2020-12 validator.
        """

        schema = load_schema(ARTIFACT_SCHEMA_NAME)
        Draft202012Validator.check_schema(schema)
        return cls(validator=Draft202012Validator(schema))

    def validate(self, document: JSONValue, *, target: str, path: Path) -> None:
        """Validate ``document`` and raise on the first schema violation.

        Args:
            document: Parsed artifact payload.
            target: Target identifier used in error reporting.
            path: Artifact location used in error reporting.

        Raises:
            ArtifactMalformedError: When ``document`` violates the schema.
        """

        errors = sorted(self.validator.iter_errors(document), key=_error_sort_key)
        if errors:
            first = errors[0]
            raise ArtifactMalformedError(target, path, f"{first.json_path}: {first.message}")


def _error_sort_key(error: ValidationError) -> tuple[int, str]:
    return len(error.absolute_path), error.json_path


__all__ = ["ARTIFACT_SCHEMA_NAME", "ArtifactSchema"]
