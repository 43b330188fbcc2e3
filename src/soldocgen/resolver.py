# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Resolve target identifiers to validated build artifacts."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ArtifactMalformedError
from .io import load_artifact_document
from .models import BuildArtifact
from .paths import artifact_path
from .types import DEFAULT_EXTENSION, DEFAULT_OUT_DIR
from .validation import ArtifactSchema

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class ArtifactResolver:
    """Locate, parse and validate compiler artifacts under ``out_dir``."""

    out_dir: Path = DEFAULT_OUT_DIR
    extension: str = DEFAULT_EXTENSION
    _schema: ArtifactSchema = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Load the artifact schema after dataclass setup."""

        self._schema = ArtifactSchema.load()

    def path_for(self, target: str) -> Path:
        """Return the only path consulted when resolving ``target``."""

        return artifact_path(self.out_dir, target, self.extension)

    def resolve_target(self, target: str) -> BuildArtifact:
        """Load and validate the artifact for ``target``.

        Args:
            target: Non-empty contract name.

        Returns:
            BuildArtifact: Typed view over the validated artifact.

        Raises:
            ValueError: If ``target`` is empty.
            ArtifactNotFoundError: If no artifact exists at the computed path.
            ArtifactUnparseableError: If the artifact is not valid JSON.
            ArtifactMalformedError: If required fields are missing.
        """

        if not target:
            raise ValueError("target identifier must be non-empty")
        path = self.path_for(target)
        LOGGER.debug("resolving target=%s path=%s", target, path)
        document = load_artifact_document(path, target=target)
        if not isinstance(document, Mapping):
            raise ArtifactMalformedError(target, path, "expected a JSON object at the document root")
        self._schema.validate(document, target=target, path=path)
        return BuildArtifact.from_mapping(document, target=target, source=path)


__all__ = ["ArtifactResolver"]
