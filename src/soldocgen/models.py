# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Typed artifact and manifest models handed to the documentation renderer."""

from __future__ import annotations

import copy
import hashlib
import json
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

from .errors import ArtifactMalformedError
from .types import JSONValue

ManifestEntryDict = dict[str, JSONValue]


@dataclass(frozen=True, slots=True)
class BuildArtifact:
    """Validated view over the fields of a compiler artifact that documentation needs."""

    target: str
    source: Path
    metadata: JSONValue
    ast: Mapping[str, JSONValue]
    unit_id: int | str

    @property
    def absolute_path(self) -> str:
        """Return the logical source path the AST was compiled from."""

        return str(self.ast["absolutePath"])

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, JSONValue], *, target: str, source: Path) -> BuildArtifact:
        """Materialise an artifact from a schema-validated mapping.

        The top-level ``id`` names the compilation unit when the toolchain
        emits it; older artifacts only carry ``ast.id``.

        Args:
            mapping: Parsed artifact payload.
            target: Target identifier the artifact was resolved for.
            source: Path the artifact was read from.

        Returns:
            BuildArtifact: Immutable artifact view.

        Raises:
            ArtifactMalformedError: If a required field is absent or mistyped.
        """

        metadata = mapping.get("metadata")
        if metadata is None:
            raise ArtifactMalformedError(target, source, "'metadata' is missing or null")
        ast = mapping.get("ast")
        if not isinstance(ast, Mapping):
            raise ArtifactMalformedError(target, source, "'ast' must be an object")
        absolute_path = ast.get("absolutePath")
        if not isinstance(absolute_path, str) or not absolute_path:
            raise ArtifactMalformedError(target, source, "'ast.absolutePath' must be a non-empty string")
        if "id" not in ast:
            raise ArtifactMalformedError(target, source, "'ast.id' must be present")
        key, raw_id = ("id", mapping["id"]) if "id" in mapping else ("ast.id", ast["id"])
        unit_id = _normalise_id(raw_id, key=key, target=target, source=source)
        return cls(
            target=target,
            source=source,
            metadata=metadata,
            ast=MappingProxyType(dict(ast)),
            unit_id=unit_id,
        )

    def to_manifest_entry(self) -> ManifestEntry:
        """Project the artifact into the record shape the renderer consumes."""

        return ManifestEntry(
            target=self.target,
            metadata=self.metadata,
            absolute_path=self.absolute_path,
            ast=self.ast,
            unit_id=self.unit_id,
        )


def _normalise_id(value: JSONValue, *, key: str, target: str, source: Path) -> int | str:
    """Return ``value`` as an ``int`` or ``str`` id; integral floats such as ``7.0`` become ``7``."""

    if isinstance(value, bool):
        raise ArtifactMalformedError(target, source, f"'{key}' must be an integer or string, got a boolean")
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, (int, str)):
        return value
    raise ArtifactMalformedError(target, source, f"'{key}' must be an integer or string, got {value!r}")


@dataclass(frozen=True, slots=True)
class ManifestEntry:
    """One compiler input/output pair in the documentation manifest."""

    target: str
    metadata: JSONValue
    absolute_path: str
    ast: Mapping[str, JSONValue]
    unit_id: int | str

    def to_dict(self) -> ManifestEntryDict:
        """Return the entry as plain JSON data.

        Returns:
            ManifestEntryDict: ``{"input": ..., "output": {"sources": {...}}}``
            holding copies so callers cannot mutate the entry.
        """

        return {
            "input": copy.deepcopy(self.metadata),
            "output": {
                "sources": {
                    self.absolute_path: {
                        "ast": copy.deepcopy(dict(self.ast)),
                        "id": self.unit_id,
                    },
                },
            },
        }


@dataclass(frozen=True, slots=True)
class Manifest:
    """Ordered manifest entries, one per configured target."""

    entries: tuple[ManifestEntry, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[ManifestEntry]:
        return iter(self.entries)

    def __bool__(self) -> bool:
        return bool(self.entries)

    @property
    def targets(self) -> tuple[str, ...]:
        """Return target identifiers in manifest order."""

        return tuple(entry.target for entry in self.entries)

    def to_list(self) -> list[ManifestEntryDict]:
        """Return the manifest as the list of builds expected by the renderer."""

        return [entry.to_dict() for entry in self.entries]

    def to_json(self, *, indent: int | None = 2) -> str:
        """Serialise the manifest to JSON preserving entry order."""

        return json.dumps(self.to_list(), indent=indent, ensure_ascii=False)

    def checksum(self) -> str:
        """Return a SHA-256 digest of the canonical manifest encoding.

        Returns:
            str: Hex digest that is stable across runs for unchanged artifacts.
        """

        canonical = json.dumps(self.to_list(), sort_keys=True, separators=(",", ":"), ensure_ascii=False)
        return hashlib.sha256(canonical.encode("utf-8")).hexdigest()


__all__ = [
    "BuildArtifact",
    "Manifest",
    "ManifestEntry",
    "ManifestEntryDict",
]
