# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Layered configuration for manifest assembly and rendering."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Final, Protocol

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError
from .paths import validate_extension, validate_target_name
from .renderer import RenderConfig
from .types import DEFAULT_EXTENSION, DEFAULT_OUT_DIR, DEFAULT_TARGETS

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "soldocgen"


class SoldocgenConfig(BaseModel):
    """Resolved settings for one documentation run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    targets: tuple[str, ...] = DEFAULT_TARGETS
    out_dir: Path = DEFAULT_OUT_DIR
    extension: str = DEFAULT_EXTENSION
    jobs: int = Field(default=1, ge=1)
    skip_empty: bool = False
    node: str = "node"
    docgen: RenderConfig = Field(default_factory=RenderConfig)

    @field_validator("targets")
    @classmethod
    def _check_targets(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(validate_target_name(target) for target in value)

    @field_validator("extension")
    @classmethod
    def _check_extension(cls, value: str) -> str:
        return validate_extension(value)

    def resolve_paths(self, root: Path) -> SoldocgenConfig:
        """Return a copy whose relative directories are anchored at ``root``.

        Args:
            root: Project root used for relative paths.

        Returns:
            SoldocgenConfig: Configuration with absolute ``out_dir`` and docgen paths.
        """

        docgen_updates: dict[str, Path] = {}
        for name in ("output_dir", "templates", "sources_dir"):
            value = getattr(self.docgen, name)
            if value is not None and not value.is_absolute():
                docgen_updates[name] = root / value
        out_dir = self.out_dir if self.out_dir.is_absolute() else root / self.out_dir
        return self.model_copy(
            update={"out_dir": out_dir, "docgen": self.docgen.model_copy(update=docgen_updates)},
        )


class ConfigSource(Protocol):
    """Source contributing a raw configuration fragment."""

    name: str

    def load(self) -> Mapping[str, Any]:
        """Return the raw configuration fragment supplied by the source."""
        ...


class TomlConfigSource:
    """Load configuration from a standalone TOML document."""

    def __init__(self, path: Path, *, required: bool = True) -> None:
        self.path = path
        self.name = str(path)
        self._required = required

    def load(self) -> Mapping[str, Any]:
        if not self.path.exists():
            if self._required:
                raise ConfigError(f"Configuration file {self.path} does not exist")
            return {}
        try:
            with self.path.open("rb") as handle:
                return tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Configuration at {self.path} is not valid TOML: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise ConfigError(f"Configuration at {self.path} is not UTF-8 encoded") from exc
        except OSError as exc:
            raise ConfigError(f"Configuration at {self.path} could not be read: {exc.strerror or exc}") from exc


class PyProjectConfigSource(TomlConfigSource):
    """Read configuration from ``[tool.soldocgen]`` within ``pyproject.toml``."""

    def __init__(self, path: Path) -> None:
        super().__init__(path, required=False)

    def load(self) -> Mapping[str, Any]:
        data = super().load()
        tool_section = data.get(PYPROJECT_TOOL_KEY)
        if not isinstance(tool_section, Mapping):
            return {}
        section = tool_section.get(PYPROJECT_SECTION_KEY)
        if not isinstance(section, Mapping):
            return {}
        return dict(section)


class MappingConfigSource:
    """Wrap an in-memory mapping, typically CLI overrides."""

    def __init__(self, data: Mapping[str, Any], *, name: str = "overrides") -> None:
        self.name = name
        self._data = data

    def load(self) -> Mapping[str, Any]:
        return self._data


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Return ``base`` updated with ``override``, merging nested tables."""

    result: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], Mapping) and isinstance(value, Mapping):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def build_sources(
    root: Path,
    *,
    config_file: Path | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> list[ConfigSource]:
    """Return configuration sources ordered from lowest to highest precedence."""

    sources: list[ConfigSource] = [PyProjectConfigSource(root / PYPROJECT_FILENAME)]
    if config_file is not None:
        path = config_file if config_file.is_absolute() else root / config_file
        sources.append(TomlConfigSource(path))
    if overrides:
        sources.append(MappingConfigSource(overrides))
    return sources


def load_config(
    root: Path,
    *,
    config_file: Path | None = None,
    overrides: Mapping[str, Any] | None = None,
    sources: Sequence[ConfigSource] | None = None,
) -> SoldocgenConfig:
    """Merge configuration sources over the defaults and validate the result.

    Args:
        root: Project root anchoring ``pyproject.toml`` and relative paths.
        config_file: Optional explicit TOML file layered over ``pyproject.toml``.
        overrides: Highest-precedence values, typically from CLI flags.
        sources: Explicit source list replacing the default discovery.

    Returns:
        SoldocgenConfig: Validated configuration with paths resolved against ``root``.

    Raises:
        ConfigError: If a source cannot be read or the merged data is invalid.
    """

    resolved_root = root.resolve()
    active_sources = (
        list(sources)
        if sources is not None
        else build_sources(resolved_root, config_file=config_file, overrides=overrides)
    )
    merged: dict[str, Any] = {}
    for source in active_sources:
        merged = deep_merge(merged, source.load())
    try:
        config = SoldocgenConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(_format_validation_error(exc)) from exc
    return config.resolve_paths(resolved_root)


def _format_validation_error(exc: ValidationError) -> str:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "<root>"
        problems.append(f"{location}: {error['msg']}")
    return "invalid configuration: " + "; ".join(problems)


__all__ = [
    "ConfigSource",
    "MappingConfigSource",
    "PyProjectConfigSource",
    "SoldocgenConfig",
    "TomlConfigSource",
    "build_sources",
    "deep_merge",
    "load_config",
]
