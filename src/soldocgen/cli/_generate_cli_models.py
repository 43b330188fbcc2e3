# SPDX-License-Identifier: MIT
"""Data structures for the documentation generation CLI command."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Annotated, Any

import typer


class PageModeChoice(str, Enum):
    """Page layouts accepted by solidity-docgen."""

    SINGLE = "single"
    ITEMS = "items"
    FILES = "files"


ROOT_OPTION = Annotated[
    Path,
    typer.Option("--root", "-r", help="Project root holding pyproject.toml and compiler output."),
]
CONFIG_OPTION = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="TOML file layered over [tool.soldocgen] in pyproject.toml."),
]
OUT_OPTION = Annotated[
    Path | None,
    typer.Option("--out", help="Directory containing compiler artifacts (default: out)."),
]
TARGETS_OPTION = Annotated[
    str | None,
    typer.Option("--targets", help="Comma-separated contract names overriding the configured list."),
]
EXT_OPTION = Annotated[
    str | None,
    typer.Option("--ext", help="Source extension used in artifact directory names (default: sol)."),
]
JOBS_OPTION = Annotated[
    int | None,
    typer.Option("--jobs", "-j", min=1, help="Number of artifacts loaded concurrently."),
]
PAGES_OPTION = Annotated[
    PageModeChoice | None,
    typer.Option("--pages", case_sensitive=False, help="Page organisation passed to the renderer."),
]
DOCS_DIR_OPTION = Annotated[
    Path | None,
    typer.Option("--docs-dir", help="Directory the renderer writes documentation into."),
]
SKIP_EMPTY_OPTION = Annotated[
    bool | None,
    typer.Option(
        "--skip-empty/--render-empty",
        help="Skip the renderer when the manifest has no entries.",
        show_default=False,
    ),
]
DRY_RUN_OPTION = Annotated[
    bool,
    typer.Option("--dry-run", help="Assemble and validate the manifest without rendering."),
]
MANIFEST_OUT_OPTION = Annotated[
    Path | None,
    typer.Option("--manifest-out", help="Write the assembled manifest as JSON to this file."),
]
NODE_OPTION = Annotated[
    str | None,
    typer.Option("--node", help="Node.js executable used to run solidity-docgen."),
]
NO_EMOJI_OPTION = Annotated[bool, typer.Option("--no-emoji", help="Disable emoji in output.")]
NO_COLOR_OPTION = Annotated[bool, typer.Option("--no-color", help="Disable ANSI colour output.")]
DEBUG_OPTION = Annotated[bool, typer.Option("--debug", help="Print resolution and renderer diagnostics.")]


@dataclass(slots=True)
class GenerateCLIOptions:
    """Normalised CLI inputs for the documentation generator."""

    root: Path
    config_file: Path | None
    out_dir: Path | None
    targets: tuple[str, ...] | None
    extension: str | None
    jobs: int | None
    pages: str | None
    docs_dir: Path | None
    skip_empty: bool | None
    dry_run: bool
    manifest_out: Path | None
    node: str | None
    emoji: bool
    no_color: bool
    debug: bool

    def config_overrides(self) -> dict[str, Any]:
        """Return configuration overrides for every flag the user supplied.

        Returns:
            dict[str, Any]: Fragment shaped like ``[tool.soldocgen]``.
        """

        overrides: dict[str, Any] = {}
        if self.targets is not None:
            overrides["targets"] = list(self.targets)
        if self.out_dir is not None:
            overrides["out_dir"] = self.out_dir
        if self.extension is not None:
            overrides["extension"] = self.extension
        if self.jobs is not None:
            overrides["jobs"] = self.jobs
        if self.skip_empty is not None:
            overrides["skip_empty"] = self.skip_empty
        if self.node is not None:
            overrides["node"] = self.node
        docgen: dict[str, Any] = {}
        if self.pages is not None:
            docgen["pages"] = self.pages
        if self.docs_dir is not None:
            docgen["output_dir"] = self.docs_dir
        if docgen:
            overrides["docgen"] = docgen
        return overrides


def parse_targets(raw: str | None) -> tuple[str, ...] | None:
    """Split a comma-separated target list; an empty string yields no targets."""

    if raw is None:
        return None
    return tuple(part.strip() for part in raw.split(",") if part.strip())


def build_generate_options(
    *,
    root: Path,
    config_file: Path | None,
    out_dir: Path | None,
    targets: str | None,
    extension: str | None,
    jobs: int | None,
    pages: PageModeChoice | None,
    docs_dir: Path | None,
    skip_empty: bool | None,
    dry_run: bool,
    manifest_out: Path | None,
    node: str | None,
    no_emoji: bool,
    no_color: bool,
    debug: bool,
) -> GenerateCLIOptions:
    """Construct ``GenerateCLIOptions`` from Typer parameters."""

    resolved_root = root.expanduser().resolve()
    return GenerateCLIOptions(
        root=resolved_root,
        config_file=config_file.expanduser() if config_file else None,
        out_dir=out_dir.expanduser() if out_dir else None,
        targets=parse_targets(targets),
        extension=extension,
        jobs=jobs,
        pages=pages.value if pages is not None else None,
        docs_dir=docs_dir.expanduser() if docs_dir else None,
        skip_empty=skip_empty,
        dry_run=dry_run,
        manifest_out=manifest_out.expanduser() if manifest_out else None,
        node=node,
        emoji=not no_emoji,
        no_color=no_color,
        debug=debug,
    )


__all__ = [
    "GenerateCLIOptions",
    "PageModeChoice",
    "build_generate_options",
    "parse_targets",
]
