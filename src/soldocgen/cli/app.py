# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application that assembles the manifest and runs solidity-docgen."""

from __future__ import annotations

from pathlib import Path

import typer

from ..config import SoldocgenConfig, load_config
from ..errors import ArtifactError, ConfigError, RendererError
from ..models import Manifest
from ..pipeline import GenerationResult, generate_docs
from ..renderer import Renderer, SolidityDocgenRenderer
from ._generate_cli_models import (
    CONFIG_OPTION,
    DEBUG_OPTION,
    DOCS_DIR_OPTION,
    DRY_RUN_OPTION,
    EXT_OPTION,
    JOBS_OPTION,
    MANIFEST_OUT_OPTION,
    NO_COLOR_OPTION,
    NO_EMOJI_OPTION,
    NODE_OPTION,
    OUT_OPTION,
    PAGES_OPTION,
    ROOT_OPTION,
    SKIP_EMPTY_OPTION,
    TARGETS_OPTION,
    GenerateCLIOptions,
    build_generate_options,
)
from .shared import (
    EXIT_ARTIFACT_FAILURE,
    EXIT_CONFIG_FAILURE,
    EXIT_OK,
    EXIT_RENDERER_FAILURE,
    CLIError,
    CLILogger,
    build_cli_logger,
    install_debug_logging,
    remove_debug_logging,
)
from .typer_ext import create_typer

app = create_typer(
    name="soldocgen",
    help="Generate Solidity documentation from compiler build artifacts.",
    add_completion=False,
)


def build_renderer(config: SoldocgenConfig, root: Path) -> Renderer:
    """Return the renderer used for ``config``; tests replace this hook."""

    return SolidityDocgenRenderer(project_root=root, node=config.node)


@app.command()
def generate(
    root: ROOT_OPTION = Path("."),
    config_file: CONFIG_OPTION = None,
    out_dir: OUT_OPTION = None,
    targets: TARGETS_OPTION = None,
    extension: EXT_OPTION = None,
    jobs: JOBS_OPTION = None,
    pages: PAGES_OPTION = None,
    docs_dir: DOCS_DIR_OPTION = None,
    skip_empty: SKIP_EMPTY_OPTION = None,
    dry_run: DRY_RUN_OPTION = False,
    manifest_out: MANIFEST_OUT_OPTION = None,
    node: NODE_OPTION = None,
    no_emoji: NO_EMOJI_OPTION = False,
    no_color: NO_COLOR_OPTION = False,
    debug: DEBUG_OPTION = False,
) -> None:
    """Resolve every target artifact and render documentation for the manifest."""

    options = build_generate_options(
        root=root,
        config_file=config_file,
        out_dir=out_dir,
        targets=targets,
        extension=extension,
        jobs=jobs,
        pages=pages,
        docs_dir=docs_dir,
        skip_empty=skip_empty,
        dry_run=dry_run,
        manifest_out=manifest_out,
        node=node,
        no_emoji=no_emoji,
        no_color=no_color,
        debug=debug,
    )
    logger = build_cli_logger(emoji=options.emoji, debug=options.debug, no_color=options.no_color)
    handler = install_debug_logging(logger)
    try:
        _run(options, logger)
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc
    finally:
        remove_debug_logging(handler)
    raise typer.Exit(code=EXIT_OK)


def _run(options: GenerateCLIOptions, logger: CLILogger) -> None:
    """Execute one documentation run, translating failures into :class:`CLIError`."""

    try:
        config = load_config(
            options.root,
            config_file=options.config_file,
            overrides=options.config_overrides(),
        )
    except ConfigError as exc:
        raise CLIError(str(exc), exit_code=EXIT_CONFIG_FAILURE) from exc
    logger.debug(f"targets={len(config.targets)} out_dir={config.out_dir} extension={config.extension}")

    try:
        result = generate_docs(config, build_renderer(config, options.root), dry_run=options.dry_run)
    except ArtifactError as exc:
        raise CLIError(
            f"{exc.kind} for target '{exc.target}': {exc.reason} ({exc.path})",
            exit_code=EXIT_ARTIFACT_FAILURE,
        ) from exc
    except RendererError as exc:
        if exc.stderr:
            logger.debug(f"renderer stderr={exc.stderr!r}")
        raise CLIError(f"renderer failed: {exc}", exit_code=EXIT_RENDERER_FAILURE) from exc

    if options.manifest_out is not None:
        _write_manifest(result.manifest, options.manifest_out, options.root)
        logger.info(f"Manifest written to {options.manifest_out}")
    _emit_summary(result, options, logger)


def _write_manifest(manifest: Manifest, destination: Path, root: Path) -> None:
    path = destination if destination.is_absolute() else root / destination
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(manifest.to_json() + "\n", encoding="utf-8")


def _emit_summary(result: GenerationResult, options: GenerateCLIOptions, logger: CLILogger) -> None:
    count = len(result.manifest)
    logger.debug(f"checksum={result.manifest.checksum()}")
    if options.dry_run:
        logger.ok(f"Manifest assembled for {count} target(s); rendering skipped (dry run)")
    elif not result.rendered:
        logger.warn("No targets configured; renderer skipped")
    else:
        logger.ok(f"Rendered documentation for {count} target(s)")


__all__ = ["app", "build_renderer", "generate"]
