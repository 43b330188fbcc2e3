# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""End-to-end documentation run: assemble the manifest, then delegate rendering."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .config import SoldocgenConfig
from .manifest import build_manifest
from .models import Manifest
from .renderer import Renderer
from .resolver import ArtifactResolver

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GenerationResult:
    """Outcome of :func:`generate_docs`."""

    manifest: Manifest
    rendered: bool


def generate_docs(
    config: SoldocgenConfig,
    renderer: Renderer,
    *,
    dry_run: bool = False,
) -> GenerationResult:
    """Build the manifest for ``config.targets`` and hand it to ``renderer``.

    An empty target list yields an empty manifest. The renderer still runs
    for it unless ``config.skip_empty`` is set.

    Args:
        config: Resolved configuration.
        renderer: Renderer receiving the manifest and ``config.docgen``.
        dry_run: Build the manifest without invoking the renderer.

    Returns:
        GenerationResult: The manifest and whether the renderer was invoked.

    Raises:
        ArtifactError: When any target fails to resolve; the renderer is not called.
        RendererError: When the renderer fails.
    """

    resolver = ArtifactResolver(out_dir=config.out_dir, extension=config.extension)
    manifest = build_manifest(config.targets, resolver, jobs=config.jobs)
    if dry_run:
        return GenerationResult(manifest=manifest, rendered=False)
    if not manifest and config.skip_empty:
        LOGGER.debug("manifest is empty and skip_empty is set; renderer not invoked")
        return GenerationResult(manifest=manifest, rendered=False)
    renderer.render(manifest, config.docgen)
    return GenerationResult(manifest=manifest, rendered=True)


__all__ = ["GenerationResult", "generate_docs"]
