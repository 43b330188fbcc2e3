# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Assemble documentation manifests from resolved build artifacts."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import Future, ThreadPoolExecutor

from .models import BuildArtifact, Manifest
from .resolver import ArtifactResolver

LOGGER = logging.getLogger(__name__)


def build_manifest(
    targets: Sequence[str],
    resolver: ArtifactResolver,
    *,
    jobs: int = 1,
) -> Manifest:
    """Resolve every target and project the artifacts into a manifest.

    Either every target resolves and the complete manifest is returned, or
    the first failure in target order propagates and nothing is returned.
    Duplicate targets are kept and yield duplicate entries.

    Args:
        targets: Target identifiers in the order entries should appear.
        resolver: Resolver used to load each artifact.
        jobs: Number of artifacts loaded concurrently; ``1`` loads serially.

    Returns:
        Manifest: One entry per target, in input order.

    Raises:
        ValueError: If ``jobs`` is smaller than one.
        ArtifactError: When any target fails to resolve.
    """

    if jobs < 1:
        raise ValueError("jobs must be at least 1")
    if jobs == 1 or len(targets) <= 1:
        artifacts = [resolver.resolve_target(target) for target in targets]
    else:
        artifacts = _resolve_in_parallel(targets, resolver, jobs=jobs)
    manifest = Manifest(entries=tuple(artifact.to_manifest_entry() for artifact in artifacts))
    LOGGER.debug("assembled manifest entries=%d", len(manifest))
    return manifest


def _resolve_in_parallel(
    targets: Sequence[str],
    resolver: ArtifactResolver,
    *,
    jobs: int,
) -> list[BuildArtifact]:
    """Resolve ``targets`` on a thread pool while keeping input order."""

    executor = ThreadPoolExecutor(max_workers=min(jobs, len(targets)))
    try:
        futures: list[Future[BuildArtifact]] = [
            executor.submit(resolver.resolve_target, target) for target in targets
        ]
        return [future.result() for future in futures]
    finally:
        executor.shutdown(wait=True, cancel_futures=True)


__all__ = ["build_manifest"]
