# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from helpers.artifacts import ArtifactWriter, artifact_payload


@pytest.fixture
def out_dir(tmp_path: Path) -> Path:
    """Return the compiler output directory used by artifact tests."""

    path = tmp_path / "out"
    path.mkdir()
    return path


@pytest.fixture
def write_artifact(out_dir: Path) -> ArtifactWriter:
    """Return a helper writing ``<out>/<target>.<ext>/<target>.json``."""

    def _write(target: str, payload: Any = None, *, extension: str = "sol", raw: str | None = None) -> Path:
        directory = out_dir / f"{target}.{extension}"
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / f"{target}.json"
        if raw is not None:
            path.write_text(raw, encoding="utf-8")
        else:
            document = artifact_payload(target) if payload is None else payload
            path.write_text(json.dumps(document, indent=2), encoding="utf-8")
        return path

    return _write
