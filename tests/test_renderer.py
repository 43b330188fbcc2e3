# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the solidity-docgen renderer boundary."""

from __future__ import annotations

import json
import subprocess
from pathlib import Path
from typing import Any

import pytest

from helpers.artifacts import ArtifactWriter
from soldocgen import renderer as renderer_module
from soldocgen.errors import RendererError
from soldocgen.manifest import build_manifest
from soldocgen.models import Manifest
from soldocgen.renderer import (
    DEFAULT_DOCGEN_MODULE,
    CallableRenderer,
    RenderConfig,
    Renderer,
    SolidityDocgenRenderer,
)
from soldocgen.resolver import ArtifactResolver


class _RecordingRunner:
    def __init__(self, returncode: int = 0, stderr: str = "") -> None:
        self.returncode = returncode
        self.stderr = stderr
        self.calls: list[dict[str, Any]] = []

    def __call__(self, args: list[str], **kwargs: Any) -> subprocess.CompletedProcess[str]:
        self.calls.append({"args": list(args), **kwargs})
        return subprocess.CompletedProcess(args, self.returncode, stdout="", stderr=self.stderr)


def test_default_config_matches_items_layout() -> None:
    assert RenderConfig().to_docgen_config() == {"pages": "items", "outputDir": "docs"}


def test_output_dir_can_be_cleared() -> None:
    assert RenderConfig(output_dir=None).to_docgen_config() == {"pages": "items"}


def test_config_emits_camel_case_options() -> None:
    config = RenderConfig(
        pages="files",
        output_dir=Path("docs/api"),
        exclude=("mocks",),
        templates=Path("templates"),
        theme="markdown",
        page_extension=".mdx",
        collapse_newlines=True,
        sources_dir=Path("contracts"),
    )

    assert config.to_docgen_config() == {
        "pages": "files",
        "outputDir": "docs/api",
        "exclude": ["mocks"],
        "templates": "templates",
        "theme": "markdown",
        "pageExtension": ".mdx",
        "collapseNewlines": True,
        "sourcesDir": "contracts",
    }


def test_unknown_page_mode_is_rejected() -> None:
    with pytest.raises(ValueError):
        RenderConfig(pages="chapters")  # type: ignore[arg-type]


def test_docgen_renderer_pipes_manifest_to_node(
    tmp_path: Path,
    out_dir: Path,
    write_artifact: ArtifactWriter,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    write_artifact("Broker")
    manifest = build_manifest(["Broker"], ArtifactResolver(out_dir=out_dir))
    runner = _RecordingRunner()
    monkeypatch.setattr(renderer_module.shutil, "which", lambda name: f"/usr/bin/{name}")
    monkeypatch.setattr(renderer_module.subprocess, "run", runner)

    SolidityDocgenRenderer(project_root=tmp_path, node="node").render(manifest, RenderConfig())

    (call,) = runner.calls
    assert call["args"][0] == "/usr/bin/node"
    assert call["args"][1] == "-e"
    assert call["args"][-1] == DEFAULT_DOCGEN_MODULE
    assert call["cwd"] == str(tmp_path)
    assert call["text"] is True
    assert call["check"] is False
    payload = json.loads(call["input"])
    assert payload == {"builds": manifest.to_list(), "config": RenderConfig().to_docgen_config()}


def test_docgen_renderer_maps_non_zero_exit(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    runner = _RecordingRunner(returncode=1, stderr="Error: Cannot find module 'solidity-docgen/dist/main'\n  at x")
    monkeypatch.setattr(renderer_module.shutil, "which", lambda name: f"/usr/bin/{name}")
    monkeypatch.setattr(renderer_module.subprocess, "run", runner)

    with pytest.raises(RendererError) as excinfo:
        SolidityDocgenRenderer(project_root=tmp_path).render(Manifest(), RenderConfig())

    assert excinfo.value.returncode == 1
    assert "Cannot find module" in str(excinfo.value)
    assert "at x" in excinfo.value.stderr


def test_docgen_renderer_reports_missing_node(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(renderer_module.shutil, "which", lambda name: None)
    renderer = SolidityDocgenRenderer(project_root=tmp_path, node="definitely-not-a-node-binary")

    with pytest.raises(RendererError, match="definitely-not-a-node-binary"):
        renderer.render(Manifest(), RenderConfig())


def test_docgen_renderer_maps_launch_failure(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def _refuse(args: list[str], **kwargs: Any) -> subprocess.CompletedProcess[str]:
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr(renderer_module.shutil, "which", lambda name: f"/usr/bin/{name}")
    monkeypatch.setattr(renderer_module.subprocess, "run", _refuse)

    with pytest.raises(RendererError, match="failed to launch 'node'"):
        SolidityDocgenRenderer(project_root=tmp_path).render(Manifest(), RenderConfig())


def test_callable_renderer_wraps_failures() -> None:
    def _explode(manifest: Manifest, config: RenderConfig) -> None:
        raise KeyError("pages")

    renderer = CallableRenderer(_explode)

    assert isinstance(renderer, Renderer)
    with pytest.raises(RendererError) as excinfo:
        renderer.render(Manifest(), RenderConfig())
    assert isinstance(excinfo.value.__cause__, KeyError)
