# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Boundary between manifest assembly and the external documentation renderer."""

from __future__ import annotations

import json
import logging
import shutil
import subprocess
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Final, Literal, Protocol, TypeAlias, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

from .errors import RendererError
from .models import Manifest
from .types import JSONValue

LOGGER = logging.getLogger(__name__)

PageMode: TypeAlias = Literal["single", "items", "files"]

DEFAULT_DOCGEN_MODULE: Final[str] = "solidity-docgen/dist/main"

# Reads {"builds": [...], "config": {...}} from stdin and awaits main(builds, config).
DOCGEN_SCRIPT: Final[str] = """
const { main } = require(process.argv[1]);
const chunks = [];
process.stdin.on('data', (chunk) => chunks.push(chunk));
process.stdin.on('end', () => {
  const { builds, config } = JSON.parse(Buffer.concat(chunks).toString('utf8'));
  Promise.resolve(main(builds, config)).catch((error) => {
    console.error(error && error.stack ? error.stack : String(error));
    process.exitCode = 1;
  });
});
"""


class RenderConfig(BaseModel):
    """Options forwarded to solidity-docgen alongside the manifest."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    pages: PageMode = "items"
    output_dir: Path | None = Path("docs")
    exclude: tuple[str, ...] = Field(default_factory=tuple)
    templates: Path | None = None
    theme: str | None = None
    page_extension: str | None = None
    collapse_newlines: bool | None = None
    sources_dir: Path | None = None

    def to_docgen_config(self) -> dict[str, JSONValue]:
        """Return the camelCase option object understood by solidity-docgen.

        Returns:
            dict[str, JSONValue]: ``pages`` plus every option explicitly set.
        """

        options: dict[str, JSONValue] = {"pages": self.pages}
        if self.output_dir is not None:
            options["outputDir"] = str(self.output_dir)
        if self.exclude:
            options["exclude"] = list(self.exclude)
        if self.templates is not None:
            options["templates"] = str(self.templates)
        if self.theme is not None:
            options["theme"] = self.theme
        if self.page_extension is not None:
            options["pageExtension"] = self.page_extension
        if self.collapse_newlines is not None:
            options["collapseNewlines"] = self.collapse_newlines
        if self.sources_dir is not None:
            options["sourcesDir"] = str(self.sources_dir)
        return options


@runtime_checkable
class Renderer(Protocol):
    """Turn a manifest into human-readable documentation."""

    def render(self, manifest: Manifest, config: RenderConfig) -> None:
        """Render ``manifest`` using ``config``.

        Args:
            manifest: Fully assembled manifest.
            config: Renderer options.

        Raises:
            RendererError: When the renderer rejects the manifest or fails.
        """


@dataclass(slots=True)
class SolidityDocgenRenderer:
    """Drive the ``solidity-docgen`` Node.js entry point in a subprocess."""

    project_root: Path
    node: str = "node"
    module: str = DEFAULT_DOCGEN_MODULE

    def command(self) -> list[str]:
        """Return the ``node -e`` invocation that loads ``module`` and runs ``main``.

        Raises:
            RendererError: If ``node`` cannot be found.
        """

        executable = shutil.which(self.node)
        if executable is None:
            raise RendererError(f"Node.js executable '{self.node}' was not found on PATH")
        return [executable, "-e", DOCGEN_SCRIPT, self.module]

    def render(self, manifest: Manifest, config: RenderConfig) -> None:
        """Pipe the manifest to ``main(builds, config)`` and wait for completion.

        Node runs from ``project_root`` so the project's ``node_modules``
        provides ``solidity-docgen``.

        Args:
            manifest: Fully assembled manifest.
            config: Renderer options serialised via :meth:`RenderConfig.to_docgen_config`.

        Raises:
            RendererError: If Node.js is unavailable or the renderer exits non-zero.
        """

        payload = json.dumps(
            {"builds": manifest.to_list(), "config": config.to_docgen_config()},
            ensure_ascii=False,
        )
        command = self.command()
        LOGGER.debug("invoking solidity-docgen node=%s entries=%d", command[0], len(manifest))
        try:
            completed = subprocess.run(
                command,
                cwd=str(self.project_root),
                input=payload,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            raise RendererError(f"failed to launch '{self.node}': {exc}") from exc
        if completed.returncode != 0:
            stderr = (completed.stderr or "").strip()
            summary = stderr.splitlines()[0] if stderr else "no diagnostics"
            raise RendererError(
                f"solidity-docgen exited with status {completed.returncode}: {summary}",
                returncode=completed.returncode,
                stderr=stderr,
            )


RenderCallable = Callable[[Manifest, RenderConfig], None]


@dataclass(slots=True)
class CallableRenderer:
    """Adapt a plain callable to the :class:`Renderer` protocol."""

    func: RenderCallable

    def render(self, manifest: Manifest, config: RenderConfig) -> None:
        """Invoke the wrapped callable, reporting any failure as :class:`RendererError`."""

        try:
            self.func(manifest, config)
        except RendererError:
            raise
        except Exception as exc:
            raise RendererError(f"renderer failed: {exc}") from exc


__all__ = [
    "CallableRenderer",
    "DEFAULT_DOCGEN_MODULE",
    "DOCGEN_SCRIPT",
    "PageMode",
    "RenderCallable",
    "RenderConfig",
    "Renderer",
    "SolidityDocgenRenderer",
]
