# SPDX-License-Identifier: MIT
"""Builders for compiler artifacts used in tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

ArtifactWriter = Callable[..., Path]


def artifact_payload(target: str, *, ast_id: int = 1, unit_id: int | None = None) -> dict[str, Any]:
    """Return a minimal well-formed artifact for ``target``."""

    payload: dict[str, Any] = {
        "abi": [],
        "metadata": f'{{"compiler":{{"version":"0.8.18"}},"target":"{target}"}}',
        "ast": {
            "absolutePath": f"contracts/{target}.sol",
            "id": ast_id,
            "nodeType": "SourceUnit",
            "nodes": [{"name": target, "nodeType": "ContractDefinition"}],
        },
    }
    if unit_id is not None:
        payload["id"] = unit_id
    return payload
