# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests covering manifest assembly across target lists."""

from __future__ import annotations

from pathlib import Path

import pytest

from helpers.artifacts import ArtifactWriter, artifact_payload
from soldocgen.errors import ArtifactMalformedError, ArtifactNotFoundError
from soldocgen.manifest import build_manifest
from soldocgen.resolver import ArtifactResolver

TARGETS = ("Broker", "BiPoolManager", "SortedOracles", "Reserve", "IBroker")


@pytest.fixture
def resolver(out_dir: Path) -> ArtifactResolver:
    return ArtifactResolver(out_dir=out_dir)


def test_single_target_manifest(write_artifact: ArtifactWriter, resolver: ArtifactResolver) -> None:
    write_artifact("Broker")

    manifest = build_manifest(["Broker"], resolver)

    assert len(manifest) == 1
    entry = manifest.to_list()[0]
    assert entry["input"] == artifact_payload("Broker")["metadata"]
    assert list(entry["output"]["sources"]) == ["contracts/Broker.sol"]
    assert entry["output"]["sources"]["contracts/Broker.sol"]["id"] == 1


@pytest.mark.parametrize("jobs", [1, 4])
def test_manifest_preserves_target_order(
    write_artifact: ArtifactWriter,
    resolver: ArtifactResolver,
    jobs: int,
) -> None:
    for target in TARGETS:
        write_artifact(target)

    manifest = build_manifest(TARGETS, resolver, jobs=jobs)

    assert manifest.targets == TARGETS
    paths = [next(iter(entry["output"]["sources"])) for entry in manifest.to_list()]
    assert paths == [f"contracts/{target}.sol" for target in TARGETS]


def test_missing_artifact_fails_whole_manifest(write_artifact: ArtifactWriter, resolver: ArtifactResolver) -> None:
    write_artifact("Broker")

    with pytest.raises(ArtifactNotFoundError) as excinfo:
        build_manifest(["Broker", "Reserve"], resolver)

    assert excinfo.value.target == "Reserve"


def test_parallel_failure_reports_first_target_in_order(
    write_artifact: ArtifactWriter,
    resolver: ArtifactResolver,
) -> None:
    write_artifact("Broker")
    write_artifact("StableToken", {"metadata": "m"})

    with pytest.raises(ArtifactMalformedError) as excinfo:
        build_manifest(["Broker", "StableToken", "Reserve"], resolver, jobs=3)

    assert excinfo.value.target == "StableToken"


def test_empty_target_list_yields_empty_manifest(resolver: ArtifactResolver) -> None:
    manifest = build_manifest([], resolver)

    assert len(manifest) == 0
    assert not manifest
    assert manifest.to_list() == []


def test_duplicate_targets_produce_duplicate_entries(
    write_artifact: ArtifactWriter,
    resolver: ArtifactResolver,
) -> None:
    write_artifact("Broker")

    manifest = build_manifest(["Broker", "Broker"], resolver)

    assert manifest.targets == ("Broker", "Broker")
    assert manifest.to_list()[0] == manifest.to_list()[1]


def test_rebuilding_is_bit_identical(write_artifact: ArtifactWriter, resolver: ArtifactResolver) -> None:
    for target in TARGETS:
        write_artifact(target, artifact_payload(target, unit_id=len(target)))

    first = build_manifest(TARGETS, resolver)
    second = build_manifest(TARGETS, resolver, jobs=2)

    assert first == second
    assert first.to_json() == second.to_json()
    assert first.checksum() == second.checksum()


def test_serialised_entries_do_not_alias_manifest_state(
    write_artifact: ArtifactWriter,
    resolver: ArtifactResolver,
) -> None:
    write_artifact("Broker")
    manifest = build_manifest(["Broker"], resolver)

    builds = manifest.to_list()
    builds[0]["output"]["sources"]["contracts/Broker.sol"]["ast"]["nodes"].clear()

    assert manifest.to_list()[0]["output"]["sources"]["contracts/Broker.sol"]["ast"]["nodes"]


def test_invalid_job_count_is_rejected(resolver: ArtifactResolver) -> None:
    with pytest.raises(ValueError):
        build_manifest(["Broker"], resolver, jobs=0)
