"""Tests for nextsize.storage (paths, persistence, load_optional)."""

import json
from pathlib import Path

import pytest

from nextsize.core.models import RouteInfo, SizeEntry
from nextsize.core.snapshot import Snapshot
from nextsize.storage import (
    analysis_path,
    base_analysis_path,
    load_analysis,
    load_optional,
    load_previous,
    save_snapshot,
    snapshot_from_dict,
    snapshot_to_compat,
    snapshot_to_extended,
)

SNAP = Snapshot(
    global_size=SizeEntry(150, 55),
    pages={"/page": SizeEntry(500, 200)},
    files={"main.js": SizeEntry(150, 55), "page.js": SizeEntry(500, 200)},
    routes={"/": RouteInfo("/page", "app/page.tsx")},
    global_files=("main.js",),
)


def test_paths(tmp_path: Path) -> None:
    assert analysis_path(tmp_path, "compat") == tmp_path / "analyze" / "__bundle_analysis.json"
    assert base_analysis_path(tmp_path, "extended") == (
        tmp_path / "analyze" / "base" / "bundle" / "__bundle_analysis_extended.json"
    )


def test_compat_shape_is_flat() -> None:
    assert snapshot_to_compat(SNAP) == {
        "__global": {"raw": 150, "gzip": 55},
        "/page": {"raw": 500, "gzip": 200},
    }


def test_extended_shape() -> None:
    data = snapshot_to_extended(SNAP)
    assert set(data) == {"__global", "__pages", "__files", "__routes", "__rootMainFiles"}
    assert data["__routes"] == {"/": {"source": "/page", "sourceFile": "app/page.tsx"}}
    assert data["__rootMainFiles"] == ["main.js"]


def test_extended_roundtrip() -> None:
    assert snapshot_from_dict(json.loads(json.dumps(snapshot_to_extended(SNAP)))) == SNAP


def test_compat_document_parses_pages_only() -> None:
    snap = snapshot_from_dict({"__global": {"raw": 1, "gzip": 1}, "/page": {"raw": 5, "gzip": 2}})
    assert snap.global_size == SizeEntry(1, 1)
    assert dict(snap.pages) == {"/page": SizeEntry(5, 2)}
    assert not snap.files and not snap.routes


@pytest.mark.parametrize(
    "content",
    [
        "",
        "not json",
        "[]",
        '{"__global": {"raw": -1, "gzip": 0}}',
        '{"__global": {"raw": "1", "gzip": 0}}',
        '{"/page": 3}',
        '{"__files": {}, "__rootMainFiles": ["missing.js"]}',
        '{"__routes": {"/": {"sourceFile": "x"}}}',
    ],
)
def test_load_optional_treats_malformed_as_absent(tmp_path: Path, content: str) -> None:
    target = tmp_path / "analysis.json"
    target.write_text(content, encoding="utf-8")
    assert load_optional(target) is None


def test_load_optional_missing(tmp_path: Path) -> None:
    assert load_optional(tmp_path / "nope.json") is None


def test_save_and_load_previous(tmp_path: Path) -> None:
    compat_path, extended_path = save_snapshot(tmp_path, SNAP)
    assert json.loads(compat_path.read_text(encoding="utf-8"))["__global"] == {"raw": 150, "gzip": 55}
    assert extended_path.exists()
    assert load_previous(tmp_path) == SNAP


def test_load_previous_falls_back_to_compat(tmp_path: Path) -> None:
    target = analysis_path(tmp_path, "compat")
    target.parent.mkdir(parents=True)
    target.write_text(json.dumps({"__global": {"raw": 7, "gzip": 3}}), encoding="utf-8")
    assert load_previous(tmp_path).global_size == SizeEntry(7, 3)


def test_load_previous_none_when_absent(tmp_path: Path) -> None:
    assert load_previous(tmp_path) is None


def test_load_analysis_reads_base_directory(tmp_path: Path) -> None:
    target = base_analysis_path(tmp_path, "extended")
    target.parent.mkdir(parents=True)
    target.write_text(json.dumps(snapshot_to_extended(SNAP)), encoding="utf-8")
    assert load_analysis(tmp_path, base=True) == SNAP
    assert load_analysis(tmp_path) is None
