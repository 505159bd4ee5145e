"""Tests for nextsize.manifests (loader, compat shims)."""

import json
from pathlib import Path

import pytest

from nextsize.manifests import BuildOutputError, apply_compat_shims, check_build_root, load_manifests


def test_check_build_root_missing(tmp_path: Path) -> None:
    with pytest.raises(BuildOutputError, match="No build output found"):
        check_build_root(tmp_path / ".next")


def test_check_build_root_file_is_not_a_dir(tmp_path: Path) -> None:
    (tmp_path / ".next").write_text("", encoding="utf-8")
    with pytest.raises(BuildOutputError):
        check_build_root(tmp_path / ".next")


def test_build_manifest_required(tmp_path: Path) -> None:
    with pytest.raises(BuildOutputError, match="build-manifest.json"):
        load_manifests(tmp_path)


def test_build_manifest_unparsable_is_fatal(tmp_path: Path) -> None:
    (tmp_path / "build-manifest.json").write_text("{broken", encoding="utf-8")
    with pytest.raises(BuildOutputError):
        load_manifests(tmp_path)


def test_optional_manifests_default_to_empty(tmp_path: Path) -> None:
    (tmp_path / "build-manifest.json").write_text("{}", encoding="utf-8")
    manifests = load_manifests(tmp_path)
    assert manifests.root_main_files == []
    assert manifests.pages == {}
    assert manifests.app_path_routes == {}


def test_unparsable_optional_manifests_degrade(tmp_path: Path) -> None:
    (tmp_path / "build-manifest.json").write_text('{"rootMainFiles": ["a.js"]}', encoding="utf-8")
    (tmp_path / "app-build-manifest.json").write_text("nope", encoding="utf-8")
    (tmp_path / "app-path-routes-manifest.json").write_text("[1, 2]", encoding="utf-8")
    manifests = load_manifests(tmp_path)
    assert manifests.root_main_files == ["a.js"]
    assert manifests.pages == {}
    assert manifests.app_path_routes == {}


def test_loads_all_manifests(make_build) -> None:
    build_root = make_build(
        {},
        ["static/chunks/main.js"],
        pages={"/page": ["static/chunks/page.js", 5], "/bad": None},
        routes={"/page": "/", "/blog/page": "/blog"},
    )
    manifests = load_manifests(build_root)
    assert manifests.root_main_files == ["static/chunks/main.js"]
    assert manifests.pages == {"/page": ["static/chunks/page.js"], "/bad": []}
    assert manifests.app_path_routes == {"/page": "/", "/blog/page": "/blog"}


def test_compat_creates_missing_manifests(tmp_path: Path) -> None:
    build_root = tmp_path / ".next"
    (build_root / "server").mkdir(parents=True)
    (build_root / "server" / "pages-manifest.json").write_text('{"/_app": "pages/_app.js"}', encoding="utf-8")
    actions = apply_compat_shims(build_root)
    assert len(actions) == 2
    assert json.loads((build_root / "react-loadable-manifest.json").read_text(encoding="utf-8")) == {}
    assert json.loads((build_root / "pages-manifest.json").read_text(encoding="utf-8")) == {"/_app": "pages/_app.js"}


def test_compat_never_overwrites(tmp_path: Path) -> None:
    build_root = tmp_path / ".next"
    (build_root / "server").mkdir(parents=True)
    (build_root / "react-loadable-manifest.json").write_text('{"keep": 1}', encoding="utf-8")
    (build_root / "pages-manifest.json").write_text('{"root": 1}', encoding="utf-8")
    (build_root / "server" / "pages-manifest.json").write_text('{"server": 1}', encoding="utf-8")
    assert apply_compat_shims(build_root) == []
    assert (build_root / "react-loadable-manifest.json").read_text(encoding="utf-8") == '{"keep": 1}'
    assert (build_root / "pages-manifest.json").read_text(encoding="utf-8") == '{"root": 1}'


def test_compat_without_build_root(tmp_path: Path) -> None:
    assert apply_compat_shims(tmp_path / ".next") == []
    assert not (tmp_path / ".next").exists()
