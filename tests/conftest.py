"""Pytest configuration. Ensures project root is in sys.path for top-level packages (cli, report, nextsize_cli)."""
import json
from pathlib import Path
from typing import Callable, Dict, List, Optional

import pytest


@pytest.fixture(scope="session", autouse=True)
def _add_project_root_to_path():
    root = Path(__file__).resolve().parent.parent
    import sys
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


@pytest.fixture
def make_build(tmp_path: Path) -> Callable[..., Path]:
    """Write a fake .next/ tree under tmp_path and return the build root."""

    def _make(
        files: Dict[str, str],
        root_main_files: List[str],
        pages: Optional[Dict[str, List[str]]] = None,
        routes: Optional[Dict[str, str]] = None,
        build_dir: str = ".next",
    ) -> Path:
        build_root = tmp_path / build_dir
        build_root.mkdir(parents=True, exist_ok=True)
        for rel, content in files.items():
            target = build_root / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        (build_root / "build-manifest.json").write_text(
            json.dumps({"rootMainFiles": root_main_files, "pages": {}}), encoding="utf-8"
        )
        if pages is not None:
            (build_root / "app-build-manifest.json").write_text(json.dumps({"pages": pages}), encoding="utf-8")
        if routes is not None:
            (build_root / "app-path-routes-manifest.json").write_text(json.dumps(routes), encoding="utf-8")
        return build_root

    return _make
