"""Loading the bundler's manifests from the build output root.

build-manifest.json is required: without rootMainFiles there is no global
bundle to measure pages against. app-build-manifest.json and
app-path-routes-manifest.json are optional and default to empty.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from nextsize.orchestration.logging import get_logger

BUILD_MANIFEST = "build-manifest.json"
APP_BUILD_MANIFEST = "app-build-manifest.json"
APP_PATH_ROUTES_MANIFEST = "app-path-routes-manifest.json"

_log = get_logger("manifests")


class BuildOutputError(RuntimeError):
    """Build output root or its required manifest is missing or unreadable."""


@dataclass
class BuildManifests:
    root_main_files: List[str] = field(default_factory=list)
    pages: Dict[str, List[str]] = field(default_factory=dict)
    app_path_routes: Dict[str, str] = field(default_factory=dict)


def check_build_root(build_root: Path) -> None:
    """Raise BuildOutputError unless build_root is a readable directory."""
    build_root = Path(build_root)
    if not build_root.is_dir() or not os.access(build_root, os.R_OK):
        raise BuildOutputError(
            f'No build output found at "{build_root}" - you may not have your working '
            f'directory set correctly, or not have run "next build".'
        )


def _read_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


def _read_optional(path: Path) -> Any:
    """Parsed JSON at path, or None when missing or unparsable."""
    if not path.is_file():
        return None
    try:
        return _read_json(path)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        _log.debug("nextsize: ignoring unreadable %s (%s)", path.name, e)
        return None


def _string_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [v for v in value if isinstance(v, str)]


def load_manifests(build_root: Path) -> BuildManifests:
    build_root = Path(build_root)
    manifest_path = build_root / BUILD_MANIFEST
    try:
        build_meta = _read_json(manifest_path)
    except FileNotFoundError as e:
        raise BuildOutputError(f"{BUILD_MANIFEST} not found in {build_root}") from e
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise BuildOutputError(f"cannot parse {manifest_path}: {e}") from e
    if not isinstance(build_meta, dict):
        raise BuildOutputError(f"{manifest_path} is not a JSON object")

    app_meta = _read_optional(build_root / APP_BUILD_MANIFEST)
    raw_pages = app_meta.get("pages") if isinstance(app_meta, dict) else None
    pages = (
        {str(k): _string_list(v) for k, v in raw_pages.items()}
        if isinstance(raw_pages, dict)
        else {}
    )

    raw_routes = _read_optional(build_root / APP_PATH_ROUTES_MANIFEST)
    routes = (
        {str(k): v for k, v in raw_routes.items() if isinstance(v, str)}
        if isinstance(raw_routes, dict)
        else {}
    )

    return BuildManifests(
        root_main_files=_string_list(build_meta.get("rootMainFiles")),
        pages=pages,
        app_path_routes=routes,
    )
