"""Manifest compatibility shims for app-router-only builds.

The nextjs-bundle-analysis action expects manifests that App Router builds
do not always emit. These shims add them without touching existing files.
"""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import List

from nextsize.orchestration.logging import get_logger

REACT_LOADABLE_MANIFEST = "react-loadable-manifest.json"
PAGES_MANIFEST = "pages-manifest.json"
SERVER_DIR = "server"

_log = get_logger("manifests")


def apply_compat_shims(build_root: Path) -> List[str]:
    """Create missing compat manifests under build_root. Returns messages for actions taken."""
    build_root = Path(build_root)
    actions: List[str] = []
    if not build_root.is_dir():
        return actions

    react_loadable = build_root / REACT_LOADABLE_MANIFEST
    if not react_loadable.exists():
        try:
            react_loadable.write_text("{}", encoding="utf-8")
            actions.append(f"Created compat {react_loadable.name}")
        except OSError as e:
            _log.warning("nextsize: cannot create %s: %s", react_loadable, e)

    root_pages = build_root / PAGES_MANIFEST
    server_pages = build_root / SERVER_DIR / PAGES_MANIFEST
    if not root_pages.exists() and server_pages.is_file():
        try:
            shutil.copyfile(server_pages, root_pages)
            actions.append(f"Copied {SERVER_DIR}/{PAGES_MANIFEST} to {PAGES_MANIFEST}")
        except OSError as e:
            _log.warning("nextsize: cannot copy %s: %s", server_pages, e)
    return actions
