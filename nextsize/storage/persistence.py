"""
Snapshot persistence.

Two documents are written per run:

- compat:   {"__global": {raw, gzip}, "<page>": {raw, gzip}, ...}
            flat shape read by the nextjs-bundle-analysis compare step;
- extended: {"__global", "__pages", "__files", "__routes", "__rootMainFiles"}
            the full snapshot, needed for file and route level diffs.

Reading is best effort: load_optional never raises, anything it cannot
parse is treated the same as a missing file.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

from nextsize.core.models import RouteInfo, SizeEntry
from nextsize.core.snapshot import Snapshot
from nextsize.orchestration.logging import get_logger

from .paths import analysis_path, base_analysis_path, ensure_analyze_dir

GLOBAL_KEY = "__global"
PAGES_KEY = "__pages"
FILES_KEY = "__files"
ROUTES_KEY = "__routes"
ROOT_MAIN_FILES_KEY = "__rootMainFiles"

_EXTENDED_MARKERS = (PAGES_KEY, FILES_KEY, ROUTES_KEY, ROOT_MAIN_FILES_KEY)

_log = get_logger("storage")


def snapshot_to_compat(snapshot: Snapshot) -> Dict[str, Any]:
    data: Dict[str, Any] = {GLOBAL_KEY: snapshot.global_size.to_dict()}
    for page, size in snapshot.pages.items():
        data[page] = size.to_dict()
    return data


def snapshot_to_extended(snapshot: Snapshot) -> Dict[str, Any]:
    return {
        GLOBAL_KEY: snapshot.global_size.to_dict(),
        PAGES_KEY: {k: v.to_dict() for k, v in snapshot.pages.items()},
        FILES_KEY: {k: v.to_dict() for k, v in snapshot.files.items()},
        ROUTES_KEY: {k: v.to_dict() for k, v in snapshot.routes.items()},
        ROOT_MAIN_FILES_KEY: list(snapshot.global_files),
    }


def _size_map(data: Any, what: str) -> Dict[str, SizeEntry]:
    if not isinstance(data, Mapping):
        raise ValueError(f"{what} must be an object")
    return {str(k): SizeEntry.from_dict(v) for k, v in data.items()}


def snapshot_from_dict(data: Any) -> Snapshot:
    """Parse either the compat or the extended document. Raises ValueError if malformed."""
    if not isinstance(data, Mapping):
        raise ValueError("analysis document must be a JSON object")
    global_size = SizeEntry.from_dict(data[GLOBAL_KEY]) if GLOBAL_KEY in data else SizeEntry.ZERO

    if not any(k in data for k in _EXTENDED_MARKERS):
        pages = _size_map({k: v for k, v in data.items() if k != GLOBAL_KEY}, "pages")
        return Snapshot(global_size=global_size, pages=pages)

    routes_raw = data.get(ROUTES_KEY) or {}
    if not isinstance(routes_raw, Mapping):
        raise ValueError(f"{ROUTES_KEY} must be an object")
    root_files = data.get(ROOT_MAIN_FILES_KEY) or []
    if not isinstance(root_files, list) or not all(isinstance(f, str) for f in root_files):
        raise ValueError(f"{ROOT_MAIN_FILES_KEY} must be a list of strings")
    return Snapshot(
        global_size=global_size,
        pages=_size_map(data.get(PAGES_KEY) or {}, PAGES_KEY),
        files=_size_map(data.get(FILES_KEY) or {}, FILES_KEY),
        routes={str(k): RouteInfo.from_dict(v) for k, v in routes_raw.items()},
        global_files=tuple(root_files),
    )


def load_optional(path: Path) -> Optional[Snapshot]:
    """Snapshot stored at path, or None when absent, unreadable or malformed."""
    path = Path(path)
    if not path.is_file():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return snapshot_from_dict(data)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        _log.debug("nextsize: cannot read %s (%s), ignoring", path, e)
    except (KeyError, TypeError, ValueError) as e:
        _log.debug("nextsize: invalid analysis in %s (%s), ignoring", path, e)
    return None


def load_analysis(build_root: Path, *, base: bool = False) -> Optional[Snapshot]:
    """Stored analysis under analyze/ (or analyze/base/bundle/): extended first, compat second."""
    locate = base_analysis_path if base else analysis_path
    for name in ("extended", "compat"):
        snapshot = load_optional(locate(build_root, name))
        if snapshot is not None:
            return snapshot
    return None


def load_previous(build_root: Path) -> Optional[Snapshot]:
    """Previous run's snapshot, read before the current run overwrites it."""
    return load_analysis(build_root)


def save_snapshot(build_root: Path, snapshot: Snapshot) -> Tuple[Path, Path]:
    """Write compat and extended documents, overwriting the previous run."""
    ensure_analyze_dir(build_root)
    compat_path = analysis_path(build_root, "compat")
    extended_path = analysis_path(build_root, "extended")
    compat_path.write_text(json.dumps(snapshot_to_compat(snapshot)), encoding="utf-8")
    extended_path.write_text(json.dumps(snapshot_to_extended(snapshot)), encoding="utf-8")
    _log.debug("nextsize: wrote %s and %s", compat_path, extended_path)
    return compat_path, extended_path
