"""
Analysis artifact locations.

All artifacts live under <build output root>/analyze/. The base analysis a
pull request is compared against (downloaded by CI) lives under
analyze/base/bundle/ with the same file names.
"""

from __future__ import annotations

from pathlib import Path

ANALYZE_DIR = "analyze"
BASE_DIR = ("base", "bundle")

FILES = {
    "compat": "__bundle_analysis.json",
    "extended": "__bundle_analysis_extended.json",
    "comment": "__bundle_analysis_comment.txt",
}


def analyze_dir(build_root: Path) -> Path:
    return Path(build_root) / ANALYZE_DIR


def analysis_path(build_root: Path, name: str) -> Path:
    """Return <build_root>/analyze/<filename> for a FILES key."""
    return analyze_dir(build_root) / FILES[name]


def base_analysis_path(build_root: Path, name: str) -> Path:
    """Return <build_root>/analyze/base/bundle/<filename> for a FILES key."""
    return analyze_dir(build_root).joinpath(*BASE_DIR) / FILES[name]


def ensure_analyze_dir(build_root: Path) -> Path:
    """Create analyze/ if it does not exist. Call before first write."""
    target = analyze_dir(build_root)
    target.mkdir(parents=True, exist_ok=True)
    return target
