"""End-to-end analysis run.

manifests -> SizeCache/build_snapshot -> load previous -> diff -> persist.
One SizeCache per run; it is dropped with the AnalysisRun.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from nextsize.analysis.measure import SizeCache
from nextsize.analysis.routes import RouteResolver
from nextsize.config import AnalysisConfig
from nextsize.core.snapshot import Snapshot, build_snapshot
from nextsize.evolution.diff import DiffResult, diff_snapshots
from nextsize.manifests.loader import check_build_root, load_manifests
from nextsize.storage.paths import analysis_path
from nextsize.storage.persistence import load_analysis, load_previous, save_snapshot

from .logging import get_logger

_log = get_logger("pipeline")


@dataclass
class AnalysisRun:
    current: Snapshot
    previous: Optional[Snapshot]
    diff: DiffResult
    compat_path: Optional[Path] = None
    extended_path: Optional[Path] = None


def measure_build(config: AnalysisConfig) -> Snapshot:
    """Build the current Snapshot. Raises BuildOutputError on a missing build root or manifest."""
    build_root = config.build_root
    check_build_root(build_root)
    manifests = load_manifests(build_root)
    cache = SizeCache(build_root)
    resolver = RouteResolver(config.project_root, config.app_directory)
    snapshot = build_snapshot(
        manifests.root_main_files,
        manifests.pages,
        manifests.app_path_routes,
        cache=cache,
        resolver=resolver,
    )
    _log.debug(
        "nextsize: measured %s files (%s read), %s pages, %s routes",
        len(cache),
        cache.reads,
        len(snapshot.pages),
        len(snapshot.routes),
    )
    return snapshot


def run_analysis(config: AnalysisConfig, *, write: bool = True) -> AnalysisRun:
    """Measure, diff against the previous run and (unless write=False) persist."""
    current = measure_build(config)
    previous = load_previous(config.build_root)
    if previous is None:
        _log.info("nextsize: no previous analysis found, establishing baseline")
    run = AnalysisRun(current=current, previous=previous, diff=diff_snapshots(previous, current))
    if write:
        run.compat_path, run.extended_path = save_snapshot(config.build_root, current)
    return run


def build_comment(config: AnalysisConfig) -> Optional[str]:
    """Markdown fragment comparing analyze/ with analyze/base/bundle/; None if no current analysis."""
    from report.comment_format import format_comment

    current = load_analysis(config.build_root, base=False)
    if current is None:
        return None
    base = load_analysis(config.build_root, base=True)
    return format_comment(diff_snapshots(base, current))


def run_comment(config: AnalysisConfig) -> Tuple[Optional[str], bool]:
    """Build the comment fragment and append it to the comment file. Returns (content, written)."""
    from report.comment_format import append_comment

    content = build_comment(config)
    if content is None:
        return None, False
    return content, append_comment(analysis_path(config.build_root, "comment"), content)
