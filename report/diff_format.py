"""Console change log for a bundle size diff.

Line order is fixed so identical input yields identical output:
global JSON line, file changes, page changes, new routes, removed routes.
Changed files and pages are listed by descending |Δgzip|, then |Δraw|, then
key; new/removed files and routes by key.
"""

from __future__ import annotations

import json
from typing import Iterable, List

from nextsize.core.models import SizeEntry
from nextsize.core.snapshot import Snapshot
from nextsize.evolution.diff import DiffResult, SizeChange

from .ux import _BOLD, _CYAN, _DIM, _GREEN, _RED, _YELLOW, _color, delta_color, format_sign


def order_by_magnitude(changes: Iterable[SizeChange]) -> List[SizeChange]:
    """Largest compressed change first; ties by raw change, then key."""
    return sorted(
        changes,
        key=lambda c: (-abs(c.delta.gzip), -abs(c.delta.raw), c.key),
    )


def format_global_line(diff: DiffResult) -> str:
    """Machine-parseable JSON line with current global size and its delta."""
    change = diff.global_change
    return json.dumps(
        {"__global": change.curr.to_dict(), "__delta_global": change.delta.to_dict()},
        separators=(",", ":"),
    )


def _sized_delta(change: SizeChange, use_color: bool) -> str:
    d, curr = change.delta, change.curr
    raw_d = _color(format_sign(d.raw), delta_color(d.raw), use_color)
    gzip_d = _color(format_sign(d.gzip), delta_color(d.gzip), use_color)
    return f"raw={curr.raw} (Δ {raw_d}) gzip={curr.gzip} (Δ {gzip_d})"


def format_diff_lines(diff: DiffResult, current: Snapshot, *, use_color: bool = False) -> List[str]:
    """Render diff as change-log lines. current supplies root file sizes for new routes."""
    c = lambda t, code: _color(t, code, use_color)
    lines = [format_global_line(diff)]

    if diff.has_file_changes:
        lines.append(c("Bundle file changes:", _BOLD))
    for f in order_by_magnitude(diff.changed_files):
        lines.append(f"{c('CHANGED', _YELLOW)} {f.key} {_sized_delta(f, use_color)}")
    for f in diff.new_files:
        lines.append(f"{c('NEW    ', _CYAN)} {f.key} raw={f.curr.raw} gzip={f.curr.gzip}")
    for f in diff.removed_files:
        lines.append(f"{c('REMOVED', _DIM)} {f.key} raw={f.prev.raw} gzip={f.prev.gzip}")

    if diff.changed_pages:
        lines.append(c("Page bundle changes:", _BOLD))
        for p in order_by_magnitude(diff.changed_pages):
            lines.append(f"PAGE {p.key} {_sized_delta(p, use_color)}")

    if diff.new_routes:
        lines.append(c("New pages detected:", _BOLD))
        for r in diff.new_routes:
            lines.append(f"{c('NEW PAGE', _GREEN)} {r.route} (source: {r.info.display_source})")
            # Root main files are what every app-router page pulls in.
            for f in current.global_files:
                size = current.files.get(f, SizeEntry.ZERO)
                lines.append(f"  uses {f} raw={size.raw} gzip={size.gzip}")

    if diff.removed_routes:
        lines.append(c("Removed pages:", _BOLD))
        for r in diff.removed_routes:
            source = r.info.display_source or "unknown"
            lines.append(f"{c('REMOVED PAGE', _RED)} {r.route} (source: {source})")
    return lines


def format_diff(diff: DiffResult, current: Snapshot, *, use_color: bool = False) -> str:
    return "\n".join(format_diff_lines(diff, current, use_color=use_color))
