"""
Bundle size diff.

Compares the previous run's snapshot (possibly absent) with the current one
at three granularities: files (changed / new / removed), pages (changed
only, missing side counted as zero) and routes (added / removed by key).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from nextsize.core.models import RouteInfo, SizeDelta, SizeEntry
from nextsize.core.snapshot import Snapshot


@dataclass(frozen=True)
class SizeChange:
    """prev -> curr for one key (file, page or the global bundle)."""

    key: str
    prev: SizeEntry
    curr: SizeEntry

    @property
    def delta(self) -> SizeDelta:
        return self.curr - self.prev

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key": self.key,
            "prev": self.prev.to_dict(),
            "curr": self.curr.to_dict(),
            "delta": self.delta.to_dict(),
        }


@dataclass(frozen=True)
class RouteChange:
    route: str
    info: RouteInfo

    def to_dict(self) -> Dict[str, Any]:
        return {"route": self.route, **self.info.to_dict()}


@dataclass(frozen=True)
class DiffResult:
    global_change: SizeChange
    changed_files: List[SizeChange] = field(default_factory=list)
    new_files: List[SizeChange] = field(default_factory=list)
    removed_files: List[SizeChange] = field(default_factory=list)
    changed_pages: List[SizeChange] = field(default_factory=list)
    new_routes: List[RouteChange] = field(default_factory=list)
    removed_routes: List[RouteChange] = field(default_factory=list)

    @property
    def has_file_changes(self) -> bool:
        return bool(self.changed_files or self.new_files or self.removed_files)

    @property
    def is_empty(self) -> bool:
        return (
            self.global_change.delta.is_zero
            and not self.has_file_changes
            and not self.changed_pages
            and not self.new_routes
            and not self.removed_routes
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "global": self.global_change.to_dict(),
            "changed_files": [c.to_dict() for c in self.changed_files],
            "new_files": [c.to_dict() for c in self.new_files],
            "removed_files": [c.to_dict() for c in self.removed_files],
            "changed_pages": [c.to_dict() for c in self.changed_pages],
            "new_routes": [r.to_dict() for r in self.new_routes],
            "removed_routes": [r.to_dict() for r in self.removed_routes],
        }


def diff_snapshots(previous: Optional[Snapshot], current: Snapshot) -> DiffResult:
    """Classify differences between previous (None = first run) and current."""
    prev = previous if previous is not None else Snapshot.empty()
    changed, added, removed = _compute_file_diff(prev.files, current.files)
    new_routes, removed_routes = _compute_route_diff(prev.routes, current.routes)
    return DiffResult(
        global_change=SizeChange("__global", prev.global_size, current.global_size),
        changed_files=changed,
        new_files=added,
        removed_files=removed,
        changed_pages=_compute_page_diff(prev.pages, current.pages),
        new_routes=new_routes,
        removed_routes=removed_routes,
    )


def _compute_file_diff(
    old: Mapping[str, SizeEntry], new: Mapping[str, SizeEntry]
) -> tuple[List[SizeChange], List[SizeChange], List[SizeChange]]:
    changed: List[SizeChange] = []
    added: List[SizeChange] = []
    removed: List[SizeChange] = []
    for key in sorted(set(old) | set(new)):
        if key not in old:
            added.append(SizeChange(key, SizeEntry.ZERO, new[key]))
        elif key not in new:
            removed.append(SizeChange(key, old[key], SizeEntry.ZERO))
        else:
            change = SizeChange(key, old[key], new[key])
            if not change.delta.is_zero:
                changed.append(change)
    return changed, added, removed


def _compute_page_diff(
    old: Mapping[str, SizeEntry], new: Mapping[str, SizeEntry]
) -> List[SizeChange]:
    # A page that appears or disappears is measured against zero, not flagged.
    pages: List[SizeChange] = []
    for key in sorted(set(old) | set(new)):
        change = SizeChange(key, old.get(key, SizeEntry.ZERO), new.get(key, SizeEntry.ZERO))
        if not change.delta.is_zero:
            pages.append(change)
    return pages


def _compute_route_diff(
    old: Mapping[str, RouteInfo], new: Mapping[str, RouteInfo]
) -> tuple[List[RouteChange], List[RouteChange]]:
    added = [RouteChange(r, new[r]) for r in sorted(set(new) - set(old))]
    removed = [RouteChange(r, old[r]) for r in sorted(set(old) - set(new))]
    return added, removed
