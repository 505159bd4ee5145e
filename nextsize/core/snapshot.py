"""Bundle size snapshot model.

A Snapshot is the full measured state of one analysis run: global bundle
total, per-page totals (global chunks excluded), per-file sizes, discovered
routes and the ordered list of global (root main) files. It is built once
per run, never mutated afterwards, and diffed against the previous run's
persisted snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import AbstractSet, Dict, Iterable, Mapping, Sequence, Tuple

from nextsize.analysis.aggregate import sum_sizes, unique_paths
from nextsize.analysis.measure import SizeCache
from nextsize.analysis.routes import RouteResolver
from nextsize.core.models import RouteInfo, SizeEntry


@dataclass(frozen=True)
class Snapshot:
    global_size: SizeEntry = SizeEntry.ZERO
    pages: Mapping[str, SizeEntry] = field(default_factory=dict)
    files: Mapping[str, SizeEntry] = field(default_factory=dict)
    routes: Mapping[str, RouteInfo] = field(default_factory=dict)
    global_files: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "pages", MappingProxyType(dict(self.pages)))
        object.__setattr__(self, "files", MappingProxyType(dict(self.files)))
        object.__setattr__(self, "routes", MappingProxyType(dict(self.routes)))
        object.__setattr__(self, "global_files", tuple(self.global_files))
        missing = [f for f in self.global_files if f not in self.files]
        if missing:
            raise ValueError(f"global files without a size entry: {', '.join(missing)}")

    @property
    def global_file_set(self) -> AbstractSet[str]:
        return frozenset(self.global_files)

    @classmethod
    def empty(cls) -> "Snapshot":
        """Baseline used when there is no previous run."""
        return cls()


def build_snapshot(
    global_paths: Sequence[str],
    page_paths: Mapping[str, Iterable[str]],
    route_sources: Mapping[str, str],
    *,
    cache: SizeCache,
    resolver: RouteResolver,
) -> Snapshot:
    """
    Measure one build into a Snapshot.

    Args:
        global_paths: root main files loaded by every page (rootMainFiles).
        page_paths: page identifier -> chunk paths (app-build-manifest pages).
        route_sources: route-source identifier -> route path (app-path-routes-manifest).
        cache: per-run SizeCache; every file is read at most once through it.
        resolver: maps route-source identifiers to source files.
    """
    global_files = unique_paths(global_paths)
    global_set = frozenset(global_files)
    global_size = sum_sizes(global_files, cache=cache)

    pages: Dict[str, SizeEntry] = {}
    files: Dict[str, SizeEntry] = {f: cache.measure(f) for f in global_files}
    for page, paths in page_paths.items():
        page_list = list(paths)
        pages[page] = sum_sizes(page_list, global_set, cache=cache)
        for f in page_list:
            if f not in files:
                files[f] = cache.measure(f)

    routes: Dict[str, RouteInfo] = {}
    for source, route in route_sources.items():
        routes[route] = RouteInfo(source=source, source_file=resolver.resolve(source))

    return Snapshot(
        global_size=global_size,
        pages=pages,
        files=files,
        routes=routes,
        global_files=tuple(global_files),
    )
