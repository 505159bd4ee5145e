"""Tests for nextsize.evolution.diff (diff_snapshots)."""

from nextsize.core.models import RouteInfo, SizeDelta, SizeEntry
from nextsize.core.snapshot import Snapshot
from nextsize.evolution.diff import diff_snapshots


def _snap(**kwargs) -> Snapshot:
    return Snapshot(**kwargs)


CURRENT = _snap(
    global_size=SizeEntry(150, 55),
    pages={"/page": SizeEntry(500, 200), "/blog/page": SizeEntry(300, 90)},
    files={"main.js": SizeEntry(150, 55), "b.js": SizeEntry(300, 120), "c.js": SizeEntry(10, 5)},
    routes={"/": RouteInfo("/page", "app/page.tsx"), "/about": RouteInfo("/about/page", None)},
    global_files=("main.js",),
)


def test_self_diff_is_empty() -> None:
    diff = diff_snapshots(CURRENT, CURRENT)
    assert diff.changed_files == []
    assert diff.new_files == []
    assert diff.removed_files == []
    assert diff.changed_pages == []
    assert diff.new_routes == []
    assert diff.removed_routes == []
    assert diff.global_change.delta == SizeDelta(0, 0)
    assert diff.is_empty


def test_global_delta() -> None:
    prev = _snap(global_size=SizeEntry(100, 40))
    curr = _snap(global_size=SizeEntry(150, 55))
    assert diff_snapshots(prev, curr).global_change.delta == SizeDelta(50, 15)


def test_global_delta_can_be_negative() -> None:
    prev = _snap(global_size=SizeEntry(150, 55))
    curr = _snap(global_size=SizeEntry(100, 40))
    assert diff_snapshots(prev, curr).global_change.delta == SizeDelta(-50, -15)


def test_added_and_removed_files() -> None:
    prev = _snap(files={"a.js": SizeEntry(200, 80)})
    curr = _snap(files={"b.js": SizeEntry(300, 120)})
    diff = diff_snapshots(prev, curr)
    assert [c.key for c in diff.removed_files] == ["a.js"]
    assert diff.removed_files[0].prev == SizeEntry(200, 80)
    assert [c.key for c in diff.new_files] == ["b.js"]
    assert diff.new_files[0].curr == SizeEntry(300, 120)
    assert diff.changed_files == []


def test_changed_file_carries_signed_delta() -> None:
    prev = _snap(files={"a.js": SizeEntry(200, 80)})
    curr = _snap(files={"a.js": SizeEntry(180, 81)})
    diff = diff_snapshots(prev, curr)
    assert len(diff.changed_files) == 1
    assert diff.changed_files[0].delta == SizeDelta(-20, 1)


def test_unchanged_file_omitted() -> None:
    prev = _snap(files={"a.js": SizeEntry(200, 80), "b.js": SizeEntry(1, 1)})
    curr = _snap(files={"a.js": SizeEntry(200, 80), "b.js": SizeEntry(2, 1)})
    assert [c.key for c in diff_snapshots(prev, curr).changed_files] == ["b.js"]


def test_page_missing_side_counts_as_zero() -> None:
    """New and vanished pages appear as changes against {0, 0}; zero deltas are dropped."""
    prev = _snap(pages={"/old": SizeEntry(10, 4), "/same": SizeEntry(5, 5), "/empty": SizeEntry(0, 0)})
    curr = _snap(pages={"/new": SizeEntry(30, 9), "/same": SizeEntry(5, 5)})
    changes = {c.key: c for c in diff_snapshots(prev, curr).changed_pages}
    assert set(changes) == {"/old", "/new"}
    assert changes["/old"].delta == SizeDelta(-10, -4)
    assert changes["/old"].curr == SizeEntry.ZERO
    assert changes["/new"].delta == SizeDelta(30, 9)


def test_routes_presence_only() -> None:
    prev = _snap(routes={"/": RouteInfo("/page"), "/gone": RouteInfo("/gone/page", "app/gone/page.js")})
    curr = _snap(routes={"/": RouteInfo("/page", "app/page.tsx"), "/about": RouteInfo("/about/page")})
    diff = diff_snapshots(prev, curr)
    assert [r.route for r in diff.new_routes] == ["/about"]
    assert [r.route for r in diff.removed_routes] == ["/gone"]
    assert diff.removed_routes[0].info.source_file == "app/gone/page.js"


def test_new_route_without_source_file() -> None:
    diff = diff_snapshots(_snap(), _snap(routes={"/about": RouteInfo("/about/page", None)}))
    assert diff.new_routes[0].info.display_source == "/about/page"


def test_first_run_baseline() -> None:
    """No previous snapshot: all routes and files are new, nothing is 'changed'."""
    diff = diff_snapshots(None, CURRENT)
    assert diff.global_change.prev == SizeEntry.ZERO
    assert diff.global_change.delta == SizeDelta(150, 55)
    assert [c.key for c in diff.new_files] == ["b.js", "c.js", "main.js"]
    assert diff.changed_files == []
    assert diff.removed_files == []
    assert {c.key for c in diff.changed_pages} == {"/page", "/blog/page"}
    assert [r.route for r in diff.new_routes] == ["/", "/about"]
    assert diff.removed_routes == []


def test_lists_sorted_by_key() -> None:
    prev = _snap(files={"z.js": SizeEntry(1, 1), "a.js": SizeEntry(1, 1)})
    curr = _snap(files={"y.js": SizeEntry(1, 1), "b.js": SizeEntry(1, 1)})
    diff = diff_snapshots(prev, curr)
    assert [c.key for c in diff.new_files] == ["b.js", "y.js"]
    assert [c.key for c in diff.removed_files] == ["a.js", "z.js"]


def test_to_dict_is_json_shaped() -> None:
    data = diff_snapshots(None, CURRENT).to_dict()
    assert data["global"]["delta"] == {"raw": 150, "gzip": 55}
    assert data["new_routes"][0] == {"route": "/", "source": "/page", "sourceFile": "app/page.tsx"}
