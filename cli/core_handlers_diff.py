"""Diff handler: compare two persisted analysis files without measuring."""

from __future__ import annotations

import json
from typing import Any

from .core_handlers_common import _err


def handle_diff(args: Any) -> int:
    """Diff OLD and NEW analysis documents (compat or extended). Unreadable OLD counts as absent."""
    from nextsize.evolution.diff import diff_snapshots
    from nextsize.storage.persistence import load_optional
    from report.diff_format import format_diff
    from report.ux import should_use_color

    old = args.old.resolve()
    new = args.new.resolve()
    current = load_optional(new)
    if current is None:
        _err(f"cannot read analysis: {new}")
        return 1
    diff = diff_snapshots(load_optional(old), current)
    if getattr(args, "json", False):
        print(json.dumps(diff.to_dict(), indent=2, ensure_ascii=False))
        return 0
    print(format_diff(diff, current, use_color=should_use_color(getattr(args, "color", None))))
    return 0
