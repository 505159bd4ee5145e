"""Per-file markdown tables for the pull request bundle comment.

The fragment is appended to the comment produced by the
nextjs-bundle-analysis action (analyze/__bundle_analysis_comment.txt).
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Tuple

from nextsize.evolution.diff import DiffResult, SizeChange
from nextsize.orchestration.logging import get_logger

from .diff_format import order_by_magnitude
from .ux import format_bytes, format_sign

COMMENT_MARKER = "<!-- __NEXTJS_BUNDLE_EXTENDED -->"
COMMENT_TITLE = "### Per-file bundle changes (raw and compressed)"
TABLE_HEADER = "| File | Raw | Δ Raw | Gzip | Δ Gzip |\n| --- | ---: | ---: | ---: | ---: |"

# (file, raw, Δraw, gzip, Δgzip)
Row = Tuple[str, int, int, int, int]

_log = get_logger("report")


def _table(rows: Iterable[Row]) -> str:
    body = [
        f"| {f} | {format_bytes(raw)} | {format_sign(d_raw)} | {format_bytes(gz)} | {format_sign(d_gz)} |"
        for f, raw, d_raw, gz, d_gz in rows
    ]
    if not body:
        return ""
    return TABLE_HEADER + "\n" + "\n".join(body)


def _changed_rows(changes: Iterable[SizeChange]) -> List[Row]:
    return [(c.key, c.curr.raw, c.delta.raw, c.curr.gzip, c.delta.gzip) for c in order_by_magnitude(changes)]


def _new_rows(changes: Iterable[SizeChange]) -> List[Row]:
    return [(c.key, c.curr.raw, c.curr.raw, c.curr.gzip, c.curr.gzip) for c in changes]


def _removed_rows(changes: Iterable[SizeChange]) -> List[Row]:
    return [(c.key, c.prev.raw, -c.prev.raw, c.prev.gzip, -c.prev.gzip) for c in changes]


def format_comment(diff: DiffResult) -> str:
    """Markdown fragment with changed / new / removed file tables (empty sections omitted)."""
    sections = ["", COMMENT_MARKER, COMMENT_TITLE]
    if diff.changed_files:
        sections.append("\n#### Changed files")
        sections.append(_table(_changed_rows(diff.changed_files)))
    if diff.new_files:
        sections.append("\n#### New files")
        sections.append(_table(_new_rows(diff.new_files)))
    if diff.removed_files:
        sections.append("\n#### Removed files")
        sections.append(_table(_removed_rows(diff.removed_files)))
    return "\n".join(sections)


def append_comment(comment_path: Path, content: str) -> bool:
    """Append content to comment_path (create if missing). Failures are logged, never raised."""
    comment_path = Path(comment_path)
    try:
        if comment_path.exists():
            with comment_path.open("a", encoding="utf-8") as fh:
                fh.write(f"\n\n{content}\n")
        else:
            comment_path.parent.mkdir(parents=True, exist_ok=True)
            comment_path.write_text(f"{content}\n", encoding="utf-8")
    except OSError as e:
        _log.warning("nextsize: cannot write comment %s: %s", comment_path, e)
        return False
    return True
