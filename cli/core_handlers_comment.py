"""Comment and compat handlers (CI helpers around the nextjs-bundle-analysis action)."""

from __future__ import annotations

from typing import Any

from .core_handlers_common import _check_path, _clog, _config_from_args, _project_path


def handle_comment(args: Any) -> int:
    """Append per-file tables to analyze/__bundle_analysis_comment.txt. Never fails the run."""
    if _check_path(_project_path(args)) != 0:
        return 1
    from nextsize.orchestration.pipeline import run_comment

    content, written = run_comment(_config_from_args(args))
    if content is None:
        _clog().info("nextsize: no current analysis, nothing to add to the comment")
    elif written:
        _clog().info("nextsize: per-file bundle changes added to the comment")
    return 0


def handle_compat(args: Any) -> int:
    """Create manifests App Router builds omit, so the bundle-analysis action can run."""
    if _check_path(_project_path(args)) != 0:
        return 1
    from nextsize.manifests.compat import apply_compat_shims

    for message in apply_compat_shims(_config_from_args(args).build_root):
        print(message)
    return 0
