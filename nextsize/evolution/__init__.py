"""Evolution layer: diff between the previous and current bundle snapshot."""

from .diff import DiffResult, RouteChange, SizeChange, diff_snapshots  # noqa: F401

__all__ = ["DiffResult", "RouteChange", "SizeChange", "diff_snapshots"]
