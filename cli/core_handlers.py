"""Core CLI command handlers (analyze/diff/comment/compat/help).

Public surface is re-exported via cli.handlers.
"""

from __future__ import annotations

from typing import Any

from nextsize import __version__

from .core_handlers_analyze import handle_analyze
from .core_handlers_comment import handle_comment, handle_compat
from .core_handlers_diff import handle_diff


def handle_help(parser: Any) -> int:
    """Print high-level command overview and detailed argparse help."""
    print(f"nextsize — Next.js bundle size analysis (v{__version__})")
    print()
    print("Commands:")
    print("  analyze [path]      measure bundles, print changes since last run, write analyze/*.json")
    print("  diff OLD NEW        compare two analysis files without measuring")
    print("  comment [path]      append per-file tables to the PR comment file")
    print("  compat [path]       create manifests missing from App Router builds")
    print()
    print("  --json with analyze/diff for machine output.")
    print("  --help after any command for details.")
    print()
    parser.print_help()
    return 0


__all__ = ["handle_analyze", "handle_comment", "handle_compat", "handle_diff", "handle_help"]
