"""Parser wiring extracted from nextsize_cli entrypoint."""

from __future__ import annotations

import argparse
from pathlib import Path


def build_parser(*, version: str) -> argparse.ArgumentParser:
    """Configure top-level CLI parser and subcommands."""
    parser = argparse.ArgumentParser(
        prog="nextsize",
        description="nextsize — raw and gzip size of Next.js script bundles, diffed between builds",
        epilog="Commands: analyze | diff | comment | compat. Use nextsize help for an overview.",
    )
    parser.add_argument("--version", "-V", action="version", version=f"%(prog)s {version}")
    subparsers = parser.add_subparsers(dest="command")

    _add_analysis_commands(subparsers)
    _add_ci_commands(subparsers)

    subparsers.add_parser("help", help="Show nextsize command overview")

    return parser


def _add_output_flags(p: argparse.ArgumentParser) -> None:
    p.add_argument("--json", action="store_true", help="Output JSON diff (machine-readable)")
    p.add_argument("--color", action="store_true", default=None, dest="color", help="Force color output (default: auto from TTY)")
    p.add_argument("--no-color", action="store_false", dest="color", help="Disable color output")


def _add_verbosity_flags(p: argparse.ArgumentParser) -> None:
    p.add_argument("--quiet", "-q", action="store_true", help="Only warnings and errors on stderr")
    p.add_argument("--verbose", "-v", action="store_true", help="Debug logging on stderr")


def _add_analysis_commands(subparsers: argparse._SubParsersAction) -> None:
    analyze_parser = subparsers.add_parser("analyze", help="Measure bundles, report changes since the last run, persist analysis")
    analyze_parser.add_argument("path", nargs="?", default=".", type=Path, help="Project root (default: .)")
    analyze_parser.add_argument("--build-dir", default=None, metavar="DIR", help="Build output directory relative to project root (default: config or .next)")
    analyze_parser.add_argument("--dry-run", action="store_true", help="Report only; do not overwrite analyze/*.json")
    _add_output_flags(analyze_parser)
    _add_verbosity_flags(analyze_parser)

    diff_parser = subparsers.add_parser("diff", help="Diff two analysis files (__bundle_analysis*.json)")
    diff_parser.add_argument("old", type=Path, help="Previous analysis JSON (missing = first run)")
    diff_parser.add_argument("new", type=Path, help="Current analysis JSON")
    _add_output_flags(diff_parser)
    _add_verbosity_flags(diff_parser)


def _add_ci_commands(subparsers: argparse._SubParsersAction) -> None:
    comment_parser = subparsers.add_parser("comment", help="Append per-file size tables to analyze/__bundle_analysis_comment.txt")
    comment_parser.add_argument("path", nargs="?", default=".", type=Path, help="Project root (default: .)")
    comment_parser.add_argument("--build-dir", default=None, metavar="DIR", help="Build output directory relative to project root")
    _add_verbosity_flags(comment_parser)

    compat_parser = subparsers.add_parser("compat", help="Create manifests missing from App Router builds")
    compat_parser.add_argument("path", nargs="?", default=".", type=Path, help="Project root (default: .)")
    compat_parser.add_argument("--build-dir", default=None, metavar="DIR", help="Build output directory relative to project root")
    _add_verbosity_flags(compat_parser)
