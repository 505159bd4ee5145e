"""CLI command dispatch wiring extracted from nextsize_cli."""

from __future__ import annotations

import argparse
from typing import Any, Callable

from cli import handlers


def dispatch_command(parser: argparse.ArgumentParser, args: Any) -> int:
    """Dispatch parsed CLI args to the matching command handler."""
    from nextsize.orchestration.logging import configure_cli_logging

    quiet = getattr(args, "quiet", False)
    verbose = getattr(args, "verbose", False)
    configure_cli_logging(quiet=quiet, verbose=verbose)

    if args.command is None:
        return handlers.handle_help(parser)

    dispatch: dict[str, Callable[[], int]] = {
        "help": lambda: handlers.handle_help(parser),
        "analyze": lambda: handlers.handle_analyze(args),
        "diff": lambda: handlers.handle_diff(args),
        "comment": lambda: handlers.handle_comment(args),
        "compat": lambda: handlers.handle_compat(args),
    }
    handler = dispatch.get(args.command)
    if handler:
        return handler()
    return 0
