"""Analyze handler: measure the build, print the change log, persist the snapshot."""

from __future__ import annotations

import json
import sys
from typing import Any

from rich.console import Console

from .core_handlers_common import _check_path, _clog, _config_from_args, _err, _project_path


def handle_analyze(args: Any) -> int:
    """Measure bundle sizes, diff against the previous run and write analyze/*.json."""
    path = _project_path(args)
    if _check_path(path) != 0:
        return 1
    from nextsize.manifests.loader import BuildOutputError
    from nextsize.orchestration.pipeline import run_analysis
    from report.diff_format import format_diff
    from report.ux import should_use_color

    config = _config_from_args(args)
    write = not getattr(args, "dry_run", False)
    _clog().debug("nextsize: analyzing %s (build output: %s)", path, config.build_root)
    console = Console(file=sys.stderr)
    try:
        if console.is_terminal and not getattr(args, "quiet", False):
            with console.status("[bold green]Measuring bundles...", spinner="dots"):
                run = run_analysis(config, write=write)
        else:
            run = run_analysis(config, write=write)
    except BuildOutputError as e:
        _err(str(e))
        return 1
    except OSError as e:
        _err(f"cannot read or write build output: {e}")
        return 1

    if getattr(args, "json", False):
        print(json.dumps(run.diff.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(format_diff(run.diff, run.current, use_color=should_use_color(getattr(args, "color", None))))
    if run.extended_path is not None:
        _clog().info("nextsize: analysis written to %s", run.extended_path.parent)
    return 0
