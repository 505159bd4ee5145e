"""Shared helpers for CLI handlers."""

from __future__ import annotations

from pathlib import Path
from typing import Any


def _clog() -> Any:
    from nextsize.orchestration.logging import get_logger

    return get_logger("cli")


def _err(msg: str) -> None:
    """Log unified error message (via logger, respects --quiet)."""
    _clog().error("nextsize: %s", msg)


def _project_path(args: Any) -> Path:
    raw = getattr(args, "path", None)
    return Path(raw or ".").resolve()


def _check_path(path: Path, must_be_dir: bool = True) -> int:
    """Return 0 if path is valid, 1 and log error otherwise."""
    if not path.exists():
        _err(f"path does not exist: {path}")
        return 1
    if must_be_dir and not path.is_dir():
        _err(f"not a directory: {path}")
        return 1
    return 0


def _config_from_args(args: Any) -> Any:
    from nextsize.config import resolve_config

    return resolve_config(_project_path(args), build_dir=getattr(args, "build_dir", None))
