"""Logging for nextsize: one stderr handler on the "nextsize" logger, children inherit."""

from __future__ import annotations

import logging
import os
import sys

PACKAGE_LOGGER = "nextsize"


def _resolve_level() -> int:
    raw = os.environ.get("NEXTSIZE_LOG_LEVEL", "").strip().upper()
    if raw:
        return getattr(logging, raw, logging.INFO)
    return logging.INFO


def _package_logger() -> logging.Logger:
    logger = logging.getLogger(PACKAGE_LOGGER)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.propagate = False
        logger.setLevel(_resolve_level())
    return logger


def configure_cli_logging(*, quiet: bool = False, verbose: bool = False) -> None:
    """Set the nextsize level from CLI flags; --verbose/--quiet beat NEXTSIZE_LOG_LEVEL."""
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = _resolve_level()
    _package_logger().setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """nextsize.<name> logger; level and handler come from the package logger."""
    _package_logger()
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")
