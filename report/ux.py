"""
Report UX — terminal colors and byte formatting helpers.
"""

from __future__ import annotations

import sys
from typing import Optional

# ANSI codes (no external deps)
_RESET = "\033[0m"
_BOLD = "\033[1m"
_DIM = "\033[2m"
_RED = "\033[31m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_CYAN = "\033[36m"


def _color(text: str, code: str, use_color: bool) -> str:
    return f"{code}{text}{_RESET}" if use_color else text


def should_use_color(force: Optional[bool] = None) -> bool:
    """Use color only when stdout is TTY, unless force is set."""
    if force is not None:
        return force
    return sys.stdout.isatty()


def format_sign(n: int) -> str:
    """0, +n or -n."""
    if n == 0:
        return "0"
    return f"+{n}" if n > 0 else str(n)


def format_bytes(n: int) -> str:
    return f"{n} B"


def delta_color(n: int) -> str:
    """Red for growth, green for shrinkage, dim when unchanged."""
    if n > 0:
        return _RED
    if n < 0:
        return _GREEN
    return _DIM
