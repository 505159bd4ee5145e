"""CLI handlers facade.

Thin wrapper that re-exports concrete handler implementations from
cli.core_handlers, keeping the `cli.handlers.handle_*` API stable.
"""
from __future__ import annotations
from .core_handlers import handle_analyze, handle_comment, handle_compat, handle_diff, handle_help
__all__ = ['handle_help', 'handle_analyze', 'handle_diff', 'handle_comment', 'handle_compat']
