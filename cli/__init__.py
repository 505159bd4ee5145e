"""CLI package namespace.

Keep package import side-effect free so submodules can be imported independently
without pulling the full handler graph.
"""

__all__ = []
