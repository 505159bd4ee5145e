"""Orchestration: logging setup and the end-to-end analysis run.

Keep package import light; pipeline is imported on demand by the CLI.
"""

__all__ = ["logging", "pipeline"]
