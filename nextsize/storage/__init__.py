"""Storage façade: analysis file locations and snapshot persistence."""

from .paths import FILES, analysis_path, base_analysis_path  # noqa: F401
from .persistence import (  # noqa: F401
    load_analysis,
    load_optional,
    load_previous,
    save_snapshot,
    snapshot_from_dict,
    snapshot_to_compat,
    snapshot_to_extended,
)

__all__ = [
    "FILES",
    "analysis_path",
    "base_analysis_path",
    "load_analysis",
    "load_optional",
    "load_previous",
    "save_snapshot",
    "snapshot_from_dict",
    "snapshot_to_compat",
    "snapshot_to_extended",
]
