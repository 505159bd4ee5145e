"""Analysis configuration.

Build output directory: override > NEXTSIZE_BUILD_DIR > pyproject.toml
[tool.nextsize] build_output_directory > package.json
nextBundleAnalysis.buildOutputDirectory > ".next".
"""

from __future__ import annotations

import json
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from nextsize.orchestration.logging import get_logger

DEFAULT_BUILD_OUTPUT_DIRECTORY = ".next"
DEFAULT_APP_DIRECTORY = "app"

_log = get_logger("config")


@dataclass(slots=True)
class AnalysisConfig:
    project_root: Path
    build_output_directory: str = DEFAULT_BUILD_OUTPUT_DIRECTORY
    app_directory: str = DEFAULT_APP_DIRECTORY
    name: Optional[str] = None

    @property
    def build_root(self) -> Path:
        return self.project_root / self.build_output_directory


def _load_pyproject_section(project_root: Path) -> Dict[str, Any]:
    """[tool.nextsize] from pyproject.toml; {} when missing or invalid."""
    pyproject = project_root / "pyproject.toml"
    if not pyproject.is_file():
        return {}
    try:
        data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        _log.debug("nextsize: ignoring pyproject.toml (%s)", e)
        return {}
    section = (data.get("tool") or {}).get("nextsize") or {}
    return section if isinstance(section, dict) else {}


def _load_package_json(project_root: Path) -> Dict[str, Any]:
    pkg_path = project_root / "package.json"
    if not pkg_path.is_file():
        return {}
    try:
        data = json.loads(pkg_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        _log.debug("nextsize: ignoring package.json (%s)", e)
        return {}
    return data if isinstance(data, dict) else {}


def _first_str(*values: Any) -> Optional[str]:
    for v in values:
        if isinstance(v, str) and v.strip():
            return v.strip()
    return None


def resolve_config(project_root: Path, *, build_dir: Optional[str] = None) -> AnalysisConfig:
    """Resolve AnalysisConfig for project_root from CLI override, env and project files."""
    project_root = Path(project_root).resolve()
    tool = _load_pyproject_section(project_root)
    pkg = _load_package_json(project_root)
    bundle_options = pkg.get("nextBundleAnalysis") or {}
    if not isinstance(bundle_options, dict):
        bundle_options = {}

    build_output_directory = _first_str(
        build_dir,
        os.environ.get("NEXTSIZE_BUILD_DIR"),
        tool.get("build_output_directory"),
        bundle_options.get("buildOutputDirectory"),
    ) or DEFAULT_BUILD_OUTPUT_DIRECTORY
    app_directory = _first_str(
        os.environ.get("NEXTSIZE_APP_DIR"),
        tool.get("app_directory"),
    ) or DEFAULT_APP_DIRECTORY

    return AnalysisConfig(
        project_root=project_root,
        build_output_directory=build_output_directory,
        app_directory=app_directory,
        name=_first_str(pkg.get("name")),
    )
