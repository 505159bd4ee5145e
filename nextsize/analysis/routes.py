"""Best-effort mapping of app-router route sources to files on disk."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple, Union

# Order matters: a stale file left by a refactor may sit next to the live one.
SOURCE_EXTENSIONS: Tuple[str, ...] = ("tsx", "ts", "jsx", "js", "mdx")
DEFAULT_APP_DIR = "app"


class RouteResolver:
    """Resolve "/(group)/blog/page"-style identifiers to app/ source files."""

    def __init__(self, project_root: Union[str, Path], app_dir: str = DEFAULT_APP_DIR) -> None:
        self.project_root = Path(project_root).resolve()
        self.app_dir = app_dir

    def candidates(self, source: str) -> list[Path]:
        """All probed paths for source, in probe order."""
        rel = self.project_root / self.app_dir / source.lstrip("/")
        page_level = [rel.with_name(f"{rel.name}.{ext}") for ext in SOURCE_EXTENSIONS]
        # Route handlers, e.g. "/favicon.ico/route"
        nested = [rel / f"route.{ext}" for ext in SOURCE_EXTENSIONS]
        return page_level + nested

    def resolve(self, source: str) -> Optional[str]:
        """First existing candidate as a POSIX path relative to project_root, else None."""
        for candidate in self.candidates(source):
            if candidate.is_file():
                return candidate.relative_to(self.project_root).as_posix()
        return None
