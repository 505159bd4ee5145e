"""Per-file raw/gzip size measurement with a per-run cache.

Chunks are shared between pages, so the same file is referenced many
times in one run. SizeCache reads and compresses each resolved path once.
A cache instance lives for exactly one analysis run; create a new one per run.
"""

from __future__ import annotations

import gzip
from pathlib import Path
from typing import Dict, Union

from nextsize.core.models import SizeEntry
from nextsize.orchestration.logging import get_logger

ENCODING = "utf-8"
GZIP_LEVEL = 9

_log = get_logger("analysis")


def gzip_size(data: bytes) -> int:
    """Byte length of data after gzip at GZIP_LEVEL (mtime pinned for determinism)."""
    return len(gzip.compress(data, compresslevel=GZIP_LEVEL, mtime=0))


def measure_bytes(data: bytes) -> SizeEntry:
    return SizeEntry(raw=len(data), gzip=gzip_size(data))


class SizeCache:
    """Memoized size measurement for files under a build output root."""

    def __init__(self, root: Union[str, Path]) -> None:
        self.root = Path(root).resolve()
        self._entries: Dict[Path, SizeEntry] = {}
        self.reads = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, relative_path: object) -> bool:
        if not isinstance(relative_path, (str, Path)):
            return False
        return self._resolve(relative_path) in self._entries

    def _resolve(self, relative_path: Union[str, Path]) -> Path:
        # Manifest paths are relative to the build root even with a leading slash.
        return (self.root / str(relative_path).lstrip("/\\")).resolve()

    def measure(self, relative_path: Union[str, Path]) -> SizeEntry:
        """Return SizeEntry for root/relative_path; missing files measure as {0, 0}."""
        key = self._resolve(relative_path)
        cached = self._entries.get(key)
        if cached is not None:
            return cached
        if not key.is_file():
            _log.debug("nextsize: %s not found, counting as 0 bytes", relative_path)
            entry = SizeEntry.ZERO
        else:
            # Line endings are kept; invalid sequences become U+FFFD (3 bytes each).
            text = key.read_bytes().decode(ENCODING, errors="replace")
            entry = measure_bytes(text.encode(ENCODING))
            self.reads += 1
        self._entries[key] = entry
        return entry
