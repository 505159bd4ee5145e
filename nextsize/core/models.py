"""Size and route value types shared by measurement, snapshot and diff."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Mapping, Optional


def _non_negative_int(value: Any, field: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{field} must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"{field} must be non-negative, got {value}")
    return value


@dataclass(frozen=True, slots=True)
class SizeDelta:
    """Signed difference between two SizeEntry values."""

    raw: int
    gzip: int

    @property
    def is_zero(self) -> bool:
        return self.raw == 0 and self.gzip == 0

    def to_dict(self) -> Dict[str, int]:
        return {"raw": self.raw, "gzip": self.gzip}


@dataclass(frozen=True, slots=True)
class SizeEntry:
    """Raw byte length and gzip byte length of the same content."""

    raw: int
    gzip: int

    ZERO: ClassVar["SizeEntry"]

    def __post_init__(self) -> None:
        _non_negative_int(self.raw, "raw")
        _non_negative_int(self.gzip, "gzip")

    def __add__(self, other: "SizeEntry") -> "SizeEntry":
        if not isinstance(other, SizeEntry):
            return NotImplemented
        return SizeEntry(self.raw + other.raw, self.gzip + other.gzip)

    def __sub__(self, other: "SizeEntry") -> SizeDelta:
        if not isinstance(other, SizeEntry):
            return NotImplemented
        return SizeDelta(self.raw - other.raw, self.gzip - other.gzip)

    def to_dict(self) -> Dict[str, int]:
        return {"raw": self.raw, "gzip": self.gzip}

    @classmethod
    def from_dict(cls, data: Any) -> "SizeEntry":
        """Parse {"raw": int, "gzip": int}. Raises ValueError on any other shape."""
        if not isinstance(data, Mapping):
            raise ValueError(f"size entry must be an object, got {type(data).__name__}")
        if "raw" not in data or "gzip" not in data:
            raise ValueError("size entry requires 'raw' and 'gzip'")
        return cls(raw=data["raw"], gzip=data["gzip"])


SizeEntry.ZERO = SizeEntry(0, 0)


@dataclass(frozen=True, slots=True)
class RouteInfo:
    """Route-source identifier from the routes manifest and its resolved file, if any."""

    source: str
    source_file: Optional[str] = None

    @property
    def display_source(self) -> str:
        return self.source_file or self.source

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {"source": self.source, "sourceFile": self.source_file}

    @classmethod
    def from_dict(cls, data: Any) -> "RouteInfo":
        if not isinstance(data, Mapping):
            raise ValueError(f"route info must be an object, got {type(data).__name__}")
        source = data.get("source")
        source_file = data.get("sourceFile")
        if not isinstance(source, str):
            raise ValueError("route info requires a string 'source'")
        if source_file is not None and not isinstance(source_file, str):
            raise ValueError("route 'sourceFile' must be a string or null")
        return cls(source=source, source_file=source_file)
