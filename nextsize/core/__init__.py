"""Core data model: size values and the per-run Snapshot."""

from .models import RouteInfo, SizeDelta, SizeEntry  # noqa: F401

__all__ = ["RouteInfo", "SizeDelta", "SizeEntry"]
