"""Bundler manifest loading and compatibility shims."""

from .compat import apply_compat_shims  # noqa: F401
from .loader import BuildManifests, BuildOutputError, check_build_root, load_manifests  # noqa: F401

__all__ = [
    "BuildManifests",
    "BuildOutputError",
    "apply_compat_shims",
    "check_build_root",
    "load_manifests",
]
