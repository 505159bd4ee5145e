"""Summing file sizes into bundle totals."""

from __future__ import annotations

from typing import AbstractSet, Iterable, List

from nextsize.core.models import SizeEntry

from .measure import SizeCache


def unique_paths(paths: Iterable[str], exclude: AbstractSet[str] = frozenset()) -> List[str]:
    """Paths not in exclude, first occurrence kept, order preserved."""
    seen: set[str] = set()
    result: List[str] = []
    for p in paths:
        if p in exclude or p in seen:
            continue
        seen.add(p)
        result.append(p)
    return result


def sum_sizes(
    paths: Iterable[str],
    exclude: AbstractSet[str] = frozenset(),
    *,
    cache: SizeCache,
) -> SizeEntry:
    """
    Total size of paths, skipping any path in exclude.

    Each distinct path counts once per call, even when listed several times.
    Called with exclude=∅ for the global bundle and with exclude=global files
    for every page, so shared chunks are attributed to the global bucket only.
    """
    total = SizeEntry.ZERO
    for p in unique_paths(paths, exclude):
        total = total + cache.measure(p)
    return total
