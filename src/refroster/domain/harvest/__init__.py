"""Handle harvesting from maintainer reference documents.

Extraction is heuristic and best-effort. Strategies run in a fixed order and
the first strategy to report a handle owns its context line:

1) pipe tables with a GitHub column
2) per-line heuristics: ``@mention``, ``github.com/handle``, list item,
   ``github: handle``

Tokens that fail the handle rules are dropped silently.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .heuristics import (
    DEFAULT_LINE_HEURISTICS,
    HandleExtractor,
    LineHeuristic,
    github_keys,
    list_items,
    mentions,
    profile_urls,
    scan_lines,
)
from .tables import extract_table_handles

if TYPE_CHECKING:
    from collections.abc import Sequence

    from refroster.domain.types import HarvestResult

DEFAULT_STRATEGIES: tuple[HandleExtractor, ...] = (
    extract_table_handles,
    scan_lines(DEFAULT_LINE_HEURISTICS),
)


def harvest_handles(
    text: str,
    *,
    strategies: Sequence[HandleExtractor] = DEFAULT_STRATEGIES,
) -> HarvestResult:
    """Return every handle found in ``text`` mapped to the first line it was seen on."""

    if not text:
        return {}
    lines = text.split("\n")
    harvested: HarvestResult = {}
    for extract in strategies:
        for handle, line in extract(lines).items():
            harvested.setdefault(handle, line)
    return harvested


__all__ = [
    "DEFAULT_LINE_HEURISTICS",
    "DEFAULT_STRATEGIES",
    "HandleExtractor",
    "LineHeuristic",
    "extract_table_handles",
    "github_keys",
    "harvest_handles",
    "list_items",
    "mentions",
    "profile_urls",
    "scan_lines",
]
