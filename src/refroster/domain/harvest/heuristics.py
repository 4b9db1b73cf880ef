"""Line-oriented handle heuristics.

Each heuristic yields raw candidate tokens found on a single line, in order of
appearance. Validation, lowercasing and first-writer-wins bookkeeping happen in
``scan_lines`` so the heuristics stay independently testable.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from refroster.domain.handles import is_valid_handle

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator, Sequence

    from refroster.domain.types import HarvestResult

type LineHeuristic = Callable[[str], Iterator[str]]
type HandleExtractor = Callable[[Sequence[str]], HarvestResult]

# A run longer than a handle may be is dropped rather than cut to 39 characters.
_MENTION_RE = re.compile(r"(?<![A-Za-z0-9_-])@([A-Za-z0-9-]{1,39})(?![A-Za-z0-9-])")
_PROFILE_URL_RE = re.compile(
    r"github\.com/([A-Za-z0-9-]{1,39})(?![A-Za-z0-9-]|/)",
    re.IGNORECASE,
)
_LIST_ITEM_RE = re.compile(r"^\s*[-*]\s*([A-Za-z0-9][A-Za-z0-9-]{0,38})\b", re.ASCII)
_GITHUB_KEY_RE = re.compile(
    r"^\s*github\s*:\s*([A-Za-z0-9][A-Za-z0-9-]{0,38})\b",
    re.IGNORECASE | re.ASCII,
)


def mentions(line: str) -> Iterator[str]:
    """``@handle`` mentions not glued to a preceding word (e-mail addresses)."""

    for match in _MENTION_RE.finditer(line):
        yield match.group(1)


def profile_urls(line: str) -> Iterator[str]:
    """``github.com/handle`` links that stop at the user segment."""

    for match in _PROFILE_URL_RE.finditer(line):
        yield match.group(1)


def list_items(line: str) -> Iterator[str]:
    """Bullet items whose first word is a handle, e.g. ``- alice`` or ``* bob``."""

    match = _LIST_ITEM_RE.match(line)
    if match is not None:
        yield match.group(1)


def github_keys(line: str) -> Iterator[str]:
    """YAML-ish ``github: handle`` keys."""

    match = _GITHUB_KEY_RE.match(line)
    if match is not None:
        yield match.group(1)


DEFAULT_LINE_HEURISTICS: tuple[LineHeuristic, ...] = (
    mentions,
    profile_urls,
    list_items,
    github_keys,
)


def scan_lines(heuristics: Sequence[LineHeuristic]) -> HandleExtractor:
    """Build an extractor applying ``heuristics`` to each line, in order."""

    def extract(lines: Sequence[str]) -> HarvestResult:
        harvested: HarvestResult = {}
        for line in lines:
            context = None
            for heuristic in heuristics:
                for token in heuristic(line):
                    if not is_valid_handle(token):
                        continue
                    handle = token.lower()
                    if handle in harvested:
                        continue
                    if context is None:
                        context = line.strip()
                    harvested[handle] = context
        return harvested

    return extract
