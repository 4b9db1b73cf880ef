"""GitHub handle validity rules shared by every extraction strategy."""

from __future__ import annotations

import re
from typing import Final

from .types import GITHUB_MISSING

MAX_HANDLE_LENGTH: Final[int] = 39
RESERVED_PATH_SEGMENTS: Final[frozenset[str]] = frozenset({"organizations", "orgs", "repos"})

_HANDLE_CHARS = re.compile(r"[A-Za-z0-9-]+", re.ASCII)


def is_valid_handle(token: str) -> bool:
    """Return whether ``token`` (any case) is an acceptable GitHub handle."""

    if not 1 <= len(token) <= MAX_HANDLE_LENGTH:
        return False
    # Checked before lowercasing: str.lower maps some non-ASCII letters into a-z.
    if _HANDLE_CHARS.fullmatch(token) is None:
        return False
    handle = token.lower()
    if handle in RESERVED_PATH_SEGMENTS:
        return False
    return not handle.startswith("_")


def is_usable_roster_handle(handle: str) -> bool:
    """Whether a roster entry's handle can be matched against a reference at all."""

    stripped = handle.strip()
    return bool(stripped) and stripped != GITHUB_MISSING
