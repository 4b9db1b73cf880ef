"""Lenient single-handle presence check against a whole reference document."""

from __future__ import annotations

import re


def reference_contains(text: str, handle: str) -> bool:
    """Return whether ``handle`` occurs in ``text`` as a standalone token.

    Case-insensitive; an optional ``@`` may precede the handle. Unlike the
    harvester, no document structure is required, so a maintainer mentioned only
    in prose still counts as present.
    """

    if not handle:
        raise ValueError("handle is empty")
    pattern = re.compile(
        rf"(?<![a-z0-9_-])@?{re.escape(handle)}(?![a-z0-9_-])",
        re.IGNORECASE | re.ASCII,
    )
    return pattern.search(text) is not None
