"""Reference URL resolution.

Maintainer files are usually linked through the GitHub web UI
(``/org/repo/blob/branch/path``). The rendered page is HTML, so those links are
rewritten to ``raw.githubusercontent.com`` before fetching.
"""

from __future__ import annotations

from typing import Final
from urllib.parse import urlsplit, urlunsplit

from .errors import InvalidUrlError

GITHUB_HOST: Final[str] = "github.com"
RAW_GITHUB_HOST: Final[str] = "raw.githubusercontent.com"
_ALLOWED_SCHEMES: Final[frozenset[str]] = frozenset({"http", "https"})
_ORG_HOSTS: Final[frozenset[str]] = frozenset({GITHUB_HOST, "www.github.com", RAW_GITHUB_HOST})
_BLOB_MIN_SEGMENTS = 5


def normalize_reference_url(url: str) -> str:
    """Return the URL to fetch for ``url``, rewriting GitHub blob links to raw content."""

    try:
        parts = urlsplit(url)
        host = parts.hostname
    except ValueError as exc:
        raise InvalidUrlError(f"Invalid maintainer reference URL: {url!r}", url=url) from exc
    if parts.scheme.lower() not in _ALLOWED_SCHEMES or not host:
        raise InvalidUrlError(f"Invalid maintainer reference URL: {url!r}", url=url)

    if host.lower() != GITHUB_HOST:
        return url
    segments = parts.path.strip("/").split("/")
    if len(segments) < _BLOB_MIN_SEGMENTS or segments[2] != "blob":
        return url

    org, repo, _blob, branch, *file_path = segments
    raw_path = "/" + "/".join((org, repo, branch, *file_path))
    return urlunsplit((parts.scheme, RAW_GITHUB_HOST, raw_path, parts.query, parts.fragment))


def github_org_from_url(url: str) -> str:
    """Return the GitHub org a maintainer reference URL points into."""

    try:
        parts = urlsplit(url)
        host = (parts.hostname or "").lower()
    except ValueError as exc:
        raise InvalidUrlError(f"Invalid GitHub URL: {url!r}", url=url) from exc
    if host not in _ORG_HOSTS:
        raise InvalidUrlError(
            "Maintainer URL must be on github.com or raw.githubusercontent.com",
            url=url,
        )
    segments = [segment for segment in parts.path.strip("/").split("/") if segment]
    if len(segments) < 2:  # noqa: PLR2004
        raise InvalidUrlError("Maintainer URL must include org and repo", url=url)
    return segments[0]
