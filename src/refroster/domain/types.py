"""Value types for maintainer reference reconciliation."""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from datetime import datetime

GITHUB_MISSING: Final[str] = "GITHUB_MISSING"

type RosterId = Hashable
type Handle = str
type HarvestResult = dict[Handle, str]


class FetchStatus(StrEnum):
    MISSING = "missing"
    FETCHED = "fetched"
    ERROR = "error"


@dataclass(slots=True, frozen=True)
class RosterEntry:
    """One internally known maintainer.

    ``handle`` may be blank or ``GITHUB_MISSING``; such entries can never match a
    reference document.
    """

    id: RosterId
    handle: str
    name: str = ""


@dataclass(slots=True, frozen=True, kw_only=True)
class ReferenceDocument:
    """Outcome of resolving and fetching a project's maintainer reference."""

    source_url: str
    status: FetchStatus
    body: str = ""
    fetched_at: datetime | None = None

    def __post_init__(self) -> None:
        if self.status is FetchStatus.FETCHED and self.fetched_at is None:
            raise ValueError("Fetched reference documents require fetched_at")
        if self.status is not FetchStatus.FETCHED and (self.body or self.fetched_at):
            raise ValueError(f"{self.status} reference documents carry no body")

    @classmethod
    def missing(cls) -> ReferenceDocument:
        return cls(source_url="", status=FetchStatus.MISSING)

    @classmethod
    def error(cls, source_url: str) -> ReferenceDocument:
        return cls(source_url=source_url, status=FetchStatus.ERROR)

    @classmethod
    def fetched(cls, source_url: str, body: str, fetched_at: datetime) -> ReferenceDocument:
        return cls(
            source_url=source_url,
            status=FetchStatus.FETCHED,
            body=body,
            fetched_at=fetched_at,
        )


@dataclass(slots=True, frozen=True, kw_only=True)
class ReconciliationResult:
    """Roster vs. reference diff for one project."""

    status: FetchStatus
    source_url: str = ""
    fetched_at: datetime | None = None
    matched_ids: frozenset[RosterId] = frozenset()
    missing_ids: frozenset[RosterId] = frozenset()
    ref_only_handles: tuple[Handle, ...] = ()
    context_lines: Mapping[Handle, str] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        object.__setattr__(self, "context_lines", MappingProxyType(dict(self.context_lines)))

    def to_payload(self) -> dict[str, object]:
        """Return a JSON-ready representation with deterministic ordering."""

        return {
            "status": str(self.status),
            "source_url": self.source_url,
            "fetched_at": self.fetched_at.isoformat() if self.fetched_at else None,
            "matched_ids": sorted(self.matched_ids, key=_id_sort_key),
            "missing_ids": sorted(self.missing_ids, key=_id_sort_key),
            "ref_only_handles": list(self.ref_only_handles),
            "context_lines": {
                handle: self.context_lines[handle]
                for handle in self.ref_only_handles
                if handle in self.context_lines
            },
        }


def _id_sort_key(roster_id: RosterId) -> tuple[int, int | str]:
    # Integer ids sort numerically ahead of every other id kind.
    if isinstance(roster_id, int) and not isinstance(roster_id, bool):
        return (0, roster_id)
    return (1, str(roster_id))


@dataclass(slots=True, frozen=True, kw_only=True)
class RosterSummaryRow:
    id: RosterId
    name: str
    handle: str
    in_reference: bool
