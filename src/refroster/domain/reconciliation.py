"""Diff a project's maintainer roster against its reference document.

Two matching strategies are used on purpose:

- matched/missing uses the lenient containment test, so a maintainer mentioned
  anywhere in the file (prose included) counts as present;
- reference-only candidates come from the structured harvester, so only handles
  that look deliberately listed are offered for promotion.

A handle on the roster is never reported as reference-only, whatever the
containment result for its entry.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from .containment import reference_contains
from .handles import is_usable_roster_handle
from .harvest import harvest_handles
from .types import (
    GITHUB_MISSING,
    FetchStatus,
    ReconciliationResult,
    RosterSummaryRow,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from .types import ReferenceDocument, RosterEntry, RosterId

log = getLogger(__name__)


def reconcile(roster: Iterable[RosterEntry], document: ReferenceDocument) -> ReconciliationResult:
    """Compute matched, missing and reference-only maintainers for one project."""

    entries = tuple(roster)
    if document.status is not FetchStatus.FETCHED:
        return ReconciliationResult(
            status=document.status,
            source_url=document.source_url,
            missing_ids=frozenset(entry.id for entry in entries),
        )

    matched: set[RosterId] = set()
    missing: set[RosterId] = set()
    known_handles: set[str] = set()
    for entry in entries:
        if not is_usable_roster_handle(entry.handle):
            missing.add(entry.id)
            continue
        handle = entry.handle.strip()
        known_handles.add(handle.lower())
        if reference_contains(document.body, handle):
            matched.add(entry.id)
        else:
            missing.add(entry.id)
    # An id listed twice with different handles counts as matched if either matches.
    missing -= matched

    harvested = harvest_handles(document.body)
    ref_only = tuple(sorted(handle for handle in harvested if handle not in known_handles))
    log.debug(
        "Reconciled url=%s matched=%d missing=%d ref_only=%d",
        document.source_url,
        len(matched),
        len(missing),
        len(ref_only),
    )
    return ReconciliationResult(
        status=document.status,
        source_url=document.source_url,
        fetched_at=document.fetched_at,
        matched_ids=frozenset(matched),
        missing_ids=frozenset(missing),
        ref_only_handles=ref_only,
        context_lines={handle: harvested[handle] for handle in ref_only},
    )


def summarize_roster(
    roster: Iterable[RosterEntry],
    result: ReconciliationResult,
) -> list[RosterSummaryRow]:
    """Display rows for a roster, collapsing duplicate ``name``/``handle`` pairs."""

    seen: set[tuple[str, str]] = set()
    rows: list[RosterSummaryRow] = []
    for entry in roster:
        name = entry.name.strip()
        handle = entry.handle.strip()
        if handle == GITHUB_MISSING:
            handle = ""
        key = (name, handle)
        if key == ("", "") or key in seen:
            continue
        seen.add(key)
        rows.append(
            RosterSummaryRow(
                id=entry.id,
                name=name,
                handle=handle,
                in_reference=entry.id in result.matched_ids,
            )
        )
    return rows


def ref_only_lines(result: ReconciliationResult) -> Sequence[tuple[str, str]]:
    """Reference-only handles paired with the line they were found on."""

    return [(handle, result.context_lines.get(handle, "")) for handle in result.ref_only_handles]
