"""Application orchestration entry points."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from refroster.adapters.http_reference import HttpReferenceFetcher
from refroster.domain.harvest import harvest_handles
from refroster.domain.reconciliation import reconcile
from refroster.domain.reference import load_reference, load_reference_async

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from refroster.domain.ports.fetching import AsyncReferenceFetcher, ReferenceFetcher
    from refroster.domain.types import (
        HarvestResult,
        ReconciliationResult,
        ReferenceDocument,
        RosterEntry,
    )

log = getLogger(__name__)


@dataclass(slots=True, frozen=True)
class ProjectReference:
    """One project to reconcile in a batch."""

    key: str
    reference_url: str
    roster: tuple[RosterEntry, ...]


def reconcile_project(
    reference_url: str,
    roster: Iterable[RosterEntry],
    *,
    fetcher: ReferenceFetcher | None = None,
) -> ReconciliationResult:
    """Fetch a project's maintainer reference and diff it against ``roster``.

    Blocking; call ``reconcile_project_async`` from inside a running event loop.
    """

    document = load_reference(reference_url, fetcher or HttpReferenceFetcher())
    return _reconcile_and_log(roster, document)


async def reconcile_project_async(
    reference_url: str,
    roster: Iterable[RosterEntry],
    *,
    fetcher: AsyncReferenceFetcher | None = None,
) -> ReconciliationResult:
    document = await load_reference_async(reference_url, fetcher or HttpReferenceFetcher())
    return _reconcile_and_log(roster, document)


def _reconcile_and_log(
    roster: Iterable[RosterEntry],
    document: ReferenceDocument,
) -> ReconciliationResult:
    result = reconcile(roster, document)
    log.info(
        "Reconciled maintainer reference: url=%s status=%s matched=%d missing=%d ref_only=%d",
        document.source_url or "-",
        result.status,
        len(result.matched_ids),
        len(result.missing_ids),
        len(result.ref_only_handles),
    )
    return result


def fetch_reference(
    reference_url: str,
    *,
    fetcher: ReferenceFetcher | None = None,
) -> ReferenceDocument:
    return load_reference(reference_url, fetcher or HttpReferenceFetcher())


def harvest_reference(document: ReferenceDocument) -> HarvestResult:
    """Handles found in a fetched document; empty for missing or failed fetches."""

    return harvest_handles(document.body)


async def reconcile_projects_async(
    projects: Sequence[ProjectReference],
    *,
    fetcher: AsyncReferenceFetcher | None = None,
) -> dict[str, ReconciliationResult]:
    """Reconcile many projects concurrently.

    Every project fetches its own URL; identical URLs are not de-duplicated.
    """

    if fetcher is not None:
        return await _gather(projects, fetcher)
    async with HttpReferenceFetcher().session() as shared:
        return await _gather(projects, shared)


def reconcile_projects(
    projects: Sequence[ProjectReference],
    *,
    fetcher: AsyncReferenceFetcher | None = None,
) -> dict[str, ReconciliationResult]:
    return asyncio.run(reconcile_projects_async(projects, fetcher=fetcher))


async def _gather(
    projects: Sequence[ProjectReference],
    fetcher: AsyncReferenceFetcher,
) -> dict[str, ReconciliationResult]:
    documents = await asyncio.gather(
        *(load_reference_async(project.reference_url, fetcher) for project in projects)
    )
    results = {
        project.key: reconcile(project.roster, document)
        for project, document in zip(projects, documents, strict=True)
    }
    log.info("Reconciled %d projects", len(results))
    return results
