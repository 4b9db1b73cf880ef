from __future__ import annotations

import pytest

from refroster.domain.reconciliation import ref_only_lines, reconcile, summarize_roster
from refroster.domain.types import (
    FetchStatus,
    ReconciliationResult,
    ReferenceDocument,
    RosterEntry,
)
from tests.support.fetchers import FIXED_NOW

URL = "https://github.com/acme/widget/blob/main/MAINTAINERS.md"


def _fetched(body: str) -> ReferenceDocument:
    return ReferenceDocument.fetched(URL, body, FIXED_NOW)


def test_reconcile_fetched_document(maintainers_md: str, roster: list[RosterEntry]) -> None:
    result = reconcile(roster, _fetched(maintainers_md))

    assert result.status is FetchStatus.FETCHED
    assert result.fetched_at == FIXED_NOW
    assert result.source_url == URL
    assert result.matched_ids == {1, 2}
    assert result.missing_ids == {3, 4, 5}
    assert result.ref_only_handles == (
        "md-test-casey-lin",
        "md-test-devonpark",
        "md-test-emeritus-e",
        "md-test-helper",
    )
    assert result.context_lines == {
        "md-test-casey-lin": "| Casey Lin | `@md-test-casey-lin` | Contoso |",
        "md-test-devonpark": "| Devon Park | md-test-devonpark | Fabrikam |",
        "md-test-emeritus-e": "- md-test-emeritus-e",
        "md-test-helper": "Thanks to @md-test-helper for early reviews.",
    }


@pytest.mark.parametrize(
    "document",
    [ReferenceDocument.missing(), ReferenceDocument.error(URL)],
    ids=["missing", "error"],
)
def test_reconcile_without_document_reports_everyone_missing(
    document: ReferenceDocument,
    roster: list[RosterEntry],
) -> None:
    result = reconcile(roster, document)

    assert result.status is document.status
    assert result.matched_ids == frozenset()
    assert result.missing_ids == {1, 2, 3, 4, 5}
    assert result.ref_only_handles == ()
    assert result.context_lines == {}
    assert result.fetched_at is None


def test_prose_mention_counts_as_present_but_is_not_harvested() -> None:
    roster = [RosterEntry(id="a", handle="alice")]
    document = _fetched("Thanks to alice, bob and @carol for the release.")

    result = reconcile(roster, document)

    assert result.matched_ids == {"a"}
    assert result.ref_only_handles == ("carol",)


def test_known_handles_are_never_ref_only_even_when_not_matched() -> None:
    roster = [RosterEntry(id=1, handle="Alice")]
    document = _fetched("- alice-\n")

    result = reconcile(roster, document)

    assert result.missing_ids == {1}
    assert result.ref_only_handles == ()


def test_ref_only_handles_are_sorted() -> None:
    document = _fetched("@zed\n@amy\n| GitHub |\n|---|\n| mike |")

    result = reconcile([], document)

    assert result.ref_only_handles == ("amy", "mike", "zed")


def test_invariants_hold_for_duplicate_ids() -> None:
    roster = [RosterEntry(id=1, handle="alice"), RosterEntry(id=1, handle="old-alice")]

    result = reconcile(roster, _fetched("@alice"))

    assert result.matched_ids == {1}
    assert result.missing_ids == frozenset()


def test_roster_is_not_mutated(maintainers_md: str, roster: list[RosterEntry]) -> None:
    before = list(roster)

    reconcile(roster, _fetched(maintainers_md))

    assert roster == before


def test_empty_fetched_document() -> None:
    result = reconcile([RosterEntry(id=1, handle="alice")], _fetched(""))

    assert result.status is FetchStatus.FETCHED
    assert result.missing_ids == {1}
    assert result.ref_only_handles == ()


def test_to_payload_is_json_ready(maintainers_md: str, roster: list[RosterEntry]) -> None:
    payload = reconcile(roster, _fetched(maintainers_md)).to_payload()

    assert payload["status"] == "fetched"
    assert payload["fetched_at"] == FIXED_NOW.isoformat()
    assert payload["matched_ids"] == [1, 2]
    assert payload["missing_ids"] == [3, 4, 5]
    assert payload["ref_only_handles"] == [
        "md-test-casey-lin",
        "md-test-devonpark",
        "md-test-emeritus-e",
        "md-test-helper",
    ]


def test_summarize_roster_collapses_duplicates_and_sentinels() -> None:
    roster = [
        RosterEntry(id=1, handle=" alice ", name="Alice "),
        RosterEntry(id=2, handle="alice", name="Alice"),
        RosterEntry(id=3, handle="GITHUB_MISSING", name="Bob"),
        RosterEntry(id=4, handle="", name=""),
        RosterEntry(id=5, handle="GITHUB_MISSING", name=""),
    ]
    result = ReconciliationResult(
        status=FetchStatus.FETCHED,
        fetched_at=FIXED_NOW,
        matched_ids=frozenset({1}),
        missing_ids=frozenset({2, 3, 4, 5}),
    )

    rows = summarize_roster(roster, result)

    assert [(row.id, row.name, row.handle, row.in_reference) for row in rows] == [
        (1, "Alice", "alice", True),
        (3, "Bob", "", False),
    ]


def test_ref_only_lines() -> None:
    result = reconcile([], _fetched("- amy\n@bob"))

    assert ref_only_lines(result) == [("amy", "- amy"), ("bob", "@bob")]


def test_reference_document_requires_timestamp_when_fetched() -> None:
    with pytest.raises(ValueError, match="fetched_at"):
        ReferenceDocument(source_url=URL, status=FetchStatus.FETCHED, body="x")
    with pytest.raises(ValueError, match="no body"):
        ReferenceDocument(source_url=URL, status=FetchStatus.ERROR, body="x")


def test_to_payload_orders_integer_ids_numerically() -> None:
    result = ReconciliationResult(
        status=FetchStatus.ERROR,
        missing_ids=frozenset({10, 2, "b-7", 1, "a-3"}),
    )

    assert result.to_payload()["missing_ids"] == [1, 2, 10, "a-3", "b-7"]


def test_context_lines_cannot_be_mutated() -> None:
    lines = {"carol": "- carol"}
    result = ReconciliationResult(
        status=FetchStatus.FETCHED,
        fetched_at=FIXED_NOW,
        ref_only_handles=("carol",),
        context_lines=lines,
    )
    lines["dave"] = "- dave"

    assert dict(result.context_lines) == {"carol": "- carol"}
    with pytest.raises(TypeError):
        result.context_lines["eve"] = "- eve"  # type: ignore[index]
