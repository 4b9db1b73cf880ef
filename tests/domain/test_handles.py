from __future__ import annotations

import pytest

from refroster.domain.handles import is_usable_roster_handle, is_valid_handle


@pytest.mark.parametrize("token", ["alice", "Alice-Example", "a", "0x-dev", "a" * 39])
def test_valid_handles(token: str) -> None:
    assert is_valid_handle(token)


@pytest.mark.parametrize(
    "token",
    [
        "",
        "a" * 40,
        "alice_b",
        "_alice",
        "alice.b",
        "alice b",
        "orgs",
        "Organizations",
        "REPOS",
        "\u212aelvin",  # KELVIN SIGN lowercases to ASCII "k"
    ],
)
def test_invalid_handles(token: str) -> None:
    assert not is_valid_handle(token)


@pytest.mark.parametrize(
    ("handle", "usable"),
    [
        ("alice", True),
        ("  alice ", True),
        ("", False),
        ("   ", False),
        ("GITHUB_MISSING", False),
        (" GITHUB_MISSING ", False),
    ],
)
def test_usable_roster_handle(handle: str, *, usable: bool) -> None:
    assert is_usable_roster_handle(handle) is usable
