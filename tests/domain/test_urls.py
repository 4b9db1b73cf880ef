from __future__ import annotations

import pytest

from refroster.domain.errors import InvalidUrlError
from refroster.domain.urls import github_org_from_url, normalize_reference_url


def test_blob_url_is_rewritten_to_raw_content() -> None:
    url = "https://github.com/acme/widget/blob/main/OWNERS.md"

    assert normalize_reference_url(url) == (
        "https://raw.githubusercontent.com/acme/widget/main/OWNERS.md"
    )


def test_blob_url_keeps_nested_path_and_is_case_insensitive_on_host() -> None:
    url = "https://GitHub.com/acme/widget/blob/release-1.2/docs/team/MAINTAINERS.md"

    assert normalize_reference_url(url) == (
        "https://raw.githubusercontent.com/acme/widget/release-1.2/docs/team/MAINTAINERS.md"
    )


@pytest.mark.parametrize(
    "url",
    [
        "https://raw.githubusercontent.com/acme/widget/main/OWNERS.md",
        "https://github.com/acme/widget",
        "https://github.com/acme/widget/tree/main/docs",
        "https://github.com/acme/widget/blob/main",
        "https://gitlab.com/acme/widget/blob/main/OWNERS.md",
        "http://example.org/maintainers.txt",
    ],
)
def test_other_urls_pass_through_unchanged(url: str) -> None:
    assert normalize_reference_url(url) == url


@pytest.mark.parametrize(
    "url",
    [
        "ftp://github.com/acme/widget/blob/main/OWNERS.md",
        "github.com/acme/widget/blob/main/OWNERS.md",
        "not a url",
        "https://",
        "http://[::1",
    ],
)
def test_invalid_urls_are_rejected(url: str) -> None:
    with pytest.raises(InvalidUrlError) as excinfo:
        normalize_reference_url(url)

    assert excinfo.value.url == url


@pytest.mark.parametrize(
    ("url", "org"),
    [
        ("https://github.com/acme/widget/blob/main/OWNERS.md", "acme"),
        ("https://www.github.com/acme/widget", "acme"),
        ("https://raw.githubusercontent.com/cncf/foo/main/MAINTAINERS", "cncf"),
    ],
)
def test_github_org_from_url(url: str, org: str) -> None:
    assert github_org_from_url(url) == org


@pytest.mark.parametrize(
    "url",
    [
        "https://gitlab.com/acme/widget",
        "https://github.com/acme",
        "https://github.com/",
    ],
)
def test_github_org_from_url_rejects_non_repo_urls(url: str) -> None:
    with pytest.raises(InvalidUrlError):
        github_org_from_url(url)
