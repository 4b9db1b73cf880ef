from __future__ import annotations

import pytest

from refroster.domain.types import RosterEntry

MAINTAINERS_MD = """# MAINTAINERS.md

## Overview

This document lists the maintainers of this repo. See
[RESPONSIBILITIES.md](https://example.com/RESPONSIBILITIES.md#maintainer-responsibilities)
for what the role means.

## Current Maintainers

| Maintainer | GitHub ID | Affiliation |
|--- |--- |--- |
| Alex Hart | md-test-alexh | Northwind |
| Bailey Reed | md-test-bailey-r | Northwind |
| Casey Lin | `@md-test-casey-lin` | Contoso |
| Devon Park | md-test-devonpark | Fabrikam |

## Emeritus

- md-test-emeritus-e
Thanks to @md-test-helper for early reviews.
"""


@pytest.fixture
def maintainers_md() -> str:
    return MAINTAINERS_MD


@pytest.fixture
def roster() -> list[RosterEntry]:
    return [
        RosterEntry(id=1, handle="md-test-alexh", name="Alex Hart"),
        RosterEntry(id=2, handle="MD-Test-Bailey-R", name="Bailey Reed"),
        RosterEntry(id=3, handle="md-test-gone", name="Gone Person"),
        RosterEntry(id=4, handle="GITHUB_MISSING", name="No Account"),
        RosterEntry(id=5, handle="", name="Blank Account"),
    ]
