"""Translate roster file payloads into domain roster entries."""

from __future__ import annotations

from typing import TYPE_CHECKING

from refroster.domain.types import RosterEntry

if TYPE_CHECKING:
    from .schema import MaintainerPayload, RosterFile


def translate_maintainer(payload: MaintainerPayload) -> RosterEntry:
    return RosterEntry(id=payload.id, handle=payload.github, name=payload.name)


def translate_roster(payload: RosterFile) -> list[RosterEntry]:
    return [translate_maintainer(maintainer) for maintainer in payload.maintainers]
