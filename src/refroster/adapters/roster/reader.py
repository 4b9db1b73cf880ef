"""Read roster files from disk."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from .schema import RosterFile

if TYPE_CHECKING:
    from pathlib import Path

log = getLogger(__name__)


class RosterFileError(ValueError):
    """Raised when a roster file cannot be read or does not match the schema."""


def read_roster_file(path: Path) -> RosterFile:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise RosterFileError(f"Cannot read roster file {path}: {exc}") from exc
    try:
        roster = RosterFile.model_validate_json(raw)
    except ValidationError as exc:
        raise RosterFileError(f"Invalid roster file {path}: {exc}") from exc
    log.debug("Loaded %d maintainers from %s", len(roster.maintainers), path)
    return roster
