"""Public interface for the roster file adapter."""

from __future__ import annotations

from .reader import RosterFileError, read_roster_file
from .schema import MaintainerPayload, RosterFile
from .translator import translate_maintainer, translate_roster

__all__ = [
    "MaintainerPayload",
    "RosterFile",
    "RosterFileError",
    "read_roster_file",
    "translate_maintainer",
    "translate_roster",
]
