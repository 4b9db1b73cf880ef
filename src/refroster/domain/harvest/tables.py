"""Markdown table scan for GitHub handle columns.

Only pipe tables are recognised: a header row, a ``---``/``:--`` separator row and
consecutive data rows. The first header cell naming a GitHub column selects the
column; every other column is ignored.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Final

from refroster.domain.handles import is_valid_handle

if TYPE_CHECKING:
    from collections.abc import Sequence

    from refroster.domain.types import HarvestResult

log = getLogger(__name__)

GITHUB_COLUMN_HEADERS: Final[frozenset[str]] = frozenset(
    {"github", "github id", "github username", "github handle", "github account"}
)
_SEPARATOR_CHARS: Final[frozenset[str]] = frozenset("-:")


def parse_pipe_row(line: str) -> list[str] | None:
    """Split a pipe row into trimmed cells, or return ``None`` for non-rows."""

    if "|" not in line:
        return None
    trimmed = line.strip()
    if not trimmed:
        return None
    trimmed = trimmed.removeprefix("|").removesuffix("|")
    return [cell.strip() for cell in trimmed.split("|")]


def is_separator_row(cells: Sequence[str]) -> bool:
    if not cells:
        return False
    return all(set(cell) <= _SEPARATOR_CHARS for cell in cells if cell)


def github_column_index(header_cells: Sequence[str]) -> int | None:
    for index, cell in enumerate(header_cells):
        if cell.strip().lower() in GITHUB_COLUMN_HEADERS:
            return index
    return None


def handle_from_cell(cell: str) -> str | None:
    """Return the normalized handle held in a table cell, if it is one."""

    token = cell.strip().strip("`").removeprefix("@")
    if not is_valid_handle(token):
        return None
    return token.lower()


def extract_table_handles(lines: Sequence[str]) -> HarvestResult:
    """Collect handles from every GitHub column of every pipe table in ``lines``."""

    harvested: HarvestResult = {}
    index = 0
    while index + 1 < len(lines):
        header_cells = parse_pipe_row(lines[index])
        separator_cells = parse_pipe_row(lines[index + 1]) if header_cells else None
        if not header_cells or not separator_cells or not is_separator_row(separator_cells):
            index += 1
            continue
        column = github_column_index(header_cells)
        if column is None:
            index += 1
            continue

        log.debug("GitHub table at line %d, column %d", index + 1, column)
        _collect_table_rows(lines, start=index + 2, column=column, harvested=harvested)
        # Skip the separator so it is never read as the next header.
        index += 2
    return harvested


def _collect_table_rows(
    lines: Sequence[str],
    *,
    start: int,
    column: int,
    harvested: HarvestResult,
) -> None:
    for row_line in lines[start:]:
        cells = parse_pipe_row(row_line)
        if not cells or is_separator_row(cells):
            return
        if column >= len(cells):
            continue
        handle = handle_from_cell(cells[column])
        if handle is not None and handle not in harvested:
            harvested[handle] = row_line.strip()
