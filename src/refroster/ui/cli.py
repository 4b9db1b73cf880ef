# ruff: noqa: T201

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from refroster.adapters.roster import RosterFileError, read_roster_file, translate_roster
from refroster.app import (
    ProjectReference,
    fetch_reference,
    harvest_reference,
    reconcile_project,
    reconcile_projects,
)
from refroster.config import ConfigurationError, configure_logging
from refroster.domain.errors import InvalidUrlError
from refroster.domain.reconciliation import ref_only_lines, summarize_roster
from refroster.domain.types import FetchStatus
from refroster.domain.urls import normalize_reference_url

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from refroster.domain.types import ReconciliationResult, RosterEntry

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Reconcile maintainer rosters against published maintainer files"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    normalize = subparsers.add_parser("normalize", help="Print the raw URL fetched for a reference")
    normalize.add_argument("url", help="Maintainer reference URL")

    harvest = subparsers.add_parser("harvest", help="List GitHub handles found in a reference")
    harvest.add_argument("url", help="Maintainer reference URL")
    harvest.add_argument("--json", action="store_true", help="Emit JSON instead of text")

    reconcile = subparsers.add_parser(
        "reconcile",
        help="Diff roster files against their maintainer references",
    )
    reconcile.add_argument(
        "rosters",
        nargs="+",
        type=Path,
        help="Roster JSON files ({'reference_url': ..., 'maintainers': [...]})",
    )
    reconcile.add_argument(
        "--url",
        type=str,
        help="Override the roster's reference URL (single roster only)",
    )
    reconcile.add_argument("--json", action="store_true", help="Emit JSON instead of text")

    args = parser.parse_args(list(argv))
    if args.command == "reconcile" and args.url is not None and len(args.rosters) > 1:
        raise ValueError("--url can only be used with a single roster file")
    return args


def _print_result(key: str, roster: Sequence[RosterEntry], result: ReconciliationResult) -> None:
    print(f"{key}: {result.status} {result.source_url or '(no reference configured)'}")
    if result.fetched_at is not None:
        print(f"  checked at {result.fetched_at.isoformat()}")
    for row in summarize_roster(roster, result):
        marker = "+" if row.in_reference else "-"
        print(f"  {marker} {row.name or '?'} ({row.handle or 'no GitHub account'})")
    for handle, line in ref_only_lines(result):
        print(f"  ? {handle}: {line}")


def _run_normalize(args: argparse.Namespace) -> None:
    print(normalize_reference_url(args.url))


def _run_harvest(args: argparse.Namespace) -> int:
    document = fetch_reference(args.url)
    if document.status is not FetchStatus.FETCHED:
        log.error("Could not fetch maintainer reference %s", args.url)
        return 1
    harvested = harvest_reference(document)
    if args.json:
        print(json.dumps(harvested, indent=2))
    else:
        for handle, line in harvested.items():
            print(f"{handle}\t{line}")
    return 0


def _run_reconcile(args: argparse.Namespace) -> None:
    rosters: dict[str, tuple[str, tuple[RosterEntry, ...]]] = {}
    for path in args.rosters:
        payload = read_roster_file(path)
        key = payload.project or path.stem
        if key in rosters:
            key = str(path)
        url = args.url if args.url is not None else payload.reference_url
        rosters[key] = (url, tuple(translate_roster(payload)))

    if len(rosters) == 1:
        ((key, (url, roster)),) = rosters.items()
        results = {key: reconcile_project(url, roster)}
    else:
        results = reconcile_projects(
            [
                ProjectReference(key=key, reference_url=url, roster=roster)
                for key, (url, roster) in rosters.items()
            ]
        )

    if args.json:
        print(json.dumps({key: result.to_payload() for key, result in results.items()}, indent=2))
        return
    for key, result in results.items():
        _print_result(key, rosters[key][1], result)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
    except ValueError:
        configure_logging()
        log.exception("CLI validation error")
        sys.exit(2)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        if parsed_args.command == "normalize":
            _run_normalize(parsed_args)
        elif parsed_args.command == "harvest":
            code = _run_harvest(parsed_args)
            if code:
                sys.exit(code)
        elif parsed_args.command == "reconcile":
            _run_reconcile(parsed_args)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except (InvalidUrlError, RosterFileError, ConfigurationError):
        log.exception("CLI validation error")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error during reconciliation")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
