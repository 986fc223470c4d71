#!/usr/bin/env python3
"""Archive Trello lists whose name carries a number in a range.

Usage:
    trello-archive-range 1 5
        # Archives lists numbered 1-5 (e.g. 'Sprint 1', 'Week 3')

    trello-archive-range 10 20 --dry-run
        # Shows what would be archived without doing it

Recognised list names: a keyword followed by a number, e.g. Sprint 1,
Week 2, Task 3, Epic 4, Story 5, Bug 6, Feature 7, List 8, Column 9
(case-insensitive, the space is optional).

Uses TRELLO_SOURCE_BOARD_ID unless --board is given.
"""

from __future__ import annotations

import argparse
import logging
import sys

from trello_tools.archiver import ListArchiver
from trello_tools.cli import (
    add_common_arguments,
    confirmation_for,
    load_config,
    reject_quiet_prompt,
    run_tool,
    setup_from_args,
)
from trello_tools.trello_client import TrelloClient

logger = logging.getLogger("trello_tools.scripts.archive_lists_by_range")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trello-archive-range",
        description="📋 Trello List Archiver by Number Range",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("start_number", type=int, help="Lowest list number to archive")
    parser.add_argument("end_number", type=int, help="Highest list number to archive")
    parser.add_argument("--board", metavar="BOARD_ID", help="Board to scan (default: source board)")
    add_common_arguments(parser, mutating=True)
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    reject_quiet_prompt(parser, args)
    setup_from_args(args)

    if args.start_number <= 0 or args.end_number <= 0:
        logger.error("❌ Error: Start and end numbers must be positive integers")
        sys.exit(1)

    if args.start_number > args.end_number:
        logger.error("❌ Error: Start number must be less than or equal to end number")
        sys.exit(1)

    def archive() -> int:
        config = load_config(args).with_overrides(source_board_id=args.board)
        config.require("source_board_id")
        assert config.source_board_id is not None

        logger.info("🚀 Starting Trello List Archiver")
        logger.info(f"📊 Range: {args.start_number} to {args.end_number}")
        logger.info(f"🔍 Dry run: {'Yes' if args.dry_run else 'No'}")
        logger.info("")

        archiver = ListArchiver(TrelloClient(config), confirmation_for(args))
        archiver.archive_by_number_range(
            config.source_board_id, args.start_number, args.end_number, dry_run=args.dry_run
        )
        # Per-list failures are reported in the summary but do not fail the run
        return 0

    sys.exit(run_tool(archive))


if __name__ == "__main__":
    main()
