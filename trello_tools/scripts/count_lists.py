#!/usr/bin/env python3
"""Count the lists on a board, optionally archiving a range of them by index.

Usage:
    trello-count-lists
        # Count and show the lists on TRELLO_SOURCE_BOARD_ID

    trello-count-lists abc12345
        # Same, for another board

    trello-count-lists --delete-range 10 56
        # Archive lists 10 to 56 as numbered in the listing
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

logger = logging.getLogger("trello_tools.scripts.count_lists")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trello-count-lists",
        description="Count and list the lists on a Trello board",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "board_id", nargs="?", help="Board to inspect (default: TRELLO_SOURCE_BOARD_ID)"
    )
    parser.add_argument(
        "--delete-range",
        nargs=2,
        type=int,
        metavar=("START_INDEX", "END_INDEX"),
        help="Archive the lists at these 1-based positions",
    )
    add_common_arguments(parser, mutating=True)
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.delete_range:
        reject_quiet_prompt(parser, args)
    setup_from_args(args)

    def count() -> int:
        config = load_config(args).with_overrides(source_board_id=args.board_id)
        config.require("source_board_id")
        assert config.source_board_id is not None

        client = TrelloClient(config)
        lists = client.get_lists(config.source_board_id)

        logger.info(f"Board ID: {config.source_board_id}")
        logger.info(f"Number of lists: {len(lists)}")
        if lists:
            logger.info("List names:")
            for index, lst in enumerate(lists, start=1):
                logger.info(f"  {index}. {lst.name}")

        if args.delete_range:
            start_index, end_index = args.delete_range
            logger.info("")
            archiver = ListArchiver(client, confirmation_for(args))
            archiver.archive_by_index_range(
                config.source_board_id,
                start_index,
                end_index,
                dry_run=args.dry_run,
                snapshot=lists,
            )
        return 0

    sys.exit(run_tool(count))


if __name__ == "__main__":
    main()
