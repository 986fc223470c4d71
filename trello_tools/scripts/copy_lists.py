#!/usr/bin/env python3
"""Copy every list and its open cards from one board to another.

Usage:
    trello-copy-lists
        # Uses TRELLO_SOURCE_BOARD_ID and TRELLO_DESTINATION_BOARD_ID

    trello-copy-lists abc12345 def67890
        # Uses the given board IDs

    trello-copy-lists --dry-run
        # Shows what would be copied
"""

from __future__ import annotations

import argparse
import logging
import sys

from trello_tools.cli import add_common_arguments, load_config, run_tool, setup_from_args
from trello_tools.copier import ListCopier
from trello_tools.trello_client import TrelloClient

logger = logging.getLogger("trello_tools.scripts.copy_lists")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trello-copy-lists",
        description="📋 Trello List Copier",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("source_board_id", nargs="?", help="Board to copy from")
    parser.add_argument("destination_board_id", nargs="?", help="Board to copy to")
    add_common_arguments(parser)
    parser.add_argument(
        "-n", "--dry-run", action="store_true", help="Show what would be copied, copy nothing"
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    setup_from_args(args)

    def copy() -> int:
        config = load_config(args).with_overrides(
            source_board_id=args.source_board_id,
            destination_board_id=args.destination_board_id,
        )
        config.require("source_board_id", "destination_board_id")
        assert config.source_board_id is not None
        assert config.destination_board_id is not None

        copier = ListCopier(TrelloClient(config))
        copier.copy(config.source_board_id, config.destination_board_id, dry_run=args.dry_run)
        return 0

    sys.exit(run_tool(copy))


if __name__ == "__main__":
    main()
