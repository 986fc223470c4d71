#!/usr/bin/env python3
"""Retrospective Board Reset Tool.

Usage:
    trello-reset-retro 1 3    # Process lists 1, 2, and 3
    trello-reset-retro 2 4    # Process lists 2, 3, and 4

The tool will:
  1. Save the names and positions of the chosen lists on the source board
  2. Rename those lists to '<original_name> <2_weeks_ago_date>'
  3. Create new empty lists in the source board with the original names
  4. Move the renamed lists to the destination board

Required environment variables:
  TRELLO_SOURCE_BOARD_RETRO_ID
  TRELLO_DESTINATION_BOARD_RETRO_ID

Exits 1 if any rename, create or move call failed.
"""

from __future__ import annotations

import argparse
import logging
import sys

from trello_tools.cli import (
    add_common_arguments,
    confirmation_for,
    load_config,
    reject_quiet_prompt,
    run_tool,
    setup_from_args,
)
from trello_tools.retro import RetroBoardReset
from trello_tools.trello_client import TrelloClient

logger = logging.getLogger("trello_tools.scripts.reset_retro_board")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trello-reset-retro",
        description="🔄 Retrospective Board Reset Tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("start_list_number", type=int, help="First list to reset (1-based)")
    parser.add_argument("end_list_number", type=int, help="Last list to reset (inclusive)")
    add_common_arguments(parser, mutating=True)
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    reject_quiet_prompt(parser, args)
    setup_from_args(args)

    start, end = args.start_list_number, args.end_list_number
    if start < 1 or end < 1:
        logger.error("❌ Error: List numbers must be positive integers")
        sys.exit(1)

    if start > end:
        logger.error(
            f"❌ Error: Start number ({start}) must be less than or equal to end number ({end})"
        )
        sys.exit(1)

    def reset() -> int:
        config = load_config(args)
        config.require("source_board_retro_id", "destination_board_retro_id")

        logger.info("🔧 Configuration:")
        logger.info(f"  Source Board ID: {config.source_board_retro_id}")
        logger.info(f"  Destination Board ID: {config.destination_board_retro_id}")
        logger.info("")

        tool = RetroBoardReset(
            TrelloClient(config),
            config.source_board_retro_id,
            config.destination_board_retro_id,
            confirmation_for(args),
        )
        report = tool.run(start, end, dry_run=args.dry_run)
        return 0 if report.ok else 1

    sys.exit(run_tool(reset))


if __name__ == "__main__":
    main()
