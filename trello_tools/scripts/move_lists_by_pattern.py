#!/usr/bin/env python3
"""Move lists whose name starts with a pattern to another board.

Usage:
    trello-move-pattern https://trello.com/b/abc12345 https://trello.com/b/def67890 'Sprint'
        # Moves all lists starting with 'Sprint' (e.g. 'Sprint 1', 'Sprint Planning')

    trello-move-pattern abc12345 def67890 'Done' --dry-run
        # Shows what lists would be moved without moving them

Boards may be given as URLs, short ids or full ids. The match ignores case
and is a plain prefix: 'Sprint1' also matches 'Sprint10'.

⚠️  WARNING: Moved lists (with their cards) leave the source board.
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
from trello_tools.mover import ListMover
from trello_tools.trello_client import TrelloClient

logger = logging.getLogger("trello_tools.scripts.move_lists_by_pattern")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trello-move-pattern",
        description="📋 Trello List Mover by Name Pattern",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("source_board", help="Source board URL or ID")
    parser.add_argument("destination_board", help="Destination board URL or ID")
    parser.add_argument("pattern", help="Text that list names should start with")
    add_common_arguments(parser, mutating=True)
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    reject_quiet_prompt(parser, args)
    setup_from_args(args)

    def move() -> int:
        config = load_config(args)
        mover = ListMover(TrelloClient(config), confirmation_for(args))
        mover.move_by_pattern(
            args.source_board, args.destination_board, args.pattern, dry_run=args.dry_run
        )
        return 0

    sys.exit(run_tool(move))


if __name__ == "__main__":
    main()
