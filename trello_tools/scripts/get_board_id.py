#!/usr/bin/env python3
"""Find a Trello board's id from its URL, short id or name.

Usage:
    trello-board-id https://trello.com/b/abc12345/board-name
    trello-board-id abc12345
    trello-board-id "My Project Board"

The tool will:
  1. Extract the board ID if a URL or ID is given
  2. Search your boards by name otherwise
  3. Display board details and the ID to put in your .env file
"""

from __future__ import annotations

import argparse
import logging
import sys

from trello_tools.cli import add_common_arguments, load_config, run_tool, setup_from_args
from trello_tools.exceptions import TrelloAPIError
from trello_tools.trello_client import TrelloClient

logger = logging.getLogger("trello_tools.scripts.get_board_id")

BOARD_DETAIL_PARAMS = {"lists": "open", "cards": "visible", "memberships": "all"}


def display_board_info(board: dict) -> None:
    yes_no = {True: "Yes", False: "No"}
    logger.info("📋 Board Information:")
    logger.info(f"  Name: {board.get('name')}")
    logger.info(f"  ID: {board.get('id')}")
    logger.info(f"  URL: {board.get('url')}")
    logger.info(f"  Description: {board.get('desc') or 'No description'}")
    logger.info(f"  Closed: {yes_no[bool(board.get('closed'))]}")
    logger.info(f"  Pinned: {yes_no[bool(board.get('pinned'))]}")
    logger.info(f"  Starred: {yes_no[bool(board.get('starred'))]}")
    logger.info(f"  Members: {len(board.get('memberships') or [])}")
    logger.info(f"  Lists: {len(board.get('lists') or [])}")
    logger.info(f"  Cards: {len(board.get('cards') or [])}")


def lookup_board(client: TrelloClient, query: str) -> dict | None:
    """Fetch a board by URL/id, falling back to a name search

    A bare word that merely looks like an id is searched by name when no
    board has that id.
    """
    try:
        board_id = client.parse_board_url(query)
    except ValueError:
        board_id = None

    if board_id:
        logger.info(f"✅ Found board ID in input: {board_id}")
        try:
            return client.get_board(board_id, **BOARD_DETAIL_PARAMS)
        except TrelloAPIError as e:
            if "trello.com" in query:
                logger.error("❌ Could not fetch board details. Possible reasons:")
                logger.error("   - Board ID is invalid")
                logger.error("   - You don't have access to this board")
                logger.error("   - API credentials are incorrect")
                raise
            logger.debug(f"No board with id {board_id}: {e}")

    logger.info("🔍 Searching by name...")
    board, similar = client.find_board_by_name(query)
    if board:
        logger.info(f"✅ Found board by name: {query}")
        return client.get_board(board["id"], **BOARD_DETAIL_PARAMS)

    if similar:
        logger.info("❌ Exact match not found, but found similar boards:")
        for candidate in similar:
            logger.info(f"  - {candidate['name']} (ID: {candidate['id']})")
    return None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trello-board-id",
        description="🔍 Trello Board ID Extractor",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("board", help="Board URL, ID or name")
    add_common_arguments(parser)
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    setup_from_args(args)

    if not args.board.strip():
        logger.error("❌ Error: Please provide a board URL or name")
        sys.exit(1)

    def find() -> int:
        client = TrelloClient(load_config(args))
        logger.info("🔍 Searching for Trello board...")
        logger.info(f"📝 Input: {args.board}")
        logger.info("")

        board = lookup_board(client, args.board)
        if board is None:
            logger.error(f"❌ Could not find board with name: {args.board}")
            logger.info("💡 Try:")
            logger.info("   - Using the full Trello board URL")
            logger.info("   - Checking the exact board name")
            logger.info("   - Verifying you have access to the board")
            return 1

        logger.info("")
        display_board_info(board)
        logger.info("")
        logger.info("🎯 Board ID for use in scripts:")
        logger.info(f'BOARD_ID = "{board["id"]}"')
        return 0

    sys.exit(run_tool(find))


if __name__ == "__main__":
    main()
