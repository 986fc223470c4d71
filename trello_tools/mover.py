"""Move lists whose name starts with a pattern to another board."""

from __future__ import annotations

import logging

from trello_tools.batch import Confirm, run_batch
from trello_tools.exceptions import ConfigurationError, SelectionError
from trello_tools.models import BatchResult
from trello_tools.selection import NamePrefix, select
from trello_tools.trello_client import TrelloClient

logger = logging.getLogger(__name__)

MOVE_PROMPT = (
    "⚠️  Are you sure you want to move these lists? "
    "This will remove them from the source board! (y/N): "
)


class ListMover:
    def __init__(self, client: TrelloClient, confirm: Confirm):
        self.client = client
        self.confirm = confirm

    def move_by_pattern(
        self, source_ref: str, destination_ref: str, pattern: str, dry_run: bool = False
    ) -> BatchResult:
        """Move every list on the source board whose name starts with ``pattern``

        Board references may be URLs, short ids or long ids; both are resolved
        to long ids before anything else happens. Cards travel with their list.

        Raises:
            ConfigurationError: If a board reference cannot be parsed
            SelectionError: If ``pattern`` is empty or the source board has no
                matching list
        """
        if not pattern:
            raise SelectionError("Pattern cannot be empty: it would match every list")

        logger.info("🚀 Starting Trello List Move by Pattern")
        logger.info(f"📋 Source Board: {source_ref}")
        logger.info(f"📋 Destination Board: {destination_ref}")
        logger.info(f"🔍 Pattern: Lists starting with '{pattern}'")
        logger.info(f"🔍 Dry run: {'Yes' if dry_run else 'No'}")
        logger.info("")

        logger.info("🔄 Resolving board IDs...")
        try:
            source_id = self.client.resolve_board_id(source_ref)
            destination_id = self.client.resolve_board_id(destination_ref)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e
        logger.info(f"✅ Source Board Full ID: {source_id}")
        logger.info(f"✅ Destination Board Full ID: {destination_id}")
        logger.info("")

        snapshot = self.client.get_lists(source_id, cards=True)
        if not snapshot:
            raise SelectionError("No lists found in source board")

        selected = select(snapshot, NamePrefix(pattern))
        if not selected:
            raise SelectionError(
                f"No lists found starting with '{pattern}'",
                available=[lst.name for lst in snapshot],
            )

        listing = [f"  - {lst.name} ({lst.card_count} cards)" for lst in selected]
        result = BatchResult(action="move", selected=selected, listing=listing, dry_run=dry_run)
        run_batch(
            result,
            lambda lst: self.client.move_list_to_board(lst.id, destination_id),
            self.confirm,
            verb="moved",
            prompt=MOVE_PROMPT,
        )

        result.cards = sum(lst.card_count for lst in result.succeeded)
        if result.succeeded:
            logger.info(f"📌 Total cards moved: {result.cards}")
        return result
