"""Copy every list and its open cards from one board to another."""

from __future__ import annotations

import logging

from trello_tools.batch import show_listing
from trello_tools.exceptions import SelectionError, TrelloAPIError
from trello_tools.models import BatchResult
from trello_tools.trello_client import TrelloClient

logger = logging.getLogger(__name__)


class ListCopier:
    """Duplicate lists onto another board

    The source board is left untouched. New lists are appended at the bottom
    of the destination board in source order; cards keep their name,
    description, due date, members and labels.
    """

    def __init__(self, client: TrelloClient):
        self.client = client

    def copy(
        self, source_board_id: str, destination_board_id: str, dry_run: bool = False
    ) -> BatchResult:
        logger.info("🚀 Starting Trello List Copy Process")
        logger.info(f"📋 Source Board ID: {source_board_id}")
        logger.info(f"📋 Destination Board ID: {destination_board_id}")
        logger.info("")

        snapshot = self.client.get_lists(source_board_id, cards=True)
        if not snapshot:
            raise SelectionError("No lists found in source board")

        listing = [f"  - {lst.name} ({lst.card_count} cards)" for lst in snapshot]
        result = BatchResult(
            action="copy", selected=list(snapshot), listing=listing, dry_run=dry_run
        )
        show_listing(f"📊 Found {len(snapshot)} lists to copy:", listing)

        if dry_run:
            logger.info("🔍 This was a dry run. No lists were actually copied.")
            return result

        for lst in snapshot:
            logger.info(f"📋 Copying list: {lst.name}")
            try:
                new_list = self.client.create_list(destination_board_id, lst.name, "bottom")
            except TrelloAPIError as e:
                logger.error(f"❌ Failed to create list '{lst.name}': {e}")
                result.failed.append((lst, str(e)))
                continue

            if not lst.cards:
                logger.info("  ℹ️  No cards in this list")
            for card in lst.cards:
                logger.info(f"    📌 Copying card: {card.name}")
                try:
                    self.client.create_card(new_list.id, card)
                    result.cards += 1
                except TrelloAPIError as e:
                    logger.error(f"    ❌ Failed to copy card '{card.name}': {e}")
                    result.card_failures += 1

            result.succeeded.append(lst)

        logger.info("")
        logger.info("🎉 Copy complete!")
        logger.info(f"✅ Lists copied: {result.success_count}, failed: {result.failed_count}")
        logger.info(f"📌 Cards copied: {result.cards}, failed: {result.card_failures}")
        return result
