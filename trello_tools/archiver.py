"""Archive lists selected by the number in their name or by their index."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from trello_tools.batch import Confirm, run_batch
from trello_tools.exceptions import SelectionError
from trello_tools.models import BatchResult, ListRecord
from trello_tools.patterns import extract_number
from trello_tools.selection import IndexRange, NumericRange, select
from trello_tools.trello_client import TrelloClient

logger = logging.getLogger(__name__)

ARCHIVE_PROMPT = "⚠️  Are you sure you want to archive these lists? (y/N): "


class ListArchiver:
    """Close lists on a board

    Archiving is idempotent, so a partly failed run can simply be repeated.
    """

    def __init__(self, client: TrelloClient, confirm: Confirm):
        self.client = client
        self.confirm = confirm

    def archive_by_number_range(
        self, board_id: str, low: int, high: int, dry_run: bool = False
    ) -> BatchResult:
        """Archive lists named like "Sprint 3" or "week 12" whose number is in range

        Lists without a recognised number are ignored.

        Raises:
            SelectionError: If no list carries a number in ``[low, high]``
        """
        logger.info(f"🔍 Scanning board for lists with numbers {low} to {high}...")
        snapshot = self.client.get_lists(board_id)
        logger.info(f"📋 Found {len(snapshot)} total lists")
        logger.info("")

        selected = select(snapshot, NumericRange(low, high))
        if not selected:
            raise SelectionError(f"No lists found with numbers in range {low}-{high}")

        listing = [f"  - {lst.name} (number: {extract_number(lst.name)})" for lst in selected]
        return self._archive(selected, listing, dry_run)

    def archive_by_index_range(
        self,
        board_id: str,
        low: int,
        high: int,
        dry_run: bool = False,
        snapshot: Sequence[ListRecord] | None = None,
    ) -> BatchResult:
        """Archive the lists at 1-based positions ``low`` to ``high``

        Args:
            snapshot: Lists already fetched for this board. Pass the snapshot
                that was shown to the user so the indexes mean the same lists.

        Raises:
            SelectionError: If the range is outside ``1..len(snapshot)``
        """
        if snapshot is None:
            snapshot = self.client.get_lists(board_id)

        selected = select(snapshot, IndexRange(low, high))
        listing = [f"  {low + offset}. {lst.name}" for offset, lst in enumerate(selected)]
        return self._archive(selected, listing, dry_run)

    def _archive(
        self, selected: list[ListRecord], listing: list[str], dry_run: bool
    ) -> BatchResult:
        result = BatchResult(action="archive", selected=selected, listing=listing, dry_run=dry_run)
        return run_batch(
            result,
            lambda lst: self.client.archive_list(lst.id),
            self.confirm,
            verb="archived",
            prompt=ARCHIVE_PROMPT,
        )
