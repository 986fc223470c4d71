"""Rotate a retrospective board into a dated archive board.

A reset takes a block of lists on the source board (by 1-based index) and:

1. records each list's name and position,
2. renames each list to ``"<name> <date two weeks ago>"``,
3. re-reads the source board,
4. creates a fresh empty list with the recorded name at the recorded position,
5. moves the renamed lists (by id) to the destination board.

The steps are separate API calls and are not atomic. A failed call is logged
and counted; the remaining lists and the later steps still run, and nothing
is rolled back.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import NamedTuple

from trello_tools.batch import Confirm, show_listing
from trello_tools.exceptions import ConfigurationError, TrelloAPIError
from trello_tools.models import ResetReport
from trello_tools.selection import IndexRange, select
from trello_tools.trello_client import TrelloClient

logger = logging.getLogger(__name__)

ARCHIVE_AGE = timedelta(days=14)
DATE_FORMAT = "%Y-%m-%d"

RESET_PROMPT = "⚠️  Reset these lists and move the old ones to the destination board? (y/N): "


class CapturedList(NamedTuple):
    id: str
    name: str
    pos: float | str


class RetroBoardReset:
    def __init__(
        self,
        client: TrelloClient,
        source_board_id: str | None,
        destination_board_id: str | None,
        confirm: Confirm,
        today: date | None = None,
    ):
        if not source_board_id or not destination_board_id:
            raise ConfigurationError(
                "Missing source or destination retro board id.\n"
                "Set TRELLO_SOURCE_BOARD_RETRO_ID and TRELLO_DESTINATION_BOARD_RETRO_ID "
                "in your .env file"
            )
        self.client = client
        self.source_board_id = source_board_id
        self.destination_board_id = destination_board_id
        self.confirm = confirm
        self.today = today

    def date_stamp(self) -> str:
        """The date two weeks before today, as YYYY-MM-DD"""
        today = self.today or date.today()
        return (today - ARCHIVE_AGE).strftime(DATE_FORMAT)

    def run(self, start: int, end: int, dry_run: bool = False) -> ResetReport:
        """Reset lists ``start`` to ``end`` (1-based, inclusive) of the source board

        Raises:
            SelectionError: If the range is outside the board's lists
            TrelloAPIError: If the initial snapshot cannot be fetched
        """
        stamp = self.date_stamp()
        logger.info("🔄 Resetting Retrospective Board")
        logger.info(f"📅 Using date: {stamp}")
        logger.info(f"📋 Processing lists {start} to {end}")
        logger.info("")

        logger.info("🔍 Fetching source board lists...")
        snapshot = self.client.get_lists(self.source_board_id)
        selected = select(snapshot, IndexRange(start, end))

        # Recorded before any rename: renaming changes the name we read here
        captured = [CapturedList(lst.id, lst.name, lst.pos) for lst in selected]

        listing = [f"  {start + offset}. {item.name}" for offset, item in enumerate(captured)]
        report = ResetReport(date_stamp=stamp, selected=selected, listing=listing, dry_run=dry_run)
        show_listing(f"✅ Found {len(selected)} lists to process:", listing)

        if dry_run:
            for item in captured:
                logger.info(f"  Would rename '{item.name}' to '{item.name} {stamp}'")
            logger.info("🔍 This was a dry run. Nothing was changed.")
            return report

        if not self.confirm(RESET_PROMPT):
            logger.info("❌ Operation cancelled.")
            report.cancelled = True
            return report

        self._rename(captured, stamp, report)
        self._check_renames(captured, stamp)
        self._recreate(captured, report)
        self._migrate(captured, stamp, report)

        logger.info("🎉 Retrospective board reset complete!")
        logger.info("📊 Summary:")
        logger.info(f"  - Renamed {len(report.renamed)} lists with date: {stamp}")
        logger.info(f"  - Moved {len(report.moved)} lists to destination board")
        logger.info(f"  - Created {len(report.created)} new empty lists in source board")
        if report.failures:
            logger.warning(f"  - {len(report.failures)} API calls failed:")
            for phase, name, reason in report.failures:
                logger.warning(f"      {phase} '{name}': {reason}")
        return report

    def _rename(self, captured: list[CapturedList], stamp: str, report: ResetReport) -> None:
        logger.info("✏️ Renaming lists in source board...")
        for item in captured:
            new_name = f"{item.name} {stamp}"
            logger.info(f"  Renaming '{item.name}' to '{new_name}'")
            try:
                report.renamed.append(self.client.rename_list(item.id, new_name))
            except TrelloAPIError as e:
                logger.error(f"❌ Error renaming list {item.id} to '{new_name}': {e}")
                report.failures.append(("rename", item.name, str(e)))
        logger.info("")

    def _check_renames(self, captured: list[CapturedList], stamp: str) -> None:
        """Re-read the source board; only reported, later steps use ``captured``"""
        try:
            lists = self.client.get_lists(self.source_board_id)
        except TrelloAPIError as e:
            logger.warning(f"⚠️  Could not re-read source board lists: {e}")
            return

        names = {lst.id: lst.name for lst in lists}
        confirmed = sum(1 for item in captured if names.get(item.id) == f"{item.name} {stamp}")
        logger.debug(f"{confirmed}/{len(captured)} renames visible on the source board")

    def _recreate(self, captured: list[CapturedList], report: ResetReport) -> None:
        logger.info("📝 Creating new empty lists in source board...")
        for item in captured:
            logger.info(f"  Creating: {item.name} (at position {item.pos})")
            try:
                report.created.append(
                    self.client.create_list(self.source_board_id, item.name, item.pos)
                )
            except TrelloAPIError as e:
                logger.error(f"❌ Error creating list '{item.name}': {e}")
                report.failures.append(("create", item.name, str(e)))
        logger.info("")

    def _migrate(self, captured: list[CapturedList], stamp: str, report: ResetReport) -> None:
        logger.info("🚚 Moving renamed lists to destination board...")
        for item in captured:
            logger.info(f"  Moving '{item.name} {stamp}' to destination board")
            try:
                report.moved.append(
                    self.client.move_list_to_board(item.id, self.destination_board_id)
                )
            except TrelloAPIError as e:
                logger.error(f"❌ Error moving list {item.id} to board: {e}")
                report.failures.append(("move", item.name, str(e)))
        logger.info("")
