"""Plan, confirm, then apply one call per selected list.

The plan half (listing the selection) is identical for dry runs and real
runs. Nothing is sent to Trello before ``confirm`` says yes, and a failed call
for one list never stops the remaining lists.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from trello_tools.exceptions import TrelloAPIError
from trello_tools.models import BatchResult, ListRecord

logger = logging.getLogger(__name__)

Confirm = Callable[[str], bool]


def show_listing(header: str, listing: list[str]) -> None:
    logger.info(header)
    for line in listing:
        logger.info(line)
    logger.info("")


def run_batch(
    result: BatchResult,
    apply: Callable[[ListRecord], None],
    confirm: Confirm,
    *,
    verb: str,
    prompt: str,
) -> BatchResult:
    """Show the plan in ``result`` and, unless dry-run or declined, apply it.

    Args:
        result: Result holding the selected lists and their listing lines
        apply: Makes the API call for one list; raises TrelloAPIError on failure
        confirm: Asked once with ``prompt`` before the first call
        verb: Past tense used in the report ("archived", "moved")
        prompt: Confirmation question

    Returns:
        The same ``result``, filled in
    """
    show_listing(f"📊 {len(result.selected)} lists selected:", result.listing)

    if result.dry_run:
        logger.info(f"🔍 This was a dry run. No lists were actually {verb}.")
        logger.info("💡 Run without --dry-run to apply the changes.")
        return result

    if not confirm(prompt):
        logger.info("❌ Operation cancelled.")
        result.cancelled = True
        return result

    logger.info("")
    for lst in result.selected:
        try:
            apply(lst)
        except TrelloAPIError as e:
            logger.error(f"❌ Failed: {lst.name} - {e}")
            result.failed.append((lst, str(e)))
        else:
            logger.info(f"✅ Successfully {verb}: {lst.name}")
            result.succeeded.append(lst)

    logger.info("")
    logger.info("🎉 Done!")
    logger.info(f"✅ Successfully {verb}: {result.success_count} lists")
    logger.info(f"❌ Failed: {result.failed_count} lists")
    return result
