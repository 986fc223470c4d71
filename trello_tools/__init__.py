"""Command-line housekeeping for Trello boards: archive, move, reset and copy lists."""

from __future__ import annotations

from trello_tools.archiver import ListArchiver
from trello_tools.config import TrelloConfig, load_env_file
from trello_tools.copier import ListCopier
from trello_tools.exceptions import (
    ConfigurationError,
    SelectionError,
    TrelloAPIError,
    TrelloAuthenticationError,
    TrelloNotFoundError,
    TrelloRateLimitError,
    TrelloServerError,
    TrelloToolsError,
)
from trello_tools.logging_config import setup_logging
from trello_tools.models import BatchResult, CardRecord, ListRecord, ResetReport
from trello_tools.mover import ListMover
from trello_tools.patterns import extract_number, matches_prefix
from trello_tools.retro import RetroBoardReset
from trello_tools.selection import IndexRange, NamePrefix, NumericRange, select
from trello_tools.trello_client import TrelloClient

__version__ = "1.0.0"

__all__ = [
    # Core classes
    "TrelloClient",
    "TrelloConfig",
    "ListArchiver",
    "ListMover",
    "ListCopier",
    "RetroBoardReset",
    "load_env_file",
    "setup_logging",
    # Records and results
    "ListRecord",
    "CardRecord",
    "BatchResult",
    "ResetReport",
    # Selection
    "NumericRange",
    "IndexRange",
    "NamePrefix",
    "select",
    "extract_number",
    "matches_prefix",
    # Exceptions
    "TrelloToolsError",
    "ConfigurationError",
    "SelectionError",
    "TrelloAPIError",
    "TrelloAuthenticationError",
    "TrelloNotFoundError",
    "TrelloRateLimitError",
    "TrelloServerError",
]
