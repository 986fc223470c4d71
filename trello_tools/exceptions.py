"""Custom exception classes for trello_tools.

Configuration and selection errors stop an operation before anything is
changed on Trello. Transport errors (``TrelloAPIError`` and subclasses) are
raised per call; batch operations catch them per item, count the failure and
carry on with the next list.
"""

from __future__ import annotations


class TrelloToolsError(Exception):
    """Base exception for trello_tools"""

    pass


class ConfigurationError(TrelloToolsError):
    """Raised when credentials or a required board id are missing.

    Always raised before any network call is made.
    """

    pass


class SelectionError(TrelloToolsError):
    """Raised when a selection is empty or an index range is out of bounds.

    Attributes:
        available: Names of the lists that were available for selection, in
            board order, so the caller can show them to the user.
    """

    def __init__(self, message: str, available: list[str] | None = None):
        self.available = available or []
        super().__init__(message)


class TrelloAPIError(TrelloToolsError):
    """Base exception for Trello API errors"""

    def __init__(
        self, message: str, status_code: int | None = None, response_text: str | None = None
    ):
        self.status_code = status_code
        self.response_text = response_text
        super().__init__(message)


class TrelloAuthenticationError(TrelloAPIError):
    """Raised when API credentials are invalid or expired (401/403)"""

    pass


class TrelloNotFoundError(TrelloAPIError):
    """Raised when a board, list, or card is not found (404)"""

    pass


class TrelloRateLimitError(TrelloAPIError):
    """Raised when Trello rejects a request with 429"""

    pass


class TrelloServerError(TrelloAPIError):
    """Raised when Trello's servers return an error (500/502/503/504)"""

    pass
