"""Trello API client for list and card housekeeping."""

from __future__ import annotations

import logging
import re
from typing import Any, TypeVar, cast

import requests

from trello_tools.config import TrelloConfig
from trello_tools.exceptions import (
    TrelloAPIError,
    TrelloAuthenticationError,
    TrelloNotFoundError,
    TrelloRateLimitError,
    TrelloServerError,
)
from trello_tools.models import CardRecord, ListRecord

logger = logging.getLogger(__name__)

# Canonical Trello ids are 24 hex characters; anything shorter is a short link
LONG_ID_LENGTH = 24

LIST_FIELDS = "name,id,pos,closed,idBoard"
CARD_FIELDS = "name,desc,due,idMembers,idLabels"

RecordT = TypeVar("RecordT", ListRecord, CardRecord)


class TrelloClient:
    """Issue authenticated requests against the Trello REST API

    Every call is a single synchronous request: there is no retry, no rate
    limiting and no pagination. Any non-success status raises a
    ``TrelloAPIError`` subclass, which batch operations catch per item.
    """

    def __init__(self, config: TrelloConfig, timeout: float = 30.0):
        self.api_key = config.api_key
        self.token = config.api_token
        self.base_url = config.base_url
        self.verify_ssl = config.verify_ssl
        self.timeout = timeout

        # Short id / URL -> canonical board id, for the lifetime of this client
        self._board_ids: dict[str, str] = {}

    @staticmethod
    def parse_board_url(text: str) -> str:
        """Extract a board id from a Trello URL or a bare id

        Supports formats:
        - https://trello.com/b/Bm0nnz1R/board-name
        - https://trello.com/board/Bm0nnz1R/board-name
        - Bm0nnz1R (8 or more alphanumeric characters)

        Raises:
            ValueError: If no board id can be found
        """
        if not text or not text.strip():
            raise ValueError("Board reference cannot be empty")

        text = text.strip()
        patterns = [
            r"trello\.com/b/([a-zA-Z0-9]+)",
            r"trello\.com/board/([a-zA-Z0-9]+)",
            r"^([a-zA-Z0-9]{8,})$",
        ]

        for pattern in patterns:
            match = re.search(pattern, text)
            if match:
                return match.group(1)

        raise ValueError(f"Could not extract board ID from: {text}")

    def _request(self, method: str, endpoint: str, params: dict | None = None) -> Any:
        """Make one authenticated request to the Trello API"""
        url = f"{self.base_url}/{endpoint}"
        auth_params: dict[str, Any] = {"key": self.api_key, "token": self.token}
        if params:
            auth_params.update(params)

        logger.debug("%s %s", method, endpoint)

        try:
            response = requests.request(
                method, url, params=auth_params, timeout=self.timeout, verify=self.verify_ssl
            )
            response.raise_for_status()
            return cast(Any, response.json())

        except requests.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else 0
            response_text = e.response.text if e.response is not None else ""
            logger.debug("HTTP %s for %s %s: %s", status_code, method, endpoint, response_text)

            if status_code == 401:
                raise TrelloAuthenticationError(
                    "Invalid API credentials. Check your TRELLO_API_KEY and TRELLO_API_TOKEN.\n"
                    "Get credentials at: https://trello.com/power-ups/admin",
                    status_code=status_code,
                    response_text=response_text,
                ) from e
            elif status_code == 403:
                raise TrelloAuthenticationError(
                    f"Access forbidden to resource: {endpoint}\n"
                    "Your API token may not have permission to change this board.",
                    status_code=status_code,
                    response_text=response_text,
                ) from e
            elif status_code == 404:
                raise TrelloNotFoundError(
                    f"Resource not found: {endpoint}",
                    status_code=status_code,
                    response_text=response_text,
                ) from e
            elif status_code == 429:
                raise TrelloRateLimitError(
                    f"Rate limit exceeded for {endpoint}.\n"
                    "Trello's API rate limit: 100 requests per 10 seconds.",
                    status_code=status_code,
                    response_text=response_text,
                ) from e
            elif status_code in {500, 502, 503, 504}:
                raise TrelloServerError(
                    f"Trello server error (HTTP {status_code}) for {endpoint}",
                    status_code=status_code,
                    response_text=response_text,
                ) from e
            else:
                raise TrelloAPIError(
                    f"HTTP {status_code} error for {endpoint}: {response_text[:200]}",
                    status_code=status_code,
                    response_text=response_text,
                ) from e

        except requests.JSONDecodeError as e:
            raise TrelloAPIError(
                f"Invalid JSON in response for {endpoint}", status_code=None, response_text=None
            ) from e

        except requests.RequestException as e:
            # Network errors, timeouts, etc.
            raise TrelloAPIError(
                f"Network error for {endpoint}: {str(e)}\n"
                "Check your internet connection and try again.",
                status_code=None,
                response_text=None,
            ) from e

    @staticmethod
    def _parse(record_type: type[RecordT], data: Any, endpoint: str) -> RecordT:
        """Build a record from a response body, raising TrelloAPIError if it is malformed"""
        if not isinstance(data, dict):
            raise TrelloAPIError(f"Unexpected response for {endpoint}: {str(data)[:200]}")
        try:
            return record_type.from_api(data)
        except ValueError as e:
            raise TrelloAPIError(f"Malformed response for {endpoint}: {e}") from e

    # ----- Boards -----

    def get_board(self, board_id: str, **params: str) -> dict:
        """Get board info, passing extra query parameters through"""
        return cast(dict, self._request("GET", f"boards/{board_id}", params or None))

    def list_boards(self, filter_status: str = "open") -> list[dict]:
        """List all boards accessible to the authenticated user

        Args:
            filter_status: "open" (default), "closed" or "all"
        """
        valid_filters = {"open", "closed", "all"}
        if filter_status not in valid_filters:
            raise ValueError(
                f"Invalid filter_status: '{filter_status}'. Must be one of: {valid_filters}"
            )

        boards = self._request(
            "GET", "members/me/boards", {"fields": "name,url,closed", "filter": filter_status}
        )
        return cast(list[dict], boards)

    def find_board_by_name(self, name: str) -> tuple[dict | None, list[dict]]:
        """Find a board by exact name, ignoring case

        Returns:
            (board, similar) where ``board`` is the exact match or None, and
            ``similar`` lists boards whose name contains ``name`` when there
            is no exact match.
        """
        wanted = name.lower()
        boards = self.list_boards(filter_status="all")

        for board in boards:
            if board.get("name", "").lower() == wanted:
                return board, []

        similar = [board for board in boards if wanted in board.get("name", "").lower()]
        return None, similar

    def resolve_board_id(self, reference: str) -> str:
        """Turn a board URL, short id or long id into the canonical long id

        Long ids are returned unchanged without a request. Short ids are
        looked up once and cached for the lifetime of the client.
        """
        board_id = self.parse_board_url(reference)
        if len(board_id) >= LONG_ID_LENGTH:
            return board_id

        if board_id not in self._board_ids:
            board = self.get_board(board_id, fields="id")
            self._board_ids[board_id] = board["id"]
            logger.debug("Resolved board %s -> %s", board_id, board["id"])

        return self._board_ids[board_id]

    # ----- Lists -----

    def get_lists(self, board_id: str, cards: bool = False) -> list[ListRecord]:
        """Get the open lists on a board in board order, optionally with open cards"""
        params = {"fields": LIST_FIELDS}
        if cards:
            params["cards"] = "open"
            params["card_fields"] = CARD_FIELDS

        endpoint = f"boards/{board_id}/lists"
        lists = self._request("GET", endpoint, params)
        if not isinstance(lists, list):
            raise TrelloAPIError(f"Unexpected response for {endpoint}: {str(lists)[:200]}")
        return [self._parse(ListRecord, data, endpoint) for data in lists]

    def archive_list(self, list_id: str) -> None:
        """Close (archive) a list; closing an already closed list is harmless"""
        self._request("PUT", f"lists/{list_id}/closed", {"value": "true"})

    def rename_list(self, list_id: str, name: str) -> ListRecord:
        endpoint = f"lists/{list_id}/name"
        return self._parse(ListRecord, self._request("PUT", endpoint, {"value": name}), endpoint)

    def create_list(self, board_id: str, name: str, pos: float | str = "bottom") -> ListRecord:
        """Create a list at ``pos``, a position value or one of top/bottom"""
        data = self._request("POST", "lists", {"name": name, "idBoard": board_id, "pos": pos})
        return self._parse(ListRecord, data, "lists")

    def move_list_to_board(self, list_id: str, board_id: str) -> ListRecord:
        """Move a list, with its cards, to another board"""
        endpoint = f"lists/{list_id}/idBoard"
        data = self._request("PUT", endpoint, {"value": board_id})
        return self._parse(ListRecord, data, endpoint)

    # ----- Cards -----

    def create_card(self, list_id: str, card: CardRecord) -> CardRecord:
        """Create a copy of ``card`` in a list (name, description, due, members, labels)"""
        params: dict[str, Any] = {
            "idList": list_id,
            "name": card.name,
            "desc": card.desc,
            "idMembers": ",".join(card.id_members),
            "idLabels": ",".join(card.id_labels),
        }
        if card.due:
            params["due"] = card.due
        return self._parse(CardRecord, self._request("POST", "cards", params), "cards")
