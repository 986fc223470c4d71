"""
Shared pytest fixtures for trello_tools tests
"""
import logging
from unittest.mock import MagicMock

import pytest

from trello_tools.models import CardRecord, ListRecord
from trello_tools.trello_client import TrelloClient


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo setup_logging() so one CLI test cannot silence the next"""
    yield
    logger = logging.getLogger("trello_tools")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def make_list():
    """Factory for ListRecord snapshots: make_list("l1", "Sprint 1", pos=1024)"""

    def _make(list_id, name, pos=None, cards=0, board="board-src"):
        return ListRecord(
            id=list_id,
            name=name,
            pos=pos if pos is not None else 1024.0,
            id_board=board,
            cards=tuple(CardRecord(id=f"{list_id}-c{i}", name=f"Card {i}") for i in range(cards)),
        )

    return _make


@pytest.fixture
def retro_snapshot(make_list):
    """Five lists of a retrospective board, in board order"""
    names = ["To Discuss", "Discussing", "Resolved", "Parking Lot", "Notes"]
    return [
        make_list(f"list{i}", name, pos=1024.0 * i) for i, name in enumerate(names, start=1)
    ]


@pytest.fixture
def sprint_snapshot(make_list):
    """Lists with and without numbers, as a sprint board tends to look"""
    return [
        make_list("b1", "Backlog"),
        make_list("s1", "Sprint 1", cards=2),
        make_list("s2", "Sprint 2"),
        make_list("w3", "week3 retro"),
        make_list("s10", "Sprint 10", cards=1),
        make_list("d1", "Done"),
    ]


@pytest.fixture
def mock_client():
    """TrelloClient double whose mutating calls echo a ListRecord back"""
    client = MagicMock(spec=TrelloClient)
    client.rename_list.side_effect = lambda list_id, name: ListRecord(id=list_id, name=name)
    client.create_list.side_effect = lambda board_id, name, pos="bottom": ListRecord(
        id=f"new-{name}", name=name, pos=pos, id_board=board_id
    )
    client.move_list_to_board.side_effect = lambda list_id, board_id: ListRecord(
        id=list_id, name="", id_board=board_id
    )
    client.resolve_board_id.side_effect = lambda ref: f"{ref}-full"
    return client


@pytest.fixture
def trello_env(tmp_path, monkeypatch):
    """Minimal credentials in a clean environment, run from an empty directory"""
    monkeypatch.chdir(tmp_path)
    return {"TRELLO_API_KEY": "test-key", "TRELLO_API_TOKEN": "test-token"}
