"""
Unit tests for ListMover (move lists by name prefix)
"""

from unittest.mock import MagicMock

import pytest

from trello_tools.exceptions import ConfigurationError, SelectionError, TrelloNotFoundError
from trello_tools.mover import ListMover


def always_yes(prompt):
    return True


class TestMoveByPattern:
    """Test move_by_pattern()"""

    def test_moves_matching_lists_to_resolved_destination(self, mock_client, sprint_snapshot):
        mock_client.get_lists.return_value = sprint_snapshot

        result = ListMover(mock_client, always_yes).move_by_pattern("src", "dst", "sprint")

        mock_client.get_lists.assert_called_once_with("src-full", cards=True)
        moved = [call.args for call in mock_client.move_list_to_board.call_args_list]
        assert moved == [("s1", "dst-full"), ("s2", "dst-full"), ("s10", "dst-full")]
        assert result.success_count == 3
        assert result.cards == 3
        assert result.listing == [
            "  - Sprint 1 (2 cards)",
            "  - Sprint 2 (0 cards)",
            "  - Sprint 10 (1 cards)",
        ]

    def test_no_match_reports_available_lists(self, mock_client, sprint_snapshot):
        mock_client.get_lists.return_value = sprint_snapshot

        with pytest.raises(SelectionError, match="starting with 'Icebox'") as exc_info:
            ListMover(mock_client, always_yes).move_by_pattern("src", "dst", "Icebox")

        assert exc_info.value.available == [lst.name for lst in sprint_snapshot]
        mock_client.move_list_to_board.assert_not_called()

    def test_empty_source_board_raises(self, mock_client):
        mock_client.get_lists.return_value = []

        with pytest.raises(SelectionError, match="No lists found in source board"):
            ListMover(mock_client, always_yes).move_by_pattern("src", "dst", "Sprint")

    def test_empty_pattern_is_rejected_before_any_request(self, mock_client, sprint_snapshot):
        mock_client.get_lists.return_value = sprint_snapshot

        with pytest.raises(SelectionError, match="Pattern cannot be empty"):
            ListMover(mock_client, always_yes).move_by_pattern("src", "dst", "")

        assert mock_client.mock_calls == []

    def test_bad_board_reference_is_a_configuration_error(self, mock_client):
        mock_client.resolve_board_id.side_effect = ValueError("Could not extract board ID")

        with pytest.raises(ConfigurationError, match="Could not extract board ID"):
            ListMover(mock_client, always_yes).move_by_pattern("?", "dst", "Sprint")

        mock_client.get_lists.assert_not_called()

    def test_dry_run_matches_real_listing_and_moves_nothing(self, mock_client, sprint_snapshot):
        mock_client.get_lists.return_value = sprint_snapshot
        mover = ListMover(mock_client, always_yes)

        dry = mover.move_by_pattern("src", "dst", "Sprint 1", dry_run=True)
        mock_client.move_list_to_board.assert_not_called()

        real = mover.move_by_pattern("src", "dst", "Sprint 1")
        assert dry.listing == real.listing == ["  - Sprint 1 (2 cards)", "  - Sprint 10 (1 cards)"]

    def test_declined_confirmation_moves_nothing(self, mock_client, sprint_snapshot):
        mock_client.get_lists.return_value = sprint_snapshot

        result = ListMover(mock_client, MagicMock(return_value=False)).move_by_pattern(
            "src", "dst", "Sprint"
        )

        assert result.cancelled is True
        assert result.cards == 0
        mock_client.move_list_to_board.assert_not_called()

    def test_failed_move_is_isolated(self, mock_client, sprint_snapshot):
        mock_client.get_lists.return_value = sprint_snapshot
        mock_client.move_list_to_board.side_effect = [
            TrelloNotFoundError("Resource not found", status_code=404),
            None,
            None,
        ]

        result = ListMover(mock_client, always_yes).move_by_pattern("src", "dst", "Sprint")

        assert mock_client.move_list_to_board.call_count == 3
        assert result.failed_count == 1
        assert result.success_count == 2
        # Only cards of lists that actually moved are counted
        assert result.cards == 1
