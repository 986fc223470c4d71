"""
Unit tests for TrelloConfig and .env loading
"""

import os
from unittest.mock import patch

import pytest

from trello_tools.config import DEFAULT_BASE_URL, TrelloConfig, load_env_file
from trello_tools.exceptions import ConfigurationError


class TestFromEnv:
    """Test TrelloConfig.from_env()"""

    def test_reads_credentials_and_boards(self):
        env = {
            "TRELLO_API_KEY": "key",
            "TRELLO_API_TOKEN": "token",
            "TRELLO_SOURCE_BOARD_ID": "src12345",
            "TRELLO_DESTINATION_BOARD_ID": "dst12345",
            "TRELLO_SOURCE_BOARD_RETRO_ID": "retro123",
            "TRELLO_DESTINATION_BOARD_RETRO_ID": "archive1",
        }
        config = TrelloConfig.from_env(env)

        assert config.api_key == "key"
        assert config.api_token == "token"
        assert config.source_board_id == "src12345"
        assert config.destination_board_id == "dst12345"
        assert config.source_board_retro_id == "retro123"
        assert config.destination_board_retro_id == "archive1"
        assert config.base_url == DEFAULT_BASE_URL
        assert config.verify_ssl is True

    def test_board_ids_are_optional(self):
        config = TrelloConfig.from_env({"TRELLO_API_KEY": "key", "TRELLO_API_TOKEN": "token"})
        assert config.source_board_id is None
        assert config.destination_board_retro_id is None

    def test_accepts_trello_token_alias(self):
        config = TrelloConfig.from_env({"TRELLO_API_KEY": "key", "TRELLO_TOKEN": "token"})
        assert config.api_token == "token"

    def test_custom_base_url_drops_trailing_slash(self):
        env = {
            "TRELLO_API_KEY": "key",
            "TRELLO_API_TOKEN": "token",
            "TRELLO_BASE_URL": "http://localhost:9000/1/",
        }
        assert TrelloConfig.from_env(env).base_url == "http://localhost:9000/1"

    @pytest.mark.parametrize(
        "env",
        [
            {},
            {"TRELLO_API_KEY": "key"},
            {"TRELLO_API_TOKEN": "token"},
            {"TRELLO_API_KEY": "", "TRELLO_API_TOKEN": "token"},
        ],
    )
    def test_missing_credentials_raise(self, env):
        with pytest.raises(ConfigurationError, match="TRELLO_API_KEY"):
            TrelloConfig.from_env(env)

    def test_reads_os_environ_by_default(self):
        with patch.dict(
            "os.environ", {"TRELLO_API_KEY": "k", "TRELLO_API_TOKEN": "t"}, clear=True
        ):
            assert TrelloConfig.from_env().api_key == "k"


class TestRequireAndOverrides:
    """Test require() and with_overrides()"""

    def test_require_passes_when_set(self):
        config = TrelloConfig("k", "t", source_board_id="src12345")
        config.require("source_board_id")

    def test_require_names_every_missing_variable(self):
        config = TrelloConfig("k", "t")

        with pytest.raises(ConfigurationError) as exc_info:
            config.require("source_board_retro_id", "destination_board_retro_id")

        message = str(exc_info.value)
        assert "TRELLO_SOURCE_BOARD_RETRO_ID" in message
        assert "TRELLO_DESTINATION_BOARD_RETRO_ID" in message

    def test_overrides_ignore_none(self):
        config = TrelloConfig("k", "t", source_board_id="from-env")

        assert config.with_overrides(source_board_id=None).source_board_id == "from-env"
        assert config.with_overrides(source_board_id="from-argv").source_board_id == "from-argv"

    def test_overrides_return_a_copy(self):
        config = TrelloConfig("k", "t")
        changed = config.with_overrides(verify_ssl=False)

        assert config.verify_ssl is True
        assert changed.verify_ssl is False


class TestLoadEnvFile:
    """Test load_env_file()"""

    def test_loads_values_without_overriding(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text(
            "# Trello credentials\n"
            "TRELLO_API_KEY=from-file\n"
            'TRELLO_API_TOKEN="quoted-token"\n'
            "\n"
            "NOT A SETTING\n"
        )

        with patch.dict("os.environ", {"TRELLO_API_KEY": "from-env"}, clear=True):
            assert load_env_file(env_file) is True
            assert os.environ["TRELLO_API_KEY"] == "from-env"
            assert os.environ["TRELLO_API_TOKEN"] == "quoted-token"
            assert "NOT A SETTING" not in os.environ

    def test_missing_file_is_ignored(self, tmp_path):
        with patch.dict("os.environ", {}, clear=True):
            assert load_env_file(tmp_path / "missing.env") is False

    def test_env_file_variable_picks_the_path(self, tmp_path):
        env_file = tmp_path / "custom.env"
        env_file.write_text("TRELLO_SOURCE_BOARD_ID=abc12345\n")

        with patch.dict("os.environ", {"TRELLO_ENV_FILE": str(env_file)}, clear=True):
            assert load_env_file() is True
            assert os.environ["TRELLO_SOURCE_BOARD_ID"] == "abc12345"
