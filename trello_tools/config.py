"""Credentials and board ids loaded from the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path

from trello_tools.exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://api.trello.com/1"

# Field name -> environment variable, used for error messages
BOARD_VARIABLES = {
    "source_board_id": "TRELLO_SOURCE_BOARD_ID",
    "destination_board_id": "TRELLO_DESTINATION_BOARD_ID",
    "source_board_retro_id": "TRELLO_SOURCE_BOARD_RETRO_ID",
    "destination_board_retro_id": "TRELLO_DESTINATION_BOARD_RETRO_ID",
}


def load_env_file(path: str | Path | None = None) -> bool:
    """Load KEY=VALUE lines from a .env file into ``os.environ``.

    Existing environment variables are never overridden. The path defaults to
    ``$TRELLO_ENV_FILE`` or ``.env`` in the working directory.

    Returns:
        True if a file was found and read
    """
    env_file = Path(path or os.getenv("TRELLO_ENV_FILE", ".env"))
    if not env_file.exists():
        return False

    with open(env_file) as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#") and "=" in line:
                key, value = line.split("=", 1)
                key = key.strip()
                value = value.strip().strip('"').strip("'")
                if key not in os.environ:  # Don't override existing env vars
                    os.environ[key] = value
    return True


@dataclass(frozen=True)
class TrelloConfig:
    """Everything a tool needs to talk to Trello.

    Built once at startup and handed to the client and tools explicitly.
    """

    api_key: str
    api_token: str
    source_board_id: str | None = None
    destination_board_id: str | None = None
    source_board_retro_id: str | None = None
    destination_board_retro_id: str | None = None
    base_url: str = DEFAULT_BASE_URL
    verify_ssl: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> TrelloConfig:
        """Build a config from environment variables.

        Raises:
            ConfigurationError: If the API key or token is missing
        """
        env = os.environ if environ is None else environ

        api_key = env.get("TRELLO_API_KEY")
        api_token = env.get("TRELLO_API_TOKEN") or env.get("TRELLO_TOKEN")
        if not api_key or not api_token:
            raise ConfigurationError(
                "Missing required Trello credentials.\n"
                "Set TRELLO_API_KEY and TRELLO_API_TOKEN in your environment or .env file.\n"
                "Get credentials at: https://trello.com/power-ups/admin"
            )

        return cls(
            api_key=api_key,
            api_token=api_token,
            source_board_id=env.get("TRELLO_SOURCE_BOARD_ID") or None,
            destination_board_id=env.get("TRELLO_DESTINATION_BOARD_ID") or None,
            source_board_retro_id=env.get("TRELLO_SOURCE_BOARD_RETRO_ID") or None,
            destination_board_retro_id=env.get("TRELLO_DESTINATION_BOARD_RETRO_ID") or None,
            base_url=(env.get("TRELLO_BASE_URL") or DEFAULT_BASE_URL).rstrip("/"),
        )

    def with_overrides(self, **overrides: str | bool | None) -> TrelloConfig:
        """Return a copy with the non-None overrides applied (e.g. ids from argv)."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)

    def require(self, *fields: str) -> None:
        """Ensure the named board id fields are set.

        Raises:
            ConfigurationError: Naming every missing environment variable
        """
        missing = [BOARD_VARIABLES.get(name, name) for name in fields if not getattr(self, name)]
        if missing:
            raise ConfigurationError(
                f"Missing board id(s): {', '.join(missing)}\n"
                "Set them in your .env file or pass them as arguments."
            )
