"""Shared command-line plumbing for the trello_tools scripts.

Each script under ``trello_tools.scripts`` builds its own argparse parser,
adds the common flags from here, and runs its work through ``run_tool`` so
configuration, selection and API errors end the same way everywhere.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable

from trello_tools.batch import Confirm
from trello_tools.config import TrelloConfig, load_env_file
from trello_tools.exceptions import ConfigurationError, SelectionError, TrelloAPIError
from trello_tools.logging_config import resolve_level, setup_logging

logger = logging.getLogger("trello_tools.cli")


def add_common_arguments(parser: argparse.ArgumentParser, mutating: bool = False) -> None:
    """Add logging/connection flags, plus --dry-run/--yes for tools that change boards"""
    group = parser.add_argument_group("output and connection")
    group.add_argument("-v", "--verbose", action="store_true", help="Show request details")
    group.add_argument("-q", "--quiet", action="store_true", help="Only show errors")
    group.add_argument("--log-level", metavar="LEVEL", help="DEBUG, INFO, WARNING or ERROR")
    group.add_argument("--log-file", metavar="PATH", help="Also write the log to this file")
    group.add_argument("--env-file", metavar="PATH", help="Read credentials from this .env file")
    group.add_argument(
        "--no-verify-ssl", action="store_true", help="Disable SSL certificate verification"
    )

    if mutating:
        parser.add_argument(
            "-n", "--dry-run", action="store_true", help="Show what would change, change nothing"
        )
        parser.add_argument(
            "-y", "--yes", action="store_true", help="Do not ask for confirmation"
        )


def reject_quiet_prompt(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    """Exit with a usage error if --quiet would hide the lists a prompt asks about"""
    if args.quiet and not args.yes and not args.dry_run:
        parser.error("--quiet hides the selected lists; add --yes to apply without a prompt")


def setup_from_args(args: argparse.Namespace) -> None:
    setup_logging(resolve_level(args.verbose, args.quiet, args.log_level), args.log_file)

    if args.no_verify_ssl:
        import urllib3

        urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
        logger.info("🔓 SSL verification disabled")


def load_config(args: argparse.Namespace) -> TrelloConfig:
    """Load .env, read credentials from the environment, apply --no-verify-ssl

    Raises:
        ConfigurationError: If the API key or token is missing
    """
    load_env_file(args.env_file)
    config = TrelloConfig.from_env()
    return config.with_overrides(verify_ssl=False if args.no_verify_ssl else None)


def prompt_confirmation(prompt: str) -> bool:
    """Ask a yes/no question on the terminal; anything but y/yes means no"""
    try:
        answer = input(prompt)
    except EOFError:
        return False
    return answer.strip().lower() in {"y", "yes"}


def confirmation_for(args: argparse.Namespace) -> Confirm:
    if getattr(args, "yes", False):
        return lambda prompt: True
    return prompt_confirmation


def run_tool(action: Callable[[], int]) -> int:
    """Run a tool body and turn fatal errors into an exit code"""
    try:
        return action()
    except ConfigurationError as e:
        logger.error(f"❌ Error: {e}")
        return 1
    except SelectionError as e:
        logger.error(f"❌ {e}")
        if e.available:
            logger.info("📊 Available lists:")
            for index, name in enumerate(e.available, start=1):
                logger.info(f"  {index}. {name}")
        return 1
    except TrelloAPIError as e:
        logger.error(f"❌ Trello API error: {e}")
        return 1
    except KeyboardInterrupt:
        logger.error("\n❌ Interrupted")
        return 130
