"""Matching helpers for list names."""

from __future__ import annotations

import re

# Words that may precede a list number, e.g. "Sprint 12" or "week3"
NUMBERED_KEYWORDS = (
    "sprint",
    "week",
    "task",
    "epic",
    "story",
    "bug",
    "feature",
    "list",
    "column",
)

_NUMBER_PATTERN = re.compile(r"(?:" + "|".join(NUMBERED_KEYWORDS) + r")\s*(\d+)", re.IGNORECASE)


def extract_number(label: str) -> int | None:
    """Return the number that follows the first keyword in a list name.

    >>> extract_number("Sprint 12 - Review")
    12
    >>> extract_number("Backlog") is None
    True
    """
    if not label:
        return None
    match = _NUMBER_PATTERN.search(label)
    return int(match.group(1)) if match else None


def matches_prefix(label: str, pattern: str) -> bool:
    """Case-insensitive ``startswith``; "Sprint10" matches "Sprint1".

    An empty label never matches.
    """
    if not label:
        return False
    return label.lower().startswith(pattern.lower())
