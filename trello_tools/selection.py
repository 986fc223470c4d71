"""Selection rules and the list selector.

``select`` is a pure filter over a snapshot of a board's lists: it keeps the
snapshot order and never talks to Trello.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Union

from trello_tools.exceptions import SelectionError
from trello_tools.models import ListRecord
from trello_tools.patterns import extract_number, matches_prefix


@dataclass(frozen=True)
class NumericRange:
    """Lists whose name carries a number in ``[low, high]``"""

    low: int
    high: int


@dataclass(frozen=True)
class IndexRange:
    """Lists at 1-based positions ``low`` to ``high`` of the snapshot"""

    low: int
    high: int


@dataclass(frozen=True)
class NamePrefix:
    """Lists whose name starts with ``text`` (case-insensitive)"""

    text: str


SelectionRule = Union[NumericRange, IndexRange, NamePrefix]


def check_index_range(rule: IndexRange, size: int, available: list[str] | None = None) -> None:
    """Raise SelectionError unless ``1 <= low <= high <= size``."""
    if rule.low < 1 or rule.high > size or rule.low > rule.high:
        raise SelectionError(
            f"Invalid range {rule.low}-{rule.high}. Must be between 1 and {size}",
            available=available,
        )


def select(snapshot: Sequence[ListRecord], rule: SelectionRule) -> list[ListRecord]:
    """Return the lists of ``snapshot`` matched by ``rule``, in snapshot order.

    Raises:
        SelectionError: If an IndexRange falls outside the snapshot
    """
    if isinstance(rule, IndexRange):
        check_index_range(rule, len(snapshot), [lst.name for lst in snapshot])
        return list(snapshot[rule.low - 1 : rule.high])

    if isinstance(rule, NumericRange):
        selected = []
        for lst in snapshot:
            number = extract_number(lst.name)
            if number is not None and rule.low <= number <= rule.high:
                selected.append(lst)
        return selected

    if isinstance(rule, NamePrefix):
        return [lst for lst in snapshot if matches_prefix(lst.name, rule.text)]

    raise TypeError(f"Unknown selection rule: {rule!r}")
