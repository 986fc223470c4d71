"""Typed records for Trello lists and cards, and operation results.

The records are built from API responses in ``TrelloClient`` so the rest of
the package never touches raw JSON. They are frozen: tools read a snapshot,
plan against it, and send changes to Trello instead of editing records.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class CardRecord:
    id: str
    name: str
    desc: str = ""
    due: str | None = None
    id_members: tuple[str, ...] = ()
    id_labels: tuple[str, ...] = ()

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> CardRecord:
        if not data.get("id"):
            raise ValueError(f"Card payload has no id: {data!r}")
        return cls(
            id=data["id"],
            name=data.get("name") or "",
            desc=data.get("desc") or "",
            due=data.get("due"),
            id_members=tuple(data.get("idMembers") or ()),
            id_labels=tuple(data.get("idLabels") or ()),
        )


@dataclass(frozen=True)
class ListRecord:
    id: str
    name: str
    pos: float | str = "bottom"
    closed: bool = False
    id_board: str | None = None
    cards: tuple[CardRecord, ...] = ()

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> ListRecord:
        if not data.get("id"):
            raise ValueError(f"List payload has no id: {data!r}")
        return cls(
            id=data["id"],
            name=data.get("name") or "",
            pos=data.get("pos", "bottom"),
            closed=bool(data.get("closed", False)),
            id_board=data.get("idBoard"),
            cards=tuple(CardRecord.from_api(card) for card in data.get("cards") or ()),
        )

    @property
    def card_count(self) -> int:
        return len(self.cards)


@dataclass
class BatchResult:
    """Outcome of a one-shot batch operation (archive, move, copy).

    ``listing`` holds the rendered selection lines. A dry run and a real run
    over the same snapshot produce the same listing.
    """

    action: str
    selected: list[ListRecord] = field(default_factory=list)
    listing: list[str] = field(default_factory=list)
    succeeded: list[ListRecord] = field(default_factory=list)
    failed: list[tuple[ListRecord, str]] = field(default_factory=list)
    cards: int = 0  # cards carried by the lists that succeeded
    card_failures: int = 0
    dry_run: bool = False
    cancelled: bool = False

    @property
    def success_count(self) -> int:
        return len(self.succeeded)

    @property
    def failed_count(self) -> int:
        return len(self.failed)


@dataclass
class ResetReport:
    """Outcome of a retrospective board reset, phase by phase."""

    date_stamp: str
    selected: list[ListRecord] = field(default_factory=list)
    listing: list[str] = field(default_factory=list)
    renamed: list[ListRecord] = field(default_factory=list)
    created: list[ListRecord] = field(default_factory=list)
    moved: list[ListRecord] = field(default_factory=list)
    failures: list[tuple[str, str, str]] = field(default_factory=list)  # (phase, list name, reason)
    dry_run: bool = False
    cancelled: bool = False

    @property
    def ok(self) -> bool:
        return not self.failures

    def failures_in(self, phase: str) -> list[tuple[str, str, str]]:
        return [failure for failure in self.failures if failure[0] == phase]
