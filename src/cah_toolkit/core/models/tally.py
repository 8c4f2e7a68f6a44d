"""
Module: core.models.tally

Purpose:
    Run-wide counters and failure records. A RunTally is created once per
    run and handed to the pack processor explicitly.

Key Classes:
    - PackFailure: A file, card or sheet that could not be produced
    - RunTally: Cards/decks rendered so far and failures seen
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .cards import CardKind


FAILURE_STAGES = ("discover", "parse", "render", "write")


@dataclass(frozen=True)
class PackFailure:
    """
    Something that failed during a run.

    Attributes:
        kind: Kind being processed when the failure happened
        source: Offending file path or output name
        error: Error message, prefixed with the exception type
        stage: One of "discover", "parse", "render", "write"
    """

    kind: CardKind
    source: str
    error: str
    stage: str = "parse"

    def __post_init__(self) -> None:
        if self.stage not in FAILURE_STAGES:
            raise ValueError(f"Invalid failure stage: {self.stage!r}")


@dataclass
class RunTally:
    """
    Counters for a generation run.

    Card ordinals in output file names come from this tally, so one tally
    must be shared by every directory processed in a run.

    Attributes:
        total_cards_rendered: Individual card images written
        total_decks_rendered: Non-empty packs processed
        failures: Failures recorded so far

    Example:
        >>> tally = RunTally()
        >>> tally.next_card_ordinal()
        1
        >>> tally.record_card()
        1
        >>> tally.next_card_ordinal()
        2
    """

    total_cards_rendered: int = 0
    total_decks_rendered: int = 0
    failures: List[PackFailure] = field(default_factory=list)

    def next_card_ordinal(self) -> int:
        """1-based ordinal the next rendered card will carry."""
        return self.total_cards_rendered + 1

    def record_card(self) -> int:
        """Count a rendered card and return its ordinal."""
        self.total_cards_rendered += 1
        return self.total_cards_rendered

    def record_deck(self) -> int:
        """Count a rendered pack and return the new deck total."""
        self.total_decks_rendered += 1
        return self.total_decks_rendered

    def record_failure(
        self,
        kind: CardKind,
        source: str,
        error: BaseException | str,
        stage: str = "parse",
    ) -> PackFailure:
        """Record a failure; exceptions are stored as "Type: message"."""
        if isinstance(error, BaseException):
            message = f"{type(error).__name__}: {error}"
        else:
            message = error
        failure = PackFailure(kind=kind, source=source, error=message, stage=stage)
        self.failures.append(failure)
        return failure

    def failures_for(self, kind: Optional[CardKind] = None) -> List[PackFailure]:
        """Failures, optionally restricted to one kind."""
        if kind is None:
            return list(self.failures)
        return [f for f in self.failures if f.kind == kind]

    @property
    def has_failures(self) -> bool:
        return bool(self.failures)

