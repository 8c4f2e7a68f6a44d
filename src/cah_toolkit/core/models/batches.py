"""
Module: core.models.batches

Purpose:
    Batch dataclass - a contiguous run of a pack's cards that is
    rendered onto one deck sheet.

Key Classes:
    - Batch: Cards for one sheet plus its part number

Dependencies:
    - core.models.cards: Card, CardKind

Used By:
    - builder.layout.batcher: Creates Batches
    - builder.output.renderer: Draws a Batch as a sheet
    - builder.output.naming: Sheet file names
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

from .cards import Card, CardKind


@dataclass(frozen=True)
class Batch:
    """
    Cards destined for a single deck sheet (immutable).

    The cards are the same objects held by the Pack; a Batch never copies
    or modifies them.

    Attributes:
        pack_name: Name of the source pack
        kind: BLACK or WHITE
        part_number: 0 when the whole pack fits on one sheet,
            otherwise the 1-based sheet ordinal
        cards: Cards in pack order

    Example:
        >>> batch = Batch("Base", CardKind.WHITE, 0, cards)
        >>> batch.is_partitioned
        False
    """

    pack_name: str
    kind: CardKind
    part_number: int
    cards: Tuple[Card, ...]

    def __post_init__(self) -> None:
        """Validate batch contents on construction."""
        if self.part_number < 0:
            raise ValueError(f"part_number cannot be negative: {self.part_number}")
        if not self.cards:
            raise ValueError(f"Batch for {self.pack_name!r} cannot be empty")
        for card in self.cards:
            if card.pack_name != self.pack_name or card.kind != self.kind:
                raise ValueError(
                    f"Card {card.sequence_index} from {card.pack_name!r} does not "
                    f"belong in batch for {self.pack_name!r}"
                )

    @property
    def size(self) -> int:
        """Number of cards on the sheet."""
        return len(self.cards)

    @property
    def is_partitioned(self) -> bool:
        """True when the pack was split across several sheets."""
        return self.part_number > 0

    @property
    def first_index(self) -> int:
        """Pack position of the first card."""
        return self.cards[0].sequence_index

    @property
    def last_index(self) -> int:
        """Pack position of the last card."""
        return self.cards[-1].sequence_index

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __len__(self) -> int:
        return len(self.cards)
