"""
Module: core.models.cards

Purpose:
    Card and Pack dataclasses - the immutable result of parsing one
    pack file. A Pack owns its Cards in file line order; everything
    downstream (batching, rendering, naming) only reads them.

Key Classes:
    - CardKind: Black or White card (value is the file suffix letter)
    - Card: Single card face
    - Pack: Named, ordered collection of cards of one kind

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - builder.loading.parser: Creates Packs from text files
    - builder.layout.batcher: Groups Cards into Batches
    - builder.output.renderer: Reads Card text for drawing
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator, Optional, Tuple


class CardKind(str, Enum):
    """Category of a CaH card."""
    BLACK = "B"  # Prompt cards
    WHITE = "W"  # Answer cards

    def __str__(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        """Human readable name, e.g. "Black"."""
        return self.name.capitalize()


@dataclass(frozen=True, slots=True)
class Card:
    """
    A single card face (immutable).

    Attributes:
        pack_name: Name of the pack this card belongs to
        kind: BLACK or WHITE
        text: Card text, may contain newlines from <br> markers
        sequence_index: 0-based position of the card within its pack

    Example:
        >>> card = Card("Base", CardKind.WHITE, "A bag of teeth.", 0)
        >>> card.kind.value
        'W'
    """

    pack_name: str
    kind: CardKind
    text: str
    sequence_index: int

    def __post_init__(self) -> None:
        if self.sequence_index < 0:
            raise ValueError(f"sequence_index cannot be negative: {self.sequence_index}")


@dataclass(frozen=True)
class Pack:
    """
    Named collection of cards of one kind (immutable).

    Attributes:
        name: Pack name, taken from the source file name without extension
        kind: BLACK or WHITE
        cards: Cards in source file order
        source_path: File the pack was read from (None when built in memory)

    Invariants:
        - Every card has pack_name == name and kind == kind
        - cards[i].sequence_index == i

    Example:
        >>> pack = Pack.from_texts("Base", CardKind.BLACK, ["Why?", "What's that smell?"])
        >>> pack.card_count
        2
    """

    name: str
    kind: CardKind
    cards: Tuple[Card, ...] = ()
    source_path: Optional[Path] = None

    def __post_init__(self) -> None:
        """Validate pack membership and ordering of cards."""
        if not self.name:
            raise ValueError("Pack name cannot be empty")
        for index, card in enumerate(self.cards):
            if card.pack_name != self.name or card.kind != self.kind:
                raise ValueError(
                    f"Card {index} belongs to {card.pack_name!r}/{card.kind}, "
                    f"not pack {self.name!r}/{self.kind}"
                )
            if card.sequence_index != index:
                raise ValueError(
                    f"Card {index} of pack {self.name!r} has sequence_index {card.sequence_index}"
                )

    @classmethod
    def from_texts(
        cls,
        name: str,
        kind: CardKind,
        texts: Iterable[str],
        source_path: Optional[Path] = None,
    ) -> Pack:
        """Build a pack, numbering cards in iteration order."""
        cards = tuple(
            Card(pack_name=name, kind=kind, text=text, sequence_index=index)
            for index, text in enumerate(texts)
        )
        return cls(name=name, kind=kind, cards=cards, source_path=source_path)

    @property
    def card_count(self) -> int:
        """Number of cards in the pack."""
        return len(self.cards)

    @property
    def is_empty(self) -> bool:
        return not self.cards

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __len__(self) -> int:
        return len(self.cards)
