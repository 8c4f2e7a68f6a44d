"""
Module: builder.layout.batcher

Purpose:
    Split a pack's cards into deck sheets of fixed capacity.

Key Functions:
    - batch_cards(): Partition an ordered card sequence into Batches
    - batch_pack(): Same, for a Pack
    - count_batches(): Number of sheets needed for n cards

Algorithm:
    1. No cards -> no batches
    2. Slice off up to `capacity` cards until none remain
    3. A single slice is part 0 (pack not partitioned)
    4. Several slices are parts 1..N; only the last may be short
    The remainder always goes to the final batch; sizes are never balanced.

Dependencies:
    - core.models: Card, Batch, Pack

Used By:
    - builder.controller: Pack processing
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple

from cah_toolkit.core.models import Batch, Card, CardKind, Pack

from .config import DEFAULT_DECK_COLS, DEFAULT_DECK_ROWS

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = DEFAULT_DECK_COLS * DEFAULT_DECK_ROWS


def count_batches(card_count: int, capacity: int = DEFAULT_CAPACITY) -> int:
    """
    Number of sheets needed for `card_count` cards.

    Example:
        >>> count_batches(0), count_batches(70), count_batches(71), count_batches(140)
        (0, 1, 2, 2)
    """
    _check_capacity(capacity)
    if card_count < 0:
        raise ValueError(f"card_count cannot be negative: {card_count}")
    return -(-card_count // capacity)


def batch_cards(
    cards: Sequence[Card],
    capacity: int = DEFAULT_CAPACITY,
    *,
    pack_name: Optional[str] = None,
    kind: Optional[CardKind] = None,
) -> Tuple[Batch, ...]:
    """
    Partition cards into sheet-sized batches.

    Args:
        cards: Cards of a single pack, in pack order
        capacity: Maximum cards per sheet
        pack_name: Pack name (defaults to the first card's)
        kind: Card kind (defaults to the first card's)

    Returns:
        Batches in order. Empty when `cards` is empty.

    Raises:
        ValueError: If capacity is not positive

    Example:
        >>> [b.size for b in batch_cards(pack.cards)]   # 75 cards
        [70, 5]
        >>> [b.part_number for b in batch_cards(pack.cards)]
        [1, 2]
    """
    _check_capacity(capacity)
    total = len(cards)
    if total == 0:
        return ()

    name = pack_name if pack_name is not None else cards[0].pack_name
    card_kind = kind if kind is not None else cards[0].kind

    num_batches = count_batches(total, capacity)
    partitioned = num_batches > 1
    logger.debug(f"{name}: {total} cards -> {num_batches} batch(es) of up to {capacity}")

    batches = []
    for index, start in enumerate(range(0, total, capacity)):
        chunk = tuple(cards[start:start + capacity])
        part = index + 1 if partitioned else 0
        batches.append(Batch(
            pack_name=name,
            kind=card_kind,
            part_number=part,
            cards=chunk,
        ))
        logger.debug(
            f"  part {part}: cards {start}-{start + len(chunk) - 1} ({len(chunk)})"
        )

    return tuple(batches)


def batch_pack(pack: Pack, capacity: int = DEFAULT_CAPACITY) -> Tuple[Batch, ...]:
    """Partition a Pack into sheet-sized batches."""
    return batch_cards(pack.cards, capacity, pack_name=pack.name, kind=pack.kind)


def _check_capacity(capacity: int) -> None:
    if capacity <= 0:
        raise ValueError(f"capacity must be positive: {capacity}")
