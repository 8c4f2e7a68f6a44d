"""Output file names. They double as TTS import instructions, so the format is fixed."""

from __future__ import annotations

from cah_toolkit.core.models import Batch, CardKind

from ..layout.config import DEFAULT_DECK_COLS, DEFAULT_DECK_ROWS

DEFAULT_GRID_LABEL = f"{DEFAULT_DECK_COLS}x{DEFAULT_DECK_ROWS}"


def part_suffix(part_number: int) -> str:
    """'' for an unpartitioned pack, otherwise '_part<k>'."""
    if part_number < 0:
        raise ValueError(f"part_number cannot be negative: {part_number}")
    return f"_part{part_number}" if part_number > 0 else ""


def card_filename(pack_name: str, kind: CardKind, ordinal: int) -> str:
    """
    File name of an individual card image.

    Example:
        >>> card_filename("Base", CardKind.WHITE, 12)
        'Base_W_12.png'
    """
    if ordinal < 1:
        raise ValueError(f"Card ordinal must be 1 or more: {ordinal}")
    return f"{pack_name}_{CardKind(kind).value}_{ordinal}.png"


def sheet_filename(
    pack_name: str,
    kind: CardKind,
    part_number: int,
    card_count: int,
    grid_label: str = DEFAULT_GRID_LABEL,
) -> str:
    """
    File name of a deck sheet image.

    Example:
        >>> sheet_filename("Base", CardKind.BLACK, 2, 5)
        'Base_B_part2_10x7_total_5.png'
        >>> sheet_filename("Base", CardKind.BLACK, 0, 42)
        'Base_B_10x7_total_42.png'
    """
    kind_letter = CardKind(kind).value
    return f"{pack_name}_{kind_letter}{part_suffix(part_number)}_{grid_label}_total_{card_count}.png"


def batch_filename(batch: Batch, grid_label: str = DEFAULT_GRID_LABEL) -> str:
    """Sheet file name for a batch."""
    return sheet_filename(batch.pack_name, batch.kind, batch.part_number, batch.size, grid_label)
