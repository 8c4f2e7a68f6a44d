"""
Module: builder.layout.grid

Purpose:
    Pixel geometry of a deck sheet. Cards fill the grid row-major from the
    top-left cell; each cell has a text box and a pack label box.

Key Functions:
    - cell_origin(): Top-left corner of a grid cell
    - text_box(): Card text rectangle within a cell
    - label_box(): Pack label rectangle at the bottom of a cell
    - iter_cells(): Cell origins for the first n cards

Dependencies:
    - builder.layout.config: LayoutConfig

Used By:
    - builder.output.renderer: Card and sheet drawing
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

from .config import LayoutConfig


@dataclass(frozen=True)
class Box:
    """
    Axis-aligned rectangle in pixels.

    Attributes:
        left: X of the left edge
        top: Y of the top edge
        width: Width in pixels
        height: Height in pixels
    """

    left: int
    top: int
    width: int
    height: int


def cell_origin(index: int, layout: LayoutConfig) -> Tuple[int, int]:
    """
    Top-left pixel of the cell holding the `index`-th card of a sheet.

    Example:
        >>> cell_origin(0, LayoutConfig())
        (0, 0)
        >>> cell_origin(11, LayoutConfig())
        (409, 585)

    Raises:
        IndexError: If index is outside the sheet
    """
    if not 0 <= index < layout.max_deck_size:
        raise IndexError(
            f"Cell {index} outside {layout.grid_label} sheet "
            f"(0-{layout.max_deck_size - 1})"
        )
    row, col = divmod(index, layout.deck_cols)
    return (col * layout.card_width, row * layout.card_height)


def text_box(origin: Tuple[int, int], layout: LayoutConfig) -> Box:
    """Card text rectangle for a cell at `origin`."""
    x, y = origin
    return Box(
        left=x + layout.pad_side,
        top=y + layout.pad_top,
        width=layout.inner_width,
        height=layout.inner_height,
    )


def label_box(origin: Tuple[int, int], layout: LayoutConfig) -> Box:
    """
    Pack label rectangle for a cell at `origin`.

    Starts where the text box would end without bottom padding and runs to
    the bottom edge of the card.
    """
    x, y = origin
    return Box(
        left=x + layout.pad_side,
        top=y + layout.inner_height,
        width=layout.inner_width,
        height=layout.card_height - layout.inner_height,
    )


def iter_cells(count: int, layout: LayoutConfig) -> Iterator[Tuple[int, Tuple[int, int]]]:
    """Yield (index, origin) for the first `count` cells; trailing cells stay empty."""
    if count > layout.max_deck_size:
        raise ValueError(
            f"{count} cards do not fit on a {layout.grid_label} sheet "
            f"(max {layout.max_deck_size})"
        )
    for index in range(count):
        yield index, cell_origin(index, layout)
