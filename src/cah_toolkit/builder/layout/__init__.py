"""
Module: builder.layout

Purpose:
    Sheet batching and grid geometry for deck generation.
    Converts a pack's cards into sheet-sized batches and positions
    each card within a sheet. Nothing here touches Pillow or the disk.

Key Functions:
    - batch_cards() / batch_pack(): Split cards into sheets
    - count_batches(): Sheets needed for n cards
    - cell_origin(), text_box(), label_box(), iter_cells(): Cell geometry

Key Classes:
    - LayoutConfig: Card and grid dimensions
    - Box: Pixel rectangle

Used By:
    - builder.controller: Pack processing
    - builder.output.renderer: Drawing
"""

from .config import LayoutConfig
from .batcher import DEFAULT_CAPACITY, batch_cards, batch_pack, count_batches
from .grid import Box, cell_origin, iter_cells, label_box, text_box

__all__ = [
    # Config
    "LayoutConfig",
    # Batching
    "DEFAULT_CAPACITY",
    "batch_cards",
    "batch_pack",
    "count_batches",
    # Geometry
    "Box",
    "cell_origin",
    "iter_cells",
    "label_box",
    "text_box",
]
