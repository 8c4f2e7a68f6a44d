"""
Module: builder.output

Purpose:
    Image rendering and PNG output for deck generation.

Key Functions:
    - card_filename() / sheet_filename() / batch_filename(): Output names
    - write_png(): Save an image atomically
    - style_for(): Colours for a card kind
    - load_fonts(): Fonts for a renderer

Key Classes:
    - CardRenderer: Draws cards and sheets
    - CardStyle, FontSet

Dependencies:
    - PIL: Drawing and PNG encoding
"""

from .fonts import FontSet, load_font, load_fonts
from .naming import batch_filename, card_filename, part_suffix, sheet_filename
from .renderer import CardRenderer, fit_lines, wrap_text
from .styles import STYLES, CardStyle, style_for
from .writer import write_png

__all__ = [
    # Rendering
    "CardRenderer",
    "CardStyle",
    "STYLES",
    "style_for",
    "FontSet",
    "load_font",
    "load_fonts",
    "wrap_text",
    "fit_lines",
    # Naming
    "batch_filename",
    "card_filename",
    "part_suffix",
    "sheet_filename",
    # Writing
    "write_png",
]
