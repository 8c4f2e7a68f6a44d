"""
Module: builder

Purpose:
    Deck generation pipeline. Reads pack text files, splits each pack into
    10x7 deck sheets, and writes card and sheet PNGs named for Tabletop
    Simulator import.

Key Functions:
    - generate_decks(): Main entry point for a run
    - batch_cards(): Split cards into sheets

Key Classes:
    - BuilderConfig: Paths and switches for a run
    - LayoutConfig: Card and sheet geometry
    - PackProcessor: Directory and pack processing
    - CardRenderer: Pillow drawing

Dependencies:
    - PIL: Image drawing and PNG encoding

Used By:
    - cah_toolkit.__main__: CLI
"""

from .config import BuilderConfig
from .errors import BuildError, ConfigError, DeckFileError, RenderError
from .layout import LayoutConfig, batch_cards, batch_pack
from .loading import load_pack, parse_deck_file
from .output import CardRenderer
from .controller import PackProcessor, PackResult, RunResult, generate_decks

__all__ = [
    # Config
    "BuilderConfig",
    "LayoutConfig",
    # Errors
    "BuildError",
    "ConfigError",
    "DeckFileError",
    "RenderError",
    # Pipeline pieces
    "parse_deck_file",
    "load_pack",
    "batch_cards",
    "batch_pack",
    "CardRenderer",
    # Controller
    "PackProcessor",
    "PackResult",
    "RunResult",
    "generate_decks",
]
