"""
Module: builder.loading

Purpose:
    Discover and parse pack text files into Packs.

Key Functions:
    - discover_deck_files(): Pack files in a directory
    - parse_deck_file(): File -> card texts
    - load_pack(): File -> Pack
"""

from .parser import (
    discover_deck_files,
    load_pack,
    parse_deck_file,
    parse_deck_lines,
)

__all__ = [
    "discover_deck_files",
    "load_pack",
    "parse_deck_file",
    "parse_deck_lines",
]
