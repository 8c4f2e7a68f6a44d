"""
Module: builder.output.fonts

Purpose:
    Locate and load the TrueType fonts used for card text and pack labels.

Search Order:
    1. Explicit font path (from config / --font)
    2. Common sans-serif system fonts (Arial, Liberation Sans, DejaVu Sans)
    3. Pillow's bundled default font at the requested size

Key Classes:
    - FontSet: Card text font + label font

Key Functions:
    - find_system_font(): First system font that exists
    - load_font(): Single font with fallback
    - load_fonts(): FontSet for a layout

Dependencies:
    - PIL.ImageFont: Font loading
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Union

from PIL import ImageFont

logger = logging.getLogger(__name__)

Font = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]

SYSTEM_FONT_CANDIDATES: Sequence[str] = (
    "C:/Windows/Fonts/arial.ttf",
    "/Library/Fonts/Arial.ttf",
    "/System/Library/Fonts/Supplemental/Arial.ttf",
    "/usr/share/fonts/truetype/msttcorefonts/Arial.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",
    "/usr/share/fonts/liberation/LiberationSans-Regular.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/dejavu/DejaVuSans.ttf",
)


@dataclass(frozen=True)
class FontSet:
    """
    Fonts for one renderer.

    Attributes:
        body: Card text font
        label: Pack label font
    """

    body: Font
    label: Font


def find_system_font(candidates: Sequence[str] = SYSTEM_FONT_CANDIDATES) -> Optional[Path]:
    """Return the first candidate font file that exists, or None."""
    for candidate in candidates:
        path = Path(candidate)
        if path.is_file():
            return path
    return None


def load_font(size: int, font_path: Optional[Path] = None) -> Font:
    """
    Load a font at `size` pixels.

    Args:
        size: Font size in pixels
        font_path: Preferred font file. Falls back to system fonts, then to
            Pillow's default font, if it cannot be loaded.

    Returns:
        A Pillow font object
    """
    if font_path is not None:
        try:
            return ImageFont.truetype(str(font_path), size)
        except OSError as e:
            logger.warning(f"Could not load font {font_path} ({e}), using fallback")

    system_font = find_system_font()
    if system_font is not None:
        try:
            return ImageFont.truetype(str(system_font), size)
        except OSError as e:
            logger.warning(f"Could not load system font {system_font} ({e})")

    logger.debug(f"Using Pillow default font at {size}px")
    return ImageFont.load_default(size=size)


def load_fonts(size: int, label_size: int, font_path: Optional[Path] = None) -> FontSet:
    """Load the card text and label fonts from the same face."""
    return FontSet(
        body=load_font(size, font_path),
        label=load_font(label_size, font_path),
    )
