"""
Module: builder.output.styles

Purpose:
    Colour schemes for Black and White cards.

Key Classes:
    - CardStyle: Background and text colours

Key Functions:
    - style_for(): Style lookup by CardKind
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from cah_toolkit.core.models import CardKind

RGB = Tuple[int, int, int]

DARK: RGB = (0, 0, 0)
LIGHT: RGB = (242, 236, 220)  # #f2ecdc


@dataclass(frozen=True)
class CardStyle:
    """
    Colours used to draw one kind of card.

    Attributes:
        background: Card (and sheet) fill colour
        text: Colour of the card text and pack label
    """

    background: RGB
    text: RGB


STYLES: Dict[CardKind, CardStyle] = {
    CardKind.BLACK: CardStyle(background=DARK, text=LIGHT),
    CardKind.WHITE: CardStyle(background=LIGHT, text=DARK),
}


def style_for(kind: CardKind) -> CardStyle:
    """
    Style for a card kind.

    Example:
        >>> style_for(CardKind.BLACK).background
        (0, 0, 0)
    """
    return STYLES[CardKind(kind)]
