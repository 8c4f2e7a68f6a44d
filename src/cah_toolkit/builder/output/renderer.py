"""
Module: builder.output.renderer

Purpose:
    Draw cards and deck sheets with Pillow.
    A card image is one cell; a sheet image is the full deck grid with
    cards placed row-major from the top-left, unused cells left blank.

Key Classes:
    - CardRenderer: Renders cards and sheets for a LayoutConfig

Key Functions:
    - wrap_text(): Break text into lines that fit a width
    - fit_lines(): Drop lines that overflow a height

Dependencies:
    - PIL: Image, ImageDraw
    - builder.layout: LayoutConfig, grid geometry
    - builder.output.fonts: FontSet
    - builder.output.styles: CardStyle lookup

Used By:
    - builder.controller: Pack processing
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from PIL import Image, ImageDraw

from cah_toolkit.core.models import Batch, CardKind

from ..errors import RenderError
from ..layout.config import LayoutConfig
from ..layout.grid import Box, iter_cells, label_box, text_box
from .fonts import Font, FontSet, load_fonts
from .styles import CardStyle, style_for

logger = logging.getLogger(__name__)


class CardRenderer:
    """
    Renders card and sheet images.

    Fonts are loaded once per renderer and reused for every image.

    Example:
        >>> renderer = CardRenderer(LayoutConfig())
        >>> img = renderer.render_card("Why am I sticky?", "Base", style_for(CardKind.BLACK))
        >>> img.size
        (409, 585)
    """

    def __init__(self, layout: Optional[LayoutConfig] = None, fonts: Optional[FontSet] = None):
        self.layout = layout or LayoutConfig()
        self.fonts = fonts or load_fonts(self.layout.font_size, self.layout.label_font_size)

    def style_for(self, kind: CardKind) -> CardStyle:
        return style_for(kind)

    def render_card(self, text: str, label: str, style: CardStyle) -> Image.Image:
        """
        Render a single card.

        Args:
            text: Card text (may contain newlines)
            label: Pack name drawn at the bottom of the card
            style: Colours to use

        Returns:
            RGB image of card_width x card_height

        Raises:
            RenderError: If Pillow fails to draw
        """
        try:
            image = Image.new("RGB", self.layout.card_size, style.background)
            draw = ImageDraw.Draw(image)
            self._draw_cell(draw, (0, 0), text, label, style)
        except (OSError, ValueError) as e:
            raise RenderError(f"Failed to render card for {label!r}: {e}") from e
        return image

    def render_sheet(self, batch: Batch, style: Optional[CardStyle] = None) -> Image.Image:
        """
        Render a deck sheet for a batch.

        The canvas is always the full grid; cells past the last card only
        show the background.

        Args:
            batch: Cards to place (at most max_deck_size)
            style: Colours to use (defaults to the batch kind's style)

        Returns:
            RGB image of sheet_width x sheet_height

        Raises:
            ValueError: If the batch does not fit the grid
            RenderError: If Pillow fails to draw
        """
        if batch.size > self.layout.max_deck_size:
            raise ValueError(
                f"Batch of {batch.size} cards exceeds {self.layout.grid_label} "
                f"sheet capacity {self.layout.max_deck_size}"
            )
        style = style or self.style_for(batch.kind)

        try:
            image = Image.new("RGB", self.layout.sheet_size, style.background)
            draw = ImageDraw.Draw(image)
            for index, origin in iter_cells(batch.size, self.layout):
                self._draw_cell(draw, origin, batch.cards[index].text, batch.pack_name, style)
        except (OSError, ValueError) as e:
            raise RenderError(
                f"Failed to render sheet part {batch.part_number} for {batch.pack_name!r}: {e}"
            ) from e
        return image

    def _draw_cell(
        self,
        draw: ImageDraw.ImageDraw,
        origin: Tuple[int, int],
        text: str,
        label: str,
        style: CardStyle,
    ) -> None:
        """Draw card text and pack label into the cell at `origin`."""
        body_box = text_box(origin, self.layout)
        self._draw_text_in_box(draw, text, self.fonts.body, body_box, style.text)

        # Label is tucked at the bottom of the card
        self._draw_text_in_box(draw, label, self.fonts.label, label_box(origin, self.layout), style.text)

    def _draw_text_in_box(
        self,
        draw: ImageDraw.ImageDraw,
        text: str,
        font: Font,
        box: Box,
        color: Tuple[int, int, int],
    ) -> None:
        lines = wrap_text(text, font, box.width)
        height = line_height(font)
        lines = fit_lines(lines, height, box.height, self.layout.line_spacing)

        y = box.top
        for line in lines:
            if line:
                draw.text((box.left, y), line, font=font, fill=color)
            y += height + self.layout.line_spacing


def text_width(text: str, font: Font) -> float:
    """Rendered width of a single line in pixels."""
    return font.getlength(text)


def line_height(font: Font) -> int:
    """Height of one line of text (ascent + descent)."""
    try:
        ascent, descent = font.getmetrics()
        return ascent + descent
    except AttributeError:
        left, top, right, bottom = font.getbbox("Ag")
        return bottom - top


def wrap_text(text: str, font: Font, max_width: int) -> List[str]:
    """
    Break `text` into lines no wider than `max_width`.

    Explicit newlines always start a new line. Words are wrapped on
    whitespace; a word wider than the box is broken between characters.

    Example:
        >>> wrap_text("Foo\\nBar", font, 300)
        ['Foo', 'Bar']
    """
    lines: List[str] = []
    for paragraph in text.split("\n"):
        words = paragraph.split()
        if not words:
            lines.append("")
            continue

        current = ""
        for word in words:
            candidate = f"{current} {word}" if current else word
            if text_width(candidate, font) <= max_width:
                current = candidate
                continue

            if current:
                lines.append(current)
            while len(word) > 1 and text_width(word, font) > max_width:
                cut = _fitting_prefix_length(word, font, max_width)
                lines.append(word[:cut])
                word = word[cut:]
            current = word
        lines.append(current)
    return lines


def fit_lines(lines: List[str], height: int, max_height: int, spacing: int = 0) -> List[str]:
    """Keep as many leading lines as fit in `max_height`."""
    if not lines:
        return lines
    step = height + spacing
    capacity = max(1, (max_height + spacing) // step) if step > 0 else len(lines)
    if len(lines) > capacity:
        logger.debug(f"Text clipped: {len(lines)} lines, room for {capacity}")
        return lines[:capacity]
    return lines


def _fitting_prefix_length(word: str, font: Font, max_width: int) -> int:
    """Longest prefix of `word` that fits, at least one character."""
    length = 1
    while length < len(word) and text_width(word[:length + 1], font) <= max_width:
        length += 1
    return length
