"""
Module: builder.layout.config

Purpose:
    Configuration for card and deck sheet geometry.
    Defines card dimensions, padding, grid shape and font sizes.

Key Classes:
    - LayoutConfig: Immutable layout configuration

Dependencies:
    - dataclasses (std)

Used By:
    - builder.layout.batcher: Sheet capacity
    - builder.layout.grid: Cell positions
    - builder.output.renderer: Canvas sizes and fonts
"""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import ConfigError


# Tabletop Simulator standard card size (largest that fits a 10x7 sheet)
DEFAULT_CARD_WIDTH_PX = 409
DEFAULT_CARD_HEIGHT_PX = 585

# TTS only accepts deck sheets of up to 10x7
DEFAULT_DECK_COLS = 10
DEFAULT_DECK_ROWS = 7


@dataclass(frozen=True)
class LayoutConfig:
    """
    Configuration for card and sheet layout (immutable).

    Attributes:
        card_width: Card width in pixels
        card_height: Card height in pixels
        pad_top: Space above the card text (and below, before the label)
        pad_side: Space left and right of the card text
        deck_cols: Sheet columns
        deck_rows: Sheet rows
        font_size: Card text size in pixels
        label_font_size: Pack label size in pixels
        line_spacing: Extra pixels between wrapped text lines

    Example:
        >>> config = LayoutConfig()
        >>> config.max_deck_size
        70
        >>> (config.sheet_width, config.sheet_height)
        (4090, 4095)
    """

    # Card dimensions
    card_width: int = DEFAULT_CARD_WIDTH_PX
    card_height: int = DEFAULT_CARD_HEIGHT_PX
    pad_top: int = 24
    pad_side: int = 15

    # Sheet grid
    deck_cols: int = DEFAULT_DECK_COLS
    deck_rows: int = DEFAULT_DECK_ROWS

    # Text
    font_size: int = 40  # ~30pt at 96 DPI
    label_font_size: int = 16  # ~12pt at 96 DPI
    line_spacing: int = 4

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.card_width <= 0:
            raise ConfigError(f"card_width must be positive: {self.card_width}")
        if self.card_height <= 0:
            raise ConfigError(f"card_height must be positive: {self.card_height}")
        if self.pad_top < 0 or self.pad_side < 0:
            raise ConfigError("Padding cannot be negative")
        if self.inner_width <= 0:
            raise ConfigError("Side padding exceeds card width")
        if self.inner_height <= 0:
            raise ConfigError("Top padding exceeds card height")
        if self.deck_cols <= 0 or self.deck_rows <= 0:
            raise ConfigError(
                f"Deck grid must be at least 1x1: {self.deck_cols}x{self.deck_rows}"
            )
        if self.font_size <= 0 or self.label_font_size <= 0:
            raise ConfigError("Font sizes must be positive")
        if self.line_spacing < 0:
            raise ConfigError(f"line_spacing cannot be negative: {self.line_spacing}")

    @property
    def max_deck_size(self) -> int:
        """Cards that fit on one sheet."""
        return self.deck_cols * self.deck_rows

    @property
    def sheet_width(self) -> int:
        return self.card_width * self.deck_cols

    @property
    def sheet_height(self) -> int:
        return self.card_height * self.deck_rows

    @property
    def inner_width(self) -> int:
        """Width of the card text box."""
        return self.card_width - 2 * self.pad_side

    @property
    def inner_height(self) -> int:
        """Height of the card text box."""
        return self.card_height - 2 * self.pad_top

    @property
    def card_size(self) -> tuple[int, int]:
        return (self.card_width, self.card_height)

    @property
    def sheet_size(self) -> tuple[int, int]:
        return (self.sheet_width, self.sheet_height)

    @property
    def grid_label(self) -> str:
        """Grid shape used in sheet file names, e.g. "10x7"."""
        return f"{self.deck_cols}x{self.deck_rows}"
