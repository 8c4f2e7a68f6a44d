"""
Module: builder.config

Purpose:
    Configuration dataclass for a deck generation run. Immutable
    configuration with validation on construction. All directories are
    resolved relative to a single root directory.

Key Classes:
    - BuilderConfig: Paths, layout and output switches

Dependencies:
    - dataclasses (std)
    - pathlib (std)
    - builder.layout.config: LayoutConfig

Used By:
    - builder.controller: PackProcessor
    - cah_toolkit.__main__: CLI
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from cah_toolkit.core.models import CardKind

from .errors import ConfigError
from .layout.config import LayoutConfig


@dataclass(frozen=True)
class BuilderConfig:
    """
    Configuration for generating decks (immutable).

    Layout on disk, relative to root_dir:
        CardTextBlack/*.txt     Black pack files (input)
        CardTextWhite/*.txt     White pack files (input)
        GeneratedCards/         Individual card images (output)
        GeneratedDecks/         Deck sheets (output)
        CardBacks/              Static back faces, read by TTS
        execution_log.txt       Run log

    Attributes:
        root_dir: Directory all other paths are relative to
        black_dir_name: Input folder for Black packs
        white_dir_name: Input folder for White packs
        cards_dir_name: Output folder for card images
        decks_dir_name: Output folder for sheets
        backs_dir_name: Folder holding back face images
        black_back_name: Back face file for Black cards
        white_back_name: Back face file for White cards
        log_file_name: Run log file name
        input_pattern: Glob for pack files
        layout: Card and sheet geometry
        font_path: Preferred font file (None = search system fonts)
        write_cards: Also write one image per card
        png_compress_level: zlib level for output PNGs

    Example:
        >>> config = BuilderConfig(root_dir=Path("."))
        >>> config.input_dir(CardKind.BLACK).name
        'CardTextBlack'
    """

    root_dir: Path = field(default_factory=Path.cwd)

    # Input
    black_dir_name: str = "CardTextBlack"
    white_dir_name: str = "CardTextWhite"
    input_pattern: str = "*.txt"

    # Output
    cards_dir_name: str = "GeneratedCards"
    decks_dir_name: str = "GeneratedDecks"
    log_file_name: str = "execution_log.txt"
    write_cards: bool = True
    png_compress_level: int = 6

    # Back faces (not generated, only reported)
    backs_dir_name: str = "CardBacks"
    black_back_name: str = "BackBlack.png"
    white_back_name: str = "BackWhite.png"

    # Rendering
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    font_path: Optional[Path] = None

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        # Frozen: normalise paths through object.__setattr__
        object.__setattr__(self, "root_dir", Path(self.root_dir))
        if self.font_path is not None:
            object.__setattr__(self, "font_path", Path(self.font_path))

        for name in ("black_dir_name", "white_dir_name", "cards_dir_name",
                     "decks_dir_name", "log_file_name"):
            if not getattr(self, name):
                raise ConfigError(f"{name} cannot be empty")
        if not self.input_pattern:
            raise ConfigError("input_pattern cannot be empty")
        if not 0 <= self.png_compress_level <= 9:
            raise ConfigError(f"png_compress_level must be 0-9: {self.png_compress_level}")

    @property
    def black_dir(self) -> Path:
        return self.root_dir / self.black_dir_name

    @property
    def white_dir(self) -> Path:
        return self.root_dir / self.white_dir_name

    @property
    def cards_dir(self) -> Path:
        return self.root_dir / self.cards_dir_name

    @property
    def decks_dir(self) -> Path:
        return self.root_dir / self.decks_dir_name

    @property
    def backs_dir(self) -> Path:
        return self.root_dir / self.backs_dir_name

    @property
    def log_path(self) -> Path:
        return self.root_dir / self.log_file_name

    def input_dir(self, kind: CardKind) -> Path:
        """Input folder for a card kind."""
        return self.black_dir if CardKind(kind) is CardKind.BLACK else self.white_dir

    def card_back(self, kind: CardKind) -> Path:
        """Back face image for a card kind."""
        name = self.black_back_name if CardKind(kind) is CardKind.BLACK else self.white_back_name
        return self.backs_dir / name

    @property
    def card_backs(self) -> Dict[CardKind, Path]:
        return {kind: self.card_back(kind) for kind in CardKind}

    def ensure_output_dirs(self) -> None:
        """Create the output folders if they do not exist."""
        self.decks_dir.mkdir(parents=True, exist_ok=True)
        if self.write_cards:
            self.cards_dir.mkdir(parents=True, exist_ok=True)
