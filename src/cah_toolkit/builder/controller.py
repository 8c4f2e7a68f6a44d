"""
Module: builder.controller

Purpose:
    Orchestrate deck generation.
    Discover → Parse → Batch → Render → Write, per pack file.

Key Functions:
    - generate_decks(): Main entry point for a full run

Key Classes:
    - PackProcessor: Processes directories and packs, owns the RunTally
    - PackResult: Output of one pack
    - RunResult: Output of a full run

Dependencies:
    - builder.loading: Pack discovery and parsing
    - builder.layout: Batching
    - builder.output: Rendering, naming, writing

Used By:
    - cah_toolkit.__main__: CLI
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Tuple

from cah_toolkit.core.models import Batch, Card, CardKind, Pack, PackFailure, RunTally

from .config import BuilderConfig
from .errors import RenderError
from .layout import batch_pack
from .loading import discover_deck_files, load_pack
from .output import (
    CardRenderer,
    CardStyle,
    batch_filename,
    card_filename,
    load_fonts,
    write_png,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PackResult:
    """
    Output of processing one pack.

    Attributes:
        pack_name: Pack name
        kind: BLACK or WHITE
        card_count: Cards parsed from the pack file
        batch_count: Sheets the pack was split into
        card_paths: Card images written
        sheet_paths: Sheet images written
    """
    pack_name: str
    kind: CardKind
    card_count: int
    batch_count: int
    card_paths: Tuple[Path, ...] = ()
    sheet_paths: Tuple[Path, ...] = ()

    @property
    def rendered(self) -> bool:
        """True when the pack produced at least one sheet batch."""
        return self.batch_count > 0


@dataclass(frozen=True)
class RunResult:
    """
    Complete run result (immutable).

    Attributes:
        black_decks: Black packs generated
        white_decks: White packs generated
        total_cards: Card images rendered in the run
        total_decks: Packs rendered in the run
        failures: Everything that could not be produced
        cards_dir: Folder with card images
        decks_dir: Folder with sheets
        card_backs: Back face image per kind
        elapsed_seconds: Wall time of the run
    """
    black_decks: int
    white_decks: int
    total_cards: int
    total_decks: int
    failures: Tuple[PackFailure, ...]
    cards_dir: Path
    decks_dir: Path
    card_backs: Dict[CardKind, Path] = field(default_factory=dict)
    elapsed_seconds: float = 0.0

    @property
    def succeeded(self) -> bool:
        return not self.failures

    @property
    def missing_card_backs(self) -> Dict[CardKind, Path]:
        return {kind: path for kind, path in self.card_backs.items() if not path.is_file()}


class PackProcessor:
    """
    Generates card and sheet images for pack files.

    One processor handles a whole run: its RunTally numbers card images
    across every pack and both kinds.

    Example:
        >>> processor = PackProcessor(BuilderConfig(root_dir=Path("decks")))
        >>> processor.process_directory(Path("decks/CardTextWhite"), CardKind.WHITE)
        3
        >>> processor.tally.total_cards_rendered
        412
    """

    def __init__(
        self,
        config: BuilderConfig,
        renderer: Optional[CardRenderer] = None,
        tally: Optional[RunTally] = None,
    ):
        self.config = config
        self.tally = tally if tally is not None else RunTally()
        self._renderer = renderer

    @property
    def renderer(self) -> CardRenderer:
        """Renderer, created with the configured fonts on first use."""
        if self._renderer is None:
            layout = self.config.layout
            fonts = load_fonts(layout.font_size, layout.label_font_size, self.config.font_path)
            self._renderer = CardRenderer(layout, fonts)
        return self._renderer

    # ─────────────────────────────────────────────────────────────────────────
    # Run Level
    # ─────────────────────────────────────────────────────────────────────────

    def generate_all(self) -> RunResult:
        """
        Generate Black then White decks.

        Raises:
            OSError: If the output folders cannot be created
        """
        start_time = time.perf_counter()
        self.config.ensure_output_dirs()
        logger.debug(
            f"Directories: {self.config.black_dir}, {self.config.white_dir}, "
            f"{self.config.cards_dir}, {self.config.decks_dir}"
        )

        black_decks = self.generate_black_decks()
        white_decks = self.generate_white_decks()

        result = RunResult(
            black_decks=black_decks,
            white_decks=white_decks,
            total_cards=self.tally.total_cards_rendered,
            total_decks=self.tally.total_decks_rendered,
            failures=tuple(self.tally.failures),
            cards_dir=self.config.cards_dir,
            decks_dir=self.config.decks_dir,
            card_backs=self.config.card_backs,
            elapsed_seconds=time.perf_counter() - start_time,
        )

        for kind, path in result.missing_card_backs.items():
            logger.warning(f"{kind.display_name} card back not found: {path}")

        logger.info(
            f"Generated {result.total_cards} cards in {result.total_decks} decks "
            f"in {result.elapsed_seconds:.2f}s"
        )
        for kind in CardKind:
            failed = self.tally.failures_for(kind)
            if failed:
                logger.warning(f"{kind.display_name}: {len(failed)} item(s) failed, see errors above")
        return result

    def generate_black_decks(self) -> int:
        """Process the Black input folder."""
        return self.process_directory(self.config.black_dir, CardKind.BLACK)

    def generate_white_decks(self) -> int:
        """Process the White input folder."""
        return self.process_directory(self.config.white_dir, CardKind.WHITE)

    # ─────────────────────────────────────────────────────────────────────────
    # Directory / Pack Level
    # ─────────────────────────────────────────────────────────────────────────

    def process_directory(self, dir_path: Path, kind: CardKind) -> int:
        """
        Generate decks for every pack file in a directory.

        A file that cannot be read is logged and recorded, and the
        remaining files are still processed.

        Args:
            dir_path: Folder of pack files
            kind: Card kind for every pack in the folder

        Returns:
            Number of decks generated from this folder
        """
        kind = CardKind(kind)
        logger.info(f"Generating {kind.display_name} decks from {dir_path}")

        try:
            files = discover_deck_files(dir_path, self.config.input_pattern)
        except OSError as e:
            logger.error(f"Cannot read {kind.display_name} input folder: {e}")
            self.tally.record_failure(kind, str(dir_path), e, stage="discover")
            return 0

        if not files:
            logger.warning(f"No {self.config.input_pattern} files in {dir_path}")

        decks = 0
        for path in files:
            result = self.process_file(path, kind)
            if result is not None and result.rendered:
                decks += 1

        logger.info(f"{kind.display_name}: {decks} deck(s) from {len(files)} file(s)")
        return decks

    def process_file(self, path: Path, kind: CardKind) -> Optional[PackResult]:
        """Load and process one pack file; None if it could not be read."""
        try:
            pack = load_pack(path, kind)
        except OSError as e:
            logger.error(f"Skipping pack file {path}: {e}")
            self.tally.record_failure(kind, str(path), e, stage="parse")
            return None

        logger.info(f"Total lines for {pack.name}: {pack.card_count}")
        return self.process_pack(pack)

    def process_pack(self, pack: Pack) -> PackResult:
        """
        Batch a pack and write its card and sheet images.

        Cards are numbered from the run tally as they are written, then the
        sheet for their batch is written.
        """
        if pack.is_empty:
            logger.warning(f"Pack {pack.name!r} has no cards, nothing generated")
            return PackResult(pack.name, pack.kind, 0, 0)

        batches = batch_pack(pack, self.config.layout.max_deck_size)

        logger.debug(f"===== Generate cards ({pack.name}) =====")
        logger.debug(f"Num cards: {pack.card_count}, num batches: {len(batches)}")

        style = self.renderer.style_for(pack.kind)
        card_paths = []
        sheet_paths = []
        for batch in batches:
            logger.debug(
                f"===> Processing {batch.first_index} - {batch.last_index} "
                f"[pack size = {pack.card_count}]"
            )
            for card in batch:
                card_path = self._emit_card(card, style)
                if card_path is not None:
                    card_paths.append(card_path)
            sheet_path = self._emit_sheet(batch, style)
            if sheet_path is not None:
                sheet_paths.append(sheet_path)

        self.tally.record_deck()
        return PackResult(
            pack_name=pack.name,
            kind=pack.kind,
            card_count=pack.card_count,
            batch_count=len(batches),
            card_paths=tuple(card_paths),
            sheet_paths=tuple(sheet_paths),
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Image Level
    # ─────────────────────────────────────────────────────────────────────────

    def _emit_card(self, card: Card, style: CardStyle) -> Optional[Path]:
        """Render and write one card image, counting it in the tally."""
        if not self.config.write_cards:
            self.tally.record_card()
            return None

        ordinal = self.tally.next_card_ordinal()
        path = self.config.cards_dir / card_filename(card.pack_name, card.kind, ordinal)

        try:
            image = self.renderer.render_card(card.text, card.pack_name, style)
        except RenderError as e:
            logger.error(f"Card {card.sequence_index} of {card.pack_name!r}: {e}")
            self.tally.record_failure(card.kind, path.name, e, stage="render")
            return None

        try:
            write_png(image, path, compress_level=self.config.png_compress_level)
        except OSError as e:
            logger.error(f"Could not write {path}: {e}")
            self.tally.record_failure(card.kind, str(path), e, stage="write")
            return None
        finally:
            image.close()

        self.tally.record_card()
        return path

    def _emit_sheet(self, batch: Batch, style: CardStyle) -> Optional[Path]:
        """Render and write the sheet for one batch."""
        grid_label = self.config.layout.grid_label
        path = self.config.decks_dir / batch_filename(batch, grid_label)

        try:
            image = self.renderer.render_sheet(batch, style)
        except RenderError as e:
            logger.error(str(e))
            self.tally.record_failure(batch.kind, path.name, e, stage="render")
            return None

        try:
            write_png(image, path, compress_level=self.config.png_compress_level)
        except OSError as e:
            logger.error(f"Could not write {path}: {e}")
            self.tally.record_failure(batch.kind, str(path), e, stage="write")
            return None
        finally:
            image.close()

        logger.debug(f"Wrote sheet {path.name}")
        return path


def generate_decks(
    config: BuilderConfig,
    renderer: Optional[CardRenderer] = None,
) -> RunResult:
    """
    Generate all Black and White decks for a configuration.

    Example:
        >>> result = generate_decks(BuilderConfig(root_dir=Path(".")))
        >>> print(f"Generated {result.total_cards} cards in {result.total_decks} decks")
    """
    return PackProcessor(config, renderer=renderer).generate_all()
