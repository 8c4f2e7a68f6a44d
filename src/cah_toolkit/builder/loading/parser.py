"""
Module: builder.loading.parser

Purpose:
    Read pack text files. One file is one pack; each kept line is one card.

Key Functions:
    - parse_deck_file(): File -> ordered card texts
    - parse_deck_lines(): Lines -> ordered card texts
    - load_pack(): File -> Pack named after the file
    - discover_deck_files(): Pack files in a directory

Line Rules:
    - Surrounding whitespace is stripped
    - Blank lines are skipped
    - Lines starting with "//" are comments and skipped
    - Every "<br>" becomes a newline

Dependencies:
    - pathlib (std)
    - core.models: Pack, CardKind

Used By:
    - builder.controller: Pack processing
"""

from __future__ import annotations

import fnmatch
import logging
from pathlib import Path
from typing import Iterable, List

from cah_toolkit.core.models import CardKind, Pack

from ..errors import DeckFileError

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "//"
LINE_BREAK_MARKER = "<br>"
DEFAULT_PATTERN = "*.txt"


def parse_deck_lines(lines: Iterable[str]) -> List[str]:
    """
    Filter and transform raw lines into card texts.

    Example:
        >>> parse_deck_lines(["  // comment  ", "", "Foo<br>Bar", "Hello"])
        ['Foo\\nBar', 'Hello']
    """
    texts: List[str] = []
    for line in lines:
        text = line.strip()
        if not text:
            continue
        if text.startswith(COMMENT_PREFIX):
            continue
        texts.append(text.replace(LINE_BREAK_MARKER, "\n"))
    return texts


def parse_deck_file(path: Path) -> List[str]:
    """
    Read a pack file and return its card texts in line order.

    Args:
        path: Text file, UTF-8 (a leading BOM is ignored)

    Returns:
        Card texts. Empty for an empty file.

    Raises:
        OSError: If the file cannot be opened or read
        DeckFileError: If the file is not valid UTF-8
    """
    path = Path(path)
    try:
        # Universal newlines: \n, \r\n and \r all end a line
        with path.open("r", encoding="utf-8-sig") as handle:
            lines = handle.readlines()
    except UnicodeDecodeError as e:
        raise DeckFileError(f"{path} is not valid UTF-8: {e}") from e

    texts = parse_deck_lines(lines)
    logger.debug(f"Parsed {len(texts)} cards from {path.name}")
    return texts


def load_pack(path: Path, kind: CardKind) -> Pack:
    """
    Parse a pack file into a Pack named after the file (extension stripped).

    Example:
        >>> load_pack(Path("CardTextBlack/Base.txt"), CardKind.BLACK).name
        'Base'
    """
    path = Path(path)
    return Pack.from_texts(path.stem, kind, parse_deck_file(path), source_path=path)


def discover_deck_files(directory: Path, pattern: str = DEFAULT_PATTERN) -> List[Path]:
    """
    List pack files in a directory, sorted by name.

    The pattern is matched case-insensitively on every platform, so
    "Pack.TXT" is found by "*.txt".

    Raises:
        FileNotFoundError: If the directory does not exist
        NotADirectoryError: If the path is not a directory
    """
    directory = Path(directory)
    if not directory.exists():
        raise FileNotFoundError(f"Input directory not found: {directory}")
    if not directory.is_dir():
        raise NotADirectoryError(f"Not a directory: {directory}")
    pattern = pattern.lower()
    return sorted(
        p for p in directory.iterdir()
        if p.is_file() and fnmatch.fnmatchcase(p.name.lower(), pattern)
    )
