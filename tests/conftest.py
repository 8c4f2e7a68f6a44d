import pytest
import sys
from pathlib import Path
from PIL import ImageFont

# Add src to sys.path so we can import cah_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from cah_toolkit.builder.layout import LayoutConfig
from cah_toolkit.builder.output import CardRenderer, FontSet


# Common test fixtures
@pytest.fixture
def small_layout():
    """10x7 grid of small cards, so sheets render quickly."""
    return LayoutConfig(
        card_width=40,
        card_height=60,
        pad_top=4,
        pad_side=3,
        font_size=8,
        label_font_size=6,
        line_spacing=1,
    )


@pytest.fixture
def default_fonts():
    """Pillow's bundled font, independent of installed system fonts."""
    return FontSet(
        body=ImageFont.load_default(size=8),
        label=ImageFont.load_default(size=6),
    )


@pytest.fixture
def small_renderer(small_layout, default_fonts):
    return CardRenderer(small_layout, default_fonts)


@pytest.fixture
def deck_root(tmp_path: Path):
    """Root folder with empty CardTextBlack/ and CardTextWhite/."""
    (tmp_path / "CardTextBlack").mkdir()
    (tmp_path / "CardTextWhite").mkdir()
    return tmp_path


@pytest.fixture
def write_pack():
    """Factory writing a pack file with the given lines."""
    def _write(folder: Path, name: str, lines, encoding: str = "utf-8") -> Path:
        folder.mkdir(parents=True, exist_ok=True)
        path = folder / f"{name}.txt"
        path.write_bytes("\n".join(lines).encode(encoding))
        return path
    return _write
