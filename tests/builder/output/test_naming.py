"""
Tests for builder.output.naming

Output file names are what Tabletop Simulator users import, so the exact
format is checked here.
"""
import pytest

from cah_toolkit.builder.output import batch_filename, card_filename, part_suffix, sheet_filename
from cah_toolkit.core.models import Batch, CardKind, Pack


class TestPartSuffix:
    def test_when_part_zero_then_no_suffix(self):
        assert part_suffix(0) == ""

    def test_when_part_positive_then_suffix(self):
        assert part_suffix(1) == "_part1"
        assert part_suffix(12) == "_part12"

    def test_when_negative_then_raises(self):
        with pytest.raises(ValueError):
            part_suffix(-1)


class TestCardFilename:
    def test_card_name_has_pack_kind_and_ordinal(self):
        assert card_filename("Base", CardKind.BLACK, 1) == "Base_B_1.png"
        assert card_filename("Base Set", CardKind.WHITE, 431) == "Base Set_W_431.png"

    def test_when_ordinal_below_one_then_raises(self):
        with pytest.raises(ValueError):
            card_filename("Base", CardKind.WHITE, 0)


class TestSheetFilename:
    def test_when_unpartitioned_then_no_part_suffix(self):
        name = sheet_filename("Base", CardKind.WHITE, 0, 55, "10x7")
        assert name == "Base_W_10x7_total_55.png"

    def test_when_partitioned_then_part_suffix(self):
        name = sheet_filename("Base", CardKind.BLACK, 2, 5, "10x7")
        assert name == "Base_B_part2_10x7_total_5.png"

    def test_default_grid_label(self):
        assert sheet_filename("X", CardKind.WHITE, 1, 70) == "X_W_part1_10x7_total_70.png"

    def test_batch_filename_uses_batch_fields(self):
        pack = Pack.from_texts("Extra", CardKind.WHITE, ["a", "b"])
        batch = Batch("Extra", CardKind.WHITE, 3, pack.cards)
        assert batch_filename(batch) == "Extra_W_part3_10x7_total_2.png"
        assert batch_filename(batch, "4x3") == "Extra_W_part3_4x3_total_2.png"
