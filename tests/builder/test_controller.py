"""
Tests for builder.controller

Test Coverage:
- process_directory(): file naming, tally updates, partitioned packs
- Error handling: unreadable files, missing folders, render/write failures
- generate_all(): Black then White, shared card numbering, summary
"""
import pytest
from pathlib import Path
from PIL import Image

from cah_toolkit.builder import BuilderConfig, PackProcessor, RenderError, generate_decks
from cah_toolkit.core.models import CardKind, Pack, RunTally


@pytest.fixture
def config(deck_root, small_layout):
    return BuilderConfig(root_dir=deck_root, layout=small_layout)


@pytest.fixture
def processor(config, small_renderer):
    config.ensure_output_dirs()
    return PackProcessor(config, renderer=small_renderer)


def file_names(folder: Path):
    return sorted(p.name for p in folder.iterdir())


class TestProcessDirectory:
    def test_when_pack_overflows_sheet_then_two_parts(self, processor, config, write_pack):
        write_pack(config.white_dir, "Base", [f"Answer {i}" for i in range(75)])

        decks = processor.process_directory(config.white_dir, CardKind.WHITE)

        assert decks == 1
        assert processor.tally.total_cards_rendered == 75
        assert processor.tally.total_decks_rendered == 1
        assert file_names(config.decks_dir) == [
            "Base_W_part1_10x7_total_70.png",
            "Base_W_part2_10x7_total_5.png",
        ]
        cards = file_names(config.cards_dir)
        assert len(cards) == 75
        assert "Base_W_1.png" in cards
        assert "Base_W_75.png" in cards

    def test_when_pack_fits_then_unpartitioned_sheet(self, processor, config, write_pack):
        write_pack(config.black_dir, "Base", ["// comment", "Why?", "", "What is<br>that?"])

        processor.process_directory(config.black_dir, CardKind.BLACK)

        assert file_names(config.decks_dir) == ["Base_B_10x7_total_2.png"]
        assert file_names(config.cards_dir) == ["Base_B_1.png", "Base_B_2.png"]

    def test_when_pack_exactly_full_then_no_part_suffix(self, processor, config, write_pack):
        write_pack(config.white_dir, "Full", [f"A{i}" for i in range(70)])

        processor.process_directory(config.white_dir, CardKind.WHITE)

        assert file_names(config.decks_dir) == ["Full_W_10x7_total_70.png"]

    def test_when_two_full_sheets_then_no_empty_third(self, processor, config, write_pack):
        write_pack(config.white_dir, "Big", [f"A{i}" for i in range(140)])

        processor.process_directory(config.white_dir, CardKind.WHITE)

        assert file_names(config.decks_dir) == [
            "Big_W_part1_10x7_total_70.png",
            "Big_W_part2_10x7_total_70.png",
        ]

    def test_sheet_image_is_full_grid(self, processor, config, small_layout, write_pack):
        write_pack(config.black_dir, "Tiny", ["One"])

        processor.process_directory(config.black_dir, CardKind.BLACK)

        with Image.open(config.decks_dir / "Tiny_B_10x7_total_1.png") as sheet:
            assert sheet.size == small_layout.sheet_size
        with Image.open(config.cards_dir / "Tiny_B_1.png") as card:
            assert card.size == small_layout.card_size

    def test_card_ordinals_continue_across_packs(self, processor, config, write_pack):
        write_pack(config.white_dir, "A", ["a1", "a2"])
        write_pack(config.white_dir, "B", ["b1"])

        decks = processor.process_directory(config.white_dir, CardKind.WHITE)

        assert decks == 2
        assert file_names(config.cards_dir) == ["A_W_1.png", "A_W_2.png", "B_W_3.png"]

    def test_when_pack_empty_then_no_sheet_and_no_deck(self, processor, config, write_pack):
        write_pack(config.white_dir, "Empty", ["// nothing here", ""])

        decks = processor.process_directory(config.white_dir, CardKind.WHITE)

        assert decks == 0
        assert processor.tally.total_decks_rendered == 0
        assert file_names(config.decks_dir) == []
        assert not processor.tally.has_failures

    def test_when_directory_empty_then_nothing_generated(self, processor, config):
        assert processor.process_directory(config.white_dir, CardKind.WHITE) == 0
        assert processor.tally.total_cards_rendered == 0

    def test_when_directory_missing_then_failure_recorded(self, processor, tmp_path):
        decks = processor.process_directory(tmp_path / "missing", CardKind.BLACK)

        assert decks == 0
        [failure] = processor.tally.failures
        assert failure.stage == "discover"
        assert failure.kind is CardKind.BLACK

    def test_when_file_undecodable_then_others_still_processed(
        self, processor, config, write_pack
    ):
        bad = config.white_dir / "Bad.txt"
        bad.write_bytes(b"\xff\xfe\xfa\n")
        write_pack(config.white_dir, "Good", ["ok"])

        decks = processor.process_directory(config.white_dir, CardKind.WHITE)

        assert decks == 1
        assert file_names(config.decks_dir) == ["Good_W_10x7_total_1.png"]
        [failure] = processor.tally.failures
        assert failure.stage == "parse"
        assert failure.source == str(bad)
        assert "DeckFileError" in failure.error

    def test_when_run_twice_then_same_files_overwritten(self, config, small_renderer, write_pack):
        config.ensure_output_dirs()
        write_pack(config.white_dir, "Base", [f"A{i}" for i in range(3)])

        PackProcessor(config, renderer=small_renderer).process_directory(config.white_dir, CardKind.WHITE)
        first = file_names(config.cards_dir), file_names(config.decks_dir)
        PackProcessor(config, renderer=small_renderer).process_directory(config.white_dir, CardKind.WHITE)

        assert (file_names(config.cards_dir), file_names(config.decks_dir)) == first

    def test_when_shared_tally_given_then_counts_accumulate(self, config, small_renderer, write_pack):
        config.ensure_output_dirs()
        write_pack(config.white_dir, "Base", ["a", "b"])
        tally = RunTally(total_cards_rendered=10, total_decks_rendered=1)

        PackProcessor(config, renderer=small_renderer, tally=tally).process_directory(
            config.white_dir, CardKind.WHITE
        )

        assert tally.total_cards_rendered == 12
        assert tally.total_decks_rendered == 2
        assert file_names(config.cards_dir) == ["Base_W_11.png", "Base_W_12.png"]


class TestProcessPack:
    def test_pack_result_reports_outputs(self, processor):
        pack = Pack.from_texts("Mem", CardKind.BLACK, [f"q{i}" for i in range(71)])

        result = processor.process_pack(pack)

        assert result.rendered
        assert result.card_count == 71
        assert result.batch_count == 2
        assert len(result.card_paths) == 71
        assert [p.name for p in result.sheet_paths] == [
            "Mem_B_part1_10x7_total_70.png",
            "Mem_B_part2_10x7_total_1.png",
        ]

    def test_when_cards_disabled_then_only_sheets_written_but_counted(
        self, deck_root, small_layout, small_renderer
    ):
        config = BuilderConfig(root_dir=deck_root, layout=small_layout, write_cards=False)
        config.ensure_output_dirs()
        processor = PackProcessor(config, renderer=small_renderer)

        result = processor.process_pack(Pack.from_texts("Base", CardKind.WHITE, ["a", "b"]))

        assert result.card_paths == ()
        assert len(result.sheet_paths) == 1
        assert processor.tally.total_cards_rendered == 2
        assert not config.cards_dir.exists()

    def test_when_card_render_fails_then_recorded_and_sheet_written(
        self, processor, config, monkeypatch
    ):
        def broken(*args, **kwargs):
            raise RenderError("no font")

        monkeypatch.setattr(processor.renderer, "render_card", broken)

        result = processor.process_pack(Pack.from_texts("Base", CardKind.WHITE, ["a"]))

        assert result.card_paths == ()
        assert len(result.sheet_paths) == 1
        assert processor.tally.total_cards_rendered == 0
        assert [f.stage for f in processor.tally.failures] == ["render"]

    def test_when_sheet_write_fails_then_recorded(self, processor, monkeypatch):
        def failing_write(image, path, **kwargs):
            raise OSError("disk full")

        monkeypatch.setattr("cah_toolkit.builder.controller.write_png", failing_write)

        result = processor.process_pack(Pack.from_texts("Base", CardKind.BLACK, ["a"]))

        assert result.sheet_paths == ()
        assert {f.stage for f in processor.tally.failures} == {"write"}
        assert processor.tally.total_cards_rendered == 0


    def test_when_encoder_raises_value_error_then_recorded_and_next_pack_processed(
        self, processor, config, write_pack, monkeypatch
    ):
        write_pack(config.white_dir, "A", ["a1"])
        write_pack(config.white_dir, "B", ["b1"])

        def failing_save(self, *args, **kwargs):
            raise ValueError("encoder failure")

        monkeypatch.setattr(Image.Image, "save", failing_save)

        decks = processor.process_directory(config.white_dir, CardKind.WHITE)

        assert decks == 2
        failures = processor.tally.failures
        assert {f.stage for f in failures} == {"write"}
        assert {Path(f.source).name for f in failures} == {
            "A_W_1.png", "A_W_10x7_total_1.png", "B_W_1.png", "B_W_10x7_total_1.png",
        }
        assert file_names(config.cards_dir) == []
        assert file_names(config.decks_dir) == []

    def test_when_sheet_target_is_directory_then_no_temp_file_left(
        self, processor, config, write_pack
    ):
        write_pack(config.white_dir, "Base", ["Yes."])
        (config.decks_dir / "Base_W_10x7_total_1.png").mkdir()

        processor.process_directory(config.white_dir, CardKind.WHITE)

        [failure] = processor.tally.failures
        assert failure.stage == "write"
        assert file_names(config.decks_dir) == ["Base_W_10x7_total_1.png"]
        assert file_names(config.cards_dir) == ["Base_W_1.png"]

class TestGenerateAll:
    def test_black_generated_before_white_with_shared_numbering(
        self, config, small_renderer, write_pack
    ):
        write_pack(config.black_dir, "Base", ["Why?", "How?"])
        write_pack(config.white_dir, "Base", ["Yes.", "No.", "Maybe."])

        result = generate_decks(config, renderer=small_renderer)

        assert result.succeeded
        assert (result.black_decks, result.white_decks) == (1, 1)
        assert result.total_cards == 5
        assert result.total_decks == 2
        assert file_names(config.cards_dir) == [
            "Base_B_1.png", "Base_B_2.png",
            "Base_W_3.png", "Base_W_4.png", "Base_W_5.png",
        ]
        assert file_names(config.decks_dir) == [
            "Base_B_10x7_total_2.png",
            "Base_W_10x7_total_3.png",
        ]

    def test_summary_is_logged(self, config, small_renderer, write_pack, caplog):
        write_pack(config.white_dir, "Base", ["Yes."])

        with caplog.at_level("INFO", logger="cah_toolkit"):
            generate_decks(config, renderer=small_renderer)

        assert "Generated 1 cards in 1 decks" in caplog.text

    def test_when_card_backs_missing_then_reported(self, config, small_renderer, caplog):
        result = generate_decks(config, renderer=small_renderer)

        assert set(result.missing_card_backs) == {CardKind.BLACK, CardKind.WHITE}
        assert "card back not found" in caplog.text

    def test_when_card_backs_present_then_not_missing(self, config, small_renderer):
        config.backs_dir.mkdir()
        for kind in CardKind:
            Image.new("RGB", (4, 4)).save(config.card_back(kind))

        result = generate_decks(config, renderer=small_renderer)

        assert result.missing_card_backs == {}

    def test_when_input_folder_missing_then_run_continues(
        self, tmp_path, small_layout, small_renderer, write_pack, caplog
    ):
        config = BuilderConfig(root_dir=tmp_path, layout=small_layout)
        write_pack(config.white_dir, "Base", ["Yes."])

        result = generate_decks(config, renderer=small_renderer)

        assert not result.succeeded
        assert result.white_decks == 1
        assert [f.stage for f in result.failures] == ["discover"]
        assert "Black: 1 item(s) failed" in caplog.text
