"""
Tests for core.models.tally

Test Coverage:
- Card ordinals and counters
- Failure recording and filtering
"""
import pytest

from cah_toolkit.core.models import CardKind, PackFailure, RunTally


def test_when_new_tally_then_counters_start_at_zero():
    tally = RunTally()
    assert tally.total_cards_rendered == 0
    assert tally.total_decks_rendered == 0
    assert not tally.has_failures


def test_when_card_recorded_then_ordinal_advances():
    tally = RunTally()
    assert tally.next_card_ordinal() == 1
    assert tally.record_card() == 1
    assert tally.next_card_ordinal() == 2
    assert tally.record_card() == 2
    assert tally.total_cards_rendered == 2


def test_next_card_ordinal_does_not_count():
    tally = RunTally()
    tally.next_card_ordinal()
    tally.next_card_ordinal()
    assert tally.total_cards_rendered == 0


def test_record_deck_returns_new_total():
    tally = RunTally()
    assert tally.record_deck() == 1
    assert tally.record_deck() == 2


def test_when_exception_recorded_then_message_has_type():
    tally = RunTally()
    failure = tally.record_failure(CardKind.BLACK, "Base.txt", OSError("denied"))

    assert failure.error == "OSError: denied"
    assert failure.stage == "parse"
    assert tally.has_failures
    assert tally.failures == [failure]


def test_when_string_recorded_then_message_kept():
    tally = RunTally()
    failure = tally.record_failure(CardKind.WHITE, "x.png", "disk full", stage="write")
    assert failure.error == "disk full"
    assert failure.stage == "write"


def test_when_stage_unknown_then_raises():
    with pytest.raises(ValueError, match="stage"):
        PackFailure(CardKind.WHITE, "x", "boom", stage="upload")


def test_failures_for_filters_by_kind():
    tally = RunTally()
    tally.record_failure(CardKind.BLACK, "a.txt", "a")
    tally.record_failure(CardKind.WHITE, "b.txt", "b")

    assert [f.source for f in tally.failures_for(CardKind.WHITE)] == ["b.txt"]
    assert len(tally.failures_for()) == 2

