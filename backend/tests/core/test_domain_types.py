"""Domain Types: verifies rich type definitions and enum values.

Tests:
    - NewType wrappers exist and are callable
    - Enums have expected members and serialize to their stored values
    - PlayoffBracket matches the integer flag stored on tour cards
"""

from uuid import uuid4

from fairway.core.domain_types import (
    GolferApiId, PickerPhase, PlayoffBracket, PositionTrend, TourCardId,
    TournamentId, TournamentStatus,
)


def test_identity_types_wrap_uuid():
    uid = uuid4()
    assert TourCardId(uid) == uid
    assert TournamentId(uid) == uid


def test_golfer_ids_wrap_int():
    assert GolferApiId(4821) == 4821


def test_playoff_bracket_values_match_stored_flag():
    assert PlayoffBracket(0) is PlayoffBracket.NONE
    assert PlayoffBracket(1) is PlayoffBracket.GOLD
    assert PlayoffBracket(2) is PlayoffBracket.SILVER


def test_tournament_status_values():
    assert TournamentStatus("upcoming") is TournamentStatus.UPCOMING
    assert TournamentStatus.COMPLETED.value == "completed"


def test_picker_has_six_phases():
    assert {p.value for p in PickerPhase} == {
        "closed", "loading", "empty_pool", "ready", "saving", "save_error",
    }


def test_position_trend_is_str_enum():
    assert PositionTrend.UP == "up"
