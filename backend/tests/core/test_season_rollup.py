"""Season Rollup: tour card totals from completed team awards.

Tests:
    - Points and earnings summed over completed events only
    - Finish counters (wins, top tens, made cuts, appearances)
    - Position labels and playoff brackets per tour, ties at the bracket line
    - Re-running on the same snapshot gives the same totals
"""

from datetime import datetime, timezone
from uuid import uuid4

from fairway.core.domain_types import (
    MemberId, PlayoffBracket, TeamId, TierId, TourCardId, TourId,
    TournamentId, TournamentStatus,
)
from fairway.core.league_snapshot import (
    TeamResult, TourCardSnapshot, TourSnapshot, TournamentSnapshot,
)
from fairway.core.season_rollup import playoff_bracket_for, roll_up_tour_cards


TOUR_A = TourSnapshot(id=TourId(uuid4()), name="Main", playoff_spots=(1, 2))
TOUR_B = TourSnapshot(id=TourId(uuid4()), name="Second", playoff_spots=(1, 0))
TIER = TierId(uuid4())


def _card(tour=TOUR_A, points=0, name="Member"):
    return TourCardSnapshot(
        id=TourCardId(uuid4()), tour_id=tour.id, member_id=MemberId(uuid4()),
        display_name=name, points=points,
    )


def _tournament(day, status=TournamentStatus.COMPLETED):
    return TournamentSnapshot(
        id=TournamentId(uuid4()), name=f"Event {day}", tier_id=TIER,
        start_date=datetime(2026, 3, day, tzinfo=timezone.utc), status=status,
    )


def _team(tournament, card, position, points=0, earnings=0):
    return TeamResult(
        id=TeamId(uuid4()), tournament_id=tournament.id, tour_card_id=card.id,
        position=position, points=points, earnings=earnings,
    )


def _by_card(totals):
    return {t.tour_card_id: t for t in totals}


def test_sums_completed_events_only():
    card = _card(points=999)
    first, second = _tournament(1), _tournament(8)
    live = _tournament(15, status=TournamentStatus.ACTIVE)
    teams = [
        _team(first, card, "1", points=500, earnings=2500),
        _team(second, card, "T2", points=245.4, earnings=1225),
        _team(live, card, "1", points=500, earnings=2500),
    ]

    (totals,) = roll_up_tour_cards([card], teams, [first, second, live], [TOUR_A])

    # stored points are replaced, team points rounded before summing
    assert totals.points == 745
    assert totals.earnings == 3725
    assert (totals.wins, totals.top_ten, totals.appearances) == (1, 2, 2)


def test_cut_counts_as_appearance_not_made_cut():
    card = _card()
    events = [_tournament(1), _tournament(8), _tournament(15)]
    teams = [
        _team(events[0], card, "CUT"),
        _team(events[1], card, "12", points=40),
        _team(events[2], card, "T7", points=90),
    ]

    (totals,) = roll_up_tour_cards([card], teams, events, [TOUR_A])

    assert totals.appearances == 3
    assert totals.made_cut == 2
    assert totals.top_ten == 1
    assert totals.wins == 0


def test_positions_and_brackets_follow_tour_spots():
    event = _tournament(1)
    ann, bo, cy, di = (_card(name=n) for n in ("Ann", "Bo", "Cy", "Di"))
    teams = [
        _team(event, ann, "1", points=500),
        _team(event, bo, "2", points=300),
        _team(event, cy, "3", points=190),
    ]

    totals = _by_card(roll_up_tour_cards([ann, bo, cy, di], teams, [event], [TOUR_A]))

    assert [totals[c.id].current_position for c in (ann, bo, cy, di)] == ["1", "2", "3", "4"]
    assert totals[ann.id].playoff == PlayoffBracket.GOLD
    assert totals[bo.id].playoff == PlayoffBracket.SILVER
    assert totals[cy.id].playoff == PlayoffBracket.SILVER
    assert totals[di.id].playoff == PlayoffBracket.NONE


def test_ties_share_label_and_bracket():
    event = _tournament(1)
    ann, bo, cy = (_card(name=n) for n in ("Ann", "Bo", "Cy"))
    teams = [
        _team(event, ann, "T1", points=400),
        _team(event, bo, "T1", points=400),
        _team(event, cy, "3", points=100),
    ]

    totals = _by_card(roll_up_tour_cards([ann, bo, cy], teams, [event], [TOUR_A]))

    assert totals[ann.id].current_position == "T1"
    assert totals[bo.id].current_position == "T1"
    # both tied leaders make the single gold spot
    assert totals[ann.id].playoff == PlayoffBracket.GOLD
    assert totals[bo.id].playoff == PlayoffBracket.GOLD
    assert totals[cy.id].playoff == PlayoffBracket.SILVER


def test_cards_ranked_within_their_own_tour():
    event = _tournament(1)
    main, second = _card(tour=TOUR_A), _card(tour=TOUR_B)
    teams = [
        _team(event, main, "1", points=500),
        _team(event, second, "5", points=110),
    ]

    totals = _by_card(
        roll_up_tour_cards([main, second], teams, [event], [TOUR_A, TOUR_B]),
    )

    assert totals[second.id].current_position == "1"
    assert totals[second.id].playoff == PlayoffBracket.GOLD


def test_rollup_is_idempotent():
    event = _tournament(1)
    cards = [_card(name="Ann"), _card(name="Bo")]
    teams = [_team(event, cards[0], "1", points=500, earnings=2500)]

    first = roll_up_tour_cards(cards, teams, [event], [TOUR_A])
    second = roll_up_tour_cards(cards, teams, [event], [TOUR_A])

    assert first == second


def test_bracket_without_playoff_spots():
    no_spots = TourSnapshot(id=TourId(uuid4()), name="Casual")
    assert playoff_bracket_for(0, no_spots) == PlayoffBracket.NONE
    assert playoff_bracket_for(0, None) == PlayoffBracket.NONE
    assert playoff_bracket_for(2, TOUR_A) == PlayoffBracket.SILVER
    assert playoff_bracket_for(3, TOUR_A) == PlayoffBracket.NONE
