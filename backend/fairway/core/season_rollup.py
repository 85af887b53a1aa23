"""Season Rollup: tour card totals recomputed from completed tournaments.

Invariants:
    - Only teams of completed tournaments count toward a card
    - points = sum of rounded team points; earnings = sum of team earnings
    - current_position = tour rank by points, "T" prefix when tied
    - playoff: GOLD when fewer than the tour's gold spots are strictly better,
      SILVER when fewer than gold + silver spots are, else NONE
    - Idempotent: rolling up twice from the same snapshot gives the same totals

Design Decisions:
    - Full recompute over incremental adds: re-running awards for an event never
      double counts, and a corrected result flows through on the next run
    - Tied cards at the bracket line all qualify (rank is by strictly-better count)
"""

from dataclasses import dataclass
from typing import Iterable

from fairway.core.domain_types import PlayoffBracket, TourCardId
from fairway.core.league_snapshot import (
    TeamResult, TourCardSnapshot, TourSnapshot, TournamentSnapshot,
)
from fairway.core.position_change import group_by_tour, parse_position, rank_points
from fairway.core.team_scoring import CUT_LABEL


TOP_TEN: int = 10


@dataclass(frozen=True)
class CardTotals:
    tour_card_id: TourCardId
    points: float
    earnings: int
    current_position: str
    playoff: PlayoffBracket
    wins: int = 0
    top_ten: int = 0
    made_cut: int = 0
    appearances: int = 0


@dataclass
class _Tally:
    points: float = 0
    earnings: int = 0
    wins: int = 0
    top_ten: int = 0
    made_cut: int = 0
    appearances: int = 0

    def add(self, team: TeamResult) -> None:
        self.points += round(team.points or 0)
        self.earnings += team.earnings or 0
        self.appearances += 1
        if team.position != CUT_LABEL:
            self.made_cut += 1
        pos = parse_position(team.position)
        if pos is None:
            return
        if pos == 1:
            self.wins += 1
        if pos <= TOP_TEN:
            self.top_ten += 1


def playoff_bracket_for(better: int, tour: TourSnapshot | None) -> PlayoffBracket:
    """Bracket for a card with `better` cards strictly ahead of it in its tour."""
    spots = tour.playoff_spots if tour else ()
    gold = spots[0] if len(spots) > 0 else 0
    silver = spots[1] if len(spots) > 1 else 0
    if better < gold:
        return PlayoffBracket.GOLD
    if better < gold + silver:
        return PlayoffBracket.SILVER
    return PlayoffBracket.NONE


def roll_up_tour_cards(
    cards: Iterable[TourCardSnapshot],
    teams: Iterable[TeamResult],
    tournaments: Iterable[TournamentSnapshot],
    tours: Iterable[TourSnapshot],
) -> list[CardTotals]:
    """Totals for every card, one entry per card, grouped by tour."""
    completed_ids = {t.id for t in tournaments if t.is_completed}
    tours_by_id = {t.id: t for t in tours}

    tallies: dict[TourCardId, _Tally] = {}
    for team in teams:
        if team.tournament_id in completed_ids:
            tallies.setdefault(team.tour_card_id, _Tally()).add(team)

    totals: list[CardTotals] = []
    for tour_id, tour_cards in group_by_tour(cards).items():
        tour_tallies = {c.id: tallies.get(c.id, _Tally()) for c in tour_cards}
        ranks = rank_points({cid: t.points for cid, t in tour_tallies.items()})
        for card in tour_cards:
            tally = tour_tallies[card.id]
            rank = ranks[card.id]
            totals.append(CardTotals(
                tour_card_id=card.id,
                points=tally.points,
                earnings=tally.earnings,
                current_position=rank.label,
                playoff=playoff_bracket_for(rank.rank - 1, tours_by_id.get(tour_id)),
                wins=tally.wins,
                top_ten=tally.top_ten,
                made_cut=tally.made_cut,
                appearances=tally.appearances,
            ))
    return totals
