"""Position Change: standings ranks and movement since the last completed tournament.

Invariants:
    - Cards are ranked only against cards of the same tour
    - rank = (count of strictly-better point totals) + 1; equal totals share a rank
      and carry a tie marker ("T3")
    - pos_change = rank_before - rank_after (positive = moved up)
    - The playoff change uses the same rule, ranked inside one gold or silver
      bracket instead of the whole tour
    - No completed tournament, or no team history for a card → change 0, past points None
    - Pure: recomputed from the current snapshot on every read, nothing persisted

Design Decisions:
    - Past points derived as points minus the latest completed tournament's award,
      rather than stored per tournament: the snapshot stays the single source
    - Cards with no history still count toward their peers' "before" ranking at
      their current points (they earned nothing in the latest event)
"""

import re
from dataclasses import dataclass, replace
from typing import Iterable

from fairway.core.domain_types import PositionTrend, TourCardId, TourId
from fairway.core.league_snapshot import (
    TeamResult, TourCardSnapshot, TournamentSnapshot,
)


_DIGITS = re.compile(r"\d+")


@dataclass(frozen=True)
class StandingsRank:
    rank: int
    tied: bool

    @property
    def label(self) -> str:
        return f"{'T' if self.tied else ''}{self.rank}"


@dataclass(frozen=True)
class PositionChange:
    past_points: float | None
    pos_change: int


@dataclass(frozen=True)
class PositionChangeDisplay:
    value: str
    trend: PositionTrend


def parse_position(label: str | int | None) -> int | None:
    """First integer in a position label ("T15" → 15). None when unparseable."""
    if isinstance(label, int):
        return label
    if isinstance(label, str):
        match = _DIGITS.search(label)
        if match:
            return int(match.group(0))
    return None


def position_sort_key(label: str | int | None) -> float:
    """Sort key that puts unparseable positions ("CUT", None) last."""
    pos = parse_position(label)
    return float("inf") if pos is None else float(pos)


def rank_points(points_by_id: dict) -> dict:
    """Competition ranking over a {id: points} map. Pure."""
    ordered = sorted(points_by_id.items(), key=lambda item: -item[1])
    ranks: dict = {}
    i = 0
    while i < len(ordered):
        j = i + 1
        while j < len(ordered) and ordered[j][1] == ordered[i][1]:
            j += 1
        tied = (j - i) > 1
        for k in range(i, j):
            ranks[ordered[k][0]] = StandingsRank(rank=i + 1, tied=tied)
        i = j
    return ranks


def rank_by_points(
    cards: Iterable[TourCardSnapshot],
) -> dict[TourCardId, StandingsRank]:
    """Rank cards by points inside each tour."""
    ranks: dict[TourCardId, StandingsRank] = {}
    for tour_cards in group_by_tour(cards).values():
        ranks.update(rank_points({c.id: c.points for c in tour_cards}))
    return ranks


def group_by_tour(
    cards: Iterable[TourCardSnapshot],
) -> dict[TourId, list[TourCardSnapshot]]:
    by_tour: dict[TourId, list[TourCardSnapshot]] = {}
    for card in cards:
        by_tour.setdefault(card.tour_id, []).append(card)
    return by_tour


def compute_position_strings(
    cards: Iterable[TourCardSnapshot],
) -> list[TourCardSnapshot]:
    """Return cards with current_position recomputed, grouped by tour, best first."""
    result: list[TourCardSnapshot] = []
    for tour_cards in group_by_tour(cards).values():
        ranks = rank_points({c.id: c.points for c in tour_cards})
        ordered = sorted(tour_cards, key=lambda c: -c.points)
        result.extend(
            replace(c, current_position=ranks[c.id].label) for c in ordered
        )
    return result


def latest_completed_tournament(
    tournaments: Iterable[TournamentSnapshot],
) -> TournamentSnapshot | None:
    completed = [t for t in tournaments if t.is_completed]
    if not completed:
        return None
    return max(completed, key=lambda t: t.start_date)


def compute_position_changes_by_tour(
    cards: Iterable[TourCardSnapshot],
    teams: Iterable[TeamResult],
    tournaments: Iterable[TournamentSnapshot],
) -> dict[TourCardId, PositionChange]:
    """Signed rank delta per card between before and after the latest completed event."""
    cards = list(cards)
    teams = list(teams)
    tournaments = list(tournaments)

    latest = latest_completed_tournament(tournaments)
    if latest is None:
        return {c.id: PositionChange(past_points=None, pos_change=0) for c in cards}

    completed_ids = {t.id for t in tournaments if t.is_completed}
    with_history = {
        t.tour_card_id for t in teams if t.tournament_id in completed_ids
    }
    latest_award = {
        t.tour_card_id: (t.points or 0)
        for t in teams if t.tournament_id == latest.id
    }

    changes: dict[TourCardId, PositionChange] = {}
    for tour_cards in group_by_tour(cards).values():
        past = {c.id: c.points - latest_award.get(c.id, 0) for c in tour_cards}
        before = rank_points(past)
        after = rank_points({c.id: c.points for c in tour_cards})
        for card in tour_cards:
            if card.id not in with_history:
                changes[card.id] = PositionChange(past_points=None, pos_change=0)
                continue
            changes[card.id] = PositionChange(
                past_points=past[card.id],
                pos_change=before[card.id].rank - after[card.id].rank,
            )
    return changes


def compute_bracket_position_changes(
    bracket: Iterable[TourCardSnapshot],
    changes: dict[TourCardId, PositionChange],
) -> dict[TourCardId, int]:
    """Rank delta inside one playoff bracket, from the tour-level past points.

    Only the bracket's current members are ranked; a card without history keeps
    its current points on the "before" side and reports 0 itself.
    """
    bracket = list(bracket)
    past = {
        c.id: changes[c.id].past_points
        for c in bracket
        if c.id in changes and changes[c.id].past_points is not None
    }
    before = rank_points({c.id: past.get(c.id, c.points) for c in bracket})
    after = rank_points({c.id: c.points for c in bracket})
    return {
        c.id: before[c.id].rank - after[c.id].rank if c.id in past else 0
        for c in bracket
    }


def format_position_change(pos_change: int) -> PositionChangeDisplay:
    """Magnitude plus direction; no change shows an empty value."""
    if pos_change == 0:
        return PositionChangeDisplay(value="", trend=PositionTrend.NEUTRAL)
    trend = PositionTrend.UP if pos_change > 0 else PositionTrend.DOWN
    return PositionChangeDisplay(value=str(abs(pos_change)), trend=trend)
