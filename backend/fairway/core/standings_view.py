"""Standings View: derive(snapshot, member) → the season standings view model.

Invariants:
    - Pure: the same snapshot and member id always produce the same view
    - Every card's position label is recomputed inside its tour from points
    - Playoff rows carry a bracket position label, starting strokes and the
      position change inside their bracket
    - The viewing member is an explicit parameter, never ambient state

Design Decisions:
    - One derivation entry point so services and tests share the exact pipeline:
      position changes → position labels → brackets → strokes
"""

from dataclasses import dataclass, field

from fairway.core.domain_types import MemberId, TourCardId
from fairway.core.league_snapshot import StandingsSnapshot, TourCardSnapshot
from fairway.core.playoff_strokes import (
    PlayoffTables, allocate_gold_strokes, allocate_silver_strokes,
    group_playoff_brackets, playoff_position_label, playoff_spot_totals,
    slice_playoff_tables, starting_strokes_for_card,
)
from fairway.core.position_change import (
    PositionChange, compute_bracket_position_changes,
    compute_position_changes_by_tour, compute_position_strings,
)


@dataclass(frozen=True)
class StandingsRow:
    card: TourCardSnapshot
    past_points: float | None
    pos_change: int
    is_current_member: bool = False


@dataclass(frozen=True)
class PlayoffRow:
    card: TourCardSnapshot
    position: str
    starting_strokes: float | None
    pos_change_po: int = 0


@dataclass(frozen=True)
class StandingsView:
    rows: list[StandingsRow] = field(default_factory=list)
    gold: list[PlayoffRow] = field(default_factory=list)
    silver: list[PlayoffRow] = field(default_factory=list)
    bumped: list[TourCardSnapshot] = field(default_factory=list)
    gold_tables: PlayoffTables | None = None
    silver_tables: PlayoffTables | None = None
    current_card_id: TourCardId | None = None


def _playoff_rows(
    cards: list[TourCardSnapshot],
    strokes: list[float],
    changes: dict[TourCardId, PositionChange],
) -> list[PlayoffRow]:
    points = [c.points for c in cards]
    bracket_changes = compute_bracket_position_changes(cards, changes)
    return [
        PlayoffRow(
            card=c,
            position=playoff_position_label(c.points, points),
            starting_strokes=starting_strokes_for_card(c.points, points, strokes),
            pos_change_po=bracket_changes[c.id],
        )
        for c in cards
    ]


def derive_standings(
    snapshot: StandingsSnapshot, member_id: MemberId | None = None,
) -> StandingsView:
    """Build the standings view for one season. Pure, no IO."""
    tour_ids = {t.id for t in snapshot.tours}
    cards = [c for c in snapshot.tour_cards if c.tour_id in tour_ids]

    changes = compute_position_changes_by_tour(
        cards, snapshot.teams, snapshot.tournaments,
    )
    labelled = compute_position_strings(cards)

    rows = [
        StandingsRow(
            card=c,
            past_points=changes[c.id].past_points,
            pos_change=changes[c.id].pos_change,
            is_current_member=member_id is not None and c.member_id == member_id,
        )
        for c in labelled
    ]
    current = next((r.card.id for r in rows if r.is_current_member), None)

    groups = group_playoff_brackets(
        labelled, snapshot.tours,
        {card_id: change.pos_change for card_id, change in changes.items()},
    )
    gold_strokes = allocate_gold_strokes([c.points for c in groups.gold])
    silver_strokes = allocate_silver_strokes([c.points for c in groups.silver])

    playoff_tier = next((t for t in snapshot.tiers if t.is_playoff), None)
    gold_tables, silver_tables = slice_playoff_tables(
        playoff_tier, *playoff_spot_totals(snapshot.tours),
    )

    return StandingsView(
        rows=rows,
        gold=_playoff_rows(groups.gold, gold_strokes, changes),
        silver=_playoff_rows(groups.silver, silver_strokes, changes),
        bumped=groups.bumped,
        gold_tables=gold_tables,
        silver_tables=silver_tables,
        current_card_id=current,
    )
