"""Playoff Strokes: bracket seeding and starting-stroke handicaps.

Invariants:
    - Brackets are cut per tour by playoff_spots = [gold, silver]
    - stroke = -10 * (points - floor) / (top - floor), rounded to one decimal
    - Gold floor is the bracket's last member; silver floor is the card at
      index min(35, n - 1) and cards at or past it start at 0
    - Zero, negative or non-finite denominators give 0 strokes for every member
    - Tied cards share the mean of the strokes spanned by their tie block

Design Decisions:
    - The gold/silver floor asymmetry is kept exactly as the league runs it
    - Strokes are a list aligned to the bracket order; per-card lookup goes
      through starting_strokes_for_card so ties are averaged in one place
"""

import math
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from fairway.core.league_snapshot import (
    TierSnapshot, TourCardSnapshot, TourSnapshot,
)


MAX_STROKES: float = 10.0
SILVER_FLOOR_INDEX: int = 35
SILVER_PAYOUT_OFFSET: int = 75


@dataclass(frozen=True)
class PlayoffGroups:
    gold: list[TourCardSnapshot] = field(default_factory=list)
    silver: list[TourCardSnapshot] = field(default_factory=list)
    bumped: list[TourCardSnapshot] = field(default_factory=list)


@dataclass(frozen=True)
class PlayoffTables:
    points: tuple[float, ...] = ()
    payouts: tuple[float, ...] = ()


def _round1(value: float) -> float:
    # half-up like the display layer, not banker's rounding
    return math.floor(value * 10 + 0.5) / 10


def playoff_sort_key(card: TourCardSnapshot) -> tuple:
    return (-card.points, card.display_name or "", str(card.id))


def group_playoff_brackets(
    cards: Iterable[TourCardSnapshot],
    tours: Iterable[TourSnapshot],
    pos_change_by_id: dict | None = None,
) -> PlayoffGroups:
    """Cut each tour into gold/silver brackets and find cards bumped out this week."""
    cards = list(cards)
    pos_change_by_id = pos_change_by_id or {}
    groups = PlayoffGroups()

    for tour in tours:
        gold_count = tour.playoff_spots[0] if len(tour.playoff_spots) > 0 else 0
        silver_count = tour.playoff_spots[1] if len(tour.playoff_spots) > 1 else 0
        cutoff = gold_count + silver_count
        if cutoff <= 0:
            continue

        in_tour = sorted(
            (c for c in cards if c.tour_id == tour.id), key=playoff_sort_key,
        )
        groups.gold.extend(in_tour[:gold_count])
        groups.silver.extend(in_tour[gold_count:cutoff])

        for i in range(cutoff, len(in_tour)):
            card = in_tour[i]
            current_rank = i + 1
            past_rank = current_rank + pos_change_by_id.get(card.id, 0)
            if past_rank <= cutoff:
                groups.bumped.append(card)

    groups.gold.sort(key=playoff_sort_key)
    groups.silver.sort(key=playoff_sort_key)
    groups.bumped.sort(key=playoff_sort_key)
    return groups


def _interpolate(points: float, floor: float, denom: float) -> float:
    return _round1(-MAX_STROKES * (points - floor) / denom)


def allocate_gold_strokes(points: Sequence[float]) -> list[float]:
    """Strokes for a rank-sorted gold bracket (top card gets -10)."""
    if not points:
        return []
    high, low = points[0], points[-1]
    denom = high - low
    if not math.isfinite(denom) or denom <= 0:
        return [0.0 for _ in points]
    return [_interpolate(p, low, denom) for p in points]


def allocate_silver_strokes(points: Sequence[float]) -> list[float]:
    """Strokes for a rank-sorted silver bracket, floored at the 36th card."""
    if not points:
        return []
    floor_index = min(SILVER_FLOOR_INDEX, len(points) - 1)
    high, floor = points[0], points[floor_index]
    denom = high - floor
    strokes = []
    for idx, p in enumerate(points):
        if idx >= floor_index or not math.isfinite(denom) or denom <= 0:
            strokes.append(0.0)
        else:
            strokes.append(_interpolate(p, floor, denom))
    return strokes


def starting_strokes_for_card(
    card_points: float,
    bracket_points: Sequence[float],
    strokes: Sequence[float],
) -> float | None:
    """Starting strokes for one card, averaging across a tie block."""
    better = sum(1 for p in bracket_points if p > card_points)
    tied = sum(1 for p in bracket_points if p == card_points)
    if tied > 1:
        block = strokes[better:better + tied]
        if not block:
            return None
        return _round1(sum(block) / len(block))
    if better >= len(strokes):
        return None
    return strokes[better]


def playoff_position_label(card_points: float, bracket_points: Sequence[float]) -> str:
    better = sum(1 for p in bracket_points if p > card_points)
    tied = sum(1 for p in bracket_points if p == card_points)
    return f"{'T' if tied > 1 else ''}{better + 1}"


def playoff_spot_totals(tours: Iterable[TourSnapshot]) -> tuple[int, int]:
    gold_total = 0
    silver_total = 0
    for tour in tours:
        spots = tour.playoff_spots
        gold_total += spots[0] if len(spots) > 0 else 0
        silver_total += spots[1] if len(spots) > 1 else 0
    return gold_total, silver_total


def slice_playoff_tables(
    tier: TierSnapshot | None, gold_total: int, silver_total: int,
) -> tuple[PlayoffTables | None, PlayoffTables | None]:
    """Gold and silver points/payout tables from the playoff tier."""
    if tier is None:
        return None, None
    gold = PlayoffTables(
        points=tuple(tier.points[:gold_total]),
        payouts=tuple(tier.payouts[:gold_total]),
    )
    silver = PlayoffTables(
        points=tuple(tier.points[:silver_total]),
        payouts=tuple(
            tier.payouts[SILVER_PAYOUT_OFFSET:SILVER_PAYOUT_OFFSET + silver_total]
        ),
    )
    return gold, silver
