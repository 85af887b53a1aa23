"""Team Scoring: finish labels and tier-table awards for a tournament's teams.

Invariants:
    - Team score is the sum of present, finite round scores (lower is better)
    - Equal scores share a finish label "T<n>", n = first index of the block + 1
    - Cut teams are labelled "CUT" and receive no points or earnings
    - A finish position p shared by k teams pays mean(table[p-1+offset : p-1+offset+k])

Design Decisions:
    - Awards computed into new TeamAward records, not written onto snapshots:
      the shell decides whether and where to persist them
    - validate_team_golfers mirrors the picker rules server-side, so an upsert
      that bypassed the picker still cannot store an illegal team
"""

import math
from dataclasses import dataclass
from typing import Iterable, Sequence

from fairway.core.domain_types import GolferApiId, TeamId
from fairway.core.errors import PickValidationError
from fairway.core.league_snapshot import PickPoolEntry, TierSnapshot
from fairway.core.position_change import parse_position
from fairway.core.team_picker import MAX_PER_GROUP, TEAM_SIZE


CUT_LABEL = "CUT"


@dataclass(frozen=True)
class TeamScoreLine:
    team_id: TeamId
    score: float | None
    is_cut: bool = False


@dataclass(frozen=True)
class TeamAward:
    team_id: TeamId
    position: str | None
    points: int
    earnings: int


def calculate_team_score(rounds: Iterable[float | None]) -> float:
    return sum(
        r for r in rounds
        if r is not None and isinstance(r, (int, float)) and math.isfinite(r)
    )


def assign_finish_labels(lines: Iterable[TeamScoreLine]) -> dict[TeamId, str]:
    """Finish label per team; teams with no score get none."""
    lines = list(lines)
    scored = sorted(
        (line for line in lines if line.score is not None),
        key=lambda line: line.score,
    )
    labels: dict[TeamId, str] = {}
    i = 0
    while i < len(scored):
        j = i + 1
        while j < len(scored) and scored[j].score == scored[i].score:
            j += 1
        label = f"{'T' if j - i > 1 else ''}{i + 1}"
        for k in range(i, j):
            labels[scored[k].team_id] = label
        i = j
    for line in lines:
        if line.is_cut:
            labels[line.team_id] = CUT_LABEL
    return labels


def _average(table: Sequence[float], start: int, count: int) -> float:
    if count <= 0:
        return 0
    return sum(
        table[start + i] if start + i < len(table) else 0 for i in range(count)
    ) / count


def _by_position(labels: dict[TeamId, str]) -> dict[int, list[TeamId]]:
    by_pos: dict[int, list[TeamId]] = {}
    for team_id, label in labels.items():
        pos = parse_position(label)
        if not pos or pos <= 0:
            continue
        by_pos.setdefault(pos, []).append(team_id)
    return by_pos


def _js_round(value: float) -> int:
    return math.floor(value + 0.5)


def award_points_and_earnings(
    labels: dict[TeamId, str], tier: TierSnapshot, offset: int = 0,
) -> list[TeamAward]:
    """Regular-season awards: tier points and payouts, ties averaged."""
    awards = []
    by_pos = _by_position(labels)
    for pos in sorted(by_pos):
        tied = by_pos[pos]
        base = pos - 1 + offset
        points = _js_round(_average(tier.points, base, len(tied)))
        earnings = _js_round(_average(tier.payouts, base, len(tied)))
        for team_id in tied:
            awards.append(TeamAward(team_id, labels[team_id], points, earnings))
    awarded = {a.team_id for a in awards}
    for team_id, label in labels.items():
        if team_id not in awarded:
            awards.append(TeamAward(team_id, label, 0, 0))
    return awards


def award_earnings_only(
    labels: dict[TeamId, str], tier: TierSnapshot, offset: int = 0,
) -> list[TeamAward]:
    """Playoff finale: no standings points, payouts by bracket finish."""
    return [
        TeamAward(a.team_id, a.position, 0, a.earnings)
        for a in award_points_and_earnings(labels, tier, offset)
    ]


def validate_team_golfers(
    golfer_ids: Sequence[GolferApiId], pool: Sequence[PickPoolEntry],
) -> None:
    """Raise PickValidationError unless golfer_ids form a legal complete team."""
    if len(set(golfer_ids)) != len(golfer_ids):
        raise PickValidationError("A golfer can only be picked once.")
    if len(golfer_ids) != TEAM_SIZE:
        raise PickValidationError(
            f"A team needs exactly {TEAM_SIZE} golfers, got {len(golfer_ids)}.",
        )
    by_id = {entry.golfer_api_id: entry for entry in pool}
    unknown = [g for g in golfer_ids if g not in by_id]
    if unknown:
        raise PickValidationError(
            f"Golfers not in this tournament's pick pool: {', '.join(map(str, unknown))}",
        )
    counts: dict[int, int] = {}
    for golfer_id in golfer_ids:
        group = by_id[golfer_id].group
        if not isinstance(group, int):
            continue
        counts[group] = counts.get(group, 0) + 1
        if counts[group] > MAX_PER_GROUP:
            raise PickValidationError(
                f"At most {MAX_PER_GROUP} golfers allowed from group {group}.",
            )
