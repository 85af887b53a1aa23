"""League Snapshot: read-only in-memory shapes the pure core derives from.

Invariants:
    - Snapshots are built by the shell from backend documents, never mutated by core
    - Optional fields stay None when the backend omits them; core treats None as
      "no constraint" or "lowest priority", never as an error

Design Decisions:
    - Frozen dataclasses over dicts: loosely-typed documents are mapped once at
      the boundary, so every derivation sees explicit fields
    - Derived values (position labels, past points, strokes) live in separate
      result records; snapshots stay authoritative inputs only
"""

from dataclasses import dataclass, field
from datetime import datetime

from fairway.core.domain_types import (
    GolferApiId, PlayoffBracket, SeasonId, TeamId, TierId, TourCardId,
    TourId, TournamentId, TournamentStatus, MemberId,
)


@dataclass(frozen=True)
class TourSnapshot:
    id: TourId
    name: str
    # [gold spots, silver spots]
    playoff_spots: tuple[int, ...] = ()


@dataclass(frozen=True)
class TierSnapshot:
    """Points and payout tables indexed by finish rank (index 0 = winner)."""
    id: TierId
    name: str
    points: tuple[float, ...] = ()
    payouts: tuple[float, ...] = ()

    @property
    def is_playoff(self) -> bool:
        return self.name.strip().lower() == "playoff"


@dataclass(frozen=True)
class TournamentSnapshot:
    id: TournamentId
    name: str
    tier_id: TierId
    start_date: datetime
    status: TournamentStatus = TournamentStatus.UPCOMING
    season_id: SeasonId | None = None

    @property
    def is_completed(self) -> bool:
        return self.status == TournamentStatus.COMPLETED


@dataclass(frozen=True)
class TourCardSnapshot:
    id: TourCardId
    tour_id: TourId
    member_id: MemberId
    display_name: str
    points: float = 0
    earnings: int = 0
    current_position: str | None = None
    playoff: PlayoffBracket = PlayoffBracket.NONE
    wins: int = 0
    top_ten: int = 0
    made_cut: int = 0
    appearances: int = 0


@dataclass(frozen=True)
class TeamResult:
    """One member's team for one tournament, with ingested results."""
    id: TeamId
    tournament_id: TournamentId
    tour_card_id: TourCardId
    golfer_ids: tuple[GolferApiId, ...] = ()
    rounds: tuple[float | None, ...] = ()
    score: float | None = None
    position: str | None = None
    points: float | None = None
    earnings: int | None = None


@dataclass(frozen=True)
class PickPoolEntry:
    """A golfer available for selection in one tournament."""
    golfer_api_id: GolferApiId
    player_name: str
    group: int | None = None
    world_rank: int | None = None
    rating: float | None = None


@dataclass(frozen=True)
class StandingsSnapshot:
    """Everything the standings derivation needs for one season."""
    season_id: SeasonId
    tours: tuple[TourSnapshot, ...] = ()
    tiers: tuple[TierSnapshot, ...] = ()
    tournaments: tuple[TournamentSnapshot, ...] = ()
    tour_cards: tuple[TourCardSnapshot, ...] = ()
    teams: tuple[TeamResult, ...] = field(default_factory=tuple)
