"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no base class
    - Async in Protocol: implementations do IO, but the pure functions that
      consume their results are never async themselves
"""

from typing import Protocol, Sequence

from fairway.core.domain_types import (
    GolferApiId, PlayoffBracket, SeasonId, TeamId, TierId, TourCardId,
    TournamentId,
)
from fairway.core.league_snapshot import (
    PickPoolEntry, StandingsSnapshot, TeamResult, TierSnapshot,
    TournamentSnapshot,
)
from fairway.core.season_rollup import CardTotals
from fairway.core.team_scoring import TeamAward


class PickPoolSource(Protocol):
    """Contract for reading a tournament's pick pool."""
    async def get_pick_pool(
        self, tournament_id: TournamentId,
    ) -> list[PickPoolEntry]: ...


class TeamRepository(Protocol):
    """Contract for team persistence: the upsert's two halves plus lookup."""
    async def create(
        self,
        tournament_id: TournamentId,
        tour_card_id: TourCardId,
        golfer_ids: Sequence[GolferApiId],
    ) -> TeamId: ...
    async def update(
        self, team_id: TeamId, golfer_ids: Sequence[GolferApiId],
    ) -> None: ...
    async def get_for_tour_card(
        self, tournament_id: TournamentId, tour_card_id: TourCardId,
    ) -> TeamResult | None: ...


class TournamentSource(Protocol):
    """Contract for tournament metadata lookup."""
    async def get_tournament(
        self, tournament_id: TournamentId,
    ) -> TournamentSnapshot | None: ...
    async def tour_card_exists(self, tour_card_id: TourCardId) -> bool: ...
    async def get_tier(self, tier_id: TierId) -> TierSnapshot | None: ...


class TeamResultsStore(Protocol):
    """Contract for reading ingested team results and writing their awards.

    save_awards also marks the tournament completed.
    """
    async def list_results(self, tournament_id: TournamentId) -> list[TeamResult]: ...
    async def playoff_brackets(
        self, tournament_id: TournamentId,
    ) -> dict[TourCardId, PlayoffBracket]: ...
    async def save_awards(
        self, tournament_id: TournamentId, awards: Sequence[TeamAward],
    ) -> int: ...


class StandingsSource(Protocol):
    """Contract for loading a whole season's standings snapshot."""
    async def get_standings_snapshot(
        self, season_id: SeasonId,
    ) -> StandingsSnapshot | None: ...


class StandingsStore(StandingsSource, Protocol):
    """StandingsSource plus the write-back of rolled-up card totals."""
    async def save_card_totals(self, totals: Sequence[CardTotals]) -> int: ...
