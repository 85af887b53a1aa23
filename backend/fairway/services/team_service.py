"""Team Service: server-side team upsert and pick-pool view.

Invariants:
    - Follows read → pure validate → write: nothing is stored before
      validate_team_golfers passes
    - Upsert: update in place when the card already has a team, else create
    - Teams are frozen once their tournament is no longer upcoming

Design Decisions:
    - Repositories injected as protocols: routes pass SQL implementations,
      tests pass AsyncMocks
"""

import logging
from dataclasses import dataclass
from typing import Sequence

from fairway.core.domain_types import (
    GolferApiId, TeamId, TourCardId, TournamentId, TournamentStatus,
)
from fairway.core.errors import (
    EmptyPickPoolError, ResourceNotFoundError, TeamLockedError,
)
from fairway.core.repository_protocols import (
    PickPoolSource, TeamRepository, TournamentSource,
)
from fairway.core.team_picker import PickerGroup, build_pick_groups, can_save
from fairway.core.team_scoring import validate_team_golfers

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpsertOutcome:
    team_id: TeamId
    created: bool


@dataclass(frozen=True)
class PickPoolView:
    groups: list[PickerGroup]
    selected: tuple[GolferApiId, ...]
    team_id: TeamId | None
    is_locked: bool

    @property
    def can_save(self) -> bool:
        return not self.is_locked and can_save(self.selected)


class TeamService:
    """Team upsert and pick-pool read, gate-checked against the tournament."""

    def __init__(
        self,
        pool_source: PickPoolSource,
        teams: TeamRepository,
        tournaments: TournamentSource,
    ):
        self.pool_source = pool_source
        self.teams = teams
        self.tournaments = tournaments

    async def _require_tournament(self, tournament_id: TournamentId):
        tournament = await self.tournaments.get_tournament(tournament_id)
        if tournament is None:
            raise ResourceNotFoundError("Tournament", str(tournament_id))
        return tournament

    async def _require_tour_card(self, tour_card_id: TourCardId) -> None:
        if not await self.tournaments.tour_card_exists(tour_card_id):
            raise ResourceNotFoundError("TourCard", str(tour_card_id))

    async def get_pick_pool_view(
        self, tournament_id: TournamentId, tour_card_id: TourCardId,
    ) -> PickPoolView:
        """Grouped pick pool, pre-selected from the card's current team."""
        tournament = await self._require_tournament(tournament_id)
        await self._require_tour_card(tour_card_id)

        pool = await self.pool_source.get_pick_pool(tournament_id)
        if not pool:
            raise EmptyPickPoolError(str(tournament_id))

        team = await self.teams.get_for_tour_card(tournament_id, tour_card_id)
        selected = team.golfer_ids if team else ()
        is_locked = tournament.status != TournamentStatus.UPCOMING
        return PickPoolView(
            groups=build_pick_groups(pool, selected, is_saving=False),
            selected=tuple(selected),
            team_id=team.id if team else None,
            is_locked=is_locked,
        )

    async def upsert_team(
        self,
        tournament_id: TournamentId,
        tour_card_id: TourCardId,
        golfer_ids: Sequence[GolferApiId],
    ) -> UpsertOutcome:
        """Create or update the card's team after validating the picks."""
        tournament = await self._require_tournament(tournament_id)
        if tournament.status != TournamentStatus.UPCOMING:
            raise TeamLockedError(str(tournament_id))
        await self._require_tour_card(tour_card_id)

        pool = await self.pool_source.get_pick_pool(tournament_id)
        if not pool:
            raise EmptyPickPoolError(str(tournament_id))
        validate_team_golfers(golfer_ids, pool)

        existing = await self.teams.get_for_tour_card(tournament_id, tour_card_id)
        if existing is not None:
            await self.teams.update(existing.id, golfer_ids)
            return UpsertOutcome(team_id=existing.id, created=False)

        team_id = await self.teams.create(tournament_id, tour_card_id, golfer_ids)
        logger.info(
            "Team saved",
            extra={
                "tournament_id": tournament_id,
                "tour_card_id": tour_card_id,
                "golfer_count": len(golfer_ids),
            },
        )
        return UpsertOutcome(team_id=team_id, created=True)
