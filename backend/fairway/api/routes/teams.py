"""Team Routes: pick pool, team upsert, and results awards for a tournament.

Invariants:
    - PUT is an upsert: 201 when a team was created, 200 when updated
    - Rule violations → 400, unknown ids → 404, started tournament → 409
    - No route writes anything before the service's pure validation passes
    - Awards complete the tournament and refresh every tour card of its season
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from fairway.core.domain_types import GolferApiId, TourCardId, TournamentId
from fairway.infrastructure.database import get_db
from fairway.infrastructure.repositories import (
    SqlPickPoolSource, SqlStandingsSource, SqlTeamRepository,
    SqlTeamResultsStore, SqlTournamentSource,
)
from fairway.schemas.team import (
    AwardsRequest, PickPoolGolferResponse, PickPoolGroupResponse,
    PickPoolResponse, TeamAwardResponse, TeamUpsert, TeamUpsertResponse,
)
from fairway.services.results_service import ResultsService
from fairway.services.standings_service import StandingsService
from fairway.services.team_service import TeamService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/tournaments", tags=["teams"])


def _team_service(db: AsyncSession) -> TeamService:
    return TeamService(
        SqlPickPoolSource(db), SqlTeamRepository(db), SqlTournamentSource(db),
    )


@router.get("/{tournament_id}/pick-pool", response_model=PickPoolResponse)
async def get_pick_pool(
    tournament_id: UUID,
    tour_card_id: UUID = Query(...),
    db: AsyncSession = Depends(get_db),
):
    """Grouped pick pool for a tour card, pre-selected from its current team."""
    view = await _team_service(db).get_pick_pool_view(
        TournamentId(tournament_id), TourCardId(tour_card_id),
    )
    return PickPoolResponse(
        tournament_id=tournament_id,
        tour_card_id=tour_card_id,
        team_id=view.team_id,
        selected=list(view.selected),
        total_selected=len(view.selected),
        can_save=view.can_save,
        is_locked=view.is_locked,
        groups=[
            PickPoolGroupResponse(
                group_key=g.group_key,
                label=g.label,
                selected_count=g.selected_count,
                is_complete=g.is_complete,
                golfers=[
                    PickPoolGolferResponse(
                        golfer_api_id=p.golfer_api_id,
                        player_name=p.player_name,
                        group=p.group,
                        world_rank=p.world_rank,
                        rating=p.rating,
                        is_selected=p.is_selected,
                        is_disabled=p.is_disabled or view.is_locked,
                    )
                    for p in g.golfers
                ],
            )
            for g in view.groups
        ],
    )


@router.put("/{tournament_id}/teams", response_model=TeamUpsertResponse)
async def upsert_team(
    tournament_id: UUID,
    body: TeamUpsert,
    response: Response,
    db: AsyncSession = Depends(get_db),
):
    """Create the tour card's team, or replace its golfers if it exists."""
    outcome = await _team_service(db).upsert_team(
        TournamentId(tournament_id),
        TourCardId(body.tour_card_id),
        [GolferApiId(g) for g in body.golfer_ids],
    )
    response.status_code = (
        status.HTTP_201_CREATED if outcome.created else status.HTTP_200_OK
    )
    return TeamUpsertResponse(team_id=outcome.team_id, created=outcome.created)


@router.post(
    "/{tournament_id}/awards", response_model=list[TeamAwardResponse],
)
async def apply_awards(
    tournament_id: UUID,
    body: AwardsRequest | None = None,
    db: AsyncSession = Depends(get_db),
):
    """Label finishes, award tier points/earnings, then roll up the season's cards."""
    service = ResultsService(
        SqlTournamentSource(db),
        SqlTeamResultsStore(db),
        StandingsService(SqlStandingsSource(db)),
    )
    awards = await service.apply_awards(
        TournamentId(tournament_id),
        final_playoff_event=body.final_playoff_event if body else False,
    )
    return [
        TeamAwardResponse(
            team_id=a.team_id, position=a.position,
            points=a.points, earnings=a.earnings,
        )
        for a in awards
    ]
