"""Standings Routes: season standings with position changes and playoff strokes.

Invariants:
    - Read-only; every request recomputes from the stored season snapshot
    - member_id is an explicit query parameter (identity is resolved upstream)
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from fairway.core.domain_types import MemberId, SeasonId
from fairway.core.league_snapshot import TourCardSnapshot
from fairway.core.playoff_strokes import PlayoffTables
from fairway.core.position_change import format_position_change
from fairway.core.standings_view import PlayoffRow, StandingsView
from fairway.infrastructure.database import get_db
from fairway.infrastructure.repositories import SqlStandingsSource
from fairway.schemas.standings import (
    PlayoffResponse, PlayoffRowResponse, PlayoffTablesResponse,
    PositionChangeResponse, StandingsResponse, StandingsRowResponse,
    TourCardResponse,
)
from fairway.services.standings_service import StandingsService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/seasons", tags=["standings"])


def _card(card: TourCardSnapshot) -> TourCardResponse:
    return TourCardResponse(
        id=card.id,
        tour_id=card.tour_id,
        member_id=card.member_id,
        display_name=card.display_name,
        points=card.points,
        earnings=card.earnings,
        position=card.current_position,
        playoff=int(card.playoff),
        wins=card.wins,
        top_ten=card.top_ten,
        made_cut=card.made_cut,
        appearances=card.appearances,
    )


def _pos_change(value: int) -> PositionChangeResponse:
    display = format_position_change(value)
    return PositionChangeResponse(
        value=value, display=display.value, trend=display.trend.value,
    )


def _playoff_row(row: PlayoffRow) -> PlayoffRowResponse:
    return PlayoffRowResponse(
        card=_card(row.card), position=row.position,
        starting_strokes=row.starting_strokes,
        pos_change_po=_pos_change(row.pos_change_po),
    )


def _tables(tables: PlayoffTables | None) -> PlayoffTablesResponse | None:
    if tables is None:
        return None
    return PlayoffTablesResponse(
        points=list(tables.points), payouts=list(tables.payouts),
    )


def build_standings_response(
    season_id: UUID, view: StandingsView,
) -> StandingsResponse:
    rows = []
    for row in view.rows:
        rows.append(StandingsRowResponse(
            card=_card(row.card),
            past_points=row.past_points,
            pos_change=_pos_change(row.pos_change),
            is_current_member=row.is_current_member,
        ))
    return StandingsResponse(
        season_id=season_id,
        current_tour_card_id=view.current_card_id,
        standings=rows,
        playoff=PlayoffResponse(
            gold=[_playoff_row(r) for r in view.gold],
            silver=[_playoff_row(r) for r in view.silver],
            bumped=[_card(c) for c in view.bumped],
            gold_tables=_tables(view.gold_tables),
            silver_tables=_tables(view.silver_tables),
        ),
    )


@router.get("/{season_id}/standings", response_model=StandingsResponse)
async def get_standings(
    season_id: UUID,
    member_id: UUID | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    """Standings, position changes and playoff brackets for one season."""
    service = StandingsService(SqlStandingsSource(db))
    view = await service.get_standings(
        SeasonId(season_id), MemberId(member_id) if member_id else None,
    )
    return build_standings_response(season_id, view)
