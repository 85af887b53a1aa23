"""Standings Schemas: season standings and playoff bracket responses."""

from uuid import UUID

from pydantic import BaseModel


class PositionChangeResponse(BaseModel):
    value: int
    display: str
    trend: str


class TourCardResponse(BaseModel):
    id: UUID
    tour_id: UUID
    member_id: UUID
    display_name: str
    points: float
    earnings: int
    position: str | None = None
    playoff: int = 0
    wins: int = 0
    top_ten: int = 0
    made_cut: int = 0
    appearances: int = 0


class StandingsRowResponse(BaseModel):
    card: TourCardResponse
    past_points: float | None = None
    pos_change: PositionChangeResponse
    is_current_member: bool = False


class PlayoffRowResponse(BaseModel):
    card: TourCardResponse
    position: str
    starting_strokes: float | None = None
    pos_change_po: PositionChangeResponse


class PlayoffTablesResponse(BaseModel):
    points: list[float]
    payouts: list[float]


class PlayoffResponse(BaseModel):
    gold: list[PlayoffRowResponse]
    silver: list[PlayoffRowResponse]
    bumped: list[TourCardResponse]
    gold_tables: PlayoffTablesResponse | None = None
    silver_tables: PlayoffTablesResponse | None = None


class StandingsResponse(BaseModel):
    season_id: UUID
    current_tour_card_id: UUID | None = None
    standings: list[StandingsRowResponse]
    playoff: PlayoffResponse
