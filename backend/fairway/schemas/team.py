"""Team Schemas: pick submissions, pick-pool views, and award results.

Invariants:
    - TeamUpsert.golfer_ids: exactly 10 unique positive API ids
    - Group caps are NOT checked here: they need the tournament's pick pool,
      so they are enforced by core/team_scoring.validate_team_golfers

Design Decisions:
    - Pydantic rejects malformed bodies before they reach the service (400 with field details)
"""

from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from fairway.core.team_picker import TEAM_SIZE


class TeamUpsert(BaseModel):
    """Create-or-update body for a tour card's team."""
    tour_card_id: UUID
    golfer_ids: list[int] = Field(min_length=TEAM_SIZE, max_length=TEAM_SIZE)

    @field_validator("golfer_ids")
    @classmethod
    def check_unique_positive(cls, v: list[int]) -> list[int]:
        if any(g <= 0 for g in v):
            raise ValueError("golfer ids must be positive")
        if len(set(v)) != len(v):
            raise ValueError("golfer ids must be unique")
        return v


class TeamUpsertResponse(BaseModel):
    team_id: UUID
    created: bool


class PickPoolGolferResponse(BaseModel):
    golfer_api_id: int
    player_name: str
    group: int | None = None
    world_rank: int | None = None
    rating: float | None = None
    is_selected: bool
    is_disabled: bool


class PickPoolGroupResponse(BaseModel):
    group_key: int
    label: str
    selected_count: int
    is_complete: bool
    golfers: list[PickPoolGolferResponse]


class PickPoolResponse(BaseModel):
    """Picker view for one tour card: groups plus current selection state."""
    tournament_id: UUID
    tour_card_id: UUID
    team_id: UUID | None = None
    selected: list[int]
    total_selected: int
    can_save: bool
    is_locked: bool
    groups: list[PickPoolGroupResponse]


class AwardsRequest(BaseModel):
    final_playoff_event: bool = False


class TeamAwardResponse(BaseModel):
    team_id: UUID
    position: str | None = None
    points: int
    earnings: int
