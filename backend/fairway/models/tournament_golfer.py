"""TournamentGolfer ORM: a golfer's entry in one tournament's pick pool.

Invariants:
    - Unique per (tournament_id, golfer_api_id)
    - group is the pick-diversity bucket; NULL means unconstrained

Design Decisions:
    - world_rank copied per tournament: falls back to Golfer.world_rank when NULL
"""

import uuid

from sqlalchemy import Float, Integer, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from fairway.db.base import Base


class TournamentGolfer(Base):
    """Pick-pool entry."""
    __tablename__ = "tournament_golfers"
    __table_args__ = (
        UniqueConstraint(
            "tournament_id", "golfer_api_id", name="uq_tournament_golfer",
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    tournament_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("tournaments.id"), nullable=False,
    )
    golfer_api_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("golfers.api_id"), nullable=False,
    )
    group: Mapped[int | None] = mapped_column(Integer, nullable=True)
    world_rank: Mapped[int | None] = mapped_column(Integer, nullable=True)
    rating: Mapped[float | None] = mapped_column(Float, nullable=True)
