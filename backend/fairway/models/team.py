"""Team ORM: one member's golfer picks for one tournament.

Invariants:
    - Unique per (tournament_id, tour_card_id)
    - golfer_ids holds exactly 10 golfer API ids once saved
    - rounds/score/position/points/earnings filled by results ingestion

Design Decisions:
    - JSON for golfer_ids and rounds: always read and written whole
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    String, Float, Integer, DateTime, JSON, ForeignKey, UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from fairway.db.base import Base


class Team(Base):
    """Team entity."""
    __tablename__ = "teams"
    __table_args__ = (
        UniqueConstraint("tournament_id", "tour_card_id", name="uq_team_per_card"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    tournament_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("tournaments.id"), nullable=False,
    )
    tour_card_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("tour_cards.id"), nullable=False,
    )
    golfer_ids: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    rounds: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    score: Mapped[float | None] = mapped_column(Float, nullable=True)
    position: Mapped[str | None] = mapped_column(String(10), nullable=True)
    points: Mapped[float | None] = mapped_column(Float, nullable=True)
    earnings: Mapped[int | None] = mapped_column(Integer, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
