"""TourCard ORM: a member's seasonal entry in one tour.

Invariants:
    - Always belongs to a Tour and a Season
    - points, earnings, current_position, playoff and the finish counters are
      rolled up from completed teams after every awards run (core/season_rollup.py)
    - current_position is derived from points, cached for cheap listing only
    - playoff: 0 = not qualified, 1 = gold, 2 = silver

Design Decisions:
    - member_id is an opaque id from the identity provider, no members table
    - season_id denormalized: standings load one season without joining tours
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Float, Integer, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from fairway.db.base import Base


class TourCard(Base):
    """Tour card entity."""
    __tablename__ = "tour_cards"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    season_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("seasons.id"), nullable=False,
    )
    tour_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("tours.id"), nullable=False,
    )
    member_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), nullable=False,
    )
    display_name: Mapped[str] = mapped_column(String(100), nullable=False)
    points: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    earnings: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    current_position: Mapped[str | None] = mapped_column(
        String(10), nullable=True,
    )
    playoff: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    wins: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    top_ten: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    made_cut: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    appearances: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
