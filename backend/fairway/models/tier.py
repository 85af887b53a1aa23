"""Tier ORM: points and payout scales indexed by finish rank.

Invariants:
    - points[0] / payouts[0] belong to the winner
    - A tier named "Playoff" marks playoff tournaments

Design Decisions:
    - Payouts stored in cents as JSON lists: read whole, sliced in core
"""

import uuid

from sqlalchemy import String, JSON, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from fairway.db.base import Base


class Tier(Base):
    """Tournament tier."""
    __tablename__ = "tiers"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    season_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("seasons.id"), nullable=False,
    )
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    points: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    payouts: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
