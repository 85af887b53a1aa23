"""Tour ORM: a named sub-league inside a season.

Invariants:
    - Always belongs to a Season (season_id FK)
    - playoff_spots is [gold spots, silver spots]

Design Decisions:
    - JSON for playoff_spots: a short fixed-shape list, never queried by element
"""

import uuid

from sqlalchemy import String, JSON, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from fairway.db.base import Base


class Tour(Base):
    """Tour entity."""
    __tablename__ = "tours"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    season_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("seasons.id"), nullable=False,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    playoff_spots: Mapped[list] = mapped_column(
        JSON, nullable=False, default=list,
    )
