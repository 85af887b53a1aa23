"""Season ORM: one league year; tours, tournaments and tour cards hang off it.

Invariants:
    - year is unique: one season per calendar year

Design Decisions:
    - Season boundary is soft: nothing cascades on season end, cards are never deleted
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Integer, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from fairway.db.base import Base


class Season(Base):
    """League season."""
    __tablename__ = "seasons"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    year: Mapped[int] = mapped_column(Integer, nullable=False, unique=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
