"""Golfer ORM: a professional golfer keyed by the data provider's API id."""

from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column

from fairway.db.base import Base


class Golfer(Base):
    """Golfer entity."""
    __tablename__ = "golfers"

    api_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    player_name: Mapped[str] = mapped_column(String(100), nullable=False)
    world_rank: Mapped[int | None] = mapped_column(Integer, nullable=True)
