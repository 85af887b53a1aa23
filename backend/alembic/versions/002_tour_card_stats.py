"""Tour card finish counters: wins, top tens, made cuts, appearances.

Revision ID: 002_tour_card_stats
Revises: 001_initial
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "002_tour_card_stats"
down_revision: Union[str, None] = "001_initial"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_COUNTERS = ("wins", "top_ten", "made_cut", "appearances")


def upgrade() -> None:
    for name in _COUNTERS:
        op.add_column(
            "tour_cards",
            sa.Column(name, sa.Integer, nullable=False, server_default="0"),
        )


def downgrade() -> None:
    for name in reversed(_COUNTERS):
        op.drop_column("tour_cards", name)
