"""Initial schema: seasons, tours, tiers, tournaments, tour cards, golfers, teams.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "seasons",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("year", sa.Integer, nullable=False, unique=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "tours",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("season_id", UUID(as_uuid=True), sa.ForeignKey("seasons.id"), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("playoff_spots", sa.JSON, nullable=False),
    )

    op.create_table(
        "tiers",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("season_id", UUID(as_uuid=True), sa.ForeignKey("seasons.id"), nullable=False),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("points", sa.JSON, nullable=False),
        sa.Column("payouts", sa.JSON, nullable=False),
    )

    op.create_table(
        "tournaments",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("season_id", UUID(as_uuid=True), sa.ForeignKey("seasons.id"), nullable=False),
        sa.Column("tier_id", UUID(as_uuid=True), sa.ForeignKey("tiers.id"), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("start_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="upcoming"),
    )

    op.create_table(
        "tour_cards",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("season_id", UUID(as_uuid=True), sa.ForeignKey("seasons.id"), nullable=False),
        sa.Column("tour_id", UUID(as_uuid=True), sa.ForeignKey("tours.id"), nullable=False),
        sa.Column("member_id", UUID(as_uuid=True), nullable=False),
        sa.Column("display_name", sa.String(100), nullable=False),
        sa.Column("points", sa.Float, nullable=False, server_default="0"),
        sa.Column("earnings", sa.Integer, nullable=False, server_default="0"),
        sa.Column("current_position", sa.String(10), nullable=True),
        sa.Column("playoff", sa.Integer, nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "golfers",
        sa.Column("api_id", sa.Integer, primary_key=True, autoincrement=False),
        sa.Column("player_name", sa.String(100), nullable=False),
        sa.Column("world_rank", sa.Integer, nullable=True),
    )

    op.create_table(
        "tournament_golfers",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("tournament_id", UUID(as_uuid=True), sa.ForeignKey("tournaments.id"), nullable=False),
        sa.Column("golfer_api_id", sa.Integer, sa.ForeignKey("golfers.api_id"), nullable=False),
        sa.Column("group", sa.Integer, nullable=True),
        sa.Column("world_rank", sa.Integer, nullable=True),
        sa.Column("rating", sa.Float, nullable=True),
        sa.UniqueConstraint("tournament_id", "golfer_api_id", name="uq_tournament_golfer"),
    )

    op.create_table(
        "teams",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("tournament_id", UUID(as_uuid=True), sa.ForeignKey("tournaments.id"), nullable=False),
        sa.Column("tour_card_id", UUID(as_uuid=True), sa.ForeignKey("tour_cards.id"), nullable=False),
        sa.Column("golfer_ids", sa.JSON, nullable=False),
        sa.Column("rounds", sa.JSON, nullable=False),
        sa.Column("score", sa.Float, nullable=True),
        sa.Column("position", sa.String(10), nullable=True),
        sa.Column("points", sa.Float, nullable=True),
        sa.Column("earnings", sa.Integer, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.UniqueConstraint("tournament_id", "tour_card_id", name="uq_team_per_card"),
    )

    op.create_index("ix_tour_cards_season_id", "tour_cards", ["season_id"])
    op.create_index("ix_teams_tournament_id", "teams", ["tournament_id"])


def downgrade() -> None:
    op.drop_index("ix_teams_tournament_id", table_name="teams")
    op.drop_index("ix_tour_cards_season_id", table_name="tour_cards")
    op.drop_table("teams")
    op.drop_table("tournament_golfers")
    op.drop_table("golfers")
    op.drop_table("tour_cards")
    op.drop_table("tournaments")
    op.drop_table("tiers")
    op.drop_table("tours")
    op.drop_table("seasons")
