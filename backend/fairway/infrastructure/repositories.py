"""SQL Repositories: SQLAlchemy implementations of core/repository_protocols.py.

Invariants:
    - ORM rows never leave this module: every read is mapped to a core snapshot
    - Writes commit their own unit of work (one team, one awards run, or one
      season rollup per call)
    - Missing rows are reported as None (reads) or ResourceNotFoundError (writes)

Design Decisions:
    - One small class per protocol sharing a session: routes build only what they use
    - Golfer world rank falls back from the tournament entry to the golfer record
"""

import logging
from datetime import datetime, timezone
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fairway.core.domain_types import (
    GolferApiId, MemberId, PlayoffBracket, SeasonId, TeamId, TierId,
    TourCardId, TourId, TournamentId, TournamentStatus,
)
from fairway.core.errors import ResourceNotFoundError
from fairway.core.league_snapshot import (
    PickPoolEntry, StandingsSnapshot, TeamResult, TierSnapshot,
    TourCardSnapshot, TourSnapshot, TournamentSnapshot,
)
from fairway.core.season_rollup import CardTotals
from fairway.core.team_scoring import TeamAward
from fairway.models.golfer import Golfer
from fairway.models.season import Season
from fairway.models.team import Team
from fairway.models.tier import Tier
from fairway.models.tour import Tour
from fairway.models.tour_card import TourCard
from fairway.models.tournament import Tournament
from fairway.models.tournament_golfer import TournamentGolfer

logger = logging.getLogger(__name__)


# ─── Row → snapshot mapping ──────────────────────────────────────

def _tournament_snapshot(row: Tournament) -> TournamentSnapshot:
    return TournamentSnapshot(
        id=TournamentId(row.id),
        name=row.name,
        tier_id=TierId(row.tier_id),
        start_date=row.start_date,
        status=TournamentStatus(row.status),
        season_id=SeasonId(row.season_id),
    )


def _team_result(row: Team) -> TeamResult:
    return TeamResult(
        id=TeamId(row.id),
        tournament_id=TournamentId(row.tournament_id),
        tour_card_id=TourCardId(row.tour_card_id),
        golfer_ids=tuple(GolferApiId(g) for g in row.golfer_ids or ()),
        rounds=tuple(row.rounds or ()),
        score=row.score,
        position=row.position,
        points=row.points,
        earnings=row.earnings,
    )


def _tour_card_snapshot(row: TourCard) -> TourCardSnapshot:
    return TourCardSnapshot(
        id=TourCardId(row.id),
        tour_id=TourId(row.tour_id),
        member_id=MemberId(row.member_id),
        display_name=row.display_name,
        points=row.points or 0,
        earnings=row.earnings or 0,
        current_position=row.current_position,
        playoff=PlayoffBracket(row.playoff or 0),
        wins=row.wins or 0,
        top_ten=row.top_ten or 0,
        made_cut=row.made_cut or 0,
        appearances=row.appearances or 0,
    )


# ─── Repositories ────────────────────────────────────────────────

class SqlPickPoolSource:
    """PickPoolSource over tournament_golfers joined to golfers."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_pick_pool(self, tournament_id: TournamentId) -> list[PickPoolEntry]:
        result = await self.db.execute(
            select(TournamentGolfer, Golfer)
            .join(Golfer, Golfer.api_id == TournamentGolfer.golfer_api_id)
            .where(TournamentGolfer.tournament_id == tournament_id),
        )
        return [
            PickPoolEntry(
                golfer_api_id=GolferApiId(golfer.api_id),
                player_name=golfer.player_name,
                group=entry.group,
                world_rank=(
                    entry.world_rank if entry.world_rank is not None
                    else golfer.world_rank
                ),
                rating=entry.rating,
            )
            for entry, golfer in result.all()
        ]


class SqlTeamRepository:
    """TeamRepository: create/update halves of the team upsert."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(
        self,
        tournament_id: TournamentId,
        tour_card_id: TourCardId,
        golfer_ids: Sequence[GolferApiId],
    ) -> TeamId:
        team = Team(
            tournament_id=tournament_id,
            tour_card_id=tour_card_id,
            golfer_ids=list(golfer_ids),
        )
        self.db.add(team)
        await self.db.commit()
        await self.db.refresh(team)
        logger.info(
            "Team created",
            extra={"team_id": team.id, "tournament_id": tournament_id},
        )
        return TeamId(team.id)

    async def update(self, team_id: TeamId, golfer_ids: Sequence[GolferApiId]) -> None:
        team = await self.db.get(Team, team_id)
        if team is None:
            raise ResourceNotFoundError("Team", str(team_id))
        team.golfer_ids = list(golfer_ids)
        team.updated_at = datetime.now(timezone.utc)
        await self.db.commit()
        logger.info("Team updated", extra={"team_id": team_id})

    async def get_for_tour_card(
        self, tournament_id: TournamentId, tour_card_id: TourCardId,
    ) -> TeamResult | None:
        result = await self.db.execute(
            select(Team).where(
                Team.tournament_id == tournament_id,
                Team.tour_card_id == tour_card_id,
            ),
        )
        row = result.scalar_one_or_none()
        return _team_result(row) if row else None


class SqlTournamentSource:
    """TournamentSource: tournament metadata and tour card existence."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_tournament(
        self, tournament_id: TournamentId,
    ) -> TournamentSnapshot | None:
        row = await self.db.get(Tournament, tournament_id)
        return _tournament_snapshot(row) if row else None

    async def tour_card_exists(self, tour_card_id: TourCardId) -> bool:
        return await self.db.get(TourCard, tour_card_id) is not None

    async def get_tier(self, tier_id: TierId) -> TierSnapshot | None:
        row = await self.db.get(Tier, tier_id)
        if row is None:
            return None
        return TierSnapshot(
            id=TierId(row.id), name=row.name,
            points=tuple(row.points or ()), payouts=tuple(row.payouts or ()),
        )


class SqlStandingsSource:
    """StandingsStore: loads a whole season in five queries, writes card totals back."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_standings_snapshot(
        self, season_id: SeasonId,
    ) -> StandingsSnapshot | None:
        if await self.db.get(Season, season_id) is None:
            return None

        tours = (await self.db.execute(
            select(Tour).where(Tour.season_id == season_id),
        )).scalars().all()
        tiers = (await self.db.execute(
            select(Tier).where(Tier.season_id == season_id),
        )).scalars().all()
        tournaments = (await self.db.execute(
            select(Tournament).where(Tournament.season_id == season_id),
        )).scalars().all()
        cards = (await self.db.execute(
            select(TourCard).where(TourCard.season_id == season_id),
        )).scalars().all()
        tournament_ids = [t.id for t in tournaments]
        teams = []
        if tournament_ids:
            teams = (await self.db.execute(
                select(Team).where(Team.tournament_id.in_(tournament_ids)),
            )).scalars().all()

        return StandingsSnapshot(
            season_id=season_id,
            tours=tuple(
                TourSnapshot(
                    id=TourId(t.id), name=t.name,
                    playoff_spots=tuple(t.playoff_spots or ()),
                )
                for t in tours
            ),
            tiers=tuple(
                TierSnapshot(
                    id=TierId(t.id), name=t.name,
                    points=tuple(t.points or ()), payouts=tuple(t.payouts or ()),
                )
                for t in tiers
            ),
            tournaments=tuple(_tournament_snapshot(t) for t in tournaments),
            tour_cards=tuple(_tour_card_snapshot(c) for c in cards),
            teams=tuple(_team_result(t) for t in teams),
        )

    async def save_card_totals(self, totals: Sequence[CardTotals]) -> int:
        saved = 0
        for total in totals:
            card = await self.db.get(TourCard, total.tour_card_id)
            if card is None:
                continue
            card.points = total.points
            card.earnings = total.earnings
            card.current_position = total.current_position
            card.playoff = int(total.playoff)
            card.wins = total.wins
            card.top_ten = total.top_ten
            card.made_cut = total.made_cut
            card.appearances = total.appearances
            saved += 1
        await self.db.commit()
        return saved


class SqlTeamResultsStore:
    """TeamResultsStore: team results for one tournament and their awards."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_results(self, tournament_id: TournamentId) -> list[TeamResult]:
        rows = (await self.db.execute(
            select(Team).where(Team.tournament_id == tournament_id),
        )).scalars().all()
        return [_team_result(r) for r in rows]

    async def playoff_brackets(
        self, tournament_id: TournamentId,
    ) -> dict[TourCardId, PlayoffBracket]:
        result = await self.db.execute(
            select(TourCard.id, TourCard.playoff)
            .join(Team, Team.tour_card_id == TourCard.id)
            .where(Team.tournament_id == tournament_id),
        )
        return {
            TourCardId(card_id): PlayoffBracket(playoff or 0)
            for card_id, playoff in result.all()
        }

    async def save_awards(
        self, tournament_id: TournamentId, awards: Sequence[TeamAward],
    ) -> int:
        """Store team awards and mark the tournament completed in one commit."""
        tournament = await self.db.get(Tournament, tournament_id)
        if tournament is None:
            raise ResourceNotFoundError("Tournament", str(tournament_id))
        saved = 0
        for award in awards:
            team = await self.db.get(Team, award.team_id)
            if team is None:
                continue
            team.position = award.position
            team.points = award.points
            team.earnings = award.earnings
            saved += 1
        tournament.status = TournamentStatus.COMPLETED.value
        await self.db.commit()
        return saved
