"""Standings Service: derive the season standings view and roll up card totals.

Invariants:
    - get_standings is read-only and recomputes from the stored snapshot
    - recompute_card_totals is the only write: card totals from completed teams
    - Unknown season → ResourceNotFoundError; a season without tours → empty view
"""

import logging

from fairway.core.domain_types import MemberId, SeasonId
from fairway.core.errors import ResourceNotFoundError
from fairway.core.league_snapshot import StandingsSnapshot
from fairway.core.repository_protocols import StandingsStore
from fairway.core.season_rollup import CardTotals, roll_up_tour_cards
from fairway.core.standings_view import StandingsView, derive_standings

logger = logging.getLogger(__name__)


class StandingsService:
    """Impure shell around core.standings_view and core.season_rollup."""

    def __init__(self, source: StandingsStore):
        self.source = source

    async def _require_snapshot(self, season_id: SeasonId) -> StandingsSnapshot:
        snapshot = await self.source.get_standings_snapshot(season_id)
        if snapshot is None:
            raise ResourceNotFoundError("Season", str(season_id))
        return snapshot

    async def get_standings(
        self, season_id: SeasonId, member_id: MemberId | None = None,
    ) -> StandingsView:
        snapshot = await self._require_snapshot(season_id)
        if not snapshot.tours:
            logger.warning("Season has no tours", extra={"season_id": season_id})
        return derive_standings(snapshot, member_id)

    async def recompute_card_totals(self, season_id: SeasonId) -> list[CardTotals]:
        """Roll completed team awards up into every tour card of the season."""
        snapshot = await self._require_snapshot(season_id)
        totals = roll_up_tour_cards(
            snapshot.tour_cards, snapshot.teams, snapshot.tournaments, snapshot.tours,
        )
        saved = await self.source.save_card_totals(totals)
        logger.info(
            f"Rolled up {saved} tour card(s)",
            extra={"season_id": season_id},
        )
        return totals
