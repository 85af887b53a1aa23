"""Results Service: turn ingested team scores into finish positions and awards.

Invariants:
    - Regular tournaments: one field, tier points and payouts by finish
    - Playoff tournaments: gold and silver teams are labelled separately;
      no standings points, payouts only after the final event (silver table at +75)
    - Team score recomputed from rounds when rounds are present
    - Storing the awards completes the tournament; the season's tour cards are
      then rolled up from every completed event

Design Decisions:
    - Labels and awards come from core/team_scoring.py; this class only loads,
      splits by bracket, and hands the awards to the store
"""

import logging

from fairway.core.domain_types import PlayoffBracket, TournamentId
from fairway.core.errors import ResourceNotFoundError
from fairway.core.playoff_strokes import SILVER_PAYOUT_OFFSET
from fairway.core.repository_protocols import TeamResultsStore, TournamentSource
from fairway.core.team_scoring import (
    CUT_LABEL, TeamAward, TeamScoreLine, assign_finish_labels,
    award_earnings_only, award_points_and_earnings, calculate_team_score,
)
from fairway.services.standings_service import StandingsService

logger = logging.getLogger(__name__)


class ResultsService:
    """Computes and stores per-team finish awards for one tournament."""

    def __init__(
        self,
        tournaments: TournamentSource,
        results: TeamResultsStore,
        standings: StandingsService,
    ):
        self.tournaments = tournaments
        self.results = results
        self.standings = standings

    async def apply_awards(
        self, tournament_id: TournamentId, final_playoff_event: bool = False,
    ) -> list[TeamAward]:
        tournament = await self.tournaments.get_tournament(tournament_id)
        if tournament is None:
            raise ResourceNotFoundError("Tournament", str(tournament_id))
        tier = await self.tournaments.get_tier(tournament.tier_id)
        if tier is None:
            raise ResourceNotFoundError("Tier", str(tournament.tier_id))

        teams = await self.results.list_results(tournament_id)
        lines = [
            TeamScoreLine(
                team_id=t.id,
                score=calculate_team_score(t.rounds) if t.rounds else t.score,
                is_cut=t.position == CUT_LABEL,
            )
            for t in teams
        ]

        if not tier.is_playoff:
            awards = award_points_and_earnings(assign_finish_labels(lines), tier)
        else:
            brackets = await self.results.playoff_brackets(tournament_id)
            bracket_of = {t.id: brackets.get(t.tour_card_id) for t in teams}
            awards = []
            for bracket, offset in (
                (PlayoffBracket.GOLD, 0),
                (PlayoffBracket.SILVER, SILVER_PAYOUT_OFFSET),
            ):
                labels = assign_finish_labels(
                    line for line in lines if bracket_of[line.team_id] == bracket
                )
                bracket_awards = award_earnings_only(labels, tier, offset)
                if not final_playoff_event:
                    bracket_awards = [
                        TeamAward(a.team_id, a.position, 0, 0) for a in bracket_awards
                    ]
                awards.extend(bracket_awards)

        saved = await self.results.save_awards(tournament_id, awards)
        logger.info(
            f"Applied awards to {saved} team(s)",
            extra={"tournament_id": tournament_id},
        )

        if tournament.season_id is None:
            logger.warning(
                "Tournament has no season, card totals not rolled up",
                extra={"tournament_id": tournament_id},
            )
        else:
            await self.standings.recompute_card_totals(tournament.season_id)
        return awards
