"""Team Picker Session: drives the picker state machine around its two network calls.

Invariants:
    - open() always re-hydrates the selection from the current team
    - Exactly one pool fetch per open and one upsert per save; no retries, no timeout
    - A failed pool fetch closes the picker before re-raising, so the user can reopen
    - A failed upsert moves the picker to save_error with a user-facing message and
      keeps the selection; it is never re-raised
    - A successful upsert closes the picker (there is no distinct "saved" phase)

Design Decisions:
    - Follows read → pure transition → write: PickerState does every rule check,
      this class only awaits the collaborators between transitions
    - Saves go through TeamService.upsert_team, so the dialog and the PUT route
      share one lock check and one validate_team_golfers pass
"""

import logging
from typing import Sequence

from fairway.core.domain_types import (
    GolferApiId, TeamId, TourCardId, TournamentId,
)
from fairway.core.errors import FairwayError
from fairway.core.repository_protocols import PickPoolSource
from fairway.core.team_picker import (
    PickerState, PickerView, SAVE_FAILED_MESSAGE, derive_picker_view,
)
from fairway.services.team_service import TeamService

logger = logging.getLogger(__name__)


class TeamPickerSession:
    """One member's picker dialog for one tournament."""

    def __init__(
        self,
        pool_source: PickPoolSource,
        team_service: TeamService,
        tournament_id: TournamentId,
        tour_card_id: TourCardId,
    ):
        self.pool_source = pool_source
        self.team_service = team_service
        self.tournament_id = tournament_id
        self.tour_card_id = tour_card_id
        self.state = PickerState()
        self.team_id: TeamId | None = None

    @property
    def view(self) -> PickerView:
        return derive_picker_view(self.state)

    async def open(
        self, existing_golfer_ids: Sequence[GolferApiId] | None = None,
    ) -> PickerView:
        """closed → loading → {empty_pool | ready}."""
        self.state.open(existing_golfer_ids)
        try:
            pool = await self.pool_source.get_pick_pool(self.tournament_id)
        except Exception:
            logger.warning(
                "Pick pool fetch failed",
                extra={"tournament_id": self.tournament_id},
            )
            self.state.close()
            raise
        self.state.pool_loaded(pool)
        if not pool:
            logger.info(
                "Pick pool empty",
                extra={"tournament_id": self.tournament_id},
            )
        return self.view

    def toggle(self, golfer_id: GolferApiId) -> PickerView:
        self.state.toggle(golfer_id)
        return self.view

    async def save(self) -> PickerView:
        """ready → saving → {closed | save_error}."""
        self.state.begin_save()
        golfer_ids = list(self.state.selection)
        try:
            outcome = await self.team_service.upsert_team(
                self.tournament_id, self.tour_card_id, golfer_ids,
            )
        except FairwayError as e:
            logger.warning(
                f"Team save rejected: {e.message}",
                extra={"error_code": e.code, "tour_card_id": self.tour_card_id},
            )
            self.state.save_failed(e.context.user_message or e.message)
            return self.view
        except Exception as e:
            logger.error(
                f"Team save failed: {e}",
                extra={"tour_card_id": self.tour_card_id},
                exc_info=True,
            )
            self.state.save_failed(str(e) or SAVE_FAILED_MESSAGE)
            return self.view

        self.team_id = outcome.team_id
        self.state.save_succeeded()
        return self.view

    def close(self) -> None:
        self.state.close()
