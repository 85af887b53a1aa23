"""ORM Models: SQLAlchemy declarative models for all league entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Season is the root; tours, tiers, tournaments and tour cards are scoped by season_id

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all
"""

from fairway.models.season import Season  # noqa: F401
from fairway.models.tour import Tour  # noqa: F401
from fairway.models.tier import Tier  # noqa: F401
from fairway.models.tournament import Tournament  # noqa: F401
from fairway.models.tour_card import TourCard  # noqa: F401
from fairway.models.team import Team  # noqa: F401
from fairway.models.golfer import Golfer  # noqa: F401
from fairway.models.tournament_golfer import TournamentGolfer  # noqa: F401
