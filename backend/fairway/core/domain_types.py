"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - Document ids (tour cards, teams, tournaments...) wrap UUIDs
    - Golfers are identified by their data-provider API id (int), not a UUID
    - All valid states encoded as Enums, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str/int Enums: serialize to JSON without custom encoders
"""

from enum import Enum, IntEnum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

SeasonId = NewType("SeasonId", UUID)
TourId = NewType("TourId", UUID)
TierId = NewType("TierId", UUID)
TournamentId = NewType("TournamentId", UUID)
TourCardId = NewType("TourCardId", UUID)
TeamId = NewType("TeamId", UUID)
MemberId = NewType("MemberId", UUID)
GolferApiId = NewType("GolferApiId", int)


# ─── Enums ───────────────────────────────────────────────────────

class PlayoffBracket(IntEnum):
    """Tour card playoff flag; 0 means not qualified."""
    NONE = 0
    GOLD = 1
    SILVER = 2


class TournamentStatus(str, Enum):
    """Tournament lifecycle. Teams are frozen once not UPCOMING."""
    UPCOMING = "upcoming"
    ACTIVE = "active"
    COMPLETED = "completed"


class PickerPhase(str, Enum):
    """Team picker dialog phases.

    closed → loading → {empty_pool | ready} → saving → {save_error | closed}
    save_error behaves like ready (the selection survives for a retry).
    """
    CLOSED = "closed"
    LOADING = "loading"
    EMPTY_POOL = "empty_pool"
    READY = "ready"
    SAVING = "saving"
    SAVE_ERROR = "save_error"


class PositionTrend(str, Enum):
    """Direction of a standings move, for display."""
    UP = "up"
    DOWN = "down"
    NEUTRAL = "neutral"
