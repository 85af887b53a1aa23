"""Team Picker: pick rules, grouped view model, and the picker dialog state machine.

Invariants:
    - A complete team has exactly TEAM_SIZE golfers, at most MAX_PER_GROUP per numeric group
    - Golfers without a numeric group are unconstrained by the group cap
    - toggle() never raises: an add that breaks a rule is a no-op, a remove always succeeds
    - A failed save keeps the selection so the user can retry without re-picking
    - Phases: closed → loading → {empty_pool | ready} → saving → {save_error | closed}

Design Decisions:
    - Selection is an ordered tuple: order of picking is preserved for the upsert
    - PickerState is a dataclass mutated only through its transition methods;
      derive_picker_view() is pure and returns one of three explicit view records
    - Group key 0 collects ungrouped golfers ("Ungrouped") and is never capped
"""

from dataclasses import dataclass, field
from typing import Sequence, Union

from fairway.core.domain_types import GolferApiId, PickerPhase
from fairway.core.errors import InvalidPickerTransitionError
from fairway.core.league_snapshot import PickPoolEntry


TEAM_SIZE: int = 10
MAX_PER_GROUP: int = 2
UNGROUPED_KEY: int = 0
EMPTY_POOL_MESSAGE = "No golfers available for this tournament yet."
SAVE_FAILED_MESSAGE = "Failed to save team."


# ─── Pick rules ──────────────────────────────────────────────────

def _group_of(golfer_id: GolferApiId, pool: Sequence[PickPoolEntry]) -> int | None:
    for entry in pool:
        if entry.golfer_api_id == golfer_id:
            return entry.group if isinstance(entry.group, int) else None
    return None


def selected_count_by_group(
    selection: Sequence[GolferApiId], pool: Sequence[PickPoolEntry],
) -> dict[int, int]:
    counts: dict[int, int] = {}
    for golfer_id in selection:
        group = _group_of(golfer_id, pool)
        if group is None:
            continue
        counts[group] = counts.get(group, 0) + 1
    return counts


def can_add(
    selection: Sequence[GolferApiId],
    golfer_id: GolferApiId,
    pool: Sequence[PickPoolEntry],
) -> bool:
    if golfer_id in selection:
        return False
    if len(selection) >= TEAM_SIZE:
        return False
    group = _group_of(golfer_id, pool)
    if group is None:
        return True
    return selected_count_by_group(selection, pool).get(group, 0) < MAX_PER_GROUP


def toggle(
    selection: Sequence[GolferApiId],
    golfer_id: GolferApiId,
    pool: Sequence[PickPoolEntry],
) -> tuple[GolferApiId, ...]:
    """Add or remove one golfer. Pure: returns the new selection."""
    if golfer_id in selection:
        return tuple(g for g in selection if g != golfer_id)
    if not can_add(selection, golfer_id, pool):
        return tuple(selection)
    return (*selection, golfer_id)


def can_save(selection: Sequence[GolferApiId]) -> bool:
    return len(selection) == TEAM_SIZE


# ─── Grouped view model ──────────────────────────────────────────

@dataclass(frozen=True)
class PickerGolfer:
    golfer_api_id: GolferApiId
    player_name: str
    group: int | None
    world_rank: int | None
    rating: float | None
    is_selected: bool
    is_disabled: bool


@dataclass(frozen=True)
class PickerGroup:
    group_key: int
    label: str
    selected_count: int
    golfers: tuple[PickerGolfer, ...]

    @property
    def is_complete(self) -> bool:
        return self.group_key != UNGROUPED_KEY and self.selected_count >= MAX_PER_GROUP


def build_pick_groups(
    pool: Sequence[PickPoolEntry],
    selection: Sequence[GolferApiId],
    is_saving: bool = False,
) -> list[PickerGroup]:
    """Group the pool for display and flag which golfers can still be added."""
    counts = selected_count_by_group(selection, pool)
    total = len(selection)

    by_group: dict[int, list[PickPoolEntry]] = {}
    for entry in pool:
        key = entry.group if isinstance(entry.group, int) else UNGROUPED_KEY
        by_group.setdefault(key, []).append(entry)

    groups = []
    for key in sorted(by_group):
        golfers = sorted(
            by_group[key],
            key=lambda g: g.world_rank if g.world_rank is not None else float("inf"),
        )
        rows = []
        for g in golfers:
            is_selected = g.golfer_api_id in selection
            exceeds_total = not is_selected and total >= TEAM_SIZE
            exceeds_group = (
                isinstance(g.group, int)
                and not is_selected
                and counts.get(g.group, 0) >= MAX_PER_GROUP
            )
            rows.append(PickerGolfer(
                golfer_api_id=g.golfer_api_id,
                player_name=g.player_name,
                group=g.group,
                world_rank=g.world_rank,
                rating=g.rating,
                is_selected=is_selected,
                is_disabled=exceeds_total or exceeds_group or is_saving,
            ))
        groups.append(PickerGroup(
            group_key=key,
            label="Ungrouped" if key == UNGROUPED_KEY else f"Group {key}",
            selected_count=0 if key == UNGROUPED_KEY else counts.get(key, 0),
            golfers=tuple(rows),
        ))
    return groups


# ─── Dialog state machine ────────────────────────────────────────

@dataclass
class PickerState:
    """Per-dialog picker state. Stateless across opens: open() re-hydrates."""

    phase: PickerPhase = PickerPhase.CLOSED
    pool: tuple[PickPoolEntry, ...] = ()
    selection: tuple[GolferApiId, ...] = ()
    error_message: str | None = None

    # Phases where the user can edit the selection
    _EDITABLE = (PickerPhase.READY, PickerPhase.SAVE_ERROR)

    @property
    def is_saving(self) -> bool:
        return self.phase == PickerPhase.SAVING

    @property
    def can_save(self) -> bool:
        return self.phase in self._EDITABLE and can_save(self.selection)

    def _require(self, action: str, *allowed: PickerPhase) -> None:
        if self.phase not in allowed:
            raise InvalidPickerTransitionError(self.phase.value, action)

    def open(self, existing_golfer_ids: Sequence[GolferApiId] | None = None) -> None:
        self._require("open", PickerPhase.CLOSED)
        self.phase = PickerPhase.LOADING
        self.pool = ()
        self.selection = tuple(existing_golfer_ids or ())
        self.error_message = None

    def pool_loaded(self, pool: Sequence[PickPoolEntry]) -> None:
        self._require("load pool", PickerPhase.LOADING)
        self.pool = tuple(pool)
        if not self.pool:
            self.phase = PickerPhase.EMPTY_POOL
            self.error_message = EMPTY_POOL_MESSAGE
            return
        self.phase = PickerPhase.READY

    def toggle(self, golfer_id: GolferApiId) -> None:
        self._require("toggle", *self._EDITABLE)
        self.phase = PickerPhase.READY
        self.error_message = None
        self.selection = toggle(self.selection, golfer_id, self.pool)

    def begin_save(self) -> None:
        self._require("save", *self._EDITABLE)
        if not can_save(self.selection):
            raise InvalidPickerTransitionError(
                self.phase.value, f"save {len(self.selection)}/{TEAM_SIZE} golfers",
            )
        self.phase = PickerPhase.SAVING
        self.error_message = None

    def save_failed(self, message: str | None = None) -> None:
        self._require("fail save", PickerPhase.SAVING)
        self.phase = PickerPhase.SAVE_ERROR
        self.error_message = message or SAVE_FAILED_MESSAGE

    def save_succeeded(self) -> None:
        self._require("finish save", PickerPhase.SAVING)
        self.close()

    def close(self) -> None:
        self.phase = PickerPhase.CLOSED
        self.pool = ()
        self.selection = ()
        self.error_message = None


# ─── Derived views ───────────────────────────────────────────────

@dataclass(frozen=True)
class PickerLoading:
    kind: str = "loading"
    total_selected: int = 0


@dataclass(frozen=True)
class PickerEmptyPool:
    message: str = EMPTY_POOL_MESSAGE
    kind: str = "empty_pool"
    total_selected: int = 0


@dataclass(frozen=True)
class PickerReady:
    groups: tuple[PickerGroup, ...] = field(default_factory=tuple)
    total_selected: int = 0
    can_save: bool = False
    is_saving: bool = False
    error_message: str | None = None
    kind: str = "ready"


PickerView = Union[PickerLoading, PickerEmptyPool, PickerReady]


def derive_picker_view(state: PickerState) -> PickerView:
    """Pure projection of PickerState into one of three view records."""
    if state.phase in (PickerPhase.CLOSED, PickerPhase.LOADING):
        return PickerLoading(total_selected=len(state.selection))
    if state.phase == PickerPhase.EMPTY_POOL:
        return PickerEmptyPool(
            message=state.error_message or EMPTY_POOL_MESSAGE,
            total_selected=len(state.selection),
        )
    return PickerReady(
        groups=tuple(build_pick_groups(state.pool, state.selection, state.is_saving)),
        total_selected=len(state.selection),
        can_save=state.can_save,
        is_saving=state.is_saving,
        error_message=state.error_message,
    )
