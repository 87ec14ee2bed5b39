from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


@dataclass(slots=True)
class SaveRecord:
    cycle_count: int
    registered_at: datetime | None
    player_names: list[str] = field(default_factory=list)
    last_modified: datetime | None = None


@dataclass(frozen=True, slots=True)
class SaveSlotRecord:
    slot_id: int
    cycle_count: int
    registered_at: datetime | None
    player_names: tuple[str, ...]
    last_modified: datetime

    def players_preview(self, limit: int = 3) -> list[str]:
        return list(self.player_names[:limit])


class SelectionMode(str, Enum):
    LOAD = "load"
    CREATE = "create"


class SelectionStatus(str, Enum):
    LOAD_REQUESTED = "load requested"
    CREATE_REQUESTED = "create requested"
    MISSING_SLOT = "missing slot"
    HOST_FAILED = "host failed"


@dataclass(slots=True)
class SelectionResult:
    accepted: bool
    status: SelectionStatus
    slot_id: int
