from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True, slots=True)
class RoomRecord:
    room_id: str
    host_id: str
    player_count: int
    max_players: int
    status: str
    display_name: str
    discovered_at: float

    @property
    def open_slots(self) -> int:
        # The directory may report more members than seats.
        return max(0, self.max_players - self.player_count)

    @property
    def is_full(self) -> bool:
        return self.player_count >= self.max_players

    def short_id(self, length: int = 8) -> str:
        return self.room_id[:length]


class DiscoveryState(str, Enum):
    IDLE = "idle"
    SEARCHING = "searching"
    COMPLETED = "completed"
    FAILED = "failed"


class DiscoveryStatus(str, Enum):
    IDLE = "idle"
    SEARCHING = "searching"
    READY = "ready"
    NO_ROOMS = "no rooms found, retrying"
    SEARCH_FAILED = "search failed, retrying"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True, slots=True)
class LobbyQuery:
    min_open_slots: int = 1
    distance: str = "close"
    max_results: int = 50


DEFAULT_LOBBY_QUERY = LobbyQuery()


class JoinStatus(str, Enum):
    REQUESTED = "join requested"
    MALFORMED = "malformed identifier"
    FAILED = "join failed"


@dataclass(frozen=True, slots=True)
class JoinResult:
    accepted: bool
    status: JoinStatus
    room_id: str
    display_name: str = ""
