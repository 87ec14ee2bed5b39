from core.rooms.directory import LobbyDirectory, QueryCallback
from core.rooms.discovery_poller import DiscoveryPoller
from core.rooms.discovery_service import SessionDiscoveryService
from core.rooms.discovery_state import MAX_ATTEMPTS, DiscoveryStateMachine
from core.rooms.file_directory import FileDirectoryClient
from core.rooms.join_coordinator import JoinCoordinator, parse_room_id
from core.rooms.models import (
    DEFAULT_LOBBY_QUERY,
    DiscoveryState,
    DiscoveryStatus,
    JoinResult,
    JoinStatus,
    LobbyQuery,
    RoomRecord,
)
from core.rooms.room_cache import RoomCache

__all__ = [
    "DEFAULT_LOBBY_QUERY",
    "DiscoveryPoller",
    "DiscoveryState",
    "DiscoveryStateMachine",
    "DiscoveryStatus",
    "FileDirectoryClient",
    "JoinCoordinator",
    "JoinResult",
    "JoinStatus",
    "LobbyDirectory",
    "LobbyQuery",
    "MAX_ATTEMPTS",
    "QueryCallback",
    "RoomCache",
    "RoomRecord",
    "SessionDiscoveryService",
    "parse_room_id",
]
