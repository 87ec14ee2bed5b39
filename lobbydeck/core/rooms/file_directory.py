from __future__ import annotations

import json
import logging
from collections.abc import Callable
from itertools import count
from pathlib import Path
from typing import Any

from PySide6.QtCore import QTimer

from core.rooms.directory import QueryCallback
from core.rooms.models import LobbyQuery

DISTANCE_ORDER = ("close", "default", "far", "worldwide")

Scheduler = Callable[[Callable[[], None]], None]
JoinHandler = Callable[[str], object]


def _qt_scheduler(callback: Callable[[], None]) -> None:
    QTimer.singleShot(0, callback)


def _distance_rank(value: object) -> int:
    text = str(value or "close").strip().lower()
    if text in DISTANCE_ORDER:
        return DISTANCE_ORDER.index(text)
    return len(DISTANCE_ORDER) - 1


class FileDirectoryClient:
    """Lobby directory backed by a JSON listing file.

    The listing has the shape ``{"lobbies": [{"id", "owner", "members",
    "distance", "data": {...}}]}``. Results are delivered through the
    scheduler, never from inside ``query``.
    """

    def __init__(
        self,
        listing_path: Path,
        join_handler: JoinHandler | None = None,
        scheduler: Scheduler | None = None,
        default_max_players: int = 4,
        logger: logging.Logger | None = None,
    ) -> None:
        self._listing_path = listing_path
        self._join_handler = join_handler
        self._scheduler = scheduler or _qt_scheduler
        self._default_max_players = max(1, int(default_max_players))
        self._logger = logger or logging.getLogger("lobbydeck.rooms.directory")
        self._handles = count(1)

    @property
    def listing_path(self) -> Path:
        return self._listing_path

    def query_ready(self) -> bool:
        return self._listing_path.is_file()

    def query(self, filters: LobbyQuery, on_complete: QueryCallback) -> int:
        handle = next(self._handles)
        try:
            lobbies = self._read_listing()
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValueError) as error:
            self._logger.warning("Lobby listing could not be read: %s", error)
            self._scheduler(lambda: on_complete([], True))
            return handle

        matches = [lobby for lobby in lobbies if self._matches(lobby, filters)]
        matches = matches[: max(0, filters.max_results)]
        self._logger.info("Lobby query %s matched %s of %s lobbies", handle, len(matches), len(lobbies))
        self._scheduler(lambda: on_complete(matches, False))
        return handle

    def request_join(self, room_id: str) -> None:
        self._logger.info("Attempting to join lobby: %s", room_id)
        if self._join_handler is None:
            self._logger.warning("No join handler configured for lobby %s", room_id)
            return
        self._join_handler(room_id)

    def get_entry_id(self, entry: Any) -> str:
        return str(entry.get("id") or "")

    def get_entry_field(self, entry: Any, key: str) -> str:
        data = entry.get("data")
        if not isinstance(data, dict):
            return ""
        value = data.get(key)
        return "" if value is None else str(value)

    def get_member_count(self, entry: Any) -> int:
        return int(entry.get("members", 0))

    def get_owner(self, entry: Any) -> str:
        return str(entry.get("owner") or "")

    def _read_listing(self) -> list[dict[str, Any]]:
        payload = json.loads(self._listing_path.read_text(encoding="utf-8"))
        if isinstance(payload, dict):
            payload = payload.get("lobbies", [])
        if not isinstance(payload, list):
            raise ValueError("lobby listing must be a list of lobbies")
        return [item for item in payload if isinstance(item, dict)]

    def _matches(self, lobby: dict[str, Any], filters: LobbyQuery) -> bool:
        if _distance_rank(lobby.get("distance")) > _distance_rank(filters.distance):
            return False

        try:
            members = int(lobby.get("members", 0))
            max_players = int(self.get_entry_field(lobby, "MaxPlayers") or self._default_max_players)
        except (TypeError, ValueError):
            # Unreadable counts pass through; room extraction skips them.
            return True

        return max_players - members >= filters.min_open_slots
