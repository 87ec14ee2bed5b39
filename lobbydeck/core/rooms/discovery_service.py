from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from typing import Any

from PySide6.QtCore import QObject, Signal

from core.config import BrowserSettings
from core.rooms.directory import LobbyDirectory
from core.rooms.discovery_state import DiscoveryStateMachine
from core.rooms.models import DEFAULT_LOBBY_QUERY, DiscoveryState, DiscoveryStatus, LobbyQuery, RoomRecord
from core.rooms.room_cache import RoomCache

MAX_PLAYERS_KEY = "MaxPlayers"
DEFAULT_ROOM_STATUS = "Waiting"


class SessionDiscoveryService(QObject):
    """Polls the lobby directory for joinable rooms while the rooms tab is open.

    Only ``tick`` and directory callbacks mutate state; both run on the Qt
    thread. Each query remembers the epoch it was issued in. A callback from
    an older epoch (the tab was left or re-entered since) leaves state, status
    and the retry clock alone. It refreshes the cache only until the current
    epoch has delivered results of its own.
    """

    status_changed = Signal(str)
    rooms_changed = Signal()

    def __init__(
        self,
        directory: LobbyDirectory,
        settings: BrowserSettings | None = None,
        cache: RoomCache | None = None,
        state_machine: DiscoveryStateMachine | None = None,
        clock: Callable[[], float] = time.monotonic,
        query: LobbyQuery = DEFAULT_LOBBY_QUERY,
        logger: logging.Logger | None = None,
    ) -> None:
        super().__init__()
        self._directory = directory
        self._settings = settings or BrowserSettings()
        self._cache = cache or RoomCache()
        self._logger = logger or logging.getLogger("lobbydeck.rooms")
        self._machine = state_machine or DiscoveryStateMachine(logger=self._logger)
        self._clock = clock
        self._query = query
        self._status = DiscoveryStatus.IDLE
        self._tab_active = False
        self._epoch = 0
        self._last_finished_at: float | None = None
        self._cache_current = False

    @property
    def cache(self) -> RoomCache:
        return self._cache

    @property
    def rooms(self) -> list[RoomRecord]:
        return self._cache.all()

    @property
    def state(self) -> DiscoveryState:
        return self._machine.state

    @property
    def status(self) -> DiscoveryStatus:
        return self._status

    @property
    def attempts(self) -> int:
        return self._machine.attempts

    @property
    def epoch(self) -> int:
        return self._epoch

    @property
    def tab_active(self) -> bool:
        return self._tab_active

    @property
    def in_flight(self) -> bool:
        return self._machine.in_flight

    @property
    def refresh_interval(self) -> float:
        return self._settings.refresh_interval_seconds

    def on_tab_activated(self) -> bool:
        self._epoch += 1
        self._cache_current = False
        self._tab_active = True
        self._machine.reset(clear_attempts=True)
        self._last_finished_at = None
        self._logger.info("Switched to rooms tab, starting search")
        return self.start_query()

    def on_tab_deactivated(self) -> None:
        self._epoch += 1
        self._cache_current = False
        self._tab_active = False
        self._machine.reset()
        self._set_status(DiscoveryStatus.IDLE)

    def tick(self, current_time: float | None = None) -> bool:
        if not self._tab_active or self._machine.in_flight:
            return False

        now = self._clock() if current_time is None else current_time
        if self._last_finished_at is not None and now - self._last_finished_at < self._settings.refresh_interval_seconds:
            return False

        return self.start_query()

    def start_query(self) -> bool:
        if not self._directory_ready():
            self._logger.warning("Lobby directory not ready, room search suppressed")
            self._last_finished_at = self._clock()
            self._set_status(DiscoveryStatus.UNAVAILABLE)
            return False

        if not self._machine.start_query():
            return False

        epoch = self._epoch
        self._logger.info("Starting room search (attempt %s)", self._machine.attempts)
        self._set_status(DiscoveryStatus.SEARCHING)

        def on_complete(entries: Sequence[Any], transport_failed: bool) -> None:
            self._on_query_complete(epoch, entries, transport_failed)

        try:
            self._directory.query(self._query, on_complete)
        except Exception:
            self._logger.exception("Room search could not be issued")
            self._machine.fail()
            self._last_finished_at = self._clock()
            self._set_status(DiscoveryStatus.SEARCH_FAILED)
            return False

        return True

    def _directory_ready(self) -> bool:
        try:
            return bool(self._directory.query_ready())
        except Exception as error:
            self._logger.warning("Lobby directory readiness check failed: %s", error)
            return False

    def _on_query_complete(self, epoch: int, entries: Sequence[Any], transport_failed: bool) -> None:
        if epoch != self._epoch:
            self._logger.warning(
                "Room search result from a previous tab session (epoch %s, current %s)",
                epoch,
                self._epoch,
            )
            if not transport_failed and not self._cache_current:
                self._cache.replace(self._extract_rooms(entries))
            return

        self._last_finished_at = self._clock()

        if transport_failed:
            self._logger.error("Lobby search transport failure")
            self._machine.fail()
            self._set_status(DiscoveryStatus.SEARCH_FAILED)
            return

        rooms = self._extract_rooms(entries)
        self._cache.replace(rooms)
        self._cache_current = True
        self._machine.complete()

        if rooms:
            self._logger.info("Found %s available rooms", len(rooms))
            self._set_status(DiscoveryStatus.READY)
        else:
            self._logger.info("No rooms found, will retry on next refresh")
            self._set_status(DiscoveryStatus.NO_ROOMS)

        self.rooms_changed.emit()

    def _extract_rooms(self, entries: Sequence[Any]) -> list[RoomRecord]:
        self._logger.info("Processing %s lobbies", len(entries))
        rooms: dict[str, RoomRecord] = {}
        for index, entry in enumerate(entries):
            try:
                room = self._extract_room(entry)
            except Exception as error:
                self._logger.warning("Failed to extract room info for lobby %s: %s", index, error)
                continue
            rooms[room.room_id] = room

        # A repeated id keeps its first position with the later data. sorted() is
        # stable, so equal counts keep directory order.
        return sorted(rooms.values(), key=lambda room: room.player_count, reverse=True)

    def _extract_room(self, entry: Any) -> RoomRecord:
        room_id = str(self._directory.get_entry_id(entry) or "").strip()
        if room_id == "":
            raise ValueError("lobby entry has no identifier")

        display_name = self._directory.get_entry_field(entry, self._settings.room_name_key) or f"Room {room_id[:8]}"
        status = self._directory.get_entry_field(entry, self._settings.room_status_key) or DEFAULT_ROOM_STATUS
        player_count = max(0, int(self._directory.get_member_count(entry)))
        max_players = self._parse_max_players(self._directory.get_entry_field(entry, MAX_PLAYERS_KEY))

        room = RoomRecord(
            room_id=room_id,
            host_id=str(self._directory.get_owner(entry) or ""),
            player_count=player_count,
            max_players=max_players,
            status=status,
            display_name=display_name,
            discovered_at=self._clock(),
        )
        self._logger.debug(
            "Extracted room: %s | ID: %s | Players: %s/%s | Status: %s",
            room.display_name,
            room.room_id,
            room.player_count,
            room.max_players,
            room.status,
        )
        return room

    def _parse_max_players(self, raw: str | None) -> int:
        try:
            value = int(str(raw).strip()) if raw else 0
        except ValueError:
            value = 0
        return value if value > 0 else self._settings.default_max_players

    def _set_status(self, status: DiscoveryStatus) -> None:
        if self._status is status:
            return
        self._status = status
        self.status_changed.emit(status.value)
