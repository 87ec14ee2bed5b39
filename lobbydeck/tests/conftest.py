from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Any

import pytest
from PySide6.QtCore import QCoreApplication

from core.config import BrowserSettings
from core.rooms.directory import QueryCallback
from core.rooms.models import LobbyQuery
from core.saves.models import SaveRecord


class FakeClock:
    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeDirectory:
    def __init__(self) -> None:
        self.ready = True
        self.raise_on_query = False
        self.queries: list[tuple[LobbyQuery, QueryCallback]] = []
        self.joins: list[str] = []

    def query_ready(self) -> bool:
        return self.ready

    def query(self, filters: LobbyQuery, on_complete: QueryCallback) -> int:
        if self.raise_on_query:
            raise RuntimeError("directory offline")
        self.queries.append((filters, on_complete))
        return len(self.queries)

    def deliver(self, entries: list[dict[str, Any]], transport_failed: bool = False, index: int = -1) -> None:
        _filters, on_complete = self.queries[index]
        on_complete(entries, transport_failed)

    def request_join(self, room_id: str) -> None:
        self.joins.append(room_id)

    def get_entry_id(self, entry: dict[str, Any]) -> str:
        if entry.get("broken"):
            raise RuntimeError("lobby data unavailable")
        return str(entry["id"])

    def get_entry_field(self, entry: dict[str, Any], key: str) -> str:
        return str(entry.get("data", {}).get(key, ""))

    def get_member_count(self, entry: dict[str, Any]) -> int:
        return int(entry.get("members", 0))

    def get_owner(self, entry: dict[str, Any]) -> str:
        return str(entry.get("owner", ""))


class FakeStorage:
    def __init__(self, records: dict[int, SaveRecord] | None = None) -> None:
        self.records = dict(records or {})
        self.broken: set[int] = set()
        self.loaded: list[int] = []

    def exists(self, slot_id: int) -> bool:
        return slot_id in self.records or slot_id in self.broken

    def load(self, slot_id: int) -> SaveRecord | None:
        self.loaded.append(slot_id)
        if slot_id in self.broken:
            raise OSError(f"slot {slot_id} unreadable")
        return self.records.get(slot_id)


class FakeGateway:
    def __init__(self, succeed: bool = True) -> None:
        self.succeed = succeed
        self.loaded: list[int] = []
        self.created: list[int] = []

    def load_and_create_session(self, slot_id: int) -> bool:
        self.loaded.append(slot_id)
        return self.succeed

    def create_session_in_slot(self, slot_id: int) -> bool:
        self.created.append(slot_id)
        return self.succeed


def make_lobby(
    lobby_id: str,
    members: int = 1,
    name: str | None = None,
    status: str | None = None,
    max_players: int | None = None,
    owner: str = "76561190000000001",
    broken: bool = False,
) -> dict[str, Any]:
    data: dict[str, str] = {}
    if name is not None:
        data["DungeonName"] = name
    if status is not None:
        data["Status"] = status
    if max_players is not None:
        data["MaxPlayers"] = str(max_players)
    return {"id": lobby_id, "owner": owner, "members": members, "data": data, "broken": broken}


def make_save(cycle: int, modified: datetime, players: list[str] | None = None) -> SaveRecord:
    return SaveRecord(
        cycle_count=cycle,
        registered_at=modified,
        player_names=list(players or []),
        last_modified=modified,
    )


@pytest.fixture(scope="session", autouse=True)
def qt_core_app() -> QCoreApplication:
    return QCoreApplication.instance() or QCoreApplication([])


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def directory() -> FakeDirectory:
    return FakeDirectory()


@pytest.fixture
def storage() -> FakeStorage:
    return FakeStorage()


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def settings() -> BrowserSettings:
    return BrowserSettings(refresh_interval_seconds=5.0, items_per_page=4, max_save_slots=20)


@pytest.fixture
def lobby() -> Callable[..., dict[str, Any]]:
    return make_lobby


@pytest.fixture
def save_record() -> Callable[..., SaveRecord]:
    return make_save
