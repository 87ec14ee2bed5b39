from __future__ import annotations

from collections.abc import Iterable

from core.rooms.models import RoomRecord


class RoomCache:
    def __init__(self) -> None:
        self._rooms: dict[str, RoomRecord] = {}

    def replace(self, records: Iterable[RoomRecord]) -> None:
        rooms: dict[str, RoomRecord] = {}
        for record in records:
            rooms[record.room_id] = record
        self._rooms = rooms

    def all(self) -> list[RoomRecord]:
        return list(self._rooms.values())

    def get(self, room_id: str) -> RoomRecord | None:
        return self._rooms.get(room_id)

    def clear(self) -> None:
        self._rooms = {}

    def __len__(self) -> int:
        return len(self._rooms)

    def __contains__(self, room_id: object) -> bool:
        return room_id in self._rooms
