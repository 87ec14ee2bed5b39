from __future__ import annotations

from core.rooms.models import RoomRecord
from core.rooms.room_cache import RoomCache


def _room(room_id: str, players: int = 1) -> RoomRecord:
    return RoomRecord(
        room_id=room_id,
        host_id="host",
        player_count=players,
        max_players=4,
        status="Waiting",
        display_name=f"Room {room_id}",
        discovered_at=0.0,
    )


def test_replace_is_wholesale() -> None:
    cache = RoomCache()
    cache.replace([_room("1"), _room("2")])
    cache.replace([_room("3")])

    assert [room.room_id for room in cache.all()] == ["3"]
    assert "1" not in cache
    assert len(cache) == 1


def test_duplicate_ids_keep_first_position_with_latest_data() -> None:
    cache = RoomCache()
    cache.replace([_room("1", players=1), _room("2"), _room("1", players=3)])

    assert [room.room_id for room in cache.all()] == ["1", "2"]
    assert cache.get("1").player_count == 3


def test_clear() -> None:
    cache = RoomCache()
    cache.replace([_room("1")])
    cache.clear()

    assert cache.all() == []
    assert cache.get("1") is None


def test_open_slots_never_negative() -> None:
    room = RoomRecord("9", "host", 6, 4, "Waiting", "Busy", 0.0)

    assert room.open_slots == 0
    assert room.is_full is True
