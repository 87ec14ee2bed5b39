from __future__ import annotations

import logging
import re

from core.rooms.directory import LobbyDirectory
from core.rooms.models import JoinResult, JoinStatus, RoomRecord

_ROOM_ID_PATTERN = re.compile(r"^[0-9]+$")
_MAX_ROOM_ID = 2**64 - 1


def parse_room_id(room_id: str) -> int | None:
    """Return the directory's numeric lobby id, or None when it is not one."""
    candidate = (room_id or "").strip()
    if not _ROOM_ID_PATTERN.match(candidate):
        return None

    value = int(candidate)
    if value == 0 or value > _MAX_ROOM_ID:
        return None
    return value


class JoinCoordinator:
    def __init__(self, directory: LobbyDirectory, logger: logging.Logger | None = None) -> None:
        self._directory = directory
        self._logger = logger or logging.getLogger("lobbydeck.rooms.join")

    def join(self, room: RoomRecord) -> JoinResult:
        self._logger.info("Join requested for %s (ID: %s)", room.display_name, room.room_id)

        lobby_id = parse_room_id(room.room_id)
        if lobby_id is None:
            self._logger.error("Room ID is empty or not a lobby id: %r", room.room_id)
            return JoinResult(
                accepted=False,
                status=JoinStatus.MALFORMED,
                room_id=room.room_id,
                display_name=room.display_name,
            )

        try:
            self._directory.request_join(str(lobby_id))
        except Exception:
            self._logger.exception("Error joining room %s", room.room_id)
            return JoinResult(
                accepted=False,
                status=JoinStatus.FAILED,
                room_id=room.room_id,
                display_name=room.display_name,
            )

        return JoinResult(
            accepted=True,
            status=JoinStatus.REQUESTED,
            room_id=str(lobby_id),
            display_name=room.display_name,
        )
