from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, Protocol

from core.rooms.models import LobbyQuery

QueryCallback = Callable[[Sequence[Any], bool], None]


class LobbyDirectory(Protocol):
    """Matchmaking directory the room discovery talks to.

    ``query`` must return immediately; the directory later invokes the
    callback on the same thread with ``(entries, transport_failed)``.
    Entries are opaque and only read back through the accessor methods.
    """

    def query_ready(self) -> bool: ...

    def query(self, filters: LobbyQuery, on_complete: QueryCallback) -> object: ...

    def request_join(self, room_id: str) -> None: ...

    def get_entry_id(self, entry: Any) -> str: ...

    def get_entry_field(self, entry: Any, key: str) -> str: ...

    def get_member_count(self, entry: Any) -> int: ...

    def get_owner(self, entry: Any) -> str: ...
