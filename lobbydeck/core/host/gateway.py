from __future__ import annotations

from typing import Protocol


class HostSessionGateway(Protocol):
    def load_and_create_session(self, slot_id: int) -> bool: ...

    def create_session_in_slot(self, slot_id: int) -> bool: ...
