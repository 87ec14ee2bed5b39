from __future__ import annotations

from ui.components.session_cards import NewSaveCard, RoomCard, SaveCard, SessionCard

__all__ = ["NewSaveCard", "RoomCard", "SaveCard", "SessionCard"]
