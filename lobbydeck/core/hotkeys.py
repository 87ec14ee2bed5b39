from __future__ import annotations

import logging
from dataclasses import dataclass

from PySide6.QtGui import QKeySequence

_logger = logging.getLogger("lobbydeck.hotkeys")

_MODIFIERS = ("ctrl", "alt", "shift")


@dataclass(frozen=True, slots=True)
class HotkeyConfig:
    key: str = ""
    ctrl: bool = False
    alt: bool = False
    shift: bool = False

    @property
    def is_set(self) -> bool:
        return self.key != ""

    def __str__(self) -> str:
        if not self.is_set:
            return "None"
        parts = []
        if self.ctrl:
            parts.append("Ctrl")
        if self.alt:
            parts.append("Alt")
        if self.shift:
            parts.append("Shift")
        parts.append(self.key)
        return "+".join(parts)

    def to_key_sequence(self) -> QKeySequence:
        if not self.is_set:
            return QKeySequence()
        return QKeySequence.fromString(str(self), QKeySequence.SequenceFormat.PortableText)

    @classmethod
    def parse(cls, text: str | None) -> HotkeyConfig:
        cleaned = (text or "").strip()
        if cleaned == "" or cleaned.lower() == "none":
            return cls()

        flags = {name: False for name in _MODIFIERS}
        key_parts: list[str] = []
        for token in cleaned.split("+"):
            name = token.strip()
            if name.lower() in flags:
                flags[name.lower()] = True
            elif name != "":
                key_parts.append(name)

        if len(key_parts) != 1:
            _logger.warning("Failed to parse hotkey: %s", text)
            return cls()

        hotkey = cls(key=key_parts[0], **flags)
        sequence = hotkey.to_key_sequence()
        if sequence.isEmpty() or sequence.toString(QKeySequence.SequenceFormat.PortableText) == "":
            _logger.warning("Unknown key in hotkey: %s", text)
            return cls()
        return hotkey
