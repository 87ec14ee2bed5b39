from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from core.paths import get_config_path, get_default_lobby_listing_path, get_default_saves_root

MIN_REFRESH_INTERVAL_SECONDS = 1.0


@dataclass(frozen=True, slots=True)
class BrowserSettings:
    enabled: bool = True
    refresh_interval_seconds: float = 5.0
    items_per_page: int = 4
    max_save_slots: int = 10000
    default_max_players: int = 4
    room_name_key: str = "DungeonName"
    room_status_key: str = "Status"


class AppConfig:
    _SUPPORTED_LANGUAGES = {"en", "de"}

    _DEFAULTS: dict[str, Any] = {
        "language": "en",
        "log_level": "INFO",
        "enhanced_browser_enabled": True,
        "refresh_interval_seconds": 5.0,
        "items_per_page": 4,
        "max_save_slots": 10000,
        "default_max_players": 4,
        "saves_root": str(get_default_saves_root()),
        "lobby_listing_path": str(get_default_lobby_listing_path()),
        "host_command": [],
        "toggle_hotkey": "Insert",
        "room_name_key": "DungeonName",
        "room_status_key": "Status",
    }

    def __init__(self, config_path: Path | None = None) -> None:
        self._config_path = config_path or get_config_path()
        self._data: dict[str, Any] = {}
        self._load_or_create()

    def _load_or_create(self) -> None:
        if not self._config_path.exists():
            self._data = dict(self._DEFAULTS)
            self.save()
            return

        try:
            content = self._config_path.read_text(encoding="utf-8")
            loaded = json.loads(content)
            if not isinstance(loaded, dict):
                loaded = {}
        except (json.JSONDecodeError, OSError):
            loaded = {}

        self._data = dict(self._DEFAULTS)
        self._data.update(loaded)

        language = str(self._data.get("language", self._DEFAULTS["language"])).strip().lower()
        if language not in self._SUPPORTED_LANGUAGES:
            language = self._DEFAULTS["language"]
        self._data["language"] = language

        self.save()

    def save(self) -> None:
        self._config_path.parent.mkdir(parents=True, exist_ok=True)
        self._config_path.write_text(
            json.dumps(self._data, indent=2, ensure_ascii=False),
            encoding="utf-8",
        )

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value
        self.save()

    def get_language(self) -> str:
        return str(self._data.get("language", self._DEFAULTS["language"]))

    def set_language(self, language: str) -> None:
        self._data["language"] = language
        self.save()

    def get_log_level(self) -> str:
        return str(self._data.get("log_level") or self._DEFAULTS["log_level"]).upper()

    def get_enhanced_browser_enabled(self) -> bool:
        return bool(self._data.get("enhanced_browser_enabled", self._DEFAULTS["enhanced_browser_enabled"]))

    def set_enhanced_browser_enabled(self, enabled: bool) -> None:
        self._data["enhanced_browser_enabled"] = bool(enabled)
        self.save()

    def get_refresh_interval_seconds(self) -> float:
        value = self._float_value("refresh_interval_seconds")
        return max(MIN_REFRESH_INTERVAL_SECONDS, value)

    def get_items_per_page(self) -> int:
        return max(1, self._int_value("items_per_page"))

    def get_max_save_slots(self) -> int:
        return max(1, self._int_value("max_save_slots"))

    def get_default_max_players(self) -> int:
        return max(1, self._int_value("default_max_players"))

    def get_saves_root(self) -> str:
        return str(self._data.get("saves_root", self._DEFAULTS["saves_root"]))

    def set_saves_root(self, root_path: str) -> None:
        self._data["saves_root"] = str(root_path)
        self.save()

    def get_lobby_listing_path(self) -> str:
        return str(self._data.get("lobby_listing_path", self._DEFAULTS["lobby_listing_path"]))

    def get_host_command(self) -> list[str]:
        command = self._data.get("host_command", self._DEFAULTS["host_command"])
        if isinstance(command, str):
            return [command] if command.strip() else []
        if isinstance(command, list):
            return [str(item) for item in command]
        return []

    def set_host_command(self, command: list[str]) -> None:
        self._data["host_command"] = [str(item) for item in command]
        self.save()

    def get_toggle_hotkey(self) -> str:
        return str(self._data.get("toggle_hotkey", self._DEFAULTS["toggle_hotkey"]))

    def set_toggle_hotkey(self, hotkey: str) -> None:
        self._data["toggle_hotkey"] = str(hotkey)
        self.save()

    def browser_settings(self) -> BrowserSettings:
        return BrowserSettings(
            enabled=self.get_enhanced_browser_enabled(),
            refresh_interval_seconds=self.get_refresh_interval_seconds(),
            items_per_page=self.get_items_per_page(),
            max_save_slots=self.get_max_save_slots(),
            default_max_players=self.get_default_max_players(),
            room_name_key=str(self._data.get("room_name_key") or self._DEFAULTS["room_name_key"]),
            room_status_key=str(self._data.get("room_status_key") or self._DEFAULTS["room_status_key"]),
        )

    def _int_value(self, key: str) -> int:
        try:
            return int(self._data.get(key, self._DEFAULTS[key]))
        except (TypeError, ValueError):
            return int(self._DEFAULTS[key])

    def _float_value(self, key: str) -> float:
        try:
            return float(self._data.get(key, self._DEFAULTS[key]))
        except (TypeError, ValueError):
            return float(self._DEFAULTS[key])
