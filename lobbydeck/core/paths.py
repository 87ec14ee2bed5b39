from __future__ import annotations

import os
import sys
from pathlib import Path

APP_NAME = "LobbyDeck"
HOME_OVERRIDE_ENV = "LOBBYDECK_HOME"


def _platform_config_root() -> Path:
    if os.name == "nt":
        appdata = os.getenv("APPDATA")
        return Path(appdata) if appdata else Path.home() / "AppData" / "Roaming"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    xdg = os.getenv("XDG_CONFIG_HOME")
    return Path(xdg) if xdg else Path.home() / ".config"


def get_app_data_dir() -> Path:
    override = os.getenv(HOME_OVERRIDE_ENV, "").strip()
    app_data_dir = Path(override).expanduser() if override else _platform_config_root() / APP_NAME
    app_data_dir.mkdir(parents=True, exist_ok=True)
    return app_data_dir.resolve()


def get_logs_dir() -> Path:
    return get_app_data_dir() / "logs"


def get_config_path() -> Path:
    return get_app_data_dir() / "settings.json"


def get_default_saves_root() -> Path:
    return get_app_data_dir() / "saves"


def get_default_lobby_listing_path() -> Path:
    return get_app_data_dir() / "lobbies.json"


def ensure_runtime_directories() -> list[Path]:
    created = [get_logs_dir(), get_default_saves_root()]
    for directory in created:
        directory.mkdir(parents=True, exist_ok=True)
    return created
