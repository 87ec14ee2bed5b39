from __future__ import annotations

import json
import logging
from enum import Enum
from pathlib import Path

from PySide6.QtCore import QObject, Signal

from core.resources import get_translations_dir

DEFAULT_LANGUAGE = "en"

_logger = logging.getLogger("lobbydeck.i18n")


def status_key(prefix: str, status: Enum) -> str:
    """Catalog key for a status enum member, e.g. ``rooms.status.no_rooms``."""
    return f"{prefix}.{status.name.lower()}"


class I18nManager(QObject):
    """Per-language JSON catalogs with a single fallback language.

    Lookups try the current language, then the fallback, and finally return
    the key itself so a missing entry stays visible in the UI.
    """

    language_changed = Signal(str)

    def __init__(self, fallback_language: str = DEFAULT_LANGUAGE) -> None:
        super().__init__()
        self._fallback_language = fallback_language
        self._current_language = fallback_language
        self._catalogs: dict[str, dict[str, str]] = {}

    @property
    def current_language(self) -> str:
        return self._current_language

    def load_translations(self, translations_dir: Path | None = None) -> None:
        directory = translations_dir or get_translations_dir()
        catalogs: dict[str, dict[str, str]] = {}

        for file_path in sorted(directory.glob("*.json")) if directory.is_dir() else []:
            try:
                payload = json.loads(file_path.read_text(encoding="utf-8"))
            except (OSError, json.JSONDecodeError) as error:
                _logger.warning("Skipping translation catalog %s: %s", file_path.name, error)
                continue
            if isinstance(payload, dict):
                catalogs[file_path.stem] = {str(key): str(value) for key, value in payload.items()}

        self._catalogs = catalogs
        if self._fallback_language not in catalogs and catalogs:
            self._fallback_language = min(catalogs)
        if self._current_language not in catalogs:
            self._current_language = self._fallback_language

    def available_languages(self) -> list[str]:
        return sorted(self._catalogs)

    def missing_keys(self, language: str) -> set[str]:
        reference = self._catalogs.get(self._fallback_language, {})
        return set(reference) - set(self._catalogs.get(language, {}))

    def set_language(self, language: str, emit_signal: bool = True) -> None:
        if language not in self._catalogs:
            language = self._fallback_language
        if language == self._current_language:
            return

        self._current_language = language
        if emit_signal:
            self.language_changed.emit(language)

    def translate(self, key: str, **kwargs: object) -> str:
        template = (
            self._catalogs.get(self._current_language, {}).get(key)
            or self._catalogs.get(self._fallback_language, {}).get(key)
            or key
        )
        try:
            return template.format(**kwargs)
        except (KeyError, IndexError, ValueError):
            return template


_i18n = I18nManager()


def initialize_i18n(language: str) -> None:
    _i18n.load_translations()
    _i18n.set_language(language, emit_signal=False)


def get_i18n() -> I18nManager:
    return _i18n


def tr(key: str, **kwargs: object) -> str:
    return _i18n.translate(key, **kwargs)
