from __future__ import annotations

import pytest

from core.rooms.models import DiscoveryStatus, JoinStatus
from core.saves.models import SelectionStatus
from i18n.i18n import I18nManager, status_key


@pytest.fixture
def manager() -> I18nManager:
    manager = I18nManager()
    manager.load_translations()
    return manager


def test_bundled_languages(manager) -> None:
    assert manager.available_languages() == ["de", "en"]
    assert manager.missing_keys("de") == set()


@pytest.mark.parametrize("language", ["en", "de"])
def test_every_status_has_a_translation(manager, language) -> None:
    manager.set_language(language, emit_signal=False)
    keys = [status_key("rooms.status", status) for status in DiscoveryStatus]
    keys += [status_key("join.status", status) for status in JoinStatus]
    keys += [status_key("selection.status", status) for status in SelectionStatus]

    for key in keys:
        assert manager.translate(key, name="Crypt", slot=3) != key


def test_status_key() -> None:
    assert status_key("rooms.status", DiscoveryStatus.NO_ROOMS) == "rooms.status.no_rooms"


def test_missing_key_falls_back(tmp_path) -> None:
    (tmp_path / "en.json").write_text('{"greeting": "Hello {name}"}', encoding="utf-8")
    (tmp_path / "de.json").write_text("{}", encoding="utf-8")
    manager = I18nManager()
    manager.load_translations(tmp_path)
    manager.set_language("de", emit_signal=False)

    assert manager.translate("greeting", name="Ayla") == "Hello Ayla"
    assert manager.translate("unknown.key") == "unknown.key"
    assert manager.missing_keys("de") == {"greeting"}


def test_unknown_language_uses_fallback(manager) -> None:
    manager.set_language("fr", emit_signal=False)

    assert manager.current_language == "en"
