from __future__ import annotations

from core.rooms.discovery_service import SessionDiscoveryService
from core.rooms.models import DEFAULT_LOBBY_QUERY, DiscoveryState, DiscoveryStatus


def _service(directory, settings, clock) -> SessionDiscoveryService:
    return SessionDiscoveryService(directory, settings=settings, clock=clock)


def test_tab_activation_issues_one_query(directory, settings, clock) -> None:
    service = _service(directory, settings, clock)

    assert service.on_tab_activated() is True
    assert service.start_query() is False

    assert len(directory.queries) == 1
    assert directory.queries[0][0] == DEFAULT_LOBBY_QUERY
    assert service.status is DiscoveryStatus.SEARCHING
    assert service.attempts == 1


def test_results_replace_cache_sorted_by_players(directory, settings, clock, lobby) -> None:
    service = _service(directory, settings, clock)
    service.on_tab_activated()

    directory.deliver([lobby("11", members=1), lobby("22", members=3), lobby("33", members=1), lobby("44", members=2)])

    assert [room.room_id for room in service.rooms] == ["22", "44", "11", "33"]
    assert service.state is DiscoveryState.COMPLETED
    assert service.status is DiscoveryStatus.READY


def test_placeholder_fields(directory, settings, clock, lobby) -> None:
    service = _service(directory, settings, clock)
    service.on_tab_activated()

    directory.deliver([lobby("1234567890123", members=2), lobby("77", name="Crypt", status="In Game", max_players=6)])

    first = service.cache.get("1234567890123")
    assert first.display_name == "Room 12345678"
    assert first.status == "Waiting"
    assert first.max_players == 4
    assert first.discovered_at == clock.now

    second = service.cache.get("77")
    assert second.display_name == "Crypt"
    assert second.status == "In Game"
    assert second.max_players == 6


def test_broken_entry_is_skipped(directory, settings, clock, lobby) -> None:
    service = _service(directory, settings, clock)
    service.on_tab_activated()

    directory.deliver([lobby("1"), lobby("2"), lobby("3", broken=True), lobby("4"), lobby("5")])

    assert [room.room_id for room in service.rooms] == ["1", "2", "4", "5"]


def test_zero_rooms_reports_no_rooms(directory, settings, clock) -> None:
    service = _service(directory, settings, clock)
    service.on_tab_activated()

    directory.deliver([])

    assert service.rooms == []
    assert service.state is DiscoveryState.COMPLETED
    assert service.status is DiscoveryStatus.NO_ROOMS


def test_transport_failure_keeps_previous_rooms(directory, settings, clock, lobby) -> None:
    service = _service(directory, settings, clock)
    service.on_tab_activated()
    directory.deliver([lobby("1")])

    clock.advance(settings.refresh_interval_seconds)
    assert service.tick() is True
    directory.deliver([], transport_failed=True)

    assert service.state is DiscoveryState.FAILED
    assert service.status is DiscoveryStatus.SEARCH_FAILED
    assert [room.room_id for room in service.rooms] == ["1"]


def test_query_that_raises_marks_failure(directory, settings, clock) -> None:
    directory.raise_on_query = True
    service = _service(directory, settings, clock)

    assert service.on_tab_activated() is False
    assert service.state is DiscoveryState.FAILED
    assert service.status is DiscoveryStatus.SEARCH_FAILED


def test_unavailable_directory_suppresses_search(directory, settings, clock) -> None:
    directory.ready = False
    service = _service(directory, settings, clock)

    assert service.on_tab_activated() is False
    assert directory.queries == []
    assert service.state is DiscoveryState.IDLE
    assert service.status is DiscoveryStatus.UNAVAILABLE


def test_tick_waits_for_refresh_interval(directory, settings, clock) -> None:
    service = _service(directory, settings, clock)
    service.on_tab_activated()
    directory.deliver([])

    clock.advance(settings.refresh_interval_seconds - 0.5)
    assert service.tick() is False

    clock.advance(0.5)
    assert service.tick() is True
    assert len(directory.queries) == 2


def test_tick_is_ignored_while_in_flight_or_inactive(directory, settings, clock) -> None:
    service = _service(directory, settings, clock)
    assert service.tick() is False

    service.on_tab_activated()
    clock.advance(60)
    assert service.tick() is False
    assert len(directory.queries) == 1


def test_deactivation_returns_to_idle(directory, settings, clock) -> None:
    service = _service(directory, settings, clock)
    service.on_tab_activated()

    service.on_tab_deactivated()

    assert service.state is DiscoveryState.IDLE
    assert service.status is DiscoveryStatus.IDLE
    assert service.tab_active is False


def test_stale_callback_updates_cache_only(directory, settings, clock, lobby) -> None:
    service = _service(directory, settings, clock)
    service.on_tab_activated()
    service.on_tab_deactivated()
    service.on_tab_activated()
    assert len(directory.queries) == 2

    emitted: list[str] = []
    service.status_changed.connect(lambda value: emitted.append(value))
    service.rooms_changed.connect(lambda: emitted.append("rooms"))

    directory.deliver([lobby("5")], index=0)

    assert [room.room_id for room in service.rooms] == ["5"]
    assert service.state is DiscoveryState.SEARCHING
    assert service.status is DiscoveryStatus.SEARCHING
    assert emitted == []

    directory.deliver([], index=1)
    assert service.status is DiscoveryStatus.NO_ROOMS


def test_status_signal_only_on_change(directory, settings, clock) -> None:
    service = _service(directory, settings, clock)
    emitted: list[str] = []
    service.status_changed.connect(lambda value: emitted.append(value))

    service.on_tab_activated()
    directory.deliver([])
    clock.advance(settings.refresh_interval_seconds)
    service.tick()
    directory.deliver([])

    assert emitted == ["searching", "no rooms found, retrying", "searching", "no rooms found, retrying"]


def test_duplicate_ids_collapse_before_sorting(directory, settings, clock, lobby) -> None:
    service = _service(directory, settings, clock)
    service.on_tab_activated()

    directory.deliver([lobby("1", members=1), lobby("2", members=3), lobby("1", members=5)])

    assert [(room.room_id, room.player_count) for room in service.rooms] == [("1", 5), ("2", 3)]


def test_stale_callback_never_overwrites_fresher_rooms(directory, settings, clock, lobby) -> None:
    service = _service(directory, settings, clock)
    service.on_tab_activated()
    service.on_tab_deactivated()
    service.on_tab_activated()

    directory.deliver([lobby("22")], index=1)
    directory.deliver([lobby("11")], index=0)

    assert [room.room_id for room in service.rooms] == ["22"]
    assert service.status is DiscoveryStatus.READY
