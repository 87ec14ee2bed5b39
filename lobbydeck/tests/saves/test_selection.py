from __future__ import annotations

from datetime import datetime

from core.saves.catalog_service import SaveSlotCatalog
from core.saves.models import SelectionMode, SelectionStatus
from core.saves.selection import SaveSelectionCoordinator


def _catalog(storage, save_record) -> SaveSlotCatalog:
    storage.records[0] = save_record(1, datetime(2024, 1, 1))
    storage.records[2] = save_record(5, datetime(2024, 1, 2))
    catalog = SaveSlotCatalog(storage, max_slots=10)
    catalog.refresh()
    return catalog


def test_load_existing_slot(storage, save_record, gateway) -> None:
    coordinator = SaveSelectionCoordinator(_catalog(storage, save_record), gateway)

    result = coordinator.select(2)

    assert result.accepted is True
    assert result.status is SelectionStatus.LOAD_REQUESTED
    assert gateway.loaded == [2]


def test_load_missing_slot_is_rejected(storage, save_record, gateway) -> None:
    coordinator = SaveSelectionCoordinator(_catalog(storage, save_record), gateway)

    result = coordinator.select(1)

    assert result.accepted is False
    assert result.status is SelectionStatus.MISSING_SLOT
    assert gateway.loaded == []


def test_create_new_targets_next_available_slot(storage, save_record, gateway) -> None:
    coordinator = SaveSelectionCoordinator(_catalog(storage, save_record), gateway, mode=SelectionMode.CREATE)

    result = coordinator.create_new()

    assert result.status is SelectionStatus.CREATE_REQUESTED
    assert gateway.created == [3]


def test_create_mode_overwrites_selected_slot(storage, save_record, gateway) -> None:
    coordinator = SaveSelectionCoordinator(_catalog(storage, save_record), gateway)
    coordinator.set_mode(SelectionMode.CREATE)

    result = coordinator.select(0)

    assert result.accepted is True
    assert gateway.created == [0]
    assert gateway.loaded == []


def test_host_failure_is_reported(storage, save_record, gateway) -> None:
    gateway.succeed = False
    coordinator = SaveSelectionCoordinator(_catalog(storage, save_record), gateway)

    result = coordinator.select(0)

    assert result.accepted is False
    assert result.status is SelectionStatus.HOST_FAILED
