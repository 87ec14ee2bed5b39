from __future__ import annotations

import logging
from datetime import datetime
from typing import Protocol

from core.saves.models import SaveRecord, SaveSlotRecord

DEFAULT_MAX_SLOTS = 10000


class SaveStorage(Protocol):
    def exists(self, slot_id: int) -> bool: ...

    def load(self, slot_id: int) -> SaveRecord | None: ...


class SaveSlotCatalog:
    """Enumerates the local save slots a storage backend knows about.

    Every refresh rescans the whole slot range and replaces the previous
    snapshot. A slot that fails to load is logged and skipped.
    """

    def __init__(
        self,
        storage: SaveStorage,
        max_slots: int = DEFAULT_MAX_SLOTS,
        logger: logging.Logger | None = None,
    ) -> None:
        self._storage = storage
        self._max_slots = max(1, int(max_slots))
        self._logger = logger or logging.getLogger("lobbydeck.saves")
        self._records: list[SaveSlotRecord] = []
        self._next_available_slot = 0

    @property
    def records(self) -> list[SaveSlotRecord]:
        return list(self._records)

    @property
    def next_available_slot(self) -> int:
        return self._next_available_slot

    def get(self, slot_id: int) -> SaveSlotRecord | None:
        for record in self._records:
            if record.slot_id == slot_id:
                return record
        return None

    def refresh(self) -> list[SaveSlotRecord]:
        records: list[SaveSlotRecord] = []

        for slot_id in range(self._max_slots):
            try:
                if not self._storage.exists(slot_id):
                    continue
                loaded = self._storage.load(slot_id)
                if loaded is None:
                    self._logger.warning("Save slot %s exists but returned no data", slot_id)
                    continue
                record = self._to_slot_record(slot_id, loaded)
            except Exception as error:
                self._logger.warning("Error loading save slot %s: %s", slot_id, error)
                continue

            records.append(record)
            self._logger.debug("Loaded save from slot %s", slot_id)

        records.sort(key=lambda record: record.last_modified, reverse=True)

        self._records = records
        self._next_available_slot = max((record.slot_id for record in records), default=-1) + 1

        self._logger.info(
            "Loaded %s saves. Next available slot: %s",
            len(records),
            self._next_available_slot,
        )
        return list(records)

    @staticmethod
    def _to_slot_record(slot_id: int, loaded: SaveRecord) -> SaveSlotRecord:
        registered_at = _local_naive(loaded.registered_at)
        return SaveSlotRecord(
            slot_id=slot_id,
            cycle_count=int(loaded.cycle_count),
            registered_at=registered_at,
            player_names=tuple(str(name) for name in loaded.player_names),
            last_modified=_local_naive(loaded.last_modified) or registered_at or datetime.min,
        )


def _local_naive(value: datetime | None) -> datetime | None:
    """Naive local time, so records from different sources sort together."""
    if value is None:
        return None
    if not isinstance(value, datetime):
        raise TypeError(f"expected a datetime, got {type(value).__name__}")
    if value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value
