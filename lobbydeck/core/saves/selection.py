from __future__ import annotations

import logging

from core.host.gateway import HostSessionGateway
from core.saves.catalog_service import SaveSlotCatalog
from core.saves.models import SelectionMode, SelectionResult, SelectionStatus


class SaveSelectionCoordinator:
    def __init__(
        self,
        catalog: SaveSlotCatalog,
        gateway: HostSessionGateway,
        mode: SelectionMode = SelectionMode.LOAD,
        logger: logging.Logger | None = None,
    ) -> None:
        self._catalog = catalog
        self._gateway = gateway
        self._mode = mode
        self._logger = logger or logging.getLogger("lobbydeck.saves.selection")

    @property
    def mode(self) -> SelectionMode:
        return self._mode

    def set_mode(self, mode: SelectionMode) -> None:
        self._mode = mode

    def create_new(self) -> SelectionResult:
        slot_id = self._catalog.next_available_slot
        self._logger.info("Creating new save in slot %s", slot_id)
        return self._dispatch_create(slot_id)

    def select(self, slot_id: int) -> SelectionResult:
        if self._mode is SelectionMode.CREATE:
            return self._dispatch_create(slot_id)

        if self._catalog.get(slot_id) is None:
            self._logger.warning("Attempted to load non-existent save slot %s", slot_id)
            return SelectionResult(accepted=False, status=SelectionStatus.MISSING_SLOT, slot_id=slot_id)

        self._logger.info("Loading save slot %s", slot_id)
        try:
            launched = self._gateway.load_and_create_session(slot_id)
        except Exception:
            self._logger.exception("Host failed to load save slot %s", slot_id)
            launched = False

        status = SelectionStatus.LOAD_REQUESTED if launched else SelectionStatus.HOST_FAILED
        return SelectionResult(accepted=launched, status=status, slot_id=slot_id)

    def _dispatch_create(self, slot_id: int) -> SelectionResult:
        try:
            launched = self._gateway.create_session_in_slot(slot_id)
        except Exception:
            self._logger.exception("Host failed to create a session in slot %s", slot_id)
            launched = False

        status = SelectionStatus.CREATE_REQUESTED if launched else SelectionStatus.HOST_FAILED
        return SelectionResult(accepted=launched, status=status, slot_id=slot_id)
