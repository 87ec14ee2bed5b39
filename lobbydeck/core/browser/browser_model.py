from __future__ import annotations

import logging
from dataclasses import dataclass, field

from PySide6.QtCore import QObject, Signal

from core.browser.pagination import BrowserTab, PageView, PaginationController
from core.config import BrowserSettings
from core.rooms.discovery_service import SessionDiscoveryService
from core.rooms.join_coordinator import JoinCoordinator
from core.rooms.models import DiscoveryState, JoinResult, RoomRecord
from core.saves.catalog_service import SaveSlotCatalog
from core.saves.models import SaveSlotRecord, SelectionMode, SelectionResult
from core.saves.selection import SaveSelectionCoordinator
from i18n.i18n import status_key


@dataclass(frozen=True, slots=True)
class NewSaveEntry:
    slot_id: int


SaveEntry = NewSaveEntry | SaveSlotRecord


@dataclass(frozen=True, slots=True)
class BrowserSnapshot:
    visible: bool
    tab: BrowserTab
    mode: SelectionMode
    saves: list[SaveEntry]
    rooms: list[RoomRecord]
    page: PageView
    searching: bool
    status_key: str
    status_args: dict[str, object] = field(default_factory=dict)


class SessionBrowserModel(QObject):
    """State behind the session browser window.

    Views render ``snapshot()`` and call the action methods; they never touch
    the catalog or the discovery service directly.
    """

    changed = Signal()
    close_requested = Signal()

    def __init__(
        self,
        catalog: SaveSlotCatalog,
        discovery: SessionDiscoveryService,
        join_coordinator: JoinCoordinator,
        selection: SaveSelectionCoordinator,
        settings: BrowserSettings | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        super().__init__()
        self._catalog = catalog
        self._discovery = discovery
        self._join_coordinator = join_coordinator
        self._selection = selection
        self._settings = settings or BrowserSettings()
        self._logger = logger or logging.getLogger("lobbydeck.browser")
        self._pagination = PaginationController(self._settings.items_per_page)
        self._visible = False
        self._status_key = "browser.status.ready"
        self._status_args: dict[str, object] = {}

        self._discovery.rooms_changed.connect(self._on_rooms_changed)
        self._discovery.status_changed.connect(self._on_discovery_status_changed)

    @property
    def enabled(self) -> bool:
        return self._settings.enabled

    @property
    def visible(self) -> bool:
        return self._visible

    @property
    def mode(self) -> SelectionMode:
        return self._selection.mode

    @property
    def active_tab(self) -> BrowserTab:
        return self._pagination.active_tab

    @property
    def pagination(self) -> PaginationController:
        return self._pagination

    @property
    def discovery(self) -> SessionDiscoveryService:
        return self._discovery

    def show(self, mode: SelectionMode) -> bool:
        if not self._settings.enabled:
            self._logger.info("Enhanced session browser disabled, keeping the host menu")
            return False

        self._selection.set_mode(mode)
        self._visible = True
        self.switch_tab(BrowserTab.SAVES)
        self._logger.info("Session browser shown in %s mode with %s saves", mode.value, len(self._catalog.records))
        return True

    def hide(self) -> None:
        if not self._visible:
            return
        self._visible = False
        if self._discovery.tab_active:
            self._discovery.on_tab_deactivated()
        self._logger.info("Session browser hidden")
        self.close_requested.emit()
        self.changed.emit()

    def switch_tab(self, tab: BrowserTab) -> None:
        self._pagination.switch_tab(tab)

        if tab is BrowserTab.SAVES:
            if self._discovery.tab_active:
                self._discovery.on_tab_deactivated()
            self._catalog.refresh()
            self._set_status("browser.status.ready")
        else:
            self._discovery.on_tab_activated()
            self._set_status(self._discovery_status_key())

        self.changed.emit()

    def next_page(self) -> bool:
        moved = self._pagination.next_page(self._active_count())
        if moved:
            self.changed.emit()
        return moved

    def previous_page(self) -> bool:
        moved = self._pagination.previous_page()
        if moved:
            self.changed.emit()
        return moved

    def save_entries(self) -> list[SaveEntry]:
        entries: list[SaveEntry] = []
        if self._selection.mode is SelectionMode.CREATE:
            entries.append(NewSaveEntry(slot_id=self._catalog.next_available_slot))
        entries.extend(self._catalog.records)
        return entries

    def select_save(self, slot_id: int) -> SelectionResult:
        result = self._selection.select(slot_id)
        self._after_selection(result)
        return result

    def create_new_save(self) -> SelectionResult:
        result = self._selection.create_new()
        self._after_selection(result)
        return result

    def join_room(self, room: RoomRecord) -> JoinResult:
        result = self._join_coordinator.join(room)
        self._set_status(status_key("join.status", result.status), name=room.display_name)
        if result.accepted:
            self.hide()
        else:
            self.changed.emit()
        return result

    def snapshot(self) -> BrowserSnapshot:
        tab = self._pagination.active_tab
        saves: list[SaveEntry] = []
        rooms: list[RoomRecord] = []

        if tab is BrowserTab.SAVES:
            entries = self.save_entries()
            page = self._pagination.view(len(entries))
            start, end = page.bounds
            saves = entries[start:end]
        else:
            all_rooms = self._discovery.rooms
            page = self._pagination.view(len(all_rooms))
            start, end = page.bounds
            rooms = all_rooms[start:end]

        return BrowserSnapshot(
            visible=self._visible,
            tab=tab,
            mode=self._selection.mode,
            saves=saves,
            rooms=rooms,
            page=page,
            searching=self._discovery.state is DiscoveryState.SEARCHING,
            status_key=self._status_key,
            status_args=dict(self._status_args),
        )

    def _after_selection(self, result: SelectionResult) -> None:
        self._set_status(status_key("selection.status", result.status), slot=result.slot_id)
        if result.accepted:
            self.hide()
        else:
            self.changed.emit()

    def _active_count(self) -> int:
        if self._pagination.active_tab is BrowserTab.SAVES:
            return len(self.save_entries())
        return len(self._discovery.cache)

    def _discovery_status_key(self) -> str:
        return status_key("rooms.status", self._discovery.status)

    def _on_rooms_changed(self) -> None:
        if self._pagination.active_tab is BrowserTab.ROOMS:
            self._pagination.clamp(len(self._discovery.cache))
        self.changed.emit()

    def _on_discovery_status_changed(self, _status: str) -> None:
        if not self._visible or self._pagination.active_tab is not BrowserTab.ROOMS:
            return
        self._set_status(self._discovery_status_key())
        self.changed.emit()

    def _set_status(self, key: str, **kwargs: object) -> None:
        self._status_key = key
        self._status_args = kwargs
