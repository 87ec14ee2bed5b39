from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QDialog,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from core.browser.browser_model import BrowserSnapshot, NewSaveEntry, SessionBrowserModel
from core.browser.pagination import BrowserTab
from core.saves.models import SelectionMode
from i18n.i18n import get_i18n, tr
from ui.components.session_cards import NewSaveCard, RoomCard, SaveCard


class SessionBrowserDialog(QDialog):
    def __init__(self, model: SessionBrowserModel, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._model = model

        self.setModal(False)
        self.setMinimumSize(800, 560)
        self.resize(820, 620)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)

        self._title = QLabel()
        self._title.setObjectName("viewHeadline")
        self._title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._title)

        tabs_row = QHBoxLayout()
        tabs_row.setSpacing(8)
        self._tab_buttons: dict[BrowserTab, QPushButton] = {}
        for tab in (BrowserTab.SAVES, BrowserTab.ROOMS):
            button = QPushButton()
            button.setCheckable(True)
            button.setProperty("variant", "secondary")
            button.clicked.connect(lambda _checked=False, value=tab: self._model.switch_tab(value))
            tabs_row.addWidget(button)
            self._tab_buttons[tab] = button
        layout.addLayout(tabs_row)

        self._status = QLabel()
        self._status.setObjectName("infoBar")
        self._status.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._status)

        self._scroll = QScrollArea()
        self._scroll.setWidgetResizable(True)
        self._cards_host = QWidget()
        self._cards_layout = QVBoxLayout(self._cards_host)
        self._cards_layout.setContentsMargins(0, 0, 0, 0)
        self._cards_layout.setSpacing(8)
        self._scroll.setWidget(self._cards_host)
        layout.addWidget(self._scroll, 1)

        footer = QHBoxLayout()
        footer.setSpacing(8)
        self._previous_button = QPushButton()
        self._previous_button.clicked.connect(self._model.previous_page)
        footer.addWidget(self._previous_button)

        self._page_label = QLabel()
        self._page_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        footer.addWidget(self._page_label, 1)

        self._next_button = QPushButton()
        self._next_button.clicked.connect(self._model.next_page)
        footer.addWidget(self._next_button)

        self._close_button = QPushButton()
        self._close_button.setProperty("variant", "danger")
        self._close_button.clicked.connect(self._model.hide)
        footer.addWidget(self._close_button)
        layout.addLayout(footer)

        self._model.changed.connect(self.render)
        self._model.close_requested.connect(self.hide)
        get_i18n().language_changed.connect(self.retranslate_ui)
        self.retranslate_ui()

    def retranslate_ui(self, _language: str | None = None) -> None:
        self.setWindowTitle(tr("app.title"))
        self._tab_buttons[BrowserTab.SAVES].setText(tr("browser.tab.saves"))
        self._tab_buttons[BrowserTab.ROOMS].setText(tr("browser.tab.rooms"))
        self._previous_button.setText(tr("browser.previous"))
        self._next_button.setText(tr("browser.next"))
        self._close_button.setText(tr("browser.close"))
        self.render()

    def render(self) -> None:
        snapshot = self._model.snapshot()

        for tab, button in self._tab_buttons.items():
            button.setChecked(tab is snapshot.tab)

        self._title.setText(tr(self._title_key(snapshot)))
        self._status.setText(tr(snapshot.status_key, **snapshot.status_args))
        self._page_label.setText(
            tr("browser.page", current=snapshot.page.page_index + 1, total=snapshot.page.total_pages)
        )
        self._previous_button.setEnabled(snapshot.page.has_previous)
        self._next_button.setEnabled(snapshot.page.has_next)

        self._clear_cards()
        if snapshot.tab is BrowserTab.SAVES:
            self._render_saves(snapshot)
        else:
            self._render_rooms(snapshot)
        self._cards_layout.addStretch(1)
        self._scroll.verticalScrollBar().setValue(0)

    def _render_saves(self, snapshot: BrowserSnapshot) -> None:
        if not snapshot.saves:
            self._add_empty_message(tr("browser.saves.empty"))
            return

        for entry in snapshot.saves:
            if isinstance(entry, NewSaveEntry):
                card = NewSaveCard(entry)
                card.create_requested.connect(self._model.create_new_save)
            else:
                card = SaveCard(entry)
                card.selected.connect(self._model.select_save)
            self._cards_layout.addWidget(card)

    def _render_rooms(self, snapshot: BrowserSnapshot) -> None:
        if not snapshot.rooms:
            key = "rooms.empty.searching" if snapshot.searching else "rooms.empty.none"
            self._add_empty_message(tr(key))
            return

        for room in snapshot.rooms:
            card = RoomCard(room)
            card.join_requested.connect(self._model.join_room)
            self._cards_layout.addWidget(card)

    def _add_empty_message(self, text: str) -> None:
        label = QLabel(text)
        label.setObjectName("emptyMessage")
        label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        label.setMinimumHeight(100)
        self._cards_layout.addWidget(label)

    def _clear_cards(self) -> None:
        while self._cards_layout.count() > 0:
            item = self._cards_layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()

    @staticmethod
    def _title_key(snapshot: BrowserSnapshot) -> str:
        if snapshot.tab is BrowserTab.ROOMS:
            return "browser.title.rooms"
        if snapshot.mode is SelectionMode.LOAD:
            return "browser.title.load"
        return "browser.title.create"

    def closeEvent(self, event: QCloseEvent) -> None:
        self._model.hide()
        super().closeEvent(event)
