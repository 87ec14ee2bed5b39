from __future__ import annotations

import logging

from PySide6.QtGui import QCloseEvent, QShortcut
from PySide6.QtWidgets import QHBoxLayout, QLabel, QMainWindow, QPushButton, QVBoxLayout, QWidget

from core.browser.browser_model import SessionBrowserModel
from core.hotkeys import HotkeyConfig
from core.logging import LogEmitter
from core.rooms.discovery_poller import DiscoveryPoller
from core.saves.models import SelectionMode
from i18n.i18n import get_i18n, tr
from ui.widgets.log_console import LogConsole
from ui.widgets.session_browser_dialog import SessionBrowserDialog


class MainWindow(QMainWindow):
    def __init__(
        self,
        model: SessionBrowserModel,
        poller: DiscoveryPoller,
        hotkey: HotkeyConfig,
        logger: logging.Logger,
        log_emitter: LogEmitter,
    ) -> None:
        super().__init__()
        self._model = model
        self._poller = poller
        self._hotkey = hotkey
        self._logger = logger
        self._last_mode = SelectionMode.LOAD

        self.setMinimumSize(720, 480)
        self.resize(900, 600)

        central = QWidget()
        central.setObjectName("AppRoot")
        self.setCentralWidget(central)

        layout = QVBoxLayout(central)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)

        actions_row = QHBoxLayout()
        actions_row.setSpacing(12)

        self._load_button = QPushButton()
        self._load_button.setProperty("variant", "primary")
        self._load_button.clicked.connect(lambda _checked=False: self.open_browser(SelectionMode.LOAD))
        actions_row.addWidget(self._load_button)

        self._create_button = QPushButton()
        self._create_button.setProperty("variant", "secondary")
        self._create_button.clicked.connect(lambda _checked=False: self.open_browser(SelectionMode.CREATE))
        actions_row.addWidget(self._create_button)
        actions_row.addStretch(1)
        layout.addLayout(actions_row)

        self._hint = QLabel()
        self._hint.setObjectName("infoBar")
        layout.addWidget(self._hint)

        self._log_console = LogConsole(log_emitter)
        layout.addWidget(self._log_console, 1)

        self._browser = SessionBrowserDialog(model, parent=self)

        self._shortcut: QShortcut | None = None
        if hotkey.is_set:
            self._shortcut = QShortcut(hotkey.to_key_sequence(), self)
            self._shortcut.activated.connect(self.toggle_browser)
        else:
            self._logger.warning(tr("startup.hotkey.invalid"))

        get_i18n().language_changed.connect(self.retranslate_ui)
        self.retranslate_ui()
        self._poller.start()

    def open_browser(self, mode: SelectionMode) -> None:
        self._last_mode = mode
        if not self._model.show(mode):
            self._hint.setText(tr("main.disabled"))
            return
        self._browser.show()
        self._browser.raise_()
        self._browser.activateWindow()

    def toggle_browser(self) -> None:
        if self._model.visible:
            self._model.hide()
            return
        self.open_browser(self._last_mode)

    def closeEvent(self, event: QCloseEvent) -> None:
        self._poller.stop()
        self._model.hide()
        super().closeEvent(event)

    def retranslate_ui(self, _language: str | None = None) -> None:
        self.setWindowTitle(tr("app.title"))
        self._load_button.setText(tr("main.open_load"))
        self._create_button.setText(tr("main.open_create"))
        if self._model.enabled:
            self._hint.setText(tr("main.hotkey_hint", hotkey=str(self._hotkey)))
        else:
            self._hint.setText(tr("main.disabled"))
