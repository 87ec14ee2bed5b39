from __future__ import annotations

import html

from PySide6.QtWidgets import QGroupBox, QHBoxLayout, QPushButton, QTextEdit, QVBoxLayout, QWidget

from core.logging import LogEmitter
from i18n.i18n import get_i18n, tr

MAX_LOG_BLOCKS = 2000

LEVEL_COLORS = {
    "WARNING": "#d9a441",
    "ERROR": "#e0605e",
    "CRITICAL": "#e0605e",
}


class LogConsole(QWidget):
    """Read-only live view of the application log."""

    def __init__(self, emitter: LogEmitter, parent: QWidget | None = None) -> None:
        super().__init__(parent)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self._group = QGroupBox()
        group_layout = QVBoxLayout(self._group)

        self._text_edit = QTextEdit()
        self._text_edit.setReadOnly(True)
        self._text_edit.document().setMaximumBlockCount(MAX_LOG_BLOCKS)
        group_layout.addWidget(self._text_edit)

        footer = QHBoxLayout()
        footer.addStretch(1)
        self._clear_button = QPushButton()
        self._clear_button.setProperty("variant", "secondary")
        self._clear_button.clicked.connect(self._text_edit.clear)
        footer.addWidget(self._clear_button)
        group_layout.addLayout(footer)

        layout.addWidget(self._group)

        emitter.log_message.connect(self.append_log)
        get_i18n().language_changed.connect(self.retranslate_ui)
        self.retranslate_ui()

    def append_log(self, level: str, message: str) -> None:
        text = html.escape(message)
        color = LEVEL_COLORS.get(level)
        if color:
            text = f'<span style="color:{color}">{text}</span>'
        self._text_edit.append(text)

    def retranslate_ui(self, _language: str | None = None) -> None:
        self._group.setTitle(tr("main.live_log_title"))
        self._clear_button.setText(tr("main.clear_log"))
