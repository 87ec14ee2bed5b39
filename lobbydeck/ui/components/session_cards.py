from __future__ import annotations

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from core.browser.browser_model import NewSaveEntry
from core.rooms.models import RoomRecord
from core.saves.models import SaveSlotRecord
from i18n.i18n import tr


class SessionCard(QFrame):
    def __init__(self, variant: str = "default", parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("SessionCard")
        self.setProperty("variant", variant)

        self._root_layout = QHBoxLayout(self)
        self._root_layout.setContentsMargins(12, 10, 12, 10)
        self._root_layout.setSpacing(12)

        self._text_layout = QVBoxLayout()
        self._text_layout.setContentsMargins(0, 0, 0, 0)
        self._text_layout.setSpacing(4)
        self._root_layout.addLayout(self._text_layout, 1)

        self._title_label = QLabel(self)
        self._title_label.setObjectName("H2")
        self._text_layout.addWidget(self._title_label)

    def set_title(self, title: str) -> None:
        self._title_label.setText(title)

    def add_line(self, text: str, object_name: str = "cardLine") -> QLabel:
        label = QLabel(text, self)
        label.setObjectName(object_name)
        self._text_layout.addWidget(label)
        return label

    def add_action(self, text: str, variant: str = "primary") -> QPushButton:
        button = QPushButton(text, self)
        button.setProperty("variant", variant)
        self._root_layout.addWidget(button)
        return button


class NewSaveCard(SessionCard):
    create_requested = Signal()

    def __init__(self, entry: NewSaveEntry, parent: QWidget | None = None) -> None:
        super().__init__(variant="accent", parent=parent)
        self.set_title(tr("card.new_save.title"))
        self.add_line(tr("card.new_save.subtitle", slot=entry.slot_id))
        button = self.add_action(tr("card.save.select"))
        button.clicked.connect(self.create_requested.emit)


class SaveCard(SessionCard):
    selected = Signal(int)

    def __init__(self, record: SaveSlotRecord, parent: QWidget | None = None) -> None:
        super().__init__(parent=parent)
        self._slot_id = record.slot_id

        self.set_title(tr("card.save.title", slot=record.slot_id, cycle=record.cycle_count))

        if record.registered_at is not None:
            self.add_line(record.registered_at.strftime("%Y-%m-%d %H:%M:%S"))
        else:
            self.add_line(tr("card.save.unknown_date"))

        preview = record.players_preview()
        players = ", ".join(preview) if preview else tr("card.save.no_players")
        self.add_line(tr("card.save.players", players=players), object_name="cardMuted")

        button = self.add_action(tr("card.save.select"))
        button.clicked.connect(lambda _checked=False: self.selected.emit(self._slot_id))


class RoomCard(SessionCard):
    join_requested = Signal(object)

    def __init__(self, room: RoomRecord, parent: QWidget | None = None) -> None:
        super().__init__(variant="full" if room.is_full else "default", parent=parent)
        self._room = room

        self.set_title(tr("card.room.title", name=room.display_name, status=room.status))
        self.add_line(tr("card.room.players", count=room.player_count, max=room.max_players))
        self.add_line(tr("card.room.id", room_id=room.short_id()), object_name="cardMuted")

        button = self.add_action(tr("card.room.join"))
        button.clicked.connect(lambda _checked=False: self.join_requested.emit(self._room))
