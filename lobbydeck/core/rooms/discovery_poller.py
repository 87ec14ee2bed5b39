from __future__ import annotations

from PySide6.QtCore import QObject, QTimer, Signal

from core.rooms.discovery_service import SessionDiscoveryService


class DiscoveryPoller(QObject):
    state_changed = Signal(bool)

    def __init__(self, service: SessionDiscoveryService, interval_ms: int = 250) -> None:
        super().__init__()
        self._service = service
        self._timer = QTimer(self)
        self._timer.setInterval(max(50, interval_ms))
        self._timer.timeout.connect(self.tick)

    def start(self) -> None:
        if self._timer.isActive():
            return
        self._timer.start()
        self.state_changed.emit(True)

    def stop(self) -> None:
        if not self._timer.isActive():
            return
        self._timer.stop()
        self.state_changed.emit(False)

    def is_running(self) -> bool:
        return self._timer.isActive()

    def tick(self) -> bool:
        return self._service.tick()
