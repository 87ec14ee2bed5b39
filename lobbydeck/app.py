from __future__ import annotations

import logging
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication

from core.browser.browser_model import SessionBrowserModel
from core.config import AppConfig
from core.host.command_gateway import CommandHostGateway
from core.hotkeys import HotkeyConfig
from core.logging import parse_level, setup_logging
from core.paths import ensure_runtime_directories
from core.rooms.discovery_poller import DiscoveryPoller
from core.rooms.discovery_service import SessionDiscoveryService
from core.rooms.file_directory import FileDirectoryClient
from core.rooms.join_coordinator import JoinCoordinator
from core.saves.catalog_service import SaveSlotCatalog
from core.saves.file_storage import FileSaveStorage
from core.saves.selection import SaveSelectionCoordinator
from i18n.i18n import initialize_i18n, tr
from ui.main_window import MainWindow


def build_browser_model(config: AppConfig, logger: logging.Logger) -> SessionBrowserModel:
    settings = config.browser_settings()
    gateway = CommandHostGateway(config.get_host_command(), logger=logger.getChild("host"))

    catalog = SaveSlotCatalog(
        FileSaveStorage(Path(config.get_saves_root()), logger=logger.getChild("saves")),
        max_slots=settings.max_save_slots,
        logger=logger.getChild("saves"),
    )
    directory = FileDirectoryClient(
        Path(config.get_lobby_listing_path()),
        join_handler=gateway.join_lobby,
        default_max_players=settings.default_max_players,
        logger=logger.getChild("directory"),
    )
    discovery = SessionDiscoveryService(directory, settings=settings, logger=logger.getChild("rooms"))

    return SessionBrowserModel(
        catalog=catalog,
        discovery=discovery,
        join_coordinator=JoinCoordinator(directory, logger=logger.getChild("join")),
        selection=SaveSelectionCoordinator(catalog, gateway, logger=logger.getChild("selection")),
        settings=settings,
        logger=logger.getChild("browser"),
    )


def main() -> int:
    ensure_runtime_directories()

    app = QApplication(sys.argv)

    config = AppConfig()
    initialize_i18n(config.get_language())

    logger, log_emitter = setup_logging(level=parse_level(config.get_log_level()))

    model = build_browser_model(config, logger)
    poller = DiscoveryPoller(model.discovery)

    window = MainWindow(
        model=model,
        poller=poller,
        hotkey=HotkeyConfig.parse(config.get_toggle_hotkey()),
        logger=logger,
        log_emitter=log_emitter,
    )
    window.show()

    logger.info(tr("startup.ready"))
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
