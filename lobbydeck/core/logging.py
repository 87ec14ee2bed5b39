from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from PySide6.QtCore import QObject, Signal

from core.paths import get_logs_dir

LOGGER_NAME = "lobbydeck"
LOG_FILE_NAME = "lobbydeck.log"
LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"


class LogEmitter(QObject):
    """Carries formatted records to the UI as ``(level name, message)``."""

    log_message = Signal(str, str)


class QtSignalLogHandler(logging.Handler):
    def __init__(self, emitter: LogEmitter) -> None:
        super().__init__()
        self._emitter = emitter

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self._emitter.log_message.emit(record.levelname, self.format(record))
        except Exception:
            self.handleError(record)


def parse_level(name: str | None, default: int = logging.INFO) -> int:
    level = logging.getLevelName(str(name or "").strip().upper())
    return level if isinstance(level, int) else default


def setup_logging(logs_dir: Path | None = None, level: int = logging.INFO) -> tuple[logging.Logger, LogEmitter]:
    target_dir = logs_dir or get_logs_dir()
    target_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    file_handler = RotatingFileHandler(
        filename=target_dir / LOG_FILE_NAME,
        maxBytes=1_000_000,
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    emitter = LogEmitter()
    console_handler = QtSignalLogHandler(emitter)
    console_handler.setFormatter(logging.Formatter(fmt="%(asctime)s %(message)s", datefmt=LOG_DATE_FORMAT))

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)
    logger.debug("Logging to %s at level %s", target_dir / LOG_FILE_NAME, logging.getLevelName(level))

    return logger, emitter
