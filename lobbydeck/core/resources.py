from __future__ import annotations

import sys
from pathlib import Path

TRANSLATIONS_DIR = "i18n/translations"


def bundle_root() -> Path:
    """Directory holding the bundled data files, frozen or from source."""
    frozen_root = getattr(sys, "_MEIPASS", None)
    if frozen_root:
        return Path(frozen_root)
    return Path(__file__).resolve().parents[1]


def resource_path(relative_path: str) -> Path:
    return (bundle_root() / relative_path).resolve()


def get_translations_dir() -> Path:
    return resource_path(TRANSLATIONS_DIR)
