from core.saves.catalog_service import SaveSlotCatalog, SaveStorage
from core.saves.file_storage import FileSaveStorage, SaveFileError
from core.saves.models import (
    SaveRecord,
    SaveSlotRecord,
    SelectionMode,
    SelectionResult,
    SelectionStatus,
)
from core.saves.selection import SaveSelectionCoordinator

__all__ = [
    "FileSaveStorage",
    "SaveFileError",
    "SaveRecord",
    "SaveSelectionCoordinator",
    "SaveSlotCatalog",
    "SaveSlotRecord",
    "SaveStorage",
    "SelectionMode",
    "SelectionResult",
    "SelectionStatus",
]
