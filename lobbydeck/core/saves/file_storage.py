from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path

import zstandard

from core.saves.models import SaveRecord

_ZSTD_MAGIC = b"\x28\xB5\x2F\xFD"
MAX_PAYLOAD_BYTES = 16 * 1024 * 1024


class SaveFileError(Exception):
    pass


def slot_file_name(slot_id: int) -> str:
    return f"slot_{slot_id}.sav"


def decode_payload(raw: bytes) -> dict[str, object]:
    if raw.startswith(_ZSTD_MAGIC):
        try:
            raw = zstandard.ZstdDecompressor().decompress(raw, max_output_size=MAX_PAYLOAD_BYTES)
        except zstandard.ZstdError as error:
            raise SaveFileError(f"corrupt compressed save: {error}") from error

    try:
        payload = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as error:
        raise SaveFileError(f"invalid save JSON: {error}") from error

    if not isinstance(payload, dict):
        raise SaveFileError("save payload is not an object")
    return payload


def encode_payload(payload: dict[str, object], compress: bool = True) -> bytes:
    raw = json.dumps(payload, ensure_ascii=False).encode("utf-8")
    if not compress:
        return raw
    return zstandard.ZstdCompressor().compress(raw)


def _parse_timestamp(value: object) -> datetime | None:
    if not isinstance(value, str) or value.strip() == "":
        return None
    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return None
    # Offsets are converted to local time to match the mtime-based last_modified.
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


class FileSaveStorage:
    """Slot files in one directory, each a JSON document, optionally zstd-compressed."""

    def __init__(self, root: Path, logger: logging.Logger | None = None) -> None:
        self._root = root.expanduser()
        self._logger = logger or logging.getLogger("lobbydeck.saves.storage")

    @property
    def root(self) -> Path:
        return self._root

    def slot_path(self, slot_id: int) -> Path:
        return self._root / slot_file_name(slot_id)

    def exists(self, slot_id: int) -> bool:
        return self.slot_path(slot_id).is_file()

    def load(self, slot_id: int) -> SaveRecord | None:
        path = self.slot_path(slot_id)
        if not path.is_file():
            return None

        raw = path.read_bytes()
        payload = decode_payload(raw)

        players = payload.get("player_names")
        player_names = [str(name) for name in players] if isinstance(players, list) else []

        try:
            cycle_count = int(payload.get("cycle_count", 0))
        except (TypeError, ValueError) as error:
            raise SaveFileError(f"invalid cycle_count in {path.name}") from error

        return SaveRecord(
            cycle_count=cycle_count,
            registered_at=_parse_timestamp(payload.get("registered_at")),
            player_names=player_names,
            last_modified=datetime.fromtimestamp(path.stat().st_mtime),
        )

    def write(self, slot_id: int, record: SaveRecord, compress: bool = True) -> Path:
        if slot_id < 0:
            raise ValueError("slot_id must not be negative")

        payload: dict[str, object] = {
            "cycle_count": int(record.cycle_count),
            "registered_at": record.registered_at.isoformat() if record.registered_at else None,
            "player_names": list(record.player_names),
        }
        path = self.slot_path(slot_id)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(encode_payload(payload, compress=compress))
        self._logger.info("Wrote save slot %s to %s", slot_id, path.name)
        return path
