"""Local JSON file implementation of KeyValueStore.

All slots live in one JSON object on disk: {"<key>": ["<str>", ...], ...}.
Writes go through a temporary file and an atomic rename so a crash never
leaves a half-written store behind.
"""

import asyncio
import json
import logging
import os
from pathlib import Path
from typing import Any

from domain.model.errors import StorageError

logger = logging.getLogger(__name__)

DATA_DIR = os.getenv('DICTIONARY_DATA_DIR', str(Path.home() / '.pocket_dictionary'))
STORE_FILENAME = 'store.json'


class JsonFileKeyValueStore:
    def __init__(self, path: Path | str | None = None):
        self.path = Path(path) if path else Path(DATA_DIR).expanduser() / STORE_FILENAME

    async def get_string_list(self, key: str) -> list[str] | None:
        return await asyncio.to_thread(self._read_list, key)

    async def set_string_list(self, key: str, values: list[str]) -> None:
        await asyncio.to_thread(self._write_list, key, list(values))

    async def ping(self) -> bool:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError:
            return False
        return os.access(self.path.parent, os.W_OK)

    async def close(self) -> None:
        return None

    # ── file helpers ──────────────────────────────────────────

    def _read_all(self) -> dict[str, Any]:
        if not self.path.is_file():
            return {}
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except ValueError:
            logger.warning("Key-value store file is not valid JSON, ignoring it", extra={"path": str(self.path)})
            return {}
        except OSError as e:
            raise StorageError(f"Failed to read {self.path}: {e}") from e
        if not isinstance(payload, dict):
            logger.warning("Key-value store file is not a JSON object, ignoring it", extra={"path": str(self.path)})
            return {}
        return payload

    def _read_list(self, key: str) -> list[str] | None:
        value = self._read_all().get(key)
        if value is None:
            return None
        if not isinstance(value, list):
            logger.warning("Key-value slot is not a list", extra={"key": key, "type": type(value).__name__})
            return None
        return [item for item in value if isinstance(item, str)]

    def _write_list(self, key: str, values: list[str]) -> None:
        payload = self._read_all()
        payload[key] = values
        tmp_path = self.path.with_name(self.path.name + '.tmp')
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
            os.replace(tmp_path, self.path)
        except OSError as e:
            raise StorageError(f"Failed to write {self.path}: {e}") from e
        logger.debug("Key-value slot written", extra={"key": key, "count": len(values)})
