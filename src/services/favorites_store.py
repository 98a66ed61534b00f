"""Favorites persistence.

Favorites are stored as one key-value slot holding a list of strings, each
string an independently JSON-encoded WordEntry. Saving always rewrites the
whole slot.
"""

import logging
from typing import Iterable

from domain.model.entry import WordEntry
from port.key_value_store import KeyValueStore

logger = logging.getLogger(__name__)

FAVORITES_KEY = 'favorites_v1'


class FavoritesStore:
    def __init__(self, store: KeyValueStore, key: str = FAVORITES_KEY):
        self.store = store
        self.key = key

    async def load(self) -> list[WordEntry]:
        """Load saved entries, skipping strings that do not decode to an object."""
        raw_list = await self.store.get_string_list(self.key) or []
        entries: list[WordEntry] = []
        skipped = 0
        for raw in raw_list:
            entry = WordEntry.from_json(raw)
            if entry is None:
                skipped += 1
                continue
            entries.append(entry)
        if skipped:
            logger.debug("Skipped corrupt favorites", extra={"key": self.key, "skipped": skipped})
        return entries

    async def save(self, entries: Iterable[WordEntry]) -> None:
        """Serialize each entry and overwrite the slot. Callers dedupe by key."""
        encoded = [entry.to_json() for entry in entries]
        await self.store.set_string_list(self.key, encoded)
        logger.debug("Favorites saved", extra={"key": self.key, "count": len(encoded)})
