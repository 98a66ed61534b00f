"""Favorites domain model: in-memory mirror of the saved words."""

from typing import Iterable

from domain.model.entry import WordEntry


class Favorites:
    """Saved entries keyed by lowercased word.

    This mapping is the source of truth; the favorites store persists it by
    rewriting the whole list after every change.
    """

    def __init__(self, entries: Iterable[WordEntry] = ()):
        self._by_key: dict[str, WordEntry] = {}
        self.replace(entries)

    def __len__(self) -> int:
        return len(self._by_key)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self._by_key

    def get(self, word: str) -> WordEntry | None:
        return self._by_key.get(word.lower())

    def replace(self, entries: Iterable[WordEntry]) -> None:
        """Reset the mirror. Later entries win on duplicate keys."""
        self._by_key = {entry.key: entry for entry in entries}

    def add(self, entry: WordEntry) -> None:
        self._by_key[entry.key] = entry

    def remove(self, word: str) -> bool:
        """Remove by word, case-insensitive. Returns False if absent."""
        return self._by_key.pop(word.lower(), None) is not None

    def toggle(self, entry: WordEntry) -> bool:
        """Add the entry, or remove it if already saved. Returns True if now saved."""
        if entry.key in self._by_key:
            del self._by_key[entry.key]
            return False
        self._by_key[entry.key] = entry
        return True

    def entries(self) -> list[WordEntry]:
        """Entries in insertion order (storage order)."""
        return list(self._by_key.values())

    def sorted(self) -> list[WordEntry]:
        """Entries ordered case-insensitively by word, for display."""
        return sorted(self._by_key.values(), key=lambda e: e.key)
