"""Port for local key-value persistence."""

from typing import Protocol


class KeyValueStore(Protocol):
    """Named slots holding lists of strings.

    Backend failures raise StorageError.
    """

    async def get_string_list(self, key: str) -> list[str] | None:
        """Return the stored list, or None if the slot was never written."""
        ...

    async def set_string_list(self, key: str, values: list[str]) -> None:
        """Overwrite the slot with ``values``."""
        ...

    async def ping(self) -> bool: ...

    async def close(self) -> None: ...
