"""In-memory implementation of KeyValueStore for testing."""

from domain.model.errors import StorageError


class FakeKeyValueStore:
    def __init__(self, data: dict[str, list[str]] | None = None):
        self.data: dict[str, list[str]] = dict(data or {})
        self.writes: list[tuple[str, list[str]]] = []
        self.fail_reads = False
        self.fail_writes = False
        self.closed = False

    async def get_string_list(self, key: str) -> list[str] | None:
        if self.fail_reads:
            raise StorageError("read failed")
        values = self.data.get(key)
        return list(values) if values is not None else None

    async def set_string_list(self, key: str, values: list[str]) -> None:
        if self.fail_writes:
            raise StorageError("write failed")
        self.data[key] = list(values)
        self.writes.append((key, list(values)))

    async def ping(self) -> bool:
        return not (self.fail_reads or self.fail_writes)

    async def close(self) -> None:
        self.closed = True
