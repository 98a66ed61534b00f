"""In-memory implementation of DictionaryPort for testing."""

from domain.model.entry import WordEntry


class FakeDictionaryAdapter:
    """Fake dictionary adapter that returns preconfigured responses."""

    def __init__(
        self,
        entries: list[WordEntry] | None = None,
        error: Exception | None = None,
    ):
        self.entries = entries or []
        self.error = error
        self.calls: list[str] = []

    @property
    def last_word(self) -> str | None:
        return self.calls[-1] if self.calls else None

    async def lookup(self, word: str) -> list[WordEntry]:
        self.calls.append(word)
        if self.error is not None:
            raise self.error
        return list(self.entries)
