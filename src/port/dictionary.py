"""Dictionary port: outbound interface for dictionary data sources."""

from typing import Protocol

from domain.model.entry import WordEntry


class DictionaryPort(Protocol):
    """Port for fetching dictionary entries.

    lookup() returns decoded entries in source order, or raises one of the
    DictionaryLookupError subclasses (NoConnectionError, LookupTimeoutError,
    ApiError, MalformedResponseError).
    """

    async def lookup(self, word: str) -> list[WordEntry]: ...
