"""Free Dictionary API adapter.

Implements DictionaryPort by fetching entries from dictionaryapi.dev and
decoding them into WordEntry objects. Failures are classified into the
DictionaryLookupError family so callers can branch on a closed set of kinds.

API Documentation: https://dictionaryapi.dev
"""

import asyncio
import logging
from typing import Any, Mapping

import httpx

from domain.model.entry import WordEntry
from domain.model.errors import (
    ApiError,
    LookupTimeoutError,
    MalformedResponseError,
    NoConnectionError,
    ValidationError,
)

logger = logging.getLogger(__name__)

DICTIONARY_API_BASE_URL = "https://api.dictionaryapi.dev/api/v2/entries/en"
LOOKUP_TIMEOUT_SECONDS = 15.0


class FreeDictionaryAdapter:
    """Adapter that fetches English entries from the Free Dictionary API.

    One attempt per call, no caching. The timeout is a hard deadline for
    the whole request, not a per-phase socket timeout.
    """

    def __init__(
        self,
        base_url: str = DICTIONARY_API_BASE_URL,
        timeout: float = LOOKUP_TIMEOUT_SECONDS,
    ):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout

    def build_url(self, word: str) -> str:
        # The word goes into the path as-is; httpx applies its default escaping.
        return f"{self.base_url}/{word}"

    async def lookup(self, word: str) -> list[WordEntry]:
        """Fetch and decode entries for a word.

        Args:
            word: Non-empty word to look up.

        Returns:
            Decoded entries in API order.

        Raises:
            NoConnectionError, LookupTimeoutError, ApiError, MalformedResponseError.
        """
        if not word:
            raise ValidationError("Word must not be empty")

        url = self.build_url(word)
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await asyncio.wait_for(client.get(url), timeout=self.timeout)
        except (httpx.TimeoutException, asyncio.TimeoutError):
            logger.warning(
                "Dictionary API request timed out",
                extra={"word": word, "timeout_seconds": self.timeout},
            )
            raise LookupTimeoutError() from None
        except httpx.TransportError as e:
            logger.warning(
                "Dictionary API unreachable",
                extra={"word": word, "error_type": type(e).__name__},
            )
            raise NoConnectionError() from e

        if response.status_code == 200:
            entries = _decode_entries(response, word)
            logger.debug(
                "Dictionary API lookup successful",
                extra={"word": word, "entry_count": len(entries)},
            )
            return entries

        message = _error_message(response)
        logger.info(
            "Dictionary API returned an error",
            extra={"word": word, "status_code": response.status_code, "error_message": message},
        )
        raise ApiError(message, status_code=response.status_code)


# ── Response decoding ────────────────────────────────────────


def _decode_entries(response: httpx.Response, word: str) -> list[WordEntry]:
    """Decode a success body. The whole call fails on list-level malformation."""
    try:
        data = response.json()
    except ValueError:
        logger.warning("Dictionary API returned invalid JSON", extra={"word": word})
        raise MalformedResponseError() from None

    if not isinstance(data, list):
        logger.warning(
            "Unexpected response type from Dictionary API",
            extra={"word": word, "type": type(data).__name__},
        )
        raise MalformedResponseError()

    if not all(isinstance(item, Mapping) for item in data):
        logger.warning("Dictionary API returned a non-object entry", extra={"word": word})
        raise MalformedResponseError()

    return [WordEntry.from_dict(item) for item in data]


def _error_message(response: httpx.Response) -> str:
    """Compose a display message from an error body.

    {"title", "message", "resolution"} becomes "<title>: <message> <resolution>";
    any other body falls back to a generic message with the status code.
    """
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, Mapping):
        title = _text(body.get('title'), "Not found")
        message = _text(body.get('message'), "No definitions found.")
        resolution = _text(body.get('resolution'), "")
        return f"{title}: {message} {resolution}".strip()

    return f"Error {response.status_code}: Unable to fetch definition."


def _text(value: Any, default: str) -> str:
    if value is None:
        return default
    return value if isinstance(value, str) else str(value)
