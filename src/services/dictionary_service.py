"""Dictionary lookup service.

Turns a raw user query into a SearchOutcome. Lookup errors raised by the
dictionary port are converted into a tagged LookupFailure so callers branch
on ``failure.kind`` instead of catching exceptions.
"""

import logging

from domain.model.errors import (
    DictionaryLookupError,
    LookupErrorKind,
    UNEXPECTED_MESSAGE,
    ValidationError,
)
from domain.model.lookup import LookupFailure, SearchOutcome
from port.dictionary import DictionaryPort

logger = logging.getLogger(__name__)


def normalize_query(raw_word: str | None) -> str:
    """Trim a user query. Raises ValidationError if nothing is left."""
    word = (raw_word or "").strip()
    if not word:
        raise ValidationError("Word must not be empty")
    return word


async def search(dictionary: DictionaryPort, raw_word: str) -> SearchOutcome:
    """Look up a word and return entries or a tagged failure.

    Args:
        dictionary: Dictionary port to query.
        raw_word: User input; surrounding whitespace is ignored.

    Returns:
        SearchOutcome with entries in API order, or with ``failure`` set and
        no entries.

    Raises:
        ValidationError: If the query is empty after trimming.
    """
    word = normalize_query(raw_word)

    try:
        entries = await dictionary.lookup(word)
    except DictionaryLookupError as e:
        logger.info("Lookup failed", extra={"word": word, "kind": e.kind.value})
        return SearchOutcome(word=word, failure=LookupFailure.from_error(e))
    except Exception:
        logger.exception("Unexpected error during lookup", extra={"word": word})
        return SearchOutcome(
            word=word,
            failure=LookupFailure(kind=LookupErrorKind.UNEXPECTED, message=UNEXPECTED_MESSAGE),
        )

    logger.info("Lookup succeeded", extra={"word": word, "entry_count": len(entries)})
    return SearchOutcome(word=word, entries=entries)
