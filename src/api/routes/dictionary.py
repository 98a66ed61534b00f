"""Dictionary API routes for word lookups.

Endpoints:
- GET /dictionary/{word}: Look up a word on dictionaryapi.dev
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_session
from api.models import SearchResponse, WordEntryModel
from domain.model.errors import LookupErrorKind
from domain.model.lookup import LookupFailure
from services.dictionary_session import DictionarySession

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dictionary", tags=["dictionary"])

_FAILURE_STATUS = {
    LookupErrorKind.NO_CONNECTION: 503,
    LookupErrorKind.TIMEOUT: 504,
    LookupErrorKind.API_ERROR: 502,
    LookupErrorKind.MALFORMED_RESPONSE: 502,
    LookupErrorKind.UNEXPECTED: 500,
}


def _failure_status(failure: LookupFailure) -> int:
    # Upstream "no definitions" stays a 404 for clients
    if failure.kind == LookupErrorKind.API_ERROR and failure.status_code == 404:
        return 404
    return _FAILURE_STATUS[failure.kind]


@router.get("/{word}", response_model=SearchResponse)
async def search_word(
    word: str,
    session: DictionarySession = Depends(get_session),
):
    """Look up a word and return its entries in API order."""
    if not word.strip():
        raise HTTPException(status_code=422, detail="Word must not be empty")

    outcome = await session.search(word)
    if outcome is None:
        raise HTTPException(status_code=503, detail="Dictionary session unavailable")

    if outcome.failure is not None:
        raise HTTPException(
            status_code=_failure_status(outcome.failure),
            detail={"kind": outcome.failure.kind.value, "message": outcome.failure.message},
        )

    return SearchResponse(
        word=outcome.word,
        entries=[
            WordEntryModel.from_entry(
                entry,
                is_favorite=session.is_favorite(entry.word),
                is_playing=session.is_currently_playing(entry),
            )
            for entry in outcome.entries
        ],
    )
