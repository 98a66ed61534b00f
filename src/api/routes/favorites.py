"""Favorites API routes.

Endpoints:
- GET /favorites: Saved entries sorted by word
- POST /favorites/reload: Refresh the in-memory favorites from storage
- POST /favorites/toggle: Save or unsave an entry
- GET /favorites/{word}: Whether a word is saved
- DELETE /favorites/{word}: Unsave a word
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException

from api.dependencies import get_session
from api.models import FavoriteStatusResponse, FavoritesResponse, WordEntryModel
from domain.model.entry import WordEntry
from services.dictionary_session import DictionarySession

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/favorites", tags=["favorites"])


def _favorites_response(session: DictionarySession) -> FavoritesResponse:
    favorites = [
        WordEntryModel.from_entry(
            entry,
            is_favorite=True,
            is_playing=session.is_currently_playing(entry),
        )
        for entry in session.favorites()
    ]
    return FavoritesResponse(favorites=favorites, total=len(favorites))


@router.get("", response_model=FavoritesResponse)
async def list_favorites(session: DictionarySession = Depends(get_session)):
    """List saved entries, sorted case-insensitively by word."""
    return _favorites_response(session)


@router.post("/reload", response_model=FavoritesResponse)
async def reload_favorites(session: DictionarySession = Depends(get_session)):
    """Re-read favorites from storage."""
    await session.reload_favorites()
    return _favorites_response(session)


@router.post("/toggle", response_model=FavoriteStatusResponse)
async def toggle_favorite(
    payload: dict[str, Any] = Body(..., description="Entry in dictionaryapi.dev shape"),
    session: DictionarySession = Depends(get_session),
):
    """Save the entry, or unsave it if it is already a favorite."""
    entry = WordEntry.from_dict(payload)
    if not entry.word:
        raise HTTPException(status_code=422, detail="Entry must have a word")
    saved = await session.toggle_favorite(entry)
    return FavoriteStatusResponse(word=entry.word, is_favorite=saved)


@router.get("/{word}", response_model=FavoriteStatusResponse)
async def get_favorite_status(
    word: str,
    session: DictionarySession = Depends(get_session),
):
    """Whether ``word`` is saved (case-insensitive)."""
    return FavoriteStatusResponse(word=word, is_favorite=session.is_favorite(word))


@router.delete("/{word}", response_model=FavoriteStatusResponse)
async def delete_favorite(
    word: str,
    session: DictionarySession = Depends(get_session),
):
    """Unsave ``word``."""
    if not await session.remove_favorite(word):
        raise HTTPException(status_code=404, detail="Favorite not found")
    return FavoriteStatusResponse(word=word, is_favorite=False)
