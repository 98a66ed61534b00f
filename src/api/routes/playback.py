"""Pronunciation playback routes.

Endpoints:
- GET /playback: Current source, engine state and last failure notice
- POST /playback/toggle: Play, pause or switch to a URL
- POST /playback/toggle-current: Play/pause whatever is loaded
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_session
from api.models import PlaybackStatusResponse, PlaybackToggleRequest
from domain.model.audio import normalize_audio_url
from services.dictionary_session import DictionarySession
from services.playback_controller import UNABLE_TO_PLAY_MESSAGE

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/playback", tags=["playback"])


def _status(session: DictionarySession) -> PlaybackStatusResponse:
    return PlaybackStatusResponse(
        current_url=session.current_url,
        state=session.playback_state.value,
        notice=session.playback_notice,
    )


@router.get("", response_model=PlaybackStatusResponse)
async def get_playback(session: DictionarySession = Depends(get_session)):
    return _status(session)


@router.post("/toggle", response_model=PlaybackStatusResponse)
async def toggle_playback(
    request: PlaybackToggleRequest,
    session: DictionarySession = Depends(get_session),
):
    """Toggle playback of ``url``; same URL while playing pauses."""
    if normalize_audio_url(request.url) is None:
        raise HTTPException(status_code=422, detail="Audio URL is not playable")
    if not await session.play(request.url):
        raise HTTPException(status_code=502, detail=UNABLE_TO_PLAY_MESSAGE)
    return _status(session)


@router.post("/toggle-current", response_model=PlaybackStatusResponse)
async def toggle_current_playback(session: DictionarySession = Depends(get_session)):
    if session.current_url is None:
        raise HTTPException(status_code=409, detail="No audio loaded")
    if not await session.toggle_current_playback():
        raise HTTPException(status_code=502, detail=UNABLE_TO_PLAY_MESSAGE)
    return _status(session)
