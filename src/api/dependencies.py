"""Adapter wiring and request dependencies.

Backends are chosen from environment variables:
- STORAGE_BACKEND: "file" (default) or "redis"
- AUDIO_BACKEND: "vlc" (default) or "none"
"""

import logging
import os

from fastapi import HTTPException, Request

from adapter.audio.unavailable import UnavailableAudioPlayer
from adapter.audio.vlc_player import VlcAudioPlayer
from adapter.connectivity.http_probe import HttpConnectivityMonitor
from adapter.external.free_dictionary import FreeDictionaryAdapter
from adapter.storage.json_file_store import JsonFileKeyValueStore
from adapter.storage.redis_store import RedisKeyValueStore
from domain.model.errors import PlaybackError
from port.audio_player import AudioPlayerPort
from port.connectivity import ConnectivityPort
from port.key_value_store import KeyValueStore
from services.dictionary_session import DictionarySession
from services.favorites_store import FavoritesStore

logger = logging.getLogger(__name__)

STORAGE_BACKEND = os.getenv('STORAGE_BACKEND', 'file').lower()
AUDIO_BACKEND = os.getenv('AUDIO_BACKEND', 'vlc').lower()


def build_key_value_store(backend: str = STORAGE_BACKEND) -> KeyValueStore:
    if backend == 'redis':
        return RedisKeyValueStore()
    if backend != 'file':
        logger.warning("Unknown STORAGE_BACKEND, using file store", extra={"backend": backend})
    return JsonFileKeyValueStore()


def build_audio_player(backend: str = AUDIO_BACKEND) -> AudioPlayerPort:
    if backend == 'none':
        return UnavailableAudioPlayer("Audio playback is disabled")
    try:
        return VlcAudioPlayer()
    except PlaybackError as e:
        logger.warning("Audio playback unavailable", extra={"error": str(e)})
        return UnavailableAudioPlayer(str(e))


def build_session(
    store: KeyValueStore,
    connectivity: ConnectivityPort | None = None,
    player: AudioPlayerPort | None = None,
) -> DictionarySession:
    return DictionarySession(
        dictionary=FreeDictionaryAdapter(),
        favorites_store=FavoritesStore(store),
        player=player or build_audio_player(),
        connectivity=connectivity or HttpConnectivityMonitor(),
    )


def get_session(request: Request) -> DictionarySession:
    """Session created by the app lifespan, or 503 if it is not running."""
    session = getattr(request.app.state, 'session', None)
    if session is None or session.closed:
        raise HTTPException(status_code=503, detail="Dictionary session unavailable")
    return session
