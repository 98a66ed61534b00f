"""Dictionary session: state and commands behind one dictionary screen.

Holds the mutable state a rendering layer reads (results, error, loading,
online flag, favorites mirror, playback) and publishes a ChangeEvent after
every change. A session can be closed while an operation is in flight: the
pending completion notices the session is closed and drops its result.
"""

import logging
from typing import Callable

from domain.model.audio import PlaybackState, first_playable_audio
from domain.model.entry import WordEntry
from domain.model.errors import LookupErrorKind, NO_CONNECTION_MESSAGE, StorageError
from domain.model.events import ChangeEvent, ChangeTopic
from domain.model.favorites import Favorites
from domain.model.lookup import LookupFailure, SearchOutcome
from port.audio_player import AudioPlayerPort
from port.connectivity import ConnectivityPort
from port.dictionary import DictionaryPort
from services import dictionary_service
from services.favorites_store import FavoritesStore
from services.playback_controller import PlaybackController
from utils.listeners import ListenerSet, Unsubscribe

logger = logging.getLogger(__name__)

FAVORITES_SAVE_FAILED_MESSAGE = "Unable to save favorites"
FAVORITES_LOAD_FAILED_MESSAGE = "Unable to load favorites"


class DictionarySession:
    def __init__(
        self,
        dictionary: DictionaryPort,
        favorites_store: FavoritesStore,
        player: AudioPlayerPort,
        connectivity: ConnectivityPort,
    ):
        self.dictionary = dictionary
        self.favorites_store = favorites_store
        self.player = player
        self.connectivity = connectivity
        self.playback = PlaybackController(player)

        self.is_online: bool = True
        self.loading: bool = False
        self.results: list[WordEntry] = []
        self.error: LookupFailure | None = None
        self.last_query: str | None = None
        self.playback_notice: str | None = None

        self._favorites = Favorites()
        self._changes: ListenerSet[ChangeEvent] = ListenerSet("session")
        self._subscriptions: list[Unsubscribe] = []
        self._started = False
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def current_url(self) -> str | None:
        return self.playback.current_url

    @property
    def playback_state(self) -> PlaybackState:
        return self.playback.state

    def subscribe(self, listener: Callable[[ChangeEvent], None]) -> Unsubscribe:
        """Register a listener called synchronously after every state change."""
        return self._changes.subscribe(listener)

    # ── lifecycle ─────────────────────────────────────────────

    async def start(self) -> None:
        """Query connectivity, subscribe to engine/connectivity streams, load favorites."""
        if self._started or self._closed:
            return
        self._started = True

        self._subscriptions.append(self.connectivity.on_changed(self._on_connectivity_changed))
        self._subscriptions.append(self.playback.subscribe(self._on_playback_event))
        self.playback.attach()

        online = await self.connectivity.check()
        if self._closed:
            return
        self._set_online(online)

        await self.reload_favorites()
        logger.info(
            "Dictionary session started",
            extra={"online": self.is_online, "favorite_count": len(self._favorites)},
        )

    async def close(self) -> None:
        """Release subscriptions and the audio engine. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        subscriptions, self._subscriptions = self._subscriptions, []
        for unsubscribe in subscriptions:
            unsubscribe()
        self.playback.close()
        self._changes.clear()
        await self.player.release()
        logger.info("Dictionary session closed")

    # ── search ────────────────────────────────────────────────

    async def search(self, raw: str | None) -> SearchOutcome | None:
        """Look up ``raw`` and replace results (or error) with the outcome.

        Blank input is ignored. While offline the network is not touched.
        """
        word = (raw or "").strip()
        if not word or self._closed:
            return None

        if not self.is_online:
            outcome = SearchOutcome(
                word=word,
                failure=LookupFailure(kind=LookupErrorKind.NO_CONNECTION, message=NO_CONNECTION_MESSAGE),
            )
            self._apply_outcome(outcome)
            return outcome

        self.loading = True
        self.error = None
        self.results = []
        self.last_query = word
        self._emit(ChangeTopic.RESULTS)

        try:
            outcome = await dictionary_service.search(self.dictionary, word)
        finally:
            self.loading = False

        if self._closed:
            logger.debug("Dropping search result for closed session", extra={"word": word})
            return outcome
        self._apply_outcome(outcome)
        return outcome

    def _apply_outcome(self, outcome: SearchOutcome) -> None:
        self.last_query = outcome.word
        self.loading = False
        if outcome.failure is not None:
            self.results = []
            self.error = outcome.failure
        else:
            self.results = list(outcome.entries)
            self.error = None
        self._emit(ChangeTopic.RESULTS)

    # ── favorites ─────────────────────────────────────────────

    def is_favorite(self, word: str) -> bool:
        return word in self._favorites

    def favorites(self) -> list[WordEntry]:
        """Saved entries sorted case-insensitively by word."""
        return self._favorites.sorted()

    def get_favorite(self, word: str) -> WordEntry | None:
        return self._favorites.get(word)

    async def toggle_favorite(self, entry: WordEntry) -> bool:
        """Save or unsave ``entry``. Returns True if it is now a favorite."""
        if self._closed:
            return entry.key in self._favorites
        saved = self._favorites.toggle(entry)
        logger.info("Favorite toggled", extra={"word": entry.key, "saved": saved})
        await self._persist_favorites()
        return saved

    async def remove_favorite(self, word: str) -> bool:
        """Unsave by word. Returns False if it was not a favorite."""
        if self._closed or not self._favorites.remove(word):
            return False
        logger.info("Favorite removed", extra={"word": word.lower()})
        await self._persist_favorites()
        return True

    async def reload_favorites(self) -> None:
        """Replace the in-memory mirror with what storage holds."""
        try:
            entries = await self.favorites_store.load()
        except StorageError as e:
            logger.warning("Failed to load favorites", extra={"error": str(e)})
            self._emit(ChangeTopic.NOTICE, FAVORITES_LOAD_FAILED_MESSAGE)
            return
        if self._closed:
            return
        self._favorites.replace(entries)
        self._emit(ChangeTopic.FAVORITES)

    async def _persist_favorites(self) -> None:
        try:
            await self.favorites_store.save(self._favorites.entries())
        except StorageError as e:
            logger.error("Failed to save favorites", extra={"error": str(e)})
            self._emit(ChangeTopic.NOTICE, FAVORITES_SAVE_FAILED_MESSAGE)
        self._emit(ChangeTopic.FAVORITES)

    # ── playback ──────────────────────────────────────────────

    async def play(self, raw_url: str | None) -> bool:
        if self._closed:
            return False
        self.playback_notice = None
        return await self.playback.toggle(raw_url)

    async def toggle_current_playback(self) -> bool:
        if self._closed:
            return False
        self.playback_notice = None
        return await self.playback.toggle_current()

    def is_currently_playing(self, entry: WordEntry) -> bool:
        url = first_playable_audio(entry)
        return url is not None and self.playback.is_playing(url)

    def _on_playback_event(self, event: ChangeEvent) -> None:
        if event.topic == ChangeTopic.NOTICE:
            self.playback_notice = event.message
        self._emit(event.topic, event.message)

    # ── connectivity ──────────────────────────────────────────

    def _on_connectivity_changed(self, online: bool) -> None:
        if self._closed:
            return
        self._set_online(online)

    def _set_online(self, online: bool) -> None:
        if online == self.is_online:
            return
        self.is_online = online
        self._emit(ChangeTopic.CONNECTIVITY)

    def _emit(self, topic: ChangeTopic, message: str | None = None) -> None:
        if self._closed:
            return
        self._changes.emit(ChangeEvent(topic, message))
