"""Pronunciation playback controller.

Tracks one current audio URL and mirrors the engine's playback state. The
controller only *requests* transitions (pause, stop, load, play); ``state``
changes only when the engine reports them.
"""

import logging
from typing import Callable

from domain.model.audio import PlaybackState, normalize_audio_url
from domain.model.events import ChangeEvent, ChangeTopic
from port.audio_player import AudioPlayerPort
from utils.listeners import ListenerSet, Unsubscribe

logger = logging.getLogger(__name__)

UNABLE_TO_PLAY_MESSAGE = "Unable to play audio"


class PlaybackController:
    def __init__(self, player: AudioPlayerPort):
        self.player = player
        self.current_url: str | None = None
        self.state: PlaybackState = PlaybackState.STOPPED
        self._changes: ListenerSet[ChangeEvent] = ListenerSet("playback")
        self._engine_subscriptions: list[Unsubscribe] = []
        self._closed = False

    def attach(self) -> None:
        """Start mirroring the engine's state and error streams. Idempotent."""
        if self._engine_subscriptions or self._closed:
            return
        self._engine_subscriptions = [
            self.player.on_state_changed(self._on_engine_state),
            self.player.on_error(self._on_engine_error),
        ]

    def subscribe(self, listener: Callable[[ChangeEvent], None]) -> Unsubscribe:
        return self._changes.subscribe(listener)

    def is_playing(self, raw_url: str | None) -> bool:
        """True when ``raw_url`` is the current source and the engine is playing."""
        url = normalize_audio_url(raw_url)
        return (
            url is not None
            and url == self.current_url
            and self.state == PlaybackState.PLAYING
        )

    async def toggle(self, raw_url: str | None) -> bool:
        """Play, pause or switch to ``raw_url``.

        Same URL while playing → pause. Anything else → stop the previous
        source, load the new one and play it.

        Returns:
            True if a command was issued, False if the URL is not playable
            or the engine rejected the command.
        """
        url = normalize_audio_url(raw_url)
        if url is None:
            logger.debug("Ignoring unplayable audio URL", extra={"raw_url": raw_url})
            return False

        try:
            if url == self.current_url and self.state == PlaybackState.PLAYING:
                await self.player.pause()
                return True

            if url != self.current_url:
                self.current_url = url
                self._changes.emit(ChangeEvent(ChangeTopic.PLAYBACK))
            await self.player.stop()
            await self.player.set_source(url)
            await self.player.resume()
        except Exception as e:
            logger.warning(
                "Playback command failed",
                extra={"url": url, "error": str(e), "error_type": type(e).__name__},
            )
            self._notify_failure()
            return False

        logger.debug("Playback requested", extra={"url": url})
        return True

    async def toggle_current(self) -> bool:
        """Toggle whatever is currently loaded. No-op when nothing is."""
        if self.current_url is None:
            return False
        return await self.toggle(self.current_url)

    def close(self) -> None:
        """Release engine subscriptions. Safe to call more than once."""
        self._closed = True
        subscriptions, self._engine_subscriptions = self._engine_subscriptions, []
        for unsubscribe in subscriptions:
            unsubscribe()
        self._changes.clear()

    # ── engine callbacks ──────────────────────────────────────

    def _on_engine_state(self, state: PlaybackState) -> None:
        if self._closed:
            return
        self.state = state
        self._changes.emit(ChangeEvent(ChangeTopic.PLAYBACK))

    def _on_engine_error(self, message: str) -> None:
        if self._closed:
            return
        logger.warning("Audio engine error", extra={"url": self.current_url, "error": message})
        self._notify_failure()

    def _notify_failure(self) -> None:
        self._changes.emit(ChangeEvent(ChangeTopic.NOTICE, UNABLE_TO_PLAY_MESSAGE))
