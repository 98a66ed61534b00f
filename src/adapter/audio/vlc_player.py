"""libVLC implementation of AudioPlayerPort.

Plays pronunciation URLs directly (VLC streams http/https media). VLC
reports state changes on its own thread; they are handed to the asyncio
loop that issued the last command before listeners see them.
"""

import asyncio
import logging
import sys
from typing import Any, Callable

from domain.model.audio import PlaybackState
from domain.model.errors import PlaybackError
from utils.listeners import ListenerSet, Unsubscribe

logger = logging.getLogger(__name__)


class VlcAudioPlayer:
    """Thin libVLC wrapper for audio-only URL playback."""

    def __init__(self, *, vlc_module: Any = None, platform_name: str | None = None) -> None:
        if vlc_module is None:
            try:
                import vlc as vlc_module
            except (ImportError, OSError, NotImplementedError) as e:
                raise PlaybackError("python-vlc or libVLC is not available") from e
        self._vlc = vlc_module
        platform_value = platform_name if platform_name is not None else sys.platform
        args = ["--no-video"]
        if str(platform_value).startswith("linux"):
            args.append("--no-xlib")
        self.instance = self._vlc.Instance(args)
        self.player = self.instance.media_player_new()
        self.media = None
        self._loop: asyncio.AbstractEventLoop | None = None
        self._states: ListenerSet[PlaybackState] = ListenerSet("vlc.state")
        self._errors: ListenerSet[str] = ListenerSet("vlc.error")
        self._attach_events()

    # ── engine events ─────────────────────────────────────────

    def _attach_events(self) -> None:
        event_type = self._vlc.EventType
        state_events = {
            event_type.MediaPlayerPlaying: PlaybackState.PLAYING,
            event_type.MediaPlayerPaused: PlaybackState.PAUSED,
            event_type.MediaPlayerStopped: PlaybackState.STOPPED,
            event_type.MediaPlayerEndReached: PlaybackState.COMPLETED,
        }
        manager = self.player.event_manager()
        for vlc_event, state in state_events.items():
            manager.event_attach(vlc_event, self._on_vlc_state, state)
        manager.event_attach(event_type.MediaPlayerEncounteredError, self._on_vlc_error)

    def _on_vlc_state(self, _event: Any, state: PlaybackState) -> None:
        self._dispatch(self._states.emit, state)

    def _on_vlc_error(self, _event: Any) -> None:
        logger.warning("VLC reported a playback error")
        self._dispatch(self._errors.emit, "Unable to play audio")

    def _dispatch(self, emit: Callable[[Any], None], value: Any) -> None:
        loop = self._loop
        if loop is not None and not loop.is_closed():
            loop.call_soon_threadsafe(emit, value)
        else:
            emit(value)

    def _remember_loop(self) -> None:
        try:
            self._loop = asyncio.get_running_loop()
        except RuntimeError:
            pass

    # ── AudioPlayerPort implementation ───────────────────────

    async def set_source(self, url: str) -> None:
        self._remember_loop()
        self._release_media()
        media = self.instance.media_new(url)
        if media is None:
            raise PlaybackError(f"VLC could not open {url}")
        self.player.set_media(media)
        self.media = media

    async def resume(self) -> None:
        self._remember_loop()
        rc = int(self.player.play())
        if rc == -1:
            raise PlaybackError("VLC failed to start playback.")

    async def pause(self) -> None:
        self._remember_loop()
        self.player.set_pause(1)

    async def stop(self) -> None:
        self._remember_loop()
        # libVLC stop blocks until the input thread has joined.
        await asyncio.to_thread(self.player.stop)

    def on_state_changed(self, listener: Callable[[PlaybackState], None]) -> Unsubscribe:
        self._remember_loop()
        return self._states.subscribe(listener)

    def on_error(self, listener: Callable[[str], None]) -> Unsubscribe:
        self._remember_loop()
        return self._errors.subscribe(listener)

    async def release(self) -> None:
        self._states.clear()
        self._errors.clear()
        try:
            await asyncio.to_thread(self.player.stop)
        except Exception:
            logger.debug("VLC stop during release failed", exc_info=True)
        self._release_media()
        self.player.release()
        self.instance.release()

    def _release_media(self) -> None:
        if self.media is None:
            return
        try:
            self.media.release()
        except Exception:
            logger.debug("VLC media release failed", exc_info=True)
        self.media = None
