"""AudioPlayerPort used when audio is disabled or libVLC is missing.

Every command is rejected with PlaybackError, which the playback
controller reports as "Unable to play audio".
"""

from typing import Callable

from domain.model.audio import PlaybackState
from domain.model.errors import PlaybackError
from utils.listeners import ListenerSet, Unsubscribe


class UnavailableAudioPlayer:
    def __init__(self, reason: str = "Audio playback is not available"):
        self.reason = reason
        self._states: ListenerSet[PlaybackState] = ListenerSet("unavailable.state")
        self._errors: ListenerSet[str] = ListenerSet("unavailable.error")

    async def set_source(self, url: str) -> None:
        raise PlaybackError(self.reason)

    async def resume(self) -> None:
        raise PlaybackError(self.reason)

    async def pause(self) -> None:
        raise PlaybackError(self.reason)

    async def stop(self) -> None:
        return None

    def on_state_changed(self, listener: Callable[[PlaybackState], None]) -> Unsubscribe:
        return self._states.subscribe(listener)

    def on_error(self, listener: Callable[[str], None]) -> Unsubscribe:
        return self._errors.subscribe(listener)

    async def release(self) -> None:
        self._states.clear()
        self._errors.clear()
