"""In-memory implementation of AudioPlayerPort for testing.

Commands are recorded in ``commands`` and, like a real engine, answered
with a state event (resume → playing, pause → paused, stop → stopped).
"""

from typing import Callable

from domain.model.audio import PlaybackState
from domain.model.errors import PlaybackError
from utils.listeners import ListenerSet, Unsubscribe


class FakeAudioPlayer:
    def __init__(self, fail_on: set[str] | None = None):
        self.fail_on = set(fail_on or ())
        self.commands: list[tuple[str, ...]] = []
        self.source: str | None = None
        self.released = False
        self._states: ListenerSet[PlaybackState] = ListenerSet("fake_player.state")
        self._errors: ListenerSet[str] = ListenerSet("fake_player.error")

    @property
    def state_listener_count(self) -> int:
        return len(self._states)

    def _record(self, *command: str) -> None:
        self.commands.append(command)
        if command[0] in self.fail_on:
            raise PlaybackError(f"{command[0]} failed")

    async def set_source(self, url: str) -> None:
        self._record('set_source', url)
        self.source = url

    async def resume(self) -> None:
        self._record('resume')
        self.emit_state(PlaybackState.PLAYING)

    async def pause(self) -> None:
        self._record('pause')
        self.emit_state(PlaybackState.PAUSED)

    async def stop(self) -> None:
        self._record('stop')
        self.emit_state(PlaybackState.STOPPED)

    def emit_state(self, state: PlaybackState) -> None:
        self._states.emit(state)

    def emit_error(self, message: str) -> None:
        self._errors.emit(message)

    def on_state_changed(self, listener: Callable[[PlaybackState], None]) -> Unsubscribe:
        return self._states.subscribe(listener)

    def on_error(self, listener: Callable[[str], None]) -> Unsubscribe:
        return self._errors.subscribe(listener)

    async def release(self) -> None:
        self.released = True
        self._states.clear()
        self._errors.clear()
