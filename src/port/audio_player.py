"""Port for the audio engine that plays pronunciation URLs."""

from typing import Callable, Protocol

from domain.model.audio import PlaybackState
from utils.listeners import Unsubscribe


class AudioPlayerPort(Protocol):
    """Commands are requests; the engine reports what actually happened
    through the state stream.

    Commands raise PlaybackError when the engine rejects them.
    """

    async def set_source(self, url: str) -> None: ...
    async def resume(self) -> None: ...
    async def pause(self) -> None: ...
    async def stop(self) -> None: ...

    def on_state_changed(self, listener: Callable[[PlaybackState], None]) -> Unsubscribe: ...

    def on_error(self, listener: Callable[[str], None]) -> Unsubscribe:
        """Asynchronous engine failures (e.g. unreachable audio resource)."""
        ...

    async def release(self) -> None: ...
