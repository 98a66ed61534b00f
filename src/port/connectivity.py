"""Port for network connectivity status."""

from typing import Callable, Protocol

from utils.listeners import Unsubscribe


class ConnectivityPort(Protocol):
    async def check(self) -> bool:
        """Current status collapsed to online (True) / offline (False)."""
        ...

    def on_changed(self, listener: Callable[[bool], None]) -> Unsubscribe: ...

    async def close(self) -> None: ...
