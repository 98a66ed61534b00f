"""In-memory implementation of ConnectivityPort for testing."""

from typing import Callable

from utils.listeners import ListenerSet, Unsubscribe


class FakeConnectivity:
    def __init__(self, online: bool = True):
        self.online = online
        self.closed = False
        self._listeners: ListenerSet[bool] = ListenerSet("fake_connectivity")

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    async def check(self) -> bool:
        return self.online

    def set_online(self, online: bool) -> None:
        self.online = online
        self._listeners.emit(online)

    def on_changed(self, listener: Callable[[bool], None]) -> Unsubscribe:
        return self._listeners.subscribe(listener)

    async def close(self) -> None:
        self.closed = True
        self._listeners.clear()
