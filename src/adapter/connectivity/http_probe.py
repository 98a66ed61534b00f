"""HTTP probe implementation of ConnectivityPort.

A HEAD request to the probe URL decides online/offline: any HTTP response
means a network path exists, a transport error means it does not. Once a
listener subscribes, the probe is repeated on a fixed interval and
listeners hear about transitions only.
"""

import asyncio
import contextlib
import logging
import os
from typing import Callable

import httpx

from utils.listeners import ListenerSet, Unsubscribe

logger = logging.getLogger(__name__)

CONNECTIVITY_PROBE_URL = os.getenv('CONNECTIVITY_PROBE_URL', 'https://api.dictionaryapi.dev')
CONNECTIVITY_POLL_SECONDS = float(os.getenv('CONNECTIVITY_POLL_SECONDS', '10'))
PROBE_TIMEOUT_SECONDS = 5.0


class HttpConnectivityMonitor:
    def __init__(
        self,
        probe_url: str = CONNECTIVITY_PROBE_URL,
        poll_seconds: float = CONNECTIVITY_POLL_SECONDS,
        timeout: float = PROBE_TIMEOUT_SECONDS,
    ):
        self.probe_url = probe_url
        self.poll_seconds = poll_seconds
        self.timeout = timeout
        self._online: bool | None = None
        self._listeners: ListenerSet[bool] = ListenerSet("connectivity")
        self._task: asyncio.Task | None = None
        self._closed = False

    @property
    def last_known(self) -> bool | None:
        return self._online

    async def check(self) -> bool:
        online = await self._probe()
        self._update(online)
        return online

    def on_changed(self, listener: Callable[[bool], None]) -> Unsubscribe:
        unsubscribe = self._listeners.subscribe(listener)
        self._ensure_polling()
        return unsubscribe

    async def close(self) -> None:
        self._closed = True
        self._listeners.clear()
        task, self._task = self._task, None
        if task is not None:
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError, Exception):
                await task

    # ── internals ─────────────────────────────────────────────

    async def _probe(self) -> bool:
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                await client.head(self.probe_url)
            return True
        except httpx.TransportError as e:
            logger.debug("Connectivity probe failed", extra={"error_type": type(e).__name__})
            return False

    def _update(self, online: bool) -> None:
        previous, self._online = self._online, online
        if previous is None or previous == online:
            return
        logger.info("Connectivity changed", extra={"online": online})
        self._listeners.emit(online)

    def _ensure_polling(self) -> None:
        if self._task is not None or self._closed:
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            return
        self._task = loop.create_task(self._poll())

    async def _poll(self) -> None:
        while True:
            await asyncio.sleep(self.poll_seconds)
            try:
                await self.check()
            except Exception as e:
                # Keep polling; a failed check leaves the last reading in place
                logger.warning(
                    "Connectivity probe error",
                    extra={"error": str(e)[:200], "error_type": type(e).__name__},
                )
