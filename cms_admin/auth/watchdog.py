"""Periodic token-expiry check that ends the session once ``exp`` passes."""

import asyncio
import inspect
import logging
import time
from typing import Awaitable, Callable

from cms_admin.auth.token import is_token_expired
from cms_admin.config import settings
from cms_admin.session import SessionStore

logger = logging.getLogger(__name__)

EXPIRED_NOTICE = "Your session has expired. Please login again."


class ExpiryWatchdog:
    """Calls ``on_expired`` when the stored token is past its expiry.

    ``on_expired`` may be sync or async; it is responsible for logging out
    and showing ``EXPIRED_NOTICE``.
    """

    def __init__(
        self,
        session: SessionStore,
        on_expired: Callable[[], Awaitable[None] | None],
        interval: float | None = None,
        clock: Callable[[], float] = time.time,
    ):
        self._session = session
        self._on_expired = on_expired
        self.interval = interval if interval is not None else settings.watchdog_interval_seconds
        self._clock = clock
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def check_once(self) -> bool:
        token = self._session.get_token()
        if not token or not is_token_expired(token, self._clock()):
            return False
        logger.info("Stored token expired, ending session")
        result = self._on_expired()
        if inspect.isawaitable(result):
            await result
        return True

    async def _run(self) -> None:
        while True:
            try:
                await self.check_once()
            except Exception as e:
                logger.error(f"Expiry check failed: {e}")
            await asyncio.sleep(self.interval)

    def start(self) -> asyncio.Task:
        if not self.running:
            self._task = asyncio.create_task(self._run())
        return self._task

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
