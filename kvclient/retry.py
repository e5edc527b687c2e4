"""Retrying requests to a cluster, reconnecting between attempts."""

from __future__ import annotations

import asyncio
import time
from typing import Awaitable, Callable, TypeVar

T = TypeVar("T")

RECONNECT_INTERVAL_SEC = 1
MAX_REQUEST_COUNT = 5
LEADER_CHANGE_RETRY = 10


class RetryError(Exception):
    """Raised when every attempt of a retried request failed."""

    def __init__(self, attempts: int, last_error: BaseException) -> None:
        super().__init__(f"request failed after {attempts} attempts: {last_error}")
        self.attempts = attempts
        self.last_error = last_error


class Reconnector:
    """Reconnects through an async callable, at most once per interval.

    If another reconnect finished within the interval, a call does nothing:
    the connection was just refreshed concurrently.
    """

    def __init__(
        self,
        connect: Callable[[], Awaitable[object]],
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._connect = connect
        self._clock = clock
        self._lock = asyncio.Lock()
        self.last_connected = clock()

    async def reconnect(self, interval_sec: float) -> None:
        """Reconnect unless a reconnect succeeded less than interval_sec ago."""
        begin = self._clock()
        async with self._lock:
            if begin > self.last_connected + interval_sec:
                await self._connect()
                self.last_connected = self._clock()


async def retry(
    call: Callable[[], Awaitable[T]],
    reconnect: Callable[[float], Awaitable[object]],
) -> T:
    """Await call until it succeeds, reconnecting after each failure.

    Up to LEADER_CHANGE_RETRY attempts are made; if all fail, RetryError is
    raised from the last failure. A reconnect is tried up to MAX_REQUEST_COUNT
    times; if it keeps failing its error is raised.
    """
    last_error: Exception | None = None
    for _ in range(LEADER_CHANGE_RETRY):
        try:
            return await call()
        except Exception as error:
            last_error = error

        remaining = MAX_REQUEST_COUNT
        while True:
            try:
                await reconnect(RECONNECT_INTERVAL_SEC)
                break
            except Exception:
                remaining -= 1
                if remaining == 0:
                    raise
                await asyncio.sleep(RECONNECT_INTERVAL_SEC)

    assert last_error is not None
    raise RetryError(LEADER_CHANGE_RETRY, last_error) from last_error