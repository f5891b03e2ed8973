from __future__ import annotations

import asyncio
import logging
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_MS = 1000


def _fire(timer: asyncio.Future) -> None:
    if not timer.done():
        timer.set_result(None)


class Countdown:
    """
    Timed countdown from ``start`` down to zero inclusive.

    One value becomes available per ``interval`` milliseconds; the first one
    only after a full interval has elapsed. Values are produced on demand and
    never buffered. The stream can be consumed with ``await next()`` or with
    ``async for``; ``cancel()`` stops the pending timer and ends the stream.
    """

    def __init__(self, start: int, interval: Optional[int] = None) -> None:
        if interval is None:
            interval = DEFAULT_INTERVAL_MS
        if start < 0:
            raise ValueError(f"Countdown start must be zero or greater, got {start}")
        if interval < 0:
            raise ValueError(f"Countdown interval must be zero or greater, got {interval}")
        self.start = start
        self.interval = interval
        self._current = start
        self._cancelled = False
        self._timer: Optional[asyncio.Future] = None

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def done(self) -> bool:
        return self._cancelled or self._current < 0

    async def next(self) -> Tuple[Optional[int], bool]:
        """Wait one interval and return ``(value, False)``, or ``(None, True)`` once finished."""
        if self.done:
            return None, True
        if self._timer is not None:
            raise RuntimeError("Countdown is already waiting for its next value")

        loop = asyncio.get_running_loop()
        timer = loop.create_future()
        handle = loop.call_later(self.interval / 1000, _fire, timer)
        self._timer = timer
        try:
            await timer
        except asyncio.CancelledError:
            if self._cancelled:
                return None, True
            # the consuming task itself was cancelled
            self._cancelled = True
            raise
        finally:
            handle.cancel()
            self._timer = None

        if self._cancelled:
            return None, True
        value = self._current
        self._current -= 1
        return value, False

    def cancel(self) -> None:
        if self._cancelled:
            return
        exhausted = self._current < 0
        self._cancelled = True
        if self._timer is not None and not self._timer.done():
            self._timer.cancel()
        if not exhausted:
            logger.debug(f"Countdown from {self.start} cancelled at {self._current}")

    def __aiter__(self) -> "Countdown":
        return self

    async def __anext__(self) -> int:
        value, finished = await self.next()
        if finished:
            raise StopAsyncIteration
        return value

    async def aclose(self) -> None:
        self.cancel()
