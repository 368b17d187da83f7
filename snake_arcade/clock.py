"""Periodic tick clock running on the asyncio event loop."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional


class TickClock:
    """Invoke a callback every ``interval`` milliseconds.

    The clock runs as a task on the current event loop, so ticks are
    delivered on the same thread as input handling and never overlap.
    """

    def __init__(self, callback: Optional[Callable[[], None]] = None) -> None:
        self.callback = callback
        self.interval: Optional[int] = None
        self.ticks = 0
        self._task: Optional[asyncio.Task[None]] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def bind(self, callback: Callable[[], None]) -> None:
        self.callback = callback

    def set_interval(self, interval: int) -> None:
        """Change the period. Takes effect on the next :meth:`start` or :meth:`restart`."""

        if interval <= 0:
            raise ValueError("Tick interval must be positive")
        self.interval = interval

    def start(self, interval: Optional[int] = None) -> None:
        """Start ticking, replacing any schedule already in place.

        The first tick fires one full interval after the call.
        """

        if interval is not None:
            self.set_interval(interval)
        if self.interval is None:
            raise RuntimeError("Clock has no interval to run at")
        loop = asyncio.get_running_loop()
        self.stop()
        self._task = loop.create_task(self._run(self.interval))
        logging.debug("Clock started at %d ms", self.interval)

    def stop(self) -> None:
        if self._task is not None:
            self._task.cancel()
            self._task = None

    def restart(self) -> None:
        """Restart the schedule at the current interval."""

        self.start()

    async def _run(self, interval: int) -> None:
        task = asyncio.current_task()
        delay = interval / 1000.0
        while True:
            await asyncio.sleep(delay)
            self.ticks += 1
            if self.callback is not None:
                try:
                    self.callback()
                except Exception:
                    logging.exception("Tick callback failed")
            if self._task is not task:
                # The callback stopped or restarted the clock.
                return
