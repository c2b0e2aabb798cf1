"""
Debouncing of free-text input.

A Debouncer turns a stream of keystroke values into settled values: a value
settles once no newer value has been pushed for `delay` seconds. Each
settled value that differs from the previous one, and is not empty, is
handed to an async callback.
"""

import asyncio
from collections.abc import Awaitable, Callable

from gitanalyzer.logging import get_logger

DEBOUNCE_DELAY = 0.45

logger = get_logger("explorer")

SettleCallback = Callable[[str], Awaitable[None]]


class Debouncer:
    """
    Emit a value only after input has been idle for a fixed delay.

    Must be used from within a running asyncio event loop.

    Example:
        ```python
        debouncer = Debouncer(on_settled, delay=0.45)
        for ch in "vercel":
            debouncer.push(typed_so_far)  # only "vercel" reaches on_settled
        ```
    """

    def __init__(self, callback: SettleCallback, delay: float = DEBOUNCE_DELAY) -> None:
        """
        Args:
            callback: Coroutine function called with each new settled value
            delay: Idle time in seconds before a value settles
        """
        self.callback = callback
        self.delay = delay
        self.settled: str | None = None
        self._handle: asyncio.TimerHandle | None = None
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def pending(self) -> bool:
        """True while a pushed value is waiting to settle."""
        return self._handle is not None

    def start(self, initial: str) -> None:
        """
        Settle the initial value immediately, as on page load.

        An empty initial value is recorded but never emitted.
        """
        self.cancel()
        self._settle(initial)

    def push(self, value: str) -> None:
        """Record a new input value, restarting the idle timer."""
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay, self._settle, value)

    def cancel(self) -> None:
        """Drop the pending value, if any."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    async def drain(self) -> None:
        """Wait for every callback started so far to finish."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    def _settle(self, value: str) -> None:
        self._handle = None
        if value == self.settled:
            return
        self.settled = value
        if not value:
            return

        logger.debug("query settled: %r", value)
        task = asyncio.get_running_loop().create_task(self.callback(value))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
