"""
Debouncer
Single-slot delayed callback on the asyncio event loop
"""
import asyncio
from typing import Any, Callable, Optional


class Debouncer:
    """
    Runs a callback once input has been quiet for `delay` seconds.

    At most one call is pending. Submitting a new callback cancels the
    pending one first, so only the last submission of a burst ever runs.

    Args:
        delay: quiet period in seconds
        loop: event loop to schedule on. Defaults to the running loop at
            submit time (prompt_toolkit runs its key handlers inside it).
    """

    def __init__(self, delay: float, loop: Optional[asyncio.AbstractEventLoop] = None):
        if delay < 0:
            raise ValueError(f"Debounce delay must be >= 0, got {delay}")
        self.delay = delay
        self._loop = loop
        self._handle = None
        self._callback: Optional[Callable[..., Any]] = None
        self._args: tuple = ()

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def submit(self, callback: Callable[..., Any], *args) -> None:
        """Schedule callback(*args), replacing anything already pending"""
        self.cancel()
        loop = self._loop or asyncio.get_running_loop()
        self._callback = callback
        self._args = args
        self._handle = loop.call_later(self.delay, self._fire)

    def cancel(self) -> bool:
        """Drop the pending call. Returns True if one was pending."""
        if self._handle is None:
            return False
        self._handle.cancel()
        self._reset()
        return True

    def flush(self) -> bool:
        """Run the pending call now. Returns True if one was pending."""
        if self._handle is None:
            return False
        self._handle.cancel()
        self._fire()
        return True

    def _fire(self):
        callback, args = self._callback, self._args
        self._reset()
        if callback is not None:
            callback(*args)

    def _reset(self):
        self._handle = None
        self._callback = None
        self._args = ()
