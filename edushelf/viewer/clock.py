"""
Host capabilities injected into the presentation controller.

A Clock provides time and one-shot timers; a ViewportProbe reads live scroll
geometry of the track and scrolls it. Tests substitute manual implementations.
"""

import asyncio
from typing import Any, Callable, Optional, Protocol

from edushelf.models.components import ScrollMetrics


class Clock(Protocol):
    def now(self) -> float:
        """Current time in milliseconds."""
        ...

    def set_timer(self, delay_ms: float, callback: Callable[[], None]) -> Any:
        """Schedule ``callback`` once after ``delay_ms``; returns a cancellation handle."""
        ...

    def cancel_timer(self, handle: Any) -> None: ...


class ViewportProbe(Protocol):
    def get_scroll_metrics(self) -> ScrollMetrics: ...

    def scroll_to(self, offset: float, smooth: bool = True) -> None: ...


class AsyncioClock:
    """Clock backed by an asyncio event loop."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def now(self) -> float:
        return self.loop.time() * 1000.0

    def set_timer(self, delay_ms: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        return self.loop.call_later(max(0.0, delay_ms) / 1000.0, callback)

    def cancel_timer(self, handle: asyncio.TimerHandle) -> None:
        handle.cancel()
