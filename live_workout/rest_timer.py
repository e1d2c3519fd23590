"""
Rest timer state machine.

The timer counts down whole seconds between sets:

    Idle --start(d)--> Running --pause()--> Paused --resume()--> Running
    Running --tick() at 1s left--> Idle, fires the completion callback

reset() and skip() return to Idle from any state without firing. The
completion callback fires if and only if the countdown reaches zero while
running. The timer has exactly one completion subscriber.

Ticks come from a Ticker. AsyncioTicker drives a real one-second countdown on
the running event loop; without a ticker the owner calls tick() itself, which
is how tests advance time.
"""

import asyncio
import logging
from typing import Callable, Optional, Protocol

from domain.models import TimerPhase, TimerState

logger = logging.getLogger(__name__)


TickCallback = Callable[[], None]


class Ticker(Protocol):
    """A source of periodic ticks that can be stopped."""

    def start(self, callback: TickCallback) -> None:
        """Start calling `callback` once per interval, replacing any previous one."""
        ...

    def stop(self) -> None:
        """Stop ticking. No callback runs after this returns."""
        ...


class AsyncioTicker:
    """
    Ticker backed by a single repeating `loop.call_later` handle.

    Usage:
        >>> ticker = AsyncioTicker(interval=1.0)
        >>> timer = RestTimer(on_complete=notify, ticker=ticker)
        >>> timer.start(90)  # must be called with a running event loop
    """

    def __init__(
        self,
        interval: float = 1.0,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ):
        if interval <= 0:
            raise ValueError("Tick interval must be positive")
        self._interval = interval
        self._loop = loop
        self._handle: Optional[asyncio.TimerHandle] = None
        self._callback: Optional[TickCallback] = None

    @property
    def active(self) -> bool:
        return self._handle is not None

    def start(self, callback: TickCallback) -> None:
        self.stop()
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        self._callback = callback
        self._schedule()

    def stop(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        self._callback = None

    def _schedule(self) -> None:
        self._handle = self._loop.call_later(self._interval, self._fire)

    def _fire(self) -> None:
        callback = self._callback
        if callback is None:
            self._handle = None
            return
        # Re-arm first so a callback that stops the ticker cancels the next tick
        self._schedule()
        callback()


class RestTimer:
    """
    Countdown state machine for rest periods between sets.

    Args:
        on_complete: The single completion subscriber
        ticker: Tick source; None means the caller drives tick() manually
        alert: Haptic/alert side effect run on natural completion
        vibration_enabled: Whether `alert` runs at all
    """

    def __init__(
        self,
        on_complete: Optional[Callable[[], None]] = None,
        *,
        ticker: Optional[Ticker] = None,
        alert: Optional[Callable[[], None]] = None,
        vibration_enabled: bool = True,
    ):
        self._on_complete = on_complete
        self._ticker = ticker
        self._alert = alert
        self._vibration_enabled = vibration_enabled

        self._time_left = 0
        self._is_running = False
        self._duration = 0

    # ------------------------------------------------------------------
    # Observation
    # ------------------------------------------------------------------

    @property
    def state(self) -> TimerState:
        return TimerState(
            time_left=self._time_left,
            is_running=self._is_running,
            duration=self._duration,
        )

    @property
    def phase(self) -> TimerPhase:
        return self.state.phase

    @property
    def time_left(self) -> int:
        return self._time_left

    @property
    def is_running(self) -> bool:
        return self._is_running

    @property
    def duration(self) -> int:
        return self._duration

    def subscribe(self, on_complete: Optional[Callable[[], None]]) -> None:
        """Replace the completion subscriber."""
        self._on_complete = on_complete

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def start(self, duration: int) -> None:
        """Start a countdown of `duration` seconds from any state."""
        if duration <= 0:
            logger.debug("Ignoring rest timer start with non-positive duration %s", duration)
            return

        self._time_left = int(duration)
        self._duration = int(duration)
        self._is_running = True
        self._start_ticking()
        logger.debug("Rest timer started for %ss", duration)

    def pause(self) -> None:
        """Stop counting down, keeping the remaining time."""
        if not self._is_running:
            return
        self._is_running = False
        self._stop_ticking()

    def resume(self) -> None:
        """Continue a paused countdown from the remaining time."""
        if self._is_running or self._time_left <= 0:
            return
        self._is_running = True
        self._start_ticking()

    def reset(self) -> None:
        """Return to idle and forget the last duration."""
        self._stop_ticking()
        self._time_left = 0
        self._is_running = False
        self._duration = 0

    def skip(self) -> None:
        """End the rest period early without firing the completion callback."""
        self._stop_ticking()
        self._time_left = 0
        self._is_running = False

    def tick(self) -> None:
        """
        Advance the countdown by one second.

        Ticks arriving while the timer is not running are ignored.
        """
        if not self._is_running:
            return

        if self._time_left <= 1:
            self._complete()
            return

        self._time_left -= 1

    def close(self) -> None:
        """Tear down the tick source and drop the remaining time; resume() is a no-op afterwards."""
        self._stop_ticking()
        self._is_running = False
        self._time_left = 0

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _complete(self) -> None:
        self._stop_ticking()
        self._time_left = 0
        self._is_running = False
        logger.debug("Rest timer completed after %ss", self._duration)

        if self._vibration_enabled and self._alert is not None:
            self._alert()
        if self._on_complete is not None:
            self._on_complete()

    def _start_ticking(self) -> None:
        if self._ticker is not None:
            self._ticker.start(self.tick)

    def _stop_ticking(self) -> None:
        if self._ticker is not None:
            self._ticker.stop()
