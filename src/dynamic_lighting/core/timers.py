"""
Timer facilities for recurring callbacks.

The lighting module never sleeps or spawns threads. It asks an injected
Scheduler for a recurring callback and cancels it through the returned handle.

Two implementations are provided:
- ManualScheduler: time-agnostic, the host (or a test) advances virtual time
- AsyncioScheduler: real time on an asyncio event loop
"""

import asyncio
import itertools
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional

logger = logging.getLogger(__name__)

TimerCallback = Callable[[], None]


@dataclass(eq=False)
class TimerHandle:
    """
    Cancellation token for a recurring callback.

    Attributes:
        id: Scheduler-assigned identifier
        interval_ms: Time between invocations in milliseconds
        cancelled: True once the handle has been cancelled
    """

    id: int
    interval_ms: float
    cancelled: bool = False
    _native: Optional[asyncio.TimerHandle] = field(default=None, repr=False)


class Scheduler(ABC):
    """
    Host-provided timer facility.

    Implementations must allow cancel() from inside or outside the callback,
    and cancelling an already-cancelled handle must be a no-op.
    """

    @abstractmethod
    def schedule_recurring(self, callback: TimerCallback, interval_ms: float) -> TimerHandle:
        """
        Invoke callback every interval_ms until cancelled.

        Args:
            callback: Zero-argument callable
            interval_ms: Interval in milliseconds (must be positive)

        Returns:
            TimerHandle used to cancel the recurring callback
        """
        pass

    @abstractmethod
    def cancel(self, handle: TimerHandle) -> None:
        """
        Stop a recurring callback.

        Args:
            handle: Handle returned by schedule_recurring
        """
        pass


def _check_interval(interval_ms: float) -> None:
    if interval_ms <= 0:
        raise ValueError(f"Timer interval must be positive, got {interval_ms}")


@dataclass
class _Entry:
    handle: TimerHandle
    callback: TimerCallback
    due_ms: float


class ManualScheduler(Scheduler):
    """
    Deterministic scheduler driven by virtual time.

    Nothing runs until the host calls advance() or run_ticks(). Useful for
    tests and for hosts that already own a frame loop.
    """

    def __init__(self) -> None:
        self._now_ms: float = 0.0
        self._entries: Dict[int, _Entry] = {}
        self._ids = itertools.count(1)

    @property
    def now_ms(self) -> float:
        """Current virtual time in milliseconds."""
        return self._now_ms

    @property
    def pending(self) -> int:
        """Number of active recurring callbacks."""
        return len(self._entries)

    def schedule_recurring(self, callback: TimerCallback, interval_ms: float) -> TimerHandle:
        _check_interval(interval_ms)
        handle = TimerHandle(id=next(self._ids), interval_ms=interval_ms)
        self._entries[handle.id] = _Entry(handle, callback, self._now_ms + interval_ms)
        logger.debug(f"Scheduled timer {handle.id} every {interval_ms:.2f}ms")
        return handle

    def cancel(self, handle: TimerHandle) -> None:
        handle.cancelled = True
        if self._entries.pop(handle.id, None) is not None:
            logger.debug(f"Cancelled timer {handle.id}")

    def advance(self, ms: float) -> int:
        """
        Move virtual time forward, firing every callback that falls due.

        Callbacks fire in due-time order; a callback may cancel itself or
        schedule new timers.

        Args:
            ms: Milliseconds to advance

        Returns:
            Number of callbacks invoked
        """
        end = self._now_ms + ms
        fired = 0

        while True:
            due = [e for e in self._entries.values() if e.due_ms <= end]
            if not due:
                break

            entry = min(due, key=lambda e: (e.due_ms, e.handle.id))
            self._now_ms = entry.due_ms
            entry.due_ms += entry.handle.interval_ms
            entry.callback()
            fired += 1

        self._now_ms = end
        return fired

    def run_ticks(self, count: int) -> int:
        """
        Fire the earliest pending timer up to count times.

        Stops early when no timer is pending.

        Returns:
            Number of callbacks invoked
        """
        fired = 0
        for _ in range(count):
            if not self._entries:
                break
            entry = min(self._entries.values(), key=lambda e: (e.due_ms, e.handle.id))
            self._now_ms = entry.due_ms
            entry.due_ms += entry.handle.interval_ms
            entry.callback()
            fired += 1
        return fired


class AsyncioScheduler(Scheduler):
    """
    Scheduler backed by an asyncio event loop.

    Each invocation re-arms itself with loop.call_later, so everything runs on
    the loop's thread.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop
        self._ids = itertools.count(1)

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def schedule_recurring(self, callback: TimerCallback, interval_ms: float) -> TimerHandle:
        _check_interval(interval_ms)
        handle = TimerHandle(id=next(self._ids), interval_ms=interval_ms)
        delay = interval_ms / 1000.0

        def _fire() -> None:
            if handle.cancelled:
                return
            # Re-arm first so the callback can cancel the next invocation
            handle._native = self.loop.call_later(delay, _fire)
            callback()

        handle._native = self.loop.call_later(delay, _fire)
        return handle

    def cancel(self, handle: TimerHandle) -> None:
        handle.cancelled = True
        if handle._native is not None:
            handle._native.cancel()
            handle._native = None
