"""
Tests for the scheduler facilities.
"""

import asyncio

import pytest

from dynamic_lighting.core.timers import AsyncioScheduler, ManualScheduler


class TestManualScheduler:
    """Test the virtual-time scheduler."""

    def test_nothing_runs_without_advancing(self):
        scheduler = ManualScheduler()
        calls = []
        scheduler.schedule_recurring(lambda: calls.append(1), 10)

        assert calls == []
        assert scheduler.pending == 1

    def test_advance_fires_due_callbacks(self):
        """Test each elapsed interval fires exactly once."""
        scheduler = ManualScheduler()
        calls = []
        scheduler.schedule_recurring(lambda: calls.append(scheduler.now_ms), 10)

        assert scheduler.advance(35) == 3
        assert calls == [10, 20, 30]
        assert scheduler.now_ms == 35

    def test_callbacks_fire_in_due_order(self):
        scheduler = ManualScheduler()
        calls = []
        scheduler.schedule_recurring(lambda: calls.append("slow"), 15)
        scheduler.schedule_recurring(lambda: calls.append("fast"), 10)

        scheduler.advance(30)

        assert calls == ["fast", "slow", "fast", "slow", "fast"]

    def test_cancel_from_outside(self):
        scheduler = ManualScheduler()
        calls = []
        handle = scheduler.schedule_recurring(lambda: calls.append(1), 10)

        scheduler.advance(10)
        scheduler.cancel(handle)
        scheduler.advance(100)

        assert calls == [1]
        assert handle.cancelled
        assert scheduler.pending == 0

    def test_cancel_from_inside_callback(self):
        """Test a callback can cancel its own handle."""
        scheduler = ManualScheduler()
        calls = []
        handles = []

        def callback():
            calls.append(1)
            if len(calls) == 3:
                scheduler.cancel(handles[0])

        handles.append(scheduler.schedule_recurring(callback, 10))
        scheduler.advance(1000)

        assert len(calls) == 3

    def test_double_cancel_is_noop(self):
        scheduler = ManualScheduler()
        handle = scheduler.schedule_recurring(lambda: None, 10)

        scheduler.cancel(handle)
        scheduler.cancel(handle)

        assert scheduler.pending == 0

    def test_run_ticks_stops_when_idle(self):
        """Test run_ticks returns early when nothing is pending."""
        scheduler = ManualScheduler()
        assert scheduler.run_ticks(5) == 0

        calls = []
        handles = []

        def callback():
            calls.append(1)
            scheduler.cancel(handles[0])

        handles.append(scheduler.schedule_recurring(callback, 10))
        assert scheduler.run_ticks(5) == 1

    def test_invalid_interval(self):
        scheduler = ManualScheduler()
        with pytest.raises(ValueError):
            scheduler.schedule_recurring(lambda: None, 0)


class TestAsyncioScheduler:
    """Test the asyncio-backed scheduler."""

    def test_recurring_until_cancelled(self):
        """Test the callback repeats and stops once cancelled from inside."""
        calls = []

        async def main():
            scheduler = AsyncioScheduler()
            done = asyncio.Event()
            handles = []

            def callback():
                calls.append(1)
                if len(calls) == 3:
                    scheduler.cancel(handles[0])
                    done.set()

            handles.append(scheduler.schedule_recurring(callback, 1))
            await asyncio.wait_for(done.wait(), timeout=2)
            # Give a cancelled timer the chance to misfire
            await asyncio.sleep(0.02)

        asyncio.run(main())
        assert len(calls) == 3

    def test_cancel_before_first_fire(self):
        calls = []

        async def main():
            scheduler = AsyncioScheduler()
            handle = scheduler.schedule_recurring(lambda: calls.append(1), 5)
            scheduler.cancel(handle)
            await asyncio.sleep(0.03)

        asyncio.run(main())
        assert calls == []
