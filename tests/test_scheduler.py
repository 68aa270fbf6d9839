"""
Tests for the fixed-rate scheduler.
"""

import pytest
import threading
import time
import sys
import os

import requests

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.scheduler import UpdateScheduler
from core.updater import UpdaterBuilder
from models.exceptions import SchedulerError, UpdateFailedError
from models.release import UpdateResult


def wait_until(predicate, timeout=5.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.01)
    return False


class TestUpdateScheduler:
    """Tests for sync and async scheduling."""

    def test_run_once(self, make_provider):
        updater = UpdaterBuilder('1.0').add_provider(make_provider('1.0')).build()
        assert UpdateScheduler(updater).run_once() is UpdateResult.LATEST

    def test_schedule_runs_on_calling_thread_until_stopped(self, make_provider):
        threads = []
        scheduler = None

        def publish(event):
            threads.append(threading.current_thread())
            if len(threads) == 3:
                scheduler.stop()

        updater = (
            UpdaterBuilder('1.0', publish=publish)
            .add_provider(make_provider('2.0'))
            .set_interval(0.01)
            .build()
        )
        scheduler = UpdateScheduler(updater)

        assert scheduler.schedule() is UpdateResult.AVAILABLE
        assert scheduler.cycles == 3
        assert all(thread is threading.current_thread() for thread in threads)
        assert not scheduler.is_running

    def test_schedule_async_runs_on_worker_thread(self, make_provider):
        seen = []
        enough = threading.Event()

        def publish(event):
            seen.append((threading.current_thread(), event.asynchronous))
            if len(seen) >= 2:
                enough.set()

        updater = (
            UpdaterBuilder('1.0', publish=publish)
            .add_provider(make_provider('2.0'))
            .set_interval(0.01)
            .build()
        )
        scheduler = UpdateScheduler(updater)

        worker = scheduler.schedule_async()
        try:
            assert worker is not None
            assert enough.wait(5)
        finally:
            scheduler.stop(timeout=5)

        assert not worker.is_alive()
        assert not scheduler.is_running
        assert all(thread is worker and asynchronous for thread, asynchronous in seen)

    def test_async_failures_are_logged_and_timer_continues(self, make_provider):
        provider = make_provider(error=requests.exceptions.ReadTimeout('stalled'))
        updater = UpdaterBuilder('1.0').add_provider(provider).set_interval(0.01).build()
        scheduler = UpdateScheduler(updater)

        scheduler.schedule_async()
        try:
            assert wait_until(lambda: provider.calls >= 3)
        finally:
            scheduler.stop(timeout=5)

    def test_sync_failures_propagate(self, make_provider):
        provider = make_provider(error=requests.exceptions.ReadTimeout('stalled'))
        updater = UpdaterBuilder('1.0').add_provider(provider).set_interval(0.01).build()
        scheduler = UpdateScheduler(updater)

        with pytest.raises(UpdateFailedError):
            scheduler.schedule()
        assert provider.calls == 1
        assert not scheduler.is_running

    def test_double_start_rejected(self, make_provider):
        updater = UpdaterBuilder('1.0').add_provider(make_provider('1.0')).set_interval(60).build()
        scheduler = UpdateScheduler(updater)

        scheduler.schedule_async()
        try:
            with pytest.raises(SchedulerError):
                scheduler.schedule_async()
        finally:
            scheduler.stop(timeout=5)

    def test_disabled_is_not_scheduled(self, make_provider):
        provider = make_provider('2.0')
        updater = UpdaterBuilder('1.0').add_provider(provider).set_enabled(False).build()
        scheduler = UpdateScheduler(updater)

        assert scheduler.schedule_async() is None
        assert scheduler.schedule() is UpdateResult.DISABLED
        assert updater.result is UpdateResult.DISABLED
        assert provider.calls == 0
        assert not scheduler.is_running

    def test_initial_delay_can_be_interrupted(self, make_provider):
        provider = make_provider('1.0')
        updater = UpdaterBuilder('1.0').add_provider(provider).build()
        scheduler = UpdateScheduler(updater, initial_delay=60)

        worker = scheduler.schedule_async()
        scheduler.stop(timeout=5)

        assert not worker.is_alive()
        assert provider.calls == 0


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
