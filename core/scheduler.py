"""
Scheduler - Runs an updater's check cycle at a fixed rate.

Two execution modes share the same loop:

* ``schedule()`` blocks the calling thread and runs cycles there.
* ``schedule_async()`` runs cycles on a daemon worker thread.

Only one schedule may be active per scheduler. Cycles are never aborted
mid-flight; ``stop()`` takes effect at the next wait.
"""

import threading
import time
from typing import Optional

from models.exceptions import SchedulerError
from models.release import UpdateResult
from utils.logger import get_logger

from core.updater import Updater


class UpdateScheduler:
    """Fixed-rate timer driving Updater.run_cycle()."""

    def __init__(self, updater: Updater, initial_delay: float = 0.0):
        """
        Args:
            updater: Built updater whose cycle is scheduled
            initial_delay: Seconds to wait before the first cycle
        """
        self.updater = updater
        self.initial_delay = initial_delay
        self.logger = get_logger('UpdateScheduler')

        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._running = False
        self._lock = threading.Lock()
        self.cycles = 0

    @property
    def interval_seconds(self) -> float:
        return self.updater.interval.total_seconds()

    @property
    def is_running(self) -> bool:
        return self._running

    def run_once(self, asynchronous: bool = False) -> UpdateResult:
        """Run a single cycle on the calling thread."""
        return self.updater.run_cycle(asynchronous=asynchronous)

    def schedule(self) -> UpdateResult:
        """
        Run cycles on the calling thread until stop() is called.

        Errors from a cycle propagate and end the schedule.

        Returns:
            Result of the last cycle, DISABLED if checks are disabled
        """
        if not self._start():
            return self.updater.result
        try:
            self._loop(asynchronous=False, propagate=True)
        finally:
            self._running = False
        return self.updater.result

    def schedule_async(self) -> Optional[threading.Thread]:
        """
        Run cycles on a daemon worker thread.

        Errors from a cycle are logged and the timer keeps going.

        Returns:
            The worker thread, or None if checks are disabled
        """
        if not self._start():
            return None

        self._thread = threading.Thread(
            target=self._run_worker,
            name='version-sentinel-scheduler',
            daemon=True
        )
        self._thread.start()
        return self._thread

    def stop(self, timeout: Optional[float] = None) -> None:
        """
        Stop the schedule after the current cycle.

        Args:
            timeout: Seconds to wait for the worker thread to exit
        """
        self._stop_event.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)

    def wait(self, timeout: Optional[float] = None) -> bool:
        """
        Block until stop() is called or the timeout expires.

        Returns:
            True if the schedule was stopped
        """
        return self._stop_event.wait(timeout)

    def _start(self) -> bool:
        with self._lock:
            if self._running:
                raise SchedulerError('The updater is already scheduled')

            if not self.updater.is_enabled:
                # run_cycle records DISABLED without contacting any provider
                self.updater.run_cycle()
                self.logger.info('Update checks are disabled, nothing scheduled')
                return False

            self._stop_event.clear()
            self._running = True
            return True

    def _run_worker(self) -> None:
        try:
            self._loop(asynchronous=True, propagate=False)
        finally:
            self._running = False

    def _loop(self, asynchronous: bool, propagate: bool) -> None:
        self.logger.info(f"Scheduling update checks every {self.updater.interval}")

        if self.initial_delay and self._stop_event.wait(self.initial_delay):
            return

        while not self._stop_event.is_set():
            started = time.monotonic()
            try:
                self.updater.run_cycle(asynchronous=asynchronous)
            except Exception:
                if propagate:
                    raise
                self.logger.exception('Update check cycle failed')
            self.cycles += 1

            # Fixed rate: the next cycle starts one interval after this one started
            elapsed = time.monotonic() - started
            if self._stop_event.wait(max(0.0, self.interval_seconds - elapsed)):
                break
