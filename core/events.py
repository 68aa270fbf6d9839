"""
Event Bus - Fire-and-forget delivery of update signals to subscribers.
"""

from concurrent.futures import Future, ThreadPoolExecutor
from threading import Lock
from typing import Any, Callable, Dict, List, Type

from utils.logger import get_logger

Handler = Callable[[Any], None]


class EventBus:
    """Dispatches published events to subscribed handlers on a worker pool."""

    def __init__(self, max_workers: int = 2):
        """
        Args:
            max_workers: Number of threads running subscriber handlers
        """
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix='version-sentinel-events'
        )
        self._handlers: Dict[Type, List[Handler]] = {}
        self._lock = Lock()
        self.logger = get_logger('EventBus')

    def subscribe(self, event_type: Type, handler: Handler) -> None:
        """
        Register a handler for an event type (subclasses included).

        Args:
            event_type: Event class to listen for
            handler: Callable receiving the event
        """
        with self._lock:
            self._handlers.setdefault(event_type, []).append(handler)

    def unsubscribe(self, event_type: Type, handler: Handler) -> None:
        with self._lock:
            handlers = self._handlers.get(event_type, [])
            if handler in handlers:
                handlers.remove(handler)

    def publish(self, event: Any) -> List[Future]:
        """
        Submit an event to every matching handler without waiting for them.

        Returns:
            Futures of the scheduled handler calls
        """
        with self._lock:
            matching = [
                handler
                for event_type, handlers in self._handlers.items()
                if isinstance(event, event_type)
                for handler in handlers
            ]

        if not matching:
            self.logger.debug(f"No subscribers for {type(event).__name__}")

        futures = []
        for handler in matching:
            future = self._executor.submit(handler, event)
            future.add_done_callback(self._log_failure)
            futures.append(future)
        return futures

    def _log_failure(self, future: Future) -> None:
        if future.cancelled():
            return
        error = future.exception()
        if error is not None:
            self.logger.error(f"Event handler failed: {type(error).__name__}: {error}")

    def shutdown(self, wait: bool = True) -> None:
        """Stop accepting events, optionally waiting for running handlers."""
        self._executor.shutdown(wait=wait)

    # Context manager so scripts and tests drain the pool on exit
    def __enter__(self) -> 'EventBus':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown(wait=True)
