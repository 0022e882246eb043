"""Progress hub: fire-and-forget publish/subscribe for run progress messages.

The hub is handed to the services that report progress (see
:class:`hostbridge.core.files.FileService`); nothing looks it up globally.
With async delivery a single worker thread hands events to subscribers in
publish order, so ``publish`` never blocks on a slow subscriber.
"""
from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, List, Optional, Protocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HubEvent:
    message: str
    kind: str = "info"


Subscriber = Callable[[HubEvent], None]


class Publisher(Protocol):
    def publish(self, event: HubEvent) -> None: ...


class Hub:
    """Thread-safe hub delivering :class:`HubEvent` objects to subscribers."""

    def __init__(self, *, async_delivery: bool = True) -> None:
        self._subscribers: List[Subscriber] = []
        self._lock = threading.Lock()
        self._async_delivery = async_delivery
        self._executor: Optional[ThreadPoolExecutor] = None

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register ``callback``; the returned callable unsubscribes it."""
        with self._lock:
            self._subscribers.append(callback)

        def _unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return _unsubscribe

    def _deliver(self, event: HubEvent) -> None:
        with self._lock:
            subscribers = list(self._subscribers)
        for callback in subscribers:
            try:
                callback(event)
            except Exception:
                # A failing subscriber must not reach the publisher.
                logger.exception("Hub subscriber %r failed on %r", callback, event.message)

    def publish(self, event: HubEvent | str) -> None:
        """Hand ``event`` to subscribers without waiting for them."""
        if isinstance(event, str):
            event = HubEvent(event)
        if not self._async_delivery:
            self._deliver(event)
            return
        with self._lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="hostbridge-hub")
            executor = self._executor
        executor.submit(self._deliver, event)

    def publish_sync(self, event: HubEvent | str) -> None:
        """Deliver ``event`` inline on the calling thread."""
        if isinstance(event, str):
            event = HubEvent(event)
        self._deliver(event)

    def close(self) -> None:
        """Wait for queued events to be delivered and stop the worker."""
        with self._lock:
            executor, self._executor = self._executor, None
        if executor is not None:
            executor.shutdown(wait=True)


class NullHub:
    """Publisher that drops every event."""

    def publish(self, event: HubEvent | str) -> None:
        return None


__all__ = ["Hub", "HubEvent", "NullHub", "Publisher", "Subscriber"]
