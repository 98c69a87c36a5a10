"""
Timer and event dispatch adapters.

The session controller expects run-to-completion events on a single thread.
flet delivers window and control events on worker threads, so every event
and every timer expiry is posted onto one SerialDispatcher worker.
"""

from __future__ import annotations

import logging
import queue
import threading
from collections.abc import Callable

logger = logging.getLogger(__name__)

_STOP = object()


class SerialDispatcher:
    """Runs posted callables one at a time on a dedicated daemon thread."""

    def __init__(self, name: str = "share-app-events") -> None:
        self._queue: queue.Queue[object] = queue.Queue()
        self._name = name
        self._thread: threading.Thread | None = None
        self._running = False

    def start(self) -> None:
        if self._running:
            return

        self._thread = threading.Thread(target=self._loop, name=self._name, daemon=True)
        self._thread.start()
        self._running = True
        logger.debug("Dispatcher %s started", self._name)

    def stop(self, timeout: float = 1.0) -> None:
        if not self._running:
            return

        self._queue.put(_STOP)
        if self._thread and self._thread is not threading.current_thread():
            self._thread.join(timeout=timeout)
        self._running = False
        logger.debug("Dispatcher %s stopped", self._name)

    @property
    def is_running(self) -> bool:
        return self._running

    def post(self, fn: Callable[[], None]) -> None:
        self._queue.put(fn)

    def _loop(self) -> None:
        while True:
            item = self._queue.get()
            if item is _STOP:
                return
            try:
                item()  # type: ignore[operator]
            except Exception:
                logger.exception("Error in dispatched event")


class DispatchedTimer:
    """Handle for a threading.Timer whose expiry runs on the dispatcher."""

    def __init__(
        self,
        delay_seconds: float,
        callback: Callable[[], None],
        dispatcher: SerialDispatcher,
    ) -> None:
        self._callback = callback
        self._dispatcher = dispatcher
        self._cancelled = False
        self._fired = False
        self._timer = threading.Timer(delay_seconds, self._expire)
        self._timer.daemon = True

    def start(self) -> DispatchedTimer:
        self._timer.start()
        return self

    def cancel(self) -> None:
        self._cancelled = True
        self._timer.cancel()

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def fired(self) -> bool:
        return self._fired

    def _expire(self) -> None:
        self._dispatcher.post(self._run)

    def _run(self) -> None:
        # Cancelled after expiry but before dispatch
        if self._cancelled:
            return
        self._fired = True
        self._callback()


class ThreadingTimerPort:
    """TimerPort backed by threading.Timer and a SerialDispatcher."""

    def __init__(self, dispatcher: SerialDispatcher) -> None:
        self._dispatcher = dispatcher

    def call_later(
        self, delay_seconds: float, callback: Callable[[], None]
    ) -> DispatchedTimer:
        return DispatchedTimer(delay_seconds, callback, self._dispatcher).start()
