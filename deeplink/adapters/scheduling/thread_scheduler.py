import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, Optional

from deeplink.ports.scheduling.scheduler_port import SchedulerPort


class _TrackedTimer(threading.Timer):
    """Timer that reports back when it is cancelled or has run."""

    def __init__(
        self,
        interval: float,
        function: Callable[[], None],
        on_done: Callable[["_TrackedTimer"], None],
    ) -> None:
        super().__init__(interval, function)
        self.daemon = True
        self._on_done = on_done

    def run(self) -> None:
        try:
            super().run()
        finally:
            self._on_done(self)

    def cancel(self) -> None:
        super().cancel()
        self._on_done(self)


class ThreadScheduler(SchedulerPort):
    """Scheduler backed by a thread pool and daemon timers."""

    def __init__(self, max_workers: int = 4, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(__name__)
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="deeplink"
        )
        self._timers: set[threading.Timer] = set()
        self._lock = threading.Lock()

    @property
    def pending_timers(self) -> int:
        """Timers that have neither run nor been cancelled."""
        with self._lock:
            return len(self._timers)

    def submit(self, fn: Callable[..., Any], *args: Any) -> "Future[Any]":
        return self._executor.submit(fn, *args)

    def call_later(
        self, delay: float, fn: Callable[..., Any], *args: Any
    ) -> threading.Timer:
        def fire() -> None:
            try:
                fn(*args)
            except Exception as e:
                self._logger.error(f"Delayed call {getattr(fn, '__name__', fn)} failed: {e}")

        timer = _TrackedTimer(delay, fire, self._discard)
        with self._lock:
            self._timers.add(timer)
        timer.start()
        return timer

    def shutdown(self, wait: bool = True) -> None:
        """Cancel pending timers and stop the worker threads."""
        with self._lock:
            timers = list(self._timers)
        for timer in timers:
            timer.cancel()
        self._executor.shutdown(wait=wait)

    def _discard(self, timer: threading.Timer) -> None:
        with self._lock:
            self._timers.discard(timer)
