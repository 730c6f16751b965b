"""
One-shot readiness gate.

The gate behaves like a future with no value: it opens once, callbacks that
were waiting run exactly once when it opens, and callbacks registered after
it opened run immediately. Further signals are ignored.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Optional

from deeplink.ports.readiness.readiness_port import ReadinessPort
from deeplink.ports.scheduling.scheduler_port import Cancellable, SchedulerPort
from deeplink.utils.once import run_once


class _Waiter:
    def __init__(self, callback: Callable[[], None]) -> None:
        self.run = run_once(callback)
        self.timer: Optional[Cancellable] = None


class OneShotReadinessGate(ReadinessPort):
    def __init__(
        self,
        name: str,
        scheduler: SchedulerPort,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._name = name
        self._scheduler = scheduler
        self._logger = logger or logging.getLogger(__name__)
        self._lock = threading.Lock()
        self._fired = False
        self._waiters: list[_Waiter] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_ready(self) -> bool:
        with self._lock:
            return self._fired

    @property
    def pending(self) -> int:
        with self._lock:
            return len(self._waiters)

    def when_ready(
        self, callback: Callable[[], None], timeout: Optional[float] = None
    ) -> None:
        waiter = _Waiter(callback)
        with self._lock:
            if not self._fired:
                self._waiters.append(waiter)
                if timeout:
                    waiter.timer = self._scheduler.call_later(
                        timeout, self._expire, waiter, timeout
                    )
                self._logger.info(f"Waiting for '{self._name}' readiness")
                return
        self._invoke(waiter)

    def signal(self) -> bool:
        """
        Open the gate.

        Returns:
            True if this call opened the gate, False if it was already open
        """
        with self._lock:
            if self._fired:
                self._logger.debug(f"Ignoring repeated '{self._name}' signal")
                return False
            self._fired = True
            waiters, self._waiters = self._waiters, []
        self._logger.info(
            f"'{self._name}' is ready, releasing {len(waiters)} pending action(s)"
        )
        for waiter in waiters:
            if waiter.timer is not None:
                waiter.timer.cancel()
            self._invoke(waiter)
        return True

    def _expire(self, waiter: _Waiter, timeout: Any) -> None:
        with self._lock:
            if waiter not in self._waiters:
                return
            self._waiters.remove(waiter)
        self._logger.warning(
            f"Gave up waiting for '{self._name}' after {timeout}s; deferred action dropped"
        )

    def _invoke(self, waiter: _Waiter) -> None:
        try:
            waiter.run()
        except Exception as e:
            self._logger.error(f"Action waiting on '{self._name}' failed: {e}")
