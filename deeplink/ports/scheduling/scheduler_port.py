"""
Scheduler port used by handlers to run work off the caller's thread.
"""

from abc import ABC, abstractmethod
from concurrent.futures import Future
from typing import Any, Callable, Protocol


class Cancellable(Protocol):
    def cancel(self) -> Any: ...


class SchedulerPort(ABC):
    """Port interface for background and delayed execution."""

    @abstractmethod
    def submit(self, fn: Callable[..., Any], *args: Any) -> "Future[Any]":
        """
        Run ``fn(*args)`` in the background as soon as possible.

        Returns:
            Future of the call
        """
        pass

    @abstractmethod
    def call_later(self, delay: float, fn: Callable[..., Any], *args: Any) -> Cancellable:
        """
        Run ``fn(*args)`` after ``delay`` seconds.

        Returns:
            Handle whose ``cancel()`` prevents the call if it has not started
        """
        pass
