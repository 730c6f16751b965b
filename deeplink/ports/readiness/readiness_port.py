"""
Readiness port: a one-shot signal that deferred actions can wait on.
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional


class ReadinessPort(ABC):
    """Port interface for a one-shot readiness signal (tunnel connected, host ready)."""

    @abstractmethod
    def when_ready(
        self, callback: Callable[[], None], timeout: Optional[float] = None
    ) -> None:
        """
        Run ``callback`` once the signal has fired.

        The callback runs at most once. If the signal already fired it runs
        immediately.

        Args:
            callback: Zero-argument callable to run
            timeout: Seconds to wait before dropping the callback; None waits forever
        """
        pass
