"""
Pytest configuration and shared fixtures.
"""

from concurrent.futures import Future
from unittest.mock import MagicMock

import pytest

from deeplink.ports.scheduling.scheduler_port import SchedulerPort


class ManualScheduler(SchedulerPort):
    """
    Scheduler for tests.

    ``submit`` runs immediately; ``call_later`` only records the call until
    ``run_delayed()`` is invoked.
    """

    def __init__(self):
        self.delayed = []

    def submit(self, fn, *args):
        future = Future()
        try:
            future.set_result(fn(*args))
        except Exception as e:
            future.set_exception(e)
        return future

    def call_later(self, delay, fn, *args):
        handle = MagicMock()
        handle.cancelled = False

        def cancel():
            handle.cancelled = True

        handle.cancel.side_effect = cancel
        self.delayed.append((delay, fn, args, handle))
        return handle

    def run_delayed(self):
        pending, self.delayed = self.delayed, []
        for _, fn, args, handle in pending:
            if not handle.cancelled:
                fn(*args)


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def scheduler():
    return ManualScheduler()
