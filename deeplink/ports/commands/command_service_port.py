"""
Remote command channel port.
"""

from abc import ABC, abstractmethod
from concurrent.futures import Future
from typing import Any


class CommandServicePort(ABC):
    """Port interface for issuing named commands to the client side."""

    @abstractmethod
    def remote_call(self, name: str, *args: Any) -> None:
        """
        Fire-and-forget notification.

        Args:
            name: Command name (e.g. "livechat:new")
            *args: Command arguments
        """
        pass

    @abstractmethod
    def call(self, name: str, *args: Any) -> "Future[Any]":
        """
        Request/response call.

        Args:
            name: Command name (e.g. "bot:load")
            *args: Command arguments

        Returns:
            Future resolved with the command result or its exception
        """
        pass
