"""
In-process command service.

Commands are registered by name by the host application (the client side of
the emulator). Every issued command is kept in a short history so that a
host without registered handlers can still observe what was requested.
"""

import dataclasses
import logging
import threading
from collections import deque
from concurrent.futures import Future
from datetime import datetime, timezone
from typing import Any, Callable, Iterable, Mapping, Optional

from deeplink.exceptions import CommandServiceError
from deeplink.ports.commands.command_service_port import CommandServicePort
from deeplink.ports.scheduling.scheduler_port import SchedulerPort

SENSITIVE_FIELDS = frozenset({"app_password", "secret", "secret_key"})
MASK = "***"


class LocalCommandService(CommandServicePort):
    def __init__(
        self,
        scheduler: SchedulerPort,
        logger: Optional[logging.Logger] = None,
        history_size: int = 100,
        sensitive_args: Optional[Mapping[str, Iterable[int]]] = None,
    ) -> None:
        """
        Args:
            scheduler: Runs command handlers
            logger: Logger instance to use for logging
            history_size: Number of issued commands kept in history
            sensitive_args: Command name -> positions of arguments masked in history
        """
        self._scheduler = scheduler
        self._logger = logger or logging.getLogger(__name__)
        self._handlers: dict[str, Callable[..., Any]] = {}
        self._history: deque[dict[str, Any]] = deque(maxlen=history_size)
        self._lock = threading.Lock()
        self._sensitive_args = {
            name: frozenset(positions) for name, positions in (sensitive_args or {}).items()
        }

    def register(self, name: str, handler: Callable[..., Any]) -> None:
        """Register (or replace) the handler of a named command."""
        with self._lock:
            self._handlers[name] = handler
        self._logger.debug(f"Registered command handler: {name}")

    def history(self) -> list[dict[str, Any]]:
        """Commands issued so far, oldest first."""
        with self._lock:
            return list(self._history)

    def remote_call(self, name: str, *args: Any) -> None:
        future = self.call(name, *args)
        future.add_done_callback(lambda f: self._log_failure(name, f))

    def call(self, name: str, *args: Any) -> "Future[Any]":
        with self._lock:
            handler = self._handlers.get(name)
            self._history.append(
                {
                    "name": name,
                    "args": self._masked_args(name, args),
                    "at": datetime.now(timezone.utc).isoformat(),
                    "handled": handler is not None,
                }
            )
        if handler is None:
            future: Future[Any] = Future()
            future.set_exception(
                CommandServiceError(f"No handler registered for command: {name}")
            )
            return future
        self._logger.info(f"Calling command: {name}")
        return self._scheduler.submit(handler, *args)

    def _log_failure(self, name: str, future: "Future[Any]") -> None:
        error = future.exception()
        if error is not None:
            self._logger.error(f"Command {name} failed: {error}")

    def _masked_args(self, name: str, args: tuple[Any, ...]) -> list[Any]:
        """Copy of ``args`` safe to expose: credentials replaced by a mask."""
        positions = self._sensitive_args.get(name, frozenset())
        return [
            (MASK if arg else arg) if i in positions else _mask(arg)
            for i, arg in enumerate(args)
        ]


def _mask(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        value = dataclasses.asdict(value)
    if isinstance(value, Mapping):
        return {
            k: (MASK if k in SENSITIVE_FIELDS and v else _mask(v))
            for k, v in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [_mask(v) for v in value]
    return value
