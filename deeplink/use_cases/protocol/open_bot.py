"""
Use case for the ``bot.open`` deep link.
"""

import logging
from concurrent.futures import Future
from typing import Any, Optional

from deeplink.entities.ProtocolCommand import ProtocolCommand
from deeplink.exceptions import BotLoadError
from deeplink.ports.commands.command_service_port import CommandServicePort
from deeplink.use_cases.protocol.deferred_launch import DeferredLaunch
from deeplink.utils.base64_codec import decode_base64

LOAD_BOT_COMMAND = "bot:load"


class OpenBotUseCase:
    """Opens the bot project found at the path given in the link."""

    def __init__(
        self,
        commands: CommandServicePort,
        launcher: DeferredLaunch,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._commands = commands
        self._launcher = launcher
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, command: ProtocolCommand) -> tuple[str, Optional[str]]:
        path = decode_base64(command.args.get("path"))
        raw_secret = command.args.get("secret")
        secret = decode_base64(raw_secret) if raw_secret else None

        self._launcher.schedule(lambda: self._load(path, secret), f"loading bot at {path}")
        return path, secret

    def _load(self, path: str, secret: Optional[str]) -> None:
        future = self._commands.call(LOAD_BOT_COMMAND, path, secret)
        future.add_done_callback(lambda f: self._on_loaded(path, f))

    def _on_loaded(self, path: str, future: "Future[Any]") -> None:
        cause = future.exception()
        if cause is None:
            self._logger.info("opened bot successfully")
            return
        error = BotLoadError(path)
        error.__cause__ = cause
        self._logger.error(f"{error}: {cause}", exc_info=error)
