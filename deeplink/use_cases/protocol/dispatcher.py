"""
Two-level router for deep-link commands.

Routes:
- livechat.open: start a live chat against an endpoint given in the link
- transcript.open: download a transcript and open it
- bot.open: open a bot project

Unknown domains and actions are ignored so that links produced by newer
versions never break the host.
"""

from __future__ import annotations

import logging
from typing import Callable, Mapping, Optional

from deeplink.entities.ProtocolCommand import ProtocolCommand
from deeplink.use_cases.protocol.open_bot import OpenBotUseCase
from deeplink.use_cases.protocol.open_live_chat import OpenLiveChatUseCase
from deeplink.use_cases.protocol.open_transcript import OpenTranscriptUseCase
from deeplink.use_cases.protocol.parser import ProtocolUrlParser

Handler = Callable[[ProtocolCommand], None]


class ProtocolDispatcher:
    def __init__(
        self,
        parser: ProtocolUrlParser,
        live_chat: OpenLiveChatUseCase,
        transcript: OpenTranscriptUseCase,
        bot: OpenBotUseCase,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._parser = parser
        self._logger = logger or logging.getLogger(__name__)
        self._routes: dict[str, dict[str, Handler]] = {
            "livechat": {"open": live_chat.execute},
            "transcript": {"open": transcript.execute},
            "bot": {"open": bot.execute},
        }

    @property
    def routes(self) -> Mapping[str, tuple[str, ...]]:
        """Known domains and the actions each accepts."""
        return {domain: tuple(actions) for domain, actions in self._routes.items()}

    def dispatch(self, command: ProtocolCommand) -> bool:
        """
        Invoke the handler bound to the command's domain and action.

        Args:
            command: Parsed protocol command

        Returns:
            True if a handler was invoked, False for an unknown domain or action
        """
        actions = self._routes.get(command.domain)
        if actions is None:
            self._logger.debug(f"Ignoring unknown protocol domain: '{command.domain}'")
            return False
        handler = actions.get(command.action)
        if handler is None:
            self._logger.debug(
                f"Ignoring unknown action '{command.action}' for domain '{command.domain}'"
            )
            return False

        self._logger.info(f"Dispatching protocol action: {command.route}")
        handler(command)
        return True

    def parse_and_dispatch(self, url: str) -> tuple[ProtocolCommand, bool]:
        """
        Parse a protocol URL and dispatch it.

        Raises:
            InvalidProtocolError: If the URL has the wrong scheme
        """
        command = self._parser.parse(url)
        return command, self.dispatch(command)
