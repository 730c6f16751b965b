"""
Use case for the ``livechat.open`` deep link.
"""

import logging
from typing import Optional

from deeplink.entities.Bot import BotConfig, EndpointService
from deeplink.entities.ProtocolCommand import ProtocolCommand
from deeplink.ports.commands.command_service_port import CommandServicePort
from deeplink.ports.store.bot_store_port import BotStorePort
from deeplink.use_cases.protocol.deferred_launch import DeferredLaunch
from deeplink.utils.base64_codec import decode_base64

LIVE_CHAT_COMMAND = "livechat:new"


class OpenLiveChatUseCase:
    """Mocks a bot from the link's endpoint and starts a live chat with it."""

    def __init__(
        self,
        bot_store: BotStorePort,
        commands: CommandServicePort,
        launcher: DeferredLaunch,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            bot_store: Store receiving the mocked bot as the active one
            commands: Channel used to ask the client to open the chat
            launcher: Decides when the chat can be opened
            logger: Logger instance to use for logging
        """
        self._bot_store = bot_store
        self._commands = commands
        self._launcher = launcher
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, command: ProtocolCommand) -> EndpointService:
        """
        Install the mocked bot and schedule the live chat.

        Args:
            command: Parsed ``livechat.open`` command carrying base64 ``botUrl``,
                ``msaAppId`` and ``msaPassword``

        Returns:
            The endpoint the chat will be opened against
        """
        endpoint = EndpointService(
            endpoint=decode_base64(command.args.get("botUrl")),
            app_id=decode_base64(command.args.get("msaAppId")),
            app_password=decode_base64(command.args.get("msaPassword")),
        )
        bot = BotConfig(services=[endpoint])
        self._bot_store.mock_and_set_active(bot)
        self._logger.info(f"Opening live chat with endpoint: {endpoint.endpoint}")

        # A failed connection shows up in the chat log, so no error handling here
        self._launcher.schedule(
            lambda: self._commands.remote_call(LIVE_CHAT_COMMAND, endpoint),
            "live chat",
        )
        return endpoint
