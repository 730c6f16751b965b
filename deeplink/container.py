"""
Dependency injection container for managing application dependencies.
"""

import logging
from typing import Optional

from deeplink.adapters.commands.local_command_service import LocalCommandService
from deeplink.adapters.http.urllib_http_client import UrllibHttpClient
from deeplink.adapters.readiness.one_shot_gate import OneShotReadinessGate
from deeplink.adapters.scheduling.thread_scheduler import ThreadScheduler
from deeplink.adapters.settings.env_settings_provider import EnvSettingsProvider
from deeplink.adapters.store.in_memory_bot_store import InMemoryBotStore
from deeplink.config.settings import Settings, settings
from deeplink.ports.http.http_client_port import HttpClientPort
from deeplink.ports.settings.settings_provider_port import SettingsProviderPort
from deeplink.ports.store.bot_store_port import BotStorePort
from deeplink.use_cases.protocol.deferred_launch import DeferredLaunch
from deeplink.use_cases.protocol.dispatcher import ProtocolDispatcher
from deeplink.use_cases.protocol.open_bot import LOAD_BOT_COMMAND, OpenBotUseCase
from deeplink.use_cases.protocol.open_live_chat import OpenLiveChatUseCase
from deeplink.use_cases.protocol.open_transcript import OpenTranscriptUseCase
from deeplink.use_cases.protocol.parser import ProtocolUrlParser


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self, app_settings: Optional[Settings] = None):
        self._settings = app_settings or settings
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def get_scheduler(self) -> ThreadScheduler:
        if "scheduler" not in self._instances:
            self._instances["scheduler"] = ThreadScheduler(
                max_workers=self._settings.workers, logger=self._logger
            )
        return self._instances["scheduler"]

    def get_settings_provider(self) -> SettingsProviderPort:
        if "settings_provider" not in self._instances:
            self._instances["settings_provider"] = EnvSettingsProvider()
        return self._instances["settings_provider"]

    def get_bot_store(self) -> BotStorePort:
        if "bot_store" not in self._instances:
            self._instances["bot_store"] = InMemoryBotStore(self._logger)
        return self._instances["bot_store"]

    def get_http_client(self) -> HttpClientPort:
        if "http_client" not in self._instances:
            self._instances["http_client"] = UrllibHttpClient(
                timeout=self._settings.http_timeout,
                max_bytes=self._settings.max_download_bytes,
                logger=self._logger,
            )
        return self._instances["http_client"]

    def get_command_service(self) -> LocalCommandService:
        """
        Get the command service the host registers its client commands on.

        Returns:
            LocalCommandService shared by all handlers
        """
        if "command_service" not in self._instances:
            self._instances["command_service"] = LocalCommandService(
                self.get_scheduler(),
                self._logger,
                # bot:load(path, secret)
                sensitive_args={LOAD_BOT_COMMAND: (1,)},
            )
        return self._instances["command_service"]

    def get_tunnel_gate(self) -> OneShotReadinessGate:
        if "tunnel_gate" not in self._instances:
            self._instances["tunnel_gate"] = OneShotReadinessGate(
                "tunnel", self.get_scheduler(), self._logger
            )
        return self._instances["tunnel_gate"]

    def get_host_gate(self) -> Optional[OneShotReadinessGate]:
        """
        Get the host-ready gate, if the host signals readiness itself.

        Returns:
            The gate, or None when deferral falls back to the fixed delay
        """
        if not self._settings.wait_for_host:
            return None
        if "host_gate" not in self._instances:
            self._instances["host_gate"] = OneShotReadinessGate(
                "host", self.get_scheduler(), self._logger
            )
        return self._instances["host_gate"]

    def get_deferred_launch(self) -> DeferredLaunch:
        if "deferred_launch" not in self._instances:
            self._instances["deferred_launch"] = DeferredLaunch(
                self.get_settings_provider(),
                self.get_tunnel_gate(),
                self.get_scheduler(),
                launch_delay=self._settings.launch_delay,
                tunnel_timeout=self._settings.tunnel_timeout,
                host_ready=self.get_host_gate(),
                logger=self._logger,
            )
        return self._instances["deferred_launch"]

    def get_parser(self) -> ProtocolUrlParser:
        if "parser" not in self._instances:
            self._instances["parser"] = ProtocolUrlParser(
                self._settings.scheme, self._logger
            )
        return self._instances["parser"]

    def get_dispatcher(self) -> ProtocolDispatcher:
        """
        Get the protocol dispatcher with all handlers wired.

        Returns:
            Configured ProtocolDispatcher
        """
        if "dispatcher" not in self._instances:
            commands = self.get_command_service()
            launcher = self.get_deferred_launch()
            self._instances["dispatcher"] = ProtocolDispatcher(
                self.get_parser(),
                OpenLiveChatUseCase(
                    self.get_bot_store(), commands, launcher, self._logger
                ),
                OpenTranscriptUseCase(
                    self.get_http_client(), commands, self.get_scheduler(), self._logger
                ),
                OpenBotUseCase(commands, launcher, self._logger),
                self._logger,
            )
        return self._instances["dispatcher"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        scheduler = self._instances.get("scheduler")
        if scheduler is not None:
            scheduler.shutdown(wait=False)
        self._instances.clear()


# Global container instance
container = DependencyContainer()
