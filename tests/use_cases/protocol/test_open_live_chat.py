"""
Tests for the OpenLiveChatUseCase.
"""

import base64
from unittest.mock import MagicMock

import pytest

from deeplink.entities.Bot import BotConfig
from deeplink.entities.FrameworkSettings import FrameworkSettings
from deeplink.entities.ProtocolCommand import ProtocolCommand
from deeplink.ports.commands.command_service_port import CommandServicePort
from deeplink.ports.readiness.readiness_port import ReadinessPort
from deeplink.ports.settings.settings_provider_port import SettingsProviderPort
from deeplink.ports.store.bot_store_port import BotStorePort
from deeplink.use_cases.protocol.deferred_launch import DeferredLaunch
from deeplink.use_cases.protocol.open_live_chat import OpenLiveChatUseCase


def b64(text):
    return base64.b64encode(text.encode()).decode()


def live_chat_command():
    return ProtocolCommand(
        domain="livechat",
        action="open",
        args={
            "botUrl": b64("http://localhost:3978/api/messages"),
            "msaAppId": b64("app-id"),
            "msaPassword": b64("s3cr3t"),
        },
    )


@pytest.fixture
def ports(scheduler, mock_logger):
    settings_provider = MagicMock(spec=SettingsProviderPort)
    settings_provider.get_framework_settings.return_value = FrameworkSettings()
    tunnel = MagicMock(spec=ReadinessPort)
    store = MagicMock(spec=BotStorePort)
    commands = MagicMock(spec=CommandServicePort)
    launcher = DeferredLaunch(
        settings_provider, tunnel, scheduler, launch_delay=1.0, logger=mock_logger
    )
    use_case = OpenLiveChatUseCase(store, commands, launcher, mock_logger)
    return use_case, settings_provider, tunnel, store, commands


class TestOpenLiveChatUseCase:
    def test_installs_decoded_endpoint_as_active_bot(self, ports):
        use_case, _, _, store, _ = ports

        endpoint = use_case.execute(live_chat_command())

        store.mock_and_set_active.assert_called_once()
        bot = store.mock_and_set_active.call_args.args[0]
        assert isinstance(bot, BotConfig)
        assert bot.services == [endpoint]
        assert endpoint.endpoint == "http://localhost:3978/api/messages"
        assert endpoint.app_id == "app-id"
        assert endpoint.app_password == "s3cr3t"
        assert endpoint.type == "endpoint"

    def test_without_tunnel_opens_chat_after_delay(self, ports, scheduler):
        use_case, _, tunnel, _, commands = ports

        endpoint = use_case.execute(live_chat_command())

        commands.remote_call.assert_not_called()
        assert [d[0] for d in scheduler.delayed] == [1.0]
        tunnel.when_ready.assert_not_called()

        scheduler.run_delayed()

        commands.remote_call.assert_called_once_with("livechat:new", endpoint)

    def test_with_tunnel_waits_for_connection(self, ports, scheduler):
        use_case, settings_provider, tunnel, _, commands = ports
        settings_provider.get_framework_settings.return_value = FrameworkSettings(
            ngrok_path="/usr/local/bin/ngrok"
        )

        endpoint = use_case.execute(live_chat_command())

        assert scheduler.delayed == []
        commands.remote_call.assert_not_called()
        tunnel.when_ready.assert_called_once()

        on_connected = tunnel.when_ready.call_args.args[0]
        on_connected()
        on_connected()

        commands.remote_call.assert_called_once_with("livechat:new", endpoint)

    def test_malformed_base64_is_passed_through(self, ports):
        use_case, _, _, store, _ = ports
        command = ProtocolCommand(
            domain="livechat", action="open", args={"botUrl": "not base64!"}
        )

        endpoint = use_case.execute(command)

        assert endpoint.endpoint == "not base64!"
        assert endpoint.app_id == ""
        assert endpoint.app_password == ""
        store.mock_and_set_active.assert_called_once()

    def test_each_link_replaces_active_bot(self, ports):
        use_case, _, _, store, _ = ports

        first = use_case.execute(live_chat_command())
        second = use_case.execute(live_chat_command())

        assert store.mock_and_set_active.call_count == 2
        assert store.mock_and_set_active.call_args.args[0].services == [second]
        assert first.id != second.id
