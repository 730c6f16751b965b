"""
FastAPI dependency functions for retrieving components from the container.
"""

from deeplink.adapters.commands.local_command_service import LocalCommandService
from deeplink.adapters.readiness.one_shot_gate import OneShotReadinessGate
from deeplink.container import container
from deeplink.ports.store.bot_store_port import BotStorePort
from deeplink.use_cases.protocol.dispatcher import ProtocolDispatcher
from deeplink.use_cases.protocol.parser import ProtocolUrlParser


def get_dispatcher() -> ProtocolDispatcher:
    return container.get_dispatcher()


def get_parser() -> ProtocolUrlParser:
    return container.get_parser()


def get_tunnel_gate() -> OneShotReadinessGate:
    return container.get_tunnel_gate()


def get_host_gate():
    """
    Get the host-ready gate.

    Returns:
        OneShotReadinessGate, or None when the host gate is disabled
    """
    return container.get_host_gate()


def get_command_service() -> LocalCommandService:
    return container.get_command_service()


def get_bot_store() -> BotStorePort:
    return container.get_bot_store()
