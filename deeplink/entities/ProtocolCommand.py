"""
Protocol command domain entity.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class ProtocolCommand:
    """
    Structured form of a deep-link URL (``scheme://domain.action?args``).

    Attributes:
        domain: Lowercased top-level routing key (e.g. "bot")
        action: Lowercased action within the domain (e.g. "open")
        raw_args: Query string exactly as received, without the leading '?'
        args: Decoded query arguments; read-only
    """

    domain: str
    action: str
    raw_args: str = ""
    args: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "domain", self.domain.lower())
        object.__setattr__(self, "action", self.action.lower())
        object.__setattr__(self, "args", MappingProxyType(dict(self.args)))

    @property
    def route(self) -> str:
        """Dotted routing key, e.g. 'livechat.open'."""
        return f"{self.domain}.{self.action}"

    def get_details(self) -> dict[str, object]:
        """
        Get a plain representation of the command.

        Returns:
            Dictionary with domain, action, raw args and parsed args
        """
        return {
            "domain": self.domain,
            "action": self.action,
            "raw_args": self.raw_args,
            "args": dict(self.args),
        }

    def __str__(self) -> str:
        return f"ProtocolCommand(route='{self.route}', args={sorted(self.args)})"
