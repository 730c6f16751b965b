"""
Pydantic models for API requests and responses.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, Field

from deeplink.entities.ProtocolCommand import ProtocolCommand


class ProtocolRequest(BaseModel):
    """Schema for a deep-link dispatch request."""

    url: str = Field(..., description="Deep-link URL, e.g. bfemulator://bot.open?path=...")


class CommandInfo(BaseModel):
    """Schema for a parsed protocol command."""

    domain: str = Field(..., description="Lowercased domain")
    action: str = Field(..., description="Lowercased action")
    raw_args: str = Field(..., description="Query string as received")
    args: dict[str, str] = Field(default_factory=dict, description="Parsed arguments")

    @classmethod
    def from_entity(cls, command: ProtocolCommand):
        """Create a CommandInfo schema from a ProtocolCommand entity."""
        details = command.get_details()
        return cls(
            domain=details["domain"],
            action=details["action"],
            raw_args=details["raw_args"],
            args=details["args"],
        )


class DispatchResponse(BaseModel):
    """Schema for a dispatch result."""

    command: CommandInfo
    dispatched: bool = Field(
        ..., description="False when the domain or action is not recognized"
    )


class ReadinessResponse(BaseModel):
    """Schema for a readiness signal result."""

    gate: str
    opened: bool = Field(..., description="False if the gate was already open")


class IssuedCommand(BaseModel):
    """Schema for one command issued to the client side."""

    name: str
    args: List[Any] = Field(default_factory=list)
    at: str
    handled: bool


class CommandHistoryResponse(BaseModel):
    commands: List[IssuedCommand] = Field(default_factory=list)


class ActiveBotResponse(BaseModel):
    bot: dict[str, Any]


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    detail: str = Field(..., description="Error message")
    hint: Optional[str] = None
