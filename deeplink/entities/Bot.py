"""
Bot configuration entities synthesized from deep links.
"""

import uuid
from dataclasses import asdict, dataclass, field


@dataclass
class EndpointService:
    """A single messaging endpoint of a bot."""

    endpoint: str = ""
    app_id: str = ""
    app_password: str = ""
    name: str = ""
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    type: str = "endpoint"


@dataclass
class BotConfig:
    """In-memory bot configuration; never written to disk by this package."""

    name: str = ""
    description: str = ""
    secret_key: str = ""
    services: list[EndpointService] = field(default_factory=list)

    @property
    def endpoints(self) -> list[EndpointService]:
        return [s for s in self.services if s.type == "endpoint"]

    def get_details(self) -> dict[str, object]:
        """
        Get bot details with credentials masked.

        Returns:
            Dictionary with bot fields and its services
        """
        details = asdict(self)
        for service in details["services"]:
            if service.get("app_password"):
                service["app_password"] = "***"
        return details
