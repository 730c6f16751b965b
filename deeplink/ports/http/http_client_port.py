"""
Outbound HTTP client port.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Mapping


@dataclass(frozen=True)
class HttpResponse:
    """Response of a single GET request, whatever its status."""

    status_code: int
    body: str = ""
    status_text: str = ""
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class HttpClientPort(ABC):
    """Port interface for outbound HTTP requests."""

    @abstractmethod
    def get(self, url: str) -> HttpResponse:
        """
        Perform a single GET request.

        Args:
            url: Absolute http(s) URL

        Returns:
            HttpResponse, including for 4xx/5xx statuses

        Raises:
            HttpClientError: If no response could be obtained
        """
        pass
