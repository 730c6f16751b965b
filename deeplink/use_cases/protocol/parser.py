"""
Parser turning deep-link URLs into ProtocolCommand entities.
"""

import logging
from typing import Optional
from urllib.parse import parse_qsl

from deeplink.entities.ProtocolCommand import ProtocolCommand
from deeplink.exceptions import InvalidProtocolError


class ProtocolUrlParser:
    """Parses ``<scheme>://domain.action?key=value&...`` URLs."""

    def __init__(self, scheme: str = "bfemulator", logger: Optional[logging.Logger] = None):
        """
        Initialize the parser.

        Args:
            scheme: The only scheme accepted, without '://'
            logger: Logger instance to use for logging
        """
        self._prefix = f"{scheme}://"
        self._logger = logger or logging.getLogger(__name__)

    @property
    def prefix(self) -> str:
        return self._prefix

    def parse(self, url: str) -> ProtocolCommand:
        """
        Extract domain, action and arguments from a protocol URL.

        Args:
            url: Raw deep-link URL

        Returns:
            ProtocolCommand with lowercased domain and action

        Raises:
            InvalidProtocolError: If the URL does not start with the scheme prefix
        """
        if not isinstance(url, str) or not url.startswith(self._prefix):
            raise InvalidProtocolError(
                f"Invalid protocol url. Must start with '{self._prefix}'"
            )

        # Slashes are added by URL normalization (e.g. before the query); they carry no structure
        rest = url[len(self._prefix):].replace("/", "")
        head, _, raw_args = rest.partition("?")
        tokens = head.split(".")
        domain = tokens[0] if tokens else ""
        action = tokens[1] if len(tokens) > 1 else ""

        # dict() keeps the last value of a repeated key
        args = dict(parse_qsl(raw_args, keep_blank_values=True))

        command = ProtocolCommand(
            domain=domain, action=action, raw_args=raw_args, args=args
        )
        self._logger.debug(f"Parsed protocol url into {command}")
        return command
