"""
Use case for the ``transcript.open`` deep link.
"""

import json
import logging
from typing import Any, Optional

from deeplink.entities.ProtocolCommand import ProtocolCommand
from deeplink.exceptions import (
    AuthorizationError,
    InvalidTranscriptFormatError,
    NotFoundError,
    UnexpectedStatusError,
)
from deeplink.ports.commands.command_service_port import CommandServicePort
from deeplink.ports.http.http_client_port import HttpClientPort
from deeplink.ports.scheduling.scheduler_port import SchedulerPort
from deeplink.utils.base64_codec import decode_base64

TRANSCRIPT_COMMAND = "transcript:open"
DEEP_LINKED_TRANSCRIPT = "deepLinkedTranscript"


class OpenTranscriptUseCase:
    """Downloads a transcript and has the client open it."""

    def __init__(
        self,
        http_client: HttpClientPort,
        commands: CommandServicePort,
        scheduler: SchedulerPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._http_client = http_client
        self._commands = commands
        self._scheduler = scheduler
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, command: ProtocolCommand) -> str:
        """
        Schedule the download of the transcript named by the base64 ``url`` arg.

        Returns:
            The decoded transcript URL
        """
        url = decode_base64(command.args.get("url"))
        self._logger.info(f"Downloading transcript from: {url}")
        self._scheduler.submit(self._download_and_open, url)
        return url

    def fetch_transcript(self, url: str) -> Optional[list[Any]]:
        """
        Download a transcript and validate its contents.

        Args:
            url: Transcript URL

        Returns:
            List of conversation activities, or None when the body is empty

        Raises:
            AuthorizationError: On 401
            NotFoundError: On 404
            UnexpectedStatusError: On any other non-2xx status
            InvalidTranscriptFormatError: If the body is not a JSON array
            HttpClientError: If the request fails
        """
        res = self._http_client.get(url)

        if res.ok:
            if not res.body:
                return None
            try:
                activities = json.loads(res.body)
            except ValueError as e:
                raise InvalidTranscriptFormatError(
                    f"Error occurred while reading downloaded transcript: {e}"
                ) from e
            if not isinstance(activities, list):
                raise InvalidTranscriptFormatError(
                    "Invalid transcript file contents; should be an array of conversation activities."
                )
            return activities

        if res.status_code == 401:
            raise AuthorizationError(
                f"Authorization error while trying to download transcript: {res.body or res.status_text or ''}"
            )
        if res.status_code == 404:
            raise NotFoundError(f"Transcript file not found at: {url}")
        raise UnexpectedStatusError(
            res.status_code,
            f"Unexpected status {res.status_code} {res.status_text} while downloading transcript at: {url}",
        )

    def _download_and_open(self, url: str) -> None:
        try:
            activities = self.fetch_transcript(url)
            if activities is None:
                self._logger.warning(f"Transcript at {url} is empty; nothing to open")
                return
            self._commands.remote_call(
                TRANSCRIPT_COMMAND,
                DEEP_LINKED_TRANSCRIPT,
                {"activities": activities, "deepLink": True},
            )
            self._logger.info(f"Opened transcript with {len(activities)} activities")
        except Exception as e:
            self._logger.error(f"Error downloading and parsing transcript file: {e}")
