"""
Custom exceptions for the application.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class InvalidProtocolError(BaseAppError):
    """Exception raised when a URL does not start with the registered scheme."""

    pass


class TranscriptError(BaseAppError):
    """Exception raised for transcript download errors."""

    pass


class InvalidTranscriptFormatError(TranscriptError):
    """Exception raised when a downloaded transcript is not a list of activities."""

    pass


class AuthorizationError(TranscriptError):
    """Exception raised when the transcript host rejects the request (401)."""

    pass


class NotFoundError(TranscriptError):
    """Exception raised when the transcript does not exist (404)."""

    pass


class UnexpectedStatusError(TranscriptError):
    """Exception raised for any other non-2xx transcript response."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code


class HttpClientError(BaseAppError):
    """Exception raised when an HTTP request cannot be completed."""

    pass


class BotLoadError(BaseAppError):
    """Exception raised when a deep-linked bot project fails to load."""

    def __init__(self, path: str):
        super().__init__(
            f"Error occurred while trying to deep link to bot project at: {path}"
        )
        self.path = path


class CommandServiceError(BaseAppError):
    """Exception raised for remote command routing errors."""

    pass
