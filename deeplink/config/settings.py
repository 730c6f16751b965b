"""
Configuration settings for the application.
"""

import os

from dotenv import load_dotenv

from deeplink.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.scheme: str = self._get_env("DEEPLINK_SCHEME", "bfemulator")
        self.launch_delay: float = self._get_float("DEEPLINK_LAUNCH_DELAY", 1.0)
        # 0 disables the bound and waits for the tunnel forever
        self.tunnel_timeout: float = self._get_float("DEEPLINK_TUNNEL_TIMEOUT", 60.0)
        self.http_timeout: float = self._get_float("DEEPLINK_HTTP_TIMEOUT", 30.0)
        self.workers: int = self._get_int("DEEPLINK_WORKERS", 4)
        self.wait_for_host: bool = self._get_bool("DEEPLINK_WAIT_FOR_HOST", False)
        self.max_download_bytes: int = self._get_int(
            "DEEPLINK_MAX_DOWNLOAD_BYTES", 10 * 1024 * 1024
        )
        self.api_host: str = self._get_env("HOST", "127.0.0.1")
        self.api_port: int = self._get_int("PORT", 8000)
        self.api_reload: bool = self._get_bool("RELOAD", False)

        if not self.scheme or "://" in self.scheme:
            raise ConfigurationError(
                f"DEEPLINK_SCHEME must be a bare scheme name, got: {self.scheme!r}"
            )
        if self.workers < 1:
            raise ConfigurationError("DEEPLINK_WORKERS must be at least 1")
        if self.max_download_bytes < 1:
            raise ConfigurationError("DEEPLINK_MAX_DOWNLOAD_BYTES must be positive")

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_float(self, key: str, default: float) -> float:
        """Get a non-negative float environment variable."""
        raw = os.getenv(key)
        if raw is None or raw == "":
            return default
        try:
            value = float(raw)
        except ValueError:
            raise ConfigurationError(f"Environment variable {key} must be a number")
        if value < 0:
            raise ConfigurationError(f"Environment variable {key} must not be negative")
        return value

    def _get_int(self, key: str, default: int) -> int:
        """Get an integer environment variable."""
        raw = os.getenv(key)
        if raw is None or raw == "":
            return default
        try:
            return int(raw)
        except ValueError:
            raise ConfigurationError(f"Environment variable {key} must be an integer")

    def _get_bool(self, key: str, default: bool) -> bool:
        raw = os.getenv(key)
        if raw is None or raw == "":
            return default
        return raw in {"1", "true", "True", "yes"}


# Global settings instance
settings = Settings()
