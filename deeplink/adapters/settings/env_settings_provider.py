import os

from deeplink.entities.FrameworkSettings import FrameworkSettings
from deeplink.ports.settings.settings_provider_port import SettingsProviderPort


class EnvSettingsProvider(SettingsProviderPort):
    """Reads framework settings from the environment on every call."""

    def get_framework_settings(self) -> FrameworkSettings:
        return FrameworkSettings(
            ngrok_path=os.getenv("NGROK_PATH", ""),
            bypass_ngrok_localhost=os.getenv("NGROK_BYPASS_LOCALHOST", "1")
            in {"1", "true", "True", "yes"},
        )
