"""
Settings provider port giving read-only access to framework settings.
"""

from abc import ABC, abstractmethod

from deeplink.entities.FrameworkSettings import FrameworkSettings


class SettingsProviderPort(ABC):
    """Port interface for reading the current framework settings."""

    @abstractmethod
    def get_framework_settings(self) -> FrameworkSettings:
        """
        Get the framework settings as they are right now.

        Returns:
            FrameworkSettings snapshot
        """
        pass
