from abc import ABC, abstractmethod
from typing import Optional

from deeplink.entities.Bot import BotConfig


class BotStorePort(ABC):
    @abstractmethod
    def mock_and_set_active(self, bot: BotConfig) -> None:
        """Install ``bot`` as the active bot, replacing whatever was active."""
        pass

    @abstractmethod
    def get_active(self) -> Optional[BotConfig]:
        """Return the active bot, if any."""
        pass
