import logging
import threading
from typing import Optional

from deeplink.entities.Bot import BotConfig
from deeplink.ports.store.bot_store_port import BotStorePort


class InMemoryBotStore(BotStorePort):
    """Holds the active bot for the lifetime of the process."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(__name__)
        self._lock = threading.Lock()
        self._active: Optional[BotConfig] = None

    def mock_and_set_active(self, bot: BotConfig) -> None:
        with self._lock:
            self._active = bot
        self._logger.info(
            f"Active bot set ({len(bot.services)} service(s), name='{bot.name}')"
        )

    def get_active(self) -> Optional[BotConfig]:
        with self._lock:
            return self._active
