"""
Deferral of actions until the emulator can take them.
"""

import logging
from typing import Callable, Optional

from deeplink.ports.readiness.readiness_port import ReadinessPort
from deeplink.ports.scheduling.scheduler_port import SchedulerPort
from deeplink.ports.settings.settings_provider_port import SettingsProviderPort
from deeplink.utils.once import run_once


class DeferredLaunch:
    """
    Runs an action once the emulator is ready for it.

    - tunnel configured: after the tunnel readiness gate opens
    - otherwise, host-ready gate given: after that gate opens
    - otherwise: after a fixed delay

    Each scheduled action runs at most once.
    """

    def __init__(
        self,
        settings_provider: SettingsProviderPort,
        tunnel_ready: ReadinessPort,
        scheduler: SchedulerPort,
        launch_delay: float = 1.0,
        tunnel_timeout: Optional[float] = None,
        host_ready: Optional[ReadinessPort] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._settings_provider = settings_provider
        self._tunnel_ready = tunnel_ready
        self._scheduler = scheduler
        self._launch_delay = launch_delay
        self._tunnel_timeout = tunnel_timeout or None
        self._host_ready = host_ready
        self._logger = logger or logging.getLogger(__name__)

    def schedule(self, action: Callable[[], None], description: str) -> None:
        action_once = run_once(action)

        if self._settings_provider.get_framework_settings().tunnel_configured:
            self._logger.info(f"Deferring {description} until the tunnel connects")
            self._tunnel_ready.when_ready(action_once, timeout=self._tunnel_timeout)
        elif self._host_ready is not None:
            self._logger.info(f"Deferring {description} until the host is ready")
            self._host_ready.when_ready(action_once)
        else:
            self._logger.info(f"Deferring {description} by {self._launch_delay}s")
            self._scheduler.call_later(self._launch_delay, action_once)
