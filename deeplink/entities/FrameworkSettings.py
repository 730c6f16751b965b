"""
Framework settings entity consumed by the protocol handlers.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FrameworkSettings:
    """Subset of the emulator framework settings relevant to deep links."""

    ngrok_path: str = ""
    bypass_ngrok_localhost: bool = True

    @property
    def tunnel_configured(self) -> bool:
        """True when a tunnel binary is configured and must connect first."""
        return bool(self.ngrok_path and self.ngrok_path.strip())
