"""
Serve the deep-link HTTP API.

Host, port and reload come from the HOST, PORT and RELOAD environment
variables (see deeplink.config.settings).
"""

import uvicorn

from deeplink.config.settings import Settings, settings

APP = "deeplink.main:app"


def main(argv: list[str] | None = None, app_settings: Settings | None = None) -> int:
    cfg = app_settings or settings
    uvicorn.run(APP, host=cfg.api_host, port=cfg.api_port, reload=cfg.api_reload)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
