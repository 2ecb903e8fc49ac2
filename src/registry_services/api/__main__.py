"""
registry_services.api.__main__

Entrypoint for running either service via `python -m registry_services.api`.

Responsibilities:
- Load settings (REGISTRY_SERVICE=orders|users picks the app).
- Create the app.
- Start uvicorn with structlog-compatible logging config.
"""

from __future__ import annotations

import uvicorn

from registry_services.api.app import create_order_app, create_user_app
from registry_services.settings import get_settings


def main() -> None:
    settings = get_settings()
    if settings.service == "orders":
        app = create_order_app(settings=settings)
    else:
        app = create_user_app(settings=settings)

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,  # structlog
    )


if __name__ == "__main__":
    main()


# --- Module Notes -----------------------------------------------------------
# Run one process per service; the order service reaches the user service at
# REGISTRY_USER_SERVICE_BASE_URL.
