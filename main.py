"""FastAPI application guarded by a request jail."""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI

from httpjail.config import Settings, get_settings
from httpjail.jail import Jail
from httpjail.logging_config import configure_logging
from httpjail.middleware import install_jail

settings = get_settings()
configure_logging(settings.log_level)
LOGGER = logging.getLogger(__name__)


def create_app(app_settings: Optional[Settings] = None, jail: Optional[Jail] = None) -> FastAPI:
    """Build the app; a ``jail`` passed in takes precedence over ``app_settings``."""

    app_settings = app_settings or get_settings()
    if jail is None:
        jail = Jail(app_settings.jail_config())

    app = FastAPI(title="HTTP Jail")
    install_jail(app, jail)
    app.state.jail = jail

    @app.get("/")
    async def index() -> dict:
        """Report that the request made it past the jail."""

        return {"status": "ok"}

    LOGGER.info(
        "jail installed: %s requests per %ss window, %ss cooloff",
        jail.config.allowed_requests,
        jail.config.window,
        jail.config.cooloff,
    )
    return app


app = create_app(settings)
