"""FastAPI glue that puts a jail in front of every request."""
from __future__ import annotations

import logging
import math

from fastapi import FastAPI, Request, Response
from fastapi.responses import PlainTextResponse

from .identity import resolve_client_id
from .jail import Jail

LOGGER = logging.getLogger(__name__)

DENIAL_MESSAGE = "You are doing that too much. Please slow down and try again later."
DENIAL_STATUS_CODE = 429


def install_jail(app: FastAPI, jail: Jail) -> None:
    """Register an HTTP middleware on ``app`` that consults ``jail``."""

    @app.middleware("http")
    async def apply_jail(request: Request, call_next):  # type: ignore[override]
        client_id = resolve_client_id(request, jail.config.proxied)
        decision = jail.decide(client_id)
        if not decision.admitted:
            if decision.silent:
                # empty default response, nothing hints at throttling
                return Response()
            retry_after = max(1, math.ceil(jail.retry_after(client_id)))
            return PlainTextResponse(
                DENIAL_MESSAGE,
                status_code=DENIAL_STATUS_CODE,
                headers={"Retry-After": str(retry_after)},
            )
        try:
            response = await call_next(request)
        except Exception as exc:  # noqa: BLE001
            LOGGER.exception("Unhandled exception", extra={"client_id": client_id})
            raise exc
        return response
