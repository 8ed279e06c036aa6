"""Client identity resolution."""
from __future__ import annotations

from fastapi import Request

FORWARDED_FOR_HEADER = "X-Forwarded-For"


def resolve_client_id(request: Request, proxied: bool = False) -> str:
    """Return the id used to track ``request``'s client.

    In proxied mode the ``X-Forwarded-For`` header is trusted verbatim, comma
    separated chains included. A missing header or peer yields ``""``.
    """

    if proxied:
        return request.headers.get(FORWARDED_FOR_HEADER, "")
    return request.client.host if request.client else ""
