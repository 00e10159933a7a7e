"""Utility helpers for the cookie router."""

from typing import Optional

from fastapi import Request
from fastapi.responses import JSONResponse

from cookie_api.core.errors import CookieAPIError


def get_client_ip(request: Request) -> Optional[str]:
    """Extract the requester IP from common proxy headers."""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()

    if request.client:
        return request.client.host

    return None


def error_response(exc: CookieAPIError) -> JSONResponse:
    """Convert a relay failure into its JSON error body."""
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())
