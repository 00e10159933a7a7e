"""
Error taxonomy shared by the profile and cookie relays.
Each error knows the HTTP status and short tag it is reported with.
"""

from typing import Any, Dict, Optional

__all__ = [
    "CookieAPIError",
    "InvalidInput",
    "NotFound",
    "NoAvatar",
    "UpstreamAuthError",
    "ConfigError",
    "UpstreamError",
    "InvalidResponse",
    "SourceFetchError",
]


class CookieAPIError(Exception):
    """Base class for failures that are reported to API callers."""

    status_code: int = 500
    error: str = "Internal server error"

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        error: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Any = None,
    ) -> None:
        if error is not None:
            self.error = error
        if status_code is not None:
            self.status_code = status_code
        self.message = message or self.error
        self.details = details
        super().__init__(self.message)

    def to_payload(self) -> Dict[str, Any]:
        """Render the JSON error body returned by the relays."""
        payload: Dict[str, Any] = {"error": self.error, "message": self.message}
        if self.details is not None:
            payload["details"] = self.details
        return payload


class InvalidInput(CookieAPIError):
    status_code = 400
    error = "Invalid request"


class NotFound(CookieAPIError):
    status_code = 404
    error = "User not found"


class NoAvatar(CookieAPIError):
    status_code = 404
    error = "Could not find profile picture for this user"


class UpstreamAuthError(CookieAPIError):
    status_code = 500
    error = "API authentication failed"


class ConfigError(CookieAPIError):
    status_code = 500
    error = "Server configuration error"


class UpstreamError(CookieAPIError):
    status_code = 500
    error = "Upstream request failed"


class InvalidResponse(CookieAPIError):
    status_code = 500
    error = "Invalid response from upstream"


class SourceFetchError(CookieAPIError):
    status_code = 500
    error = "Failed to download source image"
