"""
TweetScout API client.
Looks up account info (avatar, name, id) and the account score.
"""

import math
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from cookie_api import config
from cookie_api.config import logger
from cookie_api.core import http_client
from cookie_api.core.errors import (
    ConfigError,
    InvalidResponse,
    NotFound,
    UpstreamAuthError,
    UpstreamError,
)


def _headers() -> Dict[str, str]:
    """
    Build the auth headers for TweetScout requests.

    Raises:
        ConfigError: If TWEETSCOUT_API_KEY is not configured
    """
    if not config.TWEETSCOUT_API_KEY:
        logger.error("TWEETSCOUT_API_KEY is not configured")
        raise ConfigError("TWEETSCOUT_API_KEY is not configured")
    return {"apikey": config.TWEETSCOUT_API_KEY}


async def _get_json(path: str) -> Any:
    url = f"{config.TWEETSCOUT_BASE_URL}{path}"
    headers = _headers()

    try:
        async with http_client.create_client(
            timeout=config.PROFILE_TIMEOUT_SECONDS
        ) as client:
            response = await client.get(url, headers=headers)
            response.raise_for_status()
            return response.json()
    except httpx.HTTPStatusError as exc:
        status = exc.response.status_code
        logger.error(
            "TweetScout API error",
            extra={"path": path, "status": status, "body": exc.response.text[:500]},
        )
        if status == 404:
            raise NotFound() from exc
        if status in (401, 403):
            raise UpstreamAuthError() from exc
        raise UpstreamError(
            f"TweetScout API HTTP error: {status}",
            error="Failed to fetch profile",
        ) from exc
    except httpx.RequestError as exc:
        logger.error("Network error calling TweetScout", extra={"error": str(exc)})
        raise UpstreamError(
            f"Network error calling TweetScout: {exc}",
            error="Failed to fetch profile",
        ) from exc
    except ValueError as exc:
        raise InvalidResponse(
            "TweetScout returned a non-JSON response",
            error="Failed to fetch profile",
        ) from exc


async def fetch_account_info(username: str) -> Dict[str, Any]:
    """
    Fetch the public account info for a username.

    Args:
        username: Account handle without the leading @

    Returns:
        Raw account payload (avatar, name, screen_name, id, ...)

    Raises:
        NotFound: Unknown account
        UpstreamAuthError: TweetScout rejected the API key
        UpstreamError: Any other HTTP or network failure
    """
    logger.info(f"Fetching TweetScout profile for @{username}")
    data = await _get_json(f"/info/{quote(username, safe='')}")
    if not isinstance(data, dict):
        raise InvalidResponse(
            "TweetScout account payload is not an object",
            error="Failed to fetch profile",
        )
    return data


async def fetch_account_score(user_id: str) -> Optional[float]:
    """Fetch the account score by account id; None when the payload has none."""
    logger.info(f"Fetching TweetScout score for account id {user_id}")
    data = await _get_json(f"/score-id/{quote(str(user_id), safe='')}")
    if not isinstance(data, dict):
        raise InvalidResponse("TweetScout score payload is not an object")

    score = data.get("score")
    if score is None:
        return None
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        raise InvalidResponse(f"TweetScout score is not numeric: {score!r}")
    try:
        value = float(score)
    except (OverflowError, ValueError) as exc:
        raise InvalidResponse("TweetScout score is out of range") from exc
    if not math.isfinite(value):
        raise InvalidResponse(f"TweetScout score is not finite: {value!r}")
    return value


__all__ = ["fetch_account_info", "fetch_account_score"]
