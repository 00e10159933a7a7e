"""Profile resolution: username -> high-resolution avatar, name and score."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from cookie_api.config import log_event
from cookie_api.core import tweetscout
from cookie_api.core.errors import CookieAPIError, InvalidInput, NoAvatar
from cookie_api.core.http_client import is_http_url
from cookie_api.models import ProfileResult

AVATAR_FIELDS = ("avatar", "profile_image_url", "avatar_url")
LOW_RES_MARKER = "_normal"
HIGH_RES_MARKER = "_400x400"


def upscale_avatar_url(url: str) -> str:
    """Swap the low-res marker for the high-res one; URLs without it pass through."""
    return url.replace(LOW_RES_MARKER, HIGH_RES_MARKER, 1)


def extract_avatar_url(account_data: Dict[str, Any]) -> Optional[str]:
    for key in AVATAR_FIELDS:
        value = account_data.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


async def resolve_profile(username: Optional[str]) -> ProfileResult:
    """
    Resolve a username into its avatar, display name and optional score.

    Raises:
        InvalidInput: Blank username
        NoAvatar: The account has no usable avatar URL
        CookieAPIError: Any failure of the account lookup itself
    """
    username = (username or "").strip()
    if not username:
        raise InvalidInput("Username is required", error="Username is required")

    account_data = await tweetscout.fetch_account_info(username)

    avatar_url = extract_avatar_url(account_data)
    if not avatar_url or not is_http_url(avatar_url):
        log_event(logging.WARNING, "avatar_missing", username=username, avatar=avatar_url)
        raise NoAvatar()

    avatar_url = upscale_avatar_url(avatar_url)
    score = await _lookup_score(username, account_data)

    log_event(
        logging.INFO,
        "profile_resolved",
        username=username,
        name=account_data.get("name"),
        screen_name=account_data.get("screen_name"),
        has_score=score is not None,
    )

    return ProfileResult(
        username=username,
        avatar_url=avatar_url,
        display_name=account_data.get("name"),
        score=score,
        account_data=account_data,
    )


async def _lookup_score(username: str, account_data: Dict[str, Any]) -> Optional[float]:
    """Best-effort score lookup; failures are logged and reported as no score."""
    user_id = account_data.get("id")
    if user_id in (None, ""):
        log_event(logging.DEBUG, "score_skipped_no_id", username=username)
        return None

    try:
        return await tweetscout.fetch_account_score(str(user_id))
    except CookieAPIError as exc:
        log_event(
            logging.WARNING,
            "score_lookup_failed",
            username=username,
            user_id=user_id,
            error=exc.message,
        )
        return None


__all__ = ["resolve_profile", "upscale_avatar_url", "extract_avatar_url"]
