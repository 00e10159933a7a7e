"""Share helpers for a finished cookie: native share, composer window, navigation."""

from __future__ import annotations

import base64
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional
from urllib.parse import quote

import httpx

from cookie_api.config import logger

SHARE_TITLE = "merry bootymas"
SHARE_TEXT = "merry bootymas\n\nget your cookie and year end booty score by @Tuteth_"
COMPOSER_URL = "https://twitter.com/intent/tweet"


@dataclass(slots=True)
class ShareData:
    title: str
    text: str
    image_bytes: bytes
    filename: str = "cookie.png"
    content_type: str = "image/png"


# Returns False when the platform refuses the payload.
ShareCapability = Callable[[ShareData], Awaitable[bool]]
# Returns False when the window could not be opened (popup blocked).
WindowOpener = Callable[[str], bool]
Navigator = Callable[[str], None]


def build_composer_url(text: str = SHARE_TEXT) -> str:
    return f"{COMPOSER_URL}?text={quote(text, safe='')}"


def decode_data_uri(reference: str) -> bytes:
    """Return the bytes embedded in a ``data:...;base64,`` reference."""
    try:
        header, encoded = reference.split(",", 1)
    except ValueError as exc:
        raise ValueError("Invalid data URI provided for image") from exc
    if not header.startswith("data:") or not header.endswith(";base64"):
        raise ValueError("Only base64 data URIs are supported")
    return base64.b64decode(encoded)


async def load_image_bytes(reference: str, client: httpx.AsyncClient) -> bytes:
    if reference.startswith("data:"):
        return decode_data_uri(reference)
    response = await client.get(reference)
    response.raise_for_status()
    return response.content


async def share_cookie(
    image_reference: str,
    *,
    client: httpx.AsyncClient,
    open_window: WindowOpener,
    navigate: Navigator,
    share_capability: Optional[ShareCapability] = None,
    text: str = SHARE_TEXT,
) -> str:
    """
    Share a cookie image, falling back from native share to a composer window
    to plain navigation.

    Returns:
        The channel used: "native", "composer" or "navigate"
    """
    if share_capability is not None:
        try:
            image_bytes = await load_image_bytes(image_reference, client)
            shared = await share_capability(
                ShareData(title=SHARE_TITLE, text=text, image_bytes=image_bytes)
            )
            if shared:
                logger.info("Shared cookie via native share")
                return "native"
        except Exception as exc:
            logger.warning(f"Native share failed, falling back to composer: {exc}")

    # Text only, the composer cannot take an attachment
    share_url = build_composer_url(text)
    logger.info(f"Opening share URL: {share_url}")
    if open_window(share_url):
        return "composer"

    logger.warning("Share window blocked, navigating to composer instead")
    navigate(share_url)
    return "navigate"


__all__ = [
    "SHARE_TITLE",
    "SHARE_TEXT",
    "ShareData",
    "build_composer_url",
    "decode_data_uri",
    "load_image_bytes",
    "share_cookie",
]
