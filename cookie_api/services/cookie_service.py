"""Cookie transformation: download the avatar and run it through an image edit."""

from __future__ import annotations

import logging
import time

from cookie_api import config
from cookie_api.config import log_event, logger
from cookie_api.core import openai_images
from cookie_api.core.errors import ConfigError, InvalidInput
from cookie_api.core.http_client import is_http_url
from cookie_api.core.prompt_templates import build_cookie_prompt, resolve_style
from cookie_api.models import TransformRequest, TransformResult


async def transform(request: TransformRequest) -> TransformResult:
    """
    Turn the image behind ``request.image_url`` into a cookie rendering.

    Unknown styles fall back to the default style. No retries are attempted;
    a failed generation is reported to the caller, who may resubmit.
    """
    image_url = (request.image_url or "").strip()
    if not image_url:
        raise InvalidInput("Image URL is required", error="Image URL is required")
    if not is_http_url(image_url):
        raise InvalidInput(
            "Image URL must be an http(s) URL", error="Invalid image URL"
        )

    if not config.OPENAI_API_KEY:
        logger.error("OPENAI_API_KEY is not configured")
        raise ConfigError("OPENAI_API_KEY is not configured")

    preset = resolve_style(request.style)
    prompt = build_cookie_prompt(preset.key, image_size=config.OPENAI_IMAGE_SIZE)

    start_time = time.time()
    log_event(
        logging.INFO,
        "cookie_transform_started",
        username=request.username,
        style=preset.key,
        requested_style=request.style,
    )

    image_bytes = await openai_images.download_image(image_url)
    log_event(logging.DEBUG, "source_image_downloaded", size_bytes=len(image_bytes))

    cookie_image = await openai_images.generate_cookie_image(image_bytes, prompt)

    log_event(
        logging.INFO,
        "cookie_transform_completed",
        username=request.username,
        style=preset.key,
        inline=cookie_image.startswith("data:"),
        elapsed_seconds=round(time.time() - start_time, 2),
    )

    return TransformResult(
        success=True,
        original_image_url=image_url,
        cookie_image_url=cookie_image,
        username=request.username,
        style=preset.key,
    )


__all__ = ["transform"]
