from typing import Any

import httpx

from cookie_api import config
from cookie_api.config import logger
from cookie_api.core import http_client
from cookie_api.core.errors import (
    InvalidResponse,
    SourceFetchError,
    UpstreamError,
)

DATA_URI_PREFIX = "data:image/png;base64,"


async def download_image(url: str) -> bytes:
    """
    Download the source image as raw bytes.

    Args:
        url: Public http(s) URL of the image

    Returns:
        The image content

    Raises:
        SourceFetchError: On timeout, non-2xx response or network error
    """
    logger.info(f"Downloading source image from URL: {url}")
    try:
        async with http_client.create_client(
            timeout=config.SOURCE_FETCH_TIMEOUT_SECONDS
        ) as client:
            response = await client.get(url)
            response.raise_for_status()
            return response.content
    except httpx.HTTPStatusError as exc:
        raise SourceFetchError(
            f"Failed to fetch image from {url}: HTTP {exc.response.status_code}"
        ) from exc
    except httpx.RequestError as exc:
        raise SourceFetchError(f"Network error fetching {url}: {exc}") from exc


async def generate_cookie_image(image_bytes: bytes, prompt: str) -> str:
    """
    Submit an image edit to the OpenAI Images API. The caller checks that
    OPENAI_API_KEY is configured.

    Args:
        image_bytes: Source image content
        prompt: Style prompt text

    Returns:
        Hosted image URL, or a ``data:image/png;base64,...`` reference when the
        API answers with inline bytes

    Raises:
        UpstreamError: Non-2xx response or network failure
        InvalidResponse: The response carries no image
    """
    edits_url = f"{config.OPENAI_BASE_URL}/images/edits"
    files = {"image": ("profile.png", image_bytes, "image/png")}
    data = {
        "prompt": prompt,
        "model": config.OPENAI_IMAGE_MODEL,
        "n": "1",
        "size": config.OPENAI_IMAGE_SIZE,
    }

    logger.info(f"Generating cookie with OpenAI {config.OPENAI_IMAGE_MODEL}")
    try:
        async with http_client.create_client(
            timeout=config.GENERATION_TIMEOUT_SECONDS
        ) as client:
            response = await client.post(
                edits_url,
                data=data,
                files=files,
                headers={"Authorization": f"Bearer {config.OPENAI_API_KEY}"},
            )
            response.raise_for_status()
            api_result = response.json()
    except httpx.HTTPStatusError as exc:
        details = _error_body(exc.response)
        message = _error_message(details) or f"OpenAI API HTTP error: {exc.response.status_code}"
        logger.error(
            "OpenAI API error",
            extra={"status": exc.response.status_code, "error": message},
        )
        raise UpstreamError(
            message,
            error="Failed to transform image",
            status_code=exc.response.status_code,
            details=details,
        ) from exc
    except httpx.RequestError as exc:
        logger.error("Network error calling OpenAI", extra={"error": str(exc)})
        raise UpstreamError(
            f"Network error calling OpenAI: {exc}",
            error="Failed to transform image",
        ) from exc
    except ValueError as exc:
        raise InvalidResponse(
            "OpenAI returned a non-JSON response",
            error="Failed to transform image",
        ) from exc

    return extract_image_reference(api_result)


def extract_image_reference(api_result: Any) -> str:
    """Pick the generated image out of an Images API payload."""
    try:
        first = api_result["data"][0]
    except (KeyError, IndexError, TypeError) as exc:
        raise InvalidResponse(
            "OpenAI response contained no image data",
            error="Failed to transform image",
            details=api_result,
        ) from exc

    if isinstance(first, dict):
        if first.get("url"):
            return first["url"]
        if first.get("b64_json"):
            return f"{DATA_URI_PREFIX}{first['b64_json']}"

    raise InvalidResponse(
        "OpenAI response contained neither url nor b64_json",
        error="Failed to transform image",
    )


def _error_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text or None


def _error_message(details: Any) -> str:
    if isinstance(details, dict):
        error = details.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
    return ""


__all__ = ["download_image", "generate_cookie_image", "extract_image_reference"]
