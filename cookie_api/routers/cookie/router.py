"""FastAPI router for the profile and cookie relay endpoints."""

from typing import Optional, Union

from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse

from cookie_api.config import logger
from cookie_api.core.errors import CookieAPIError, UpstreamError
from cookie_api.core.prompt_templates import DEFAULT_STYLE, list_styles
from cookie_api.models import TransformRequest
from cookie_api.services.cookie_service import transform
from cookie_api.services.profile_service import resolve_profile

from .models import (
    CookieStyle,
    CookieStylesResponse,
    ErrorResponse,
    HealthResponse,
    ProfileResponse,
    TransformRequestBody,
    TransformResponse,
)
from .utils import error_response, get_client_ip

router = APIRouter(prefix="/api", tags=["Cookie Transformer"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Simple health check endpoint."""

    return HealthResponse(status="ok", message="Cookie transformer API is running!")


@router.get("/cookie-styles", response_model=CookieStylesResponse)
async def get_cookie_styles() -> CookieStylesResponse:
    """List the selectable cookie styles and the default one."""

    return CookieStylesResponse(
        default=DEFAULT_STYLE,
        styles=[CookieStyle(**style) for style in list_styles()],
    )


@router.get(
    "/fetch-profile",
    response_model=ProfileResponse,
    responses=ERROR_RESPONSES,
)
async def fetch_profile(
    request: Request,
    username: Optional[str] = Query(default=None),
) -> Union[ProfileResponse, JSONResponse]:
    """Resolve a username into its high-resolution avatar and score."""

    logger.info(
        "Profile request received",
        extra={"username": username, "client_ip": get_client_ip(request)},
    )

    try:
        profile = await resolve_profile(username)
    except CookieAPIError as exc:
        logger.warning(
            "Profile request failed",
            extra={"username": username, "status": exc.status_code, "error": exc.message},
        )
        return error_response(exc)
    except Exception as exc:
        logger.error("Unexpected error fetching profile", exc_info=True)
        return error_response(UpstreamError(str(exc), error="Failed to fetch profile"))

    return ProfileResponse(
        username=profile.username,
        avatar=profile.avatar_url,
        name=profile.display_name,
        score=profile.score,
        account_data=profile.account_data,
    )


@router.post(
    "/transform-to-cookie",
    response_model=TransformResponse,
    responses=ERROR_RESPONSES,
)
async def transform_to_cookie(
    payload: TransformRequestBody,
    request: Request,
) -> Union[TransformResponse, JSONResponse]:
    """Turn the given image into a cookie rendering in the requested style."""

    logger.info(
        "Cookie transform request received",
        extra={
            "username": payload.username,
            "cookie_style": payload.cookie_style,
            "client_ip": get_client_ip(request),
        },
    )

    try:
        result = await transform(
            TransformRequest(
                image_url=payload.image_url,
                username=payload.username,
                style=payload.cookie_style,
            )
        )
    except CookieAPIError as exc:
        logger.warning(
            "Cookie transform failed",
            extra={"username": payload.username, "status": exc.status_code, "error": exc.message},
        )
        return error_response(exc)
    except Exception as exc:
        logger.error("Unexpected error transforming image", exc_info=True)
        return error_response(UpstreamError(str(exc), error="Failed to transform image"))

    return TransformResponse(
        success=result.success,
        original_image=result.original_image_url,
        cookie_image=result.cookie_image_url,
        username=result.username,
        cookie_style=result.style,
    )
