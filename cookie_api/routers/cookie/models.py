"""Pydantic models used by the cookie router."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class TransformRequestBody(BaseModel):
    """Request payload for the cookie transformation."""

    model_config = ConfigDict(populate_by_name=True)

    image_url: Optional[str] = Field(None, alias="imageUrl")
    username: Optional[str] = None
    cookie_style: Optional[str] = Field(None, alias="cookieStyle")


class ProfileResponse(BaseModel):
    """Response payload for a resolved profile."""

    model_config = ConfigDict(populate_by_name=True)

    username: str
    avatar: str = Field(..., description="High-resolution avatar URL")
    name: Optional[str] = None
    score: Optional[float] = Field(None, description="Account score, when available")
    account_data: Dict[str, Any] = Field(default_factory=dict, alias="accountData")


class TransformResponse(BaseModel):
    """Response payload for a finished cookie transformation."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool
    original_image: str = Field(..., alias="originalImage")
    cookie_image: str = Field(
        ..., alias="cookieImage", description="Hosted URL or data:image/png;base64 reference"
    )
    username: Optional[str] = None
    cookie_style: str = Field(..., alias="cookieStyle")


class ErrorResponse(BaseModel):
    """Generic error payload."""

    error: str
    message: str
    details: Optional[Any] = None


class CookieStyle(BaseModel):
    key: str
    label: str


class CookieStylesResponse(BaseModel):
    default: str
    styles: List[CookieStyle] = Field(default_factory=list)


class HealthResponse(BaseModel):
    status: str
    message: str
