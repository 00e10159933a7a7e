from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(slots=True)
class ProfileResult:
    username: str
    avatar_url: str
    display_name: Optional[str]
    score: Optional[float] = None
    account_data: Dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class TransformRequest:
    image_url: Optional[str]
    username: Optional[str] = None
    style: Optional[str] = None


@dataclass(slots=True)
class TransformResult:
    success: bool
    original_image_url: str
    cookie_image_url: str
    username: Optional[str]
    style: str
