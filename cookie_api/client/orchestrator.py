"""
Client-side orchestration of a cookie bake.

Sequences the profile relay and the cookie relay, pushes each step to a view
and keeps the finished result for the download and share actions.
"""

from __future__ import annotations

import re
import webbrowser
from contextlib import asynccontextmanager
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, AsyncIterator, Dict, Optional

import httpx

from cookie_api.config import logger
from cookie_api.core.score_tiers import ScoreTier, lookup_tier, score_progress

from .sharing import (
    Navigator,
    ShareCapability,
    WindowOpener,
    decode_data_uri,
    share_cookie,
)

REQUEST_TIMEOUT_SECONDS = 240.0
BUSY_MESSAGE = "a cookie is already baking, please wait"


class OrchestratorState(str, Enum):
    IDLE = "idle"
    RESOLVING = "resolving"
    TRANSFORMING = "transforming"
    DONE = "done"
    FAILED = "failed"


@dataclass(slots=True)
class BakeResult:
    """Everything shown for one finished bake."""

    username: str
    style: str
    original_image: str
    cookie_image: str
    score: Optional[float] = None
    tier: Optional[ScoreTier] = None
    progress: Optional[float] = None


class CookieView:
    """Rendering hooks; the base class renders nothing."""

    def reset(self) -> None:
        pass

    def show_loading(self, loading: bool) -> None:
        pass

    def show_original(self, image_url: str) -> None:
        pass

    def show_cookie(self, image_reference: str) -> None:
        pass

    def show_score(self, tier: ScoreTier, progress: float) -> None:
        pass

    def show_error(self, message: str) -> None:
        pass


class BakeFailed(Exception):
    """A step of the bake failed; ``message`` is shown to the user as is."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


def normalize_username(raw: Optional[str]) -> str:
    username = (raw or "").strip()
    if username.startswith("@"):
        username = username[1:].strip()
    return username


def _navigate(url: str) -> None:
    webbrowser.open(url, new=0)


def _filename_stem(username: Optional[str]) -> str:
    """Keep only handle characters so the name cannot leave the target directory."""
    return re.sub(r"[^A-Za-z0-9_-]", "_", username or "").strip("_") or "cookie"


class CookieOrchestrator:
    """Runs one bake at a time against the relay API."""

    def __init__(
        self,
        api_url: str = "",
        view: Optional[CookieView] = None,
        client: Optional[httpx.AsyncClient] = None,
        share_capability: Optional[ShareCapability] = None,
        open_window: WindowOpener = webbrowser.open_new,
        navigate: Navigator = _navigate,
    ) -> None:
        self.api_url = api_url.rstrip("/")
        self.view = view or CookieView()
        self.share_capability = share_capability
        self.open_window = open_window
        self.navigate = navigate
        self._client = client
        self.state = OrchestratorState.IDLE
        self.result: Optional[BakeResult] = None
        self.last_error: Optional[str] = None

    @property
    def busy(self) -> bool:
        return self.state in (OrchestratorState.RESOLVING, OrchestratorState.TRANSFORMING)

    async def bake(self, username: Optional[str], style: Optional[str]) -> Optional[BakeResult]:
        """
        Resolve ``username`` and bake its avatar into a cookie.

        Returns the result, or None when the submit was rejected or a step
        failed; the reason is left in ``last_error`` and shown on the view.
        """
        if self.busy:
            logger.warning("Bake submitted while another one is in flight")
            self.view.show_error(BUSY_MESSAGE)
            return None

        username = normalize_username(username)
        if not username:
            return self._reject("please enter a username")
        if not style:
            return self._reject("please select a cookie style")

        self.view.reset()
        self.result = None
        self.last_error = None
        self.view.show_loading(True)

        try:
            self.state = OrchestratorState.RESOLVING
            logger.info(f"Fetching profile for @{username}")
            profile = await self._call(
                "GET",
                "/api/fetch-profile",
                default_error="Failed to fetch profile",
                params={"username": username},
            )
            avatar_url = profile.get("avatar")
            if not avatar_url:
                raise BakeFailed("Profile response contained no avatar")
            self.view.show_original(avatar_url)

            self.state = OrchestratorState.TRANSFORMING
            logger.info(f"Transforming to cookie (style: {style})")
            transformed = await self._call(
                "POST",
                "/api/transform-to-cookie",
                default_error="Failed to transform image",
                json={"imageUrl": avatar_url, "username": username, "cookieStyle": style},
            )
            cookie_image = transformed.get("cookieImage")
            if not cookie_image:
                raise BakeFailed("Transform response contained no cookie image")

            result = BakeResult(
                username=username,
                style=transformed.get("cookieStyle") or style,
                original_image=avatar_url,
                cookie_image=cookie_image,
            )
            score = profile.get("score")
            if isinstance(score, (int, float)) and not isinstance(score, bool):
                result.score = float(score)
                result.tier = lookup_tier(result.score)
                result.progress = score_progress(result.score)

            self.result = result
            self.view.show_cookie(cookie_image)
            if result.tier is not None:
                self.view.show_score(result.tier, result.progress)

            self.state = OrchestratorState.DONE
            logger.info(f"Cookie created for @{username}")
            return result

        except BakeFailed as exc:
            logger.error(f"Bake failed for @{username}: {exc.message}")
            self.state = OrchestratorState.FAILED
            self.last_error = exc.message
            self.view.show_error(exc.message)
            return None

        finally:
            self.view.show_loading(False)

    def download(self, directory: str = ".", result: Optional[BakeResult] = None) -> Optional[str]:
        """
        Save or open the current cookie image.

        Inline images are written to ``<username>-christmas-cookie.png`` and the
        path is returned; hosted images are opened in the browser and their URL
        is returned. Without a result nothing happens.
        """
        result = result or self.result
        if result is None:
            return None

        if result.cookie_image.startswith("data:"):
            filename = f"{_filename_stem(result.username)}-christmas-cookie.png"
            path = Path(directory) / filename
            path.write_bytes(decode_data_uri(result.cookie_image))
            logger.info(f"Saved cookie image to {path}")
            return str(path)

        self.open_window(result.cookie_image)
        return result.cookie_image

    async def share(self, result: Optional[BakeResult] = None) -> Optional[str]:
        """Share the current cookie; returns the channel used, or None."""
        result = result or self.result
        if result is None:
            logger.error("No cookie available to share")
            self.view.show_error("no cookie to share")
            return None

        try:
            async with self._session() as client:
                return await share_cookie(
                    result.cookie_image,
                    client=client,
                    open_window=self.open_window,
                    navigate=self.navigate,
                    share_capability=self.share_capability,
                )
        except Exception as exc:
            logger.error(f"Error sharing cookie: {exc}")
            self.view.show_error(f"failed to open share window: {exc}")
            return None

    def _reject(self, message: str) -> None:
        self.state = OrchestratorState.IDLE
        self.last_error = message
        self.view.show_error(message)
        return None

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._client is not None:
            yield self._client
            return
        async with httpx.AsyncClient(timeout=REQUEST_TIMEOUT_SECONDS) as client:
            yield client

    async def _call(
        self, method: str, path: str, default_error: str, **kwargs: Any
    ) -> Dict[str, Any]:
        url = f"{self.api_url}{path}"
        try:
            async with self._session() as client:
                response = await client.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            raise BakeFailed(
                f"Network error: {exc}. Check if API endpoints are deployed correctly."
            ) from exc

        is_json = "application/json" in response.headers.get("content-type", "")

        if not response.is_success:
            if is_json:
                body = self._json(response)
                raise BakeFailed(
                    (body.get("message") or body.get("error") or default_error)
                    if isinstance(body, dict)
                    else default_error
                )
            raise BakeFailed(
                f"API endpoint not found ({response.status_code}). Please check deployment."
            )

        if not is_json:
            raise BakeFailed("API returned non-JSON response. Please check deployment.")

        body = self._json(response)
        if not isinstance(body, dict):
            raise BakeFailed("API returned an unexpected response. Please check deployment.")
        return body

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise BakeFailed("API returned invalid JSON. Please check deployment.") from exc


__all__ = [
    "BakeResult",
    "BakeFailed",
    "CookieOrchestrator",
    "CookieView",
    "OrchestratorState",
    "normalize_username",
]
