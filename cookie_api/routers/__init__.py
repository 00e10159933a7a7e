"""Router package exposing all API routers."""

from fastapi import APIRouter

from .cookie.router import router as cookie_router

router = APIRouter()
router.include_router(cookie_router)

__all__ = ["router", "cookie_router"]
