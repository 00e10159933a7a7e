from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from cookie_api.config import logger

from .routers import router

# Initialize FastAPI application
app = FastAPI(
    title="Cookie Transformer API",
    description="Turns social profile pictures into decorated holiday cookies",
    version="1.0.0",
)

app.include_router(router)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies with the relays' error shape."""
    logger.warning(
        "Request validation failed",
        extra={"path": request.url.path, "errors": exc.errors()},
    )
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request", "message": "Request body is malformed"},
    )


# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)


logger.info("Cookie Transformer API initialized successfully")
