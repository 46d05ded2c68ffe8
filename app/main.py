"""
app/main.py

FastAPI application entry point.

Responsibilities:
  - Create the FastAPI app with metadata from config
  - Install CORS and the /submit body size guard
  - Register the application and static page routers
  - Render every error, framework or application, as {"message": "..."}
  - Expose a /health endpoint for liveness probes
"""

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.application_controller import router as application_router
from app.api.middleware import BodySizeLimitMiddleware
from app.api.pages_controller import router as pages_router
from app.core.config import settings
from app.core.constants import CORS_ALLOWED_HEADERS, CORS_ALLOWED_METHODS, MSG_NOT_FOUND
from app.core.exceptions import AppBaseException, MethodNotAllowedError
from app.core.logger import get_logger

logger = get_logger(__name__)

# ── App instance ───────────────────────────────────────────────────────────────

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description=(
        "Accepts job applications with identity document uploads, stores "
        "them in MongoDB, and lists stored applications."
    ),
)

# ── Middleware ─────────────────────────────────────────────────────────────────
# Added last runs first: CORS wraps the size guard so 413s carry CORS headers.

app.add_middleware(
    BodySizeLimitMiddleware,
    max_bytes=settings.max_request_size,
    paths=["/submit"],
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_methods=CORS_ALLOWED_METHODS,
    allow_headers=CORS_ALLOWED_HEADERS,
)

# ── Routers ────────────────────────────────────────────────────────────────────

app.include_router(application_router)
app.include_router(pages_router)

# ── Exception handlers ─────────────────────────────────────────────────────────

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Router-generated errors (404, 405) in the shared envelope."""
    if exc.status_code == 405:
        error = MethodNotAllowedError(f"{request.method} {request.url.path}")
        logger.info("Rejected %s (%s).", error, error.kind_name)
        message = error.client_message
    elif exc.status_code == 404:
        message = MSG_NOT_FOUND
    else:
        message = str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": message},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(AppBaseException)
async def app_exception_handler(request: Request, exc: AppBaseException) -> JSONResponse:
    """
    Safety-net for any AppBaseException that escapes controller-level handling.
    Internal detail goes to the log; the client gets the kind's message.
    """
    if exc.status_code >= 500:
        logger.exception("Unhandled application error on %s: %s", request.url.path, exc)
    else:
        logger.warning("Request to %s rejected: %s", request.url.path, exc)
    return JSONResponse(status_code=exc.status_code, content={"message": exc.client_message})


# ── Health endpoint ────────────────────────────────────────────────────────────

@app.get("/health", tags=["Health"], summary="Liveness probe", response_class=PlainTextResponse)
async def health() -> str:
    """Returns 200 OK when the service is running."""
    return "OK"


if __name__ == "__main__":
    logger.info("Server running on http://%s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)
