"""
mediahub — storage server entry point.

Accepts uploads, hands them to the configured provider and serves the local
upload root as static files so the returned URLs resolve.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from mediahub.api import health, uploads
from mediahub.config import settings
from mediahub.storage.factory import get_upload_provider

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

provider = get_upload_provider()

app = FastAPI(
    title="mediahub",
    description="Media upload and storage service",
    version="1.0.0",
    debug=settings.DEBUG,
)

# ---------------------------------------------------------------------------
# CORS
# ---------------------------------------------------------------------------
_cors_origins = [o for o in settings.CORS_ORIGINS if o != "*"]
_cors_regex = ".*" if len(_cors_origins) < len(settings.CORS_ORIGINS) else None

app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins,
    allow_origin_regex=_cors_regex,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
app.include_router(health.router)
app.include_router(uploads.router, prefix="/api")

# Public URLs point straight at these static files
if provider.name == "local":
    app.mount(f"/{provider.upload_dir}", StaticFiles(directory=provider.root), name="uploads")

# ---------------------------------------------------------------------------
# Custom exception handlers
# ---------------------------------------------------------------------------


@app.exception_handler(ValueError)
async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": str(exc)})


def run() -> None:
    """Serve the app on ``STORAGE_PORT``."""
    import uvicorn

    uvicorn.run("mediahub.main:app", host="0.0.0.0", port=settings.STORAGE_PORT, log_level=settings.LOG_LEVEL.lower())
