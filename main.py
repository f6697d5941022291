"""
User Directory Service API - Main Application Entry Point
"""

import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.core.logger import setup_logging
from app.api.core.middleware import request_context_middleware
from app.api.v1.routes import users
from app.api.v1.schemas.response import HealthResponseModel
from app.api.db.collection import init_collection
from app.api.utils.exceptions import UserDirectoryException
from app.api.utils.handlers import (
    user_directory_exception_handler,
    unhandled_exception_handler,
)
from config import settings

setup_logging()
logger = logging.getLogger("app")

STARTED_AT = time.monotonic()


def format_uptime(seconds: float) -> str:
    """
    Format an uptime in seconds as e.g. ``"1d 2h 3m 4s"``.

    Zero-valued day, hour and minute parts are left out; seconds are always shown.
    """
    total = int(seconds)
    days, rest = divmod(total, 86400)
    hours, rest = divmod(rest, 3600)
    minutes, secs = divmod(rest, 60)

    parts = []
    if days > 0:
        parts.append(f"{days}d")
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}m")
    parts.append(f"{secs}s")
    return " ".join(parts)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan - startup and shutdown events.

    Args:
        app (FastAPI): FastAPI application instance

    Yields:
        None
    """
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    try:
        init_collection(app)
        logger.info("User collection loaded")
    except Exception as e:
        logger.error(f"User collection loading failed: {str(e)}", exc_info=True)
        raise

    yield

    logger.info(f"Shutting down {settings.APP_NAME}")


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Paginated, sortable user directory API",
    debug=settings.DEBUG,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.FRONTEND_URL, settings.DEV_URL, settings.APP_URL],
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID"],
)
app.middleware("http")(request_context_middleware)

app.add_exception_handler(UserDirectoryException, user_directory_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)


@app.get("/health", tags=["Health"], response_model=HealthResponseModel)
async def health_check():
    """
    Health check endpoint for service monitoring.

    Returns:
        dict: Service status, version and uptime information
    """
    uptime_seconds = time.monotonic() - STARTED_AT
    return {
        "status": "healthy",
        "app_name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "uptime": {
            "seconds": int(uptime_seconds),
            "formatted": format_uptime(uptime_seconds),
        },
    }


@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint providing API information.

    Returns:
        dict: API name and documentation links
    """
    return {
        "message": f"Welcome to {settings.APP_NAME}",
        "version": settings.APP_VERSION,
        "docs": "/docs",
        "redoc": "/redoc",
    }

app.include_router(users.router, prefix=settings.API_V1_PREFIX)
# Unversioned mount kept for older clients
app.include_router(users.router, prefix=settings.API_LEGACY_PREFIX, include_in_schema=False)

if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting server on 0.0.0.0:{settings.APP_PORT}")
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=settings.APP_PORT,
        reload=settings.DEBUG,
        log_config=None,
    )
