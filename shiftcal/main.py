# shiftcal/main.py
"""
FastAPI application entry point.
"""

import os
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shiftcal.core.logging_config import get_logger, setup_logging
from shiftcal.core.request_logging import RequestLoggingMiddleware
from shiftcal.core.schedule import CalendarConfigError, InvalidDateError, InvalidTeamError, get_shift_calendar
from shiftcal.core.sentry_config import capture_exception, init_sentry
from shiftcal.core.storage import StorageError, validate_required_data_files
from shiftcal.routes.schedule import router as schedule_router

# Setup logging FIRST (before any other imports that might log)
setup_logging()
logger = get_logger(__name__)

sentry_enabled = init_sentry()

VERSION = "0.1.0"
IS_PRODUCTION = os.getenv("PRODUCTION", "false").lower() == "true"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info(
        "Application starting up",
        extra={
            "extra_fields": {
                "production": IS_PRODUCTION,
                "python_version": sys.version,
                "sentry": sentry_enabled,
            }
        },
    )

    # Fail fast on broken configuration instead of on the first request
    try:
        validate_required_data_files()
        get_shift_calendar()
    except (StorageError, CalendarConfigError, InvalidDateError) as e:
        logger.error(f"Configuration check failed: {e}", exc_info=True)
        capture_exception(e, {"startup": {"stage": "configuration"}})
        raise

    yield

    logger.info("Application shutting down")


app = FastAPI(
    title="Shift Calendar",
    description="Three-team weekly shift rotation: week numbers, team shifts, attendance auto-fill",
    version=VERSION,
    lifespan=lifespan,
)

CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "").split(",") if origin.strip()]

if IS_PRODUCTION:
    if not CORS_ORIGINS:
        logger.warning(
            "Production mode but no CORS_ORIGINS set. CORS will block all cross-origin requests. "
            "Set CORS_ORIGINS environment variable if you need to allow specific origins."
        )
    allowed_origins = CORS_ORIGINS
    allowed_methods = ["GET"]
    logger.info(f"CORS configured for production with origins: {allowed_origins}")
else:
    allowed_origins = ["*"]
    allowed_methods = ["*"]
    logger.info("CORS configured for development (permissive)")

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=False,
    allow_methods=allowed_methods,
    allow_headers=["*"],
    expose_headers=["X-Request-ID"],
)

app.add_middleware(RequestLoggingMiddleware)

app.include_router(schedule_router)


@app.exception_handler(InvalidDateError)
async def invalid_date_handler(request: Request, exc: InvalidDateError):
    logger.info(f"Rejected date on {request.url.path}: {exc}")
    return JSONResponse(status_code=400, content={"detail": "Invalid date", "error": str(exc)})


@app.exception_handler(InvalidTeamError)
async def invalid_team_handler(request: Request, exc: InvalidTeamError):
    return JSONResponse(status_code=404, content={"detail": "Team not found", "error": str(exc)})


@app.get("/health", tags=["health"])
async def health_check():
    """
    Health check endpoint for monitoring.

    Returns 200 when the shift calendar configuration is loaded, 503 otherwise.
    """
    try:
        calendar = get_shift_calendar()
    except (StorageError, CalendarConfigError, InvalidDateError) as e:
        logger.error(f"Health check failed - configuration error: {e}", exc_info=True)
        return JSONResponse(
            status_code=503,
            content={
                "status": "unhealthy",
                "service": "shiftcal",
                "error": "Configuration could not be loaded",
            },
        )

    return {
        "status": "healthy",
        "service": "shiftcal",
        "version": VERSION,
        "epoch_anchor": calendar.anchor.isoformat(),
        "timezone": str(calendar.timezone),
    }
