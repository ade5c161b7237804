"""
FastAPI application for Strava authentication.

This module wires dependencies and configures the application.
Authentication logic is in strava_credentials/core, endpoints in
strava_credentials/oauth.
"""

import logging
import os
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from typing import Annotated

from dotenv import load_dotenv

# Configure logging FIRST, before other local imports
from strava_credentials.logging_config import setup_global_logging

load_dotenv()
setup_global_logging()

# Now import other modules (they will use the configured logging)
from fastapi import Depends, FastAPI  # noqa: E402

from strava_credentials.oauth import router as strava_router  # noqa: E402
from strava_credentials.oauth.config import (  # noqa: E402
    StravaConfig,
    get_strava_config,
)

logger = logging.getLogger(__name__)


# ============================================================================
# Application Lifecycle
# ============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Reports missing Strava configuration at startup without refusing to
    start, so health checks keep working.
    """
    logger.info("Application starting up...")
    try:
        get_strava_config().validate()
    except ValueError as e:
        logger.warning(f"Strava configuration incomplete: {e}")
    yield
    logger.info("Shutting down application...")


app = FastAPI(
    title="Strava Credentials",
    description="Authenticates users with Strava OAuth2",
    version="1.0.0",
    lifespan=lifespan,
)


# ============================================================================
# Health Check Endpoints
# ============================================================================


@app.get("/")
async def root():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "strava-credentials",
        "timestamp": datetime.now(UTC).isoformat(),
    }


@app.get("/health")
async def health(config: Annotated[StravaConfig, Depends(get_strava_config)]):
    """Health check endpoint for Cloud Run."""
    return {
        "status": "healthy",
        "strava_configured": config.is_configured(),
    }


# ============================================================================
# Include Routers
# ============================================================================

app.include_router(strava_router.router)


# ============================================================================
# Main Entry Point
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    port = int(os.getenv("PORT", 8080))
    uvicorn.run(app, host="0.0.0.0", port=port)
