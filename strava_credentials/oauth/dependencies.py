"""
FastAPI dependencies for Strava OAuth endpoints.

Provides dependency injection for the authenticator and the profile cache.
"""

import logging
from typing import Annotated

from fastapi import Depends, HTTPException, status

from strava_credentials.core.authenticator import StravaAuthenticator
from strava_credentials.infrastructure.profile_cache import (
    InMemoryProfileCache,
    get_profile_cache,
)
from strava_credentials.oauth.config import StravaConfig, get_strava_config


logger = logging.getLogger(__name__)


def get_authenticator(
    config: Annotated[StravaConfig, Depends(get_strava_config)],
) -> StravaAuthenticator:
    """
    Provide a Strava authenticator built from configuration.

    Raises:
        HTTPException: 503 if Strava credentials are not configured
    """
    if not config.is_configured():
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Strava OAuth is not configured",
        )
    return StravaAuthenticator.from_config(config)


# Type aliases for cleaner dependency injection
Authenticator = Annotated[StravaAuthenticator, Depends(get_authenticator)]
Cache = Annotated[InMemoryProfileCache, Depends(get_profile_cache)]
