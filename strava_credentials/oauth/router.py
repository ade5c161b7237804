"""
Strava OAuth2 API endpoints.

- GET /auth/strava - Start the flow (redirects to Strava)
- GET /auth/strava/callback - Exchange the code and return the profile
- GET /auth/strava/profiles/{profile_id} - Read a cached profile

Both login routes run the same authenticator: whether the request carries
a `code` decides between redirect and token exchange.
"""

import logging

from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import RedirectResponse

from strava_credentials.core.domain import AuthOutcome, Pass, Redirect, Success
from strava_credentials.core.ports import ProfileCache
from strava_credentials.infrastructure.profile_cache import profile_cache_key
from strava_credentials.oauth.dependencies import Authenticator, Cache


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth/strava", tags=["strava"])


def _outcome_to_response(outcome: AuthOutcome, cache: ProfileCache):
    """Translate an authentication outcome into an HTTP response."""
    if isinstance(outcome, Redirect):
        return RedirectResponse(url=outcome.url, status_code=status.HTTP_302_FOUND)

    if isinstance(outcome, Success):
        profile = outcome.profile
        cache.set(profile_cache_key(profile), profile)
        return {
            "status": "success",
            "profile": profile.model_dump(mode="json", exclude_none=True),
        }

    if isinstance(outcome, Pass):
        detail = "Request not recognized by Strava authentication"
    else:
        detail = "Strava authentication failed"

    raise HTTPException(
        status_code=outcome.status_code or status.HTTP_401_UNAUTHORIZED,
        detail=detail,
    )


@router.get("")
async def login(request: Request, authenticator: Authenticator, cache: Cache):
    """
    Start the Strava OAuth2 flow.

    Redirects to Strava's consent page, or completes the exchange when
    Strava sent the user here with a `code`.
    """
    logger.info(
        "Strava login requested",
        extra={
            "provider": authenticator.name,
            "has_code": "code" in request.query_params,
        },
    )
    outcome = await authenticator.authenticate(request)
    return _outcome_to_response(outcome, cache)


@router.get("/callback")
async def callback(request: Request, authenticator: Authenticator, cache: Cache):
    """
    Handle the OAuth2 callback from Strava.

    Exchanges the authorization code and returns the normalized profile.

    Raises:
        HTTPException: 401 when the exchange fails
    """
    outcome = await authenticator.authenticate(request)
    return _outcome_to_response(outcome, cache)


@router.get("/profiles/{profile_id}")
async def get_profile(profile_id: str, authenticator: Authenticator, cache: Cache):
    """
    Return a profile cached by a previous successful login.

    Raises:
        HTTPException: 404 if the profile is not cached
    """
    profile = cache.get(f"{authenticator.name}:{profile_id}")
    if profile is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No cached profile: {profile_id}",
        )
    return {
        "status": "success",
        "profile": profile.model_dump(mode="json", exclude_none=True),
    }
