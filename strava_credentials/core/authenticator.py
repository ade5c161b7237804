"""
Strava OAuth2 authorization code authenticator.

Decides per request whether to redirect the user to Strava's consent page
or to exchange the authorization code carried by the request, and reports
the result as a single AuthOutcome.
"""

import logging
from typing import Any

import httpx

from strava_credentials.core.domain import AuthOutcome, Failure, Redirect, Success
from strava_credentials.core.exceptions import TokenExchangeError
from strava_credentials.core.ports import RequestView, UserProfileDelegate
from strava_credentials.core.profile_mapper import PROVIDER_NAME, create_profile
from strava_credentials.oauth.config import StravaConfig


logger = logging.getLogger(__name__)


STRAVA_BASE_URL = "https://www.strava.com"


class StravaAuthenticator:
    """
    Authenticate incoming requests against Strava.

    Credentials are fixed at construction. `scope`, `approval_prompt` and
    `state` may be changed between calls; each adds one query parameter to
    the authorization URL when set.
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        callback_url: str,
        *,
        scope: str | None = None,
        approval_prompt: str | None = None,
        state: str | None = None,
        user_profile_delegate: UserProfileDelegate | None = None,
        http_client: httpx.AsyncClient | None = None,
        base_url: str = STRAVA_BASE_URL,
    ):
        self._client_id = client_id
        self._client_secret = client_secret
        self._callback_url = callback_url
        self._http_client = http_client
        self._base_url = base_url

        self.scope = scope
        self.approval_prompt = approval_prompt
        self.state = state
        self.user_profile_delegate = user_profile_delegate

    @classmethod
    def from_config(
        cls, config: StravaConfig, **kwargs: Any
    ) -> "StravaAuthenticator":
        """Create an authenticator from host configuration."""
        return cls(
            client_id=config.client_id or "",
            client_secret=config.client_secret or "",
            callback_url=config.callback_url,
            scope=config.scope,
            approval_prompt=config.approval_prompt,
            state=config.state,
            **kwargs,
        )

    @property
    def name(self) -> str:
        """The name of the plugin."""
        return PROVIDER_NAME

    @property
    def redirecting(self) -> bool:
        """Whether the plugin redirects to a login page."""
        return True

    @property
    def client_id(self) -> str:
        return self._client_id

    @property
    def callback_url(self) -> str:
        return self._callback_url

    def build_authorize_url(self) -> str:
        """
        Build the URL of Strava's consent page.

        Values are inserted verbatim. Optional parameters always appear in
        the order scope, approval_prompt, state.
        """
        url = (
            f"{self._base_url}/oauth/authorize"
            f"?client_id={self._client_id}"
            f"&redirect_uri={self._callback_url}"
            f"&response_type=code"
        )
        if self.scope is not None:
            url += f"&scope={self.scope}"
        if self.approval_prompt is not None:
            url += f"&approval_prompt={self.approval_prompt}"
        if self.state is not None:
            url += f"&state={self.state}"
        return url

    async def authenticate(self, request: RequestView) -> AuthOutcome:
        """
        Authenticate an incoming request.

        Args:
            request: Incoming request; only its `code` query parameter is read

        Returns:
            Redirect when the request has no code, otherwise Success with
            the mapped profile or Failure (without status or details)
        """
        code = request.query_params.get("code")
        if code is None:
            return Redirect(url=self.build_authorize_url())

        try:
            raw = await self.exchange_code(code)
        except TokenExchangeError as e:
            logger.error(
                f"Strava token exchange failed: {e}",
                extra={"provider": self.name},
            )
            return Failure()

        profile = create_profile(raw)
        if profile is None:
            logger.warning(
                "Strava response did not contain a valid athlete",
                extra={"provider": self.name},
            )
            return Failure()

        if self.user_profile_delegate is not None:
            self.user_profile_delegate.update(profile, raw)

        logger.info(
            f"Authenticated Strava athlete {profile.id}",
            extra={"provider": self.name, "athlete_id": profile.id},
        )
        return Success(profile=profile)

    async def exchange_code(self, code: str) -> dict[str, Any]:
        """
        Exchange an authorization code for the token response.

        Unlike the authorization URL, query values here are percent-encoded.

        Args:
            code: Authorization code from the callback request

        Returns:
            Decoded JSON object returned by Strava

        Raises:
            TokenExchangeError: On network errors, non-200 status, or a body
                that is not a JSON object
        """
        url = f"{self._base_url}/oauth/token"
        params = {
            "client_id": self._client_id,
            "client_secret": self._client_secret,
            "code": code,
        }
        headers = {"Accept": "application/json"}

        try:
            if self._http_client is not None:
                response = await self._http_client.post(
                    url, params=params, headers=headers
                )
            else:
                async with httpx.AsyncClient() as client:
                    response = await client.post(url, params=params, headers=headers)
        except httpx.RequestError as e:
            raise TokenExchangeError(f"Network error: {e}") from e

        if response.status_code != httpx.codes.OK:
            raise TokenExchangeError(
                f"Token endpoint returned status {response.status_code}"
            )

        try:
            data = response.json()
        except ValueError as e:
            raise TokenExchangeError("Failed to read Strava response") from e

        if not isinstance(data, dict):
            raise TokenExchangeError("Strava response is not a JSON object")

        return data
