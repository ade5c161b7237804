"""
Strava OAuth2 configuration.

Loaded from environment variables. Credentials are required to serve the
/auth/strava endpoints; the optional authorization parameters are passed
through to the consent page URL when set.
"""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache


logger = logging.getLogger(__name__)


@dataclass
class StravaConfig:
    """
    Strava OAuth configuration settings.

    `callback_url` defaults to the /auth/strava/callback route of BASE_URL.
    """

    base_url: str
    client_id: str | None
    client_secret: str | None
    callback_url_override: str | None = None

    scope: str | None = None
    approval_prompt: str | None = None
    state: str | None = None

    @classmethod
    def from_env(cls) -> "StravaConfig":
        """Load configuration from environment variables."""
        return cls(
            base_url=os.getenv("BASE_URL", ""),
            client_id=os.getenv("STRAVA_CLIENT_ID"),
            client_secret=os.getenv("STRAVA_CLIENT_SECRET"),
            callback_url_override=os.getenv("STRAVA_CALLBACK_URL"),
            scope=os.getenv("STRAVA_SCOPE"),
            approval_prompt=os.getenv("STRAVA_APPROVAL_PROMPT"),
            state=os.getenv("STRAVA_STATE"),
        )

    @property
    def callback_url(self) -> str:
        """URL Strava redirects back to after consent."""
        if self.callback_url_override:
            return self.callback_url_override
        return f"{self.base_url}/auth/strava/callback"

    def is_configured(self) -> bool:
        """Check if Strava credentials are configured."""
        return bool(self.client_id and self.client_secret)

    def validate(self) -> None:
        """Validate required configuration. Call at startup to fail fast."""
        if not self.client_id:
            raise ValueError("STRAVA_CLIENT_ID environment variable is required")
        if not self.client_secret:
            raise ValueError("STRAVA_CLIENT_SECRET environment variable is required")
        if not self.callback_url_override and not self.base_url:
            raise ValueError(
                "STRAVA_CALLBACK_URL or BASE_URL environment variable is required"
            )


@lru_cache()
def get_strava_config() -> StravaConfig:
    """Get Strava configuration singleton."""
    config = StravaConfig.from_env()
    if not config.is_configured():
        logger.warning("Strava OAuth not configured (missing credentials)")
    return config
