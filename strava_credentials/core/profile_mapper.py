"""
Mapping from Strava token responses to normalized user profiles.

The token endpoint answers with the tokens plus an `athlete` object.
Only `athlete.id` is required; every other athlete field is best-effort.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, StrictInt, ValidationError, field_validator

from strava_credentials.core.domain import (
    UserProfile,
    UserProfileEmail,
    UserProfileName,
    UserProfilePhoto,
)


PROVIDER_NAME = "Strava"


class StravaAthlete(BaseModel):
    """Athlete object embedded in the Strava token response."""

    id: StrictInt
    username: str | None = None
    email: str | None = None
    profile: str | None = None
    firstname: str | None = None
    lastname: str | None = None

    model_config = ConfigDict(extra="ignore")

    @field_validator(
        "username", "email", "profile", "firstname", "lastname", mode="before"
    )
    @classmethod
    def drop_non_strings(cls, v: Any) -> str | None:
        """Treat values of the wrong type as missing."""
        return v if isinstance(v, str) else None


class StravaTokenResponse(BaseModel):
    """Token exchange response. Token fields are accepted but not used."""

    athlete: StravaAthlete

    model_config = ConfigDict(extra="allow")


def parse_token_response(raw: Any) -> StravaTokenResponse | None:
    """Validate a raw response, returning None if athlete or its id is unusable."""
    try:
        return StravaTokenResponse.model_validate(raw)
    except ValidationError:
        return None


def create_profile(raw: Any) -> UserProfile | None:
    """
    Create a normalized profile from a raw Strava token response.

    Args:
        raw: Decoded JSON body of the token exchange

    Returns:
        UserProfile, or None when `athlete` or its integer `id` is missing
    """
    response = parse_token_response(raw)
    if response is None:
        return None

    athlete = response.athlete

    emails = None
    if athlete.email is not None:
        emails = [UserProfileEmail(value=athlete.email, type="public")]

    photos = None
    if athlete.profile is not None:
        photos = [UserProfilePhoto(value=athlete.profile)]

    name = None
    if athlete.firstname is not None and athlete.lastname is not None:
        name = UserProfileName(
            given_name=athlete.firstname,
            family_name=athlete.lastname,
            middle_name="",
        )

    return UserProfile(
        id=str(athlete.id),
        display_name=athlete.username or "",
        provider=PROVIDER_NAME,
        name=name,
        emails=emails,
        photos=photos,
    )
