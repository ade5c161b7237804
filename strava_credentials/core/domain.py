"""
Core domain models for Strava authentication.

These models represent the normalized user profile and the result of a
single authentication attempt. They are independent of any HTTP framework.
"""

from dataclasses import dataclass

from pydantic import BaseModel, Field


class UserProfileName(BaseModel):
    """Structured name of an authenticated user."""

    given_name: str = Field(description="First name")
    family_name: str = Field(description="Last name")
    middle_name: str = Field(default="", description="Middle name")


class UserProfileEmail(BaseModel):
    """Email address attached to a user profile."""

    value: str = Field(description="Email address")
    type: str = Field(default="public", description="Email visibility type")


class UserProfilePhoto(BaseModel):
    """Photo attached to a user profile."""

    value: str = Field(description="Photo URL")


class UserProfile(BaseModel):
    """
    Provider-agnostic representation of an authenticated user.

    Only `id`, `display_name` and `provider` are always present. The
    remaining fields are omitted (None) when the provider did not send them.
    """

    id: str = Field(min_length=1, description="Provider user ID")
    display_name: str = Field(default="", description="Provider username")
    provider: str = Field(description="Name of the authenticating provider")
    name: UserProfileName | None = Field(default=None, description="Structured name")
    emails: list[UserProfileEmail] | None = Field(
        default=None, description="Email addresses"
    )
    photos: list[UserProfilePhoto] | None = Field(
        default=None, description="Profile photos"
    )


# ============================================================================
# Authentication outcomes
# ============================================================================


@dataclass(frozen=True)
class Redirect:
    """The user must be sent to the provider's consent page."""

    url: str


@dataclass(frozen=True)
class Success:
    """Authentication completed."""

    profile: UserProfile


@dataclass(frozen=True)
class Failure:
    """Token exchange failed or the provider response was unusable."""

    status_code: int | None = None
    details: dict[str, str] | None = None


@dataclass(frozen=True)
class Pass:
    """The plugin does not recognize the request."""

    status_code: int | None = None
    details: dict[str, str] | None = None


AuthOutcome = Redirect | Success | Failure | Pass
