"""
Shared test configuration and fixtures.
"""

import os
from types import SimpleNamespace
from unittest.mock import patch

import pytest

# Set environment variables before importing app
with patch.dict(
    os.environ,
    {
        "BASE_URL": "http://testserver",
        "STRAVA_CLIENT_ID": "test-client-id",
        "STRAVA_CLIENT_SECRET": "test-client-secret",
    },
):
    from strava_credentials.main import app  # noqa: F401

from strava_credentials.core.authenticator import StravaAuthenticator
from strava_credentials.infrastructure.profile_cache import get_profile_cache


@pytest.fixture
def make_request():
    """Factory for minimal RequestViews carrying the given query parameters."""

    def _make(**query_params):
        return SimpleNamespace(query_params=query_params)

    return _make


@pytest.fixture(autouse=True)
def clear_profile_cache():
    """Start every test with an empty profile cache."""
    get_profile_cache().clear()
    yield
    get_profile_cache().clear()


@pytest.fixture
def authenticator():
    """Authenticator with fixed test credentials."""
    return StravaAuthenticator(
        client_id="abc",
        client_secret="shh",
        callback_url="https://app/cb",
    )


@pytest.fixture
def sample_athlete():
    """Complete athlete object as returned by Strava."""
    return {
        "id": 42,
        "username": "joe",
        "email": "j@x.com",
        "profile": "http://p",
        "firstname": "Joe",
        "lastname": "Doe",
    }


@pytest.fixture
def sample_token_response(sample_athlete):
    """Strava token exchange response."""
    return {
        "token_type": "Bearer",
        "access_token": "a9b723",
        "refresh_token": "b5c569",
        "expires_at": 1568775134,
        "athlete": sample_athlete,
    }
