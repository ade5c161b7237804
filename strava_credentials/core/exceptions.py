"""
Domain exceptions for Strava authentication.

These never escape StravaAuthenticator.authenticate: token exchange errors
are reported as a Failure outcome, redirect errors are only logged.
"""


class StravaAuthError(Exception):
    """Base exception for Strava authentication errors."""

    pass


class TokenExchangeError(StravaAuthError):
    """
    Raised when the authorization code cannot be exchanged.

    Covers non-success provider status, network errors and
    unreadable response bodies.
    """

    pass


class RedirectError(StravaAuthError):
    """Raised by a ResponseView when the redirect cannot be issued."""

    pass
