"""
Port definitions (interfaces) for the core domain.

Ports define the contracts between the authenticator and the host
framework. Starlette's Request satisfies RequestView structurally; other
adapters live in strava_credentials/infrastructure.
"""

from typing import Any, Mapping, Protocol

from strava_credentials.core.domain import UserProfile


class RequestView(Protocol):
    """
    Read-only view of an incoming HTTP request.

    The authenticator only reads the `code` query parameter.
    """

    @property
    def query_params(self) -> Mapping[str, str]: ...


class ResponseView(Protocol):
    """Response abstraction used by callback-style hosts."""

    def redirect(self, url: str) -> None:
        """
        Issue an HTTP redirect.

        Raises:
            RedirectError: If the redirect cannot be sent
                (e.g. the response was already sent)
        """
        ...


class UserProfileDelegate(Protocol):
    """Hook for enriching a profile from the raw provider response."""

    def update(self, profile: UserProfile, raw: dict[str, Any]) -> None:
        """
        Observe or modify a freshly mapped profile.

        Args:
            profile: The normalized profile about to be reported
            raw: The raw provider response it was mapped from
        """
        ...


class ProfileCache(Protocol):
    """
    Key-value store for authenticated profiles, owned by the host.

    The authenticator never touches the cache directly.
    """

    def get(self, key: str) -> UserProfile | None: ...

    def set(self, key: str, profile: UserProfile) -> None: ...

    def delete(self, key: str) -> bool: ...
