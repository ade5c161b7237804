"""
Callback-style credentials plugin contract.

Some hosts drive authentication through four continuations rather than a
returned outcome. run_authentication adapts any plugin that returns an
AuthOutcome to that shape.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Protocol

from strava_credentials.core.domain import (
    AuthOutcome,
    Failure,
    Pass,
    Redirect,
    Success,
    UserProfile,
)
from strava_credentials.core.exceptions import RedirectError
from strava_credentials.core.ports import RequestView, ResponseView


logger = logging.getLogger(__name__)


class CredentialsPlugin(Protocol):
    """A plugin that authenticates requests for one provider."""

    @property
    def name(self) -> str: ...

    @property
    def redirecting(self) -> bool: ...

    async def authenticate(self, request: RequestView) -> AuthOutcome: ...


FailureCallback = Callable[[int | None, dict[str, str] | None], None]


@dataclass
class PluginCallbacks:
    """Continuations invoked once the outcome of a request is known."""

    on_success: Callable[[UserProfile], None]
    on_failure: FailureCallback
    on_pass: FailureCallback
    in_progress: Callable[[], None]


async def run_authentication(
    plugin: CredentialsPlugin,
    request: RequestView,
    response: ResponseView,
    callbacks: PluginCallbacks,
) -> None:
    """
    Authenticate a request and invoke exactly one continuation.

    A redirect that cannot be issued is logged and no continuation is
    invoked: the request stays in progress from the host's point of view.

    Args:
        plugin: Plugin to authenticate with
        request: Incoming request
        response: Response used to issue redirects
        callbacks: Continuations to dispatch the outcome to
    """
    outcome = await plugin.authenticate(request)

    if isinstance(outcome, Redirect):
        try:
            response.redirect(outcome.url)
        except RedirectError as e:
            logger.error(
                f"Failed to redirect to {plugin.name} login page: {e}",
                extra={"provider": plugin.name},
            )
            return
        callbacks.in_progress()
    elif isinstance(outcome, Success):
        callbacks.on_success(outcome.profile)
    elif isinstance(outcome, Failure):
        callbacks.on_failure(outcome.status_code, outcome.details)
    elif isinstance(outcome, Pass):
        callbacks.on_pass(outcome.status_code, outcome.details)
