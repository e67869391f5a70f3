"""Provider capability interface consumed by OAuth2 client code."""

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from zoho_oauth2.models import AccessToken, ResourceOwner


def response_status(response: Any) -> int | None:
    """
    Read the HTTP status code from a response object.

    aiohttp responses expose ``status``; requests and httpx responses
    expose ``status_code``.
    """
    for attr in ("status", "status_code"):
        value = getattr(response, attr, None)
        if isinstance(value, int):
            return value
    return None


@runtime_checkable
class OAuth2Provider(Protocol):
    """
    Hooks an OAuth2 client calls on a provider.

    Implementations resolve endpoints and interpret responses; they never
    perform I/O. Any object with these methods is accepted, no subclassing
    required.
    """

    def authorization_url(self) -> str:
        """Base URL the user agent is redirected to."""
        ...

    def token_url(self, params: Mapping[str, Any] | None = None) -> str:
        """URL used to exchange a code or refresh token for an access token."""
        ...

    def resource_owner_url(self, token: AccessToken) -> str:
        """URL used to fetch the authenticated user's profile."""
        ...

    def default_scopes(self) -> list[str]:
        """Scopes requested when the caller supplies none."""
        ...

    def scope_separator(self) -> str:
        """Separator used when encoding scopes into a request."""
        ...

    def check_response(self, response: Any, data: Any) -> None:
        """
        Inspect a parsed response body for a provider error.

        Raises:
            IdentityProviderError: If the body reports an error
        """
        ...

    def create_access_token(
        self, response: Mapping[str, Any], grant: str | None = None
    ) -> AccessToken:
        """Build a token from a validated token response."""
        ...

    def create_resource_owner(
        self, response: Mapping[str, Any], token: AccessToken
    ) -> ResourceOwner:
        """Build a user from a validated profile response."""
        ...


__all__ = ["OAuth2Provider", "response_status"]
