"""Authorization request assembly for any provider implementing OAuth2Provider."""

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any
from urllib.parse import urlencode

if TYPE_CHECKING:
    from zoho_oauth2.providers.base import OAuth2Provider


def encode_scopes(provider: "OAuth2Provider", scopes: Iterable[str] | None = None) -> str:
    """
    Join scopes with the provider's separator.

    Args:
        provider: Provider supplying default scopes and separator
        scopes: Scopes to request; None or empty uses the provider defaults

    Returns:
        Encoded scope string
    """
    scopes = list(scopes) if scopes else provider.default_scopes()
    return provider.scope_separator().join(scopes)


def authorization_parameters(
    provider: "OAuth2Provider",
    client_id: str,
    redirect_uri: str,
    state: str | None = None,
    scopes: Iterable[str] | None = None,
    **options: Any,
) -> dict[str, str]:
    """
    Build the query parameters of an authorization request.

    Extra options (e.g. access_type, prompt) are appended when not None.
    The state value is generated and verified by the caller.
    """
    params = {
        "client_id": client_id,
        "redirect_uri": redirect_uri,
        "response_type": "code",
        "scope": encode_scopes(provider, scopes),
    }
    if state:
        params["state"] = state

    for key, value in options.items():
        if value is not None:
            params[key] = str(value)

    return params


def build_authorization_url(
    provider: "OAuth2Provider",
    client_id: str,
    redirect_uri: str,
    state: str | None = None,
    scopes: Iterable[str] | None = None,
    **options: Any,
) -> str:
    """
    Generate authorization URL for the provider.

    Returns:
        Full authorization URL with query parameters
    """
    params = authorization_parameters(
        provider, client_id, redirect_uri, state=state, scopes=scopes, **options
    )
    base_url = provider.authorization_url()
    separator = "&" if "?" in base_url else "?"
    return f"{base_url}{separator}{urlencode(params)}"


__all__ = ["encode_scopes", "authorization_parameters", "build_authorization_url"]
