"""Zoho Accounts OAuth2 provider."""

import logging
from collections.abc import Iterable, Mapping
from datetime import UTC, datetime, timedelta
from typing import Any

from zoho_oauth2.authorization import build_authorization_url
from zoho_oauth2.config import ZohoConfig
from zoho_oauth2.exceptions import IdentityProviderError
from zoho_oauth2.models import AccessToken, ResourceOwner
from zoho_oauth2.providers.base import response_status
from zoho_oauth2.regions import (
    AUTHORIZATION_PATH,
    RESOURCE_OWNER_URL,
    TOKEN_PATH,
    Region,
    authorization_domain,
    token_domain,
)

logger = logging.getLogger(__name__)

DEFAULT_SCOPES = ["aaaserver.profile.READ"]
SCOPE_SEPARATOR = ","


class ZohoAccessToken(AccessToken):
    """
    Zoho token response.

    Besides the standard fields Zoho returns ``api_domain``, the base URL
    for API calls made with this token. Older responses also carry
    ``expires_in_sec``, which takes precedence over ``expires_in``.
    """

    @classmethod
    def _expires_at_from(cls, response: Mapping[str, Any]) -> datetime | None:
        expires_in_sec = response.get("expires_in_sec")
        if expires_in_sec is not None:
            return datetime.now(UTC) + timedelta(seconds=int(expires_in_sec))
        return super()._expires_at_from(response)

    @property
    def api_domain(self) -> str | None:
        return self.get("api_domain")


class ZohoUser(ResourceOwner):
    """Profile from https://accounts.zoho.com/oauth/user/info."""

    id_field = "ZUID"

    @property
    def email(self) -> str | None:
        return self.get("Email")

    @property
    def first_name(self) -> str | None:
        return self.get("First_Name")

    @property
    def last_name(self) -> str | None:
        return self.get("Last_Name")

    @property
    def display_name(self) -> str | None:
        return self.get("Display_Name")


class ZohoProvider:
    """
    Zoho Accounts OAuth2 provider.

    Resolves the data-center-specific accounts endpoints and interprets
    Zoho responses. Performs no I/O; the calling OAuth2 client owns the
    HTTP transport and hands parsed bodies to these hooks.

    Only the China data center has its own authorization page. Token
    exchange always goes to the configured data center.
    """

    def __init__(self, config: ZohoConfig):
        """
        Initialize Zoho provider.

        Args:
            config: Zoho client configuration

        Raises:
            InvalidConfigurationError: If client_id, client_secret or redirect_uri is missing
        """
        config.validate()

        self.config = config
        self.provider_name = config.provider_name
        self.region = Region.parse(config.region)

        if config.region and self.region is None:
            logger.warning(
                f"Unknown Zoho data center for '{self.provider_name}', falling back to US",
                extra={"region": str(config.region)},
            )

        # Don't log the secret
        logger.debug(
            f"Initialized Zoho provider '{self.provider_name}'",
            extra={"region": self.region, "client_id": config.client_id},
        )

    def authorization_url(self) -> str:
        return authorization_domain(self.region) + AUTHORIZATION_PATH

    def token_url(self, params: Mapping[str, Any] | None = None) -> str:
        return token_domain(self.region) + TOKEN_PATH

    def resource_owner_url(self, token: AccessToken) -> str:
        return RESOURCE_OWNER_URL

    def default_scopes(self) -> list[str]:
        """
        Scope used when none is given; grants read access to the public profile.

        See https://www.zoho.com/crm/developer/docs/api/oauth-overview.html#scopes
        """
        return list(DEFAULT_SCOPES)

    def scope_separator(self) -> str:
        return SCOPE_SEPARATOR

    def check_response(self, response: Any, data: Any) -> None:
        """
        Check a Zoho response body for errors.

        Zoho reports some failures (e.g. ``invalid_code``) with HTTP 200,
        so the body is inspected regardless of status.

        Args:
            response: Original HTTP response object
            data: Parsed response body

        Raises:
            IdentityProviderError: If the body has a non-empty ``error`` field
        """
        if not isinstance(data, Mapping):
            return

        error = data.get("error")
        if not error:
            return

        status_code = response_status(response)
        logger.warning(
            f"Zoho returned an error for '{self.provider_name}': {error}",
            extra={
                "provider": self.provider_name,
                "error": str(error),
                "status_code": status_code,
            },
        )
        raise IdentityProviderError(error, status_code, response)

    def create_access_token(
        self, response: Mapping[str, Any], grant: str | None = None
    ) -> ZohoAccessToken:
        """
        Build a token from a validated token response.

        Args:
            response: Parsed token response body
            grant: Grant type that produced the response, for logging only

        Returns:
            ZohoAccessToken holding every response field

        Raises:
            TokenAcquisitionError: If access_token is missing
        """
        token = ZohoAccessToken.from_response(response)
        logger.debug(
            f"Built access token for '{self.provider_name}'",
            extra={"grant": grant, "api_domain": token.api_domain, "token_url": self.token_url()},
        )
        return token

    def create_resource_owner(
        self, response: Mapping[str, Any], token: AccessToken
    ) -> ZohoUser:
        return ZohoUser(dict(response))

    def authorization_headers(self, token: AccessToken | str | None = None) -> dict[str, str]:
        """Bearer headers for requests made with a token."""
        if token is None:
            return {}
        if isinstance(token, AccessToken):
            token = token.access_token
        return {"Authorization": f"Bearer {token}"}

    def get_authorization_url(
        self,
        state: str | None = None,
        scopes: Iterable[str] | None = None,
        **options: Any,
    ) -> str:
        """
        Generate the Zoho consent URL for this client.

        Args:
            state: CSRF token generated by the caller
            scopes: Scopes to request; defaults to the configured scopes, then the provider defaults
            **options: Extra query parameters; override configured client_id,
                redirect_uri, access_type and prompt

        Returns:
            Full authorization URL with query parameters
        """
        params = {"access_type": self.config.access_type, "prompt": self.config.prompt}
        params.update(options)
        client_id = params.pop("client_id", None) or self.config.client_id
        redirect_uri = params.pop("redirect_uri", None) or self.config.redirect_uri

        url = build_authorization_url(
            self,
            client_id=client_id,
            redirect_uri=redirect_uri,
            state=state,
            scopes=scopes or self.config.scopes,
            **params,
        )
        logger.debug(
            f"Built authorization URL for '{self.provider_name}'",
            extra={"provider": self.provider_name, "authorization_url": url},
        )
        return url


__all__ = ["ZohoProvider", "ZohoAccessToken", "ZohoUser", "DEFAULT_SCOPES", "SCOPE_SEPARATOR"]
