"""
Zoho Accounts provider for OAuth2 clients.

Resolves Zoho's data-center-specific accounts endpoints, default scopes and
scope encoding, and turns Zoho token/profile responses into typed objects.
HTTP transport, state handling and token storage stay with the calling
OAuth2 client, which talks to the provider through the OAuth2Provider hooks.

Basic Usage:
    from zoho_oauth2 import Region, ZohoConfig, ZohoProvider

    provider = ZohoProvider(
        ZohoConfig(
            client_id=os.getenv("ZOHO_CLIENT_ID"),
            client_secret=os.getenv("ZOHO_CLIENT_SECRET"),
            redirect_uri="https://app.example.com/oauth/zoho/callback",
            region=Region.EU,
            access_type="offline",
        )
    )

    # Redirect the user agent (state is generated and checked by the caller)
    url = provider.get_authorization_url(state=state)

    # After the HTTP client posted the code to provider.token_url()
    provider.check_response(response, body)
    token = provider.create_access_token(body, grant="authorization_code")

    # Profile lookup
    headers = provider.authorization_headers(token)
    provider.check_response(profile_response, profile_body)
    user = provider.create_resource_owner(profile_body, token)
    user.email, user.get("ZUID")

From a config file:
    from zoho_oauth2 import ZohoProvider, load_config

    provider = ZohoProvider(load_config(Path("config/zoho.yaml")))
"""

from zoho_oauth2.authorization import (
    authorization_parameters,
    build_authorization_url,
    encode_scopes,
)
from zoho_oauth2.config import ZohoConfig, get_config, load_config, reset_config, set_config
from zoho_oauth2.exceptions import (
    IdentityProviderError,
    InvalidConfigurationError,
    OAuth2Error,
    TokenAcquisitionError,
)
from zoho_oauth2.models import AccessToken, ResourceOwner
from zoho_oauth2.providers import (
    OAuth2Provider,
    ZohoAccessToken,
    ZohoProvider,
    ZohoUser,
    response_status,
)
from zoho_oauth2.regions import REGION_DOMAINS, Region

__all__ = [
    # Providers
    "OAuth2Provider",
    "ZohoProvider",
    "response_status",
    # Models
    "AccessToken",
    "ResourceOwner",
    "ZohoAccessToken",
    "ZohoUser",
    # Regions
    "Region",
    "REGION_DOMAINS",
    # Authorization
    "encode_scopes",
    "authorization_parameters",
    "build_authorization_url",
    # Config
    "ZohoConfig",
    "load_config",
    "get_config",
    "set_config",
    "reset_config",
    # Exceptions
    "OAuth2Error",
    "IdentityProviderError",
    "TokenAcquisitionError",
    "InvalidConfigurationError",
]
