"""OAuth2 provider implementations."""

from zoho_oauth2.providers.base import OAuth2Provider, response_status
from zoho_oauth2.providers.zoho import ZohoAccessToken, ZohoProvider, ZohoUser

__all__ = ["OAuth2Provider", "response_status", "ZohoProvider", "ZohoAccessToken", "ZohoUser"]
