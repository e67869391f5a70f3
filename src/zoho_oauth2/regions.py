"""
Zoho data centers and their accounts domains.

Zoho accounts are bound to one data center, and tokens must be requested
from that data center's accounts domain.
See https://www.zoho.com/crm/developer/docs/api/multi-dc.html
"""

from enum import Enum
from types import MappingProxyType
from typing import Any

AUTHORIZATION_PATH = "/oauth/v2/auth"
TOKEN_PATH = "/oauth/v2/token"
RESOURCE_OWNER_URL = "https://accounts.zoho.com/oauth/user/info"


class Region(str, Enum):
    """Zoho data center code."""

    US = "US"
    AU = "AU"
    EU = "EU"
    IN = "IN"
    CN = "CN"

    @classmethod
    def parse(cls, value: Any) -> "Region | None":
        """
        Parse a data center code.

        Matching is exact and case-sensitive. Absent or unknown codes
        return None rather than raising.
        """
        if isinstance(value, Region):
            return value
        if not value or not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


REGION_DOMAINS: MappingProxyType[Region, str] = MappingProxyType(
    {
        Region.US: "https://accounts.zoho.com",
        Region.AU: "https://accounts.zoho.com.au",
        Region.EU: "https://accounts.zoho.eu",
        Region.IN: "https://accounts.zoho.in",
        Region.CN: "https://accounts.zoho.com.cn",
    }
)

DEFAULT_REGION = Region.US


def domain_for(region: Region | str | None) -> str:
    """Accounts domain for a region, falling back to the US data center."""
    parsed = Region.parse(region)
    if parsed is None:
        return REGION_DOMAINS[DEFAULT_REGION]
    return REGION_DOMAINS[parsed]


def authorization_domain(region: Region | str | None) -> str:
    """
    Accounts domain used for the authorization redirect.

    Only the China data center has its own consent page; every other code,
    valid or not, is sent to the US domain.
    """
    if Region.parse(region) is Region.CN:
        return REGION_DOMAINS[Region.CN]
    return REGION_DOMAINS[DEFAULT_REGION]


def token_domain(region: Region | str | None) -> str:
    """Accounts domain used for token exchange."""
    return domain_for(region)


__all__ = [
    "Region",
    "REGION_DOMAINS",
    "DEFAULT_REGION",
    "AUTHORIZATION_PATH",
    "TOKEN_PATH",
    "RESOURCE_OWNER_URL",
    "domain_for",
    "authorization_domain",
    "token_domain",
]
