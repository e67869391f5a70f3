"""OAuth2 data models shared by providers."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Any

from zoho_oauth2.exceptions import TokenAcquisitionError

# Fields every OAuth2 token response may carry; everything else is provider-specific
STANDARD_TOKEN_FIELDS = frozenset(
    {
        "access_token",
        "token_type",
        "refresh_token",
        "expires_in",
        "expires",
        "scope",
        "resource_owner_id",
    }
)


@dataclass
class AccessToken:
    """
    OAuth2 access token built from a token endpoint response.

    Attributes:
        access_token: The bearer token string
        token_type: Token type (typically "Bearer")
        expires_at: UTC timestamp when token expires, None if the response had no expiry
        scope: Scopes granted, as returned by the provider
        refresh_token: Optional refresh token for token renewal
        raw: Every field of the original response
    """

    access_token: str = field(repr=False)
    token_type: str = "Bearer"
    expires_at: datetime | None = None
    scope: str | None = None
    refresh_token: str | None = field(default=None, repr=False)
    raw: dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_response(cls, response: Mapping[str, Any]) -> "AccessToken":
        """
        Create token from OAuth2 token response.

        Args:
            response: Parsed token response body

        Returns:
            Token instance holding all response fields

        Raises:
            TokenAcquisitionError: If access_token is missing or expiry is not a usable number
        """
        if not response.get("access_token"):
            raise TokenAcquisitionError("Required option not passed: access_token")

        try:
            expires_at = cls._expires_at_from(response)
        except (TypeError, ValueError, OverflowError, OSError) as e:
            raise TokenAcquisitionError(f"Invalid token expiry in response: {e}") from e

        return cls(
            access_token=response["access_token"],
            token_type=response.get("token_type") or "Bearer",
            expires_at=expires_at,
            scope=response.get("scope"),
            refresh_token=response.get("refresh_token"),
            raw=dict(response),
        )

    @classmethod
    def _expires_at_from(cls, response: Mapping[str, Any]) -> datetime | None:
        """Relative expires_in wins over an absolute expires epoch."""
        expires_in = response.get("expires_in")
        if expires_in is not None:
            return datetime.now(UTC) + timedelta(seconds=int(expires_in))

        expires = response.get("expires")
        if expires is not None:
            return datetime.fromtimestamp(int(expires), UTC)

        return None

    @property
    def values(self) -> dict[str, Any]:
        """Non-standard fields of the response."""
        return {
            key: value for key, value in self.raw.items() if key not in STANDARD_TOKEN_FIELDS
        }

    def get(self, key: str, default: Any = None) -> Any:
        """Look up any field of the original response."""
        return self.raw.get(key, default)

    def __contains__(self, key: object) -> bool:
        return key in self.raw

    def is_expired(self, buffer_seconds: int = 300) -> bool:
        """
        Check if token is expired or close to expiry.

        Tokens without an expiry never report as expired.

        Args:
            buffer_seconds: Safety buffer before actual expiry (default: 5 minutes)

        Returns:
            True if token should be refreshed
        """
        if self.expires_at is None:
            return False
        return datetime.now(UTC) >= self.expires_at - timedelta(seconds=buffer_seconds)

    @property
    def remaining_lifetime(self) -> timedelta | None:
        """Get remaining time before token expires."""
        if self.expires_at is None:
            return None
        return self.expires_at - datetime.now(UTC)

    def to_dict(self) -> dict[str, Any]:
        return dict(self.raw)


@dataclass(frozen=True, eq=False)
class ResourceOwner:
    """
    Profile returned by a provider's resource-owner endpoint.

    Wraps the raw response; lookups of missing keys return the default
    instead of raising. Compared and hashed by identity.
    """

    response: dict[str, Any]

    id_field = "id"

    @property
    def id(self) -> Any:
        return self.get(self.id_field)

    def get(self, key: str, default: Any = None) -> Any:
        return self.response.get(key, default)

    def __contains__(self, key: object) -> bool:
        return key in self.response

    def to_dict(self) -> dict[str, Any]:
        return dict(self.response)


__all__ = ["AccessToken", "ResourceOwner", "STANDARD_TOKEN_FIELDS"]
