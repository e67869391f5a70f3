"""OAuth2-specific exceptions."""

from typing import Any


class OAuth2Error(Exception):
    """Base exception for OAuth2 operations."""

    pass


class IdentityProviderError(OAuth2Error):
    """
    The identity provider answered with an error body.

    Attributes:
        error: Raw value of the ``error`` field from the response body
        status_code: HTTP status code of the response, if known
        response: The original response object
    """

    def __init__(self, error: Any, status_code: int | None = None, response: Any = None):
        super().__init__(str(error))
        self.error = error
        self.status_code = status_code
        self.response = response

    def __repr__(self) -> str:
        return f"IdentityProviderError(error={self.error!r}, status_code={self.status_code!r})"


class TokenAcquisitionError(OAuth2Error):
    """Token could not be built from the provider response."""

    pass


class InvalidConfigurationError(OAuth2Error):
    """OAuth2 provider configuration is invalid."""

    pass


__all__ = [
    "OAuth2Error",
    "IdentityProviderError",
    "TokenAcquisitionError",
    "InvalidConfigurationError",
]
