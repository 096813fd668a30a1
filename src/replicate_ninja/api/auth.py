"""Authentication handlers for the Replicate API."""

import re
from typing import Dict

from replicate_ninja.utils.exceptions import ConfigurationError

_TOKEN_PATTERN = re.compile(r"[\x21-\x7e]+")


class AuthHandler:
    """Base class for authentication handlers."""

    def validate(self) -> None:
        """Check that the credentials can be sent at all.

        Raises:
            ConfigurationError: If the credentials are missing or malformed
        """
        raise NotImplementedError

    def get_headers(self) -> Dict[str, str]:
        """Get authentication headers.

        Returns:
            Dictionary of headers to add to requests
        """
        raise NotImplementedError


class BearerTokenAuth(AuthHandler):
    """API token authentication using a Bearer token."""

    def __init__(self, api_token: str):
        """Initialize with API token.

        Args:
            api_token: The API token for authentication
        """
        self.api_token = api_token

    def validate(self) -> None:
        """Reject empty tokens and tokens that cannot go into a header.

        Raises:
            ConfigurationError: If the token is missing or malformed
        """
        if not self.api_token:
            raise ConfigurationError(
                "No API token provided. Set the REPLICATE_API_TOKEN environment "
                "variable (or put it in a .env file), or pass api_token explicitly. "
                "You can find your token on https://replicate.com/account"
            )
        if not _TOKEN_PATTERN.fullmatch(self.api_token):
            raise ConfigurationError(
                "API token is malformed: it must not contain whitespace or control characters"
            )

    def get_headers(self) -> Dict[str, str]:
        """Get headers with Bearer token.

        Returns:
            Headers with Authorization: Bearer <api_token>
        """
        self.validate()
        return {"Authorization": f"Bearer {self.api_token}"}

    def __repr__(self) -> str:
        return "BearerTokenAuth(api_token=***)"
