"""HTTP transport for the Replicate API."""

import logging
from typing import Any, Dict, Optional
from urllib.parse import urlsplit

import requests

from replicate_ninja.api.auth import AuthHandler, BearerTokenAuth
from replicate_ninja.api.config import Config
from replicate_ninja.utils.exceptions import (
    APIError,
    DeserializationError,
    TransportError,
    ValidationError,
)

logger = logging.getLogger(__name__)


class Transport:
    """Send one request to the Replicate API and decode the JSON answer.

    Every resource of a client shares one transport, so they also share
    its ``requests.Session`` and its immutable ``Config``.
    """

    def __init__(
        self,
        config: Config,
        auth_handler: Optional[AuthHandler] = None,
        session: Optional[requests.Session] = None
    ):
        """Initialize the transport.

        Args:
            config: Client configuration (base URL, token, timeout)
            auth_handler: Authentication handler (default: Bearer token from config)
            session: Optional pre-built session, mostly useful in tests
        """
        self.config = config
        self.auth_handler = auth_handler or BearerTokenAuth(config.api_token)
        self.session = session or requests.Session()

    def url_for(self, path: str) -> str:
        """Join ``path`` to the base URL.

        Absolute URLs (pagination links) are only accepted when they point at
        the same scheme and host as the base URL, so the token never leaves it.

        Raises:
            ValidationError: If an absolute URL points anywhere else
        """
        if path.startswith(("http://", "https://")):
            target = urlsplit(path)
            base = urlsplit(self.config.base_url)
            if (target.scheme, target.netloc.lower()) != (base.scheme, base.netloc.lower()):
                raise ValidationError(
                    f"Refusing to send credentials to {target.scheme}://{target.netloc}; "
                    f"pagination URLs must stay on {base.scheme}://{base.netloc}"
                )
            return path
        return self.config.base_url.rstrip('/') + '/' + path.lstrip('/')

    def _get_headers(self) -> Dict[str, str]:
        headers = {
            "User-Agent": self.config.user_agent,
            "Accept": "application/json",
        }
        headers.update(self.auth_handler.get_headers())
        return headers

    def request(
        self,
        method: str,
        path: str,
        json: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None
    ) -> Any:
        """Send a request and return the decoded JSON body.

        Args:
            method: HTTP verb
            path: Path below the base URL, or an absolute URL (pagination links)
            json: Optional JSON request body
            params: Optional query string parameters

        Returns:
            Decoded JSON body, or None for an empty body

        Raises:
            ConfigurationError: If the token is missing or malformed (nothing is sent)
            ValidationError: If an absolute URL points away from the base URL
            TransportError: If the request could not be completed
            APIError: If the API answered with a non-2xx status
            DeserializationError: If the body is not valid JSON
        """
        # Header construction validates the token, so this runs before any I/O.
        headers = self._get_headers()
        url = self.url_for(path)

        logger.debug("%s %s", method, url)
        try:
            response = self.session.request(
                method,
                url,
                json=json,
                params=params,
                headers=headers,
                timeout=self.config.timeout,
            )
        except requests.RequestException as e:
            raise TransportError(f"Failed to send {method} {url}: {e}") from e

        logger.debug("%s %s -> %s", method, url, response.status_code)

        if not 200 <= response.status_code < 300:
            raise APIError(response.status_code, response.text, _error_detail(response))

        if not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise DeserializationError(
                f"Failed to parse the API response of {method} {url}: {e}"
            ) from e

    def close(self) -> None:
        self.session.close()


def _error_detail(response: requests.Response) -> Optional[str]:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and body.get("detail") is not None:
        return str(body["detail"])
    return None
