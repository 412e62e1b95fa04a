"""HTTP transport for the Vestaboard Platform API."""

import logging
from typing import Any, Dict, Optional

import requests

from .constants import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from .errors import TransportError


class PlatformTransport:
    """Sends single JSON requests to the Platform API.

    Each call is one request/response cycle. Any failure along the way
    (connection, DNS, timeout, non-success status, undecodable body) is
    raised as a TransportError carrying the original exception.
    """

    def __init__(self, base_url: str = DEFAULT_BASE_URL, timeout: float = DEFAULT_TIMEOUT):
        """Initialize the transport.

        Args:
            base_url: Platform API root URL
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.logger = logging.getLogger(__name__)

    def url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def get(self, path: str, headers: Dict[str, str]) -> Any:
        """Issue a GET request and return the decoded JSON body.

        Raises:
            TransportError: On any request or decoding failure
        """
        url = self.url(path)
        self.logger.debug(f"GET {url}")
        try:
            response = requests.get(url, headers=headers, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except (requests.RequestException, ValueError) as e:
            raise self._handle_request_error("GET", url, e) from e

    def post(self, path: str, headers: Dict[str, str], body: Dict[str, Any]) -> Any:
        """Issue a POST request with a JSON body and return the decoded JSON body.

        Raises:
            TransportError: On any request or decoding failure
        """
        url = self.url(path)
        self.logger.debug(f"POST {url}")
        try:
            response = requests.post(
                url,
                headers={**headers, "Content-Type": "application/json"},
                json=body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            return response.json()
        except (requests.RequestException, ValueError) as e:
            raise self._handle_request_error("POST", url, e) from e

    def _handle_request_error(self, method: str, url: str, error: Exception) -> TransportError:
        """Log a request failure and wrap it.

        Args:
            method: HTTP method
            url: Request URL
            error: The exception that occurred

        Returns:
            TransportError wrapping the error
        """
        self.logger.error(f"Error on {method} {url}: {error}")

        status_code: Optional[int] = None
        response = getattr(error, "response", None)
        if response is not None:
            status_code = response.status_code
            if status_code == 429:
                self.logger.warning("Hit Vestaboard rate limit (429)")
            try:
                error_detail = response.json()
                self.logger.error(f"API Error Details: {error_detail}")
            except (ValueError, AttributeError):
                self.logger.error(f"HTTP Status: {status_code}")

        return TransportError(
            "Failed to interact with the Vestaboard API. Re-check the API key pair, "
            "host network connectivity, or host DNS configuration",
            cause=error,
            status_code=status_code,
        )
