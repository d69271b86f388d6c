"""
HTTP client for Walutomat API.

Handles request execution, authentication headers, and response processing.
Each call is exactly one round trip: failures are tagged and raised, never
retried.
"""

import asyncio
import json
import logging
from enum import Enum
from typing import Any, Callable, Dict, Optional, Union

import aiohttp
from aiohttp import ClientResponse, ClientSession
from yarl import URL

from .auth import ApiKeyAuth, WalutomatSigner
from .models.config import ConnectionConfig
from .utils import build_path, encode_params

logger = logging.getLogger(__name__)

Authenticator = Union[WalutomatSigner, ApiKeyAuth]

# Decides whether a non-2xx reply carries a payload the caller decodes itself
ErrorBodyFilter = Callable[[int, Any], bool]


class HttpClient:
    """HTTP client specialized for Walutomat API interactions."""

    def __init__(self, config: ConnectionConfig, auth: Optional[Authenticator] = None):
        """Initialize HTTP client with configuration and an optional authenticator."""
        self._config = config
        self._auth = auth

    @property
    def auth(self) -> Optional[Authenticator]:
        return self._auth

    async def request(
        self,
        session: ClientSession,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        data: Optional[Dict[str, Any]] = None,
        authenticated: bool = True,
        accept_error_body: Optional[ErrorBodyFilter] = None,
    ) -> Any:
        """
        Execute a single HTTP request and return the decoded JSON body.

        Args:
            session: aiohttp session to send the request with
            method: HTTP method
            path: Endpoint path, without query string
            params: Query parameters, serialized in insertion order
            data: Form fields for the request body
            authenticated: Attach authentication headers
            accept_error_body: Called with the status and decoded body of a
                non-2xx reply; when it returns True the body is returned so
                the caller can decode structured errors

        Raises:
            TransportError: On connection failures, timeouts and unaccepted
                non-2xx statuses
            DecodeError: If the body is not valid JSON
        """
        path_and_query = build_path(path, params)
        url = f"{self._config.normalized_base_url}{path_and_query}"

        request_headers = {}
        if authenticated:
            request_headers.update(self._authentication_headers(path_and_query))

        request_kwargs = {
            "method": method,
            # Already percent-encoded; sent exactly as signed
            "url": URL(url, encoded=True),
            "headers": request_headers,
        }

        # Request bodies are form-urlencoded, not JSON
        if data:
            request_headers["Content-Type"] = "application/x-www-form-urlencoded"
            request_kwargs["data"] = encode_params(data)

        logger.debug(f"{method} {path_and_query}")

        try:
            async with session.request(**request_kwargs) as response:
                return await self._process_response(response, accept_error_body)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(f"Request to {path} failed: {e!r}") from e

    def _authentication_headers(self, path_and_query: str) -> Dict[str, str]:
        if self._auth is None or not self._auth.validate_credentials():
            raise ValueError("API credentials are required for authenticated requests")
        return self._auth.get_auth_headers(path_and_query)

    async def _process_response(
        self, response: ClientResponse, accept_error_body: Optional[ErrorBodyFilter]
    ) -> Any:
        """Process HTTP response and return data."""
        response_text = await response.text()
        status = response.status

        try:
            response_data = json.loads(response_text) if response_text else None
        except json.JSONDecodeError as e:
            if status >= 400:
                raise TransportError(
                    f"HTTP {status}: {response_text[:200]}",
                    status_code=status,
                ) from e
            raise DecodeError(
                f"Invalid JSON response (Status {status}): {response_text[:200]}",
                status_code=status,
            ) from e

        if status >= 400:
            if accept_error_body is not None and accept_error_body(status, response_data):
                logger.debug(f"Accepted error body with status {status}")
                return response_data
            raise TransportError(
                f"HTTP {status}: {response_data}",
                status_code=status,
                response_data=response_data,
            )

        if response_data is None:
            raise DecodeError(f"Empty response body (Status {status})", status_code=status)

        return response_data


class ErrorKind(Enum):
    """Kind of failure at the client boundary."""
    TRANSPORT = "transport"
    DECODE = "decode"


class WalutomatError(Exception):
    """Base exception for Walutomat client errors."""

    kind: Optional[ErrorKind] = None

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_data: Any = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response_data = response_data


class TransportError(WalutomatError):
    """Network failure, timeout or unaccepted non-2xx status."""
    kind = ErrorKind.TRANSPORT


class DecodeError(WalutomatError):
    """Response body does not match the expected JSON shape."""
    kind = ErrorKind.DECODE


class NotSupportedError(WalutomatError):
    """Capability not implemented by this client."""
    pass
