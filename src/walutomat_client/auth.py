"""
Authentication and signing utilities for Walutomat API
"""

from dataclasses import dataclass
from typing import Dict, Union
import hashlib
import hmac
import time

from .constants import API_KEY_HEADER, API_NONCE_HEADER, API_SIGNATURE_HEADER


@dataclass(frozen=True)
class ApiCredentials:
    """Container for API credentials"""
    api_key: str
    api_secret: str = ""


def sign(path_and_query: str, timestamp_millis: str, secret: Union[bytes, str]) -> str:
    """
    Compute the v1 request signature.

    The message is the request path (with its query string, exactly as sent)
    immediately followed by the millisecond timestamp.

    Args:
        path_and_query: Request path and query string, e.g. "/api/v1/market/orders?pair=EUR_PLN"
        timestamp_millis: Milliseconds since epoch as a decimal string
        secret: Shared API secret

    Returns:
        Lowercase hex-encoded HMAC-SHA256 digest (64 characters)
    """
    if isinstance(secret, str):
        secret = secret.encode("utf-8")

    return hmac.new(
        secret,
        (path_and_query + timestamp_millis).encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()


def current_millis() -> str:
    """Current wall-clock time in milliseconds since epoch, as a string."""
    return str(int(time.time() * 1000))


class WalutomatSigner:
    """
    Handles request signing for Walutomat v1 API authentication.

    Each call to get_auth_headers captures a new nonce; headers are never
    reused across requests.
    """

    def __init__(self, credentials: ApiCredentials):
        """
        Initialize the signer with API credentials.

        Args:
            credentials: API credentials containing key and secret
        """
        self.credentials = credentials

    def get_auth_headers(self, path_and_query: str) -> Dict[str, str]:
        """
        Get authentication headers for a single request.

        Args:
            path_and_query: Request path and query string that will be sent

        Returns:
            Dictionary containing key, nonce and signature headers
        """
        nonce = current_millis()
        return {
            API_KEY_HEADER: self.credentials.api_key,
            API_NONCE_HEADER: nonce,
            API_SIGNATURE_HEADER: sign(path_and_query, nonce, self.credentials.api_secret),
        }

    def validate_credentials(self) -> bool:
        """
        Validate that both API key and secret are present.

        Returns:
            True if credentials are valid, False otherwise
        """
        return bool(self.credentials.api_key and self.credentials.api_secret)


class ApiKeyAuth:
    """Key-only authentication used by the v2 API."""

    def __init__(self, credentials: ApiCredentials):
        self.credentials = credentials

    def get_auth_headers(self, path_and_query: str) -> Dict[str, str]:
        return {API_KEY_HEADER: self.credentials.api_key}

    def validate_credentials(self) -> bool:
        return bool(self.credentials.api_key)
