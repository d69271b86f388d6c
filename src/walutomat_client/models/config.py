"""
Configuration models for Walutomat client.

Immutable configuration structures.
"""

from dataclasses import dataclass
from typing import Optional

from ..constants import DEFAULT_BASE_URL
from ..utils import validate_url


@dataclass(frozen=True)
class ConnectionConfig:
    """Configuration for Walutomat client connection.

    An empty api_key is allowed so that public endpoints can be used
    without credentials. api_secret is only used by the v1 API.
    """
    api_key: str = ""
    api_secret: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    timeout: Optional[float] = None

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not validate_url(self.base_url):
            raise ValueError("Base URL must be a valid HTTP/HTTPS URL")
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError(f"Timeout must be positive, got {self.timeout}")

    @property
    def normalized_base_url(self) -> str:
        return self.base_url.rstrip("/")
