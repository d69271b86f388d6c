"""
Session management for Walutomat client.

Handles connection lifecycle, session creation, and resource cleanup.
"""

import aiohttp
from typing import Optional

from .models.config import ConnectionConfig


class SessionManager:
    """Manages HTTP session lifecycle for Walutomat client."""

    def __init__(self, config: ConnectionConfig):
        """Initialize session manager with configuration."""
        self._config = config
        self._session: Optional[aiohttp.ClientSession] = None

    async def create_session(self) -> aiohttp.ClientSession:
        """Create the HTTP session, or return the open one."""
        if self._session is not None and not self._session.closed:
            return self._session

        headers = {
            "User-Agent": "walutomat-client/0.1",
            "Accept": "application/json",
        }

        session_kwargs = {"headers": headers}
        if self._config.timeout is not None:
            session_kwargs["timeout"] = aiohttp.ClientTimeout(total=self._config.timeout)

        self._session = aiohttp.ClientSession(**session_kwargs)
        return self._session

    async def close_session(self) -> None:
        """Close HTTP session and cleanup resources."""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    @property
    def session(self) -> Optional[aiohttp.ClientSession]:
        """Get current session without creating one."""
        return self._session
