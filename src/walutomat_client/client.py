"""
Walutomat Client - Main orchestration module.

This module provides the v1 and v2 clients that coordinate session
management and request execution:
- Data models are immutable structures in models/
- HTTP operations are handled by http_client.py
- Session management is handled by session_manager.py
- API methods are implemented in api_methods.py
"""

import logging
import os
from typing import Any, List, Optional

from dotenv import load_dotenv

from .api_methods import V1APIMethods, V2APIMethods
from .auth import ApiCredentials, ApiKeyAuth, WalutomatSigner
from .constants import (
    DEFAULT_BASE_URL, ENV_API_KEY, ENV_API_SECRET, ENV_BASE_URL,
)
from .http_client import HttpClient, NotSupportedError
from .models import (
    AccountBalance, AccountId, Balance, BestOffers, ConnectionConfig,
    DirectFxExchange, DirectFxExchangeRequest, DirectFxRate,
    MarketFxOrderRequest, MarketOrderRequest, Order, Orderbook,
    OrderSubmission, ResultEnvelope,
)
from .session_manager import SessionManager

load_dotenv()
logger = logging.getLogger(__name__)


class _BaseClient:
    """Session lifecycle and request execution shared by both API generations."""

    def __init__(self, config: ConnectionConfig, http_client: HttpClient):
        self._config = config
        self._session_manager = SessionManager(config)
        self._http_client = http_client
        self._closed = False

    @property
    def config(self) -> ConnectionConfig:
        return self._config

    async def close(self) -> None:
        """Close the client and release the HTTP session."""
        if self._closed:
            return
        await self._session_manager.close_session()
        self._closed = True
        logger.info(f"{type(self).__name__} closed")

    async def _execute(self, api_method, *args, **kwargs):
        """Run an API method on the shared session."""
        if self._closed:
            raise RuntimeError("Client is closed")

        session = await self._session_manager.create_session()
        return await api_method(session, *args, **kwargs)

    # Context manager support
    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    def __del__(self):
        """Warn about leaked sessions."""
        session_manager = getattr(self, "_session_manager", None)
        if session_manager is None or getattr(self, "_closed", True):
            return
        if session_manager.session is not None and not session_manager.session.closed:
            logger.warning(f"{type(self).__name__} not properly closed - call close() explicitly")


class WalutomatV1Client(_BaseClient):
    """
    Client for the Walutomat v1 API.

    Private calls carry X-API-KEY, X-API-NONCE and X-API-SIGNATURE headers;
    the order book is public and works without credentials.
    """

    def __init__(self, config: ConnectionConfig):
        """Initialize v1 client with configuration."""
        credentials = ApiCredentials(config.api_key, config.api_secret or "")
        super().__init__(config, HttpClient(config, WalutomatSigner(credentials)))
        self._api_methods = V1APIMethods(self._http_client)

    @classmethod
    def from_env(cls) -> "WalutomatV1Client":
        """Create client from WT_KEY, WT_SECRET and WT_BASE_URL."""
        config = ConnectionConfig(
            api_key=os.getenv(ENV_API_KEY, ""),
            api_secret=os.getenv(ENV_API_SECRET, ""),
            base_url=os.getenv(ENV_BASE_URL, DEFAULT_BASE_URL),
        )
        return cls(config)

    # Account methods
    async def get_account_id(self) -> AccountId:
        """Get account id."""
        return await self._execute(self._api_methods.get_account_id)

    async def get_account_balance(self) -> List[AccountBalance]:
        """Get balances of all currencies."""
        return await self._execute(self._api_methods.get_account_balance)

    # Market methods
    async def get_orderbook(self, pair: str) -> Orderbook:
        """Get the order book for a pair such as "EUR_PLN"."""
        return await self._execute(self._api_methods.get_orderbook, pair)

    # Order methods
    async def get_market_order(self, order_id: str) -> Order:
        """Get a single order."""
        return await self._execute(self._api_methods.get_market_order, order_id)

    async def get_market_orders(self) -> List[Order]:
        """Get active orders."""
        return await self._execute(self._api_methods.get_market_orders)

    async def new_market_order(self, order: MarketOrderRequest) -> OrderSubmission:
        """Place an order. Reusing a submit id yields duplicate=True."""
        return await self._execute(self._api_methods.new_market_order, order)

    async def close_market_order(self, order_id: str) -> Order:
        """Withdraw an order."""
        return await self._execute(self._api_methods.close_market_order, order_id)


class WalutomatV2Client(_BaseClient):
    """
    Client for the Walutomat v2 API.

    Authenticates with the API key alone. Every method returns a
    ResultEnvelope; check `success` before reading `result`.
    """

    def __init__(self, config: ConnectionConfig):
        """Initialize v2 client with configuration."""
        credentials = ApiCredentials(config.api_key)
        super().__init__(config, HttpClient(config, ApiKeyAuth(credentials)))
        self._api_methods = V2APIMethods(self._http_client)

    @classmethod
    def from_env(cls) -> "WalutomatV2Client":
        """Create client from WT_KEY and WT_BASE_URL."""
        config = ConnectionConfig(
            api_key=os.getenv(ENV_API_KEY, ""),
            base_url=os.getenv(ENV_BASE_URL, DEFAULT_BASE_URL),
        )
        return cls(config)

    async def account_balance(self) -> ResultEnvelope[List[Balance]]:
        """Get balances per currency."""
        return await self._execute(self._api_methods.account_balance)

    async def direct_fx_rate(self, pair: str) -> ResultEnvelope[DirectFxRate]:
        """Get the direct exchange rate for a pair such as "EURPLN"."""
        return await self._execute(self._api_methods.direct_fx_rate, pair)

    async def direct_fx_exchange(
        self, request: DirectFxExchangeRequest
    ) -> ResultEnvelope[DirectFxExchange]:
        """Exchange currency at the platform's rate."""
        return await self._execute(self._api_methods.direct_fx_exchange, request)

    async def market_fx_best_offers(self, pair: str) -> ResultEnvelope[BestOffers]:
        """Get best offers for a pair. Works without credentials."""
        return await self._execute(self._api_methods.market_fx_best_offers, pair)

    async def market_fx_orders(self, order_id: Optional[str] = None) -> ResultEnvelope[List[Order]]:
        """Get active orders, optionally a single one."""
        return await self._execute(self._api_methods.market_fx_orders, order_id)

    async def market_fx_order(self, request: MarketFxOrderRequest) -> ResultEnvelope[OrderSubmission]:
        """Place a limit order."""
        return await self._execute(self._api_methods.market_fx_order, request)

    async def market_fx_order_close(self, order_id: str) -> ResultEnvelope[Order]:
        """Withdraw an order."""
        return await self._execute(self._api_methods.market_fx_order_close, order_id)

    async def payout(self, request: Any) -> ResultEnvelope[Any]:
        """Payouts are not supported yet."""
        raise NotSupportedError("payout is not supported by this client")


def create_v1_client(
    api_key: str = "",
    api_secret: str = "",
    base_url: str = DEFAULT_BASE_URL,
    timeout: Optional[float] = None,
) -> WalutomatV1Client:
    """
    Factory function to create a v1 client.

    Args:
        api_key: API key, may be empty for public endpoints
        api_secret: Shared secret used to sign private requests
        base_url: Base URL for API endpoints
        timeout: Total request timeout in seconds, None for the aiohttp default

    Returns:
        Configured WalutomatV1Client instance
    """
    config = ConnectionConfig(
        api_key=api_key,
        api_secret=api_secret,
        base_url=base_url,
        timeout=timeout,
    )
    return WalutomatV1Client(config)


def create_v2_client(
    api_key: str = "",
    base_url: str = DEFAULT_BASE_URL,
    timeout: Optional[float] = None,
) -> WalutomatV2Client:
    """Factory function to create a v2 client."""
    config = ConnectionConfig(api_key=api_key, base_url=base_url, timeout=timeout)
    return WalutomatV2Client(config)
