"""
Walutomat Client - Python client for the Walutomat currency exchange API.

Provides async clients for API v1 (HMAC-signed requests) and API v2
(key-authenticated requests with a uniform result envelope).
"""

from .auth import ApiCredentials, WalutomatSigner, sign
from .client import (
    WalutomatV1Client,
    WalutomatV2Client,
    create_v1_client,
    create_v2_client,
)
from .http_client import (
    ErrorKind,
    WalutomatError,
    TransportError,
    DecodeError,
    NotSupportedError,
)
from .models import (
    # Configuration
    ConnectionConfig,
    # Envelope
    ResultEnvelope,
    ErrorDetail,
    KeyValue,
    # Account
    AccountId,
    AccountBalance,
    Balance,
    # Market
    Orderbook,
    OrderbookEntry,
    BestOffers,
    BestOffer,
    DirectFxRate,
    # Orders
    MarketOrderRequest,
    MarketFxOrderRequest,
    DirectFxExchangeRequest,
    Order,
    OrderSubmission,
    DirectFxExchange,
)

__all__ = [
    # Main Clients
    "WalutomatV1Client",
    "WalutomatV2Client",
    "create_v1_client",
    "create_v2_client",
    # Signing
    "sign",
    "ApiCredentials",
    "WalutomatSigner",
    # Errors
    "ErrorKind",
    "WalutomatError",
    "TransportError",
    "DecodeError",
    "NotSupportedError",
    "ConnectionConfig",
    "ResultEnvelope",
    "ErrorDetail",
    "KeyValue",
    "AccountId",
    "AccountBalance",
    "Balance",
    "Orderbook",
    "OrderbookEntry",
    "BestOffers",
    "BestOffer",
    "DirectFxRate",
    "MarketOrderRequest",
    "MarketFxOrderRequest",
    "DirectFxExchangeRequest",
    "Order",
    "OrderSubmission",
    "DirectFxExchange",
]
