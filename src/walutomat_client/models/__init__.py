"""
Data models for Walutomat client.

This package contains all data structures used throughout the client,
as immutable dataclasses decoded from API responses.
"""

from .config import ConnectionConfig
from .envelope import ResultEnvelope, ErrorDetail, KeyValue
from .account import AccountId, AccountBalance, Balance
from .market import Orderbook, OrderbookEntry, BestOffers, BestOffer, DirectFxRate
from .orders import (
    MarketOrderRequest,
    MarketFxOrderRequest,
    DirectFxExchangeRequest,
    Order,
    OrderSubmission,
    DirectFxExchange,
)

__all__ = [
    # Configuration
    "ConnectionConfig",
    # Envelope
    "ResultEnvelope",
    "ErrorDetail",
    "KeyValue",
    # Account
    "AccountId",
    "AccountBalance",
    "Balance",
    # Market
    "Orderbook",
    "OrderbookEntry",
    "BestOffers",
    "BestOffer",
    "DirectFxRate",
    # Orders
    "MarketOrderRequest",
    "MarketFxOrderRequest",
    "DirectFxExchangeRequest",
    "Order",
    "OrderSubmission",
    "DirectFxExchange",
]
