"""
Market-related models for Walutomat client.

Immutable data structures for order books and exchange rates.
"""

from dataclasses import dataclass
from typing import Any, Dict, List


def parse_price(value: Any) -> float:
    """Convert a string-typed price to float, rejecting non-numeric input."""
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise TypeError(f"Price must be a string or number, got {type(value).__name__}")
    return float(value)


@dataclass(frozen=True)
class OrderbookEntry:
    """v1 price level. All fields are decimal strings."""
    price: str
    base_volume: str
    market_volume: str

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "OrderbookEntry":
        return cls(
            price=data["price"],
            base_volume=data["baseVolume"],
            market_volume=data["marketVolume"],
        )


@dataclass(frozen=True)
class Orderbook:
    """v1 order book. Levels are kept in the order the server sent them."""
    pair: str
    bids: List[OrderbookEntry]
    asks: List[OrderbookEntry]

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Orderbook":
        return cls(
            pair=data["pair"],
            bids=[OrderbookEntry.from_json(entry) for entry in data["bids"]],
            asks=[OrderbookEntry.from_json(entry) for entry in data["asks"]],
        )


@dataclass(frozen=True)
class BestOffer:
    """v2 price level. The price is decoded to float."""
    price: float
    volume: str
    value_in_opposite_currency: str

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "BestOffer":
        return cls(
            price=parse_price(data["price"]),
            volume=data["volume"],
            value_in_opposite_currency=data["valueInOppositeCurrency"],
        )


@dataclass(frozen=True)
class BestOffers:
    """v2 best bid/ask levels for a pair (up to 10 per side)."""
    currency_pair: str
    bids: List[BestOffer]
    asks: List[BestOffer]

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "BestOffers":
        return cls(
            currency_pair=data["currencyPair"],
            bids=[BestOffer.from_json(entry) for entry in data["bids"]],
            asks=[BestOffer.from_json(entry) for entry in data["asks"]],
        )


@dataclass(frozen=True)
class DirectFxRate:
    """Quoted buy/sell rate for a pair at the time of the call."""
    ts: str
    currency_pair: str
    buy_rate: str
    sell_rate: str

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "DirectFxRate":
        return cls(
            ts=data["ts"],
            currency_pair=data["currencyPair"],
            buy_rate=data["buyRate"],
            sell_rate=data["sellRate"],
        )
