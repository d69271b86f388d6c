"""
Order-related models for Walutomat client.

Request bundles are consumed only to build a request; response records are
decoded from the API's JSON.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class MarketOrderRequest:
    """v1 limit order placed on the market."""
    submit_id: str  # caller-chosen idempotency key
    pair: str
    price: str
    buy_sell: str  # "BUY" or "SELL"
    volume: str
    volume_currency: str
    other_currency: str

    def to_params(self) -> Dict[str, str]:
        # Key order defines the signed query string
        return {
            "pair": self.pair,
            "price": self.price,
            "buySell": self.buy_sell,
            "volume": self.volume,
            "volumeCurrency": self.volume_currency,
            "otherCurrency": self.other_currency,
            "submitId": self.submit_id,
        }


@dataclass(frozen=True)
class MarketFxOrderRequest:
    """v2 limit order on the market_fx platform."""
    submit_id: str
    currency_pair: str
    buy_sell: str
    volume: str
    volume_currency: str
    limit_price: str
    dry_run: bool = False

    def to_form(self) -> Dict[str, Any]:
        return {
            "dryRun": self.dry_run,
            "submitId": self.submit_id,
            "currencyPair": self.currency_pair,
            "buySell": self.buy_sell,
            "volume": self.volume,
            "volumeCurrency": self.volume_currency,
            "limitPrice": self.limit_price,
        }


@dataclass(frozen=True)
class DirectFxExchangeRequest:
    """v2 currency exchange at the platform's current rate."""
    submit_id: str
    currency_pair: str
    buy_sell: str
    volume: str
    volume_currency: str
    ts: str  # timestamp of the rate the caller accepted
    dry_run: bool = False

    def to_form(self) -> Dict[str, Any]:
        return {
            "dryRun": self.dry_run,
            "submitId": self.submit_id,
            "currencyPair": self.currency_pair,
            "buySell": self.buy_sell,
            "volume": self.volume,
            "volumeCurrency": self.volume_currency,
            "ts": self.ts,
        }


@dataclass(frozen=True)
class Order:
    """Order record shared by v1 and v2."""
    order_id: str
    submit_id: str
    submit_ts: str
    update_ts: str
    status: str
    market: str
    buy_sell: str
    volume: str
    volume_currency: str
    other_currency: str
    price: str
    completion: str
    sold_amount: str
    bought_amount: str
    fee_rate: str
    fee_amount_max: str

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Order":
        return cls(
            order_id=data["orderId"],
            submit_id=data["submitId"],
            submit_ts=data["submitTs"],
            update_ts=data["updateTs"],
            status=data["status"],
            market=data["market"],
            buy_sell=data["buySell"],
            volume=data["volume"],
            volume_currency=data["volumeCurrency"],
            other_currency=data["otherCurrency"],
            price=data["price"],
            completion=data["completion"],
            sold_amount=data["soldAmount"],
            bought_amount=data["boughtAmount"],
            fee_rate=data["feeRate"],
            fee_amount_max=data["feeAmountMax"],
        )

    def __str__(self) -> str:
        return f"Order {self.order_id} {self.status} {self.market} {self.buy_sell}"


@dataclass(frozen=True)
class OrderSubmission:
    """
    Acknowledgment of an order placement.

    duplicate=True means the server already accepted an order with the same
    submit id; the client never deduplicates on its own.
    """
    duplicate: Optional[bool] = None
    order_id: Optional[str] = None
    message: Optional[str] = None
    errors: Optional[Dict[str, List[str]]] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "OrderSubmission":
        if not isinstance(data, dict):
            raise TypeError(f"Expected an object, got {type(data).__name__}")

        errors = data.get("errors")
        if errors is not None:
            errors = {field: list(messages) for field, messages in errors.items()}

        return cls(
            duplicate=data.get("duplicate"),
            order_id=data.get("orderId"),
            message=data.get("message"),
            errors=errors,
        )


@dataclass(frozen=True)
class DirectFxExchange:
    """Identifier of an executed direct exchange."""
    exchange_id: str

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "DirectFxExchange":
        return cls(exchange_id=data["exchangeId"])
