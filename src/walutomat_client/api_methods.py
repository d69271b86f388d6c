"""
API method implementations for Walutomat client.

Contains the endpoint implementations for both API generations. Each method
builds the request, sends it through HttpClient and decodes the reply into
a model.
"""

import logging
from typing import Any, Callable, List, Optional, TypeVar
from urllib.parse import quote

from aiohttp import ClientSession

from . import constants
from .http_client import DecodeError, HttpClient
from .models.account import AccountId, AccountBalance, Balance
from .models.envelope import ResultEnvelope
from .models.market import Orderbook, BestOffers, DirectFxRate
from .models.orders import (
    DirectFxExchange,
    DirectFxExchangeRequest,
    MarketFxOrderRequest,
    MarketOrderRequest,
    Order,
    OrderSubmission,
)
from .utils import validate_pair

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _path_segment(value: str) -> str:
    return quote(str(value), safe="")


def _list_of(parser: Callable[[Any], T]) -> Callable[[Any], List[T]]:
    def parse(data: Any) -> List[T]:
        if not isinstance(data, list):
            raise TypeError(f"Expected a list, got {type(data).__name__}")
        return [parser(item) for item in data]
    return parse


def is_order_rejection(status: int, data: Any) -> bool:
    """v1 order validation reply: a 4xx object carrying errors, message or duplicate."""
    return (
        400 <= status < 500
        and isinstance(data, dict)
        and any(key in data for key in ("errors", "message", "duplicate"))
    )


def is_envelope(status: int, data: Any) -> bool:
    """v2 rejection: any object with a success flag, whatever the status."""
    return isinstance(data, dict) and "success" in data


def _check_pair(pair: str) -> None:
    if not validate_pair(pair):
        raise ValueError(f"Invalid currency pair format: {pair!r}")


def decode(parser: Callable[[Any], T], data: Any, endpoint: str) -> T:
    """Run a model parser, tagging shape mismatches as DecodeError."""
    try:
        return parser(data)
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise DecodeError(
            f"Unexpected response shape from {endpoint}: {e!r}",
            response_data=data,
        ) from e


class V1APIMethods:
    """v1 endpoints. Private calls are signed with key, nonce and HMAC."""

    def __init__(self, http_client: HttpClient):
        """Initialize API methods with HTTP client."""
        self._http_client = http_client

    async def get_account_id(self, session: ClientSession) -> AccountId:
        """Get the account identifier."""
        response = await self._http_client.request(session, "GET", constants.V1_ACCOUNT_ID)
        return decode(AccountId.from_json, response, constants.V1_ACCOUNT_ID)

    async def get_account_balance(self, session: ClientSession) -> List[AccountBalance]:
        """Get balances of all currencies."""
        response = await self._http_client.request(session, "GET", constants.V1_ACCOUNT_BALANCES)
        return decode(_list_of(AccountBalance.from_json), response, constants.V1_ACCOUNT_BALANCES)

    async def get_orderbook(self, session: ClientSession, pair: str) -> Orderbook:
        """Get the public order book for a pair, e.g. "EUR_PLN"."""
        _check_pair(pair)
        path = constants.V1_ORDERBOOK.format(pair=_path_segment(pair))
        response = await self._http_client.request(
            session, "GET", path, authenticated=False
        )
        return decode(Orderbook.from_json, response, path)

    async def get_market_order(self, session: ClientSession, order_id: str) -> Order:
        """Get a single order by id."""
        path = constants.V1_MARKET_ORDER.format(order_id=_path_segment(order_id))
        response = await self._http_client.request(session, "GET", path)

        # The endpoint may answer with a one-element list
        if isinstance(response, list):
            if len(response) != 1:
                raise DecodeError(
                    f"Expected exactly one order from {path}, got {len(response)}",
                    response_data=response,
                )
            response = response[0]

        return decode(Order.from_json, response, path)

    async def get_market_orders(self, session: ClientSession) -> List[Order]:
        """Get all active orders."""
        response = await self._http_client.request(session, "GET", constants.V1_MARKET_ORDERS)
        return decode(_list_of(Order.from_json), response, constants.V1_MARKET_ORDERS)

    async def new_market_order(
        self, session: ClientSession, order: MarketOrderRequest
    ) -> OrderSubmission:
        """
        Place a limit order.

        Order parameters travel in the query string and are covered by the
        signature. Validation errors come back as an OrderSubmission with
        `errors`/`message` set rather than as an exception.
        """
        _check_pair(order.pair)
        response = await self._http_client.request(
            session,
            "POST",
            constants.V1_MARKET_ORDERS,
            params=order.to_params(),
            accept_error_body=is_order_rejection,
        )
        submission = decode(OrderSubmission.from_json, response, constants.V1_MARKET_ORDERS)
        if submission.duplicate:
            logger.info(f"Order with submit id {order.submit_id} was already submitted")
        return submission

    async def close_market_order(self, session: ClientSession, order_id: str) -> Order:
        """Withdraw an order by id."""
        path = constants.V1_MARKET_ORDER_CLOSE.format(order_id=_path_segment(order_id))
        response = await self._http_client.request(session, "POST", path)
        return decode(Order.from_json, response, path)


class V2APIMethods:
    """v2 endpoints. Every reply is a ResultEnvelope."""

    def __init__(self, http_client: HttpClient):
        """Initialize API methods with HTTP client."""
        self._http_client = http_client

    async def _envelope(
        self,
        session: ClientSession,
        method: str,
        path: str,
        parse_result: Callable[[Any], T],
        **kwargs,
    ) -> ResultEnvelope[T]:
        # success=false replies may arrive with an error status
        response = await self._http_client.request(
            session, method, path, accept_error_body=is_envelope, **kwargs
        )
        envelope = decode(
            lambda data: ResultEnvelope.from_json(data, parse_result), response, path
        )
        if not envelope.success:
            logger.debug(f"{method} {path} rejected: {envelope.error_messages()}")
        return envelope

    async def account_balance(self, session: ClientSession) -> ResultEnvelope[List[Balance]]:
        """Get balances per currency."""
        return await self._envelope(
            session, "GET", constants.V2_ACCOUNT_BALANCES, _list_of(Balance.from_json)
        )

    async def direct_fx_rate(self, session: ClientSession, pair: str) -> ResultEnvelope[DirectFxRate]:
        """Get the platform's current buy/sell rate for a pair."""
        _check_pair(pair)
        return await self._envelope(
            session,
            "GET",
            constants.V2_DIRECT_FX_RATES,
            DirectFxRate.from_json,
            params={"currency_pair": pair},
        )

    async def direct_fx_exchange(
        self, session: ClientSession, request: DirectFxExchangeRequest
    ) -> ResultEnvelope[DirectFxExchange]:
        """Exchange currency at the platform's rate."""
        _check_pair(request.currency_pair)
        return await self._envelope(
            session,
            "POST",
            constants.V2_DIRECT_FX_EXCHANGES,
            DirectFxExchange.from_json,
            data=request.to_form(),
        )

    async def market_fx_best_offers(self, session: ClientSession, pair: str) -> ResultEnvelope[BestOffers]:
        """Get best bids and asks for a pair. Public, no credentials needed."""
        _check_pair(pair)
        return await self._envelope(
            session,
            "GET",
            constants.V2_BEST_OFFERS,
            BestOffers.from_json,
            params={"currencyPair": pair},
            authenticated=False,
        )

    async def market_fx_orders(
        self, session: ClientSession, order_id: Optional[str] = None
    ) -> ResultEnvelope[List[Order]]:
        """Get active orders, or a single order when order_id is given."""
        return await self._envelope(
            session,
            "GET",
            constants.V2_MARKET_FX_ORDERS,
            _list_of(Order.from_json),
            params={"orderId": order_id},
        )

    async def market_fx_order(
        self, session: ClientSession, request: MarketFxOrderRequest
    ) -> ResultEnvelope[OrderSubmission]:
        """Place a limit order on the market."""
        _check_pair(request.currency_pair)
        return await self._envelope(
            session,
            "POST",
            constants.V2_MARKET_FX_ORDERS,
            OrderSubmission.from_json,
            data=request.to_form(),
        )

    async def market_fx_order_close(self, session: ClientSession, order_id: str) -> ResultEnvelope[Order]:
        """Withdraw an order by id."""
        return await self._envelope(
            session,
            "POST",
            constants.V2_MARKET_FX_ORDER_CLOSE,
            Order.from_json,
            data={"orderId": order_id},
        )
