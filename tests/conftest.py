# -*- coding: utf-8 -*-
"""
Shared fixtures and utilities for testing Walutomat client.
"""

import json
from typing import Any, Dict, List
from unittest.mock import AsyncMock, MagicMock, Mock

import aiohttp
import pytest

from walutomat_client.client import WalutomatV1Client, WalutomatV2Client
from walutomat_client.models import ConnectionConfig

TEST_BASE_URL = "https://api.test.example"
TEST_API_KEY = "test-api-key"
TEST_API_SECRET = "766j0m0hcaz0ml8erklf0ww18"


def make_response(status: int = 200, body: Any = None) -> Mock:
    """Build a fake aiohttp response whose text() returns `body`."""
    if body is None:
        text = ""
    elif isinstance(body, str):
        text = body
    else:
        text = json.dumps(body)

    response = Mock()
    response.status = status
    response.text = AsyncMock(return_value=text)
    return response


def make_session(status: int = 200, body: Any = None, side_effect: Exception = None) -> Mock:
    """Build a fake ClientSession whose request() works as `async with`."""
    context = MagicMock()
    context.__aenter__.return_value = make_response(status, body)
    context.__aexit__.return_value = False

    session = Mock(spec=aiohttp.ClientSession)
    session.request = Mock(return_value=context, side_effect=side_effect)
    session.closed = False
    return session


def request_kwargs(session: Mock) -> Dict[str, Any]:
    """Keyword arguments of the single request sent through a fake session."""
    session.request.assert_called_once()
    kwargs = dict(session.request.call_args.kwargs)
    kwargs["url"] = str(kwargs["url"])
    return kwargs


# Configuration fixtures
@pytest.fixture
def v1_config() -> ConnectionConfig:
    return ConnectionConfig(
        api_key=TEST_API_KEY,
        api_secret=TEST_API_SECRET,
        base_url=TEST_BASE_URL,
    )


@pytest.fixture
def v2_config() -> ConnectionConfig:
    return ConnectionConfig(api_key=TEST_API_KEY, base_url=TEST_BASE_URL)


@pytest.fixture
def public_config() -> ConnectionConfig:
    """Configuration without any credentials."""
    return ConnectionConfig(base_url=TEST_BASE_URL)


@pytest.fixture
def v1_client(v1_config) -> WalutomatV1Client:
    return WalutomatV1Client(v1_config)


@pytest.fixture
def v2_client(v2_config) -> WalutomatV2Client:
    return WalutomatV2Client(v2_config)


# Mock data fixtures
@pytest.fixture
def order_data() -> Dict[str, Any]:
    return {
        "orderId": "5137bdb7-acde-41ff-aeb2-0908af0bd3d9",
        "submitId": "a1b2c3",
        "submitTs": "2018-02-01T10:56:22.188Z",
        "updateTs": "2018-02-01T10:56:22.188Z",
        "status": "ACTIVE",
        "market": "EURPLN",
        "buySell": "BUY",
        "volume": "100.00",
        "volumeCurrency": "EUR",
        "otherCurrency": "PLN",
        "price": "4.1234",
        "completion": "0",
        "soldAmount": "0.00",
        "boughtAmount": "0.00",
        "feeRate": "0.002",
        "feeAmountMax": "0.20",
    }


@pytest.fixture
def v1_orderbook_data() -> Dict[str, Any]:
    return {
        "pair": "EUR_PLN",
        "bids": [
            {"price": "4.2812", "baseVolume": "1500.00", "marketVolume": "6421.80"},
            {"price": "4.2810", "baseVolume": "200.00", "marketVolume": "856.20"},
        ],
        "asks": [
            {"price": "4.2845", "baseVolume": "320.00", "marketVolume": "1371.04"},
            {"price": "4.2850", "baseVolume": "1000.00", "marketVolume": "4285.00"},
        ],
    }


@pytest.fixture
def best_offers_data() -> Dict[str, Any]:
    return {
        "success": True,
        "result": {
            "currencyPair": "EURPLN",
            "bids": [
                {"price": "4.1234", "volume": "1000.00", "valueInOppositeCurrency": "4123.40"},
                {"price": "4.1200", "volume": "50.00", "valueInOppositeCurrency": "206.00"},
            ],
            "asks": [
                {"price": "4.1301", "volume": "700.00", "valueInOppositeCurrency": "2891.07"},
            ],
        },
        "errors": None,
    }


@pytest.fixture
def failed_envelope_data() -> Dict[str, Any]:
    return {
        "success": False,
        "result": None,
        "errors": [
            {
                "key": "INSUFFICIENT_FUNDS",
                "description": "Insufficient funds",
                "errorData": [
                    {"key": "currency", "value": "EUR"},
                    {"key": "missing", "value": "12.50"},
                ],
            }
        ],
    }


@pytest.fixture
def v2_balances_data() -> Dict[str, Any]:
    return {
        "success": True,
        "result": [
            {
                "currency": "EUR",
                "balanceTotal": "120.00",
                "balanceAvailable": "100.00",
                "balanceReserved": "20.00",
            },
            {
                "currency": "PLN",
                "balanceTotal": "0.00",
                "balanceAvailable": "0.00",
                "balanceReserved": "0.00",
            },
        ],
        "errors": None,
    }


@pytest.fixture
def v1_balances_data() -> List[Dict[str, Any]]:
    return [
        {
            "currency": "EUR",
            "balanceAll": "120.00",
            "balanceAvailable": "100.00",
            "balanceReserved": "20.00",
        }
    ]
