# -*- coding: utf-8 -*-
"""
Tests for the line formatting of the polling example scripts.
"""

import importlib.util
from pathlib import Path

import pytest

from walutomat_client.models import BestOffer, BestOffers, Orderbook, OrderbookEntry, ResultEnvelope

EXAMPLES_DIR = Path(__file__).parent.parent / "examples"


def load_example(name):
    spec = importlib.util.spec_from_file_location(name, EXAMPLES_DIR / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def entry(price, base_volume="100.00"):
    return OrderbookEntry(price=price, base_volume=base_volume, market_volume="428.45")


@pytest.fixture
def orderbook():
    return Orderbook(
        pair="EUR_PLN",
        bids=[entry("4.2812", "1500.00"), entry("4.2810")],
        asks=[entry("4.2845", "250.00"), entry("4.2850")],
    )


@pytest.fixture
def one_sided_orderbook():
    return Orderbook(pair="CHF_GBP", bids=[entry("0.8512")], asks=[])


class TestV1Examples:
    """Test v1 price, spread and depth lines."""

    def test_prices(self, orderbook):
        assert load_example("v1_prices").format_prices(orderbook) == "4.2812/4.2845"

    def test_spread(self, orderbook):
        assert load_example("v1_spreads").format_spread(orderbook) == "0.0033"

    def test_depth(self, orderbook):
        assert load_example("v1_depths").format_depth(orderbook) == "250.00/1500.00"

    @pytest.mark.parametrize("name, formatter", [
        ("v1_prices", "format_prices"),
        ("v1_spreads", "format_spread"),
        ("v1_depths", "format_depth"),
    ])
    def test_empty_side_is_not_available(self, one_sided_orderbook, name, formatter):
        assert getattr(load_example(name), formatter)(one_sided_orderbook) == "n/a"


class TestV2Examples:
    """Test v2 spread lines."""

    def test_spread(self):
        offers = BestOffers(
            currency_pair="EURPLN",
            bids=[BestOffer(4.2812, "1500.00", "6421.80")],
            asks=[BestOffer(4.2845, "250.00", "1071.13")],
        )

        line = load_example("v2_spreads").format_spread(ResultEnvelope(success=True, result=offers))

        assert line == "0.0033"

    def test_empty_side_is_not_available(self):
        offers = BestOffers(currency_pair="EURPLN", bids=[], asks=[BestOffer(4.2845, "250.00", "1071.13")])

        line = load_example("v2_spreads").format_spread(ResultEnvelope(success=True, result=offers))

        assert line == "n/a"

    def test_failed_envelope_is_not_available(self):
        line = load_example("v2_spreads").format_spread(ResultEnvelope(success=False))

        assert line == "n/a"
