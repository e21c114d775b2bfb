"""Shared fixtures: in-memory registries loaded with realistic feeds."""

import pytest

from pricefeed_router.oracle import PriceFeedOracle, RateCompositor, RouteResolver
from pricefeed_router.registry import InMemoryPriceRegistry

# (base, quote, precision, value)
MARKET_FEEDS = [
    ("BTC", "USD", 6, 60_000_123456),
    ("ETH", "USD", 6, 3_000_000000),
    ("DAI", "USD", 6, 1_000100),
    ("USDT", "USD", 6, 999800),
    ("ETH", "BTC", 9, 50_000000),
    ("VSQ", "EUR", 6, 12_345678),
]


@pytest.fixture
def registry():
    """Empty in-memory registry."""
    return InMemoryPriceRegistry()


@pytest.fixture
def market_registry():
    """Registry with a handful of USD-quoted feeds plus one 9-decimal feed."""
    return InMemoryPriceRegistry.from_feeds(MARKET_FEEDS)


@pytest.fixture
def resolver(market_registry):
    return RouteResolver(market_registry, ["USD"])


@pytest.fixture
def compositor(market_registry):
    return RateCompositor(market_registry)


@pytest.fixture
def oracle(market_registry):
    return PriceFeedOracle(market_registry, ["USD"])
