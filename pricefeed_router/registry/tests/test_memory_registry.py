"""Tests for the in-memory registry."""

import pytest

from pricefeed_router.registry import (
    STATUS_BAD_REQUEST,
    STATUS_NOT_FOUND,
    InMemoryPriceRegistry,
    RawPrice,
    pair_id,
)


class TestInMemoryPriceRegistry:

    def test_unknown_identifier(self, registry):
        identifier = pair_id("Price-XXX/YYY-6")

        assert registry.is_supported(identifier) is False
        price = registry.price_for(identifier)
        assert price.status == STATUS_NOT_FOUND
        assert not price.ok

    def test_publish(self, registry):
        identifier = registry.publish("Price-BTC/USD-6", 60_000_000000, timestamp=1_700_000_000)

        assert identifier == registry.identifier_for("Price-BTC/USD-6")
        assert registry.is_supported(identifier)
        assert registry.price_for(identifier) == RawPrice(60_000_000000, 1_700_000_000, 200)
        assert registry.price_for(identifier).ok

    def test_set_status_keeps_value(self, registry):
        identifier = registry.publish("Price-BTC/USD-6", 42)
        registry.set_status("Price-BTC/USD-6", STATUS_BAD_REQUEST)

        price = registry.price_for(identifier)
        assert price.value == 42
        assert price.status == STATUS_BAD_REQUEST
        # Still supported, just not available
        assert registry.is_supported(identifier)

    def test_set_status_unknown_caption(self, registry):
        with pytest.raises(KeyError):
            registry.set_status("Price-XXX/YYY-6", STATUS_BAD_REQUEST)

    def test_remove(self, registry):
        identifier = registry.publish("Price-BTC/USD-6", 42)
        registry.remove("Price-BTC/USD-6")

        assert not registry.is_supported(identifier)
        assert len(registry) == 0

    def test_from_feeds(self):
        registry = InMemoryPriceRegistry.from_feeds([("BTC", "USD", 6, 1), ("ETH", "USD", 9, 2)])

        assert len(registry) == 2
        assert registry.price_for(pair_id("Price-ETH/USD-9")).value == 2

    def test_caption_of(self, registry):
        identifier = registry.publish("Price-BTC/USD-6", 42)

        assert registry.caption_of(identifier) == "Price-BTC/USD-6"
        assert registry.caption_of(b"\x00\x00\x00\x01") == "0x00000001"
