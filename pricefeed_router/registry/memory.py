"""
In-memory price registry.

Keeps published prices in a dict keyed by pair identifier. Used by the test
suites and handy for trying routes offline.
"""

import logging
from typing import Dict, Iterable, Tuple

from .base import STATUS_OK, UNAVAILABLE, RawPrice
from .identifiers import pair_caption, pair_id

logger = logging.getLogger(__name__)


class InMemoryPriceRegistry:
    """Dict-backed implementation of the PriceRegistry protocol."""

    def __init__(self):
        self._prices: Dict[bytes, RawPrice] = {}
        self._captions: Dict[bytes, str] = {}

    @classmethod
    def from_feeds(cls, feeds: Iterable[Tuple[str, str, int, int]]) -> "InMemoryPriceRegistry":
        """
        Build a registry from (base, quote, precision, value) tuples.

        Args:
            feeds: Feeds to publish, all with a successful status

        Returns:
            Populated registry
        """
        registry = cls()
        for base, quote, precision, value in feeds:
            registry.publish(pair_caption(base, quote, precision), value)
        return registry

    def identifier_for(self, caption: str) -> bytes:
        return pair_id(caption)

    def is_supported(self, pair_id: bytes) -> bool:
        return pair_id in self._prices

    def price_for(self, pair_id: bytes) -> RawPrice:
        price = self._prices.get(pair_id)
        if price is None:
            return UNAVAILABLE
        return price

    def publish(self, caption: str, value: int, timestamp: int = 0, status: int = STATUS_OK) -> bytes:
        """
        Publish or overwrite the price for a caption.

        Returns:
            Identifier the price was stored under
        """
        identifier = self.identifier_for(caption)
        existing = self._captions.get(identifier)
        if existing is not None and existing != caption:
            # 4-byte identifiers can collide; refuse rather than shadow a feed
            raise ValueError(f"Identifier collision between {existing!r} and {caption!r}")
        self._captions[identifier] = caption
        self._prices[identifier] = RawPrice(value=value, timestamp=timestamp, status=status)
        logger.debug(f"Published {caption} = {value} (status {status})")
        return identifier

    def set_status(self, caption: str, status: int) -> None:
        """Change the status of an already published feed."""
        identifier = self.identifier_for(caption)
        if identifier not in self._prices:
            raise KeyError(caption)
        current = self._prices[identifier]
        self._prices[identifier] = RawPrice(value=current.value, timestamp=current.timestamp, status=status)

    def remove(self, caption: str) -> None:
        """Stop supporting a feed."""
        identifier = self.identifier_for(caption)
        self._prices.pop(identifier, None)
        self._captions.pop(identifier, None)

    def caption_of(self, pair_id: bytes) -> str:
        """Reverse lookup used in diagnostics; unknown identifiers render as hex."""
        return self._captions.get(pair_id, "0x" + pair_id.hex())

    def __len__(self) -> int:
        return len(self._prices)
